"""Alpha Vantage stock provider."""
from stock_data_agg.providers.alphavantage.provider import AlphaVantageProvider

__all__ = ["AlphaVantageProvider"]
