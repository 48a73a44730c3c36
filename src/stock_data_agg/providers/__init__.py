"""Upstream stock-data providers.

Every provider implements StockDataProviderABC and returns canonical models
(GlobalQuote, CompanyOverview, TimeSeriesMonthly, StockSummary):

- TwelveDataProvider: Twelve Data REST API (default)
- AlphaVantageProvider: Alpha Vantage `/query` API (legacy)

Example:
    async with TwelveDataProvider() as provider:
        quote = await provider.get_quote("AAPL")
        print(f"{quote.symbol}: {quote.price} ({quote.change_percent})")
"""
from stock_data_agg.providers.alphavantage import AlphaVantageProvider
from stock_data_agg.providers.core import (ProviderErrorMapper,
                                           StockDataProviderABC)
from stock_data_agg.providers.twelvedata import TwelveDataProvider

__all__ = [
    "AlphaVantageProvider",
    "ProviderErrorMapper",
    "StockDataProviderABC",
    "TwelveDataProvider",
]
