"""Twelve Data stock provider."""
from stock_data_agg.providers.twelvedata.provider import TwelveDataProvider

__all__ = ["TwelveDataProvider"]
