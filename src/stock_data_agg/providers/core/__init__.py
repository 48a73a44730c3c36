"""Core provider abstractions."""
from stock_data_agg.providers.core.error_mapper import ProviderErrorMapper
from stock_data_agg.providers.core.exceptions import (MissingFieldError,
                                                      ProviderError,
                                                      RateLimitedError,
                                                      TransportError,
                                                      UpstreamDataError)
from stock_data_agg.providers.core.http_client import JsonApiClient
from stock_data_agg.providers.core.stock_provider_abc import \
    StockDataProviderABC

__all__ = [
    "JsonApiClient",
    "MissingFieldError",
    "ProviderError",
    "ProviderErrorMapper",
    "RateLimitedError",
    "StockDataProviderABC",
    "TransportError",
    "UpstreamDataError",
]
