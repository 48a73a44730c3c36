"""Factory for creating the configured stock provider and its StockService."""
import os

from stock_data_agg.providers import (AlphaVantageProvider,
                                      StockDataProviderABC, TwelveDataProvider)
from stock_data_agg.providers.core import ProviderErrorMapper
from stock_data_agg.services.stock_service import StockService

PROVIDERS: dict[str, type[StockDataProviderABC]] = {
    TwelveDataProvider.name: TwelveDataProvider,
    AlphaVantageProvider.name: AlphaVantageProvider,
}

API_NAMES = {
    TwelveDataProvider.name: "Twelve Data",
    AlphaVantageProvider.name: "Alpha Vantage",
}


def create_stock_provider(name: str | None = None) -> StockDataProviderABC:
    """Instantiate a provider by name. Defaults to STOCK_DATA_PROVIDER env var.

    Raises:
        ValueError: Unknown provider name.
    """
    key = (name or os.getenv("STOCK_DATA_PROVIDER", TwelveDataProvider.name)).strip().lower()
    if key not in PROVIDERS:
        raise ValueError(
            f"Unknown stock data provider: {key}. Available: {', '.join(PROVIDERS)}"
        )
    return PROVIDERS[key]()


def create_stock_service(provider: StockDataProviderABC) -> StockService:
    """Create a StockService with error mapping labelled for the provider.

    Args:
        provider: The provider instance (e.g. from create_stock_provider()).

    Returns:
        A configured StockService instance.
    """
    error_mapper = ProviderErrorMapper(
        resource_name="Stock", api_name=API_NAMES.get(provider.name, "Stocks API")
    )
    return StockService(provider, error_mapper)
