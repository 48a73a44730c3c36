"""Stock data service with dependency injection.

StockService wraps any StockDataProviderABC with error mapping and symbol
normalization. The provider decides which upstream calls to make; this layer
only maps failures to HTTP.
"""
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from stock_data_agg.providers.core import (ProviderError, ProviderErrorMapper,
                                           StockDataProviderABC)
from stock_data_agg.providers.core.utils import normalize_stock_symbol
from stock_data_agg.schemas import (CompanyOverview, GlobalQuote, StockSummary,
                                    TimeSeriesMonthly)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StockService:
    """Unified service over a stock-data provider; maps provider errors to HTTP."""

    def __init__(
        self,
        provider: StockDataProviderABC,
        error_mapper: ProviderErrorMapper,
        *,
        symbol_normalizer: Callable[[str], str] = normalize_stock_symbol,
    ) -> None:
        """Initialize with provider and error mapping config.

        Args:
            provider: The upstream provider (e.g. TwelveDataProvider, AlphaVantageProvider).
            error_mapper: Maps provider exceptions to HTTP (resource_name, api_name).
            symbol_normalizer: Normalizer applied to incoming symbols.
        """
        self._provider = provider
        self._error_mapper = error_mapper
        self._normalize = symbol_normalizer

    async def _call(
        self, symbol: str, fetch: Callable[[str], Awaitable[T]]
    ) -> T:
        norm = self._normalize(symbol)
        try:
            return await fetch(norm)
        except ProviderError as e:
            logger.warning(
                "%s %s for %s failed: %s",
                self._provider.name, e.operation, norm, e,
            )
            self._error_mapper.raise_http(e, symbol=norm)

    async def get_quote(self, symbol: str) -> GlobalQuote:
        """Get the latest quote. Raises HTTPException on provider errors."""
        return await self._call(symbol, self._provider.get_quote)

    async def get_company_overview(self, symbol: str) -> CompanyOverview:
        """Get the company overview. Raises HTTPException on provider errors."""
        return await self._call(symbol, self._provider.get_company_overview)

    async def get_monthly_time_series(self, symbol: str) -> TimeSeriesMonthly:
        """Get the monthly series. Raises HTTPException on provider errors."""
        return await self._call(symbol, self._provider.get_monthly_time_series)

    async def get_summary(self, symbol: str) -> StockSummary:
        """Get the one-year summary. Raises HTTPException on provider errors."""
        return await self._call(symbol, self._provider.get_summary)
