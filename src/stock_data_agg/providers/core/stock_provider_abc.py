"""Abstract base class for stock-data providers."""
from abc import ABC, abstractmethod

from stock_data_agg.schemas import (CompanyOverview, GlobalQuote, StockSummary,
                                    TimeSeriesMonthly)


class StockDataProviderABC(ABC):
    """Base interface for all upstream stock-data providers.

    Each provider pairs its own fetch orchestration with its own normalization
    so that callers only ever see canonical models. Swapping the provider must
    not change what the service layer or the HTTP surface return.
    """

    name: str = "provider"

    @abstractmethod
    async def get_quote(self, symbol: str) -> GlobalQuote:
        """Fetch the latest quote for a symbol.

        Args:
            symbol: Stock ticker (e.g. "AAPL").

        Returns:
            A GlobalQuote whose change_percent carries exactly one trailing '%'.
        """

    @abstractmethod
    async def get_company_overview(self, symbol: str) -> CompanyOverview:
        """Fetch descriptive fields and financial ratios for a symbol.

        Returns:
            A fully populated CompanyOverview; unavailable metrics hold sentinels.
        """

    @abstractmethod
    async def get_monthly_time_series(self, symbol: str) -> TimeSeriesMonthly:
        """Fetch monthly OHLCV history keyed by date."""

    @abstractmethod
    async def get_summary(self, symbol: str) -> StockSummary:
        """Compose quote, company data and recent monthly closes into one summary."""

    async def close(self) -> None:
        """Clean up resources (connections, clients).

        Override in subclasses if cleanup is needed.
        """

    async def __aenter__(self) -> "StockDataProviderABC":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        """Async context manager exit - calls close()."""
        await self.close()
