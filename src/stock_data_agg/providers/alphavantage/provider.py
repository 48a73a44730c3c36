"""Alpha Vantage market data provider for stocks (legacy upstream)."""
import os
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from stock_data_agg.providers.alphavantage.mapper import (
    monthly_series_from_alphavantage, overview_from_alphavantage,
    quote_from_alphavantage, summary_from_alphavantage)
from stock_data_agg.providers.alphavantage.models import (
    AlphaVantageGlobalQuoteResponse, AlphaVantageMonthlySeries,
    AlphaVantageOverview)
from stock_data_agg.providers.core import (JsonApiClient, StockDataProviderABC,
                                           TransportError)
from stock_data_agg.providers.core.composition import (SUMMARY_FATAL_ERRORS,
                                                       gather_branches)
from stock_data_agg.providers.core.utils import normalize_stock_symbol
from stock_data_agg.providers.core.validation import check_embedded_signals
from stock_data_agg.schemas import (CompanyOverview, GlobalQuote, StockSummary,
                                    TimeSeriesMonthly)

ModelT = TypeVar("ModelT", bound=BaseModel)


class AlphaVantageProvider(StockDataProviderABC):
    """Stock data provider backed by the Alpha Vantage `/query` endpoint.

    Every call is a GET with a `function` parameter. Rate limiting and errors
    arrive as 200 responses carrying "Information"/"Note" or "Error Message";
    the shared payload validator turns them into typed errors.
    """

    BASE_URL = "https://www.alphavantage.co"
    name = "alphavantage"

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the Alpha Vantage provider.

        Args:
            api_key: Alpha Vantage API key. Defaults to ALPHAVANTAGE_API_KEY env var.
            base_url: API root. Defaults to ALPHAVANTAGE_BASE_URL env var or the public URL.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (used by tests).
        """
        self._client = JsonApiClient(
            base_url or os.getenv("ALPHAVANTAGE_BASE_URL", self.BASE_URL),
            api_key or os.getenv("ALPHAVANTAGE_API_KEY", "demo"),
            validator=check_embedded_signals,
            timeout=timeout,
            transport=transport,
        )

    async def _query(
        self, function: str, model: type[ModelT], operation: str, symbol: str
    ) -> ModelT:
        """GET /query?function=...&symbol=... and validate the body into model."""
        payload = await self._client.get_json(
            "/query",
            operation=operation,
            symbol=symbol,
            params={"function": function, "symbol": symbol},
        )
        try:
            return model.model_validate(payload or {})
        except ValidationError as e:
            raise TransportError(
                operation, symbol, f"Unexpected {operation} response shape for '{symbol}'"
            ) from e

    def _global_quote(self, symbol: str):
        return self._query("GLOBAL_QUOTE", AlphaVantageGlobalQuoteResponse, "quote", symbol)

    def _overview(self, symbol: str):
        return self._query("OVERVIEW", AlphaVantageOverview, "company overview", symbol)

    def _monthly(self, symbol: str):
        return self._query(
            "TIME_SERIES_MONTHLY", AlphaVantageMonthlySeries, "monthly time series", symbol
        )

    async def get_quote(self, symbol: str) -> GlobalQuote:
        """Fetch the current quote for a stock symbol."""
        sym = normalize_stock_symbol(symbol)
        return quote_from_alphavantage(await self._global_quote(sym), sym)

    async def get_company_overview(self, symbol: str) -> CompanyOverview:
        """Fetch the company overview; one call carries every field."""
        sym = normalize_stock_symbol(symbol)
        return overview_from_alphavantage(await self._overview(sym), sym)

    async def get_monthly_time_series(self, symbol: str) -> TimeSeriesMonthly:
        """Fetch the full monthly series for a stock symbol."""
        sym = normalize_stock_symbol(symbol)
        return monthly_series_from_alphavantage(await self._monthly(sym), sym)

    async def get_summary(self, symbol: str) -> StockSummary:
        """Fetch quote, overview and monthly series concurrently."""
        sym = normalize_stock_symbol(symbol)
        branches = await gather_branches(
            "summary",
            sym,
            {
                "quote": self._global_quote(sym),
                "overview": self._overview(sym),
                "series": self._monthly(sym),
            },
            fatal=SUMMARY_FATAL_ERRORS,
        )
        return summary_from_alphavantage(
            branches["quote"], branches["overview"], branches["series"], sym
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()
