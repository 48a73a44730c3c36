"""Twelve Data market data provider for stocks."""
import os
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from stock_data_agg.providers.core import (JsonApiClient, RateLimitedError,
                                           StockDataProviderABC,
                                           TransportError, UpstreamDataError)
from stock_data_agg.providers.core.composition import (SUMMARY_FATAL_ERRORS,
                                                       gather_branches)
from stock_data_agg.providers.core.utils import normalize_stock_symbol
from stock_data_agg.providers.core.validation import check_embedded_signals
from stock_data_agg.providers.twelvedata.mapper import (
    monthly_series_from_twelvedata, overview_from_twelvedata,
    quote_from_twelvedata, summary_from_twelvedata)
from stock_data_agg.providers.twelvedata.models import (
    TwelveDataProfile, TwelveDataQuote, TwelveDataStatistics,
    TwelveDataTimeSeries, TwelveDataTimeSeriesParams)
from stock_data_agg.schemas import (CompanyOverview, GlobalQuote, StockSummary,
                                    TimeSeriesMonthly)

ModelT = TypeVar("ModelT", bound=BaseModel)


def check_twelvedata_payload(payload: Any, operation: str, symbol: str) -> None:
    """Raise for Twelve Data's {"status": "error", "code": ...} bodies and the shared markers."""
    check_embedded_signals(payload, operation, symbol)
    if isinstance(payload, dict) and payload.get("status") == "error":
        message = payload.get("message") or "unknown error"
        if payload.get("code") == 429:
            raise RateLimitedError(operation, symbol, message)
        raise UpstreamDataError(operation, symbol, f"Twelve Data error: {message}")


class TwelveDataProvider(StockDataProviderABC):
    """Stock data provider backed by the Twelve Data REST API.

    Quotes, profiles and monthly series come from single endpoints. The
    company overview merges /profile with /statistics, and the summary
    composes /quote, /profile and a short /time_series.
    """

    BASE_URL = "https://api.twelvedata.com"
    SUMMARY_OUTPUT_SIZE = 15
    name = "twelvedata"

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the Twelve Data provider.

        Args:
            api_key: Twelve Data API key. Defaults to TWELVEDATA_API_KEY env var.
            base_url: API root. Defaults to TWELVEDATA_BASE_URL env var or the public URL.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (used by tests).
        """
        self._client = JsonApiClient(
            base_url or os.getenv("TWELVEDATA_BASE_URL", self.BASE_URL),
            api_key or os.getenv("TWELVEDATA_API_KEY", "demo"),
            validator=check_twelvedata_payload,
            timeout=timeout,
            transport=transport,
        )

    async def _fetch(
        self,
        path: str,
        model: type[ModelT],
        operation: str,
        symbol: str,
        params: dict[str, Any] | None = None,
    ) -> ModelT:
        """GET path for symbol and validate the body into model."""
        payload = await self._client.get_json(
            path,
            operation=operation,
            symbol=symbol,
            params={"symbol": symbol} | (params or {}),
        )
        try:
            return model.model_validate(payload or {})
        except ValidationError as e:
            raise TransportError(
                operation, symbol, f"Unexpected {operation} response shape for '{symbol}'"
            ) from e

    def _time_series(self, symbol: str, outputsize: int | None = None):
        params = TwelveDataTimeSeriesParams(outputsize=outputsize).model_dump(exclude_none=True)
        return self._fetch(
            "/time_series", TwelveDataTimeSeries, "monthly time series", symbol, params
        )

    async def get_quote(self, symbol: str) -> GlobalQuote:
        """Fetch the current quote for a stock symbol."""
        sym = normalize_stock_symbol(symbol)
        quote = await self._fetch("/quote", TwelveDataQuote, "quote", sym)
        return quote_from_twelvedata(quote, sym)

    async def get_company_overview(self, symbol: str) -> CompanyOverview:
        """Fetch profile and statistics concurrently; statistics failures are absorbed."""
        sym = normalize_stock_symbol(symbol)
        branches = await gather_branches(
            "company overview",
            sym,
            {
                "profile": self._fetch("/profile", TwelveDataProfile, "profile", sym),
                "statistics": self._fetch(
                    "/statistics", TwelveDataStatistics, "statistics", sym
                ),
            },
            required=("profile",),
        )
        return overview_from_twelvedata(branches["profile"], branches["statistics"], sym)

    async def get_monthly_time_series(self, symbol: str) -> TimeSeriesMonthly:
        """Fetch the full monthly series for a stock symbol."""
        sym = normalize_stock_symbol(symbol)
        series = await self._time_series(sym)
        return monthly_series_from_twelvedata(series, sym)

    async def get_summary(self, symbol: str) -> StockSummary:
        """Fetch quote, profile and the last months of closes concurrently."""
        sym = normalize_stock_symbol(symbol)
        branches = await gather_branches(
            "summary",
            sym,
            {
                "quote": self._fetch("/quote", TwelveDataQuote, "quote", sym),
                "profile": self._fetch("/profile", TwelveDataProfile, "profile", sym),
                "series": self._time_series(sym, self.SUMMARY_OUTPUT_SIZE),
            },
            fatal=SUMMARY_FATAL_ERRORS,
        )
        return summary_from_twelvedata(
            branches["quote"], branches["profile"], branches["series"], sym
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()
