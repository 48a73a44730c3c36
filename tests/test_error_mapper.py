"""
Tests for ProviderErrorMapper and StockService error handling.

Tests cover:
- Provider error kind -> HTTP status and detail
- StockService normalizing symbols and raising HTTPException
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import HTTPException

from stock_data_agg.providers.core import (MissingFieldError, ProviderError,
                                           ProviderErrorMapper,
                                           RateLimitedError, TransportError,
                                           UpstreamDataError)
from stock_data_agg.schemas import GlobalQuote
from stock_data_agg.services import StockService, create_stock_service

MAPPER = ProviderErrorMapper(resource_name="Stock", api_name="Twelve Data")


# =============================================================
# TEST: Status mapping
# =============================================================

class TestToHttp:
    """Each error kind maps to one HTTP status."""

    def test_rate_limited(self):
        status, detail = MAPPER.to_http(RateLimitedError("quote", "AAPL", "quota"), "AAPL")
        assert status == 429
        assert "Twelve Data rate limit" in detail

    def test_missing_field_is_not_found(self):
        assert MAPPER.to_http(MissingFieldError("quote", "ZZZZ", "symbol"), "ZZZZ") == (
            404, "Stock 'ZZZZ' not found",
        )

    def test_upstream_error(self):
        status, detail = MAPPER.to_http(UpstreamDataError("quote", "AAPL", "bad symbol"), "AAPL")
        assert status == 502
        assert "bad symbol" in detail

    @pytest.mark.parametrize(
        "exc, expected",
        [
            (TransportError("quote", "AAPL", "gone", status_code=404), 404),
            (TransportError("quote", "AAPL", "slow", timeout=True), 504),
            (TransportError("quote", "AAPL", "boom", status_code=500), 502),
            (TransportError("quote", "AAPL", "refused"), 502),
        ],
    )
    def test_transport(self, exc, expected):
        assert MAPPER.to_http(exc, "AAPL")[0] == expected

    def test_generic_provider_error(self):
        assert MAPPER.to_http(ProviderError("summary", "AAPL", "x"))[0] == 500

    def test_unknown_exception(self):
        assert MAPPER.to_http(RuntimeError("x")) == (500, "Internal server error")

    def test_not_found_without_symbol(self):
        assert MAPPER.to_http(MissingFieldError("quote", None, "symbol")) == (
            404, "Stock not found",
        )

    def test_raise_http_chains_original(self):
        original = RateLimitedError("quote", "AAPL", "quota")
        with pytest.raises(HTTPException) as exc_info:
            MAPPER.raise_http(original, "AAPL")
        assert exc_info.value.status_code == 429
        assert exc_info.value.__cause__ is original


# =============================================================
# TEST: StockService
# =============================================================

def make_service(**methods) -> tuple[StockService, MagicMock]:
    provider = MagicMock()
    provider.name = "twelvedata"
    for name, mock in methods.items():
        setattr(provider, name, mock)
    return create_stock_service(provider), provider


class TestStockService:
    """Symbol normalization and error translation."""

    async def test_normalizes_symbol(self):
        quote = GlobalQuote(symbol="AAPL", price="168.22000")
        service, provider = make_service(get_quote=AsyncMock(return_value=quote))

        assert await service.get_quote("  aapl ") is quote
        provider.get_quote.assert_awaited_once_with("AAPL")

    async def test_maps_provider_error(self):
        service, _ = make_service(
            get_summary=AsyncMock(side_effect=TransportError("summary", "AAPL", "x", timeout=True))
        )
        with pytest.raises(HTTPException) as exc_info:
            await service.get_summary("AAPL")
        assert exc_info.value.status_code == 504
        assert "Twelve Data" in exc_info.value.detail

    async def test_other_exceptions_propagate(self):
        service, _ = make_service(get_company_overview=AsyncMock(side_effect=KeyError("x")))
        with pytest.raises(KeyError):
            await service.get_company_overview("AAPL")
