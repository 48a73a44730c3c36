"""Stock data routes.

Thin HTTP handlers that delegate to StockService, which normalizes symbols
and maps provider errors to HTTP responses.
"""
from typing import Annotated

from fastapi import APIRouter, Query

from stock_data_agg.deps import StockServiceDep
from stock_data_agg.schemas import (CompanyOverview, GlobalQuote, StockSummary,
                                    TimeSeriesMonthly)

router = APIRouter(prefix="/api/stock", tags=["stocks"])

SymbolParam = Annotated[
    str,
    Query(min_length=1, max_length=16, description="Stock ticker (e.g. AAPL)"),
]


@router.get("/global-quote", response_model=GlobalQuote)
async def get_global_quote(symbol: SymbolParam, service: StockServiceDep) -> GlobalQuote:
    """Get the latest quote for a symbol.

    Prices are upstream strings; changePercent always ends with a single '%'.
    """
    return await service.get_quote(symbol)


@router.get("/company-overview", response_model=CompanyOverview)
async def get_company_overview(
    symbol: SymbolParam, service: StockServiceDep
) -> CompanyOverview:
    """Get company profile and financial ratios for a symbol.

    Metrics the provider cannot supply are returned as "0" or "N/A".
    """
    return await service.get_company_overview(symbol)


@router.get("/monthly-time-series", response_model=TimeSeriesMonthly)
async def get_monthly_time_series(
    symbol: SymbolParam, service: StockServiceDep
) -> TimeSeriesMonthly:
    """Get monthly OHLCV history for a symbol, keyed by date."""
    return await service.get_monthly_time_series(symbol)


@router.get("/summary", response_model=StockSummary)
async def get_stock_summary(symbol: SymbolParam, service: StockServiceDep) -> StockSummary:
    """Get a one-year summary: price, daily change, 52-week range and up to 12 monthly closes."""
    return await service.get_summary(symbol)
