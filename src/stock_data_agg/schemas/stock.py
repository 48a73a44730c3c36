"""Canonical stock models returned to callers, whichever provider supplied the data."""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

NOT_AVAILABLE = "N/A"
ZERO = "0"


class CanonicalModel(BaseModel):
    """Immutable, request-scoped model serialized with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class GlobalQuote(CanonicalModel):
    """Latest quote. Numeric fields are upstream strings, kept verbatim."""

    symbol: str
    open: str = ZERO
    high: str = ZERO
    low: str = ZERO
    price: str = ZERO
    volume: str = ZERO
    latest_trading_day: str = NOT_AVAILABLE
    previous_close: str = ZERO
    change: str = ZERO
    change_percent: str = "0%"  # always exactly one trailing '%'


class CompanyOverview(CanonicalModel):
    """Company profile plus a fixed set of financial ratios.

    Every field is always present. Text fields a provider cannot supply hold
    "N/A" and metric fields hold "0"; neither should be read as a real value.
    """

    symbol: str
    asset_type: str = NOT_AVAILABLE
    name: str = NOT_AVAILABLE
    description: str = NOT_AVAILABLE
    cik: str = NOT_AVAILABLE
    exchange: str = NOT_AVAILABLE
    currency: str = NOT_AVAILABLE
    country: str = NOT_AVAILABLE
    sector: str = NOT_AVAILABLE
    industry: str = NOT_AVAILABLE
    address: str = NOT_AVAILABLE
    official_site: str = NOT_AVAILABLE
    fiscal_year_end: str = NOT_AVAILABLE
    latest_quarter: str = NOT_AVAILABLE
    market_capitalization: str = ZERO
    ebitda: str = ZERO
    pe_ratio: str = ZERO
    peg_ratio: str = ZERO
    book_value: str = ZERO
    dividend_per_share: str = ZERO
    dividend_yield: str = ZERO
    eps: str = ZERO
    revenue_per_share_ttm: str = ZERO
    profit_margin: str = ZERO
    operating_margin_ttm: str = ZERO
    return_on_assets_ttm: str = ZERO
    return_on_equity_ttm: str = ZERO
    revenue_ttm: str = ZERO
    gross_profit_ttm: str = ZERO
    diluted_eps_ttm: str = ZERO
    quarterly_earnings_growth_yoy: str = ZERO
    quarterly_revenue_growth_yoy: str = ZERO
    analyst_target_price: str = ZERO
    trailing_pe: str = ZERO
    forward_pe: str = ZERO
    price_to_sales_ratio_ttm: str = ZERO
    price_to_book_ratio: str = ZERO
    ev_to_revenue: str = ZERO
    ev_to_ebitda: str = ZERO
    beta: str = ZERO
    week_52_high: str = ZERO
    week_52_low: str = ZERO
    moving_average_50_day: str = ZERO
    moving_average_200_day: str = ZERO
    shares_outstanding: str = ZERO
    dividend_date: str = NOT_AVAILABLE
    ex_dividend_date: str = NOT_AVAILABLE


class MetaData(CanonicalModel):
    """Descriptive block of a monthly series."""

    information: str = "Monthly Prices (open, high, low, close) and Volumes"
    symbol: str
    last_refreshed: str = NOT_AVAILABLE
    time_zone: str = NOT_AVAILABLE


class MonthlyData(CanonicalModel):
    """One monthly OHLCV bar."""

    open: str = ZERO
    high: str = ZERO
    low: str = ZERO
    close: str = ZERO
    volume: str = ZERO


class TimeSeriesMonthly(CanonicalModel):
    """Monthly history keyed by date string, in upstream insertion order."""

    meta_data: MetaData
    monthly_time_series: dict[str, MonthlyData] = Field(default_factory=dict)


class PricePoint(CanonicalModel):
    """One (month label, close) point of a summary chart."""

    label: str
    value: float


class StockSummary(CanonicalModel):
    """One-year snapshot derived from quote, company data and monthly closes."""

    symbol: str
    company_name: str = NOT_AVAILABLE
    exchange: str = NOT_AVAILABLE
    sector: str = NOT_AVAILABLE
    timeline: str = "1Y"
    price: float = 0.0
    daily_change: float = 0.0
    daily_change_percent: float = 0.0
    market_cap: float = 0.0
    week_52_high: float = 0.0
    week_52_low: float = 0.0
    year_start_price: float = 0.0
    description: str = NOT_AVAILABLE
    price_series: list[PricePoint] = Field(default_factory=list)
