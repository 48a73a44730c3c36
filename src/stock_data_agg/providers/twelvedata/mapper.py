"""Map Twelve Data responses to canonical stock models."""
from typing import Any

from stock_data_agg.providers.core.exceptions import MissingFieldError
from stock_data_agg.providers.core.series import (build_price_series,
                                                  first_wins, series_stats)
from stock_data_agg.providers.core.utils import (NOT_AVAILABLE, ZERO,
                                                 ensure_percent_suffix,
                                                 first_non_blank,
                                                 normalize_stock_symbol,
                                                 or_default, parse_lenient,
                                                 parse_percent)
from stock_data_agg.providers.twelvedata.models import (TwelveDataProfile,
                                                        TwelveDataQuote,
                                                        TwelveDataStatistics,
                                                        TwelveDataTimeSeries)
from stock_data_agg.schemas import (CompanyOverview, GlobalQuote, MetaData,
                                    MonthlyData, StockSummary,
                                    TimeSeriesMonthly)

VALUATIONS = "valuations_metrics"
FINANCIALS = "financials"

# Canonical overview field -> (statistics section, key).
OVERVIEW_METRIC_KEYS: dict[str, tuple[str, str]] = {
    "market_capitalization": (VALUATIONS, "market_capitalization"),
    "pe_ratio": (VALUATIONS, "pe_ratio"),
    "peg_ratio": (VALUATIONS, "peg_ratio"),
    "trailing_pe": (VALUATIONS, "trailing_pe"),
    "forward_pe": (VALUATIONS, "forward_pe"),
    "price_to_sales_ratio_ttm": (VALUATIONS, "price_to_sales_ttm"),
    "ev_to_revenue": (VALUATIONS, "enterprise_to_revenue"),
    "ev_to_ebitda": (VALUATIONS, "enterprise_to_ebitda"),
    "price_to_book_ratio": (FINANCIALS, "price_to_book"),
    "ebitda": (FINANCIALS, "ebitda"),
    "book_value": (FINANCIALS, "book_value_per_share"),
    "dividend_per_share": (FINANCIALS, "forward_annual_dividend_rate"),
    "dividend_yield": (FINANCIALS, "forward_annual_dividend_yield"),
    "eps": (FINANCIALS, "eps"),
    "revenue_per_share_ttm": (FINANCIALS, "revenue_per_share_ttm"),
    "profit_margin": (FINANCIALS, "profit_margin"),
    "operating_margin_ttm": (FINANCIALS, "operating_margin"),
    "return_on_assets_ttm": (FINANCIALS, "return_on_assets_ttm"),
    "return_on_equity_ttm": (FINANCIALS, "return_on_equity_ttm"),
    "revenue_ttm": (FINANCIALS, "revenue_ttm"),
    "gross_profit_ttm": (FINANCIALS, "gross_profit_ttm"),
    "diluted_eps_ttm": (FINANCIALS, "diluted_eps_ttm"),
    "analyst_target_price": (FINANCIALS, "analyst_target_price"),
    "beta": (FINANCIALS, "beta"),
    "shares_outstanding": (FINANCIALS, "shares_outstanding"),
}

# Fields Twelve Data never supplies; always sentinels, whatever the payload holds.
UNAVAILABLE_OVERVIEW_FIELDS: dict[str, str] = {
    "cik": NOT_AVAILABLE,
    "address": NOT_AVAILABLE,
    "fiscal_year_end": NOT_AVAILABLE,
    "week_52_high": ZERO,
    "week_52_low": ZERO,
    "moving_average_50_day": ZERO,
    "moving_average_200_day": ZERO,
    "dividend_date": NOT_AVAILABLE,
    "ex_dividend_date": NOT_AVAILABLE,
    "quarterly_earnings_growth_yoy": ZERO,
    "quarterly_revenue_growth_yoy": ZERO,
}


def _lookup(table: dict[str, Any], key: str, default: str = ZERO) -> str:
    """Read a flat metric; nested objects, booleans and blanks count as absent."""
    value = table.get(key)
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return default
    return or_default(str(value), default)


def quote_from_twelvedata(quote: TwelveDataQuote | None, symbol: str) -> GlobalQuote:
    """Build a GlobalQuote; the close is the current price."""
    if quote is None or not first_non_blank(quote.symbol):
        raise MissingFieldError("quote", symbol, "symbol")
    return GlobalQuote(
        symbol=normalize_stock_symbol(quote.symbol),
        open=or_default(quote.open),
        high=or_default(quote.high),
        low=or_default(quote.low),
        price=or_default(quote.close),
        volume=or_default(quote.volume),
        latest_trading_day=or_default(quote.datetime, NOT_AVAILABLE),
        previous_close=or_default(quote.previous_close),
        change=or_default(quote.change),
        change_percent=ensure_percent_suffix(quote.percent_change),
    )


def overview_from_twelvedata(
    profile: TwelveDataProfile | None,
    statistics: TwelveDataStatistics | None,
    symbol: str,
) -> CompanyOverview:
    """Merge profile and statistics into a fully populated CompanyOverview.

    statistics may be None (failed or empty call); every metric then falls
    back to "0".
    """
    if profile is None or not first_non_blank(profile.symbol):
        raise MissingFieldError("company overview", symbol, "symbol")

    data = statistics.statistics if statistics and statistics.statistics else None
    sections: dict[str, dict[str, Any]] = {
        VALUATIONS: data.valuations_metrics if data else {},
        FINANCIALS: data.financials if data else {},
    }
    metrics = {
        field: _lookup(sections[section], key)
        for field, (section, key) in OVERVIEW_METRIC_KEYS.items()
    }
    metrics["latest_quarter"] = _lookup(
        sections[FINANCIALS], "most_recent_quarter", NOT_AVAILABLE
    )

    return CompanyOverview(
        symbol=normalize_stock_symbol(profile.symbol),
        asset_type=or_default(profile.type, NOT_AVAILABLE),
        name=or_default(profile.name, NOT_AVAILABLE),
        description=or_default(profile.description, NOT_AVAILABLE),
        exchange=or_default(profile.exchange, NOT_AVAILABLE),
        currency=or_default(profile.currency, NOT_AVAILABLE),
        country=or_default(profile.country, NOT_AVAILABLE),
        sector=or_default(profile.sector, NOT_AVAILABLE),
        industry=or_default(profile.industry, NOT_AVAILABLE),
        official_site=or_default(profile.website, NOT_AVAILABLE),
        **metrics,
        **UNAVAILABLE_OVERVIEW_FIELDS,
    )


def monthly_series_from_twelvedata(
    series: TwelveDataTimeSeries | None, symbol: str
) -> TimeSeriesMonthly:
    """Convert the values list into a date-keyed mapping (first date wins)."""
    if series is None or series.values is None:
        raise MissingFieldError("monthly time series", symbol, "values")

    meta = series.meta
    bars = first_wins(
        (
            point.datetime,
            MonthlyData(
                open=or_default(point.open),
                high=or_default(point.high),
                low=or_default(point.low),
                close=or_default(point.close),
                volume=or_default(point.volume),
            ),
        )
        for point in series.values
        if point.datetime
    )
    return TimeSeriesMonthly(
        meta_data=MetaData(
            symbol=normalize_stock_symbol(first_non_blank(meta.symbol if meta else None, symbol)),
            time_zone=or_default(meta.exchange_timezone if meta else None, NOT_AVAILABLE),
        ),
        monthly_time_series=bars,
    )


def summary_from_twelvedata(
    quote: TwelveDataQuote | None,
    profile: TwelveDataProfile | None,
    series: TwelveDataTimeSeries | None,
    symbol: str,
) -> StockSummary:
    """Compose a StockSummary; any missing part degrades to sentinels."""
    quote = quote or TwelveDataQuote()
    profile = profile or TwelveDataProfile()
    values = series.values if series and series.values else []

    price_series = build_price_series(
        (point.datetime, point.close) for point in values if point.datetime
    )
    week_52_high, week_52_low, year_start_price = series_stats(price_series)

    return StockSummary(
        symbol=normalize_stock_symbol(symbol),
        company_name=first_non_blank(profile.name, quote.name, NOT_AVAILABLE),
        exchange=first_non_blank(profile.exchange, quote.exchange, NOT_AVAILABLE),
        sector=first_non_blank(profile.sector, NOT_AVAILABLE),
        price=parse_lenient(quote.close),
        daily_change=parse_lenient(quote.change),
        daily_change_percent=parse_percent(quote.percent_change),
        market_cap=parse_lenient(profile.market_cap),
        week_52_high=week_52_high,
        week_52_low=week_52_low,
        year_start_price=year_start_price,
        description=first_non_blank(profile.description, NOT_AVAILABLE),
        price_series=price_series,
    )
