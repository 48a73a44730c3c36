"""Map Alpha Vantage responses to canonical stock models."""
from stock_data_agg.providers.alphavantage.models import (
    AlphaVantageGlobalQuoteResponse, AlphaVantageMonthlySeries,
    AlphaVantageOverview)
from stock_data_agg.providers.core.exceptions import MissingFieldError
from stock_data_agg.providers.core.series import (build_price_series,
                                                  series_stats)
from stock_data_agg.providers.core.utils import (NOT_AVAILABLE,
                                                 ensure_percent_suffix,
                                                 first_non_blank,
                                                 normalize_stock_symbol,
                                                 or_default, parse_lenient,
                                                 parse_percent)
from stock_data_agg.schemas import (CompanyOverview, GlobalQuote, MetaData,
                                    MonthlyData, StockSummary,
                                    TimeSeriesMonthly)

# Alpha Vantage writes "None" or "-" for metrics it does not have.
_ABSENT_MARKERS = frozenset({"None", "-"})


def _value(raw: str | None, default: str) -> str:
    if raw is not None and raw.strip() in _ABSENT_MARKERS:
        return default
    return or_default(raw, default)


def quote_from_alphavantage(
    response: AlphaVantageGlobalQuoteResponse | None, symbol: str
) -> GlobalQuote:
    """Build a GlobalQuote; "10. change percent" already ends in '%' upstream."""
    quote = response.global_quote if response else None
    if quote is None or not first_non_blank(quote.symbol):
        raise MissingFieldError("quote", symbol, "symbol")
    return GlobalQuote(
        symbol=normalize_stock_symbol(quote.symbol),
        open=or_default(quote.open),
        high=or_default(quote.high),
        low=or_default(quote.low),
        price=or_default(quote.price),
        volume=or_default(quote.volume),
        latest_trading_day=or_default(quote.latest_trading_day, NOT_AVAILABLE),
        previous_close=or_default(quote.previous_close),
        change=or_default(quote.change),
        change_percent=ensure_percent_suffix(quote.change_percent),
    )


def overview_from_alphavantage(
    overview: AlphaVantageOverview | None, symbol: str
) -> CompanyOverview:
    """Copy the flat OVERVIEW body field by field, filling gaps with sentinels."""
    if overview is None or not first_non_blank(overview.symbol):
        raise MissingFieldError("company overview", symbol, "Symbol")
    fields = {
        name: _value(raw, CompanyOverview.model_fields[name].default)
        for name, raw in overview.model_dump(exclude={"symbol"}).items()
    }
    return CompanyOverview(symbol=normalize_stock_symbol(overview.symbol), **fields)


def monthly_series_from_alphavantage(
    series: AlphaVantageMonthlySeries | None, symbol: str
) -> TimeSeriesMonthly:
    """Copy `Monthly Time Series` in upstream order, plus its `Meta Data`."""
    if series is None or series.monthly_time_series is None:
        raise MissingFieldError("monthly time series", symbol, "Monthly Time Series")

    meta = series.meta_data
    default_meta = MetaData.model_fields
    return TimeSeriesMonthly(
        meta_data=MetaData(
            information=or_default(
                meta.information if meta else None, default_meta["information"].default
            ),
            symbol=normalize_stock_symbol(first_non_blank(meta.symbol if meta else None, symbol)),
            last_refreshed=or_default(meta.last_refreshed if meta else None, NOT_AVAILABLE),
            time_zone=or_default(meta.time_zone if meta else None, NOT_AVAILABLE),
        ),
        monthly_time_series={
            day: MonthlyData(
                open=or_default(bar.open),
                high=or_default(bar.high),
                low=or_default(bar.low),
                close=or_default(bar.close),
                volume=or_default(bar.volume),
            )
            for day, bar in series.monthly_time_series.items()
        },
    )


def summary_from_alphavantage(
    response: AlphaVantageGlobalQuoteResponse | None,
    overview: AlphaVantageOverview | None,
    series: AlphaVantageMonthlySeries | None,
    symbol: str,
) -> StockSummary:
    """Compose a StockSummary from GLOBAL_QUOTE, OVERVIEW and TIME_SERIES_MONTHLY."""
    quote = response.global_quote if response and response.global_quote else None
    overview = overview or AlphaVantageOverview()
    bars = series.monthly_time_series if series and series.monthly_time_series else {}

    price_series = build_price_series((day, bar.close) for day, bar in bars.items())
    week_52_high, week_52_low, year_start_price = series_stats(price_series)

    return StockSummary(
        symbol=normalize_stock_symbol(symbol),
        company_name=first_non_blank(overview.name, NOT_AVAILABLE),
        exchange=first_non_blank(overview.exchange, NOT_AVAILABLE),
        sector=first_non_blank(overview.sector, NOT_AVAILABLE),
        price=parse_lenient(quote.price if quote else None),
        daily_change=parse_lenient(quote.change if quote else None),
        daily_change_percent=parse_percent(quote.change_percent if quote else None),
        market_cap=parse_lenient(overview.market_capitalization),
        week_52_high=week_52_high,
        week_52_low=week_52_low,
        year_start_price=year_start_price,
        description=first_non_blank(overview.description, NOT_AVAILABLE),
        price_series=price_series,
    )
