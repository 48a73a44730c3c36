"""Response models for the Alpha Vantage `/query` API.

Alpha Vantage keys carry ordinal prefixes ("05. price") or PascalCase names;
aliases map them onto snake_case attributes. Values stay strings.
"""
from pydantic import BaseModel, ConfigDict, Field


class AlphaVantageModel(BaseModel):
    """Base model: ignore unknown keys, allow population by attribute name."""

    model_config = ConfigDict(
        extra="ignore", populate_by_name=True, coerce_numbers_to_str=True
    )


class AlphaVantageGlobalQuote(AlphaVantageModel):
    """`Global Quote` object of function=GLOBAL_QUOTE."""

    symbol: str | None = Field(default=None, alias="01. symbol")
    open: str | None = Field(default=None, alias="02. open")
    high: str | None = Field(default=None, alias="03. high")
    low: str | None = Field(default=None, alias="04. low")
    price: str | None = Field(default=None, alias="05. price")
    volume: str | None = Field(default=None, alias="06. volume")
    latest_trading_day: str | None = Field(default=None, alias="07. latest trading day")
    previous_close: str | None = Field(default=None, alias="08. previous close")
    change: str | None = Field(default=None, alias="09. change")
    change_percent: str | None = Field(default=None, alias="10. change percent")


class AlphaVantageGlobalQuoteResponse(AlphaVantageModel):
    """function=GLOBAL_QUOTE."""

    global_quote: AlphaVantageGlobalQuote | None = Field(default=None, alias="Global Quote")


class AlphaVantageOverview(AlphaVantageModel):
    """function=OVERVIEW. Attribute names match CompanyOverview fields."""

    symbol: str | None = Field(default=None, alias="Symbol")
    asset_type: str | None = Field(default=None, alias="AssetType")
    name: str | None = Field(default=None, alias="Name")
    description: str | None = Field(default=None, alias="Description")
    cik: str | None = Field(default=None, alias="CIK")
    exchange: str | None = Field(default=None, alias="Exchange")
    currency: str | None = Field(default=None, alias="Currency")
    country: str | None = Field(default=None, alias="Country")
    sector: str | None = Field(default=None, alias="Sector")
    industry: str | None = Field(default=None, alias="Industry")
    address: str | None = Field(default=None, alias="Address")
    official_site: str | None = Field(default=None, alias="OfficialSite")
    fiscal_year_end: str | None = Field(default=None, alias="FiscalYearEnd")
    latest_quarter: str | None = Field(default=None, alias="LatestQuarter")
    market_capitalization: str | None = Field(default=None, alias="MarketCapitalization")
    ebitda: str | None = Field(default=None, alias="EBITDA")
    pe_ratio: str | None = Field(default=None, alias="PERatio")
    peg_ratio: str | None = Field(default=None, alias="PEGRatio")
    book_value: str | None = Field(default=None, alias="BookValue")
    dividend_per_share: str | None = Field(default=None, alias="DividendPerShare")
    dividend_yield: str | None = Field(default=None, alias="DividendYield")
    eps: str | None = Field(default=None, alias="EPS")
    revenue_per_share_ttm: str | None = Field(default=None, alias="RevenuePerShareTTM")
    profit_margin: str | None = Field(default=None, alias="ProfitMargin")
    operating_margin_ttm: str | None = Field(default=None, alias="OperatingMarginTTM")
    return_on_assets_ttm: str | None = Field(default=None, alias="ReturnOnAssetsTTM")
    return_on_equity_ttm: str | None = Field(default=None, alias="ReturnOnEquityTTM")
    revenue_ttm: str | None = Field(default=None, alias="RevenueTTM")
    gross_profit_ttm: str | None = Field(default=None, alias="GrossProfitTTM")
    diluted_eps_ttm: str | None = Field(default=None, alias="DilutedEPSTTM")
    quarterly_earnings_growth_yoy: str | None = Field(
        default=None, alias="QuarterlyEarningsGrowthYOY"
    )
    quarterly_revenue_growth_yoy: str | None = Field(
        default=None, alias="QuarterlyRevenueGrowthYOY"
    )
    analyst_target_price: str | None = Field(default=None, alias="AnalystTargetPrice")
    trailing_pe: str | None = Field(default=None, alias="TrailingPE")
    forward_pe: str | None = Field(default=None, alias="ForwardPE")
    price_to_sales_ratio_ttm: str | None = Field(default=None, alias="PriceToSalesRatioTTM")
    price_to_book_ratio: str | None = Field(default=None, alias="PriceToBookRatio")
    ev_to_revenue: str | None = Field(default=None, alias="EVToRevenue")
    ev_to_ebitda: str | None = Field(default=None, alias="EVToEBITDA")
    beta: str | None = Field(default=None, alias="Beta")
    week_52_high: str | None = Field(default=None, alias="52WeekHigh")
    week_52_low: str | None = Field(default=None, alias="52WeekLow")
    moving_average_50_day: str | None = Field(default=None, alias="50DayMovingAverage")
    moving_average_200_day: str | None = Field(default=None, alias="200DayMovingAverage")
    shares_outstanding: str | None = Field(default=None, alias="SharesOutstanding")
    dividend_date: str | None = Field(default=None, alias="DividendDate")
    ex_dividend_date: str | None = Field(default=None, alias="ExDividendDate")


class AlphaVantageMetaData(AlphaVantageModel):
    """`Meta Data` block of function=TIME_SERIES_MONTHLY."""

    information: str | None = Field(default=None, alias="1. Information")
    symbol: str | None = Field(default=None, alias="2. Symbol")
    last_refreshed: str | None = Field(default=None, alias="3. Last Refreshed")
    time_zone: str | None = Field(default=None, alias="4. Time Zone")


class AlphaVantageMonthlyBar(AlphaVantageModel):
    """One entry of `Monthly Time Series`."""

    open: str | None = Field(default=None, alias="1. open")
    high: str | None = Field(default=None, alias="2. high")
    low: str | None = Field(default=None, alias="3. low")
    close: str | None = Field(default=None, alias="4. close")
    volume: str | None = Field(default=None, alias="5. volume")


class AlphaVantageMonthlySeries(AlphaVantageModel):
    """function=TIME_SERIES_MONTHLY."""

    meta_data: AlphaVantageMetaData | None = Field(default=None, alias="Meta Data")
    monthly_time_series: dict[str, AlphaVantageMonthlyBar] | None = Field(
        default=None, alias="Monthly Time Series"
    )
