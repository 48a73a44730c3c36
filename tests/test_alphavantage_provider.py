"""
Tests for the Alpha Vantage provider.

Tests cover:
- /query request construction
- GLOBAL_QUOTE, OVERVIEW and TIME_SERIES_MONTHLY normalization
- "Information"/"Note" rate-limit bodies and "Error Message" bodies
"""

import httpx
import pytest

from stock_data_agg.providers import AlphaVantageProvider
from stock_data_agg.providers.core import (MissingFieldError, RateLimitedError,
                                           UpstreamDataError)

BASE_URL = "https://www.alphavantage.co"

GLOBAL_QUOTE = {
    "Global Quote": {
        "01. symbol": "IBM",
        "02. open": "185.0000",
        "03. high": "186.5000",
        "04. low": "184.2000",
        "05. price": "185.9200",
        "06. volume": "3401235",
        "07. latest trading day": "2024-02-29",
        "08. previous close": "184.9200",
        "09. change": "1.0000",
        "10. change percent": "0.5408%",
    }
}

OVERVIEW = {
    "Symbol": "IBM",
    "AssetType": "Common Stock",
    "Name": "International Business Machines",
    "CIK": "51143",
    "Exchange": "NYSE",
    "OfficialSite": "https://www.ibm.com",
    "PERatio": "22.6",
    "52WeekHigh": "199.18",
    "50DayMovingAverage": "183.0",
    "DividendDate": "None",
    "ForwardPE": "-",
    "EBITDA": "",
}

MONTHLY = {
    "Meta Data": {
        "1. Information": "Monthly Prices (open, high, low, close) and Volumes",
        "2. Symbol": "IBM",
        "3. Last Refreshed": "2024-02-29",
        "4. Time Zone": "US/Eastern",
    },
    "Monthly Time Series": {
        "2024-02-29": {"1. open": "183.6", "2. high": "189.1", "3. low": "181.0", "4. close": "185.9", "5. volume": "100"},
        "2024-01-31": {"1. open": "162.8", "2. high": "196.9", "3. low": "157.9", "4. close": "183.7", "5. volume": "200"},
    },
}


def make_provider(upstream) -> AlphaVantageProvider:
    return AlphaVantageProvider(api_key="test-key", base_url=BASE_URL, transport=upstream.transport)


# =============================================================
# TEST: Quote
# =============================================================

class TestQuote:
    """function=GLOBAL_QUOTE -> GlobalQuote."""

    async def test_request_and_mapping(self, fake_upstream):
        upstream = fake_upstream({"/query": GLOBAL_QUOTE})
        async with make_provider(upstream) as provider:
            quote = await provider.get_quote("ibm")

        assert str(upstream.requests[0].url) == (
            f"{BASE_URL}/query?function=GLOBAL_QUOTE&symbol=IBM&apikey=test-key"
        )
        assert quote.symbol == "IBM"
        assert quote.price == "185.9200"
        assert quote.latest_trading_day == "2024-02-29"

    async def test_percent_is_not_doubled(self, fake_upstream):
        upstream = fake_upstream({"/query": GLOBAL_QUOTE})
        async with make_provider(upstream) as provider:
            quote = await provider.get_quote("IBM")
        assert quote.change_percent == "0.5408%"

    async def test_empty_global_quote_is_missing(self, fake_upstream):
        upstream = fake_upstream({"/query": {"Global Quote": {}}})
        async with make_provider(upstream) as provider:
            with pytest.raises(MissingFieldError):
                await provider.get_quote("NOPE")

    @pytest.mark.parametrize("key", ["Information", "Note"])
    async def test_rate_limit_markers(self, fake_upstream, key):
        upstream = fake_upstream({"/query": {key: "API rate limit is 25 requests per day."}})
        async with make_provider(upstream) as provider:
            with pytest.raises(RateLimitedError, match="25 requests per day"):
                await provider.get_quote("IBM")

    async def test_error_message(self, fake_upstream):
        upstream = fake_upstream({"/query": {"Error Message": "Invalid API call."}})
        async with make_provider(upstream) as provider:
            with pytest.raises(UpstreamDataError, match="Invalid API call"):
                await provider.get_quote("IBM")


# =============================================================
# TEST: Company overview
# =============================================================

class TestCompanyOverview:
    """function=OVERVIEW -> CompanyOverview."""

    async def test_copies_fields(self, fake_upstream):
        upstream = fake_upstream({"/query": OVERVIEW})
        async with make_provider(upstream) as provider:
            overview = await provider.get_company_overview("IBM")

        assert upstream.requests[0].url.params["function"] == "OVERVIEW"
        assert overview.name == "International Business Machines"
        assert overview.cik == "51143"
        assert overview.pe_ratio == "22.6"
        assert overview.week_52_high == "199.18"
        assert overview.moving_average_50_day == "183.0"

    async def test_absent_markers_become_sentinels(self, fake_upstream):
        upstream = fake_upstream({"/query": OVERVIEW})
        async with make_provider(upstream) as provider:
            overview = await provider.get_company_overview("IBM")

        assert overview.dividend_date == "N/A"
        assert overview.forward_pe == "0"
        assert overview.ebitda == "0"
        assert overview.address == "N/A"
        assert overview.beta == "0"

    async def test_empty_body_is_missing(self, fake_upstream):
        upstream = fake_upstream({"/query": {}})
        async with make_provider(upstream) as provider:
            with pytest.raises(MissingFieldError):
                await provider.get_company_overview("NOPE")


# =============================================================
# TEST: Monthly time series
# =============================================================

class TestMonthlyTimeSeries:
    """function=TIME_SERIES_MONTHLY -> TimeSeriesMonthly."""

    async def test_copies_series_and_meta(self, fake_upstream):
        upstream = fake_upstream({"/query": MONTHLY})
        async with make_provider(upstream) as provider:
            series = await provider.get_monthly_time_series("IBM")

        assert list(series.monthly_time_series) == ["2024-02-29", "2024-01-31"]
        assert series.monthly_time_series["2024-01-31"].close == "183.7"
        assert series.meta_data.last_refreshed == "2024-02-29"
        assert series.meta_data.time_zone == "US/Eastern"

    async def test_serialized_shape(self, fake_upstream):
        upstream = fake_upstream({"/query": MONTHLY})
        async with make_provider(upstream) as provider:
            series = await provider.get_monthly_time_series("IBM")

        body = series.model_dump(by_alias=True)
        assert set(body) == {"metaData", "monthlyTimeSeries"}
        assert body["metaData"]["lastRefreshed"] == "2024-02-29"

    async def test_duplicate_dates_keep_first(self, fake_upstream):
        raw = (
            '{"Meta Data": {"2. Symbol": "IBM"}, "Monthly Time Series": {'
            '"2024-01-31": {"4. close": "1"}, "2024-01-31": {"4. close": "2"}}}'
        )
        upstream = fake_upstream(
            {"/query": httpx.Response(200, text=raw, headers={"Content-Type": "application/json"})}
        )
        async with make_provider(upstream) as provider:
            series = await provider.get_monthly_time_series("IBM")

        assert list(series.monthly_time_series) == ["2024-01-31"]
        assert series.monthly_time_series["2024-01-31"].close == "1"

    async def test_missing_series_is_missing(self, fake_upstream):
        upstream = fake_upstream({"/query": {"Meta Data": MONTHLY["Meta Data"]}})
        async with make_provider(upstream) as provider:
            with pytest.raises(MissingFieldError):
                await provider.get_monthly_time_series("IBM")
