"""Response models for the Twelve Data REST API.

Every field is optional: Twelve Data omits or blanks fields it does not have.
Numbers are kept as strings so prices are never round-tripped through float.
"""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TwelveDataModel(BaseModel):
    """Base model: ignore unknown keys, coerce bare numbers to strings."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class TwelveDataQuote(TwelveDataModel):
    """GET /quote."""

    symbol: str | None = None
    name: str | None = None
    exchange: str | None = None
    currency: str | None = None
    datetime: str | None = None
    open: str | None = None
    high: str | None = None
    low: str | None = None
    close: str | None = None
    volume: str | None = None
    previous_close: str | None = None
    change: str | None = None
    percent_change: str | None = None


class TwelveDataProfile(TwelveDataModel):
    """GET /profile."""

    symbol: str | None = None
    name: str | None = None
    exchange: str | None = None
    sector: str | None = None
    industry: str | None = None
    description: str | None = None
    website: str | None = None
    country: str | None = None
    currency: str | None = None
    type: str | None = None
    market_cap: str | None = None


class TwelveDataStatisticsData(TwelveDataModel):
    """Metric maps of GET /statistics. Values may be strings, numbers or nested objects."""

    valuations_metrics: dict[str, Any] = Field(default_factory=dict)
    financials: dict[str, Any] = Field(default_factory=dict)


class TwelveDataStatistics(TwelveDataModel):
    """GET /statistics."""

    statistics: TwelveDataStatisticsData | None = None


class TwelveDataSeriesMeta(TwelveDataModel):
    """`meta` block of GET /time_series."""

    symbol: str | None = None
    interval: str | None = None
    currency: str | None = None
    exchange_timezone: str | None = None
    exchange: str | None = None
    type: str | None = None


class TwelveDataSeriesValue(TwelveDataModel):
    """One point of GET /time_series `values`."""

    datetime: str | None = None
    open: str | None = None
    high: str | None = None
    low: str | None = None
    close: str | None = None
    volume: str | None = None


class TwelveDataTimeSeries(TwelveDataModel):
    """GET /time_series."""

    meta: TwelveDataSeriesMeta | None = None
    values: list[TwelveDataSeriesValue] | None = None


class TwelveDataTimeSeriesParams(BaseModel):
    """Params for /time_series. Merge with 'symbol' at call site."""

    interval: str = "1month"
    outputsize: int | None = None
