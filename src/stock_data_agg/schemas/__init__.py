"""Pydantic schemas for API and runtime use. Not persisted to DB."""
from stock_data_agg.schemas.stock import (CompanyOverview, GlobalQuote,
                                          MetaData, MonthlyData, PricePoint,
                                          StockSummary, TimeSeriesMonthly)
from stock_data_agg.schemas.users import (AddFavoriteRequest, FavoriteRead,
                                          UserRead)

__all__ = [
    "AddFavoriteRequest",
    "CompanyOverview",
    "FavoriteRead",
    "GlobalQuote",
    "MetaData",
    "MonthlyData",
    "PricePoint",
    "StockSummary",
    "TimeSeriesMonthly",
    "UserRead",
]
