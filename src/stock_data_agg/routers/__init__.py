"""API routers.

Includes routes for:
- /api/stock - Quotes, company overview, monthly history and summary
- /api/users - Users and their favorite stocks
"""
from stock_data_agg.routers.stocks import router as stocks_router
from stock_data_agg.routers.users import router as users_router

__all__ = ["stocks_router", "users_router"]
