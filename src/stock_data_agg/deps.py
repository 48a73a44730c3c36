"""FastAPI dependency injection: app.state holds singletons; Depends() resolves them.

No external DI container. Lifespan (main.py) creates the provider, the stock
service and the database engine once and attaches them to app.state; these
getters are used by Depends().
"""
from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Request
from sqlmodel import Session

from stock_data_agg.db.sessions import get_session
from stock_data_agg.services import FavoritesService, StockService


def get_stock_service(request: Request) -> StockService:
    """Resolve the StockService from app.state (created at startup)."""
    return request.app.state.stock_service


def get_db_session(request: Request) -> Generator[Session, None, None]:
    """Yield a session bound to the app's engine; commits when the request succeeds."""
    with get_session(request.app.state.db_engine) as session:
        yield session


def get_favorites_service(
    session: Annotated[Session, Depends(get_db_session)],
) -> FavoritesService:
    """Build a request-scoped FavoritesService over the request's session."""
    return FavoritesService(session)


# Type aliases for route injection
StockServiceDep = Annotated[StockService, Depends(get_stock_service)]
FavoritesServiceDep = Annotated[FavoritesService, Depends(get_favorites_service)]
