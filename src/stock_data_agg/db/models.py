"""Database models for the stock data service.

Only user/application state is persisted. Market data is fetched on demand
from upstream providers and never stored.
"""
from datetime import datetime, timezone
from uuid import UUID, uuid4

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    """Timezone-aware current UTC time for timestamp columns."""
    return datetime.now(timezone.utc)


class User(SQLModel, table=True):
    """Registered user who can favorite stocks."""

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True)
    email: str = Field(unique=True, index=True)
    first_name: str | None = None
    last_name: str | None = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class FavoriteStock(SQLModel, table=True):
    """A symbol favorited by one user. (user_id, symbol) is unique."""

    __tablename__ = "favorite_stock"
    __table_args__ = (UniqueConstraint("user_id", "symbol"),)

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    symbol: str
    added_at: datetime = Field(default_factory=utc_now)
