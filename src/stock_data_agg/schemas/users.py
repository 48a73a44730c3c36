"""Request/response schemas for users and their favorite stocks."""
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UserRead(BaseModel):
    """Representation of a registered user."""

    model_config = ConfigDict(
        from_attributes=True, populate_by_name=True, alias_generator=to_camel
    )

    id: UUID
    username: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    created_at: datetime
    updated_at: datetime


class FavoriteRead(BaseModel):
    """A symbol a user has favorited."""

    model_config = ConfigDict(
        from_attributes=True, populate_by_name=True, alias_generator=to_camel
    )

    symbol: str
    added_at: datetime


class AddFavoriteRequest(BaseModel):
    """Body of POST /api/users/{user_id}/favorites."""

    symbol: str = Field(min_length=1, max_length=16, examples=["AAPL"])
