"""User and favorite-stock routes."""
from uuid import UUID

from fastapi import APIRouter, HTTPException, Response, status

from stock_data_agg.deps import FavoritesServiceDep
from stock_data_agg.schemas import AddFavoriteRequest, FavoriteRead, UserRead
from stock_data_agg.services import (DuplicateFavoriteError,
                                     FavoriteNotFoundError, UserNotFoundError)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[UserRead])
def get_all_users(service: FavoritesServiceDep) -> list[UserRead]:
    """Return all registered users."""
    return [UserRead.model_validate(u) for u in service.list_users()]


@router.get("/{user_id}/favorites", response_model=list[FavoriteRead], tags=["favorites"])
def get_user_favorites(user_id: UUID, service: FavoritesServiceDep) -> list[FavoriteRead]:
    """Return the stocks a user has favorited."""
    try:
        favorites = service.get_user_favorites(user_id)
    except UserNotFoundError as e:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return [FavoriteRead.model_validate(f) for f in favorites]


@router.post(
    "/{user_id}/favorites",
    status_code=status.HTTP_201_CREATED,
    tags=["favorites"],
)
def add_favorite(
    user_id: UUID, request: AddFavoriteRequest, service: FavoritesServiceDep
) -> Response:
    """Add a stock to the user's favorites. 400 if it is already there."""
    try:
        service.add_favorite(user_id, request.symbol)
    except UserNotFoundError as e:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except DuplicateFavoriteError as e:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return Response(status_code=status.HTTP_201_CREATED)


@router.delete(
    "/{user_id}/favorites/{symbol}",
    status_code=status.HTTP_204_NO_CONTENT,
    tags=["favorites"],
)
def remove_favorite(user_id: UUID, symbol: str, service: FavoritesServiceDep) -> Response:
    """Remove a stock from the user's favorites."""
    try:
        service.remove_favorite(user_id, symbol)
    except FavoriteNotFoundError as e:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
