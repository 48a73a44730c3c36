"""Favorites service: list users, and add/list/remove a user's favorite stocks."""
import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from stock_data_agg.db import FavoriteStock, FavoritesRepository, User
from stock_data_agg.providers.core.utils import normalize_stock_symbol

logger = logging.getLogger(__name__)


class FavoritesError(Exception):
    """Base class for favorites failures."""


class UserNotFoundError(FavoritesError):
    def __init__(self, user_id: UUID) -> None:
        super().__init__("User not found")
        self.user_id = user_id


class DuplicateFavoriteError(FavoritesError):
    def __init__(self, user_id: UUID, symbol: str) -> None:
        super().__init__("Stock already favorited")
        self.user_id = user_id
        self.symbol = symbol


class FavoriteNotFoundError(FavoritesError):
    def __init__(self, user_id: UUID, symbol: str) -> None:
        super().__init__("User or favorite not found")
        self.user_id = user_id
        self.symbol = symbol


class FavoritesService:
    """Favorites CRUD on top of FavoritesRepository.

    Symbols are stored normalized (trimmed, uppercase). Favorites are only ever
    created or deleted, never updated.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._repo = FavoritesRepository(session)

    def list_users(self) -> list[User]:
        return self._repo.list_users()

    def _require_user(self, user_id: UUID) -> User:
        user = self._repo.get_user(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def get_user_favorites(self, user_id: UUID) -> list[FavoriteStock]:
        """List a user's favorites, oldest first.

        Raises:
            UserNotFoundError: No such user.
        """
        self._require_user(user_id)
        return self._repo.list_favorites(user_id)

    def add_favorite(self, user_id: UUID, symbol: str) -> FavoriteStock:
        """Favorite symbol for user_id.

        Raises:
            UserNotFoundError: No such user.
            DuplicateFavoriteError: The user already favorited the symbol.
        """
        self._require_user(user_id)
        sym = normalize_stock_symbol(symbol)
        if self._repo.find_favorite(user_id, sym) is not None:
            raise DuplicateFavoriteError(user_id, sym)
        try:
            favorite = self._repo.add_favorite(FavoriteStock(user_id=user_id, symbol=sym))
        except IntegrityError as e:
            # A concurrent insert won the (user_id, symbol) constraint.
            self._session.rollback()
            raise DuplicateFavoriteError(user_id, sym) from e
        logger.info("User %s favorited %s", user_id, sym)
        return favorite

    def remove_favorite(self, user_id: UUID, symbol: str) -> None:
        """Remove a favorite.

        Raises:
            FavoriteNotFoundError: The user has no such favorite (or does not exist).
        """
        sym = normalize_stock_symbol(symbol)
        favorite = self._repo.find_favorite(user_id, sym)
        if favorite is None:
            raise FavoriteNotFoundError(user_id, sym)
        self._repo.delete_favorite(favorite)
        logger.info("User %s removed favorite %s", user_id, sym)
