"""Single-table CRUD access for users and their favorite stocks."""
from uuid import UUID

from sqlmodel import Session, select

from stock_data_agg.db.models import FavoriteStock, User


class FavoritesRepository:
    """Queries over the user and favorite_stock tables within one session."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_users(self) -> list[User]:
        return list(self._session.exec(select(User).order_by(User.created_at)))

    def get_user(self, user_id: UUID) -> User | None:
        return self._session.get(User, user_id)

    def list_favorites(self, user_id: UUID) -> list[FavoriteStock]:
        statement = (
            select(FavoriteStock)
            .where(FavoriteStock.user_id == user_id)
            .order_by(FavoriteStock.added_at)
        )
        return list(self._session.exec(statement))

    def find_favorite(self, user_id: UUID, symbol: str) -> FavoriteStock | None:
        statement = select(FavoriteStock).where(
            FavoriteStock.user_id == user_id, FavoriteStock.symbol == symbol
        )
        return self._session.exec(statement).first()

    def add_favorite(self, favorite: FavoriteStock) -> FavoriteStock:
        """Insert and flush so the (user_id, symbol) constraint is checked now."""
        self._session.add(favorite)
        self._session.flush()
        return favorite

    def delete_favorite(self, favorite: FavoriteStock) -> None:
        self._session.delete(favorite)
        self._session.flush()
