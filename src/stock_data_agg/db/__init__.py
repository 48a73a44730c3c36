"""Database package: models, session management and repository."""
from stock_data_agg.db.models import FavoriteStock, User
from stock_data_agg.db.repository import FavoritesRepository

__all__ = ["FavoriteStock", "FavoritesRepository", "User"]
