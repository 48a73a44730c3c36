"""Service layer: provider orchestration, exception-to-HTTP mapping and favorites."""
from stock_data_agg.services.favorites import (DuplicateFavoriteError,
                                               FavoriteNotFoundError,
                                               FavoritesError,
                                               FavoritesService,
                                               UserNotFoundError)
from stock_data_agg.services.provider_factory import (create_stock_provider,
                                                      create_stock_service)
from stock_data_agg.services.stock_service import StockService

__all__ = [
    "DuplicateFavoriteError",
    "FavoriteNotFoundError",
    "FavoritesError",
    "FavoritesService",
    "StockService",
    "UserNotFoundError",
    "create_stock_provider",
    "create_stock_service",
]
