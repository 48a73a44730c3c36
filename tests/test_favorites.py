"""
Tests for users and favorite stocks.

Tests cover:
- FavoritesService add/list/remove semantics
- Duplicate and not-found handling
- /api/users routes and status codes
"""

from uuid import uuid4

import pytest
from sqlmodel import Session, select

from stock_data_agg.db import FavoriteStock
from stock_data_agg.services import (DuplicateFavoriteError,
                                     FavoriteNotFoundError, FavoritesService,
                                     UserNotFoundError)


# =============================================================
# TEST: FavoritesService
# =============================================================

class TestFavoritesService:
    """Favorites CRUD against SQLite."""

    def test_add_and_list(self, session, user):
        service = FavoritesService(session)
        service.add_favorite(user.id, " aapl ")
        service.add_favorite(user.id, "MSFT")
        session.commit()

        assert [f.symbol for f in service.get_user_favorites(user.id)] == ["AAPL", "MSFT"]

    def test_duplicate_is_rejected(self, session, user):
        service = FavoritesService(session)
        service.add_favorite(user.id, "AAPL")
        session.commit()

        with pytest.raises(DuplicateFavoriteError, match="Stock already favorited"):
            service.add_favorite(user.id, "aapl")

    def test_same_symbol_for_different_users(self, session, user):
        from stock_data_agg.db import User

        other = User(username="other", email="other@example.com")
        session.add(other)
        session.commit()

        service = FavoritesService(session)
        service.add_favorite(user.id, "AAPL")
        service.add_favorite(other.id, "AAPL")
        session.commit()

        assert len(session.exec(select(FavoriteStock)).all()) == 2

    def test_unknown_user(self, session):
        service = FavoritesService(session)
        with pytest.raises(UserNotFoundError):
            service.add_favorite(uuid4(), "AAPL")
        with pytest.raises(UserNotFoundError):
            service.get_user_favorites(uuid4())

    def test_remove(self, session, user):
        service = FavoritesService(session)
        service.add_favorite(user.id, "AAPL")
        session.commit()

        service.remove_favorite(user.id, "aapl")
        session.commit()
        assert service.get_user_favorites(user.id) == []

    def test_remove_missing(self, session, user):
        service = FavoritesService(session)
        with pytest.raises(FavoriteNotFoundError):
            service.remove_favorite(user.id, "AAPL")
        with pytest.raises(FavoriteNotFoundError):
            service.remove_favorite(uuid4(), "AAPL")


class TestTimestamps:
    """Timestamp defaults are timezone-aware and persist."""

    def test_user_insert(self, session):
        from stock_data_agg.db import User

        u = User(username="tz", email="tz@example.com")
        assert u.created_at.tzinfo is not None
        assert u.updated_at.tzinfo is not None

        session.add(u)
        session.commit()
        assert session.get(User, u.id) is not None

    def test_favorite_insert(self, session, user):
        favorite = FavoritesService(session).add_favorite(user.id, "AAPL")
        assert favorite.added_at.tzinfo is not None

        session.commit()
        assert len(session.exec(select(FavoriteStock)).all()) == 1


# =============================================================
# TEST: /api/users routes
# =============================================================

class TestUserRoutes:
    """HTTP surface of the favorites subsystem."""

    def test_list_users(self, api_client, user):
        response = api_client.get("/api/users")

        assert response.status_code == 200
        body = response.json()
        assert len(body) == 1
        assert body[0]["id"] == str(user.id)
        assert body[0]["username"] == "jdoe"
        assert body[0]["firstName"] == "Jane"
        assert "createdAt" in body[0]

    def test_favorites_lifecycle(self, api_client, user, db_engine):
        url = f"/api/users/{user.id}/favorites"

        assert api_client.post(url, json={"symbol": "aapl"}).status_code == 201
        assert api_client.post(url, json={"symbol": "MSFT"}).status_code == 201

        listed = api_client.get(url)
        assert listed.status_code == 200
        assert [f["symbol"] for f in listed.json()] == ["AAPL", "MSFT"]
        assert "addedAt" in listed.json()[0]

        assert api_client.delete(f"{url}/aapl").status_code == 204
        with Session(db_engine) as s:
            remaining = s.exec(select(FavoriteStock.symbol)).all()
        assert remaining == ["MSFT"]

    def test_duplicate_is_400(self, api_client, user):
        url = f"/api/users/{user.id}/favorites"
        api_client.post(url, json={"symbol": "AAPL"})

        response = api_client.post(url, json={"symbol": "AAPL"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Stock already favorited"

    def test_unknown_user_is_404(self, api_client):
        url = f"/api/users/{uuid4()}/favorites"

        assert api_client.get(url).status_code == 404
        assert api_client.post(url, json={"symbol": "AAPL"}).status_code == 404

    def test_remove_missing_is_404(self, api_client, user):
        response = api_client.delete(f"/api/users/{user.id}/favorites/AAPL")
        assert response.status_code == 404

    def test_invalid_body_is_422(self, api_client, user):
        response = api_client.post(f"/api/users/{user.id}/favorites", json={"symbol": ""})
        assert response.status_code == 422

    def test_invalid_user_id_is_422(self, api_client):
        assert api_client.get("/api/users/not-a-uuid/favorites").status_code == 422
