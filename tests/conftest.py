"""Shared fixtures: fake upstream APIs, in-memory database, API client."""
import os

# Must be set before stock_data_agg.db.sessions builds its module-level engine.
os.environ["DATABASE_URL"] = "sqlite://"

from collections.abc import Callable  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

from stock_data_agg.db import User  # noqa: E402
from stock_data_agg.main import app  # noqa: E402

Route = dict | list | httpx.Response | Callable[[httpx.Request], httpx.Response]


class FakeUpstream:
    """httpx.MockTransport that answers by URL path and records every request."""

    def __init__(self, routes: dict[str, Route]) -> None:
        self.routes = routes
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"message": "not found"})
        if callable(route):
            return route(request)
        if isinstance(route, httpx.Response):
            return route
        return httpx.Response(200, json=route)

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def fake_upstream() -> Callable[[dict[str, Route]], FakeUpstream]:
    """Factory: fake_upstream({"/quote": {...}}) -> FakeUpstream."""
    return FakeUpstream


@pytest.fixture
def db_engine():
    """Fresh in-memory SQLite engine shared across threads (TestClient runs sync routes in a pool)."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(db_engine):
    with Session(db_engine) as s:
        yield s


@pytest.fixture
def user(db_engine) -> User:
    """A persisted user."""
    with Session(db_engine) as s:
        u = User(username="jdoe", email="jdoe@example.com", first_name="Jane", last_name="Doe")
        s.add(u)
        s.commit()
        s.refresh(u)
        s.expunge(u)
    return u


@pytest.fixture
def api_client(db_engine):
    """TestClient over the real app with state set by hand (lifespan is not run).

    Tests assign app.state.stock_service themselves when they need stock routes.
    """
    app.state.db_engine = db_engine
    client = TestClient(app)
    yield client
    for attr in ("stock_service", "db_engine"):
        if hasattr(app.state, attr):
            delattr(app.state, attr)
