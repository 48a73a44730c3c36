"""Tests for the stock-data-cli command handlers."""

import argparse
import json

import httpx

from stock_data_agg.cli.api_cli import (cmd_favorites_add, cmd_stock,
                                        cmd_users_list)


def make_client(handler) -> httpx.Client:
    return httpx.Client(base_url="http://api.test", transport=httpx.MockTransport(handler))


class TestCommands:
    """Handlers call the right routes and print JSON."""

    def test_stock_summary(self, capsys):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"symbol": "AAPL", "price": 168.22})

        with make_client(handler) as client:
            code = cmd_stock(client, argparse.Namespace(stock_cmd="summary", symbol="AAPL"))

        assert code == 0
        assert seen[0].url.path == "/api/stock/summary"
        assert seen[0].url.params["symbol"] == "AAPL"
        assert json.loads(capsys.readouterr().out)["price"] == 168.22

    def test_users_list(self, capsys):
        with make_client(lambda request: httpx.Response(200, json=[{"username": "jdoe"}])) as client:
            assert cmd_users_list(client, argparse.Namespace()) == 0
        assert "Found 1 users" in capsys.readouterr().out

    def test_favorites_add_posts_symbol(self, capsys):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(201)

        with make_client(handler) as client:
            cmd_favorites_add(client, argparse.Namespace(user_id="u-1", symbol="msft"))

        assert seen[0].method == "POST"
        assert seen[0].url.path == "/api/users/u-1/favorites"
        assert json.loads(seen[0].content) == {"symbol": "msft"}
        assert "Added MSFT" in capsys.readouterr().out
