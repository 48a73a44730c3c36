"""CLI to exercise the stock_data_agg API and the upstream providers.

Usage:
  stock-data-cli health
  stock-data-cli stock quote AAPL
  stock-data-cli stock summary AAPL
  stock-data-cli favorites add <user-id> AAPL
  stock-data-cli provider summary AAPL --provider alphavantage
"""
import argparse
import asyncio
import json
import sys

import httpx

STOCK_ROUTES = {
    "quote": "/api/stock/global-quote",
    "overview": "/api/stock/company-overview",
    "series": "/api/stock/monthly-time-series",
    "summary": "/api/stock/summary",
}


def print_json(data: object) -> None:
    print(json.dumps(data, indent=2, default=str))


def cmd_health(client: httpx.Client, _: argparse.Namespace) -> int:
    r = client.get("/")
    r.raise_for_status()
    print_json(r.json())
    return 0


def cmd_stock(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.get(STOCK_ROUTES[args.stock_cmd], params={"symbol": args.symbol})
    r.raise_for_status()
    print_json(r.json())
    return 0


def cmd_users_list(client: httpx.Client, _: argparse.Namespace) -> int:
    r = client.get("/api/users")
    r.raise_for_status()
    data = r.json()
    print(f"Found {len(data)} users")
    print_json(data)
    return 0


def cmd_favorites_list(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.get(f"/api/users/{args.user_id}/favorites")
    r.raise_for_status()
    print_json(r.json())
    return 0


def cmd_favorites_add(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.post(f"/api/users/{args.user_id}/favorites", json={"symbol": args.symbol})
    r.raise_for_status()
    print(f"Added {args.symbol.upper()} ({r.status_code})")
    return 0


def cmd_favorites_remove(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.delete(f"/api/users/{args.user_id}/favorites/{args.symbol}")
    r.raise_for_status()
    print(f"Removed {args.symbol.upper()} ({r.status_code})")
    return 0


def cmd_provider(_client: httpx.Client | None, args: argparse.Namespace) -> int:
    """Call a provider directly (no server) and print the canonical model."""
    from stock_data_agg.providers.core import ProviderError
    from stock_data_agg.services import create_stock_provider

    async def run() -> None:
        async with create_stock_provider(args.provider) as provider:
            fetch = {
                "quote": provider.get_quote,
                "overview": provider.get_company_overview,
                "series": provider.get_monthly_time_series,
                "summary": provider.get_summary,
            }[args.provider_cmd]
            model = await fetch(args.symbol)
            print_json(model.model_dump(mode="json", by_alias=True))

    try:
        asyncio.run(run())
    except ProviderError as e:
        print(f"{type(e).__name__} ({e.operation}): {e}", file=sys.stderr)
        return 1
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Exercise stock_data_agg API routes and upstream providers.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--base-url",
        default="http://localhost:8000",
        help="API base URL (default: http://localhost:8000)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Request timeout in seconds (default: 30)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command")

    # health
    subparsers.add_parser("health", help="GET / health check")

    # stock
    stock = subparsers.add_parser("stock", help="Stock routes (/api/stock)")
    stock_sub = stock.add_subparsers(dest="stock_cmd", required=True)
    for name, route in STOCK_ROUTES.items():
        p = stock_sub.add_parser(name, help=f"GET {route}")
        p.add_argument("symbol", help="Ticker (e.g. AAPL, MSFT)")

    # users
    users = subparsers.add_parser("users", help="User routes (/api/users)")
    users_sub = users.add_subparsers(dest="users_cmd", required=True)
    users_sub.add_parser("list", help="GET /api/users")

    # favorites
    favorites = subparsers.add_parser("favorites", help="Favorite routes (/api/users/{id}/favorites)")
    favorites_sub = favorites.add_subparsers(dest="favorites_cmd", required=True)
    p = favorites_sub.add_parser("list", help="GET /api/users/{id}/favorites")
    p.add_argument("user_id", help="User UUID")
    for name, help_text in [
        ("add", "POST /api/users/{id}/favorites"),
        ("remove", "DELETE /api/users/{id}/favorites/{symbol}"),
    ]:
        p = favorites_sub.add_parser(name, help=help_text)
        p.add_argument("user_id", help="User UUID")
        p.add_argument("symbol", help="Ticker")

    # provider (direct upstream calls; no server required)
    provider_parser = subparsers.add_parser(
        "provider", help="Call the upstream provider directly and print canonical JSON"
    )
    provider_sub = provider_parser.add_subparsers(dest="provider_cmd", required=True)
    for name in STOCK_ROUTES:
        p = provider_sub.add_parser(name, help=f"Provider {name}")
        p.add_argument("symbol", help="Ticker")
        p.add_argument(
            "--provider",
            default=None,
            choices=["twelvedata", "alphavantage"],
            help="Provider (default: STOCK_DATA_PROVIDER env var or twelvedata)",
        )

    args = parser.parse_args()
    base_url = args.base_url.rstrip("/")

    handlers = {
        "health": cmd_health,
        "stock": cmd_stock,
        "users": {"list": cmd_users_list},
        "favorites": {
            "list": cmd_favorites_list,
            "add": cmd_favorites_add,
            "remove": cmd_favorites_remove,
        },
    }

    cmd = args.command
    if cmd == "provider":
        return cmd_provider(None, args)
    handler = handlers[cmd]
    if isinstance(handler, dict):
        handler = handler[getattr(args, f"{cmd}_cmd")]

    try:
        with httpx.Client(base_url=base_url, timeout=args.timeout) as client:
            return handler(client, args)
    except httpx.HTTPStatusError as e:
        print(f"HTTP error: {e.response.status_code}", file=sys.stderr)
        if e.response.content:
            try:
                print(e.response.json(), file=sys.stderr)
            except ValueError:
                print(e.response.text, file=sys.stderr)
        return 1
    except httpx.RequestError as e:
        print(f"Request error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
