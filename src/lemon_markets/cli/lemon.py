"""CLI to query the lemon.markets trading, market data and realtime APIs.

Reads LEMON_API_KEY, LEMON_ENVIRONMENT (paper/live) and LEMON_TIMEOUT.

Usage:
  poetry run lemon account
  poetry run lemon orders --status open --head 5
  poetry run lemon instruments --search tesla --limit 10
  poetry run lemon ohlc d1 US88160R1014 --from 2022-01-03
  poetry run lemon --verbose token
"""
import argparse
import asyncio
import contextlib
import json
import logging
import sys
from collections.abc import AsyncIterator, Awaitable, Callable
from datetime import datetime
from typing import Any

from pydantic import BaseModel

from lemon_markets.clients.core import (DomainError, LemonClientABC,
                                        LemonMarketsError, StreamItem)
from lemon_markets.clients.market_data import (InstrumentsQuery,
                                               MarketDataClient, OHLCInterval,
                                               OHLCQuery, QuotesQuery,
                                               TradesQuery)
from lemon_markets.clients.streaming import StreamingClient
from lemon_markets.clients.trading import (OrdersQuery, OrderStatus,
                                           PositionsQuery, TradingClient)
from lemon_markets.config import Settings

logger = logging.getLogger(__name__)

Handler = Callable[[Any, argparse.Namespace], Awaitable[int]]

CLIENT_FACTORIES: dict[str, Callable[[Settings], LemonClientABC]] = {
    "trading": TradingClient.from_settings,
    "market_data": MarketDataClient.from_settings,
    "streaming": StreamingClient.from_settings,
}


def print_json(data: object) -> None:
    print(json.dumps(data, indent=2, default=str))


def _dump(record: BaseModel) -> dict[str, Any]:
    return record.model_dump(mode="json", exclude_none=True)


async def _take(stream: AsyncIterator[StreamItem[Any]], head: int) -> list[Any]:
    """Collect up to ``head`` records (0 = all), raising the stream's error if any."""
    records: list[Any] = []
    async with contextlib.aclosing(stream):
        async for item in stream:
            records.append(item.unwrap())
            if head and len(records) >= head:
                break
    return records


async def _print_stream(stream: AsyncIterator[StreamItem[Any]], head: int, label: str) -> int:
    records = await _take(stream, head)
    print(f"Found {len(records)} {label}")
    print_json([_dump(r) for r in records])
    return 0


async def cmd_account(client: TradingClient, _: argparse.Namespace) -> int:
    print_json(_dump(await client.get_account()))
    return 0


async def cmd_orders(client: TradingClient, args: argparse.Namespace) -> int:
    query = OrdersQuery(status=args.status, isin=args.isin, limit=args.limit)
    return await _print_stream(client.get_orders(query), args.head, "orders")


async def cmd_order(client: TradingClient, args: argparse.Namespace) -> int:
    print_json(_dump(await client.get_order(args.order_id)))
    return 0


async def cmd_positions(client: TradingClient, args: argparse.Namespace) -> int:
    query = PositionsQuery(isin=args.isin)
    return await _print_stream(client.get_positions(query), args.head, "positions")


async def cmd_instruments(client: MarketDataClient, args: argparse.Namespace) -> int:
    query = InstrumentsQuery(
        search=args.search, isin=args.isin, mic=args.mic, limit=args.limit
    )
    return await _print_stream(client.get_instruments(query), args.head, "instruments")


async def cmd_venues(client: MarketDataClient, args: argparse.Namespace) -> int:
    return await _print_stream(client.get_venues(), args.head, "venues")


async def cmd_quotes(client: MarketDataClient, args: argparse.Namespace) -> int:
    query = QuotesQuery(isin=args.isins, mic=args.mic)
    return await _print_stream(client.get_quotes(query), args.head, "quotes")


async def cmd_ohlc(client: MarketDataClient, args: argparse.Namespace) -> int:
    query = OHLCQuery(isin=args.isins, mic=args.mic, from_=args.from_, to=args.to)
    stream = client.get_ohlc(OHLCInterval(args.interval), query)
    return await _print_stream(stream, args.head, "bars")


async def cmd_trades(client: MarketDataClient, args: argparse.Namespace) -> int:
    query = TradesQuery(isin=args.isins, mic=args.mic)
    return await _print_stream(client.get_trades(query), args.head, "trades")


async def cmd_token(client: StreamingClient, _: argparse.Namespace) -> int:
    print_json(_dump(await client.get_token()))
    return 0


COMMANDS: dict[str, tuple[str, Handler]] = {
    "account": ("trading", cmd_account),
    "orders": ("trading", cmd_orders),
    "order": ("trading", cmd_order),
    "positions": ("trading", cmd_positions),
    "instruments": ("market_data", cmd_instruments),
    "venues": ("market_data", cmd_venues),
    "quotes": ("market_data", cmd_quotes),
    "ohlc": ("market_data", cmd_ohlc),
    "trades": ("market_data", cmd_trades),
    "token": ("streaming", cmd_token),
}


async def _run(settings: Settings, args: argparse.Namespace) -> int:
    kind, handler = COMMANDS[args.command]
    client = CLIENT_FACTORIES[kind](settings)
    try:
        return await handler(client, args)
    finally:
        try:
            await client.close()
        except Exception as exc:
            logger.warning("Failed to close %s client: %s", kind, exc)


def _timestamp(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid ISO 8601 timestamp: {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lemon",
        description="Query the lemon.markets APIs.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command")

    # trading
    subparsers.add_parser("account", help="GET /account")
    p = subparsers.add_parser("orders", help="GET /orders")
    p.add_argument(
        "--status",
        action="append",
        default=None,
        choices=[s.value for s in OrderStatus],
        help="Order status (repeatable)",
    )
    p.add_argument("--isin", default=None, help="Filter by ISIN")
    p.add_argument("--limit", type=int, default=None, help="Page size")
    p.add_argument("--head", type=int, default=0, help="Show only first N (0 = all)")
    p = subparsers.add_parser("order", help="GET /orders/{order_id}")
    p.add_argument("order_id", help="Order ID (ord_...)")
    p = subparsers.add_parser("positions", help="GET /positions")
    p.add_argument("--isin", default=None, help="Filter by ISIN")
    p.add_argument("--head", type=int, default=0, help="Show only first N (0 = all)")

    # market data
    p = subparsers.add_parser("instruments", help="GET /instruments")
    p.add_argument("--search", default=None, help="Search by name, title, ISIN or WKN")
    p.add_argument("--isin", action="append", default=None, help="ISIN (repeatable)")
    p.add_argument("--mic", default=None, help="Venue MIC (e.g. XMUN)")
    p.add_argument("--limit", type=int, default=None, help="Page size")
    p.add_argument("--head", type=int, default=0, help="Show only first N (0 = all)")
    p = subparsers.add_parser("venues", help="GET /venues")
    p.add_argument("--head", type=int, default=0, help="Show only first N (0 = all)")
    for name in ("quotes", "trades"):
        p = subparsers.add_parser(name, help=f"GET /{name}")
        p.add_argument("isins", nargs="+", help="One or more ISINs")
        p.add_argument("--mic", default=None, help="Venue MIC")
        p.add_argument("--head", type=int, default=0, help="Show only first N (0 = all)")
    p = subparsers.add_parser("ohlc", help="GET /ohlc/{interval}")
    p.add_argument("interval", choices=[i.value for i in OHLCInterval], help="Bar size")
    p.add_argument("isins", nargs="+", help="One or more ISINs")
    p.add_argument("--mic", default=None, help="Venue MIC")
    p.add_argument("--from", dest="from_", type=_timestamp, default=None, help="Start (ISO 8601)")
    p.add_argument("--to", type=_timestamp, default=None, help="End (ISO 8601)")
    p.add_argument("--head", type=int, default=0, help="Show only first N (0 = all)")

    # realtime
    subparsers.add_parser("token", help="POST /auth (realtime token)")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = Settings.from_env()
        return asyncio.run(_run(settings, args))
    except DomainError as e:
        print(e.message, file=sys.stderr)
        return 1
    except LemonMarketsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nStopped by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
