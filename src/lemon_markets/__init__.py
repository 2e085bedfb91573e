"""Async client for the lemon.markets brokerage API.

Three clients share one transport and pagination engine:

- TradingClient: account, withdrawals, documents, orders and positions
- MarketDataClient: instruments, venues, quotes, OHLC and trades
- StreamingClient: tokens for the realtime quote stream

List endpoints return lazy streams of ``Ok``/``Err`` items that follow the
server's cursor chain page by page.

Example:
    async with TradingClient(api_key, Environment.PAPER) as client:
        async for item in client.get_positions():
            if not item.ok:
                raise item.error
            print(item.value.isin, item.value.quantity)
"""
from lemon_markets.clients.core import (ConfigError, DecodeError, DomainError,
                                        Err, LemonMarketsError, Ok, StreamItem,
                                        TransportError, collect, iter_records)
from lemon_markets.clients.market_data import MarketDataClient
from lemon_markets.clients.streaming import StreamingClient
from lemon_markets.clients.trading import TradingClient
from lemon_markets.config import Environment, Settings

__all__ = [
    "TradingClient",
    "MarketDataClient",
    "StreamingClient",
    "Environment",
    "Settings",
    "Ok",
    "Err",
    "StreamItem",
    "collect",
    "iter_records",
    "LemonMarketsError",
    "ConfigError",
    "TransportError",
    "DomainError",
    "DecodeError",
]
