"""lemon.markets market data client: instruments, venues and historical prices."""
from collections.abc import AsyncIterator

from lemon_markets.clients.core import LemonClientABC, StreamItem
from lemon_markets.clients.core.stream_helpers import DEFAULT_BUFFER_SIZE
from lemon_markets.clients.core.transport import DEFAULT_TIMEOUT, Transport
from lemon_markets.clients.market_data.dto import OHLC, Instrument, Quote, Trade, Venue
from lemon_markets.clients.market_data.models import (InstrumentsQuery,
                                                      OHLCInterval, OHLCQuery,
                                                      QuotesQuery, TradesQuery,
                                                      VenuesQuery)
from lemon_markets.config import Environment, Settings


class MarketDataClient(LemonClientABC):
    """Client for https://data.lemon.markets.

    Every endpoint is a list endpoint and returns a lazy stream of
    ``Ok(record)`` items, ending with at most one ``Err``.
    """

    api_name = "lemon.markets market data"

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str = Environment.DATA.value,
        timeout: float = DEFAULT_TIMEOUT,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        transport: Transport | None = None,
    ) -> None:
        super().__init__(
            api_key,
            base_url=base_url,
            timeout=timeout,
            buffer_size=buffer_size,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "MarketDataClient":
        return cls(settings.api_key, timeout=settings.timeout, buffer_size=settings.buffer_size)

    def get_instruments(
        self, query: InstrumentsQuery | None = None
    ) -> AsyncIterator[StreamItem[Instrument]]:
        """Stream instruments, e.g. ``InstrumentsQuery(search="tesla")``."""
        return self._stream(Instrument, "instruments", query)

    def get_venues(
        self, query: VenuesQuery | None = None
    ) -> AsyncIterator[StreamItem[Venue]]:
        return self._stream(Venue, "venues", query)

    def get_quotes(
        self, query: QuotesQuery | None = None
    ) -> AsyncIterator[StreamItem[Quote]]:
        """Stream quotes (bid/ask) for the requested ISINs."""
        return self._stream(Quote, "quotes", query)

    def get_ohlc(
        self, interval: OHLCInterval | str, query: OHLCQuery | None = None
    ) -> AsyncIterator[StreamItem[OHLC]]:
        """Stream OHLC bars aggregated per minute (m1), hour (h1) or day (d1)."""
        interval = OHLCInterval(interval)
        return self._stream(OHLC, f"ohlc/{interval.value}", query)

    def get_ohlc_per_minute(
        self, query: OHLCQuery | None = None
    ) -> AsyncIterator[StreamItem[OHLC]]:
        return self.get_ohlc(OHLCInterval.PER_MINUTE, query)

    def get_ohlc_per_hour(
        self, query: OHLCQuery | None = None
    ) -> AsyncIterator[StreamItem[OHLC]]:
        return self.get_ohlc(OHLCInterval.PER_HOUR, query)

    def get_ohlc_per_day(
        self, query: OHLCQuery | None = None
    ) -> AsyncIterator[StreamItem[OHLC]]:
        return self.get_ohlc(OHLCInterval.PER_DAY, query)

    def get_trades(
        self, query: TradesQuery | None = None
    ) -> AsyncIterator[StreamItem[Trade]]:
        return self._stream(Trade, "trades", query)
