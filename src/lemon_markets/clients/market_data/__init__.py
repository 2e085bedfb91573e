"""Market data client: instruments, venues, quotes, OHLC and trades."""
from lemon_markets.clients.market_data.dto import OHLC, Instrument, Quote, Trade, Venue
from lemon_markets.clients.market_data.market_data_client import MarketDataClient
from lemon_markets.clients.market_data.models import (InstrumentsQuery,
                                                      OHLCInterval, OHLCQuery,
                                                      QuotesQuery, TradesQuery,
                                                      VenuesQuery)

__all__ = [
    "MarketDataClient",
    "Instrument",
    "Venue",
    "Quote",
    "OHLC",
    "Trade",
    "InstrumentsQuery",
    "VenuesQuery",
    "QuotesQuery",
    "OHLCQuery",
    "OHLCInterval",
    "TradesQuery",
]
