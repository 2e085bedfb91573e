"""Tests for MarketDataClient endpoints against a mocked HTTP layer."""
from datetime import datetime, timezone

import httpx
import pytest
from conftest import envelope_json

from lemon_markets.clients.core import collect
from lemon_markets.clients.market_data import (OHLC, InstrumentsQuery,
                                               MarketDataClient, OHLCInterval,
                                               OHLCQuery, QuotesQuery, Trade)
from lemon_markets.config import Environment

INSTRUMENT = {
    "isin": "US88160R1014",
    "wkn": "A1CX3T",
    "name": "TESLA INC. DL -,001",
    "title": "TESLA INC.",
    "symbol": "TL0",
    "type": "stock",
    "venues": [
        {
            "name": "Börse München - Gettex",
            "title": "Gettex",
            "mic": "XMUN",
            "is_open": True,
            "tradable": True,
            "currency": "EUR",
        }
    ],
}

BAR = {
    "isin": "US88160R1014",
    "o": 921.1,
    "h": 930.0,
    "l": 915.5,
    "c": 924.2,
    "v": 1200,
    "t": "2022-02-14T00:00:00.000+00:00",
    "mic": "XMUN",
}


def recording(responses: list[httpx.Response], seen: list[httpx.Request]):
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return responses[len(seen) - 1]

    return handler


class TestInstruments:
    @pytest.mark.asyncio
    async def test_search_and_venues(self, mock_transport):
        seen: list[httpx.Request] = []
        handler = recording([httpx.Response(200, json=envelope_json([INSTRUMENT]))], seen)
        client = MarketDataClient(transport=mock_transport(handler))

        [instrument] = await collect(client.get_instruments(InstrumentsQuery(search="tesla")))

        assert instrument.symbol == "TL0"
        assert instrument.venues[0].mic == "XMUN"
        assert instrument.venues[0].is_open is True
        assert seen[0].url.path == "/v1/instruments"
        assert seen[0].url.query == b"search=tesla"

    @pytest.mark.asyncio
    async def test_pages_are_concatenated(self, mock_transport):
        seen: list[httpx.Request] = []
        next_url = "https://api.test/v1/instruments?page=2"
        handler = recording(
            [
                httpx.Response(200, json=envelope_json([INSTRUMENT], next_url)),
                httpx.Response(200, json=envelope_json([{**INSTRUMENT, "isin": "US0378331005"}])),
            ],
            seen,
        )
        client = MarketDataClient(transport=mock_transport(handler))

        instruments = await collect(client.get_instruments())

        assert [i.isin for i in instruments] == ["US88160R1014", "US0378331005"]
        assert str(seen[1].url) == next_url


class TestHistorical:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method_name, path",
        [
            ("get_ohlc_per_minute", "/v1/ohlc/m1"),
            ("get_ohlc_per_hour", "/v1/ohlc/h1"),
            ("get_ohlc_per_day", "/v1/ohlc/d1"),
        ],
    )
    async def test_ohlc_interval_paths(self, mock_transport, method_name, path):
        seen: list[httpx.Request] = []
        handler = recording([httpx.Response(200, json=envelope_json([BAR]))], seen)
        client = MarketDataClient(transport=mock_transport(handler))

        [bar] = await collect(getattr(client, method_name)(OHLCQuery(isin=["US88160R1014"])))

        assert isinstance(bar, OHLC)
        assert (bar.open, bar.high, bar.low, bar.close, bar.volume) == (921.1, 930.0, 915.5, 924.2, 1200)
        assert seen[0].url.path == path

    @pytest.mark.asyncio
    async def test_ohlc_query_string(self, mock_transport):
        seen: list[httpx.Request] = []
        handler = recording([httpx.Response(200, json=envelope_json([]))], seen)
        client = MarketDataClient(transport=mock_transport(handler))
        query = OHLCQuery(
            isin=["US88160R1014"],
            from_=datetime(2022, 1, 3, tzinfo=timezone.utc),
        )

        assert await collect(client.get_ohlc(OHLCInterval.PER_DAY, query)) == []
        assert seen[0].url.params.get_list("isin") == ["US88160R1014"]
        assert seen[0].url.params["from"] == "2022-01-03T00:00:00Z"

    def test_unknown_interval_is_rejected(self):
        client = MarketDataClient("key")

        with pytest.raises(ValueError):
            client.get_ohlc("w1")

    @pytest.mark.asyncio
    async def test_quotes_with_repeated_isin(self, mock_transport):
        seen: list[httpx.Request] = []
        quote = {"isin": "US88160R1014", "b_v": 10, "a_v": 12, "bid": 921.1, "ask": 924.2, "mic": "XMUN"}
        handler = recording([httpx.Response(200, json=envelope_json([quote]))], seen)
        client = MarketDataClient(transport=mock_transport(handler))

        [record] = await collect(client.get_quotes(QuotesQuery(isin=["US88160R1014", "US0378331005"])))

        assert record.bid_volume == 10
        assert seen[0].url.path == "/v1/quotes"
        assert seen[0].url.query == b"isin=US88160R1014&isin=US0378331005"

    @pytest.mark.asyncio
    async def test_trades(self, mock_transport):
        seen: list[httpx.Request] = []
        trade = {"isin": "US88160R1014", "p": 924.2, "v": 3, "t": "2022-02-14T10:00:00.000+00:00", "mic": "XMUN"}
        handler = recording([httpx.Response(200, json=envelope_json([trade]))], seen)
        client = MarketDataClient(transport=mock_transport(handler))

        [record] = await collect(client.get_trades())

        assert record == Trade(isin="US88160R1014", p=924.2, v=3, t=datetime(2022, 2, 14, 10, tzinfo=timezone.utc), mic="XMUN")
        assert seen[0].url.path == "/v1/trades"

    @pytest.mark.asyncio
    async def test_venues(self, mock_transport):
        seen: list[httpx.Request] = []
        handler = recording([httpx.Response(200, json=envelope_json([INSTRUMENT["venues"][0]]))], seen)
        client = MarketDataClient(transport=mock_transport(handler))

        [venue] = await collect(client.get_venues())

        assert venue.currency == "EUR"
        assert seen[0].url.path == "/v1/venues"


def test_default_base_url():
    assert MarketDataClient("key").transport.base_url == Environment.DATA.value
