"""Tests for Transport request building and outcome classification."""
import json

import httpx
import pytest
from conftest import API_KEY, ERROR_BODY, envelope_json

from lemon_markets.clients.core import (DecodeError, DomainError,
                                        ResponseErrorMapper, TransportError)
from lemon_markets.clients.market_data import InstrumentsQuery
from lemon_markets.clients.trading import CreateOrder, Side


class TestRequestBuilding:
    """Headers, URLs, query strings and bodies sent on the wire."""

    @pytest.mark.asyncio
    async def test_bearer_credential_and_resolved_url(self, mock_transport):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=envelope_json([]))

        transport = mock_transport(handler)
        await transport.execute("GET", "orders")

        assert seen[0].headers["Authorization"] == f"Bearer {API_KEY}"
        assert str(seen[0].url) == "https://api.test/v1/orders"
        assert seen[0].url.query == b""

    @pytest.mark.asyncio
    async def test_only_non_empty_filters_reach_the_query_string(self, mock_transport):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=envelope_json([]))

        query = InstrumentsQuery(mic="XETR", isin=[], search="", limit=0)
        await mock_transport(handler).execute("GET", "instruments", query=query)

        assert seen[0].url.query == b"mic=XETR"

    @pytest.mark.asyncio
    async def test_full_cursor_locator_is_used_verbatim(self, mock_transport):
        seen: list[httpx.Request] = []
        cursor = "https://api.test/v1/orders?limit=1&page=2"

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=envelope_json([]))

        await mock_transport(handler).execute("GET", cursor)

        assert str(seen[0].url) == cursor

    @pytest.mark.asyncio
    async def test_model_body_is_sent_as_json_without_nulls(self, mock_transport):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=envelope_json({"id": "ord_1"}))

        order = CreateOrder(isin="US88160R1014", side=Side.BUY, quantity=2, venue="XMUN")
        await mock_transport(handler).execute("POST", "orders", body=order)

        assert seen[0].method == "POST"
        assert seen[0].headers["Content-Type"] == "application/json"
        assert json.loads(seen[0].content) == {
            "isin": "US88160R1014",
            "side": "buy",
            "quantity": 2,
            "venue": "XMUN",
        }


class TestOutcomes:
    """Classification of responses into envelopes and error kinds."""

    @pytest.mark.asyncio
    async def test_success_decodes_envelope(self, mock_transport):
        body = envelope_json([{"id": 1}], "https://api.test/v1/rows?page=2", total=2, pages=2)
        transport = mock_transport(lambda request: httpx.Response(200, json=body))

        envelope = await transport.execute("GET", "rows")

        assert envelope.results == [{"id": 1}]
        assert envelope.next_url == "https://api.test/v1/rows?page=2"
        assert envelope.previous_url == ""
        assert envelope.has_next
        assert envelope.total == 2
        assert envelope.status == "ok"

    @pytest.mark.asyncio
    async def test_empty_body_is_an_empty_envelope(self, mock_transport):
        transport = mock_transport(lambda request: httpx.Response(204))

        envelope = await transport.execute("DELETE", "orders/ord_1")

        assert envelope.results is None
        assert not envelope.has_next

    @pytest.mark.asyncio
    async def test_400_is_a_domain_error_with_server_message(self, mock_transport):
        transport = mock_transport(lambda request: httpx.Response(400, json=ERROR_BODY))

        with pytest.raises(DomainError) as excinfo:
            await transport.execute("GET", "orders/ord_missing")

        error = excinfo.value
        assert str(error) == "Order not found"
        assert error.code == "order_not_found"
        assert error.mode == "paper"
        assert error.status == "error"
        assert error.time is not None

    @pytest.mark.asyncio
    async def test_400_with_undecodable_body_is_a_transport_error(self, mock_transport):
        transport = mock_transport(lambda request: httpx.Response(400, text="bad request"))

        with pytest.raises(TransportError) as excinfo:
            await transport.execute("GET", "orders")

        assert excinfo.value.status_code == 400

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [401, 404, 429, 500, 503])
    async def test_other_status_is_a_transport_error(self, mock_transport, status):
        transport = mock_transport(lambda request: httpx.Response(status, json=ERROR_BODY))

        with pytest.raises(TransportError) as excinfo:
            await transport.execute("GET", "orders")

        assert excinfo.value.status_code == status
        assert not isinstance(excinfo.value, DomainError)

    @pytest.mark.asyncio
    async def test_connection_failure_is_a_transport_error(self, mock_transport):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TransportError) as excinfo:
            await mock_transport(handler).execute("GET", "orders")

        assert excinfo.value.status_code is None
        assert isinstance(excinfo.value.cause, httpx.ConnectError)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "locator",
        ["https://exa\tmple.com/x", "http://[::1/rows", "https://api.test/v1/rows\x00?page=2"],
    )
    async def test_malformed_locator_is_a_transport_error(self, mock_transport, locator):
        transport = mock_transport(lambda request: httpx.Response(200, json=envelope_json([])))

        with pytest.raises(TransportError) as excinfo:
            await transport.execute("GET", locator)

        assert isinstance(excinfo.value.cause, httpx.InvalidURL)
        assert excinfo.value.status_code is None

    @pytest.mark.asyncio
    async def test_timeout_is_a_transport_error(self, mock_transport):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("read timed out", request=request)

        with pytest.raises(TransportError, match="timed out") as excinfo:
            await mock_transport(handler).execute("GET", "orders")

        assert isinstance(excinfo.value.cause, httpx.ReadTimeout)

    @pytest.mark.asyncio
    async def test_non_json_success_body_is_a_transport_error(self, mock_transport):
        transport = mock_transport(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(TransportError):
            await transport.execute("GET", "orders")

    @pytest.mark.asyncio
    async def test_json_that_is_not_an_envelope_is_a_decode_error(self, mock_transport):
        transport = mock_transport(lambda request: httpx.Response(200, json=[1, 2, 3]))

        with pytest.raises(DecodeError):
            await transport.execute("GET", "orders")


class TestErrorMapper:
    def test_timeout_message(self):
        mapper = ResponseErrorMapper(api_name="lemon.markets trading")

        error = mapper.from_exception(httpx.ReadTimeout("slow"), "https://api.test/v1/orders")

        assert "timed out" in str(error)
        assert "https://api.test/v1/orders" in str(error)

    def test_success_range(self):
        mapper = ResponseErrorMapper()

        assert mapper.is_success(httpx.Response(200))
        assert mapper.is_success(httpx.Response(204))
        assert not mapper.is_success(httpx.Response(301))
        assert not mapper.is_success(httpx.Response(400))


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_close_leaves_injected_client_open(self, mock_transport):
        transport = mock_transport(lambda request: httpx.Response(200, json=envelope_json([])))

        await transport.close()

        envelope = await transport.execute("GET", "orders")
        assert envelope.results == []
