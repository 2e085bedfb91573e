"""Shared fixtures: an in-memory envelope transport and httpx mock transports."""
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from lemon_markets.clients.core import Envelope, Transport
from lemon_markets.schemas import Record

BASE_URL = "https://api.test/v1"
API_KEY = "test-key"


class Row(Record):
    """Minimal record used by engine tests."""

    id: int


class FakeTransport:
    """Serves canned envelopes (or raises canned errors) keyed by endpoint.

    Every call is recorded as ``(method, endpoint, query, body)``.
    """

    def __init__(self, responses: dict[str, Envelope | Exception]) -> None:
        self.responses = responses
        self.calls: list[tuple[str, str, Any, Any]] = []

    async def execute(self, method, endpoint, query=None, body=None) -> Envelope:
        self.calls.append((method, endpoint, query, body))
        response = self.responses[endpoint]
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def endpoints(self) -> list[str]:
        return [endpoint for _, endpoint, _, _ in self.calls]


def page(ids: list[int], next_url: str = "", **extra: Any) -> Envelope:
    """Envelope whose results are ``[{"id": i}, ...]``."""
    return Envelope.model_validate(
        {"results": [{"id": i} for i in ids], "next": next_url, **extra}
    )


@pytest.fixture
def mock_transport() -> Callable[..., Transport]:
    """Factory for a Transport whose HTTP client is served by ``handler``."""

    def build(handler: Callable[[httpx.Request], httpx.Response]) -> Transport:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return Transport(BASE_URL, API_KEY, client=client)

    return build


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove lemon.markets variables so tests see an empty environment."""
    for key in ("LEMON_API_KEY", "LEMON_ENVIRONMENT", "LEMON_TIMEOUT"):
        monkeypatch.delenv(key, raising=False)


def envelope_json(results: Any, next_url: str | None = None, **extra: Any) -> dict[str, Any]:
    return {
        "time": "2022-02-14T20:44:03.759+00:00",
        "status": "ok",
        "mode": "paper",
        "results": results,
        "previous": None,
        "next": next_url,
        "total": extra.pop("total", 0),
        "page": extra.pop("page", 1),
        "pages": extra.pop("pages", 1),
        **extra,
    }


ERROR_BODY = {
    "time": "2022-02-14T20:44:03.759+00:00",
    "mode": "paper",
    "status": "error",
    "error_code": "order_not_found",
    "error_message": "Order not found",
}
