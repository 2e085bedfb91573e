"""Base class wiring a Transport to the pagination engine and single-item fetch."""
import os
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel

from lemon_markets.clients.core.decoder import PageDecoder
from lemon_markets.clients.core.error_mapper import ResponseErrorMapper
from lemon_markets.clients.core.exceptions import ConfigError
from lemon_markets.clients.core.fetch import fetch_one, send
from lemon_markets.clients.core.items import StreamItem
from lemon_markets.clients.core.query import QueryLike
from lemon_markets.clients.core.stream_helpers import DEFAULT_BUFFER_SIZE, paginate
from lemon_markets.clients.core.transport import DEFAULT_TIMEOUT, Transport

if TYPE_CHECKING:
    from lemon_markets.config import Settings


M = TypeVar("M", bound=BaseModel)

API_KEY_ENV = "LEMON_API_KEY"


class LemonClientABC(ABC):
    """Shared plumbing for the trading, market data and streaming clients.

    Subclasses only name endpoints and record models; every list endpoint goes
    through ``_stream`` and every single-resource endpoint through ``_fetch``.
    """

    api_name = "lemon.markets"

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        transport: Transport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: lemon.markets API key. Defaults to LEMON_API_KEY env var.
            base_url: Base URL of the API this client talks to.
            timeout: Request timeout in seconds.
            buffer_size: Hand-off queue capacity for paginated streams.
            transport: Pre-built transport (tests, shared connection pools).
        """
        if transport is None:
            key = api_key or os.getenv(API_KEY_ENV)
            if not key:
                raise ConfigError(f"Missing API key. Pass api_key or set {API_KEY_ENV}")
            transport = Transport(
                base_url,
                key,
                timeout=timeout,
                error_mapper=ResponseErrorMapper(api_name=self.api_name),
            )
        self._transport = transport
        self._buffer_size = buffer_size
        self._decoders: dict[type[BaseModel], PageDecoder[Any]] = {}

    @classmethod
    @abstractmethod
    def from_settings(cls, settings: "Settings") -> "LemonClientABC":
        """Build a client from shared Settings (API key, timeout, buffer size)."""

    @property
    def transport(self) -> Transport:
        return self._transport

    def _decoder(self, model: type[M]) -> PageDecoder[M]:
        decoder = self._decoders.get(model)
        if decoder is None:
            decoder = self._decoders[model] = PageDecoder(model)
        return decoder

    def _stream(
        self, model: type[M], endpoint: str, query: QueryLike | None = None
    ) -> AsyncIterator[StreamItem[M]]:
        return paginate(
            self._transport,
            self._decoder(model),
            "GET",
            endpoint,
            query,
            buffer_size=self._buffer_size,
        )

    async def _fetch(
        self, model: type[M], method: str, endpoint: str, body: Any = None
    ) -> M:
        return await fetch_one(self._transport, self._decoder(model), method, endpoint, body)

    async def _send(self, method: str, endpoint: str, body: Any = None) -> None:
        await send(self._transport, method, endpoint, body)

    async def close(self) -> None:
        """Close the HTTP connection pool."""
        await self._transport.close()

    async def __aenter__(self) -> "LemonClientABC":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        """Async context manager exit - calls close()."""
        await self.close()
