"""Protocols for the collaborators the pagination engine depends on."""
from collections.abc import Sequence
from typing import Any, Protocol, TypeVar

from lemon_markets.clients.core.envelope import Envelope
from lemon_markets.clients.core.query import QueryLike

T_co = TypeVar("T_co", covariant=True)


class EnvelopeTransport(Protocol):
    """Anything that performs one exchange and returns a classified Envelope.

    Transport implements this; tests substitute an in-memory fake.
    """

    async def execute(
        self,
        method: str,
        endpoint: str,
        query: QueryLike | None = None,
        body: Any = None,
    ) -> Envelope: ...


class ManyDecoder(Protocol[T_co]):
    """Decodes a page of records from an Envelope (PageDecoder implements this)."""

    def decode_many(self, envelope: Envelope) -> Sequence[T_co]: ...


class OneDecoder(Protocol[T_co]):
    """Decodes a single record from an Envelope."""

    def decode_one(self, envelope: Envelope) -> T_co: ...
