"""Single-item requests: one Transport call, no cursor handling."""
from typing import Any, TypeVar

from lemon_markets.clients.core.protocols import EnvelopeTransport, OneDecoder

T = TypeVar("T")


async def fetch_one(
    transport: EnvelopeTransport,
    decoder: OneDecoder[T],
    method: str,
    endpoint: str,
    body: Any = None,
) -> T:
    """Request one resource and decode its results as a single record.

    Raises:
        DomainError, TransportError, DecodeError: Propagated unchanged.
    """
    envelope = await transport.execute(method, endpoint, body=body)
    return decoder.decode_one(envelope)


async def send(
    transport: EnvelopeTransport,
    method: str,
    endpoint: str,
    body: Any = None,
) -> None:
    """Issue a mutating request whose payload carries nothing the caller needs."""
    await transport.execute(method, endpoint, body=body)
