"""Cursor-pagination streaming engine shared by every list endpoint.

A background producer task owns the cursor chain: it requests the first page,
decodes it, hands each record to the consumer through a bounded queue and then
follows ``Envelope.next_url`` until it is empty. The consumer side is an async
generator, so records arrive lazily, in page-then-array order, and the stream
ends either by exhaustion or with exactly one ``Err`` item.

Closing the generator (``aclose()``, ``contextlib.aclosing`` or garbage
collection of an abandoned stream) cancels the producer, so no further pages are
requested once nobody is listening.
"""
import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import Any, TypeVar

from lemon_markets.clients.core.exceptions import LemonMarketsError
from lemon_markets.clients.core.items import Err, Ok, StreamItem
from lemon_markets.clients.core.protocols import EnvelopeTransport, ManyDecoder
from lemon_markets.clients.core.query import QueryLike

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_BUFFER_SIZE = 1

_CLOSED = object()


@dataclass(frozen=True)
class _Crash:
    """Unexpected (non-library) exception raised inside the producer."""

    exc: Exception


async def paginate(
    transport: EnvelopeTransport,
    decoder: ManyDecoder[T],
    method: str,
    endpoint: str,
    query: QueryLike | None = None,
    *,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> AsyncIterator[StreamItem[T]]:
    """Stream every record of a cursor-paginated list endpoint.

    Args:
        transport: Performs each page request (at most one in flight).
        decoder: Turns an Envelope into the page's records.
        method: HTTP method of the initial request.
        endpoint: Relative path of the initial request.
        query: Optional filters for the initial request only; continuation
            requests dereference the cursor as-is.
        buffer_size: Capacity of the hand-off queue. The producer stops issuing
            requests while the queue is full.

    Yields:
        ``Ok(record)`` per record, then optionally one terminal ``Err(error)``.
    """
    if buffer_size < 1:
        raise ValueError("buffer_size must be at least 1")

    queue: asyncio.Queue[Any] = asyncio.Queue(maxsize=buffer_size)

    async def produce() -> None:
        page = 0
        try:
            envelope = await transport.execute(method, endpoint, query=query)
            while True:
                page += 1
                records = decoder.decode_many(envelope)
                logger.debug("%s page %d: %d record(s)", endpoint, page, len(records))
                for record in records:
                    await queue.put(Ok(record))
                if not envelope.next_url:
                    break
                envelope = await transport.execute("GET", envelope.next_url)
        except LemonMarketsError as exc:
            logger.debug("%s stream failed after %d page(s): %s", endpoint, page, exc)
            await queue.put(Err(exc))
            return
        except Exception as exc:  # re-raised in the consumer
            await queue.put(_Crash(exc))
            return
        await queue.put(_CLOSED)

    producer = asyncio.create_task(produce(), name=f"paginate:{endpoint}")
    try:
        while True:
            item = await queue.get()
            if item is _CLOSED:
                return
            if isinstance(item, _Crash):
                raise item.exc
            yield item
            if isinstance(item, Err):
                return
    finally:
        if not producer.done():
            logger.debug("%s stream closed by consumer; cancelling producer", endpoint)
            producer.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await producer


async def iter_records(stream: AsyncIterator[StreamItem[T]]) -> AsyncIterator[T]:
    """Unwrap a stream into plain records, raising its terminal error if any."""
    async with contextlib.aclosing(stream):
        async for item in stream:
            yield item.unwrap()


async def collect(stream: AsyncIterator[StreamItem[T]]) -> list[T]:
    """Drain a stream into a list.

    Records delivered before a failure are lost to the caller because the
    terminal error is raised; consume the stream directly to keep them.
    """
    return [record async for record in iter_records(stream)]
