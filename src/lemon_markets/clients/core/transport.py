"""Authenticated HTTP exchange with lemon.markets and outcome classification."""
import logging
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError
from pydantic_core import to_json

from lemon_markets.clients.core.envelope import Envelope
from lemon_markets.clients.core.error_mapper import ResponseErrorMapper
from lemon_markets.clients.core.exceptions import DecodeError, TransportError
from lemon_markets.clients.core.query import QueryLike, encode_query

logger = logging.getLogger(__name__)

RequestBody = BaseModel | Mapping[str, Any] | bytes

DEFAULT_TIMEOUT = 30.0


def _encode_body(body: RequestBody | None) -> bytes | None:
    if body is None:
        return None
    if isinstance(body, bytes):
        return body
    if isinstance(body, BaseModel):
        return body.model_dump_json(by_alias=True, exclude_none=True).encode()
    return to_json(dict(body))


class Transport:
    """Performs one authenticated request per call and classifies the outcome.

    The bearer credential and base URL are fixed at construction, so one instance
    can back any number of concurrent streams.

    Example:
        async with Transport("https://paper-trading.lemon.markets/v1", api_key) as t:
            envelope = await t.execute("GET", "orders", query={"status": "open"})
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
        error_mapper: ResponseErrorMapper | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            base_url: Base locator relative endpoints are joined under.
            api_key: Bearer token attached to every request.
            timeout: Total request timeout in seconds (ignored if client is given).
            client: Optional pre-built httpx client; the transport then does not own it.
            error_mapper: Classifier for failed exchanges.
        """
        self._base_url = base_url.rstrip("/")
        self._headers = {
            "Authorization": f"Bearer {api_key}",
            "Accept": "application/json",
        }
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._errors = error_mapper or ResponseErrorMapper()

    @property
    def base_url(self) -> str:
        return self._base_url

    def resolve_url(self, endpoint: str) -> str:
        """Return the absolute URL for a relative endpoint or a full cursor locator."""
        if endpoint.startswith(("http://", "https://")):
            return endpoint
        return f"{self._base_url}/{endpoint.lstrip('/')}"

    async def request_json(
        self,
        method: str,
        endpoint: str,
        query: QueryLike | None = None,
        body: RequestBody | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body (None when empty).

        Raises:
            DomainError: Server rejected the request with the reserved status.
            TransportError: Network failure, other non-2xx status, or non-JSON body.
        """
        url = self.resolve_url(endpoint)
        params = encode_query(query) if query is not None else None
        content = _encode_body(body)
        headers = dict(self._headers)
        if content is not None:
            headers["Content-Type"] = "application/json"

        logger.debug("%s %s params=%s", method, url, params)
        try:
            response = await self._client.request(
                method, url, params=params, content=content, headers=headers
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            error = self._errors.from_exception(exc, url)
            logger.warning("%s %s failed: %s", method, url, error)
            raise error from exc

        if not self._errors.is_success(response):
            error = self._errors.from_response(response)
            logger.warning("%s %s -> %d: %s", method, url, response.status_code, error)
            raise error

        if not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(
                f"malformed response body from {url}",
                status_code=response.status_code,
                cause=exc,
            ) from exc

    async def execute(
        self,
        method: str,
        endpoint: str,
        query: QueryLike | None = None,
        body: RequestBody | None = None,
    ) -> Envelope:
        """Send one request and decode the body as an Envelope.

        Args:
            method: HTTP method ("GET", "POST", "DELETE", ...).
            endpoint: Relative resource path or a full locator from ``Envelope.next_url``.
            query: Optional filter model or mapping encoded into the query string.
            body: Optional JSON request body.

        Raises:
            DomainError, TransportError: See request_json.
            DecodeError: Body is JSON but not shaped like an envelope.
        """
        payload = await self.request_json(method, endpoint, query=query, body=body)
        if payload is None:
            return Envelope()
        try:
            return Envelope.model_validate(payload)
        except ValidationError as exc:
            raise DecodeError(
                f"unexpected response envelope from {self.resolve_url(endpoint)}",
                cause=exc,
            ) from exc

    async def close(self) -> None:
        """Close the underlying HTTP client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "Transport":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        await self.close()
