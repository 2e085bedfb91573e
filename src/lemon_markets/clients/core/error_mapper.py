"""Classify raw HTTP outcomes into the library's error kinds."""
import logging
from dataclasses import dataclass

import httpx
from pydantic import ValidationError

from lemon_markets.clients.core.envelope import ErrorBody
from lemon_markets.clients.core.exceptions import (DomainError,
                                                   LemonMarketsError,
                                                   TransportError)

logger = logging.getLogger(__name__)

# The single status code lemon.markets reserves for business-rule rejections.
DOMAIN_ERROR_STATUS = 400


@dataclass(frozen=True)
class ResponseErrorMapper:
    """Maps httpx exceptions and non-success responses to library errors.

    Injected into the Transport so every client classifies failures the same way;
    ``api_name`` only labels messages (e.g. "lemon.markets trading").
    """

    api_name: str = "lemon.markets"

    def is_success(self, response: httpx.Response) -> bool:
        return 200 <= response.status_code < 300

    def from_response(self, response: httpx.Response) -> LemonMarketsError:
        """Map a non-success response to DomainError or TransportError.

        Only the reserved domain-error status is decoded; other bodies carry no
        guaranteed shape and are left untouched.
        """
        status = response.status_code
        if status == DOMAIN_ERROR_STATUS:
            try:
                body = ErrorBody.model_validate_json(response.content)
            except ValidationError as exc:
                logger.warning(
                    "%s returned %d with an undecodable error body", self.api_name, status
                )
                return TransportError(
                    f"{self.api_name} error: {status}", status_code=status, cause=exc
                )
            return DomainError(
                body.error_message,
                body.error_code,
                mode=body.mode,
                status=body.status,
                time=body.time,
            )
        return TransportError(
            f"unknown http error from {self.api_name}: {status}", status_code=status
        )

    def from_exception(self, exc: Exception, url: str | None = None) -> TransportError:
        """Wrap a transport-level failure (connect, timeout, read) as TransportError."""
        if isinstance(exc, httpx.TimeoutException):
            detail = f"Request to {self.api_name} timed out"
        else:
            detail = f"Request to {self.api_name} failed: {exc.__class__.__name__}"
        if url is not None:
            detail = f"{detail} ({url})"
        return TransportError(detail, cause=exc)
