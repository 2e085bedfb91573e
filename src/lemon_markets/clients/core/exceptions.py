"""Exception hierarchy shared by every lemon.markets client.

Three kinds are kept apart so callers can tell "the server rejected the request"
(DomainError) from "the exchange itself failed" (TransportError) and from "client
and server disagree on the payload shape" (DecodeError).
"""
from datetime import datetime


class LemonMarketsError(Exception):
    """Base exception for all library errors."""


class ConfigError(LemonMarketsError):
    """Missing or invalid client configuration."""


class TransportError(LemonMarketsError):
    """Network failure or non-success HTTP status outside the domain-error status.

    Carries the raw status code when a response was received; ``cause`` holds the
    underlying exception for connection, timeout or body-read failures.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.cause = cause


class DomainError(LemonMarketsError):
    """Business rule violation reported by the server (HTTP 400).

    ``str(error)`` is exactly the server's ``error_message``; it is the only error
    text considered safe to show to a user verbatim.
    """

    def __init__(
        self,
        message: str,
        code: str = "",
        *,
        mode: str = "",
        status: str = "",
        time: datetime | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.mode = mode
        self.status = status
        self.time = time

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DomainError):
            return NotImplemented
        return (self.code, self.message, self.mode, self.status, self.time) == (
            other.code,
            other.message,
            other.mode,
            other.status,
            other.time,
        )

    def __hash__(self) -> int:
        return hash((self.code, self.message))

    def __repr__(self) -> str:
        return f"DomainError(code={self.code!r}, message={self.message!r})"


class DecodeError(LemonMarketsError):
    """Envelope or results payload did not match the expected shape."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause
