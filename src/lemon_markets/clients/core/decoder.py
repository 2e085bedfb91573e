"""Decode an envelope's untyped results payload into typed records."""
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from lemon_markets.clients.core.envelope import Envelope
from lemon_markets.clients.core.exceptions import DecodeError

T = TypeVar("T", bound=BaseModel)


class PageDecoder(Generic[T]):
    """Validates ``Envelope.results`` against a record model.

    Decoding is pure: the same envelope always yields equal records, and a failure
    yields DecodeError without partial results.
    """

    def __init__(self, model: type[T]) -> None:
        self.model = model
        self._many: TypeAdapter[list[T]] = TypeAdapter(list[model])  # type: ignore[valid-type]

    def __repr__(self) -> str:
        return f"PageDecoder({self.model.__name__})"

    def decode_many(self, envelope: Envelope) -> list[T]:
        """Decode the payload as an array of records; a null payload is an empty page."""
        if envelope.results is None:
            return []
        if not isinstance(envelope.results, list):
            raise DecodeError(
                f"expected a list of {self.model.__name__}, "
                f"got {type(envelope.results).__name__}"
            )
        try:
            return self._many.validate_python(envelope.results)
        except ValidationError as exc:
            raise DecodeError(
                f"could not decode {self.model.__name__} page: {exc.error_count()} error(s)",
                cause=exc,
            ) from exc

    def decode_one(self, envelope: Envelope) -> T:
        """Decode the payload as a single record."""
        if envelope.results is None:
            raise DecodeError(f"expected a {self.model.__name__}, got no results")
        return self.decode_value(envelope.results)

    def decode_value(self, payload: Any) -> T:
        """Decode a raw JSON object that is not wrapped in an envelope."""
        if not isinstance(payload, dict):
            raise DecodeError(
                f"expected a {self.model.__name__} object, got {type(payload).__name__}"
            )
        try:
            return self.model.model_validate(payload)
        except ValidationError as exc:
            raise DecodeError(
                f"could not decode {self.model.__name__}: {exc.error_count()} error(s)",
                cause=exc,
            ) from exc
