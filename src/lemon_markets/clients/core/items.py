"""Stream items: the tagged union delivered on a paginated stream."""
from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

from lemon_markets.clients.core.exceptions import LemonMarketsError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successfully decoded record."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """The terminal failure of a stream; nothing follows it."""

    error: LemonMarketsError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise self.error


StreamItem = Ok[T] | Err

__all__ = ["Err", "Ok", "StreamItem"]
