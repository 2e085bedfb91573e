"""Response envelope and domain-error body wire models."""
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Envelope(BaseModel):
    """Page-level wrapper every lemon.markets response is decoded into.

    ``next_url`` is either empty (no more pages) or a complete locator that can be
    requested as-is. ``results`` stays untyped until a PageDecoder reads it.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    time: datetime | None = None
    status: str = ""
    mode: str = ""
    previous_url: str = Field(default="", alias="previous")
    next_url: str = Field(default="", alias="next")
    total: int = 0
    page: int = 0
    pages: int = 0
    results: Any = None

    @field_validator("previous_url", "next_url", "status", "mode", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("total", "page", "pages", mode="before")
    @classmethod
    def _null_as_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @property
    def has_next(self) -> bool:
        """True when another page can be fetched from ``next_url``."""
        return bool(self.next_url)


class ErrorBody(BaseModel):
    """Body of a declared domain error (HTTP 400)."""

    model_config = ConfigDict(populate_by_name=True)

    time: datetime | None = None
    mode: str = ""
    status: str = ""
    error_code: str = ""
    error_message: str
