"""Pydantic bases for lemon.markets records and request models."""
from enum import Enum

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """Plain value record decoded from a response; immutable, compared by fields."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class QueryParams(BaseModel):
    """Filter model encoded into the URL query string by wire name.

    Fields left at None are omitted; ``from``/``to`` use ``serialization_alias``
    because ``from`` is a Python keyword.
    """

    model_config = ConfigDict(populate_by_name=True)


class Sorting(str, Enum):
    ASC = "asc"
    DESC = "desc"


__all__ = ["QueryParams", "Record", "Sorting"]
