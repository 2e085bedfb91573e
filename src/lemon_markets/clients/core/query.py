"""URL query-string encoding for request filter models.

Fields are emitted under their wire name (serialization alias). Empty values are
omitted, list values repeat the key and timestamps use a fixed RFC 3339 layout.
"""
from collections.abc import Mapping
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

QueryLike = BaseModel | Mapping[str, Any]


def _is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (str, list, tuple, set, frozenset)):
        return len(value) == 0
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return False


def format_query_value(value: Any) -> str:
    """Render a single query value as text."""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def encode_query(query: QueryLike | None) -> list[tuple[str, str]]:
    """Flatten a filter model or mapping into ordered (key, value) pairs.

    Args:
        query: Pydantic model (dumped by alias) or plain mapping; None gives no pairs.

    Returns:
        Pairs suitable for ``httpx`` ``params``; a list field yields one pair per item.
    """
    if query is None:
        return []
    if isinstance(query, BaseModel):
        fields = query.model_dump(by_alias=True)
    else:
        fields = dict(query)

    pairs: list[tuple[str, str]] = []
    for key, value in fields.items():
        if _is_empty(value):
            continue
        if isinstance(value, (list, tuple, set, frozenset)):
            pairs.extend(
                (key, format_query_value(item)) for item in value if not _is_empty(item)
            )
        else:
            pairs.append((key, format_query_value(value)))
    return pairs
