"""Query filters for the market data client."""
from datetime import datetime
from enum import Enum

from pydantic import Field

from lemon_markets.schemas import QueryParams, Sorting


class OHLCInterval(str, Enum):
    """Path segment selecting the OHLC aggregation interval."""

    PER_MINUTE = "m1"
    PER_HOUR = "h1"
    PER_DAY = "d1"


class InstrumentsQuery(QueryParams):
    """Filters for GET /instruments."""

    isin: list[str] | None = None
    mic: str | None = None
    search: str | None = None
    type: str | None = None
    currency: str | None = None
    limit: int | None = None
    page: int | None = None


class VenuesQuery(QueryParams):
    mic: str | None = None
    limit: int | None = None
    page: int | None = None


class HistoricalQuery(QueryParams):
    """Filters shared by the quotes, OHLC and trades endpoints."""

    isin: list[str] | None = None
    mic: str | None = None
    from_: datetime | None = Field(default=None, serialization_alias="from")
    to: datetime | None = None
    sorting: Sorting | None = None
    limit: int | None = None
    page: int | None = None


class QuotesQuery(HistoricalQuery):
    pass


class OHLCQuery(HistoricalQuery):
    pass


class TradesQuery(HistoricalQuery):
    pass
