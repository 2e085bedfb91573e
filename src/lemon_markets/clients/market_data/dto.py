"""Data Transfer Objects for lemon.markets market data API responses."""
from datetime import datetime

from pydantic import Field

from lemon_markets.schemas import Record


class Venue(Record):
    """A trading venue, identified by its MIC."""

    name: str | None = None
    title: str | None = None
    mic: str | None = None
    is_open: bool | None = None
    tradable: bool | None = None
    currency: str | None = None


class Instrument(Record):
    """A tradable asset and the venues it is listed on."""

    isin: str | None = None
    wkn: str | None = None
    name: str | None = None
    title: str | None = None
    symbol: str | None = None
    type: str | None = None
    venues: list[Venue] = Field(default_factory=list)


class Quote(Record):
    isin: str | None = None
    bid_volume: int | None = Field(default=None, alias="b_v")
    ask_volume: int | None = Field(default=None, alias="a_v")
    bid: float | None = None
    ask: float | None = None
    time: datetime | None = Field(default=None, alias="t")
    mic: str | None = None


class OHLC(Record):
    """Open, high, low and close of one interval (minute, hour or day)."""

    isin: str | None = None
    open: float | None = Field(default=None, alias="o")
    high: float | None = Field(default=None, alias="h")
    low: float | None = Field(default=None, alias="l")
    close: float | None = Field(default=None, alias="c")
    volume: int | None = Field(default=None, alias="v")
    time: datetime | None = Field(default=None, alias="t")
    mic: str | None = None


class Trade(Record):
    isin: str | None = None
    price: float | None = Field(default=None, alias="p")
    volume: int | None = Field(default=None, alias="v")
    time: datetime | None = Field(default=None, alias="t")
    mic: str | None = None
