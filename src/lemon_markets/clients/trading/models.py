"""Models for the trading client (query filters and request bodies)."""
from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from lemon_markets.schemas import QueryParams


class Side(str, Enum):
    BUY = "buy"
    SELL = "sell"


class OrderStatus(str, Enum):
    INACTIVE = "inactive"
    ACTIVATED = "activated"
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    CANCELING = "canceling"
    EXECUTED = "executed"
    CANCELED = "canceled"
    EXPIRED = "expired"


class OrdersQuery(QueryParams):
    """Filters for GET /orders."""

    from_: datetime | None = Field(default=None, serialization_alias="from")
    to: datetime | None = None
    isin: str | None = None
    side: Side | None = None
    status: list[OrderStatus] | None = None
    type: str | None = None
    key_creation_id: str | None = None
    limit: int | None = None
    page: int | None = None


class PositionsQuery(QueryParams):
    """Filters for GET /positions."""

    isin: str | None = None
    limit: int | None = None
    page: int | None = None


class StatementsQuery(QueryParams):
    """Filters for GET /positions/statements."""

    isin: str | None = None
    from_: date | None = Field(default=None, serialization_alias="from")
    to: date | None = None
    types: list[str] | None = None
    limit: int | None = None
    page: int | None = None


class WithdrawalsQuery(QueryParams):
    limit: int | None = None
    page: int | None = None


class BankStatementsQuery(QueryParams):
    """Filters for GET /account/bankstatements."""

    type: str | None = None
    from_: date | None = Field(default=None, serialization_alias="from")
    to: date | None = None
    limit: int | None = None
    page: int | None = None


class CreateOrder(BaseModel):
    """Body for POST /orders. Prices in hundredths of a cent."""

    model_config = ConfigDict(populate_by_name=True)

    isin: str
    side: Side
    quantity: int = Field(gt=0)
    venue: str | None = None
    expires_at: datetime | None = None
    stop_price: int | None = None
    limit_price: int | None = None
    notes: str | None = None
    idempotency: str | None = None


class CreateWithdrawal(BaseModel):
    """Body for POST /account/withdrawals. Amount in hundredths of a cent."""

    amount: int = Field(gt=0)
    pin: str | None = None
    idempotency: str | None = None


class ActivateOrder(BaseModel):
    """Body for POST /orders/{order_id}/activate (live trading only)."""

    pin: str | None = None
