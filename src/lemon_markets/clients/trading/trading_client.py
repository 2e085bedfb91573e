"""lemon.markets trading client: account, orders and positions."""
from collections.abc import AsyncIterator

from lemon_markets.clients.core import ConfigError, LemonClientABC, StreamItem
from lemon_markets.clients.core.stream_helpers import DEFAULT_BUFFER_SIZE
from lemon_markets.clients.core.transport import DEFAULT_TIMEOUT, Transport
from lemon_markets.clients.trading.dto import (Account, BankStatement,
                                               Document, Order, Position,
                                               Statement, Withdrawal)
from lemon_markets.clients.trading.models import (ActivateOrder,
                                                  BankStatementsQuery,
                                                  CreateOrder, CreateWithdrawal,
                                                  OrdersQuery, PositionsQuery,
                                                  StatementsQuery,
                                                  WithdrawalsQuery)
from lemon_markets.config import TRADING_ENVIRONMENTS, Environment, Settings


class TradingClient(LemonClientABC):
    """Client for the paper or live trading API.

    List endpoints return lazy streams of ``Ok(record)`` items that end with at
    most one ``Err``; single-resource endpoints return the record or raise.

    Example:
        async with TradingClient(api_key, Environment.PAPER) as client:
            account = await client.get_account()
            async for item in client.get_orders(OrdersQuery(isin="US88160R1014")):
                order = item.unwrap()
    """

    api_name = "lemon.markets trading"

    def __init__(
        self,
        api_key: str | None = None,
        environment: Environment = Environment.PAPER,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        transport: Transport | None = None,
    ) -> None:
        """Initialize the trading client.

        Args:
            api_key: lemon.markets API key. Defaults to LEMON_API_KEY env var.
            environment: Environment.PAPER or Environment.LIVE.
            timeout: Request timeout in seconds.
            buffer_size: Hand-off queue capacity for list streams.
            transport: Pre-built transport; overrides api_key and environment.
        """
        if environment not in TRADING_ENVIRONMENTS:
            raise ConfigError(f"Trading requires PAPER or LIVE, got {environment.name}")
        self.environment = environment
        super().__init__(
            api_key,
            base_url=environment.value,
            timeout=timeout,
            buffer_size=buffer_size,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "TradingClient":
        return cls(
            settings.api_key,
            settings.environment,
            timeout=settings.timeout,
            buffer_size=settings.buffer_size,
        )

    # --- Account ---

    async def get_account(self) -> Account:
        """Fetch the account the API key belongs to."""
        return await self._fetch(Account, "GET", "account")

    async def create_withdrawal(self, withdrawal: CreateWithdrawal) -> None:
        """Request a withdrawal to the reference account."""
        await self._send("POST", "account/withdrawals", withdrawal)

    def get_withdrawals(
        self, query: WithdrawalsQuery | None = None
    ) -> AsyncIterator[StreamItem[Withdrawal]]:
        return self._stream(Withdrawal, "account/withdrawals", query)

    def get_bank_statements(
        self, query: BankStatementsQuery | None = None
    ) -> AsyncIterator[StreamItem[BankStatement]]:
        return self._stream(BankStatement, "account/bankstatements", query)

    def get_documents(self) -> AsyncIterator[StreamItem[Document]]:
        return self._stream(Document, "account/documents")

    # --- Orders ---

    async def create_order(self, order: CreateOrder) -> Order:
        """Place an order. It stays inactive until activate_order is called."""
        return await self._fetch(Order, "POST", "orders", order)

    async def activate_order(self, order_id: str, pin: str | None = None) -> None:
        """Activate a placed order so it is routed for execution."""
        body = ActivateOrder(pin=pin) if pin else None
        await self._send("POST", f"orders/{order_id}/activate", body)

    def get_orders(
        self, query: OrdersQuery | None = None
    ) -> AsyncIterator[StreamItem[Order]]:
        """Stream orders, optionally filtered."""
        return self._stream(Order, "orders", query)

    async def get_order(self, order_id: str) -> Order:
        return await self._fetch(Order, "GET", f"orders/{order_id}")

    async def delete_order(self, order_id: str) -> None:
        """Cancel an order that has not been executed."""
        await self._send("DELETE", f"orders/{order_id}")

    # --- Positions ---

    def get_positions(
        self, query: PositionsQuery | None = None
    ) -> AsyncIterator[StreamItem[Position]]:
        return self._stream(Position, "positions", query)

    def get_statements(
        self, query: StatementsQuery | None = None
    ) -> AsyncIterator[StreamItem[Statement]]:
        return self._stream(Statement, "positions/statements", query)
