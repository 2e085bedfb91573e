"""Trading client: account, withdrawals, documents, orders and positions."""
from lemon_markets.clients.trading.dto import (Account, BankStatement, Document,
                                               Order, Position,
                                               RegulatoryInformation, Statement,
                                               Withdrawal)
from lemon_markets.clients.trading.models import (ActivateOrder,
                                                  BankStatementsQuery,
                                                  CreateOrder, CreateWithdrawal,
                                                  OrdersQuery, OrderStatus,
                                                  PositionsQuery, Side,
                                                  StatementsQuery,
                                                  WithdrawalsQuery)
from lemon_markets.clients.trading.trading_client import TradingClient

__all__ = [
    "TradingClient",
    "Account",
    "BankStatement",
    "Document",
    "Order",
    "Position",
    "RegulatoryInformation",
    "Statement",
    "Withdrawal",
    "ActivateOrder",
    "BankStatementsQuery",
    "CreateOrder",
    "CreateWithdrawal",
    "OrdersQuery",
    "OrderStatus",
    "PositionsQuery",
    "Side",
    "StatementsQuery",
    "WithdrawalsQuery",
]
