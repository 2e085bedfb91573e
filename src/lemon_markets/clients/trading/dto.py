"""Data Transfer Objects for lemon.markets trading API responses.

Prices and amounts are integers in hundredths of a cent (10000 == 1 EUR), as
the API sends them.
"""
import datetime as dt

from pydantic import Field

from lemon_markets.schemas import Record


class Account(Record):
    """Details about the account the API key belongs to."""

    created_at: dt.datetime | None = None
    account_id: str | None = None
    firstname: str | None = None
    lastname: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    billing_address: str | None = None
    billing_email: str | None = None
    billing_name: str | None = None
    billing_vat: str | None = None
    mode: str | None = None
    deposit_id: str | None = None
    client_id: str | None = None
    account_number: str | None = None
    iban_brokerage: str | None = None
    iban_origin: str | None = None
    bank_name_origin: str | None = None
    balance: int | None = None
    cash_to_invest: int | None = None
    cash_to_withdraw: int | None = None
    amount_bought_intraday: int | None = None
    amount_sold_intraday: int | None = None
    amount_open_orders: int | None = None
    amount_open_withdrawals: int | None = None
    amount_estimate_taxes: int | None = None
    approved_at: dt.datetime | None = None
    trading_plan: str | None = None
    data_plan: str | None = None
    tax_allowance: int | None = None
    tax_allowance_start: dt.date | None = None
    tax_allowance_end: dt.date | None = None


class Withdrawal(Record):
    id: str | None = None
    amount: int | None = None
    created_at: dt.datetime | None = None
    date: dt.datetime | None = None
    idempotency: str | None = None


class BankStatement(Record):
    id: str | None = None
    account_id: str | None = None
    type: str | None = None
    date: dt.date | None = None
    amount: int | None = None
    isin: str | None = None
    isin_title: str | None = None
    created_at: dt.datetime | None = None


class Document(Record):
    id: str | None = None
    name: str | None = None
    created_at: dt.datetime | None = None
    category: str | None = None
    link: str | None = None
    viewed_first_at: dt.datetime | None = None
    viewed_last_at: dt.datetime | None = None


class RegulatoryInformation(Record):
    """Cost disclosure attached to a newly placed order."""

    costs_entry: int | None = None
    costs_entry_pct: str | None = None
    costs_running: int | None = None
    costs_running_pct: str | None = None
    costs_product: int | None = None
    costs_product_pct: str | None = None
    costs_exit: int | None = None
    costs_exit_pct: str | None = None
    yield_reduction_year: int | None = None
    yield_reduction_year_pct: str | None = None
    yield_reduction_year_following: int | None = None
    yield_reduction_year_following_pct: str | None = None
    yield_reduction_year_exit: int | None = None
    yield_reduction_year_exit_pct: str | None = None
    estimated_holding_duration_years: str | None = None
    estimated_yield_reduction_total: int | None = None
    estimated_yield_reduction_total_pct: str | None = None
    kiid: str | None = Field(default=None, alias="KIID")
    legal_disclaimer: str | None = None


class Order(Record):
    """An order as returned by the orders endpoints."""

    id: str | None = Field(default=None, description="Order ID (ord_...)")
    isin: str | None = None
    isin_title: str | None = None
    expires_at: dt.datetime | None = None
    created_at: dt.datetime | None = None
    side: str | None = Field(default=None, description="buy or sell")
    quantity: int | None = None
    stop_price: int | None = None
    limit_price: int | None = None
    estimated_price: int | None = None
    estimated_price_total: int | None = None
    venue: str | None = Field(default=None, description="MIC of the trading venue")
    status: str | None = None
    type: str | None = Field(default=None, description="market, limit, stop, stop_limit")
    executed_quantity: int | None = None
    executed_price: int | None = None
    executed_price_total: int | None = None
    executed_at: dt.datetime | None = None
    rejected_at: dt.datetime | None = None
    notes: str | None = None
    charge: int | None = None
    chargeable_at: dt.datetime | None = None
    key_creation_id: str | None = None
    key_activation_id: str | None = None
    regulatory_information: RegulatoryInformation | None = None
    idempotency: str | None = None


class Position(Record):
    isin: str | None = None
    isin_title: str | None = None
    quantity: int | None = None
    buy_price_avg: int | None = None
    estimated_price_total: int | None = None
    estimated_price: int | None = None


class Statement(Record):
    """A position-changing event (order fill, split, ...)."""

    id: str | None = None
    order_id: str | None = None
    external_id: str | None = None
    type: str | None = None
    quantity: int | None = None
    isin: str | None = None
    isin_title: str | None = None
    date: dt.date | None = None
    created_at: dt.datetime | None = None
