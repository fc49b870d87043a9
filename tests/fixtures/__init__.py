"""Test record builders and sample data."""

from datetime import date
from decimal import Decimal

from schemas.transaction import Side, TransactionRecord


def make_record(side: Side, on: str, price: str, quantity: str) -> TransactionRecord:
    """Build a record from string values, e.g. ``make_record(Side.BUY, "2021-01-01", "10", "1")``."""
    return TransactionRecord(
        date=date.fromisoformat(on),
        side=side,
        price=Decimal(price),
        quantity=Decimal(quantity),
    )


def buy(on: str, price: str, quantity: str) -> TransactionRecord:
    return make_record(Side.BUY, on, price, quantity)


def sell(on: str, quantity: str, price: str = "1.00") -> TransactionRecord:
    return make_record(Side.SELL, on, price, quantity)


# The three purchases used by the worked FIFO/HIFO examples.
EXAMPLE_BUYS = (
    ("2021-01-01", "10000.00", "1.00000000"),
    ("2021-01-02", "20000.00", "3.00000000"),
    ("2021-01-03", "15000.00", "10.00000000"),
)

EXAMPLE_LINES = "\n".join(f"{on},buy,{price},{quantity}" for on, price, quantity in EXAMPLE_BUYS)
