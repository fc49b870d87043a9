"""Pydantic schema for a parsed buy/sell instruction."""

import datetime as dt
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from exceptions import (
    DateParseError,
    MissingFieldError,
    NonPositivePriceError,
    NonPositiveQuantityError,
    SideParseError,
)
from utils.decimal_math import parse_decimal

# Field labels in line order, used for missing-field errors.
LINE_FIELDS = ("Date", "Side", "Price", "Quantity")
DATE_FORMAT = "%Y-%m-%d"


class Side(str, Enum):
    """Direction of a transaction."""

    BUY = "buy"
    SELL = "sell"

    @classmethod
    def parse(cls, value: str) -> "Side":
        """Parse a side case-insensitively, ignoring surrounding whitespace."""
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            raise SideParseError(value) from e


def parse_date(value: str) -> dt.date:
    """Parse a strict ``YYYY-MM-DD`` calendar date."""
    try:
        return dt.datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError as e:
        raise DateParseError(value) from e


class TransactionRecord(BaseModel):
    """A validated buy or sell instruction.

    Price and quantity are always strictly positive. Use :meth:`from_line`
    to build a record from a ``DATE,SIDE,PRICE,QUANTITY`` input line.
    """

    model_config = ConfigDict(frozen=True)

    date: dt.date
    side: Side
    price: Decimal
    quantity: Decimal

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        if not v.is_finite() or v <= 0:
            raise ValueError("price must be greater than zero")
        return v

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: Decimal) -> Decimal:
        if not v.is_finite() or v <= 0:
            raise ValueError("quantity must be greater than zero")
        return v

    @classmethod
    def from_line(cls, line: str) -> "TransactionRecord":
        """Parse one comma-delimited input line.

        Fields are read in fixed order; anything after the fourth comma
        separated part is ignored.

        Raises:
            MissingFieldError: The line has fewer than four parts.
            DateParseError, SideParseError, DecimalParseError: A field is malformed.
            NonPositivePriceError, NonPositiveQuantityError: A number parsed
                but is zero or negative.
        """
        parts = line.split(",")

        def field(index: int) -> str:
            if index >= len(parts):
                raise MissingFieldError(LINE_FIELDS[index])
            return parts[index]

        txn_date = parse_date(field(0))
        side = Side.parse(field(1))
        price = parse_decimal(field(2), "Price")
        if price <= 0:
            raise NonPositivePriceError()
        quantity = parse_decimal(field(3), "Quantity")
        if quantity <= 0:
            raise NonPositiveQuantityError()

        return cls(date=txn_date, side=side, price=price, quantity=quantity)
