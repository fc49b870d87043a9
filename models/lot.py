"""Lot model - a single open tax position."""

import datetime as dt
from dataclasses import dataclass
from decimal import Decimal

from schemas.transaction import Side, TransactionRecord
from utils.decimal_math import checked_add, checked_div, checked_mul


@dataclass
class Lot:
    """An open holding acquired on one date.

    Same-date purchases are merged into a single lot whose price is the
    quantity-weighted average. ``id`` and ``acquisition_date`` never change
    after creation; ``price`` and ``quantity`` are updated in place.
    """

    id: int
    acquisition_date: dt.date
    price: Decimal
    quantity: Decimal

    @classmethod
    def from_record(cls, lot_id: int, record: TransactionRecord) -> "Lot":
        """Open a new lot for a buy with no existing same-date lot."""
        return cls(
            id=lot_id,
            acquisition_date=record.date,
            price=record.price,
            quantity=record.quantity,
        )

    @property
    def cost_basis(self) -> Decimal:
        """Total cost of the lot (price x quantity), computed exactly."""
        return checked_mul(self.price, self.quantity)

    def merge(self, record: TransactionRecord) -> None:
        """Fold a same-date buy into this lot.

        The new quantity is the sum of both quantities and the new price is
        the weighted average ``(p1*q1 + p2*q2) / (q1 + q2)``. The lot is only
        updated once every step has succeeded.

        The average is never rounded. When it has no exact decimal form
        within ``DECIMAL_PRECISION`` digits (``100.00`` x 1 merged with
        ``200.00`` x 2 averages to 500/3), the merge fails instead of
        rounding to the context precision, and the run aborts. Raising
        ``DECIMAL_PRECISION`` does not help for repeating quotients.

        Raises:
            DecimalOverflowError: A product or sum exceeded the decimal range.
            DecimalUnderflowError: The average price cannot be represented exactly.
        """
        assert record.date == self.acquisition_date, "merge requires matching dates"
        assert record.side is Side.BUY, "only buys can be merged into a lot"

        left = self.cost_basis
        right = checked_mul(record.price, record.quantity)
        quantity = checked_add(self.quantity, record.quantity)
        total = checked_add(left, right)
        price = checked_div(total, quantity)

        self.quantity = quantity
        self.price = price
