"""Lot selection policies: which open lot a sale reduces first."""

from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from models.lot import Lot


class SelectionPolicy(str, Enum):
    """Ordering applied to open lots for the whole run.

    - FIFO: oldest acquisition date is sold first.
    - HIFO: highest acquisition price is sold first.
    """

    FIFO = "fifo"
    HIFO = "hifo"

    @classmethod
    def from_name(cls, name: str) -> "SelectionPolicy":
        """Look up a policy by its command-line name (case-insensitive)."""
        try:
            return cls(name.strip().lower())
        except ValueError as e:
            valid = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown selection policy {name!r}. Options: {valid}") from e

    @property
    def sort_key(self) -> Callable[["Lot"], object]:
        """Key function ordering lots front-first (the next lot to sell first).

        HIFO negates the price so an ascending sort puts the costliest lot
        in front.
        """
        if self is SelectionPolicy.FIFO:
            return _by_acquisition_date
        return _by_price_descending

    @property
    def finds_by_tail(self) -> bool:
        """Whether a buy for a new date can only match the last-ranked lot.

        True for FIFO: lots are ordered by date and purchases arrive in date
        order, so a same-date lot, if any, is at the tail.
        """
        return self is SelectionPolicy.FIFO


def _by_acquisition_date(lot: "Lot"):
    return lot.acquisition_date


def _by_price_descending(lot: "Lot") -> Decimal:
    return lot.price.copy_negate()
