"""Service for maintaining the ordered set of open lots.

Owns every open Lot for a run, keeps them sorted by the run's selection
policy, merges same-date buys and depletes lots front-first on sells.
"""

import bisect
import datetime as dt
import itertools
import logging
from collections import deque
from decimal import Decimal
from operator import attrgetter
from typing import Iterator

from models import Lot, SelectionPolicy
from schemas.transaction import Side, TransactionRecord
from utils.decimal_math import checked_sub

logger = logging.getLogger(__name__)

INITIAL_LOT_ID = 1

_acquisition_date = attrgetter("acquisition_date")


class LotIdGenerator:
    """Hands out monotonically increasing lot ids, starting at 1.

    ``next()`` on an ``itertools.count`` is a single atomic step, so ids stay
    unique even if callers end up sharing the generator.
    """

    def __init__(self, start: int = INITIAL_LOT_ID):
        self._counter = itertools.count(start)

    def next_id(self) -> int:
        return next(self._counter)


class LotCollection:
    """Open lots kept in selection-policy order.

    The front lot is always the next one a sale reduces: the oldest under
    FIFO, the most expensive under HIFO. At most one lot exists per
    acquisition date.

    Buy: O(1) date lookup under FIFO for in-order input, O(n) under HIFO,
    plus a binary-search insert for new lots.
    Sell: O(k) for the k lots consumed. Drain: O(n). Lots are held in a
    deque so removing the front lot is O(1).
    """

    def __init__(self, policy: SelectionPolicy, id_generator: LotIdGenerator | None = None):
        self.policy = policy
        self.id_generator = id_generator or LotIdGenerator()
        self._lots: deque[Lot] = deque()

    def __len__(self) -> int:
        return len(self._lots)

    def __iter__(self) -> Iterator[Lot]:
        return iter(self._lots)

    @property
    def lots(self) -> tuple[Lot, ...]:
        """Snapshot of the open lots, front (next to sell) first."""
        return tuple(self._lots)

    # --- Lookup ---

    def find_by_date(self, acquisition_date: dt.date) -> Lot | None:
        """Return the open lot acquired on ``acquisition_date``, if any."""
        if not self._lots:
            return None

        if self.policy.finds_by_tail:
            tail = self._lots[-1]
            if tail.acquisition_date == acquisition_date:
                return tail
            if acquisition_date > tail.acquisition_date:
                return None
            # Out-of-order buy: lots are date-sorted, so binary search.
            index = bisect.bisect_left(self._lots, acquisition_date, key=_acquisition_date)
            if index < len(self._lots) and self._lots[index].acquisition_date == acquisition_date:
                return self._lots[index]
            return None

        # Price order says nothing about dates: scan everything.
        for lot in self._lots:
            if lot.acquisition_date == acquisition_date:
                return lot
        return None

    # --- Operations ---

    def apply(self, record: TransactionRecord) -> None:
        """Apply a buy or sell record to the collection."""
        if record.side is Side.BUY:
            self.buy(record)
        else:
            self.sell(record)

    def buy(self, record: TransactionRecord) -> None:
        """Merge a buy into its same-date lot, or open a new lot.

        Raises:
            DecimalOverflowError, DecimalUnderflowError: The merge could not
                be computed exactly.
        """
        existing = self.find_by_date(record.date)
        if existing is not None:
            key_before = self.policy.sort_key(existing)
            existing.merge(record)
            logger.debug(
                "Merged buy into lot %s: price=%s quantity=%s",
                existing.id, existing.price, existing.quantity,
            )
            if self.policy.sort_key(existing) != key_before:
                # The merged price moved this lot's rank (HIFO only).
                self._remove(existing)
                self._insert(existing)
            return

        lot = Lot.from_record(self.id_generator.next_id(), record)
        self._insert(lot)
        logger.debug(
            "Created lot %s: %s shares at %s on %s",
            lot.id, lot.quantity, lot.price, lot.acquisition_date,
        )

    def sell(self, record: TransactionRecord) -> None:
        """Deplete lots front-first by the sold quantity.

        Selling more than is held consumes every lot and drops the
        remainder; selling from an empty collection does nothing.

        Raises:
            DecimalUnderflowError: A quantity subtraction could not be
                computed exactly.
        """
        remaining = record.quantity

        while remaining > 0:
            if not self._lots:
                logger.info(
                    "Sell on %s exceeds open lots: %s shares unallocated",
                    record.date, remaining,
                )
                break

            lot = self._lots[0]
            new_quantity = checked_sub(lot.quantity, remaining)
            if new_quantity > 0:
                logger.debug(
                    "Disposed %s shares from lot %s (remaining: %s)",
                    remaining, lot.id, new_quantity,
                )
                lot.quantity = new_quantity
                remaining = Decimal("0")
            else:
                remaining = checked_sub(remaining, lot.quantity)
                self._lots.popleft()
                logger.debug("Closed lot %s (%s shares)", lot.id, lot.quantity)

    def drain(self) -> Iterator[Lot]:
        """Remove and yield lots from the front until the collection is empty."""
        while self._lots:
            yield self._lots.popleft()

    # --- Ordering ---

    def _insert(self, lot: Lot) -> None:
        # insort_right keeps a new lot behind existing lots with an equal key.
        bisect.insort_right(self._lots, lot, key=self.policy.sort_key)

    def _remove(self, lot: Lot) -> None:
        for index, candidate in enumerate(self._lots):
            if candidate is lot:
                del self._lots[index]
                return
