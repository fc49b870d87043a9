"""Text rendering for the lot report."""

from decimal import Decimal

from config import settings
from models import Lot


def format_fixed(value: Decimal, places: int) -> str:
    """Render a decimal with exactly ``places`` fraction digits (half-even)."""
    return f"{value:.{places}f}"


def format_lot(lot: Lot) -> str:
    """Render a lot as ``ID,DATE,PRICE,QUANTITY``.

    Price and quantity use the configured number of fraction digits
    (2 and 8 by default); the date is ISO ``YYYY-MM-DD``.
    """
    return ",".join(
        (
            str(lot.id),
            lot.acquisition_date.isoformat(),
            format_fixed(lot.price, settings.PRICE_PLACES),
            format_fixed(lot.quantity, settings.QUANTITY_PLACES),
        )
    )
