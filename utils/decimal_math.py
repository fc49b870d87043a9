"""Checked arithmetic over exact decimals.

Every operation runs in a context that traps rounding, so a result that
cannot be represented exactly is reported as an error instead of being
silently rounded. Addition and multiplication report overflow; subtraction
and division report underflow, including a quotient with more digits than
the context can hold (e.g. ``10 / 3``).
"""

from decimal import Context, Decimal, DecimalException, DivisionByZero, Inexact, InvalidOperation, Overflow, Underflow

from config import settings
from exceptions import DecimalOverflowError, DecimalParseError, DecimalUnderflowError


def exact_context() -> Context:
    """Build the decimal context used for all lot arithmetic.

    Precision and exponent range come from settings; every signal that
    would lose information is trapped.
    """
    max_exponent = settings.DECIMAL_MAX_EXPONENT
    return Context(
        prec=settings.DECIMAL_PRECISION,
        Emax=max_exponent,
        Emin=-max_exponent,
        traps=[Inexact, Overflow, Underflow, DivisionByZero, InvalidOperation],
    )


def checked_add(left: Decimal, right: Decimal) -> Decimal:
    try:
        return exact_context().add(left, right)
    except DecimalException as e:
        raise DecimalOverflowError("adding") from e


def checked_sub(left: Decimal, right: Decimal) -> Decimal:
    try:
        return exact_context().subtract(left, right)
    except DecimalException as e:
        raise DecimalUnderflowError("subtracting") from e


def checked_mul(left: Decimal, right: Decimal) -> Decimal:
    try:
        return exact_context().multiply(left, right)
    except DecimalException as e:
        raise DecimalOverflowError("multiplying") from e


def checked_div(left: Decimal, right: Decimal) -> Decimal:
    try:
        return exact_context().divide(left, right)
    except DecimalException as e:
        raise DecimalUnderflowError("dividing") from e


def parse_decimal(value: str, field_name: str) -> Decimal:
    """Parse a decimal literal exactly.

    Rejects non-numeric text, NaN and infinities, and literals with more
    significant digits than the arithmetic context can carry.

    Args:
        value: The raw field text; surrounding whitespace is ignored.
        field_name: Field label used in the error message.

    Returns:
        The parsed Decimal.

    Raises:
        DecimalParseError: If the text is not a finite, representable decimal.
    """
    text = value.strip()
    try:
        parsed = exact_context().create_decimal(text)
    except DecimalException as e:
        raise DecimalParseError(field_name, value) from e
    if not parsed.is_finite():
        raise DecimalParseError(field_name, value)
    return parsed
