"""Typed exception hierarchy for tax lot processing.

Separates malformed input (bad fields), invalid records (fields parse but
break a business rule) and arithmetic failures (a checked decimal
operation could not produce an exact result). The CLI driver is the only
place these are turned into a message and an exit status.
"""


class TaxLotError(Exception):
    """Base exception for all tax lot processing errors."""

    pass


class InputFormatError(TaxLotError):
    """A transaction line is missing a field or a field cannot be parsed."""

    pass


class MissingFieldError(InputFormatError):
    """The line has fewer comma-separated parts than required."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Could not parse transaction. {field_name} field does not exist")


class DateParseError(InputFormatError):
    def __init__(self, value: str = ""):
        self.value = value
        super().__init__("Could not parse date. Format: YYYY-mm-DD")


class SideParseError(InputFormatError):
    def __init__(self, value: str = ""):
        self.value = value
        super().__init__("Could not parse transaction side. Options: buy, sell")


class DecimalParseError(InputFormatError):
    """A price or quantity field is not a finite decimal literal."""

    def __init__(self, field_name: str, value: str = ""):
        self.field_name = field_name
        self.value = value
        super().__init__(f"Could not parse {field_name.lower()}: {value!r} is not a valid decimal")


class StdinReadError(InputFormatError):
    """The input stream could not be read or decoded."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Error reading from stdin: {cause}")


class InvalidRecordError(TaxLotError):
    """All fields parsed, but the record breaks a positivity rule."""

    pass


class NonPositivePriceError(InvalidRecordError):
    def __init__(self):
        super().__init__("Could not parse price: price must be greater than zero")


class NonPositiveQuantityError(InvalidRecordError):
    def __init__(self):
        super().__init__("Could not parse quantity: quantity must be greater than zero")


class DecimalArithmeticError(TaxLotError):
    """A checked decimal operation could not produce an exact result.

    Carries the name of the operation (``"adding"``, ``"dividing"``...) so
    the message says which step failed.
    """

    kind = "Arithmetic error"

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{self.kind} occurred while {operation}")


class DecimalOverflowError(DecimalArithmeticError):
    """Addition or multiplication exceeded the representable range."""

    kind = "Overflow"


class DecimalUnderflowError(DecimalArithmeticError):
    """Subtraction or division exceeded the representable range or precision."""

    kind = "Underflow"
