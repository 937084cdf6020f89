"""
Bitty Errors

Exceptions raised while constructing, parsing and combining storage units.

All errors derive from BittyError, which is a ValueError, so callers that only
care about "bad input" can catch the built-in type.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Classes --------------------------------------------------------------------------------------------------------------

class BittyError(ValueError):
    """Base class for all bitty errors."""


class UnitSymbolNotSupported(BittyError):
    """
    Raised when a unit symbol has no entry in the symbol table.

    Attributes:
        symbol: The offending symbol.
    """

    def __init__(self, symbol: Any):
        self.symbol = symbol
        if symbol == "" or symbol is None:
            super().__init__("unit symbol not supported: empty symbol")
        else:
            super().__init__(f"unit symbol not supported: {symbol}")


class UnitExponentNotSupported(BittyError):
    """Raised when no symbol pair is registered for a standard and exponent."""

    def __init__(self, exponent: Any, standard: Any = None):
        self.exponent = exponent
        self.standard = standard
        if standard is None:
            super().__init__(f"unit exponent not supported: {exponent}")
        else:
            super().__init__(f"unit exponent not supported: {exponent} ({standard})")


class UnitStandardNotSupported(BittyError):
    """
    Raised for a standard other than SI or IEC, or for a symbol no standard owns.

    Attributes:
        standard: The offending standard, or None if it could not be determined.
        symbol: The symbol whose standard was looked up, if any.
    """

    def __init__(self, standard: Any = None, symbol: Any = None):
        self.standard = standard
        self.symbol = symbol
        if symbol is not None and standard is None:
            super().__init__(f"unit standard not supported: no standard for symbol {symbol!r}")
        else:
            super().__init__(f"unit standard not supported: {standard}")


class UnitCouldNotBeParsed(BittyError):
    """Raised when text does not match the '<number> <symbol>' grammar."""

    def __init__(self, text: Any):
        self.text = text
        super().__init__(f"unit could not be parsed: {text!r}")


class UnitOperandDropped(BittyError):
    """
    Raised by cross-standard arithmetic when one operand has an invalid symbol.

    The valid operand is still usable, it is carried in `result`.

    Attributes:
        result: The valid operand, returned as the degraded result.
        dropped: The operand that was ignored.
    """

    def __init__(self, operation: str, result: Any, dropped: Any):
        self.operation = operation
        self.result = result
        self.dropped = dropped
        super().__init__(
            f"unable to {operation} unit with invalid symbol {getattr(dropped, 'symbol', dropped)!r}, "
            f"returning {result} unchanged"
        )


class OperationNotSupported(BittyError, NotImplementedError):
    """Raised for arithmetic that has no meaning for storage units."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"operation not supported for storage units: {operation}")
