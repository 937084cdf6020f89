#
# Bitty Digital Storage Units
#

# Standard library -----------------------------------------------------------------------------------------------------
import math
from dataclasses import dataclass, field
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from . import arithmetic
from .conversion import size_in_unit, to_bits, to_bytes
from .errors import UnitStandardNotSupported, UnitSymbolNotSupported
from .symbols import UnitStandard, UnitSymbol, symbol_table


# @formatter:off

class UnitsConf:
    """Display defaults for Unit.as_str()."""
    PRECISION: int | None = None
    SEPARATOR: str = " "
    WHOLE_AS_INT: bool = True


units_conf = UnitsConf()
# @formatter:on

# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Unit:
    """
    A digital storage quantity: magnitude, symbol and standard.

    The exponent is looked up from the symbol table at construction and always
    matches the symbol. Values are immutable, arithmetic returns new instances.

    For most use cases, prefer the factories:
    - Unit.iec() for binary units (KiB, Mib, ...)
    - Unit.si() for decimal units (KB, Mb, ...)
    - new_unit() when the standard is a runtime value

    Raises:
        UnitStandardNotSupported: if standard is not SI or IEC.
        UnitSymbolNotSupported: if symbol is not registered for the standard.
        TypeError: if magnitude is not a real number.

    Examples:
        >>> Unit(10, "Mib")
        Unit(magnitude=10.0, symbol=<UnitSymbol.Mib: 'Mib'>, standard=<UnitStandard.IEC: 'IEC'>, exponent=2)
        >>> str(Unit.si(1.5, "GB"))
        '1.5 GB'
    """

    magnitude: float
    symbol: UnitSymbol
    standard: UnitStandard = UnitStandard.IEC
    exponent: int = field(init=False)

    def __post_init__(self):
        self._validate_magnitude()
        standard = self._parse_standard(self.standard)

        pair = symbol_table.find_pair_by_symbol(standard, self.symbol)
        if pair is None:
            raise UnitSymbolNotSupported(self.symbol)

        object.__setattr__(self, 'magnitude', float(self.magnitude))
        object.__setattr__(self, 'symbol', UnitSymbol(self.symbol))
        object.__setattr__(self, 'standard', standard)
        object.__setattr__(self, 'exponent', pair.exponent)

    @classmethod
    def iec(cls, magnitude: int | float, symbol: str) -> Self:
        """Create a binary (IEC) unit, e.g. Unit.iec(10, "MiB")."""
        return cls(magnitude, symbol, UnitStandard.IEC)

    @classmethod
    def si(cls, magnitude: int | float, symbol: str) -> Self:
        """Create a decimal (SI) unit, e.g. Unit.si(10, "MB")."""
        return cls(magnitude, symbol, UnitStandard.SI)

    def __str__(self):
        return self.as_str()

    @property
    def byte_size(self) -> float:
        """Size in bytes, 0.0 if the symbol is not registered for the standard."""
        return to_bytes(self.standard, self.symbol, self.magnitude)

    @property
    def bit_size(self) -> float:
        """Size in bits, 0.0 if the symbol is not registered for the standard."""
        return to_bits(self.standard, self.symbol, self.magnitude)

    def size_in_unit(self, symbol: str) -> float:
        """
        Size measured in another symbol of the same standard.

        Returns 0.0 if either symbol is not registered for this unit's standard.

        Examples:
            >>> a = Unit.iec(10, "MiB")
            >>> a.size_in_unit("KiB"), a.size_in_unit("GiB"), a.size_in_unit("Mib")
            (10240.0, 0.009765625, 80.0)
        """
        return size_in_unit(self.standard, self.symbol, self.magnitude, symbol)

    def as_str(self, precision: int | None = None, separator: str | None = None) -> str:
        """
        Magnitude and symbol as a string, e.g. '2.25 MiB'.

        Args:
            precision: Fixed number of decimal digits; by default whole values
                show as integers and others keep their trimmed digits.
            separator: Text between number and symbol.
        """
        precision = units_conf.PRECISION if precision is None else precision
        separator = units_conf.SEPARATOR if separator is None else separator
        return f"{_format_magnitude(self.magnitude, precision)}{separator}{self.symbol}"

    # Arithmetic ---------------------------------------------------------------

    def add(self, other: "Unit") -> "Unit":
        return arithmetic.add(self, other)

    def subtract(self, other: "Unit") -> "Unit":
        return arithmetic.subtract(self, other)

    def multiply(self, other: "Unit") -> "Unit":
        return arithmetic.multiply(self, other)

    def divide(self, other: "Unit") -> "Unit":
        return arithmetic.divide(self, other)

    def __add__(self, other):
        if not isinstance(other, Unit):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Unit):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        return self.multiply(other)

    def __truediv__(self, other):
        return self.divide(other)

    # Validation ---------------------------------------------------------------

    def _validate_magnitude(self):
        if isinstance(self.magnitude, bool) or not isinstance(self.magnitude, (int, float)):
            raise TypeError(f"The 'magnitude' must be int | float: {type(self.magnitude)}.")

    @staticmethod
    def _parse_standard(standard) -> UnitStandard:
        if isinstance(standard, UnitStandard):
            return standard
        if isinstance(standard, str):
            try:
                return UnitStandard(standard)
            except ValueError:
                pass
        raise UnitStandardNotSupported(standard)


# Methods --------------------------------------------------------------------------------------------------------------

def new_unit(standard: UnitStandard | str, magnitude: int | float, symbol: str) -> Unit:
    """
    Create a Unit for a standard chosen at runtime.

    Raises:
        UnitStandardNotSupported: if standard is not SI or IEC.
        UnitSymbolNotSupported: if symbol is not registered for the standard.

    Examples:
        >>> new_unit(UnitStandard.IEC, 1, "GiB").exponent
        3
        >>> new_unit(UnitStandard.IEC, 3, "")
        Traceback (most recent call last):
        ...
        bitty.errors.UnitSymbolNotSupported: unit symbol not supported: empty symbol
    """
    return Unit(magnitude, symbol, standard)


def trimmed_digits(number: int | float) -> int:
    """
    Count digits left after dropping leading and trailing zeros.

    Used to pick how many significant digits to show, so that 2.25 shows as
    2.25 and 2.073741824 keeps all of its digits.

    Examples:
        trimmed_digits(123000) == 3
        trimmed_digits(0.456) == 3
        trimmed_digits(0) == 1
    """
    if number == 0:
        return 1

    str_number = str(abs(number))

    # Scientific notation
    if 'e' in str_number.lower():
        mantissa = str_number.lower().split('e')[0]
        digits = mantissa.replace('.', '').rstrip('0')
        return len(digits) if digits else 1

    digits = str_number.replace('.', '').rstrip('0').lstrip('0')
    return len(digits) if digits else 1


def _format_magnitude(magnitude: float, precision: int | None) -> str:
    if precision is not None:
        return f"{magnitude:.{precision}f}"
    if not math.isfinite(magnitude):
        return str(magnitude)
    if units_conf.WHOLE_AS_INT and magnitude.is_integer():
        return str(int(magnitude))
    return f"{magnitude:.{trimmed_digits(magnitude)}g}"
