"""
Bitty arithmetic on storage units.

Same-standard add() and subtract() renormalize the result to a sensible symbol
and never raise on invalid operands. Cross-standard add_units() and
subtract_units() keep the left operand's symbol and report a dropped operand.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import warnings
from typing import TYPE_CHECKING, Callable, Literal

# Local ----------------------------------------------------------------------------------------------------------------
from .conversion import from_bytes
from .errors import OperationNotSupported, UnitOperandDropped, UnitSymbolNotSupported
from .symbols import UnitStandard, UnitSymbol, symbol_table

if TYPE_CHECKING:
    from .units import Unit


# Methods --------------------------------------------------------------------------------------------------------------

def add(left: "Unit", right: "Unit") -> "Unit":
    """
    Sum two units and pick the result symbol.

    The result exponent is the largest of both operand exponents and the
    exponent suggested by the total. The byte-flavored symbol is preferred
    unless it would display a magnitude below 1.

    An operand with an unregistered symbol contributes nothing: the other
    operand is returned unchanged, or a zero Byte if neither is valid.

    Examples:
        >>> add(Unit(2, "MiB"), Unit(2, "MiB"))
        Unit(magnitude=4.0, symbol=<UnitSymbol.MiB: 'MiB'>, standard=<UnitStandard.IEC: 'IEC'>, exponent=2)
    """
    degenerate = _degenerate(left, right)
    if degenerate is not None:
        return degenerate

    total = left.byte_size + right.byte_size
    exponent = max(left.exponent, right.exponent, _add_exponent(left.standard, total))
    return _normalize(left, total, exponent)


def subtract(left: "Unit", right: "Unit") -> "Unit":
    """
    Subtract right from left and pick the result symbol.

    Works like add() except the suggested exponent is floor(log10(|total|))
    and the result is negative when right is larger than left.
    """
    degenerate = _degenerate(left, right)
    if degenerate is not None:
        return degenerate

    total = left.byte_size - right.byte_size
    exponent = max(left.exponent, right.exponent, _subtract_exponent(total))
    return _normalize(left, total, exponent)


def multiply(left: "Unit", right: "Unit") -> "Unit":
    """Storage units cannot be multiplied by one another."""
    raise OperationNotSupported("multiply")


def divide(left: "Unit", right: "Unit") -> "Unit":
    """Storage units cannot be divided by one another."""
    raise OperationNotSupported("divide")


def add_units(
        left: "Unit",
        right: "Unit",
        *,
        on_error: Literal["raise", "warn", "ignore"] = "raise",
) -> "Unit":
    """
    Sum two units that may belong to different standards.

    The result is always expressed in the left operand's symbol and standard,
    it is never renormalized.

    Args:
        left: Operand whose symbol the result takes.
        right: Operand added to left.
        on_error: What to do when exactly one operand has an invalid symbol:
            - "raise": raise UnitOperandDropped, the valid operand is in its `result`
            - "warn": emit a RuntimeWarning and return the valid operand
            - "ignore": return the valid operand

    Raises:
        UnitSymbolNotSupported: if both operands have invalid symbols.
        UnitOperandDropped: if one operand is invalid and on_error="raise".

    Examples:
        >>> add_units(parse("1 GB"), parse("1 GiB")).magnitude
        2.073741824
    """
    return _combine_units("add", lambda a, b: a + b, left, right, on_error)


def subtract_units(
        left: "Unit",
        right: "Unit",
        *,
        on_error: Literal["raise", "warn", "ignore"] = "raise",
) -> "Unit":
    """
    Subtract two units that may belong to different standards.

    See add_units() for the result symbol and on_error handling.
    """
    return _combine_units("subtract", lambda a, b: a - b, left, right, on_error)


# Private Methods ------------------------------------------------------------------------------------------------------

def _is_valid(unit: "Unit") -> bool:
    return symbol_table.find_pair_by_symbol(unit.standard, unit.symbol) is not None


def _degenerate(left: "Unit", right: "Unit") -> "Unit | None":
    """The result of same-standard arithmetic when an operand is invalid, None if both are valid."""
    left_ok, right_ok = _is_valid(left), _is_valid(right)
    if left_ok and right_ok:
        return None
    if left_ok:
        return left
    if right_ok:
        return right
    return type(left)(0.0, UnitSymbol.Byte, left.standard)


def _round_half_away(x: float) -> int:
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def _add_exponent(standard: UnitStandard, total: float) -> int:
    """Exponent suggested by the magnitude of a sum."""
    total = abs(total)
    if total == 0 or not math.isfinite(total):
        return 0
    if standard == UnitStandard.SI:
        return _round_half_away(math.log10(total) / 3)
    return _round_half_away(math.log2(total) / 10)


def _subtract_exponent(total: float) -> int:
    """Exponent suggested by the magnitude of a difference."""
    total = abs(total)
    if total == 0 or not math.isfinite(total):
        return 0
    return math.floor(math.log10(total))


def _normalize(left: "Unit", total: float, exponent: int) -> "Unit":
    """Express a signed byte total at the exponent in the left operand's standard."""
    standard = left.standard
    exponent = min(exponent, symbol_table.max_exponent(standard))

    pair = symbol_table.find_pair_by_exponent(standard, exponent)
    negative = total < 0
    total = abs(total)

    bit_size = from_bytes(standard, pair.least, total)
    byte_size = from_bytes(standard, pair.greatest, total)
    if byte_size < 1:
        symbol, magnitude = pair.least, bit_size
    else:
        symbol, magnitude = pair.greatest, byte_size

    if negative:
        magnitude = -magnitude
    return type(left)(magnitude, symbol, standard)


def _combine_units(
        operation: str,
        op: Callable[[float, float], float],
        left: "Unit",
        right: "Unit",
        on_error: str,
) -> "Unit":
    if on_error not in ("raise", "warn", "ignore"):
        raise ValueError(f"on_error must be 'raise', 'warn' or 'ignore', got {on_error!r}")

    left_ok, right_ok = _is_valid(left), _is_valid(right)
    if not left_ok and not right_ok:
        raise UnitSymbolNotSupported(left.symbol)

    if left_ok != right_ok:
        result, dropped = (left, right) if left_ok else (right, left)
        error = UnitOperandDropped(operation, result=result, dropped=dropped)
        if on_error == "raise":
            raise error
        elif on_error == "warn":
            warnings.warn(str(error), RuntimeWarning, stacklevel=3)
        return result

    total = op(left.byte_size, right.byte_size)
    magnitude = from_bytes(left.standard, left.symbol, total)
    return type(left)(magnitude, left.symbol, left.standard)
