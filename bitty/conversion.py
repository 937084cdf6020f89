"""
Bitty scale conversion between unit symbols, bytes and bits.

Every function here is total: a symbol that is not registered for the given
standard converts to 0.0 instead of raising. A zero is how the library reports
"this quantity cannot be expressed in bytes".
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math

# Local ----------------------------------------------------------------------------------------------------------------
from .symbols import UnitStandard, UnitSymbol, symbol_table


# Methods --------------------------------------------------------------------------------------------------------------

def unit_scale(standard: UnitStandard, exponent: int) -> int:
    """
    Number of bytes in one byte-flavored unit of the exponent.

    IEC uses 2^(10·exponent), SI uses 10^(3·exponent).

    Raises:
        ValueError: for an unknown standard.

    Examples:
        >>> unit_scale(UnitStandard.IEC, 2)
        1048576
        >>> unit_scale(UnitStandard.SI, 2)
        1000000
    """
    if standard == UnitStandard.IEC:
        return 2 ** (10 * exponent)
    elif standard == UnitStandard.SI:
        return 10 ** (3 * exponent)
    raise ValueError(f"Unknown unit standard: {standard!r}")


def to_bytes(standard: UnitStandard, symbol: str, magnitude: float) -> float:
    """
    Convert a magnitude expressed in symbol to bytes.

    Examples:
        >>> to_bytes(UnitStandard.IEC, "MiB", 10)
        10485760.0
        >>> to_bytes(UnitStandard.IEC, "Mib", 10)
        1310720.0
        >>> to_bytes(UnitStandard.SI, "Bit", 16)
        2.0
    """
    pair = symbol_table.find_pair_by_symbol(standard, symbol)
    if pair is None:
        return 0.0

    if symbol == UnitSymbol.Bit:
        return magnitude / 8
    if symbol == UnitSymbol.Byte:
        return float(magnitude)

    scale = unit_scale(pair.standard, pair.exponent)
    if symbol == pair.least:
        return scale * magnitude * 0.125
    return float(scale * magnitude)


def from_bytes(standard: UnitStandard, symbol: str, total: float) -> float:
    """
    Express a byte total in symbol, the inverse of to_bytes().

    Examples:
        >>> from_bytes(UnitStandard.IEC, "MiB", 2359296)
        2.25
        >>> from_bytes(UnitStandard.SI, "Kb", 1000)
        8.0
    """
    pair = symbol_table.find_pair_by_symbol(standard, symbol)
    if pair is None:
        return 0.0

    if symbol == UnitSymbol.Bit:
        return total * 8.0
    if symbol == UnitSymbol.Byte:
        return float(total)

    scale = unit_scale(pair.standard, pair.exponent)
    if symbol == pair.least:
        return total * 8.0 / scale
    return total / scale


def to_bits(standard: UnitStandard, symbol: str, magnitude: float) -> float:
    """
    Convert a magnitude expressed in symbol to bits.

    Bit is the fixed point of the bit/byte duality and is handled before the
    general rule of eight bits per byte.
    """
    if symbol_table.find_pair_by_symbol(standard, symbol) is None:
        return 0.0
    if symbol == UnitSymbol.Bit:
        return float(magnitude)
    return to_bytes(standard, symbol, magnitude) * 8


def size_in_unit(standard: UnitStandard, symbol: str, magnitude: float, target: str) -> float:
    """
    Size of magnitude·symbol measured in target, both symbols of the same standard.

    When the source exponent exceeds the target exponent the result is
    target-bytes × exponent-difference rather than a ratio of sizes.

    Returns:
        The converted size, or 0.0 when either symbol is not registered for the
        standard or either side converts to zero bytes.

    Examples:
        >>> size_in_unit(UnitStandard.IEC, "MiB", 10, "GiB")
        0.009765625
        >>> size_in_unit(UnitStandard.IEC, "MiB", 10, "Mib")
        80.0
    """
    source_exp = symbol_table.find_exponent(standard, symbol)
    target_exp = symbol_table.find_exponent(standard, target)
    if source_exp is None or target_exp is None:
        return 0.0

    left = to_bytes(standard, symbol, magnitude)
    right = to_bytes(standard, target, magnitude)
    diff_exp = source_exp - target_exp

    if diff_exp > 0:
        return right * diff_exp
    if left != 0 and right != 0 and math.isfinite(left) and math.isfinite(right):
        return (left / right) * magnitude
    return 0.0
