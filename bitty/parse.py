"""
Bitty parsing of '<number> <symbol>' strings into units.

The symbol's standard is taken from the symbol table, so "1 MiB" is IEC and
"1 MB" is SI. Bit and Byte belong to both standards and parse as SI.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import BittyError, UnitCouldNotBeParsed, UnitStandardNotSupported
from .symbols import symbol_table
from .units import Unit

# Constants ------------------------------------------------------------------------------------------------------------

_UNIT_PATTERN = re.compile(r"^\s*(?P<number>[+-]?\d+(?:\.\d+)?)\s*(?P<symbol>[A-Za-z]+)\s*$")


# Methods --------------------------------------------------------------------------------------------------------------

def parse(text: str) -> Unit:
    """
    Parse text such as '10 MiB', '1.5GB' or '-3 Kib' into a Unit.

    Symbols are case-sensitive.

    Raises:
        TypeError: if text is not a string.
        UnitCouldNotBeParsed: if text does not match '<number><optional space><symbol>'.
        UnitStandardNotSupported: if the symbol is well-formed but no standard registers it.

    Examples:
        >>> str(parse("1 MiB"))
        '1 MiB'
        >>> parse("1 MiB").standard
        <UnitStandard.IEC: 'IEC'>
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a string, got {type(text).__name__}")

    match = _UNIT_PATTERN.match(text)
    if match is None:
        raise UnitCouldNotBeParsed(text)

    symbol = match.group("symbol")
    standard = symbol_table.find_standard(symbol)
    if standard is None:
        raise UnitStandardNotSupported(symbol=symbol)

    return Unit(float(match.group("number")), symbol, standard)


def validate_symbol(symbol: str) -> bool:
    """
    True if '0 <symbol>' parses.

    A symbol is only as valid as the parser's grammar allows it to be.

    Examples:
        >>> validate_symbol("KiB"), validate_symbol("kib"), validate_symbol("")
        (True, False, False)
    """
    try:
        parse(f"0 {symbol}")
    except BittyError:
        return False
    return True


def validate_symbols(left: str, right: str) -> tuple[bool, bool]:
    """Validate two symbols at once, e.g. before combining units."""
    return validate_symbol(left), validate_symbol(right)
