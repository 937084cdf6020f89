#
# Bitty Unit Symbols
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Iterator

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import UnitExponentNotSupported


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class UnitStandard(StrEnum):
    """
    Measurement standards for digital storage.

    Attributes:
        SI (str)  : Decimal, 1 KB = 10³ bytes
        IEC (str) : Binary, 1 KiB = 2¹⁰ bytes
    """
    SI = "SI"
    IEC = "IEC"


# @formatter:off
@unique
class UnitSymbol(StrEnum):
    """
    Registered unit symbols.

    Bit-flavored symbols end with a lowercase 'b', byte-flavored ones with 'B'.
    Bit and Byte are shared by both standards.
    """
    Bit  = "Bit"
    Byte = "Byte"

    Kib = "Kib"; KiB = "KiB"
    Mib = "Mib"; MiB = "MiB"
    Gib = "Gib"; GiB = "GiB"
    Tib = "Tib"; TiB = "TiB"
    Pib = "Pib"; PiB = "PiB"
    Eib = "Eib"; EiB = "EiB"
    Zib = "Zib"; ZiB = "ZiB"
    Yib = "Yib"; YiB = "YiB"

    Kb = "Kb"; KB = "KB"
    Mb = "Mb"; MB = "MB"
    Gb = "Gb"; GB = "GB"
    Tb = "Tb"; TB = "TB"
    Pb = "Pb"; PB = "PB"
    Eb = "Eb"; EB = "EB"
    Zb = "Zb"; ZB = "ZB"
    Yb = "Yb"; YB = "YB"
# @formatter:on


@dataclass(frozen=True, slots=True)
class UnitSymbolPair:
    """
    The bit-flavored (least) and byte-flavored (greatest) symbols of one standard and exponent.

    Example:
        UnitSymbolPair(UnitStandard.IEC, 2, UnitSymbol.Mib, UnitSymbol.MiB)
    """
    standard: UnitStandard
    exponent: int
    least: UnitSymbol
    greatest: UnitSymbol

    def __contains__(self, symbol: object) -> bool:
        return symbol == self.least or symbol == self.greatest


class SymbolTable:
    """
    Immutable registry of unit symbol pairs.

    Lookups never raise unless the method name says so: the find_* methods
    return None for anything that is not registered. Pairs are searched in
    registration order, so the first match wins for Bit and Byte, which are
    registered under both standards.
    """

    __slots__ = ("_pairs", "_by_symbol", "_by_exponent")

    def __init__(self, pairs: tuple[UnitSymbolPair, ...]):
        self._pairs = tuple(pairs)
        by_symbol: dict[tuple[UnitStandard, str], UnitSymbolPair] = {}
        by_exponent: dict[tuple[UnitStandard, int], UnitSymbolPair] = {}
        for pair in self._pairs:
            key = (pair.standard, pair.exponent)
            if key in by_exponent:
                raise ValueError(f"Duplicate symbol pair for {pair.standard} exponent {pair.exponent}")
            by_exponent[key] = pair
            by_symbol.setdefault((pair.standard, str(pair.least)), pair)
            by_symbol.setdefault((pair.standard, str(pair.greatest)), pair)
        self._by_symbol = by_symbol
        self._by_exponent = by_exponent

    def __iter__(self) -> Iterator[UnitSymbolPair]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, symbol: object) -> bool:
        return self.find_standard(symbol) is not None

    def __repr__(self) -> str:
        return f"SymbolTable({len(self._pairs)} pairs)"

    def pairs(self, standard: UnitStandard | None = None) -> tuple[UnitSymbolPair, ...]:
        """Registered pairs in order, optionally only those of one standard."""
        if standard is None:
            return self._pairs
        return tuple(p for p in self._pairs if p.standard == standard)

    def symbols(self, standard: UnitStandard | None = None) -> tuple[UnitSymbol, ...]:
        """Registered symbols, least before greatest for each exponent."""
        return tuple(sym for p in self.pairs(standard) for sym in (p.least, p.greatest))

    def find_pair_by_symbol(self, standard: UnitStandard, symbol: object) -> UnitSymbolPair | None:
        if not isinstance(symbol, str):
            return None
        return self._by_symbol.get((standard, symbol))

    def find_pair_by_exponent(self, standard: UnitStandard, exponent: int) -> UnitSymbolPair | None:
        return self._by_exponent.get((standard, exponent))

    def find_exponent(self, standard: UnitStandard, symbol: object) -> int | None:
        pair = self.find_pair_by_symbol(standard, symbol)
        return pair.exponent if pair is not None else None

    def find_standard(self, symbol: object) -> UnitStandard | None:
        """
        Standard owning the symbol, first match wins.

        Examples:
            >>> symbol_table.find_standard("MiB")
            <UnitStandard.IEC: 'IEC'>
            >>> symbol_table.find_standard("Byte")
            <UnitStandard.SI: 'SI'>
        """
        for pair in self._pairs:
            if symbol in pair:
                return pair.standard
        return None

    def least_symbol(self, standard: UnitStandard, exponent: int) -> UnitSymbol:
        """
        Bit-flavored symbol at the exponent.

        Raises:
            UnitExponentNotSupported: if the standard has no pair at this exponent.
        """
        pair = self.find_pair_by_exponent(standard, exponent)
        if pair is None:
            raise UnitExponentNotSupported(exponent, standard)
        return pair.least

    def greatest_symbol(self, standard: UnitStandard, exponent: int) -> UnitSymbol:
        """
        Byte-flavored symbol at the exponent.

        Raises:
            UnitExponentNotSupported: if the standard has no pair at this exponent.
        """
        pair = self.find_pair_by_exponent(standard, exponent)
        if pair is None:
            raise UnitExponentNotSupported(exponent, standard)
        return pair.greatest

    def max_exponent(self, standard: UnitStandard) -> int:
        """Largest registered exponent of the standard, 0 if none."""
        return max((p.exponent for p in self._pairs if p.standard == standard), default=0)

    def is_bit_symbol(self, symbol: object) -> bool:
        """True for bit-flavored symbols: Bit, Kib, Mb, ..."""
        return any(symbol == p.least for p in self._pairs)

    def is_byte_symbol(self, symbol: object) -> bool:
        """True for byte-flavored symbols: Byte, KiB, MB, ..."""
        return any(symbol == p.greatest for p in self._pairs)


# Module Constants -----------------------------------------------------------------------------------------------------

def _build_pairs() -> tuple[UnitSymbolPair, ...]:
    S = UnitSymbol
    iec = ((S.Kib, S.KiB), (S.Mib, S.MiB), (S.Gib, S.GiB), (S.Tib, S.TiB),
           (S.Pib, S.PiB), (S.Eib, S.EiB), (S.Zib, S.ZiB), (S.Yib, S.YiB))
    si = ((S.Kb, S.KB), (S.Mb, S.MB), (S.Gb, S.GB), (S.Tb, S.TB),
          (S.Pb, S.PB), (S.Eb, S.EB), (S.Zb, S.ZB), (S.Yb, S.YB))

    pairs = [
        UnitSymbolPair(UnitStandard.SI, 0, S.Bit, S.Byte),
        UnitSymbolPair(UnitStandard.IEC, 0, S.Bit, S.Byte),
    ]
    pairs += [UnitSymbolPair(UnitStandard.IEC, exp, lst, grt) for exp, (lst, grt) in enumerate(iec, start=1)]
    pairs += [UnitSymbolPair(UnitStandard.SI, exp, lst, grt) for exp, (lst, grt) in enumerate(si, start=1)]
    return tuple(pairs)


symbol_table = SymbolTable(_build_pairs())

# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Every symbol is registered, and only Bit/Byte are shared between standards.
if set(symbol_table.symbols()) != set(UnitSymbol):
    raise AssertionError("Configuration Error: every UnitSymbol must be registered in the symbol table.")

if set(symbol_table.symbols(UnitStandard.SI)) & set(symbol_table.symbols(UnitStandard.IEC)) \
        != {UnitSymbol.Bit, UnitSymbol.Byte}:
    raise AssertionError("Configuration Error: only Bit and Byte may be shared between SI and IEC.")
