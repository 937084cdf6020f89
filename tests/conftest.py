#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bitty.symbols import UnitStandard
from bitty.units import Unit


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def hand_assembled():
    """Factory for Unit instances that bypass validation, e.g. with an unregistered symbol."""

    def _assemble(magnitude: float, symbol: str, standard: UnitStandard = UnitStandard.IEC,
                  exponent: int = 30) -> Unit:
        unit = object.__new__(Unit)
        object.__setattr__(unit, "magnitude", magnitude)
        object.__setattr__(unit, "symbol", symbol)
        object.__setattr__(unit, "standard", standard)
        object.__setattr__(unit, "exponent", exponent)
        return unit

    return _assemble


@pytest.fixture
def foobar(hand_assembled) -> Unit:
    """An IEC unit with the unregistered symbol 'FooBar'."""
    return hand_assembled(3.5, "FooBar")
