#
# Bitty - Arithmetic Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import warnings

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bitty.arithmetic import add, add_units, divide, multiply, subtract, subtract_units
from bitty.errors import OperationNotSupported, UnitOperandDropped, UnitSymbolNotSupported
from bitty.parse import parse
from bitty.symbols import UnitStandard, UnitSymbol
from bitty.units import Unit


# Tests ----------------------------------------------------------------------------------------------------------------

class TestAdd:

    @pytest.mark.parametrize(
        "left, right, expected",
        [
            pytest.param(Unit(2, "MiB"), Unit(2, "MiB"), Unit(4, "MiB"), id="same-symbol"),
            pytest.param(Unit(2, "Mib"), Unit(2, "MiB"), Unit(2.25, "MiB"), id="bit-plus-byte"),
            pytest.param(Unit(1, "Kib"), Unit(1, "Kib"), Unit(2, "Kib"), id="stays-bit-below-one-byte-unit"),
            pytest.param(Unit(4, "Bit"), Unit(4, "Bit"), Unit(1, "Byte"), id="bits-make-a-byte"),
            pytest.param(Unit(3, "Bit"), Unit(1, "Bit"), Unit(4, "Bit"), id="half-byte-stays-bits"),
            pytest.param(Unit(512, "KiB"), Unit(1, "MiB"), Unit(1.5, "MiB"), id="larger-operand-exponent"),
            pytest.param(Unit.si(1, "KB"), Unit.si(1, "KB"), Unit.si(2, "KB"), id="si-same-symbol"),
        ],
    )
    def test_add(self, left, right, expected):
        assert add(left, right) == expected

    def test_bit_plus_byte_display(self):
        assert str(add(Unit(2, "Mib"), Unit(2, "MiB"))) == "2.25 MiB"

    def test_magnitude_exponent_can_win(self):
        """The exponent suggested by the total is used when it exceeds both operands."""
        assert add(Unit(1000, "MiB"), Unit(1000, "MiB")) == Unit(1.953125, "GiB")

        result = add(Unit.si(100, "GB"), Unit.si(50, "GB"))
        assert result.symbol == UnitSymbol.Tb
        assert result.magnitude == pytest.approx(1.2)

    def test_exponent_capped_at_largest_symbol(self):
        result = add(Unit(1e6, "YiB"), Unit(1e6, "YiB"))
        assert result.symbol == UnitSymbol.YiB
        assert result.magnitude == pytest.approx(2e6)

    def test_mixed_standards_use_left_standard(self):
        result = add(Unit.iec(1, "KiB"), Unit.si(1, "KB"))
        assert result == Unit.iec(1.9765625, "KiB")

    def test_negative_operand(self):
        result = add(Unit(-3, "MiB"), Unit(1, "MiB"))
        assert result == Unit(-2, "MiB")

    def test_zero_total(self):
        result = add(Unit(0, "MiB"), Unit(0, "MiB"))
        assert result.magnitude == 0
        assert result.symbol == UnitSymbol.Mib

    def test_does_not_mutate_operands(self):
        left, right = Unit(2, "MiB"), Unit(3, "MiB")
        add(left, right)
        assert left == Unit(2, "MiB")
        assert right == Unit(3, "MiB")

    def test_invalid_left(self, foobar):
        valid = Unit(7, "MiB")
        assert add(foobar, valid) is valid

    def test_invalid_right(self, foobar):
        valid = Unit(7, "MiB")
        assert add(valid, foobar) is valid

    def test_both_invalid(self, foobar):
        assert add(foobar, foobar) == Unit(0, "Byte", UnitStandard.IEC)

    def test_both_invalid_keeps_left_standard(self, hand_assembled):
        left = hand_assembled(1, "FooBar", UnitStandard.SI)
        right = hand_assembled(1, "FooBar", UnitStandard.IEC)
        assert add(left, right) == Unit.si(0, "Byte")


class TestSubtract:

    def test_same_symbol(self):
        assert subtract(Unit(3, "Byte"), Unit(1, "Byte")) == Unit(2, "Byte")

    def test_negative_result(self):
        assert subtract(Unit(1, "Byte"), Unit(3, "Byte")) == Unit(-2, "Byte")

    def test_below_one_byte_uses_bits(self):
        assert subtract(Unit(8, "Bit"), Unit(4, "Bit")) == Unit(4, "Bit")
        assert subtract(Unit(4, "Bit"), Unit(8, "Bit")) == Unit(-4, "Bit")

    def test_log10_exponent(self):
        """The suggested exponent is floor(log10(bytes)), not the binary tier."""
        # 2 MiB = 2097152 bytes, floor(log10) = 6 selects the Eib/EiB pair
        result = subtract(Unit(3, "MiB"), Unit(1, "MiB"))
        assert result == Unit(2 ** -36, "Eib")

    def test_negative_large_difference(self):
        result = subtract(Unit(10, "GiB"), Unit(10.023, "GiB"))
        assert result.symbol == UnitSymbol.Zib
        assert result.magnitude < 0
        assert result.magnitude == pytest.approx(-0.023 * 2 ** 30 * 8 / 2 ** 70, rel=1e-6)

    def test_exponent_capped_at_largest_symbol(self):
        result = subtract(Unit.si(100, "GB"), Unit.si(50, "GB"))
        assert result.symbol == UnitSymbol.Yb
        assert result.magnitude == pytest.approx(4e-13)

    def test_zero_difference(self):
        result = subtract(Unit(2, "MiB"), Unit(2, "MiB"))
        assert result.magnitude == 0
        assert result.symbol == UnitSymbol.Mib

    def test_invalid_operand(self, foobar):
        valid = Unit(7, "MiB")
        assert subtract(foobar, valid) is valid
        assert subtract(valid, foobar) is valid
        assert subtract(foobar, foobar) == Unit(0, "Byte")


class TestMultiplyDivide:

    @pytest.mark.parametrize("operation", [multiply, divide], ids=["multiply", "divide"])
    def test_not_supported(self, operation):
        with pytest.raises(OperationNotSupported, match=operation.__name__):
            operation(Unit(2, "MiB"), Unit(2, "MiB"))


class TestAddUnits:

    @pytest.mark.parametrize(
        "left, right, expected",
        [
            pytest.param("100 GB", "50 GB", "150 GB", id="same-standard"),
            pytest.param("1 GB", "1 GiB", "2.073742 GB", id="si-plus-iec"),
            pytest.param("1 GiB", "1 GB", "1.931323 GiB", id="iec-plus-si"),
            pytest.param("100000 TiB", "500000 TB", "554747.350886 TiB", id="large"),
        ],
    )
    def test_add_units(self, left, right, expected):
        result = add_units(parse(left), parse(right))
        number, symbol = expected.split()
        assert result.symbol == symbol
        assert f"{result.magnitude:.{len(number.partition('.')[2])}f}" == number

    def test_left_scale_wins(self):
        """The result is never renormalized to a nicer symbol."""
        result = add_units(Unit.iec(1, "Kib"), Unit.si(1, "GB"))
        assert result.symbol == UnitSymbol.Kib
        assert result.exponent == 1
        assert result.standard == UnitStandard.IEC
        assert result.magnitude == pytest.approx((128 + 1e9) * 8 / 1024)

    def test_invalid_right_raises_with_result(self, foobar):
        valid = parse("1 GB")
        with pytest.raises(UnitOperandDropped) as exc_info:
            add_units(valid, foobar)
        assert exc_info.value.result is valid
        assert exc_info.value.dropped is foobar
        assert "FooBar" in str(exc_info.value)

    def test_invalid_left_raises_with_result(self, foobar):
        valid = parse("1 GB")
        with pytest.raises(UnitOperandDropped) as exc_info:
            add_units(foobar, valid)
        assert exc_info.value.result is valid

    def test_invalid_operand_ignore(self, foobar):
        valid = parse("1 GB")
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert add_units(valid, foobar, on_error="ignore") is valid

    def test_invalid_operand_warn(self, foobar):
        valid = parse("1 GB")
        with pytest.warns(RuntimeWarning, match="invalid symbol"):
            assert add_units(foobar, valid, on_error="warn") is valid

    def test_both_invalid(self, foobar):
        with pytest.raises(UnitSymbolNotSupported):
            add_units(foobar, foobar, on_error="ignore")

    def test_bad_on_error(self):
        with pytest.raises(ValueError, match="on_error"):
            add_units(parse("1 GB"), parse("1 GB"), on_error="skip")


class TestSubtractUnits:

    @pytest.mark.parametrize(
        "left, right, expected",
        [
            pytest.param("100 GB", "50 GB", "50 GB", id="same-standard"),
            pytest.param("1 GB", "1 GiB", "-0.073742 GB", id="si-minus-iec"),
            pytest.param("1 GiB", "1 GB", "0.068677 GiB", id="iec-minus-si"),
            pytest.param("100000 TiB", "500000 TB", "-354747.350886 TiB", id="large"),
        ],
    )
    def test_subtract_units(self, left, right, expected):
        result = subtract_units(parse(left), parse(right))
        number, symbol = expected.split()
        assert result.symbol == symbol
        assert f"{result.magnitude:.{len(number.partition('.')[2])}f}" == number

    def test_invalid_operand(self, foobar):
        valid = parse("5 MiB")
        with pytest.raises(UnitOperandDropped) as exc_info:
            subtract_units(valid, foobar)
        assert exc_info.value.result is valid
        assert exc_info.value.operation == "subtract"
        assert subtract_units(valid, foobar, on_error="ignore") is valid

    def test_both_invalid(self, foobar):
        with pytest.raises(UnitSymbolNotSupported):
            subtract_units(foobar, foobar)
