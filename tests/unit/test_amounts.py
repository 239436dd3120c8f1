"""Unit tests for decimal amount to u256 conversion."""

from decimal import Decimal

import pytest

from src.tip.amounts import UINT256_MAX, FixedPointAmount, parse_amount, to_fixed_point
from src.tip.errors import InvalidAmount

WEI = 10**18


@pytest.mark.unit
class TestToFixedPoint:
    """Test scaling by 10**18 and the high/low split."""

    @pytest.mark.parametrize("text, expected", [
        ("10", 10 * WEI),
        ("50", 50 * WEI),
        ("100", 100 * WEI),
        ("0.1", 10**17),
        ("0.5", 5 * 10**17),
        ("1e3", 1000 * WEI),
        ("0", 0),
        (" 2.25 ", 2_250_000_000_000_000_000),
    ])
    def test_scales_by_eighteen_decimals(self, text, expected):
        assert to_fixed_point(text).value == expected

    def test_small_amounts_have_no_high_word(self):
        amount = to_fixed_point("10")
        assert amount.high == 0
        assert amount.low == 10 * WEI

    def test_truncates_beyond_eighteen_decimals(self):
        assert to_fixed_point("0.0000000000000000019").value == 1
        assert to_fixed_point("0.0000000000000000001").value == 0

    def test_no_rounding_up_of_long_fractions(self):
        text = "0." + "9" * 150
        assert to_fixed_point(text).value == WEI - 1

    def test_exact_above_float_precision(self):
        """2**53 + 1 can not be represented as a float."""
        assert to_fixed_point("9007199254740993").value == 9007199254740993 * WEI

        text = "123456789012345678.123456789012345678901"
        expected = 123456789012345678 * WEI + 123456789012345678
        assert to_fixed_point(text).value == expected

    def test_large_amount_uses_high_word(self):
        amount = to_fixed_point("1e30")
        assert amount.high == (10**48) >> 128
        assert amount.low == (10**48) & ((1 << 128) - 1)
        assert amount.value == 10**48

    def test_accepts_decimal(self):
        assert to_fixed_point(Decimal("1.5")).value == 15 * 10**17

    def test_custom_decimals(self):
        assert to_fixed_point("1.5", decimals=6).value == 1_500_000

    def test_rejects_values_beyond_256_bits(self):
        with pytest.raises(InvalidAmount):
            to_fixed_point("1e60")

    def test_tiny_exponent_floors_to_zero(self):
        assert to_fixed_point("1e-999999999").value == 0

    def test_very_long_fraction(self):
        """Digits below the smallest base unit are dropped before conversion."""
        assert to_fixed_point("0." + "9" * 5000).value == WEI - 1
        assert to_fixed_point("1." + "0" * 5000).value == WEI

    def test_decimal_is_checked_directly(self):
        with pytest.raises(InvalidAmount):
            to_fixed_point(Decimal("-1"))
        with pytest.raises(InvalidAmount):
            to_fixed_point(Decimal("NaN"))
        assert to_fixed_point(Decimal("0e999999999")).value == 0


@pytest.mark.unit
class TestParseAmount:
    """Test rejection of unusable amounts."""

    @pytest.mark.parametrize("text", ["", "   ", None, "abc", "10abc", "NaN", "inf", "-Infinity"])
    def test_rejects_non_numeric(self, text):
        with pytest.raises(InvalidAmount):
            parse_amount(text)

    @pytest.mark.parametrize("text", ["-5", "-0.1", "-1e3"])
    def test_rejects_negative(self, text):
        with pytest.raises(InvalidAmount):
            parse_amount(text)

    def test_huge_exponent_rejected_without_expanding(self):
        with pytest.raises(InvalidAmount):
            parse_amount("1e999999999")

    def test_zero_with_huge_exponent_is_zero(self):
        assert parse_amount("0e999999999") == 0


@pytest.mark.unit
class TestFixedPointAmount:

    def test_from_int_splits_words(self):
        value = (7 << 128) | 42
        amount = FixedPointAmount.from_int(value)
        assert (amount.high, amount.low) == (7, 42)
        assert amount.value == value

    def test_max_value(self):
        amount = FixedPointAmount.from_int(UINT256_MAX)
        assert amount.high == amount.low == (1 << 128) - 1

    @pytest.mark.parametrize("value", [-1, UINT256_MAX + 1])
    def test_out_of_range(self, value):
        with pytest.raises(InvalidAmount):
            FixedPointAmount.from_int(value)
