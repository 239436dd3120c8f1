"""Decimal token amounts to Starknet u256 fixed-point values.

Amounts arrive as decimal strings in display units (e.g. ``"0.5"`` STRK) and
are scaled by ``10**decimals`` using exact decimal arithmetic. The result is
floored and split into two 128-bit words, the layout of a Cairo ``u256``.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from .errors import InvalidAmount

UINT128_BITS = 128
UINT128_MASK = (1 << UINT128_BITS) - 1
UINT256_MAX = (1 << 256) - 1

# 2**256 has 78 digits; anything with a larger exponent can never fit.
_MAX_ADJUSTED_EXPONENT = 80


@dataclass(frozen=True)
class FixedPointAmount:
    """Unsigned 256-bit integer stored as ``(high, low)`` 128-bit words."""

    high: int
    low: int

    @classmethod
    def from_int(cls, value: int) -> "FixedPointAmount":
        if value < 0 or value > UINT256_MAX:
            raise InvalidAmount(f"Amount {value} does not fit in an unsigned 256-bit integer")
        return cls(high=value >> UINT128_BITS, low=value & UINT128_MASK)

    @property
    def value(self) -> int:
        """The 256-bit integer the two words represent."""
        return (self.high << UINT128_BITS) | self.low


def _check_amount(amount: Decimal, text) -> Decimal:
    if not amount.is_finite():
        raise InvalidAmount(f"Amount {text!r} is not a finite number")
    if amount < 0:
        raise InvalidAmount(f"Amount {text!r} must not be negative")
    if amount == 0:
        return Decimal(0)
    if amount.adjusted() > _MAX_ADJUSTED_EXPONENT:
        raise InvalidAmount(f"Amount {text!r} is too large")
    return amount


def parse_amount(text: Optional[str]) -> Decimal:
    """Parse a user supplied amount into a non-negative finite Decimal.

    Args:
        text: Decimal string such as ``"10"``, ``"0.25"`` or ``"1e3"``.

    Returns:
        The parsed amount.

    Raises:
        InvalidAmount: If the amount is missing, not a number, or negative.
    """
    if text is None or not text.strip():
        raise InvalidAmount("Amount is required")

    try:
        amount = Decimal(text.strip())
    except InvalidOperation:
        raise InvalidAmount(f"Amount {text!r} is not a number") from None

    return _check_amount(amount, text)


def to_fixed_point(amount: Union[str, Decimal, None], decimals: int = 18) -> FixedPointAmount:
    """Convert an amount in display units to its u256 base-unit value.

    The base-unit value is ``floor(amount * 10**decimals)``.

    Raises:
        InvalidAmount: If the amount is invalid or the scaled value exceeds 256 bits.
    """
    if isinstance(amount, Decimal):
        amount = _check_amount(amount, amount)
    else:
        amount = parse_amount(amount)

    _, digits, exponent = amount.as_tuple()
    shift = exponent + decimals
    if shift < 0:
        # Drop the digits below the smallest base unit; at most ~100 remain
        digits = digits[: len(digits) + shift]
        shift = 0
    if not digits:
        return FixedPointAmount(high=0, low=0)

    coefficient = int("".join(map(str, digits)))
    return FixedPointAmount.from_int(coefficient * 10**shift)
