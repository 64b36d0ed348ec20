"""Integer conversions: Roman numerals and decimal digit reversal."""

from __future__ import annotations

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_ONES = ("", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX")
_TENS = ("", "X", "XX", "XXX", "XL", "L", "LX", "LXX", "LXXX", "XC")
_HUNDREDS = ("", "C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM")
_THOUSANDS = ("", "M", "MM", "MMM")

MAX_ROMAN = 3999


def int_to_roman(num: int) -> str:
    """Return the Roman numeral for ``num`` (0 to 3999; 0 gives an empty string)."""
    if not 0 <= num <= MAX_ROMAN:
        raise ValueError(f"cannot write {num} as a Roman numeral (range 0..{MAX_ROMAN})")
    thousands, rest = divmod(num, 1000)
    hundreds, rest = divmod(rest, 100)
    tens, ones = divmod(rest, 10)
    return _THOUSANDS[thousands] + _HUNDREDS[hundreds] + _TENS[tens] + _ONES[ones]


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign.

    Returns 0 when the reversed value does not fit in a signed 32-bit integer.
    """
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    if INT32_MIN <= result <= INT32_MAX:
        return result
    return 0