"""Integer puzzles: palindromic numbers, Roman numerals and string-to-integer parsing."""

from __future__ import annotations

import re

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

_LEADING_INTEGER = re.compile(r" *([+-]?)([0-9]*)")
_MAX_DIGITS = len(str(INT_MAX))


def is_palindrome(x: int) -> bool:
    """Return True if the decimal digits of ``x`` read the same both ways.

    Negative numbers are never palindromes. A reversal that would leave the
    signed 32-bit range counts as not a palindrome.
    """
    if x < 0:
        return False
    original, reversed_value = x, 0
    while x > 0:
        if reversed_value > INT_MAX // 10:
            return False
        x, digit = divmod(x, 10)
        reversed_value = reversed_value * 10 + digit
    return original == reversed_value


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer; unknown characters count as zero."""
    result = 0
    previous = 0
    for symbol in s:
        value = _ROMAN_VALUES.get(symbol, 0)
        if value > previous:
            result += value - 2 * previous
        else:
            result += value
        previous = value
    return result


def my_atoi(s: str) -> int:
    """Parse a leading integer the way C's atoi does, clamped to 32 bits.

    Leading spaces are skipped, then an optional sign, then digits; anything
    after the digits is ignored. Text without digits gives 0.
    """
    match = _LEADING_INTEGER.match(s)
    sign, digits = match.groups()
    negative = sign == "-"
    digits = digits.lstrip("0")
    if not digits:
        return 0
    if len(digits) > _MAX_DIGITS:
        return INT_MIN if negative else INT_MAX
    value = -int(digits) if negative else int(digits)
    return max(INT_MIN, min(INT_MAX, value))