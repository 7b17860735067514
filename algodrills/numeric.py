"""Integer and floating-point arithmetic problems."""

from __future__ import annotations

import math

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def water_bottles(num_bottles: int, num_exchange: int) -> int:
    """Return how many bottles can be drunk when ``num_exchange`` empties buy a full one."""
    if num_exchange < 2:
        raise ValueError("num_exchange must be at least 2")
    return num_bottles + _trunc_div(num_bottles - 1, num_exchange - 1)


def divide(dividend: int, divisor: int) -> int:
    """Divide, truncating toward zero and clamping the one 32-bit overflow case."""
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    if dividend == INT_MIN and divisor == -1:
        return INT_MAX
    return _trunc_div(dividend, divisor)


def power(x: float, n: int) -> float:
    """Return ``x`` raised to the integer power ``n``."""
    return math.pow(x, n)


def int_sqrt(x: int) -> int:
    """Return the integer part of the square root of ``x``."""
    if x < 0:
        raise ValueError("x must be non-negative")
    return math.isqrt(x)


def is_palindrome(x: int) -> bool:
    """Return whether the decimal digits of ``x`` read the same both ways."""
    if x < 0:
        return False
    reversed_value = 0
    remaining = x
    while remaining > 0:
        remaining, digit = divmod(remaining, 10)
        reversed_value = reversed_value * 10 + digit
    return reversed_value == x