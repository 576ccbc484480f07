"""Bit manipulation, integer division variants and integer roots."""

from __future__ import annotations

import math


def _check_bit(bit: int) -> None:
    if bit < 0:
        raise ValueError(f"bit index must be non-negative, got {bit}")


def _check_divisor(b: int) -> None:
    if b == 0:
        raise ZeroDivisionError("division by zero")


def set_bit(n: int, bit: int, value: bool) -> int:
    """Return ``n`` with the given bit set to ``value``."""
    _check_bit(bit)
    mask = 1 << bit
    return n | mask if value else n & ~mask


def test_bit(n: int, bit: int) -> bool:
    """Report whether the given bit of ``n`` is set (two's complement for negatives)."""
    _check_bit(bit)
    return bool(n & (1 << bit))


def bit_length(n: int) -> int:
    """Return the number of bits in ``abs(n)``; zero has length 0."""
    return abs(n).bit_length()


def div_floor(a: int, b: int) -> int:
    """Return the quotient rounded towards negative infinity."""
    _check_divisor(b)
    return a // b


def mod_floor(a: int, b: int) -> int:
    """Return the remainder whose sign follows the divisor."""
    _check_divisor(b)
    return a % b


def div_ceil(a: int, b: int) -> int:
    """Return the quotient rounded towards positive infinity."""
    _check_divisor(b)
    return -(-a // b)


def div_rem(a: int, b: int) -> tuple[int, int]:
    """Return quotient truncated towards zero and the remainder with the sign of ``a``."""
    _check_divisor(b)
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


def div_mod_floor(a: int, b: int) -> tuple[int, int]:
    """Return ``(div_floor(a, b), mod_floor(a, b))``."""
    _check_divisor(b)
    return divmod(a, b)


def gcd(a: int, b: int) -> int:
    """Return the non-negative greatest common divisor."""
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    """Return the non-negative least common multiple; zero if either is zero."""
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // math.gcd(a, b)


def next_multiple_of(n: int, m: int) -> int:
    """Return the smallest multiple of ``m`` not below ``n`` (in the direction of ``m``)."""
    remainder = mod_floor(n, m)
    return n if remainder == 0 else n + (m - remainder)


def prev_multiple_of(n: int, m: int) -> int:
    """Return the largest multiple of ``m`` not above ``n`` (in the direction of ``m``)."""
    return n - mod_floor(n, m)


def is_even(n: int) -> bool:
    """Report whether ``n`` is divisible by two."""
    return n % 2 == 0


def is_odd(n: int) -> bool:
    """Report whether ``n`` is not divisible by two."""
    return n % 2 == 1


def _root_of_magnitude(n: int, k: int) -> int:
    if n < 2 or k == 1:
        return n
    if k == 2:
        return math.isqrt(n)
    x = 1 << -(-n.bit_length() // k)
    while True:
        y = ((k - 1) * x + n // x ** (k - 1)) // k
        if y >= x:
            return x
        x = y


def nth_root(n: int, k: int) -> int:
    """Return the ``k``-th root of ``n`` truncated towards zero.

    Raises ``ValueError`` for ``k == 0`` or an even root of a negative number.
    """
    if k <= 0:
        raise ValueError("root degree must be positive")
    if n < 0:
        if k % 2 == 0:
            raise ValueError("even root of a negative number")
        return -_root_of_magnitude(-n, k)
    return _root_of_magnitude(n, k)


def sqrt(n: int) -> int:
    """Return the integer square root of a non-negative ``n``."""
    return nth_root(n, 2)


def cbrt(n: int) -> int:
    """Return the integer cube root of ``n``, truncated towards zero."""
    return nth_root(n, 3)