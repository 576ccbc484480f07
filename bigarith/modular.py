"""Modular arithmetic, extended GCD and prime helpers on plain integers."""

from __future__ import annotations

from .primes import next_prime, probably_prime
from .ring import modulo_inverse, normalized_extended_euclidean


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Return ``base**exponent mod modulus``; the exponent must not be negative."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    return pow(base, exponent, modulus)


def mod_mul(a: int, b: int, modulus: int) -> int:
    """Return ``a * b mod modulus``."""
    return (a % modulus) * (b % modulus) % modulus


def mod_sub(a: int, b: int, modulus: int) -> int:
    """Return ``a - b mod modulus``."""
    return (a % modulus - b % modulus + modulus) % modulus


def mod_add(a: int, b: int, modulus: int) -> int:
    """Return ``a + b mod modulus``."""
    return (a % modulus + b % modulus) % modulus


def reduce(n: int, modulus: int) -> int:
    """Return the truncated remainder of ``n``, shifted by ``modulus`` when negative."""
    if modulus == 0:
        raise ZeroDivisionError("modulus is zero")
    remainder = abs(n) % abs(modulus)
    if n < 0:
        remainder = -remainder
    return modulus + remainder if remainder < 0 else remainder


def mod_inv(a: int, modulus: int) -> int | None:
    """Return the inverse of ``a`` modulo ``modulus``, or ``None`` if they are not coprime."""
    inverse = modulo_inverse(a, modulus)
    if inverse is None:
        return None
    return reduce(inverse, modulus)


def egcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, p, q)`` with ``g = gcd(a, b)`` and ``a*p + b*q == g``."""
    return normalized_extended_euclidean(a, b)


def is_probable_prime(n: int, reps: int) -> bool:
    """Probabilistically test ``n`` for primality; non-positive numbers are never prime."""
    if n <= 0:
        return False
    return probably_prime(n, reps)


def find_next_prime(n: int) -> int:
    """Return the next probable prime above ``n``; 2 for non-positive input."""
    if n <= 0:
        return 2
    return next_prime(n)