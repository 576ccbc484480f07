"""Extended Euclidean algorithm and modular inverses over the integers."""

from __future__ import annotations


def normalized_extended_euclidean(x: int, y: int) -> tuple[int, int, int]:
    """Return ``(g, p, q)`` with ``g = gcd(x, y) >= 0`` and ``x*p + y*q == g``."""
    old = (abs(x), -1 if x < 0 else 1, 0)
    now = (abs(y), 0, -1 if y < 0 else 1)
    while now[0]:
        quotient, remainder = divmod(old[0], now[0])
        old, now = now, (
            remainder,
            old[1] - quotient * now[1],
            old[2] - quotient * now[2],
        )
    return old


def modulo_inverse(a: int, m: int) -> int | None:
    """Return ``x`` with ``a*x == 1 (mod m)``, or ``None`` if ``a`` and ``m`` are not coprime.

    The result is not reduced into ``[0, m)``.
    """
    g, inverse, _ = normalized_extended_euclidean(a, m)
    return inverse if g == 1 else None