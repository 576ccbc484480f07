"""Probabilistic primality tests (Miller-Rabin and Baillie-PSW) and prime search."""

from __future__ import annotations

import math
import random

_INCR_LIMIT = 0x10000
_NUMBER_OF_PRIMES = 127

_PRIMES_BELOW_64 = frozenset(
    {2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61}
)
_TRIAL_DIVISORS = (3, 5, 7, 11, 13, 17, 19, 23, 37, 29, 31, 41, 43, 47, 53)


def _odd_primes_below(limit: int) -> tuple[int, ...]:
    sieve = bytearray([1]) * limit
    sieve[0:2] = b"\x00\x00"
    for i in range(2, math.isqrt(limit - 1) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, limit, i)))
    return tuple(i for i in range(3, limit, 2) if sieve[i])


_ODD_PRIMES = _odd_primes_below(1000)


def _trailing_zeros(value: int) -> int:
    return (value & -value).bit_length() - 1


def probably_prime(x: int, n: int) -> bool:
    """Report whether ``x`` is probably prime.

    Applies ``n + 1`` Miller-Rabin rounds (one forced to base 2) and a Lucas
    test. Exact for inputs below 2**64.
    """
    if x <= 0:
        return False
    if x < 64:
        return x in _PRIMES_BELOW_64
    if x % 2 == 0:
        return False
    if any(x % p == 0 for p in _TRIAL_DIVISORS):
        return False
    return probably_prime_miller_rabin(x, n + 1, True) and probably_prime_lucas(x)


def probably_prime_miller_rabin(n: int, reps: int, force2: bool) -> bool:
    """Run ``reps`` Miller-Rabin rounds with bases derived deterministically from ``n``.

    If ``force2`` is true, the last round uses base 2.
    """
    if n < 3:
        raise ValueError("Miller-Rabin test needs n >= 3")
    nm1 = n - 1
    k = _trailing_zeros(nm1)
    q = nm1 >> k
    nm3 = n - 3
    rng = random.Random(n)

    for i in range(reps):
        if i == reps - 1 and force2:
            base = 2
        else:
            base = rng.randrange(nm3) + 2

        y = pow(base, q, n)
        if y == 1 or y == nm1:
            continue

        for _ in range(1, k):
            y = pow(y, 2, n)
            if y == nm1:
                return True
            if y == 1:
                return False
        return False

    return True


def probably_prime_lucas(n: int) -> bool:
    """Report whether ``n`` passes the almost extra strong Lucas probable prime test."""
    if n in (0, 1, 2):
        return False

    p = 3
    while True:
        if p > 10000:
            raise RuntimeError(f"internal error: cannot find (D/n) = -1 for {n}")
        j = jacobi(p * p - 4, n)
        if j == -1:
            break
        if j == 0:
            return n == p + 2
        # After 40 failed attempts n is treated as a perfect square.
        if p == 40:
            return False
        p += 1

    s = n + 1
    r = _trailing_zeros(s)
    s >>= r
    nm2 = n - 2

    vk, vk1 = 2, p
    for i in reversed(range(s.bit_length())):
        if (s >> i) & 1:
            vk = (vk * vk1 + n - p) % n
            vk1 = (vk1 * vk1 + nm2) % n
        else:
            vk1 = (vk * vk1 + n - p) % n
            vk = (vk * vk + nm2) % n

    if vk == 2 or vk == nm2:
        if abs(vk * p - (vk1 << 1)) % n == 0:
            return True

    for _ in range(r - 1):
        if vk == 0:
            return True
        if vk == 2:
            return False
        vk = (vk * vk - 2) % n

    return False


def next_prime(n: int) -> int:
    """Return a probable prime greater than ``n``."""
    if n < 2:
        return 2

    res = (n + 1) | 1
    if res < 7:
        return res

    nbits = res.bit_length()
    prime_limit = min(nbits // 2, _NUMBER_OF_PRIMES - 1)
    sieve_primes = _ODD_PRIMES[:prime_limit]

    while True:
        base = res
        quotients = [base // p for p in sieve_primes]
        for incr in range(0, _INCR_LIMIT, 2):
            if any((q + incr) % p == 0 for q, p in zip(quotients, sieve_primes)):
                continue
            candidate = base + incr
            if probably_prime(candidate, 20):
                return candidate
        res = base + _INCR_LIMIT


def jacobi(x: int, y: int) -> int:
    """Return the Jacobi symbol ``(x/y)``: +1, -1 or 0. ``y`` must be odd."""
    if y % 2 == 0:
        raise ValueError(f"invalid arguments, y must be an odd integer, but got {y}")

    a, b = x, y
    j = 1
    if b < 0:
        if a < 0:
            j = -1
        b = -b

    while True:
        if b == 1:
            return j
        if a == 0:
            return 0
        a %= b
        if a == 0:
            return 0

        s = _trailing_zeros(a)
        if s & 1 and b & 7 in (3, 5):
            j = -j

        c = a >> s
        if b & 3 == 3 and c & 3 == 3:
            j = -j

        a, b = b, c