"""Conversions between integers and byte, text and fixed-width representations."""

from __future__ import annotations

from .errors import ParseBigIntError, TryFromBigIntError

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_U64_MAX = (1 << 64) - 1
_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1


def _check_radix(radix: int) -> None:
    if not 2 <= radix <= 36:
        raise ValueError(f"radix must be within [2; 36], got {radix}")


def to_bytes(n: int) -> bytes:
    """Return the big-endian bytes of ``abs(n)``; zero is a single zero byte."""
    magnitude = abs(n)
    return magnitude.to_bytes(max(1, (magnitude.bit_length() + 7) // 8), "big")


def from_bytes(data: bytes) -> int:
    """Read an unsigned big-endian integer; empty input gives zero."""
    return int.from_bytes(bytes(data), "big")


def to_bytes_array(n: int, length: int) -> bytes | None:
    """Return ``to_bytes(n)`` left-padded with zeros to ``length`` bytes.

    Returns ``None`` if the number does not fit.
    """
    raw = to_bytes(n)
    if len(raw) > length:
        return None
    return raw.rjust(length, b"\x00")


def to_str_radix(n: int, radix: int) -> str:
    """Render ``n`` in ``radix`` with lowercase digits and a leading minus if negative."""
    _check_radix(radix)
    magnitude = abs(n)
    if radix == 16:
        body = format(magnitude, "x")
    elif radix == 10:
        body = str(magnitude)
    elif radix == 8:
        body = format(magnitude, "o")
    elif radix == 2:
        body = format(magnitude, "b")
    elif magnitude == 0:
        body = "0"
    else:
        chars = []
        while magnitude:
            magnitude, digit = divmod(magnitude, radix)
            chars.append(_DIGITS[digit])
        body = "".join(reversed(chars))
    return f"-{body}" if n < 0 else body


def from_str_radix(text: str, radix: int) -> int:
    """Parse ``text`` in ``radix``; an optional sign and inner underscores are allowed."""
    _check_radix(radix)
    body = text
    negative = False
    if body.startswith("-"):
        negative, body = True, body[1:]
    elif body.startswith("+"):
        body = body[1:]
    if not body or body.startswith("_"):
        raise ParseBigIntError(radix)
    digits = body.replace("_", "")
    allowed = _DIGITS[:radix]
    if not digits or any(c.lower() not in allowed for c in digits):
        raise ParseBigIntError(radix)
    value = int(digits, radix)
    return -value if negative else value


def to_hex(n: int) -> str:
    """Render ``n`` in lowercase hexadecimal."""
    return to_str_radix(n, 16)


def from_hex(text: str) -> int:
    """Parse a hexadecimal string as produced by :func:`to_hex`."""
    return from_str_radix(text, 16)


def to_u64(n: int) -> int:
    """Return ``n`` if it fits an unsigned 64-bit integer."""
    if not 0 <= n <= _U64_MAX:
        raise TryFromBigIntError("u64")
    return n


def to_i64(n: int) -> int:
    """Return ``n`` if it fits a signed 64-bit integer."""
    if not _I64_MIN <= n <= _I64_MAX:
        raise TryFromBigIntError("i64")
    return n