"""Encoding of big integers as raw bytes or as hexadecimal text."""

from __future__ import annotations

import string
from collections.abc import Iterable

from .convert import from_bytes, to_bytes

_HEX_DIGITS = frozenset(string.hexdigits)


def encode(n: int, human_readable: bool) -> bytes | str:
    """Encode the magnitude of ``n`` as big-endian bytes, or as their hex text if human readable."""
    raw = to_bytes(n)
    return raw.hex() if human_readable else raw


def _decode_hex(text: str) -> bytes:
    if len(text) % 2 or not _HEX_DIGITS.issuperset(text):
        raise ValueError("malformed hex encoding")
    return bytes.fromhex(text)


def decode(value: bytes | bytearray | memoryview | str | Iterable[int]) -> int:
    """Decode a value produced by :func:`encode`, or a sequence of byte values."""
    if isinstance(value, str):
        return from_bytes(_decode_hex(value))
    if isinstance(value, (bytes, bytearray, memoryview)):
        return from_bytes(bytes(value))
    try:
        raw = bytes(list(value))
    except (TypeError, ValueError) as exc:
        raise ValueError("expected a sequence of byte values") from exc
    return from_bytes(raw)