"""Errors raised when parsing or narrowing big integers."""

from __future__ import annotations


class ParseBigIntError(ValueError):
    """A string could not be parsed as an integer in the given radix."""

    def __init__(self, radix: int) -> None:
        self.radix = radix
        super().__init__(f"invalid {radix}-based number representation")


class TryFromBigIntError(OverflowError):
    """An integer does not fit into the requested fixed-width type."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"conversion from BigInt to {type_name} overflowed")