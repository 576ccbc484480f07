"""Integer helpers: modular arithmetic, primality testing, conversion, sampling and encoding."""

__version__ = "0.1.0"

__all__ = [
    "convert",
    "errors",
    "integer",
    "modular",
    "primes",
    "ring",
    "sampling",
    "serialization",
]