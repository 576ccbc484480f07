# bigarith

Number-theory helpers for Python's built-in `int`, for code that works with
large integers such as cryptographic code. Every function takes and returns
plain `int` values; nothing is wrapped in a custom number type.

## Modules

- `bigarith.modular`: `mod_pow`, `mod_mul`, `mod_add`, `mod_sub`, `mod_inv`
  (returns `None` when no inverse exists), `reduce`, `egcd`,
  `is_probable_prime` and `find_next_prime`. `mod_pow` raises `ValueError`
  for a negative exponent.
- `bigarith.primes`: primality testing with Miller-Rabin and Lucas rounds
  (`probably_prime`, `probably_prime_miller_rabin`, `probably_prime_lucas`),
  `next_prime`, and the Jacobi symbol `jacobi` (which raises `ValueError`
  for an even second argument). Miller-Rabin bases are derived
  deterministically from the number under test.
- `bigarith.ring`: the normalized extended Euclidean algorithm
  (`normalized_extended_euclidean`) and `modulo_inverse`.
- `bigarith.convert`: big-endian byte encoding of the magnitude (`to_bytes`,
  `from_bytes`, `to_bytes_array`), hex and radix strings (`to_hex`,
  `from_hex`, `to_str_radix`, `from_str_radix`, radix 2 to 36) and checked
  narrowing to 64-bit ranges (`to_u64`, `to_i64`).
- `bigarith.integer`: bit helpers (`set_bit` returns a new number,
  `test_bit`, `bit_length`), division variants (`div_floor`, `mod_floor`,
  `div_ceil`, `div_rem`, `div_mod_floor`), `gcd`, `lcm`,
  `next_multiple_of`, `prev_multiple_of`, `is_even`, `is_odd` and integer
  roots (`nth_root`, `sqrt`, `cbrt`).
- `bigarith.sampling`: random numbers from the `secrets` module (`sample`,
  `strict_sample`, `sample_below`, `sample_range`, `strict_sample_range`).
  Empty ranges and non-positive upper bounds raise `ValueError`.
- `bigarith.serialization`: `encode` to raw bytes or to hex text, and
  `decode`, which also accepts a sequence of byte values.

Malformed text raises `ParseBigIntError` and values outside a 64-bit range
raise `TryFromBigIntError`, both from `bigarith.errors`. They subclass
`ValueError` and `OverflowError` respectively.

## Install

```
pip install .
```

## Examples

```python
from bigarith import convert, modular, sampling, serialization

convert.to_hex(1_000_000)              # 'f4240'
convert.from_bytes(b"\x0f\x42\x40")    # 1000000
convert.to_bytes_array(31, 2)          # b'\x00\x1f'

modular.mod_inv(7, 15)                 # 13
modular.egcd(10, 15)                   # (5, -1, 1)
modular.is_probable_prime(2**255 - 19, 20)   # True

n = sampling.sample_below(500)         # 0 <= n < 500
blob = serialization.encode(n, human_readable=True)
assert serialization.decode(blob) == n
```

## Limits

This is a library only: it has no command-line tool. Byte and hex encodings
carry the magnitude only, so the sign of a negative number is lost on a
round trip through `encode`/`decode` or `to_bytes`/`from_bytes`.

## Running the tests

```
pip install -e ".[test]"
pytest
```