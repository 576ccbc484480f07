import pytest

from bigarith.sampling import sample
from bigarith.serialization import decode, encode


@pytest.mark.parametrize("number", [0, 1, 1_000_000, 2**1023 + 12345])
def test_compact_round_trip(number):
    encoded = encode(number, False)
    assert isinstance(encoded, bytes)
    assert decode(encoded) == number


def test_compact_round_trip_random():
    number = sample(1024)
    assert decode(encode(number, False)) == number


def test_zero_encodes_as_single_zero_byte():
    assert encode(0, False) == b"\x00"
    assert encode(0, True) == "00"


def test_pinned_compact_encoding():
    assert encode(1_000_000, False) == b"\x0f\x42\x40"


def test_pinned_readable_encoding():
    assert encode(1_000_000, True) == "0f4240"


def test_readable_round_trip_random():
    number = sample(1024)
    text = encode(number, True)
    assert text == number.to_bytes(max(1, (number.bit_length() + 7) // 8), "big").hex()
    assert decode(text) == number


def test_deserializes_bigint_represented_as_seq():
    number = sample(1024)
    byte_values = list(encode(number, False))
    assert decode(byte_values) == number


def test_decode_bytearray_and_memoryview():
    assert decode(bytearray(b"\x0f\x42\x40")) == 1_000_000
    assert decode(memoryview(b"\x0f\x42\x40")) == 1_000_000


def test_decode_uppercase_hex():
    assert decode("0F4240") == 1_000_000


def test_decode_empty_is_zero():
    assert decode(b"") == 0
    assert decode("") == 0


def test_negative_encodes_magnitude():
    assert encode(-31, False) == b"\x1f"


@pytest.mark.parametrize("text", ["f4240", "zz", "0f 42", "0x0f"])
def test_malformed_hex_raises(text):
    with pytest.raises(ValueError, match="malformed hex encoding"):
        decode(text)


def test_sequence_with_out_of_range_value_raises():
    with pytest.raises(ValueError):
        decode([1, 256])