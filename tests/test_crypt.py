import base64
import struct

import pytest

from exadrums.crypt import base64_encode, base64_encode_values


@pytest.mark.parametrize(
    "raw, encoded",
    [(b"f", "Zg=="), (b"fo", "Zm8="), (b"foo", "Zm9v")],
)
def test_known_vectors(raw, encoded):
    assert base64_encode(raw) == encoded


def test_empty():
    assert base64_encode(b"") == ""


@pytest.mark.parametrize("length", range(0, 20))
def test_round_trip_all_lengths(length):
    raw = bytes((i * 37 + 11) % 256 for i in range(length))
    encoded = base64_encode(raw)
    assert len(encoded) % 4 == 0
    assert base64.b64decode(encoded) == raw


def test_accepts_list_of_ints():
    assert base64_encode([0xFF, 0x00, 0x7F]) == base64_encode(b"\xff\x00\x7f")


def test_values_native_layout():
    values = [1, -2, 32767, -32768]
    encoded = base64_encode_values(values, "h")
    decoded = base64.b64decode(encoded)
    assert list(struct.unpack(f"={len(values)}h", decoded)) == values


def test_values_float_typecode():
    encoded = base64_encode_values([0.5, -1.25], "f")
    assert struct.unpack("=2f", base64.b64decode(encoded)) == (0.5, -1.25)