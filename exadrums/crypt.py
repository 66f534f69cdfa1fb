"""Base64 encoding of raw bytes and of typed value sequences."""

from __future__ import annotations

import base64
from array import array
from typing import Iterable


def base64_encode(data: bytes | bytearray | Iterable[int]) -> str:
    """Encode bytes to standard padded base64 text."""
    return base64.b64encode(bytes(data)).decode("ascii")


def base64_encode_values(values: Iterable[int | float], typecode: str = "h") -> str:
    """Encode values as their native in-memory bytes, then as base64.

    ``typecode`` is an :mod:`array` type code, ``"h"`` for 16-bit samples.
    """
    return base64_encode(array(typecode, values).tobytes())