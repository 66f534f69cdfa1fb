"""Small helpers: lenient text-to-value parsing, joining and clamping."""

from __future__ import annotations

import operator
import re
from typing import Any, Callable, Iterable, Sequence, TypeVar

T = TypeVar("T")

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def str_to_value(text: str, kind: type) -> Any:
    """Parse the leading value of ``text`` as ``kind``.

    Leading whitespace is skipped and trailing characters are ignored.
    Text that does not start with a valid value gives the zero value of
    ``kind``. Strings yield the first whitespace-delimited word; booleans
    are read as integers, only ``1`` being true.
    """
    stripped = text.lstrip()
    if kind is str:
        words = stripped.split(maxsplit=1)
        return words[0] if words else ""
    if kind is bool:
        match = _INT_RE.match(stripped)
        return bool(match) and int(match.group()) == 1
    if kind is int:
        match = _INT_RE.match(stripped)
        return int(match.group()) if match else 0
    if kind is float:
        match = _FLOAT_RE.match(stripped)
        return float(match.group()) if match else 0.0
    words = stripped.split(maxsplit=1)
    return kind(words[0]) if words else kind()


def strings_to_tuple(strings: Sequence[str], kinds: Sequence[type]) -> tuple:
    """Parse each string with the matching kind, in order."""
    if len(strings) < len(kinds):
        raise ValueError(f"expected at least {len(kinds)} strings, got {len(strings)}")
    return tuple(str_to_value(text, kind) for text, kind in zip(strings, kinds))


def _number_to_str(value: Any) -> str:
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float):
        return f"{value:f}"
    return str(value)


def join_to_str(values: Iterable[Any], separator: str = ",") -> str:
    """Join numbers as text; floats are written with six decimals."""
    return separator.join(_number_to_str(value) for value in values)


def clamp(value: T, lo: T, hi: T, less: Callable[[T, T], bool] = operator.lt) -> T:
    """Return ``lo`` if value is below it, ``hi`` if above, else ``value``."""
    if less(value, lo):
        return lo
    if less(hi, value):
        return hi
    return value