"""Reading delimited tokens from text streams."""

from __future__ import annotations

from typing import Iterator, Optional, TextIO


def _check_delimiter(delimiter: str) -> None:
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")


def read_token(stream: TextIO, delimiter: str = "\n") -> Optional[str]:
    """Read up to and excluding the next delimiter, which is consumed.

    Returns ``None`` when the stream is exhausted before any character
    could be read.
    """
    _check_delimiter(delimiter)
    chars: list[str] = []
    while True:
        char = stream.read(1)
        if not char:
            return "".join(chars) if chars else None
        if char == delimiter:
            return "".join(chars)
        chars.append(char)


def iter_tokens(stream: TextIO, delimiter: str) -> Iterator[str]:
    """Yield every delimited token of ``stream``."""
    _check_delimiter(delimiter)
    while (token := read_token(stream, delimiter)) is not None:
        yield token


def iter_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of ``stream`` without their line endings."""
    return iter_tokens(stream, "\n")