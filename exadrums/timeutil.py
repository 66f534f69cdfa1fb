"""Timestamp formatting and timing of callables."""

from __future__ import annotations

import time
from fractions import Fraction
from typing import Any, Callable

_UNITS = {
    "hours": Fraction(3600),
    "minutes": Fraction(60),
    "seconds": Fraction(1),
    "milliseconds": Fraction(1, 1_000),
    "microseconds": Fraction(1, 1_000_000),
    "nanoseconds": Fraction(1, 1_000_000_000),
}


def _unit_seconds(unit: str) -> Fraction:
    try:
        return _UNITS[unit]
    except KeyError:
        raise ValueError(f"unknown time unit: {unit}") from None


def timestamp_to_str(timestamp: int, unit: str = "microseconds") -> str:
    """Format a timestamp since the epoch as a local ``ctime`` date string."""
    seconds = int(Fraction(timestamp) * _unit_seconds(unit))
    return time.ctime(seconds)


def measure_time(func: Callable[[], Any], unit: str = "seconds") -> float:
    """Run ``func`` and return how long it took, in ``unit``."""
    factor = _unit_seconds(unit)
    start = time.perf_counter()
    func()
    elapsed = time.perf_counter() - start
    return elapsed / float(factor)