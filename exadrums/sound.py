"""A sampled sound and the playback state of a sound in the mixer."""

from __future__ import annotations

import time
from array import array
from dataclasses import dataclass
from typing import Iterable


def _now_us() -> int:
    return time.time_ns() // 1000


class Sound:
    """16-bit sample data with a volume, a loop flag and playback bookkeeping."""

    def __init__(self, data: Iterable[int] = (), volume: float = 1.0, sound_id: int = -1) -> None:
        self.id = sound_id
        self.loop = False
        self.data = array("h", data)
        self.volume = float(volume)
        self.index = 0
        self.last_start_time = _now_us()

    def __repr__(self) -> str:
        return f"Sound(id={self.id}, length={self.length}, volume={self.volume}, loop={self.loop})"

    @property
    def length(self) -> int:
        """Number of samples."""
        return len(self.data)

    def set_volume(self, volume: float) -> None:
        """Set the volume, clamped to the range 0 to 1."""
        self.volume = min(max(0.0, float(volume)), 1.0)

    def has_more_data(self, index: int, length: int) -> bool:
        """Whether ``length`` samples can be read from ``index``; always true when looping."""
        if self.loop:
            return True
        return index + length <= len(self.data)

    def store_index(self, index: int) -> None:
        """Record the current playback position."""
        self.index = index

    def set_start_time(self) -> None:
        """Record now, in microseconds since the epoch, as the last start time."""
        self.last_start_time = _now_us()

    def value_at(self, i: int) -> int:
        """Return sample ``i``, wrapping around the end of the data."""
        if not self.data:
            raise IndexError("sound has no data")
        return self.data[i % len(self.data)]


@dataclass
class SoundState:
    """A mixer slot: which sound, at what volume and position, and whether it plays."""

    id: int = 0
    volume: float = 0.0
    index: int = 0
    is_playing: bool = False