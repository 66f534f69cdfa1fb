"""Effects applied to whole sounds."""

from __future__ import annotations

import math

from .sound import Sound


def muffle(sound: Sound, m: float) -> Sound:
    """Return a copy of ``sound`` faded out exponentially.

    Smaller ``m`` gives a faster decay; at the last sample the amplitude is
    scaled by about ``exp(-3 / m)``.
    """
    if m == 0:
        raise ValueError("muffle factor must not be zero")
    data = sound.data
    if not data:
        return Sound([])
    gamma = -3.0 / (m * len(data))
    return Sound(int(sample * math.exp(i * gamma)) for i, sample in enumerate(data))