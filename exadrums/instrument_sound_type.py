"""The kinds of sound an instrument can produce."""

from __future__ import annotations

from enum import Enum

from .enums import string_to_enum


class InstrumentSoundType(Enum):
    """Sound kinds, in the order they are listed in kit files."""

    DEFAULT = 0
    RIM_SHOT = 1
    CLOSING_HI_HAT = 2

    def __str__(self) -> str:
        return _NAMES[self]

    @classmethod
    def parse(cls, text: str) -> "InstrumentSoundType":
        """Return the sound type named by the first word of ``text``."""
        words = text.split(maxsplit=1)
        return string_to_enum(cls, words[0] if words else "")


_NAMES = {
    InstrumentSoundType.DEFAULT: "DrumHead",
    InstrumentSoundType.RIM_SHOT: "RimShot",
    InstrumentSoundType.CLOSING_HI_HAT: "ClosingHiHat",
}