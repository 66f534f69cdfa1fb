"""A collection of sounds, loaded from files or added from memory."""

from __future__ import annotations

import sys
from array import array
from pathlib import Path
from typing import Iterable, Union

from .errors import ErrorType, ExadrumsError
from .sound import Sound
from .wav import HEADER_SIZE, WavHeader

PathLike = Union[str, Path]


class SoundBank:
    """Sounds identified by an id, read from the ``SoundBank`` folder of a data folder."""

    def __init__(self, data_folder: PathLike) -> None:
        self.folder = Path(data_folder) / "SoundBank"
        self.sounds: list[Sound] = []

    def __len__(self) -> int:
        return len(self.sounds)

    def _at(self, sound_id: int) -> Sound:
        if not 0 <= sound_id < len(self.sounds):
            raise IndexError(f"no sound at {sound_id}")
        return self.sounds[sound_id]

    def load_sound(self, filename: PathLike, volume: float = 1.0) -> int:
        """Load a WAV file from the bank folder and return its id."""
        path = self.folder / filename
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise ExadrumsError(f"Could not open sound file: {path}", ErrorType.ERROR) from exc
        if len(raw) < HEADER_SIZE:
            raise ExadrumsError(f"Couldn't read sound file: {path}", ErrorType.ERROR)
        header = WavHeader.from_bytes(raw[:HEADER_SIZE])
        if header.subchunk2_size + HEADER_SIZE != len(raw):
            raise ExadrumsError(f"Couldn't read sound file: {path}", ErrorType.ERROR)
        payload = raw[HEADER_SIZE:]
        samples = array("h")
        samples.frombytes(payload[: len(payload) // 2 * 2])
        if sys.byteorder == "big":
            samples.byteswap()
        return self.add_sound(samples, volume)

    def add_sound(self, data: Iterable[int], volume: float = 1.0) -> int:
        """Add sample data as a new sound and return its id."""
        sound_id = len(self.sounds)
        self.sounds.append(Sound(data, volume, sound_id))
        return sound_id

    def add_sound_object(self, sound: Sound, volume: float = 1.0) -> int:
        """Add an existing sound, giving it a new id and ``volume``; return the id."""
        sound.id = len(self.sounds)
        sound.volume = float(volume)
        self.sounds.append(sound)
        return sound.id

    def delete_sound(self, sound_id: int) -> None:
        """Remove the sound with id ``sound_id``, if there is one."""
        for position, sound in enumerate(self.sounds):
            if sound.id == sound_id:
                del self.sounds[position]
                return

    def loop_sound(self, sound_id: int, loop: bool) -> None:
        """Set whether a sound loops; unknown ids are ignored."""
        if 0 <= sound_id < len(self.sounds):
            self.sounds[sound_id].loop = loop

    def clear(self) -> None:
        """Remove every sound."""
        self.sounds = []

    def set_sound_volume(self, sound_id: int, volume: float) -> None:
        """Set a sound's volume, clamped to 0 to 1."""
        self._at(sound_id).set_volume(volume)

    def get_sound(self, sound_id: int) -> Sound:
        """Return the sound at ``sound_id``."""
        return self._at(sound_id)


def get_sound_files(data_folder: PathLike) -> list[str]:
    """List ``.raw`` files one directory deep in the bank folder, as ``dir/file``."""
    location = Path(data_folder) / "SoundBank"
    paths = []
    for directory in sorted(p for p in location.iterdir() if p.is_dir()):
        for entry in sorted(directory.iterdir()):
            if entry.suffix == ".raw":
                paths.append(f"{directory.name}/{entry.name}")
    return paths