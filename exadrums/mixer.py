"""Mixing the sounds that are playing into one buffer of samples."""

from __future__ import annotations

from typing import Optional

from .misc import clamp
from .sound import SoundState
from .sound_bank import SoundBank

PLAY_LIST_SIZE = 256
_SAMPLE_MIN = -32768
_SAMPLE_MAX = 32767


class Mixer:
    """Keeps a fixed-size play list and mixes it one period at a time."""

    def __init__(self, sound_bank: Optional[SoundBank] = None) -> None:
        self.sound_bank = sound_bank
        self.play_list = [SoundState() for _ in range(PLAY_LIST_SIZE)]
        self._used = 0

    def play_sound(self, sound_id: int, volume: float) -> None:
        """Start a sound, reusing an idle slot of the same sound if there is one.

        When the play list is full the request is ignored.
        """
        for state in self.play_list[: self._used]:
            if state.id == sound_id and not state.is_playing:
                state.volume = volume
                state.index = 0
                state.is_playing = True
                return
        if self._used >= len(self.play_list):
            return
        state = self.play_list[self._used]
        self._used += 1
        state.id = sound_id
        state.volume = volume
        state.index = 0
        state.is_playing = True

    def stop_sound(self, sound_id: int) -> None:
        """Stop every slot that plays ``sound_id``."""
        for state in self.play_list:
            if state.id == sound_id:
                state.is_playing = False

    def mix(self, period_size: int) -> list[int]:
        """Return the next ``period_size`` mixed samples and advance playback."""
        buffer = [0] * period_size
        for state in self.play_list:
            if not state.is_playing:
                continue
            if self.sound_bank is None:
                raise RuntimeError("mixer has no sound bank")
            sound = self.sound_bank.get_sound(state.id)
            if not sound.has_more_data(state.index, period_size):
                state.is_playing = False
                continue

            gain = sound.volume * state.volume
            if sound.loop:
                if sound.index % sound.length < period_size:
                    sound.set_start_time()
                samples = (sound.value_at(i + state.index) for i in range(period_size))
            else:
                samples = iter(sound.data[state.index : state.index + period_size])

            for i, sample in enumerate(samples):
                mixed = int(buffer[i] + gain * sample)
                buffer[i] = clamp(mixed, _SAMPLE_MIN, _SAMPLE_MAX)

            if sound.loop:
                sound.store_index(state.index)
            state.index += period_size
        return buffer

    def clear(self) -> None:
        """Stop all sounds and free the play list."""
        self._used = 0
        for state in self.play_list:
            state.is_playing = False