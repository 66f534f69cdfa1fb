"""The 44-byte canonical WAV file header."""

from __future__ import annotations

import struct
from dataclasses import dataclass

HEADER_SIZE = 44
_LAYOUT = struct.Struct("<4sI4s4sIHHIIHH4sI")


def bytes_to_word(data: bytes) -> int:
    """Read unsigned little-endian bytes as an integer."""
    return int.from_bytes(bytes(data), "little")


def _tag(text: str) -> bytes:
    return text.encode("latin-1")[:4].ljust(4, b"\0")


@dataclass
class WavHeader:
    """Fields of a canonical PCM WAV header."""

    chunk_id: str = "RIFF"
    chunk_size: int = 0
    format: str = "WAVE"
    subchunk1_id: str = "fmt "
    subchunk1_size: int = 16
    audio_format: int = 1
    num_channels: int = 2
    sample_rate: int = 48000
    byte_rate: int = 192000
    block_align: int = 4
    bits_per_sample: int = 16
    subchunk2_id: str = "data"
    subchunk2_size: int = 0

    @classmethod
    def from_bytes(cls, header_data: bytes) -> "WavHeader":
        """Parse the first 44 bytes of a WAV file."""
        if len(header_data) < HEADER_SIZE:
            raise ValueError(f"WAV header needs {HEADER_SIZE} bytes, got {len(header_data)}")
        fields = list(_LAYOUT.unpack_from(bytes(header_data)))
        for position in (0, 2, 3, 11):
            fields[position] = fields[position].decode("latin-1")
        return cls(*fields)

    def set_data_length(self, length: int) -> None:
        """Set the data chunk size and the matching RIFF chunk size."""
        self.subchunk2_size = length & 0xFFFFFFFF
        self.chunk_size = (self.subchunk2_size + 36) & 0xFFFFFFFF

    def set_sample_rate(self, sample_rate: int) -> None:
        """Set the sample rate and recompute the byte rate."""
        self.sample_rate = sample_rate
        self.byte_rate = self.num_channels * sample_rate * (self.bits_per_sample // 8)

    def to_bytes(self) -> bytes:
        """Serialise the header to its 44-byte form."""
        return _LAYOUT.pack(
            _tag(self.chunk_id),
            self.chunk_size,
            _tag(self.format),
            _tag(self.subchunk1_id),
            self.subchunk1_size,
            self.audio_format,
            self.num_channels,
            self.sample_rate,
            self.byte_rate,
            self.block_align,
            self.bits_per_sample,
            _tag(self.subchunk2_id),
            self.subchunk2_size,
        )