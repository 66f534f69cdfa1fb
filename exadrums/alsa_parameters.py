"""Sound card parameters and their XML configuration file."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

from .errors import ErrorType, ExadrumsError

_INT_RE = re.compile(r"\s*([+-]?\d+)")

_FIELDS = (
    "device",
    "capture",
    "format",
    "sampleRate",
    "nChannels",
    "bufferTime",
    "periodTime",
    "access",
)


class SampleFormat(Enum):
    """PCM sample formats known to the configuration file."""

    S8 = "SND_PCM_FORMAT_S8"
    S16_LE = "SND_PCM_FORMAT_S16_LE"

    @classmethod
    def from_name(cls, name: str) -> "SampleFormat":
        """Return the format named ``name``; signed 8-bit if unknown."""
        return cls.S16_LE if name == cls.S16_LE.value else cls.S8


class AccessType(Enum):
    """PCM access modes known to the configuration file."""

    RW_INTERLEAVED = "SND_PCM_ACCESS_RW_INTERLEAVED"
    MMAP_INTERLEAVED = "SND_PCM_ACCESS_MMAP_INTERLEAVED"

    @classmethod
    def from_name(cls, name: str) -> "AccessType":
        """Return the access mode named ``name``; read/write interleaved if unknown."""
        try:
            return cls(name)
        except ValueError:
            return cls.RW_INTERLEAVED


@dataclass
class AlsaParams:
    """Settings of a sound card stream."""

    device: str = "default"
    capture: bool = False
    format: SampleFormat = SampleFormat.S16_LE
    sample_rate: int = 48000
    n_channels: int = 2
    buffer_time: int = 10000
    period_time: int = 5000
    buffer_size: int = 0
    period_size: int = 0
    access: AccessType = AccessType.RW_INTERLEAVED


def _parse_int(text: str, field: str) -> int:
    match = _INT_RE.match(text)
    if match is None:
        raise ExadrumsError(f"Invalid value for {field}: {text!r}", ErrorType.ERROR)
    return int(match.group(1))


def load_alsa_parameters(file_path: Union[str, Path]) -> AlsaParams:
    """Read sound card parameters from an XML file."""
    try:
        root = ET.parse(file_path).getroot()
    except (OSError, ET.ParseError):
        raise ExadrumsError("Could not load sound card parameters.", ErrorType.ERROR) from None

    texts = {}
    for field in _FIELDS:
        child = root.find(field)
        if child is None:
            raise ExadrumsError(f"Missing sound card parameter: {field}", ErrorType.ERROR)
        texts[field] = child.text or ""

    return AlsaParams(
        device=texts["device"],
        capture=bool(_parse_int(texts["capture"], "capture")),
        format=SampleFormat.from_name(texts["format"]),
        sample_rate=_parse_int(texts["sampleRate"], "sampleRate"),
        n_channels=_parse_int(texts["nChannels"], "nChannels"),
        buffer_time=_parse_int(texts["bufferTime"], "bufferTime"),
        period_time=_parse_int(texts["periodTime"], "periodTime"),
        access=AccessType.from_name(texts["access"]),
    )


def save_alsa_parameters(file_path: Union[str, Path], parameters: AlsaParams) -> None:
    """Write sound card parameters to an XML file.

    The format and access mode are always written as 16-bit little-endian
    and read/write interleaved, the only modes the player uses.
    """
    root = ET.Element("root")
    values = (
        parameters.device,
        str(int(parameters.capture)),
        SampleFormat.S16_LE.value,
        str(parameters.sample_rate),
        str(parameters.n_channels),
        str(parameters.buffer_time),
        str(parameters.period_time),
        AccessType.RW_INTERLEAVED.value,
    )
    for field, value in zip(_FIELDS, values):
        ET.SubElement(root, field).text = value

    tree = ET.ElementTree(root)
    ET.indent(tree)
    try:
        tree.write(file_path, encoding="utf-8", xml_declaration=False)
    except OSError:
        raise ExadrumsError("Could not save triggers configuration.", ErrorType.ERROR) from None