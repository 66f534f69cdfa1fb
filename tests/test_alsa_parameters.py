import xml.etree.ElementTree as ET

import pytest

from exadrums.alsa_parameters import (
    AccessType,
    AlsaParams,
    SampleFormat,
    load_alsa_parameters,
    save_alsa_parameters,
)
from exadrums.errors import ErrorType, ExadrumsError


def _write(path, **overrides):
    values = {
        "device": "plughw:0,0",
        "capture": "0",
        "format": "SND_PCM_FORMAT_S16_LE",
        "sampleRate": "44100",
        "nChannels": "2",
        "bufferTime": "8000",
        "periodTime": "4000",
        "access": "SND_PCM_ACCESS_RW_INTERLEAVED",
    }
    values.update(overrides)
    body = "".join(f"<{k}>{v}</{k}>" for k, v in values.items())
    path.write_text(f"<root>{body}</root>")
    return path


def test_load(tmp_path):
    params = load_alsa_parameters(_write(tmp_path / "alsa.xml"))
    assert params.device == "plughw:0,0"
    assert params.capture is False
    assert params.format is SampleFormat.S16_LE
    assert params.sample_rate == 44100
    assert params.n_channels == 2
    assert params.buffer_time == 8000
    assert params.period_time == 4000
    assert params.access is AccessType.RW_INTERLEAVED


def test_round_trip(tmp_path):
    original = AlsaParams(device="plughw:1,0", capture=True, sample_rate=44100,
                          n_channels=1, buffer_time=6000, period_time=3000)
    path = tmp_path / "alsa.xml"
    save_alsa_parameters(path, original)
    assert load_alsa_parameters(path) == original


def test_unknown_format_and_access_defaults(tmp_path):
    path = _write(tmp_path / "alsa.xml", format="BOGUS", access="BOGUS")
    params = load_alsa_parameters(path)
    assert params.format is SampleFormat.S8
    assert params.access is AccessType.RW_INTERLEAVED


def test_mmap_access_recognised(tmp_path):
    path = _write(tmp_path / "alsa.xml", access="SND_PCM_ACCESS_MMAP_INTERLEAVED")
    assert load_alsa_parameters(path).access is AccessType.MMAP_INTERLEAVED


def test_save_always_writes_s16_and_rw(tmp_path):
    path = tmp_path / "alsa.xml"
    save_alsa_parameters(path, AlsaParams(format=SampleFormat.S8,
                                          access=AccessType.MMAP_INTERLEAVED))
    root = ET.parse(path).getroot()
    assert root.tag == "root"
    assert root.find("format").text == "SND_PCM_FORMAT_S16_LE"
    assert root.find("access").text == "SND_PCM_ACCESS_RW_INTERLEAVED"


def test_load_missing_file(tmp_path):
    with pytest.raises(ExadrumsError) as info:
        load_alsa_parameters(tmp_path / "missing.xml")
    assert info.value.error_type is ErrorType.ERROR
    assert info.value.message == "Could not load sound card parameters."


def test_load_missing_element(tmp_path):
    path = tmp_path / "alsa.xml"
    path.write_text("<root><device>default</device></root>")
    with pytest.raises(ExadrumsError):
        load_alsa_parameters(path)


def test_load_non_numeric_value(tmp_path):
    path = _write(tmp_path / "alsa.xml", sampleRate="fast")
    with pytest.raises(ExadrumsError):
        load_alsa_parameters(path)


def test_save_to_missing_folder(tmp_path):
    with pytest.raises(ExadrumsError) as info:
        save_alsa_parameters(tmp_path / "nowhere" / "alsa.xml", AlsaParams())
    assert info.value.message == "Could not save triggers configuration."