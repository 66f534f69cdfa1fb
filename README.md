# exadrums

Building blocks for an electronic drum module, in pure Python with no
third-party dependencies: sample storage, a play-list mixer, WAV header
handling and the sound card configuration file.

## Sound and mixing

- `exadrums.sound` – `Sound` holds 16-bit sample data with a volume
  (`set_volume()` clamps it to 0–1), a `loop` flag, `has_more_data()`,
  `value_at()` (wraps around the end of the data) and a last start time in
  microseconds. `SoundState` is one slot of the mixer's play list.
- `exadrums.sound_bank` – `SoundBank(data_folder)` keeps sounds identified by
  their position. `load_sound()` reads a WAV file from `data_folder/SoundBank/`
  (the file size must equal 44 plus the header's data size, otherwise
  `ExadrumsError` is raised); `add_sound()` and `add_sound_object()` add sounds
  from memory; `delete_sound()`, `loop_sound()`, `set_sound_volume()`,
  `get_sound()` and `clear()` manage them. `get_sound_files(data_folder)` lists
  the `.raw` files found one directory deep in `SoundBank/`, as `dir/file`.
- `exadrums.mixer` – `Mixer(sound_bank)` has a play list of 256 slots.
  `play_sound()` reuses an idle slot of the same sound or takes a new one
  (ignored when the list is full), `stop_sound()` stops it, and
  `mix(period_size)` returns the next period of mixed samples, each clamped to
  the 16-bit range, and advances playback. `clear()` frees the play list.
- `exadrums.sound_processor` – `muffle(sound, m)` returns a copy of a sound
  faded out exponentially.
- `exadrums.instrument_sound_type` – `InstrumentSoundType` (`DrumHead`,
  `RimShot`, `ClosingHiHat`) with `str()` and `InstrumentSoundType.parse()`.

## Files

- `exadrums.wav` – `WavHeader` reads (`from_bytes()`) and writes
  (`to_bytes()`) the 44-byte RIFF/WAVE header; `set_data_length()` and
  `set_sample_rate()` keep dependent fields consistent. `bytes_to_word()`
  reads little-endian integers.
- `exadrums.alsa_parameters` – `AlsaParams`, `SampleFormat`, `AccessType`,
  and `load_alsa_parameters()` / `save_alsa_parameters()` for the XML file of
  sound card settings. Saving always writes the 16-bit little-endian format and
  read/write interleaved access.
- `exadrums.ziputil` – `zip_dir()` and `unzip_dir()` pack a directory tree
  into a zip archive and extract it again.
- `exadrums.xmlutil` – `XmlElement`, an iterable wrapper around ElementTree
  elements with typed `get_value()` and `attribute()`, and
  `create_xml_element()`.

## Utilities

- `errors` – `ErrorType`, `Error`, `ExadrumsError`, `make_error()`,
  `merge_errors()`, `error_to_exception()`, `exception_to_error()`.
- `enums` – `enum_to_string()`, `string_to_enum()`, `enum_values()`.
- `crypt` – `base64_encode()` and `base64_encode_values()`.
- `misc` – `str_to_value()`, `strings_to_tuple()`, `join_to_str()`, `clamp()`.
- `parsing` – `read_token()`, `iter_tokens()`, `iter_lines()`.
- `safequeue` – `SimpleSafeQueue`, a bounded single-producer single-consumer queue.
- `concurrency` – `SpinLock`, `scaled_priority()`, `set_thread_priority()`.
- `timeutil` – `timestamp_to_str()` and `measure_time()`.

## Example

```python
from exadrums.sound_bank import SoundBank
from exadrums.mixer import Mixer

bank = SoundBank("/path/to/data/")
kick = bank.add_sound([1000, 2000, 3000, 4000], 0.8)

mixer = Mixer(bank)
mixer.play_sound(kick, 1.0)
buffer = mixer.mix(2)   # [800, 1600]
```

## What it does not do

The package produces mixed sample buffers but does not send them to a sound
card: there is no audio output, device listing or playback thread. It has no
drum triggers, sensors, kits, metronome or command-line program; those have to
be supplied by the application that uses it.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```