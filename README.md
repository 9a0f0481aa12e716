# fmsound

A small pure-Python toolkit for retro sound work.

## Modules

- `fmsound.psg` — `PSG`, a software sound generator with three square-wave
  tone channels, a noise generator and 16 hardware envelope shapes. It is
  driven through sixteen registers (`set_reg`, `get_reg`) and mixes
  interleaved stereo samples clamped to the signed 16-bit range (`mix`).
  `set_clock`, `set_volume` (steps of about 1/2 dB) and `set_channel_mask`
  configure it. The table builders `make_noise_table`, `make_emit_table`
  and `make_envelope_table` are public as well.
- `fmsound.codec` — decoders that return `BufferData`: `codec_linear`
  (bytes unchanged), `codec_pcm8s` (signed to unsigned 8-bit),
  `codec_pcm16` (byte-swaps 16-bit samples), `codec_ulaw`, `codec_alaw`
  (expand to 16-bit PCM) and `codec_ima4` (IMA ADPCM, mono or stereo).
  Single-byte helpers `mulaw_to_linear` and `alaw_to_linear` are included.
- `fmsound.bufferdata` — `BufferData`, a dataclass holding PCM bytes with
  `num_channels`, `bits_per_sample`, `sample_frequency` and `length`;
  `detach_data()` hands the bytes over and leaves `data` as `None`.
- `fmsound.inputstream` — `InputStream`, a byte stream over a file
  (`InputStream.from_file`) or a memory block (`InputStream.from_memory`)
  with `read`, `skip`, `eof`, `read_uint16_le`, `read_int32_be` and
  `read_uint32_le`. It is a context manager. Short reads raise `AlutError`.
- `fmsound.errors` — `AlutErrorCode`, `AlutError` (an exception carrying a
  `code`) and `error_string(code)`. When the `ALUT_DEBUG` environment
  variable is set, each raised `AlutError` also prints its message to
  standard error.
- `fmsound.event` — `Event`, an auto- or manual-reset event with `set`,
  `reset`, `pulse`, `close` and `wait(milliseconds)`, which returns `True`
  on timeout and `False` when released.
- `fmsound.lfo` — `LfoController` and `LfoParams`: a saw, square, triangle
  or sample-and-hold LFO producing a pitch offset (`adj_p`) and four
  operator volume offsets (`adj_v`).
- `fmsound.score` — `Note`, `SoundSetting` and `Phrase` for building note
  sequences, merging tied notes (`rescan_notes`) and computing start times
  and total duration (`calc_total`).

## Installation

```
pip install .
```

There are no third-party runtime dependencies.

## Example: render a PSG tone

```python
from fmsound.psg import PSG

psg = PSG()
psg.set_clock(8000000, 44100)
psg.set_reg(0, 0xFE)   # channel A fine tune
psg.set_reg(1, 0x00)   # channel A coarse tune
psg.set_reg(7, 0x3E)   # enable tone A only
psg.set_reg(8, 0x0F)   # channel A volume

samples = psg.mix(1024)   # list of 2048 interleaved left/right values
```

`mix` also accepts an existing list as `dest` and adds into it.

## Example: decode μ-law data

```python
from fmsound.codec import codec_ulaw

buf = codec_ulaw(b"\x00\xff", 1, 16, 8000.0, 0)
print(buf.data, buf.length)   # four bytes of 16-bit PCM, length 4
```

## Example: read integers from memory

```python
from fmsound.inputstream import InputStream

with InputStream.from_memory(b"\x01\x02\x00\x00\x00\x10") as stream:
    print(stream.read_uint16_le())   # 513
    print(stream.read_int32_be())    # 16
    print(stream.eof())              # True
```

## Example: timing a phrase

```python
from fmsound.score import Phrase, SoundSetting

phrase = Phrase(SoundSetting(tempo=120))
phrase.add_note("C")
phrase.add_note("E", sign="-")
phrase.add_note("R")
phrase.calc_total()
print(phrase.goal)   # total duration in seconds
```

## What this package does not do

- It does not play sound. `PSG.mix` produces sample values; sending them to
  an audio device is left to the caller.
- It has no FM synthesis; a phrase's notes can be timed, but only the PSG
  renders audio.
- It does not parse sound file containers (WAV, AU and the like). The
  decoders in `fmsound.codec` take the raw sample payload and the format
  details, which the caller must supply.
- There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```