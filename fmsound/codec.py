"""Decoders that turn raw sound file payloads into PCM buffer data."""

from __future__ import annotations

from array import array

from .bufferdata import BufferData
from .errors import AlutError, AlutErrorCode

_MULAW_EXP_LUT = (0, 132, 396, 924, 1980, 4092, 8316, 16764)

_IMA_INDEX_TABLE = (-1, -1, -1, -1, 2, 4, 6, 8, -1, -1, -1, -1, 2, 4, 6, 8)

_IMA_STEP_TABLE = (
    7, 8, 9, 10, 11, 12, 13, 14, 16, 17,
    19, 21, 23, 25, 28, 31, 34, 37, 41, 45,
    50, 55, 60, 66, 73, 80, 88, 97, 107, 118,
    130, 143, 157, 173, 190, 209, 230, 253, 279, 307,
    337, 371, 408, 449, 494, 544, 598, 658, 724, 796,
    876, 963, 1060, 1166, 1282, 1411, 1552, 1707, 1878, 2066,
    2272, 2499, 2749, 3024, 3327, 3660, 4026, 4428, 4871, 5358,
    5894, 6484, 7132, 7845, 8630, 9493, 10442, 11487, 12635, 13899,
    15289, 16818, 18500, 20350, 22385, 24623, 27086, 29794, 32767,
)

_MAX_IMA_CHANNELS = 2


def _int16(value):
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def _pcm16_bytes(samples):
    return array("h", samples).tobytes()


def mulaw_to_linear(mulawbyte):
    """Decode one mu-law byte to a signed 16-bit sample."""
    mulawbyte = ~mulawbyte & 0xFF
    exponent = (mulawbyte >> 4) & 0x07
    mantissa = mulawbyte & 0x0F
    sample = _MULAW_EXP_LUT[exponent] + (mantissa << (exponent + 3))
    return -sample if mulawbyte & 0x80 else sample


def alaw_to_linear(a_val):
    """Decode one A-law byte to a signed 16-bit sample."""
    a_val = (a_val ^ 0x55) & 0xFF
    t = (a_val & 0x0F) << 4
    seg = (a_val & 0x70) >> 4
    if seg == 0:
        t += 8
    elif seg == 1:
        t += 0x108
    else:
        t = (t + 0x108) << (seg - 1)
    return t if a_val & 0x80 else -t


def codec_linear(data, num_channels, bits_per_sample, sample_frequency, block_align):
    """Wrap already linear PCM bytes unchanged."""
    return BufferData(bytes(data), num_channels, bits_per_sample, sample_frequency)


def codec_pcm8s(data, num_channels, bits_per_sample, sample_frequency, block_align):
    """Convert signed 8-bit samples to unsigned 8-bit samples."""
    converted = bytes((byte + 128) & 0xFF for byte in data)
    return BufferData(converted, num_channels, bits_per_sample, sample_frequency)


def codec_pcm16(data, num_channels, bits_per_sample, sample_frequency, block_align):
    """Swap the byte order of every 16-bit sample."""
    swapped = bytearray(data)
    end = len(data) // 2 * 2
    swapped[0:end:2] = data[1:end:2]
    swapped[1:end:2] = data[0:end:2]
    return BufferData(bytes(swapped), num_channels, bits_per_sample, sample_frequency)


def codec_ulaw(data, num_channels, bits_per_sample, sample_frequency, block_align):
    """Expand mu-law bytes to 16-bit PCM."""
    pcm = _pcm16_bytes(mulaw_to_linear(byte) for byte in data)
    return BufferData(pcm, num_channels, bits_per_sample, sample_frequency)


def codec_alaw(data, num_channels, bits_per_sample, sample_frequency, block_align):
    """Expand A-law bytes to 16-bit PCM."""
    pcm = _pcm16_bytes(alaw_to_linear(byte) for byte in data)
    return BufferData(pcm, num_channels, bits_per_sample, sample_frequency)


class _ImaState:
    __slots__ = ("predictor", "index")

    def __init__(self, predictor, index):
        self.predictor = predictor
        self.index = index

    def decode(self, nibble):
        step = _IMA_STEP_TABLE[self.index]
        self.index = max(0, min(88, self.index + _IMA_INDEX_TABLE[nibble]))
        diff = step >> 3
        if nibble & 4:
            diff += step
        if nibble & 2:
            diff += step >> 1
        if nibble & 1:
            diff += step >> 2
        diff = _int16(diff)
        if nibble & 8:
            self.predictor = _int16(self.predictor - diff)
        else:
            self.predictor = _int16(self.predictor + diff)
        return self.predictor


def codec_ima4(data, num_channels, bits_per_sample, sample_frequency, block_align):
    """Decode IMA ADPCM blocks (mono or stereo) to 16-bit PCM."""
    if num_channels > _MAX_IMA_CHANNELS or num_channels < 1:
        raise AlutError(AlutErrorCode.UNSUPPORTED_FILE_SUBTYPE)
    if block_align <= 0:
        raise AlutError(AlutErrorCode.CORRUPT_OR_TRUNCATED_DATA)

    blocks = len(data) // block_align
    out_length = (block_align - num_channels) * blocks * 4
    samples = [0] * (out_length // 2)
    pos = 0
    out = 0

    def next_byte():
        nonlocal pos
        if pos >= len(data):
            raise AlutError(AlutErrorCode.CORRUPT_OR_TRUNCATED_DATA)
        byte = data[pos]
        pos += 1
        return byte

    def put(index, value):
        if index >= len(samples):
            raise AlutError(AlutErrorCode.CORRUPT_OR_TRUNCATED_DATA)
        samples[index] = value

    for _ in range(blocks):
        states = []
        for _ in range(num_channels):
            low = next_byte()
            high = next_byte()
            index = next_byte()
            next_byte()
            states.append(_ImaState(_int16(low | (high << 8)), min(index, 88)))

        for _ in range(num_channels * 4, block_align, num_channels * 4):
            for channel, state in enumerate(states):
                target = out + channel
                for _ in range(4):
                    byte = next_byte()
                    put(target, state.decode(byte & 0x0F))
                    target += num_channels
                    put(target, state.decode(byte >> 4))
                    target += num_channels
            out += num_channels * 8

    return BufferData(
        _pcm16_bytes(samples), num_channels, bits_per_sample, sample_frequency, out_length
    )