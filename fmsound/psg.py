"""Three-channel PSG sound generator: square tones, noise and hardware envelopes."""

from __future__ import annotations

from functools import lru_cache

NOISE_TABLE_SIZE = 1 << 11
TONE_SHIFT = 24
ENV_SHIFT = 22
NOISE_SHIFT = 14
OVERSAMPLING = 2

_MASK32 = 0xFFFFFFFF
_SAMPLE_MAX = 0x7FFF
_SAMPLE_MIN = -0x8000

# Envelope segment kinds.
_LOW, _UP, _DOWN, _HIGH = range(4)

# Two 32-step segments for each of the 16 envelope shapes.
_ENVELOPE_SHAPES = (
    (_DOWN, _LOW), (_DOWN, _LOW), (_DOWN, _LOW), (_DOWN, _LOW),
    (_UP, _LOW), (_UP, _LOW), (_UP, _LOW), (_UP, _LOW),
    (_DOWN, _DOWN), (_DOWN, _LOW), (_DOWN, _UP), (_DOWN, _HIGH),
    (_UP, _UP), (_UP, _HIGH), (_UP, _DOWN), (_UP, _LOW),
)

_SEGMENT_LEVELS = {
    _LOW: tuple([0] * 32),
    _UP: tuple(range(32)),
    _DOWN: tuple(range(31, -1, -1)),
    _HIGH: tuple([31] * 32),
}


@lru_cache(maxsize=None)
def make_noise_table():
    """Return the shared table of 32-bit pseudo-random noise words."""
    noise = 14321
    table = []
    for _ in range(NOISE_TABLE_SIZE):
        word = 0
        for _ in range(32):
            word = (word << 1) | (noise & 1)
            noise = (noise >> 1) | (((noise << 14) ^ (noise << 16)) & 0x10000)
        table.append(word)
    return tuple(table)


def make_emit_table(volume):
    """Return the 32 output amplitudes for a volume given in about 1/2 dB units."""
    base = 0x4000 / 3.0 * 10.0 ** (volume / 40.0)
    table = [0] * 32
    for i in range(31, 1, -1):
        table[i] = int(base)
        base /= 1.189207115
    return table


def make_envelope_table(emit_table):
    """Return 16 envelope waveforms of 64 amplitudes each."""
    return [
        tuple(
            emit_table[level]
            for segment in shape
            for level in _SEGMENT_LEVELS[segment]
        )
        for shape in _ENVELOPE_SHAPES
    ]


def _store(value):
    return max(_SAMPLE_MIN, min(_SAMPLE_MAX, value))


class PSG:
    """A sound unit closely resembling a PSG chip, producing 16-bit stereo PCM."""

    def __init__(self):
        self._reg = [0] * 16
        self._mask = 0x3F
        self._olevel = [0, 0, 0]
        self._scount = [0, 0, 0]
        self._speriod = [0, 0, 0]
        self._ecount = 0
        self._eperiod = 0
        self._ncount = 0
        self._nperiod = 0
        self._tperiodbase = 0
        self._eperiodbase = 0
        self._nperiodbase = 0
        self._noise_table = make_noise_table()
        self._emit_table = [0] * 32
        self._envelope_table = make_envelope_table(self._emit_table)
        self._envelope = self._envelope_table[0]
        self.set_volume(0)
        self.reset()

    def reset(self):
        """Clear all registers to their power-on state."""
        for regnum in range(14):
            self.set_reg(regnum, 0)
        self.set_reg(7, 0xFF)
        self.set_reg(14, 0xFF)
        self.set_reg(15, 0xFF)

    def _tone_period(self, channel):
        tmp = (self._reg[2 * channel] + self._reg[2 * channel + 1] * 256) & 0xFFF
        return self._tperiodbase // tmp if tmp else self._tperiodbase

    def _envelope_period(self):
        tmp = (self._reg[11] + self._reg[12] * 256) & 0xFFFF
        return self._eperiodbase // tmp if tmp else (self._eperiodbase * 2) & _MASK32

    def set_clock(self, clock, rate):
        """Set the chip clock and the output sample rate."""
        self._tperiodbase = int((1 << TONE_SHIFT) / 4.0 * clock / rate) & _MASK32
        self._eperiodbase = int((1 << ENV_SHIFT) / 4.0 * clock / rate) & _MASK32
        self._nperiodbase = int((1 << NOISE_SHIFT) / 4.0 * clock / rate) & _MASK32

        for channel in range(3):
            self._speriod[channel] = self._tone_period(channel)
        tmp = self._reg[6] & 0x1F
        self._nperiod = (
            self._nperiodbase // tmp // 2 if tmp else self._nperiodbase // 2
        )
        self._eperiod = self._envelope_period()

    def set_volume(self, volume):
        """Set the output level in steps of about 1/2 dB."""
        self._emit_table = make_emit_table(volume)
        self._envelope_table = make_envelope_table(self._emit_table)
        self._envelope = self._envelope_table[self._reg[13] & 15]
        self.set_channel_mask(~self._mask)

    def set_channel_mask(self, c):
        """Mute the channels whose bits are set in ``c``."""
        self._mask = ~c
        for channel in range(3):
            self._olevel[channel] = (
                self._emit_table[(self._reg[8 + channel] & 15) * 2 + 1]
                if self._mask & (1 << channel)
                else 0
            )

    def set_reg(self, regnum, data):
        """Write ``data`` to register ``regnum`` (0-15); other numbers are ignored."""
        if not 0 <= regnum < 0x10:
            return
        data &= 0xFF
        self._reg[regnum] = data
        if regnum <= 5:
            channel = regnum // 2
            self._speriod[channel] = self._tone_period(channel)
        elif regnum == 6:
            data &= 0x1F
            self._nperiod = self._nperiodbase // data if data else self._nperiodbase
        elif 8 <= regnum <= 10:
            channel = regnum - 8
            self._olevel[channel] = (
                self._emit_table[(data & 15) * 2 + 1]
                if self._mask & (1 << channel)
                else 0
            )
        elif regnum in (11, 12):
            self._eperiod = self._envelope_period()
        elif regnum == 13:
            self._ecount = 0
            self._envelope = self._envelope_table[data & 15]

    def get_reg(self, regnum):
        """Read register ``regnum`` (only the low four bits are used)."""
        return self._reg[regnum & 0x0F]

    def mix(self, nsamples, dest=None):
        """Add ``nsamples`` stereo frames into ``dest`` (interleaved L/R) and return it.

        A new zero-filled buffer is used when ``dest`` is not given.  Each
        stored value is clamped to the signed 16-bit range.
        """
        if dest is None:
            dest = [0] * (2 * nsamples)
        elif len(dest) < 2 * nsamples:
            raise ValueError("destination buffer is too short")

        reg = self._reg
        r7 = ~reg[7] & 0xFF
        if not ((r7 & 0x3F) | ((reg[8] | reg[9] | reg[10]) & 0x1F)):
            return dest

        tone_limit = 1 << TONE_SHIFT
        chenable = [
            int(bool(r7 & (1 << ch)) and self._speriod[ch] <= tone_limit)
            for ch in range(3)
        ]
        nenable = [(r7 >> (3 + ch)) & 1 for ch in range(3)]
        env_channels = [
            bool(self._mask & (1 << ch)) and bool(reg[8 + ch] & 0x10)
            for ch in range(3)
        ]
        use_env = any(env_channels)
        use_noise = use_env or bool(r7 & 0x38)
        hold = (reg[0x0D] & 0x0B) == 0x0A

        scount = self._scount
        speriod = self._speriod
        olevel = self._olevel
        envelope = self._envelope
        noise_table = self._noise_table
        ecount, eperiod = self._ecount, self._eperiod
        ncount, nperiod = self._ncount, self._nperiod

        tone_bit = TONE_SHIFT + OVERSAMPLING
        env_index_shift = ENV_SHIFT + OVERSAMPLING
        env_limit = 1 << (ENV_SHIFT + 6 + OVERSAMPLING)
        env_loop = 1 << (ENV_SHIFT + 5 + OVERSAMPLING)
        noise_index_shift = NOISE_SHIFT + OVERSAMPLING + 6
        noise_bit_shift = NOISE_SHIFT + OVERSAMPLING + 1
        steps = 1 << OVERSAMPLING

        env = 0
        for i in range(nsamples):
            sample = 0
            for _ in range(steps):
                if use_env:
                    env = envelope[ecount >> env_index_shift]
                    ecount = (ecount + eperiod) & _MASK32
                    if ecount >= env_limit:
                        if not hold:
                            ecount |= env_loop
                        ecount &= env_limit - 1
                if use_noise:
                    noise = noise_table[
                        (ncount >> noise_index_shift) & (NOISE_TABLE_SIZE - 1)
                    ] >> ((ncount >> noise_bit_shift) & 31)
                    ncount = (ncount + nperiod) & _MASK32
                else:
                    noise = 0
                for ch in range(3):
                    on = ((scount[ch] >> tone_bit) & chenable[ch]) | (
                        nenable[ch] & noise
                    )
                    level = env if env_channels[ch] else olevel[ch]
                    sample += level if on & 1 else -level
                    scount[ch] = (scount[ch] + speriod[ch]) & _MASK32
            magnitude = abs(sample) >> OVERSAMPLING
            sample = magnitude if sample >= 0 else -magnitude
            dest[2 * i] = _store(dest[2 * i] + sample)
            dest[2 * i + 1] = _store(dest[2 * i + 1] + sample)

        if not use_env:
            # Advance the envelope counter in bulk when no channel uses it.
            ecount = ((ecount >> 8) + (eperiod >> (8 - OVERSAMPLING)) * nsamples) & _MASK32
            limit = 1 << (ENV_SHIFT + 6 + OVERSAMPLING - 8)
            if ecount >= limit:
                if not hold:
                    ecount |= 1 << (ENV_SHIFT + 5 + OVERSAMPLING - 8)
                ecount &= limit - 1
            ecount = (ecount << 8) & _MASK32

        self._ecount = ecount
        self._ncount = ncount
        return dest