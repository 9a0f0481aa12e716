"""Software LFO that modulates pitch and operator volume while a note plays."""

from __future__ import annotations

import random
from dataclasses import dataclass

LFO_INTERVAL = 150

_SAW = 0
_SQUARE = 1
_TRIANGLE = 2


@dataclass
class LfoParams:
    """The LFO settings taken from a timbre."""

    wave_form: int = 0
    speed: int = 0
    pmd: int = 0
    pms: int = 0
    amd: int = 0
    ams: tuple = (0, 0, 0, 0)
    sync: bool = False


class LfoController:
    """Steps an LFO waveform, exposing pitch (``adj_p``) and volume (``adj_v``) offsets."""

    def __init__(self, rng=None):
        self._rng = rng if rng is not None else random.Random()
        self._waveform = _SAW
        self._qperiod = 0
        self._count = 0
        self._phase = 0
        self._adj_p_max = 0.0
        self._adj_v_max = [0.0] * 4
        self._adj_p_diff = 0.0
        self._adj_v_diff = [0.0] * 4
        self.adj_p = 0.0
        self.adj_v = [0.0] * 4

    def init_for_timbre(self, params):
        """Load the LFO settings of a new timbre and restart the waveform."""
        self._waveform = params.wave_form
        if params.speed:
            self._qperiod = 900 * LFO_INTERVAL // (4 * params.speed)
        else:
            self._qperiod = 0
        self._phase = 0
        self._adj_p_max = params.pmd * float(params.pms) / 2.0
        self._adj_v_max = [params.amd * float(ams) / 2 for ams in params.ams]
        self._init_for_phase(first=True)

    def init_for_keyon(self, params):
        """Restart the waveform at key-on when the timbre asks for sync."""
        if params.sync:
            self._phase = 0
            self._init_for_phase()

    def increment(self):
        """Advance the LFO by one step."""
        if self._qperiod == 0:
            return
        self._count += 1
        if self._count < self._qperiod:
            self.adj_p += self._adj_p_diff
            self.adj_v = [v + d for v, d in zip(self.adj_v, self._adj_v_diff)]
        else:
            self._phase = (self._phase + 1) & 3
            self._init_for_phase()

    def _slope(self, maximum, divisor):
        return maximum / divisor if divisor else 0.0

    def _negate_levels(self):
        self.adj_p = -self.adj_p
        self.adj_v = [-v for v in self.adj_v]

    def _zero_levels(self):
        self.adj_p = 0.0
        self.adj_v = [0.0] * 4

    def _init_for_phase(self, first=False):
        self._count = 0
        waveform = self._waveform
        if first:
            if waveform == _SAW:
                self._zero_levels()
                div = self._qperiod * 2
                self._adj_p_diff = self._slope(self._adj_p_max, div)
                self._adj_v_diff = [self._slope(m, div) for m in self._adj_v_max]
            elif waveform == _SQUARE:
                self.adj_p = -self._adj_p_max
                self.adj_v = [-m for m in self._adj_v_max]
                self._adj_p_diff = 0.0
                self._adj_v_diff = [0.0] * 4
            elif waveform == _TRIANGLE:
                self._zero_levels()
                div = self._qperiod
                self._adj_p_diff = self._slope(self._adj_p_max, div)
                self._adj_v_diff = [self._slope(m, div) for m in self._adj_v_max]
            else:
                self._adj_p_diff = 0.0
                self._adj_v_diff = [0.0] * 4

        if waveform == _SAW:
            if self._phase == 0:
                self._zero_levels()
            elif self._phase == 2:
                self._negate_levels()
        elif waveform == _SQUARE:
            if self._phase & 1 == 0:
                self._negate_levels()
        elif waveform == _TRIANGLE:
            if self._phase == 0:
                self._zero_levels()
            elif self._phase & 1 == 1:
                self._adj_p_diff = -self._adj_p_diff
                self._adj_v_diff = [-d for d in self._adj_v_diff]
        else:
            if self._phase & 1 == 0:
                self.adj_p = self._adj_p_max * self._rng.uniform(-1.0, 1.0)
                self.adj_v = [m * self._rng.uniform(-1.0, 1.0) for m in self._adj_v_max]