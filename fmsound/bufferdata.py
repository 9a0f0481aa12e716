"""Decoded sound data together with its sample layout."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BufferData:
    """PCM bytes with channel count, sample width and sample rate.

    ``length`` defaults to the size of ``data`` and is kept when the data
    is detached.
    """

    data: bytes | None
    num_channels: int
    bits_per_sample: int
    sample_frequency: float
    length: int | None = None

    def __post_init__(self):
        if self.length is None:
            self.length = len(self.data) if self.data is not None else 0

    def detach_data(self):
        """Hand over the sample bytes, leaving this object without data."""
        data, self.data = self.data, None
        return data