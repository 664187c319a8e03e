"""Ramp from 0 to 1 at a given frequency."""

from __future__ import annotations

import math


class Phasor:
    """Normalised ramp generator; ``initial_phase`` is in radians."""

    def __init__(
        self, sample_rate: float, freq: float = 1.0, initial_phase: float = 0.0
    ) -> None:
        self.sample_rate = float(sample_rate)
        self._phase = initial_phase
        self.freq = freq

    @property
    def freq(self) -> float:
        """Frequency in Hz."""
        return self._freq

    @freq.setter
    def freq(self, value: float) -> None:
        self._freq = value
        self._inc = math.tau * value / self.sample_rate

    def process(self) -> float:
        """Return the current value and advance one sample."""
        out = self._phase / math.tau
        self._phase += self._inc
        if self._phase > math.tau:
            self._phase -= math.tau
        if self._phase < 0.0:
            self._phase = 0.0
        return out