"""Double-sampled, stable state variable filter."""

from __future__ import annotations

import math
from typing import NamedTuple


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class SvfOutput(NamedTuple):
    """All responses of the filter for one input sample."""

    low: float
    high: float
    band: float
    notch: float
    peak: float


class Svf:
    """State variable filter giving low, high, band, notch and peak outputs at once.

    The filter runs its update twice per sample and averages the two passes.
    """

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = float(sample_rate)
        self._fc = 200.0
        self._res = 0.5
        self._drive = 0.5
        self._pre_drive = 0.5
        self._freq = 0.25
        self._damp = 0.0
        self._low = 0.0
        self._band = 0.0
        self._fc_max = self.sample_rate / 3.0
        self.output = SvfOutput(0.0, 0.0, 0.0, 0.0, 0.0)

    @property
    def freq(self) -> float:
        """Cutoff frequency in Hz, clamped to (0, sample_rate / 3]."""
        return self._fc

    @freq.setter
    def freq(self, value: float) -> None:
        self._fc = _clamp(value, 1.0e-6, self._fc_max)
        # The filter is double sampled, hence the factor of two.
        self._freq = 2.0 * math.sin(
            math.pi * min(0.25, self._fc / (self.sample_rate * 2.0))
        )
        self._update_damp()

    @property
    def res(self) -> float:
        """Resonance, clamped to 0..1."""
        return self._res

    @res.setter
    def res(self, value: float) -> None:
        self._res = _clamp(value, 0.0, 1.0)
        self._update_damp()
        self._drive = self._pre_drive * self._res

    @property
    def drive(self) -> float:
        """Drive amount; shapes how the resonance responds."""
        return self._pre_drive * 10.0

    @drive.setter
    def drive(self, value: float) -> None:
        self._pre_drive = _clamp(value * 0.1, 0.0, 1.0)
        self._drive = self._pre_drive * self._res

    def _update_damp(self) -> None:
        self._damp = min(
            2.0 * (1.0 - self._res**0.25),
            min(2.0, 2.0 / self._freq - self._freq * 0.5),
        )

    def _step(self, x: float) -> tuple[float, float, float, float]:
        notch = x - self._damp * self._band
        self._low = self._low + self._freq * self._band
        high = notch - self._low
        self._band = (
            self._freq * high + self._band - self._drive * self._band**3
        )
        return notch, self._low, high, self._band

    def process(self, x: float) -> SvfOutput:
        """Filter one sample and return every response."""
        n1, l1, h1, b1 = self._step(x)
        n2, l2, h2, b2 = self._step(x)
        self.output = SvfOutput(
            low=0.5 * l1 + 0.5 * l2,
            high=0.5 * h1 + 0.5 * h2,
            band=0.5 * b1 + 0.5 * b2,
            notch=0.5 * n1 + 0.5 * n2,
            peak=0.5 * (l1 - h1) + 0.5 * (l2 - h2),
        )
        return self.output