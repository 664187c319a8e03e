"""One-pole lowpass / highpass filter."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable


class OnePoleMode(enum.Enum):
    """Response of a :class:`OnePole` filter."""

    LOW_PASS = enum.auto()
    HIGH_PASS = enum.auto()


class OnePole:
    """Topology-preserving one-pole filter.

    ``frequency`` is normalised to the sample rate and is capped at 0.497.
    """

    def __init__(
        self, frequency: float, mode: OnePoleMode = OnePoleMode.LOW_PASS
    ) -> None:
        self.mode = mode
        self._state = 0.0
        self.frequency = frequency

    @property
    def frequency(self) -> float:
        """Normalised cutoff frequency."""
        return self._frequency

    @frequency.setter
    def frequency(self, value: float) -> None:
        self._frequency = value if value < 0.497 else 0.497
        self._g = math.tan(math.pi * self._frequency)
        self._gi = 1.0 / (1.0 + self._g)

    def reset(self) -> None:
        """Clear the filter state."""
        self._state = 0.0

    def process(self, x: float) -> float:
        """Filter one sample."""
        lp = (self._g * x + self._state) * self._gi
        self._state = self._g * (x - lp) + lp
        if self.mode is OnePoleMode.LOW_PASS:
            return lp
        return x - lp

    def process_block(self, samples: Iterable[float]) -> list[float]:
        """Filter a block of samples and return the results."""
        return [self.process(x) for x in samples]