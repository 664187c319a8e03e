"""Envelope-following wah effect."""

from __future__ import annotations

import math


class Autowah:
    """Auto-wah whose filter sweep follows the input level.

    ``wah`` (0..1) sets the effect amount, ``dry_wet`` (0..100) the mix and
    ``level`` (0..1) the wah level.
    """

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = float(sample_rate)
        self._const1 = 1413.72 / self.sample_rate
        self._const2 = math.exp(-100.0 / self.sample_rate)
        self._const4 = math.exp(-10.0 / self.sample_rate)

        self.dry_wet = 100.0
        self.level = 0.1
        self.wah = 0.0

        self._rec0 = [0.0, 0.0]
        self._rec1 = 0.0
        self._rec2 = 0.0
        self._rec3 = 0.0
        self._rec4 = 0.0
        self._rec5 = 0.0

    def process(self, x: float) -> float:
        """Process one sample."""
        wet_gain = 0.01 * (self.dry_wet * self.level)
        dry_gain = (1.0 - 0.01 * self.dry_wet) + (1.0 - self.wah)

        level_in = abs(x)
        self._rec3 = max(
            level_in, self._const4 * self._rec3 + (1.0 - self._const4) * level_in
        )
        self._rec2 = self._const2 * self._rec2 + (1.0 - self._const2) * self._rec3
        env = min(1.0, self._rec2)
        sweep = 2.0 ** (2.3 * env)
        pole = 1.0 - self._const1 * sweep / 2.0 ** (1.0 + 2.0 * (1.0 - env))

        self._rec1 = 0.999 * self._rec1 + 0.001 * (
            -(2.0 * (pole * math.cos(self._const1 * 2 * sweep)))
        )
        self._rec4 = 0.999 * self._rec4 + 0.001 * pole * pole
        self._rec5 = 0.999 * self._rec5 + 0.0001 * 4.0**env

        prev1, prev2 = self._rec0
        rec0 = -((self._rec1 * prev1 + self._rec4 * prev2) - wet_gain * (self._rec5 * x))

        out = self.wah * (rec0 - prev1) + dry_gain * x
        self._rec0 = [rec0, prev1]
        return out