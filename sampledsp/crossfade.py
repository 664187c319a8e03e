"""Crossfade between two signals with a choice of curve."""

from __future__ import annotations

import enum
import math

_LOG_MIN = math.log(0.000001)
_LOG_MAX = math.log(1.0)


class CrossfadeCurve(enum.IntEnum):
    """Shape of the crossfade."""

    LIN = 0
    CPOW = 1
    LOG = 2
    EXP = 3


class CrossFade:
    """Mixes two inputs according to ``pos`` (0 = first, 1 = second)."""

    def __init__(
        self, curve: CrossfadeCurve | int = CrossfadeCurve.LIN, pos: float = 0.5
    ) -> None:
        try:
            self._curve = CrossfadeCurve(curve)
        except ValueError:
            self._curve = CrossfadeCurve.LIN
        self.pos = pos

    @property
    def curve(self) -> CrossfadeCurve:
        """Curve applied; setting an unknown curve raises ValueError."""
        return self._curve

    @curve.setter
    def curve(self, value: CrossfadeCurve | int) -> None:
        self._curve = CrossfadeCurve(value)

    def process(self, a: float, b: float) -> float:
        """Return the mix of ``a`` and ``b`` at the current position."""
        pos = self.pos
        if self._curve is CrossfadeCurve.CPOW:
            return a * math.sin((1.0 - pos) * math.pi / 2) + b * math.sin(
                pos * math.pi / 2
            )
        if self._curve is CrossfadeCurve.LOG:
            scalar = math.exp(pos * (_LOG_MAX - _LOG_MIN) + _LOG_MIN)
        elif self._curve is CrossfadeCurve.EXP:
            scalar = pos * pos
        else:
            scalar = pos
        return a * (1.0 - scalar) + b * scalar