"""Triggerable attack/decay envelope."""

from __future__ import annotations

import enum
import math

_FLT_EPSILON = 1.1920928955078125e-07


class AdEnvSegment(enum.IntEnum):
    """Stage of an :class:`AdEnv`."""

    IDLE = 0
    ATTACK = 1
    DECAY = 2


def _fast_exp(x: float) -> float:
    # (1 + x/1024) ** 1024 by repeated squaring; overflows to inf, never raises.
    x = 1.0 + x / 1024.0
    for _ in range(10):
        x *= x
    return x


def _divide(num: float, den: float) -> float:
    if den:
        return num / den
    if num == 0.0:
        return math.nan
    return math.copysign(math.inf, num)


class AdEnv:
    """Attack/decay envelope with per-segment times and an optional curve.

    A ``curve`` of 0 gives linear segments; positive and negative values bend
    them. The output is scaled into ``minimum``..``maximum``.
    """

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = float(sample_rate)
        self.curve = 0.0
        self.minimum = 0.0
        self.maximum = 1.0
        self._segment = AdEnvSegment.IDLE
        self._prev_segment = AdEnvSegment.IDLE
        self._times = {segment: 0.05 for segment in AdEnvSegment}
        self._output = 0.0001
        self._curve_x = 0.0
        self._retrig_val = 0.0
        self._triggered = False

    def trigger(self) -> None:
        """Start or restart the envelope on the next sample."""
        self._triggered = True

    def set_time(self, segment: AdEnvSegment | int, seconds: float) -> None:
        """Set the length in seconds of one segment."""
        self._times[AdEnvSegment(segment)] = seconds

    @property
    def value(self) -> float:
        """Current output, scaled, without advancing the envelope."""
        return self._output * (self.maximum - self.minimum) + self.minimum

    @property
    def current_segment(self) -> AdEnvSegment:
        """Segment the envelope is in."""
        return self._segment

    @property
    def is_running(self) -> bool:
        """True unless the envelope is idle."""
        return self._segment is not AdEnvSegment.IDLE

    def process(self) -> float:
        """Advance one sample and return the scaled envelope value."""
        if self._triggered:
            self._triggered = False
            self._segment = AdEnvSegment.ATTACK
            self._curve_x = 0.0
            self._retrig_val = self._output

        time_samps = int(self._times[self._segment] * self.sample_rate)

        if self._segment is AdEnvSegment.ATTACK:
            beg, end = self._retrig_val, 1.0
        elif self._segment is AdEnvSegment.DECAY:
            beg, end = 1.0, 0.0
        else:
            beg, end = 0.0, 0.0

        if self._prev_segment is not self._segment:
            self._curve_x = 0.0

        if self.curve == 0.0:
            inc = _divide(end - beg, time_samps)
        else:
            inc = _divide(end - beg, 1.0 - _fast_exp(self.curve))

        if inc >= 0.0:
            inc = max(inc, _FLT_EPSILON)
        else:
            inc = min(inc, -_FLT_EPSILON)

        out = self._output
        if self.curve == 0.0:
            val = out + inc
        else:
            self._curve_x += _divide(self.curve, time_samps)
            val = beg + inc * (1.0 - _fast_exp(self._curve_x))
            if math.isnan(val):
                val = 0.0

        self._prev_segment = self._segment
        if (out >= 1.0 and self._segment is AdEnvSegment.ATTACK) or (
            out <= 0.0 and self._segment is AdEnvSegment.DECAY
        ):
            self._segment = (
                AdEnvSegment.DECAY
                if self._segment is AdEnvSegment.ATTACK
                else AdEnvSegment.IDLE
            )

        if self._segment is AdEnvSegment.IDLE:
            val = out = 0.0
        self._output = val

        return out * (self.maximum - self.minimum) + self.minimum