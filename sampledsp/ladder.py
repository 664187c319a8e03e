"""Four-pole ladder filter with selectable response."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable

_INTERPOLATION = 4
_INTERPOLATION_RECIP = 1.0 / _INTERPOLATION
_MAX_RESONANCE = 1.8


def _fast_tanh(x: float) -> float:
    if x > 3.0:
        return 1.0
    if x < -3.0:
        return -1.0
    x2 = x * x
    return x * (27.0 + x2) / (27.0 + 9.0 * x2)


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class LadderMode(enum.Enum):
    """Response of the ladder filter (12 or 24 dB/oct)."""

    LP24 = enum.auto()
    LP12 = enum.auto()
    BP24 = enum.auto()
    BP12 = enum.auto()
    HP24 = enum.auto()
    HP12 = enum.auto()


class LadderFilter:
    """Huovilainen-style ladder filter, 4x oversampled by linear interpolation.

    It self-oscillates stably at high resonance.
    """

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = float(sample_rate)
        self._sr_int_recip = 1.0 / (self.sample_rate * _INTERPOLATION)
        self._alpha = 1.0
        self._k = 1.0
        self._qadjust = 1.0
        self._old_input = 0.0
        self._z0 = [0.0] * 4
        self._z1 = [0.0] * 4
        self._pbg = 0.0
        self._drive = 0.0
        self._drive_scaled = 0.0
        self.mode = LadderMode.LP24

        self.passband_gain = 0.5
        self.input_drive = 0.5
        self.freq = 5000.0
        self.res = 0.2

    @property
    def freq(self) -> float:
        """Cutoff in Hz as set; clamped to 5 Hz..0.425*sample_rate internally."""
        return self._fbase

    @freq.setter
    def freq(self, value: float) -> None:
        self._fbase = value
        fc = _clamp(value, 5.0, self.sample_rate * 0.425)
        wc = fc * 2.0 * math.pi * self._sr_int_recip
        wc2 = wc * wc
        self._alpha = (
            0.9892 * wc - 0.4324 * wc2 + 0.1381 * wc * wc2 - 0.0202 * wc2 * wc2
        )
        self._qadjust = 1.006 + 0.0536 * wc - 0.095 * wc2 - 0.05 * wc2 * wc2

    @property
    def res(self) -> float:
        """Resonance, clamped to 0..1.8."""
        return self._k / 4.0

    @res.setter
    def res(self, value: float) -> None:
        self._k = 4.0 * _clamp(value, 0.0, _MAX_RESONANCE)

    @property
    def passband_gain(self) -> float:
        """Passband gain compensation, clamped to 0..0.5."""
        return self._pbg

    @passband_gain.setter
    def passband_gain(self, value: float) -> None:
        self._pbg = _clamp(value, 0.0, 0.5)
        self.input_drive = self._drive

    @property
    def input_drive(self) -> float:
        """Drive into the input saturator, clamped to 0..4."""
        return self._drive

    @input_drive.setter
    def input_drive(self, value: float) -> None:
        self._drive = max(value, 0.0)
        if self._drive > 1.0:
            self._drive = min(self._drive, 4.0)
            self._drive_scaled = 1.0 + (self._drive - 1.0) * (1.0 - self._pbg)
        else:
            self._drive_scaled = self._drive

    def _lpf(self, s: float, i: int) -> float:
        ft = s * 0.76923077 + 0.23076923 * self._z0[i] - self._z1[i]
        ft = ft * self._alpha + self._z1[i]
        self._z1[i] = ft
        self._z0[i] = s
        return ft

    def _mix(self, u: float, s1: float, s2: float, s3: float, s4: float) -> float:
        mode = self.mode
        if mode is LadderMode.LP24:
            return s4
        if mode is LadderMode.LP12:
            return s2
        if mode is LadderMode.BP24:
            return (s2 + s4) * 4.0 - s3 * 8.0
        if mode is LadderMode.BP12:
            return (s1 - s2) * 2.0
        if mode is LadderMode.HP24:
            return u + s4 - (s1 + s3) * 4.0 + s2 * 6.0
        if mode is LadderMode.HP12:
            return u + s2 - s1 * 2.0
        return 0.0

    def process(self, x: float) -> float:
        """Filter one sample."""
        inp = x * self._drive_scaled
        total = 0.0
        interp = 0.0
        for _ in range(_INTERPOLATION):
            in_interp = interp * self._old_input + (1.0 - interp) * inp
            u = in_interp - (self._z1[3] - self._pbg * in_interp) * self._k * self._qadjust
            u = _fast_tanh(u)
            s1 = self._lpf(u, 0)
            s2 = self._lpf(s1, 1)
            s3 = self._lpf(s2, 2)
            s4 = self._lpf(s3, 3)
            total += self._mix(u, s1, s2, s3, s4) * _INTERPOLATION_RECIP
            interp += _INTERPOLATION_RECIP
        self._old_input = inp
        return total

    def process_block(self, samples: Iterable[float]) -> list[float]:
        """Filter a block of samples and return the results."""
        return [self.process(x) for x in samples]