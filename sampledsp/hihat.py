"""808-style hi-hat built from square-wave metallic noise."""

from __future__ import annotations

import random
from collections.abc import Callable

from sampledsp.svf import Svf

_ONE_TWELFTH = 1.0 / 12.0
_RATIOS = (1.0, 1.304, 1.466, 1.787, 1.932, 2.536)


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _semitones_to_ratio(semitones: float) -> float:
    return 2.0 ** (semitones * _ONE_TWELFTH)


class SquareNoise:
    """Metallic noise from six detuned square oscillators summed together."""

    def __init__(self) -> None:
        self._phases = [0] * len(_RATIOS)

    def process(self, f0: float) -> float:
        """Return the next sample; ``f0`` is normalised to the sample rate."""
        noise = 0
        for i, ratio in enumerate(_RATIOS):
            f = min(f0 * ratio, 0.499)
            increment = int(f * 4294967296.0) & 0xFFFFFFFF
            phase = (self._phases[i] + increment) & 0xFFFFFFFF
            self._phases[i] = phase
            noise += phase >> 31
        return 0.33 * noise - 1.0


def swing_vca(s: float, gain: float) -> float:
    """Asymmetric saturating VCA."""
    s *= 10.0 if s > 0.0 else 0.1
    s = s / (1.0 + abs(s))
    return (s + 1.0) * gain


def linear_vca(s: float, gain: float) -> float:
    """Plain multiplying VCA."""
    return s * gain


class HiHat:
    """808 hi-hat with tone, decay and noisiness controls.

    ``vca`` shapes the output amplitude (:func:`linear_vca` or
    :func:`swing_vca`); ``resonance`` enables the resonant colouring filter.
    ``rng`` supplies clocked noise through its ``random()`` method.
    """

    def __init__(
        self,
        sample_rate: float,
        vca: Callable[[float, float], float] = linear_vca,
        resonance: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        self.sample_rate = float(sample_rate)
        self.vca = vca
        self.resonance = resonance
        self._rng = rng if rng is not None else random.Random()
        self._trig = False

        self._envelope = 0.0
        self._noise_clock = 0.0
        self._noise_sample = 0.0

        self.freq = 3000.0
        self.tone = 0.5
        self.decay = 0.2
        self.noisiness = 0.8
        self.accent = 0.8
        self.sustain = False

        self._metallic_noise = SquareNoise()
        self._coloration = Svf(self.sample_rate)
        self._hpf = Svf(self.sample_rate)

    @property
    def accent(self) -> float:
        """Accent amount, clamped to 0..1."""
        return self._accent

    @accent.setter
    def accent(self, value: float) -> None:
        self._accent = _clamp(value, 0.0, 1.0)

    @property
    def freq(self) -> float:
        """Root frequency in Hz, clamped to 0..sample_rate."""
        return self._f0 * self.sample_rate

    @freq.setter
    def freq(self, value: float) -> None:
        self._f0 = _clamp(value / self.sample_rate, 0.0, 1.0)

    @property
    def tone(self) -> float:
        """Brightness, clamped to 0..1."""
        return self._tone

    @tone.setter
    def tone(self, value: float) -> None:
        self._tone = _clamp(value, 0.0, 1.0)

    @property
    def decay(self) -> float:
        """Decay length; negative values are raised to 0. Tuned for 0..1."""
        return (self._decay + 1.2) / 1.7

    @decay.setter
    def decay(self, value: float) -> None:
        self._decay = max(value, 0.0) * 1.7 - 1.2

    @property
    def noisiness(self) -> float:
        """Mix between tone (0) and noise (1), clamped to 0..1."""
        return self._noisiness_raw

    @noisiness.setter
    def noisiness(self, value: float) -> None:
        self._noisiness_raw = _clamp(value, 0.0, 1.0)
        self._noisiness = self._noisiness_raw * self._noisiness_raw

    def trig(self) -> None:
        """Strike the hi-hat on the next sample."""
        self._trig = True

    def process(self, trigger: bool = False) -> float:
        """Return the next sample; ``trigger`` strikes the hi-hat."""
        sr = self.sample_rate
        decay = self._decay
        envelope_decay = 1.0 - 0.003 * _semitones_to_ratio(-decay * 84.0)
        cut_decay = 1.0 - 0.0025 * _semitones_to_ratio(-decay * 36.0)

        if trigger or self._trig:
            self._trig = False
            self._envelope = (1.5 + 0.5 * (1.0 - decay)) * (
                0.3 + 0.7 * self._accent
            )

        out = self._metallic_noise.process(2.0 * self._f0)

        cutoff = 150.0 / sr * _semitones_to_ratio(self._tone * 72.0)
        cutoff = _clamp(cutoff, 0.0, 16000.0 / sr)

        self._coloration.freq = cutoff * sr
        self._coloration.res = 3.0 + 6.0 * self._tone if self.resonance else 1.0
        out = self._coloration.process(out).band

        noise_f = self._f0 * (16.0 + 16.0 * (1.0 - self._noisiness))
        noise_f = _clamp(noise_f, 0.0, 0.5)
        self._noise_clock += noise_f
        if self._noise_clock >= 1.0:
            self._noise_clock -= 1.0
            self._noise_sample = self._rng.random() - 0.5
        out += self._noisiness * (self._noise_sample - out)

        sustain_gain = self._accent * decay
        self._envelope *= envelope_decay if self._envelope > 0.5 else cut_decay
        out = self.vca(out, sustain_gain if self.sustain else self._envelope)

        self._hpf.freq = cutoff * sr
        self._hpf.res = 0.5
        return self._hpf.process(out).high