"""808-style snare drum model with modal resonators and filtered noise."""

from __future__ import annotations

import math
import random

from sampledsp.svf import Svf

_MODE_FREQUENCIES = (1.00, 2.00, 3.18, 4.16, 5.62)
_ONE_TWELFTH = 1.0 / 12.0


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _soft_limit(x: float) -> float:
    return x * (27.0 + x * x) / (27.0 + 9.0 * x * x)


def _soft_clip(x: float) -> float:
    if x < -3.0:
        return -1.0
    if x > 3.0:
        return 1.0
    return _soft_limit(x)


class AnalogSnareDrum:
    """Snare drum built from five resonant modes plus band-passed noise.

    ``rng`` supplies the noise through its ``random()`` method; a fresh
    :class:`random.Random` is used when it is omitted.
    """

    def __init__(
        self, sample_rate: float, rng: random.Random | None = None
    ) -> None:
        self.sample_rate = float(sample_rate)
        self._rng = rng if rng is not None else random.Random()
        self._trig = False

        self._pulse_remaining = 0
        self._pulse = 0.0
        self._pulse_height = 0.0
        self._pulse_lp = 0.0
        self._noise_envelope = 0.0

        self.sustain = False
        self.accent = 0.6
        self.freq = 200.0
        self.decay = 0.3
        self.snappy = 0.7
        self.tone = 0.5

        self._resonators = [Svf(self.sample_rate) for _ in _MODE_FREQUENCIES]
        self._phases = [0.0] * len(_MODE_FREQUENCIES)
        self._noise_filter = Svf(self.sample_rate)

    @property
    def accent(self) -> float:
        """Accent amount, clamped to 0..1."""
        return self._accent

    @accent.setter
    def accent(self, value: float) -> None:
        self._accent = _clamp(value, 0.0, 1.0)

    @property
    def freq(self) -> float:
        """Root frequency in Hz, clamped to 0..0.4*sample_rate."""
        return self._f0 * self.sample_rate

    @freq.setter
    def freq(self, value: float) -> None:
        self._f0 = _clamp(value / self.sample_rate, 0.0, 0.4)

    @property
    def tone(self) -> float:
        """Brightness, clamped to 0..1 (1 = bright)."""
        return self._tone / 2.0

    @tone.setter
    def tone(self, value: float) -> None:
        self._tone = _clamp(value, 0.0, 1.0) * 2.0

    @property
    def decay(self) -> float:
        """Length of the decay; positive values work best."""
        return self._decay

    @decay.setter
    def decay(self, value: float) -> None:
        self._decay = value

    @property
    def snappy(self) -> float:
        """Mix between drum (0) and snare noise (1), clamped to 0..1."""
        return self._snappy

    @snappy.setter
    def snappy(self, value: float) -> None:
        self._snappy = _clamp(value, 0.0, 1.0)

    def trig(self) -> None:
        """Strike the drum on the next sample."""
        self._trig = True

    def process(self, trigger: bool = False) -> float:
        """Return the next sample; ``trigger`` strikes the drum."""
        sr = self.sample_rate
        decay = self._decay
        f0 = self._f0
        decay_xt = decay * (1.0 + decay * (decay - 1.0))
        pulse_duration = int(1.0e-3 * sr)
        pulse_decay_time = 0.1e-3 * sr
        q = 2000.0 * 2.0 ** (_ONE_TWELFTH * decay_xt * 84.0)
        noise_envelope_decay = 1.0 - 0.0017 * 2.0 ** (
            _ONE_TWELFTH * (-decay * (50.0 + self._snappy * 10.0))
        )
        exciter_leak = self._snappy * (2.0 - self._snappy) * 0.1

        snappy = _clamp(self._snappy * 1.1 - 0.05, 0.0, 1.0)
        tone = self._tone

        if trigger or self._trig:
            self._trig = False
            self._pulse_remaining = pulse_duration
            self._pulse_height = 3.0 + 7.0 * self._accent
            self._noise_envelope = 2.0

        freqs = [min(f0 * ratio, 0.499) for ratio in _MODE_FREQUENCIES]
        for i, (resonator, f) in enumerate(zip(self._resonators, freqs)):
            resonator.freq = f * sr
            resonator.res = f * (q if i == 0 else q * 0.25) * 0.2

        if tone < 0.666667:
            tone *= 1.5
            gains = [
                1.5 + (1.0 - tone) * (1.0 - tone) * 4.5,
                2.0 * tone + 0.15,
                0.0,
                0.0,
                0.0,
            ]
        else:
            tone = (tone - 0.666667) * 3.0
            gains = [1.5 - tone * 0.5, 2.15 - tone * 0.7]
            for _ in range(len(_MODE_FREQUENCIES) - 2):
                gains.append(tone)
                tone *= tone

        f_noise = f0 * 16.0
        self._noise_filter.freq = f_noise * sr
        self._noise_filter.res = f_noise * 1.5

        if self._pulse_remaining:
            self._pulse_remaining -= 1
            pulse = (
                self._pulse_height
                if self._pulse_remaining
                else self._pulse_height - 1.0
            )
            self._pulse = pulse
        else:
            self._pulse *= 1.0 - 1.0 / pulse_decay_time
            pulse = self._pulse

        sustain_gain = self._accent * decay

        self._pulse_lp = _clamp(self._pulse_lp, pulse, 0.75)

        shell = 0.0
        for i, (resonator, f, gain) in enumerate(
            zip(self._resonators, freqs, gains)
        ):
            if i == 0:
                excitation = (pulse - self._pulse_lp) + 0.006 * pulse
            else:
                excitation = 0.026 * pulse

            phase = self._phases[i] + f
            self._phases[i] = phase - 1.0 if phase >= 1.0 else phase

            band = resonator.process(excitation).band
            if self.sustain:
                contribution = (
                    math.sin(self._phases[i] * math.tau) * sustain_gain * 0.25
                )
            else:
                contribution = band + excitation * exciter_leak
            shell += gain * contribution
        shell = _soft_clip(shell)

        noise = 2.0 * self._rng.random() - 1.0
        if noise < 0.0:
            noise = 0.0
        self._noise_envelope *= noise_envelope_decay
        level = sustain_gain if self.sustain else self._noise_envelope
        noise *= level * snappy * 2.0

        noise = self._noise_filter.process(noise).band

        return noise + shell * (1.0 - snappy)