"""909-style snare drum from two coupled oscillators and filtered noise."""

from __future__ import annotations

import math
import random

from sampledsp.svf import Svf

_ONE_TWELFTH = 1.0 / 12.0


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _distorted_sine(phase: float) -> float:
    triangle = (phase if phase < 0.5 else 1.0 - phase) * 4.0 - 1.3
    return 2.0 * triangle / (1.0 + abs(triangle))


class SyntheticSnareDrum:
    """Naive snare drum: two modulated oscillators plus coloured noise.

    The two drum modes are tuned 1.47 apart and couple with each other the
    way the 909 circuit does. ``rng`` supplies the noise through its
    ``random()`` method; a fresh :class:`random.Random` is used when omitted.
    """

    def __init__(
        self, sample_rate: float, rng: random.Random | None = None
    ) -> None:
        self.sample_rate = float(sample_rate)
        self._rng = rng if rng is not None else random.Random()

        self._phases = [0.0, 0.0]
        self._drum_amplitude = 0.0
        self._snare_amplitude = 0.0
        self._fm = 0.0
        self._hold_counter = 0
        self._even = True

        self.sustain = False
        self.accent = 0.6
        self.freq = 200.0
        self.fm_amount = 0.1
        self.decay = 0.3
        self.snappy = 0.7

        self._trig = False

        self._drum_lp = Svf(self.sample_rate)
        self._snare_hp = Svf(self.sample_rate)
        self._snare_lp = Svf(self.sample_rate)

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
    def fm_amount(self) -> float:
        """Amount of pitch sweep, clamped to 0..1."""
        return self._fm_amount_raw

    @fm_amount.setter
    def fm_amount(self, value: float) -> None:
        self._fm_amount_raw = _clamp(value, 0.0, 1.0)
        self._fm_amount = self._fm_amount_raw * self._fm_amount_raw

    @property
    def decay(self) -> float:
        """Decay length; negative values are raised to 0."""
        return self._decay

    @decay.setter
    def decay(self, value: float) -> None:
        self._decay = max(value, 0.0)

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
        fm_amount = self._fm_amount

        decay_xt = decay * (1.0 + decay * (decay - 1.0))
        drum_decay = 1.0 - 1.0 / (0.015 * sr) * 2.0 ** (
            _ONE_TWELFTH
            * (-decay_xt * 72.0 - fm_amount * 12.0 + self._snappy * 7.0)
        )
        snare_decay = 1.0 - 1.0 / (0.01 * sr) * 2.0 ** (
            _ONE_TWELFTH * (-decay * 60.0 - self._snappy * 7.0)
        )
        fm_decay = 1.0 - 1.0 / (0.007 * sr)

        snappy = _clamp(self._snappy * 1.1 - 0.05, 0.0, 1.0)
        drum_level = math.sqrt(1.0 - snappy)
        snare_level = math.sqrt(snappy)

        snare_f_min = min(10.0 * f0, 0.5)
        snare_f_max = min(35.0 * f0, 0.5)

        self._snare_hp.freq = snare_f_min * sr
        self._snare_lp.freq = snare_f_max * sr
        self._snare_lp.res = 0.5 + 2.0 * snappy
        self._drum_lp.freq = 3.0 * f0 * sr

        if trigger or self._trig:
            self._trig = False
            self._snare_amplitude = self._drum_amplitude = (
                0.3 + 0.7 * self._accent
            )
            self._fm = 1.0
            self._phases = [0.0, 0.0]
            self._hold_counter = int((0.04 + decay * 0.03) * sr)

        self._even = not self._even
        if self.sustain:
            self._snare_amplitude = self._accent * decay
            self._drum_amplitude = self._snare_amplitude
            self._fm = 0.0
        else:
            # The drum envelope has a long tail; the snare holds for 40-70 ms.
            if self._drum_amplitude > 0.03 or self._even:
                self._drum_amplitude *= drum_decay
            if self._hold_counter:
                self._hold_counter -= 1
            else:
                self._snare_amplitude *= snare_decay
            self._fm *= fm_decay

        # Oscillator resets leak into each other, giving some intermodulation.
        reset_noise_amount = _clamp((0.125 - f0) * 8.0, 0.0, 1.0)
        reset_noise_amount *= reset_noise_amount
        reset_noise_amount *= fm_amount
        reset_noise = sum(-1.0 if p > 0.5 else 1.0 for p in self._phases)
        reset_noise *= reset_noise_amount * 0.025

        f = f0 * (1.0 + fm_amount * (4.0 * self._fm))
        phases = [self._phases[0] + f, self._phases[1] + f * 1.47]
        if reset_noise_amount > 0.1:
            phases = [
                1.0 - p if p >= 1.0 + reset_noise else p for p in phases
            ]
        else:
            phases = [p - 1.0 if p >= 1.0 else p for p in phases]
        self._phases = phases

        drum = -0.1
        drum += _distorted_sine(phases[0]) * 0.60
        drum += _distorted_sine(phases[1]) * 0.25
        drum *= self._drum_amplitude * drum_level
        drum = self._drum_lp.process(drum).low

        noise = self._rng.random()
        snare = self._snare_lp.process(noise).low
        snare = self._snare_hp.process(snare).high
        snare = (snare + 0.1) * (self._snare_amplitude + self._fm) * snare_level

        return snare + drum