"""Attack/decay/sustain/release envelope with exponential segments."""

from __future__ import annotations

import enum
import math


class AdsrSegment(enum.IntEnum):
    """Stage of an :class:`Adsr` envelope."""

    IDLE = 0
    ATTACK = 1
    DECAY = 2
    RELEASE = 4


def _time_constant(seconds: float, rate: int) -> float:
    if seconds > 0.0:
        return 1.0 - math.exp(math.log(1.0 / math.e) / (seconds * rate))
    return 1.0


class Adsr:
    """Gate-driven ADSR envelope.

    ``sample_rate`` is divided by ``block_size`` (and truncated to an integer)
    when the envelope is processed once per block.
    """

    def __init__(self, sample_rate: float, block_size: int = 1) -> None:
        self._rate = int(sample_rate / block_size)
        self._attack_shape = -1.0
        self._attack_target = 0.0
        self._attack_time = -1.0
        self._decay_time = -1.0
        self._release_time = -1.0
        self._attack_d0 = 0.0
        self._decay_d0 = 0.0
        self._release_d0 = 0.0
        self._sustain_level = 0.7
        self._x = 0.0
        self._gate = False
        self._mode = AdsrSegment.IDLE

        self.set_time(AdsrSegment.ATTACK, 0.1)
        self.set_time(AdsrSegment.DECAY, 0.1)
        self.set_time(AdsrSegment.RELEASE, 0.1)

    @property
    def sustain_level(self) -> float:
        """Sustain level; 0 or below forces the envelope to idle, capped at 1."""
        return self._sustain_level

    @sustain_level.setter
    def sustain_level(self, value: float) -> None:
        if value <= 0.0:
            value = -0.01
        elif value > 1.0:
            value = 1.0
        self._sustain_level = value

    @property
    def current_segment(self) -> AdsrSegment:
        """Segment the envelope is in."""
        return self._mode

    @property
    def is_running(self) -> bool:
        """True unless the envelope is idle."""
        return self._mode is not AdsrSegment.IDLE

    def retrigger(self, hard: bool) -> None:
        """Force the attack stage; a hard retrigger restarts from zero."""
        self._mode = AdsrSegment.ATTACK
        if hard:
            self._x = 0.0

    def set_time(self, segment: AdsrSegment | int, seconds: float) -> None:
        """Set the time of the attack, decay or release segment.

        Other segments are ignored.
        """
        if segment == AdsrSegment.ATTACK:
            self.set_attack_time(seconds, 0.0)
        elif segment == AdsrSegment.DECAY:
            self.set_decay_time(seconds)
        elif segment == AdsrSegment.RELEASE:
            self.set_release_time(seconds)

    def set_attack_time(self, seconds: float, shape: float = 0.0) -> None:
        """Set the attack time in seconds and the attack shape."""
        if seconds == self._attack_time and shape == self._attack_shape:
            return
        self._attack_time = seconds
        self._attack_shape = shape
        if seconds > 0.0:
            target = 9.0 * shape**10 + 0.3 * shape + 1.01
            self._attack_target = target
            log_target = math.log(1.0 - 1.0 / target)
            self._attack_d0 = 1.0 - math.exp(log_target / (seconds * self._rate))
        else:
            self._attack_d0 = 1.0

    def set_decay_time(self, seconds: float) -> None:
        """Set the decay time constant in seconds."""
        if seconds != self._decay_time:
            self._decay_time = seconds
            self._decay_d0 = _time_constant(seconds, self._rate)

    def set_release_time(self, seconds: float) -> None:
        """Set the release time constant in seconds."""
        if seconds != self._release_time:
            self._release_time = seconds
            self._release_d0 = _time_constant(seconds, self._rate)

    def process(self, gate: bool) -> float:
        """Advance one step with the given gate and return the envelope."""
        if gate and not self._gate:
            self._mode = AdsrSegment.ATTACK
        elif not gate and self._gate:
            self._mode = AdsrSegment.RELEASE
        self._gate = gate

        mode = self._mode
        if mode is AdsrSegment.IDLE:
            return 0.0

        if mode is AdsrSegment.ATTACK:
            self._x += self._attack_d0 * (self._attack_target - self._x)
            if self._x > 1.0:
                self._x = 1.0
                self._mode = AdsrSegment.DECAY
            return self._x

        if mode is AdsrSegment.DECAY:
            d0, target = self._decay_d0, self._sustain_level
        else:
            d0, target = self._release_d0, -0.01
        self._x += d0 * (target - self._x)
        if self._x < 0.0:
            self._x = 0.0
            self._mode = AdsrSegment.IDLE
        return self._x