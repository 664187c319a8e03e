import math

import pytest

from sampledsp.phasor import Phasor


def test_starts_at_zero():
    assert Phasor(48000, 440).process() == 0.0


def test_initial_phase_in_radians():
    assert Phasor(48000, 1.0, math.pi).process() == pytest.approx(0.5)


def test_output_stays_in_unit_range():
    ph = Phasor(1000, 37.0)
    outs = [ph.process() for _ in range(5000)]
    assert all(0.0 <= o <= 1.0 for o in outs)


def test_wraps_at_frequency():
    ph = Phasor(1000, 100.0)
    outs = [ph.process() for _ in range(1000)]
    wraps = sum(1 for a, b in zip(outs, outs[1:]) if b < a)
    assert 99 <= wraps <= 100


def test_ramp_increases_between_wraps():
    ph = Phasor(1000, 10.0)
    outs = [ph.process() for _ in range(50)]
    assert all(b > a for a, b in zip(outs, outs[1:]))


def test_freq_property_round_trip():
    ph = Phasor(48000)
    assert ph.freq == 1.0
    ph.freq = 220.0
    assert ph.freq == 220.0


def test_negative_frequency_pins_at_zero():
    ph = Phasor(1000, -5.0)
    outs = [ph.process() for _ in range(10)]
    assert outs == [0.0] * 10