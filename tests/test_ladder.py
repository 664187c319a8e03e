import math
import random

import pytest

from sampledsp.ladder import LadderFilter, LadderMode


def test_silence_gives_silence():
    f = LadderFilter(48000)
    assert f.process_block([0.0] * 64) == [0.0] * 64


def test_res_clamped_to_max():
    f = LadderFilter(48000)
    f.res = 10.0
    assert f.res == pytest.approx(1.8)
    f.res = -1.0
    assert f.res == 0.0


def test_input_drive_clamped():
    f = LadderFilter(48000)
    f.input_drive = 10.0
    assert f.input_drive == 4.0
    f.input_drive = -2.0
    assert f.input_drive == 0.0


def test_freq_keeps_requested_value():
    f = LadderFilter(48000)
    f.freq = 100000.0
    assert f.freq == 100000.0


@pytest.mark.parametrize("mode", [LadderMode.HP24, LadderMode.HP12, LadderMode.BP12])
def test_dc_is_rejected(mode):
    f = LadderFilter(48000)
    f.mode = mode
    f.freq = 1000.0
    out = f.process_block([0.5] * 20000)
    assert out[-1] == pytest.approx(0.0, abs=1e-4)


def test_block_matches_single_samples():
    data = [math.sin(i * 0.05) for i in range(128)]
    a = LadderFilter(48000)
    b = LadderFilter(48000)
    assert a.process_block(data) == [b.process(x) for x in data]


def test_output_stays_bounded_for_loud_noise():
    rng = random.Random(7)
    f = LadderFilter(48000)
    f.res = 1.8
    f.input_drive = 4.0
    out = f.process_block(rng.uniform(-10, 10) for _ in range(5000))
    assert max(abs(v) for v in out) < 2.0


def test_lowpass_attenuates_high_frequency():
    def rms(freq_hz):
        f = LadderFilter(48000)
        f.freq = 300.0
        f.res = 0.0
        out = f.process_block(
            0.2 * math.sin(2 * math.pi * freq_hz * n / 48000) for n in range(4800)
        )
        tail = out[2400:]
        return math.sqrt(sum(v * v for v in tail) / len(tail))

    assert rms(50) > 10 * rms(10000)