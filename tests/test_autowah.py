import math

from sampledsp.autowah import Autowah


def signal(n):
    return [math.sin(i * 0.05) * 0.8 for i in range(n)]


def test_default_passes_input_through():
    wah = Autowah(48000)
    for x in signal(200):
        assert wah.process(x) == x


def test_fully_dry_with_full_wah_passes_input_through():
    wah = Autowah(48000)
    wah.wah = 1.0
    wah.dry_wet = 0.0
    for x in signal(200):
        assert wah.process(x) == x


def test_silence_stays_silent():
    wah = Autowah(48000)
    wah.wah = 1.0
    wah.level = 1.0
    assert all(wah.process(0.0) == 0.0 for _ in range(100))


def test_wet_signal_differs_from_input():
    wah = Autowah(48000)
    wah.wah = 1.0
    wah.level = 1.0
    out = [wah.process(x) for x in signal(500)]
    assert any(abs(o - x) > 1e-6 for o, x in zip(out, signal(500)))
    assert all(math.isfinite(o) for o in out)


def test_deterministic():
    a = Autowah(44100)
    b = Autowah(44100)
    for w in (a, b):
        w.wah = 0.7
        w.level = 0.5
        w.dry_wet = 60.0
    assert [a.process(x) for x in signal(300)] == [b.process(x) for x in signal(300)]