import pytest

from sampledsp.adsr import Adsr, AdsrSegment


def hold(env, gate, n):
    return [env.process(gate) for _ in range(n)]


def samples_to_peak(env, limit=100000):
    for count in range(1, limit):
        env.process(True)
        if env.current_segment is AdsrSegment.DECAY:
            return count
    raise AssertionError("attack never ended")


def test_idle_without_gate():
    env = Adsr(1000)
    assert hold(env, False, 10) == [0.0] * 10
    assert not env.is_running


def test_attack_peaks_then_settles_at_sustain():
    env = Adsr(1000)
    outs = hold(env, True, 3000)
    assert max(outs) == 1.0
    assert env.current_segment is AdsrSegment.DECAY
    assert outs[-1] == pytest.approx(env.sustain_level, abs=1e-3)


def test_release_falls_to_idle():
    env = Adsr(1000)
    hold(env, True, 3000)
    outs = hold(env, False, 3000)
    assert env.current_segment is AdsrSegment.IDLE
    assert outs[-1] == 0.0
    assert all(a >= b for a, b in zip(outs, outs[1:]))


def test_zero_attack_is_instant():
    env = Adsr(1000)
    env.set_attack_time(0.0)
    assert env.process(True) == 1.0
    assert env.current_segment is AdsrSegment.DECAY


def test_set_time_attack_zero_is_instant():
    env = Adsr(1000)
    env.set_time(AdsrSegment.ATTACK, 0.0)
    assert env.process(True) == 1.0


def test_sustain_level_clamping():
    env = Adsr(1000)
    env.sustain_level = 2.0
    assert env.sustain_level == 1.0
    env.sustain_level = 0.0
    assert env.sustain_level == -0.01
    env.sustain_level = 0.3
    assert env.sustain_level == 0.3


def test_zero_sustain_goes_idle_while_gate_held():
    env = Adsr(1000)
    env.sustain_level = 0.0
    outs = hold(env, True, 5000)
    assert env.current_segment is AdsrSegment.IDLE
    assert outs[-1] == 0.0


def test_hard_retrigger_restarts_from_zero():
    env = Adsr(1000)
    hold(env, True, 3000)
    env.retrigger(True)
    assert env.current_segment is AdsrSegment.ATTACK
    assert env.process(True) < env.sustain_level


def test_soft_retrigger_continues_from_level():
    env = Adsr(1000)
    hold(env, True, 3000)
    env.retrigger(False)
    assert env.process(True) > env.sustain_level


def test_block_size_speeds_up_envelope():
    per_sample = Adsr(1000, 1)
    per_block = Adsr(1000, 10)
    assert samples_to_peak(per_block) < samples_to_peak(per_sample)


def test_longer_decay_is_slower():
    fast = Adsr(1000)
    slow = Adsr(1000)
    slow.set_decay_time(1.0)
    samples_to_peak(fast)
    samples_to_peak(slow)
    fast_out = hold(fast, True, 50)[-1]
    slow_out = hold(slow, True, 50)[-1]
    assert slow_out > fast_out