import pytest

from sampledsp.fir import FirFilter


def impulse(n):
    return [1.0] + [0.0] * (n - 1)


def test_impulse_response_is_coefficients_tail_first():
    fir = FirFilter([1.0, 2.0, 3.0])
    assert [fir.process(x) for x in impulse(5)] == [3.0, 2.0, 1.0, 0.0, 0.0]


def test_reverse_gives_natural_order():
    fir = FirFilter([1.0, 2.0, 3.0], reverse=True)
    assert [fir.process(x) for x in impulse(4)] == [1.0, 2.0, 3.0, 0.0]
    assert fir.coefficients == (3.0, 2.0, 1.0)


def test_truncation_keeps_head():
    fir = FirFilter([1.0, 2.0, 3.0], max_size=2)
    assert fir.coefficients == (1.0, 2.0)
    assert [fir.process(x) for x in impulse(3)] == [2.0, 1.0, 0.0]


def test_truncation_with_reverse_takes_tail_reversed():
    fir = FirFilter([1.0, 2.0, 3.0], max_size=2, reverse=True)
    assert fir.coefficients == (3.0, 2.0)


def test_block_matches_single_samples():
    ir = [0.5, -0.25, 0.125, 1.0]
    signal = [1.0, -2.0, 3.0, 0.5, 0.0, 4.0, -1.0]
    a = FirFilter(ir)
    b = FirFilter(ir)
    assert a.process_block(signal) == [b.process(x) for x in signal]


def test_blocks_carry_state():
    ir = [1.0, 1.0, 1.0]
    signal = [1.0, 2.0, 3.0, 4.0, 5.0]
    whole = FirFilter(ir).process_block(signal)
    split = FirFilter(ir)
    parts = split.process_block(signal[:2]) + split.process_block(signal[2:])
    assert parts == whole


def test_reset_clears_history():
    fir = FirFilter([1.0, 1.0])
    fir.process(5.0)
    fir.reset()
    assert fir.process(0.0) == 0.0


def test_set_ir_replaces_coefficients_and_state():
    fir = FirFilter([1.0, 1.0])
    fir.process(5.0)
    fir.set_ir([2.0, 0.0])
    assert fir.process(0.0) == 0.0
    assert fir.process(1.0) == 0.0
    assert fir.process(0.0) == 2.0


def test_empty_filter_raises():
    fir = FirFilter()
    with pytest.raises(ValueError):
        fir.process(1.0)


def test_block_too_large_raises():
    fir = FirFilter([1.0], max_block=2)
    with pytest.raises(ValueError):
        fir.process_block([1.0, 2.0, 3.0])


def test_latency_is_zero():
    assert FirFilter([1.0]).latency == 0