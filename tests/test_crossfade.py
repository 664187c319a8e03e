import pytest

from sampledsp.crossfade import CrossFade, CrossfadeCurve


@pytest.mark.parametrize("curve", list(CrossfadeCurve))
def test_endpoints_select_inputs(curve):
    cf = CrossFade(curve, 0.0)
    assert cf.process(3.0, -2.0) == pytest.approx(3.0, abs=1e-5)
    cf.pos = 1.0
    assert cf.process(3.0, -2.0) == pytest.approx(-2.0)


def test_linear_midpoint_is_average():
    cf = CrossFade()
    assert cf.pos == 0.5
    assert cf.process(2.0, 4.0) == pytest.approx(3.0)


@pytest.mark.parametrize("pos", [0.0, 0.2, 0.5, 0.9, 1.0])
def test_constant_power_preserves_power(pos):
    cf = CrossFade(CrossfadeCurve.CPOW, pos)
    g1 = cf.process(1.0, 0.0)
    g2 = cf.process(0.0, 1.0)
    assert g1 * g1 + g2 * g2 == pytest.approx(1.0)


@pytest.mark.parametrize("curve", list(CrossfadeCurve))
def test_weight_of_second_input_rises_with_pos(curve):
    weights = [CrossFade(curve, p / 10).process(0.0, 1.0) for p in range(11)]
    assert all(b > a for a, b in zip(weights, weights[1:]))


def test_exponential_below_linear_inside_range():
    lin = CrossFade(CrossfadeCurve.LIN, 0.3).process(0.0, 1.0)
    exp = CrossFade(CrossfadeCurve.EXP, 0.3).process(0.0, 1.0)
    log = CrossFade(CrossfadeCurve.LOG, 0.3).process(0.0, 1.0)
    assert exp < lin
    assert log < lin


def test_unknown_curve_in_constructor_falls_back_to_linear():
    assert CrossFade(9).curve is CrossfadeCurve.LIN


def test_unknown_curve_setter_raises_and_keeps_curve():
    cf = CrossFade()
    cf.curve = CrossfadeCurve.EXP
    with pytest.raises(ValueError):
        cf.curve = 9
    assert cf.curve is CrossfadeCurve.EXP
    assert cf.process(0.0, 1.0) == pytest.approx(0.25)


def test_curve_setter_round_trip():
    cf = CrossFade()
    cf.curve = CrossfadeCurve.EXP
    assert cf.curve is CrossfadeCurve.EXP