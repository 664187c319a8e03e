import pytest

from sampledsp.wavefolder import Wavefolder

VALUES = [-7.3, -3.5, -2.25, -1.5, -0.75, 0.0, 0.5, 0.99, 1.5, 2.75, 5.0, 9.1]


@pytest.mark.parametrize("x", [-0.9, -0.5, 0.0, 0.25, 0.75])
def test_identity_inside_unit_range(x):
    assert Wavefolder().process(x) == x


def test_folds_above_one():
    assert Wavefolder().process(1.5) == 0.5


@pytest.mark.parametrize("x", VALUES)
def test_output_bounded(x):
    assert -1.0 <= Wavefolder().process(x) <= 1.0


@pytest.mark.parametrize("x", VALUES)
def test_periodic_with_period_four(x):
    fold = Wavefolder()
    assert fold.process(x + 4.0) == pytest.approx(fold.process(x))


@pytest.mark.parametrize("x", [0.3, 1.2, 2.6, 3.7])
def test_odd_symmetry(x):
    fold = Wavefolder()
    assert fold.process(-x) == pytest.approx(-fold.process(x))


def test_gain_applied_after_offset():
    fold = Wavefolder(gain=2.0, offset=0.25)
    plain = Wavefolder()
    assert fold.process(0.5) == plain.process((0.5 + 0.25) * 2.0)


def test_negative_gain_inverts():
    assert Wavefolder(gain=-1.0).process(0.5) == -0.5