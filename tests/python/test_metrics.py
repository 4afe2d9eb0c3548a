import math

import pytest

from playground.utils.dataset import Dataset
from playground.utils.errors import UndefinedEstimate
from playground.utils.metrics import color_for, excess_ratio, hsl, mse, residuals, sse
from playground.utils.ols import fit

PTS = [(-1.0, 0.5), (0.0, 1.0), (2.0, 4.5), (3.0, 5.0)]


def test_sse_by_hand():
    # line y = 1 + x: residuals -0.5, 0, 1.5, 1
    assert sse(PTS, 1.0, 1.0) == pytest.approx(0.25 + 0 + 2.25 + 1.0)
    assert residuals(PTS, 1.0, 1.0).tolist() == pytest.approx([-0.5, 0.0, 1.5, 1.0])


@pytest.mark.parametrize("a,b", [(0.0, 0.0), (1.0, 1.0), (-3.0, 2.5)])
def test_mse_is_sse_over_n(a, b):
    assert mse(PTS, a, b) == sse(PTS, a, b) / len(PTS)


def test_mse_undefined_on_empty():
    assert sse([], 1.0, 2.0) == 0.0
    with pytest.raises(UndefinedEstimate):
        mse(Dataset.from_points([]), 1.0, 2.0)


def test_infinite_parameters_give_infinite_sse():
    assert sse(PTS, math.inf, 0.0) == math.inf


def test_color_is_green_at_minimum():
    res = fit(PTS)
    assert color_for(res.sse_min, res.sse_min) == 120.0
    assert color_for(sse(PTS, res.a_hat, res.b_hat), res.sse_min) == pytest.approx(120.0)


def test_color_decreases_toward_red():
    hues = [color_for(s, 2.0) for s in (2.0, 2.5, 4.0, 20.0, 2e3, 2e9)]
    assert hues == sorted(hues, reverse=True)
    assert all(0.0 < h <= 120.0 for h in hues)
    assert hues[-1] < 1e-6


def test_color_bounds_at_extremes():
    assert color_for(math.inf, 1.0) == 0.0
    assert color_for(0.5, 1.0) == 120.0  # below minimum clamps to ratio 0


def test_ratio_uses_epsilon_floor_when_minimum_is_zero():
    assert excess_ratio(1e-9, 0.0) == pytest.approx(1.0)
    assert excess_ratio(0.0, 0.0) == 0.0
    hue = color_for(1e-9, 0.0)
    # ratio 1, k 0.5 -> t = atan(0.5) / (pi/2)
    assert hue == pytest.approx(120.0 * (1 - math.atan(0.5) / (math.pi / 2)))


def test_sensitivity_controls_speed():
    assert color_for(4.0, 2.0, k=2.0) < color_for(4.0, 2.0, k=0.5)


def test_hsl_string():
    assert hsl(120.0) == "hsl(120.00, 80%, 45%)"
