import numpy as np
import pytest

from playground.utils.dataset import Dataset, generate
from playground.utils.errors import UndefinedEstimate
from playground.utils.metrics import sse
from playground.utils.ols import fit
from playground.utils.random_source import NumpyRandomSource


def test_ols_fit_recovers_line_with_noise():
    """
    Generate synthetic linear data with small Gaussian noise and confirm:
    - R^2 is high (> 0.9)
    - Residuals are zero-mean-ish
    - Coefficients land close to the true line
    """
    gen = generate(500, 0.05, true_line=(0.5, 2.0), rng=NumpyRandomSource(42))

    res = fit(gen.dataset)

    assert res.r2 > 0.9, f"Low R^2: {res.r2}"
    assert abs(res.resid.mean()) < 1e-9, f"Residual mean too large: {res.resid.mean()}"
    assert abs(res.a_hat - 0.5) < 0.02, f"Intercept off: {res.a_hat} vs 0.5"
    assert abs(res.b_hat - 2.0) < 0.01, f"Slope off: {res.b_hat} vs 2.0"


def test_two_points_fit_exactly():
    res = fit([(0, 0), (2, 4)])
    assert res.a_hat == pytest.approx(0.0)
    assert res.b_hat == pytest.approx(2.0)
    assert res.sse_min == pytest.approx(0.0, abs=1e-12)


def test_constant_x_reports_zero_slope_instead_of_failing():
    # Intentional policy: Sxx == 0 gives the horizontal line through mean(y).
    res = fit([(1, 5), (1, 7), (1, 9)])
    assert res.degenerate
    assert res.b_hat == 0.0
    assert res.a_hat == 7.0
    assert res.sse_min == 8.0


def test_single_point_is_horizontal_line_through_it():
    res = fit([(3.0, -2.5)])
    assert (res.a_hat, res.b_hat, res.sse_min) == (-2.5, 0.0, 0.0)


def test_empty_input_raises_undefined_estimate():
    with pytest.raises(UndefinedEstimate):
        fit([])
    with pytest.raises(UndefinedEstimate):
        fit(Dataset.from_points([]))


def test_sse_min_matches_sse_at_estimate_and_is_minimal():
    gen = generate(30, 1.5, rng=NumpyRandomSource(7))
    res = fit(gen.dataset)
    assert res.sse_min == pytest.approx(sse(gen.dataset, res.a_hat, res.b_hat))

    rng = np.random.default_rng(0)
    for da, db in rng.normal(0, 0.5, size=(50, 2)):
        assert sse(gen.dataset, res.a_hat + da, res.b_hat + db) > res.sse_min


def test_fit_ignores_sample_order():
    pts = [(-2.0, 1.0), (0.5, 3.2), (4.0, 6.1), (1.5, 2.2), (-3.3, -0.4)]
    a = fit(pts)
    b = fit(list(reversed(pts)))
    assert a.a_hat == pytest.approx(b.a_hat)
    assert a.b_hat == pytest.approx(b.b_hat)
    assert a.sse_min == pytest.approx(b.sse_min)


def test_fit_is_idempotent_and_leaves_input_untouched():
    gen = generate(12, 1.0, rng=NumpyRandomSource(3))
    x_before = gen.dataset.x.copy()
    r1, r2 = fit(gen.dataset), fit(gen.dataset)
    assert (r1.a_hat, r1.b_hat, r1.sse_min) == (r2.a_hat, r2.b_hat, r2.sse_min)
    np.testing.assert_array_equal(gen.dataset.x, x_before)


def test_beta_is_intercept_then_slope():
    res = fit([(0, 1), (1, 3), (2, 5)])
    np.testing.assert_allclose(res.beta, [1.0, 2.0])


def test_constant_x_with_inexact_mean_still_degenerate():
    # mean of three 0.1's is not exactly 0.1 in binary floating point
    res = fit([(0.1, 0.1), (0.1, 0.2), (0.1, 0.7)])
    assert res.degenerate
    assert res.b_hat == 0.0
    assert res.a_hat == pytest.approx(1.0 / 3.0)
    assert res.sse_min == pytest.approx((0.1 - 1 / 3) ** 2 + (0.2 - 1 / 3) ** 2 + (0.7 - 1 / 3) ** 2)
