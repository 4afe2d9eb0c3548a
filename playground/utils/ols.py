"""
Closed-form simple linear regression and the helpers the app and unit tests share.
No external deps beyond NumPy.
"""
from __future__ import annotations

from dataclasses import dataclass
import numpy as np

from playground.utils.dataset import Samples, as_dataset
from playground.utils.errors import UndefinedEstimate


@dataclass(frozen=True)
class OLSResult:
    a_hat: float            # intercept
    b_hat: float            # slope
    sse_min: float
    y_hat: np.ndarray
    resid: np.ndarray
    r2: float
    degenerate: bool        # all x identical, slope reported as 0

    @property
    def beta(self) -> np.ndarray:
        return np.array([self.a_hat, self.b_hat])


def fit(samples: Samples) -> OLSResult:
    """
    Fit y = a + b*x via ordinary least squares (closed form, normal equations).

    - Empty input raises UndefinedEstimate.
    - Constant x (Sxx == 0) is not an error: b_hat = 0 and a_hat = mean(y),
      the horizontal line through the data. A single point lands here too.
    """
    ds = as_dataset(samples)
    if ds.n == 0:
        raise UndefinedEstimate("OLS needs at least 1 sample")
    x, y = ds.x, ds.y

    xbar = float(np.mean(x))
    ybar = float(np.mean(y))
    dx = x - xbar
    sxx = float(np.sum(dx * dx))
    sxy = float(np.sum(dx * (y - ybar)))

    # decided on raw x: a rounded mean can leave dx ~1e-17 for identical values
    degenerate = bool(np.all(x == x[0])) or sxx == 0
    b_hat = 0.0 if degenerate else sxy / sxx
    a_hat = ybar - b_hat * xbar

    y_hat = a_hat + b_hat * x
    resid = y - y_hat
    sse_min = float(np.sum(resid ** 2))
    ss_tot = float(np.sum((y - ybar) ** 2))
    r2 = 1.0 - sse_min / ss_tot if ss_tot > 0 else 0.0

    return OLSResult(
        a_hat=a_hat, b_hat=b_hat, sse_min=sse_min,
        y_hat=y_hat, resid=resid, r2=r2, degenerate=degenerate,
    )
