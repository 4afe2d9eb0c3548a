"""Error metrics for a candidate line and the green-to-red feedback color."""
from __future__ import annotations

import math

import numpy as np

from playground.utils.dataset import Samples, as_dataset
from playground.utils.errors import UndefinedEstimate

HUE_GREEN = 120.0
SATURATION_PCT = 80
LIGHTNESS_PCT = 45
COLOR_SENSITIVITY = 0.5
EPSILON = 1e-9


def residuals(samples: Samples, a: float, b: float) -> np.ndarray:
    ds = as_dataset(samples)
    return ds.y - (a + b * ds.x)


def sse(samples: Samples, a: float, b: float) -> float:
    r = residuals(samples, a, b)
    return float(np.sum(r * r))


def mse(samples: Samples, a: float, b: float) -> float:
    ds = as_dataset(samples)
    if ds.n == 0:
        raise UndefinedEstimate("MSE is undefined for an empty dataset")
    return sse(ds, a, b) / ds.n


def excess_ratio(sse_value: float, sse_min: float, epsilon: float = EPSILON) -> float:
    """Relative excess error (sse - sse_min) / sse_min, floored at 0."""
    return max(0.0, (sse_value - sse_min) / max(sse_min, epsilon))


def color_for(
    sse_value: float,
    sse_min: float,
    k: float = COLOR_SENSITIVITY,
    epsilon: float = EPSILON,
) -> float:
    """
    Hue in degrees: 120 (green) at the OLS minimum, falling toward 0 (red)
    as the excess ratio grows. atan(k*ratio)/(pi/2) maps [0, inf) onto [0, 1),
    so red is approached but never reached at a finite ratio.
    """
    ratio = excess_ratio(sse_value, sse_min, epsilon)
    t = math.atan(k * ratio) / (math.pi / 2)
    return HUE_GREEN * (1.0 - t)


def hsl(hue: float) -> str:
    return f"hsl({hue:.2f}, {SATURATION_PCT}%, {LIGHTNESS_PCT}%)"
