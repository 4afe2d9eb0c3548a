"""Altair chart for the playground: samples, residuals, candidate line, true line."""
from __future__ import annotations

import math
from typing import Optional

import altair as alt
import pandas as pd

from playground.utils.dataset import Dataset

SAMPLE_COLOR = "#2563eb"
RESIDUAL_COLOR = "rgba(35, 170, 220, 0.35)"
TRUE_LINE_COLOR = "#94a3b8"
PAD_X, PAD_Y = 1, 2

Domain = tuple[float, float]


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def axis_domains(
    ds: Dataset,
    fixed: bool = False,
    fixed_x: Domain = (-6.0, 6.0),
    fixed_y: Domain = (-30.0, 30.0),
) -> tuple[Domain, Domain]:
    """Fixed window, or the data's integer bounds (always covering [-1, 1]) plus padding."""
    if fixed:
        return tuple(fixed_x), tuple(fixed_y)
    x_lo = math.floor(min(-1.0, float(ds.x.min()) if ds.n else -1.0))
    x_hi = math.ceil(max(1.0, float(ds.x.max()) if ds.n else 1.0))
    y_lo = math.floor(min(-1.0, float(ds.y.min()) if ds.n else -1.0))
    y_hi = math.ceil(max(1.0, float(ds.y.max()) if ds.n else 1.0))
    return (x_lo - PAD_X, x_hi + PAD_X), (y_lo - PAD_Y, y_hi + PAD_Y)


def line_points(a: float, b: float, x_domain: Domain) -> pd.DataFrame:
    x0, x1 = x_domain
    return pd.DataFrame({"x": [x0, x1], "y": [a + b * x0, a + b * x1]})


def residual_segments(ds: Dataset, a: float, b: float) -> pd.DataFrame:
    df = ds.to_frame()
    df["y_hat"] = a + b * df["x"]
    df["resid"] = df["y"] - df["y_hat"]
    return df


def playground_chart(
    ds: Dataset,
    a: float,
    b: float,
    line_color: str,
    true_line: Optional[tuple[float, float]] = None,
    show_residuals: bool = True,
    fixed_axes: bool = False,
    fixed_x: Domain = (-6.0, 6.0),
    fixed_y: Domain = (-30.0, 30.0),
    height: int = 520,
) -> alt.LayerChart:
    x_dom, y_dom = axis_domains(ds, fixed_axes, fixed_x, fixed_y)
    x_enc = alt.X("x:Q", title="x", scale=alt.Scale(domain=list(x_dom), nice=False))
    y_enc = alt.Y("y:Q", title="y", scale=alt.Scale(domain=list(y_dom), nice=False))

    seg = residual_segments(ds, a, b)
    layers = []
    if show_residuals:
        layers.append(
            alt.Chart(seg).mark_rule(color=RESIDUAL_COLOR, strokeWidth=2, clip=True).encode(
                x=x_enc, y=y_enc, y2="y_hat:Q",
            )
        )
    layers.append(
        alt.Chart(seg).mark_circle(color=SAMPLE_COLOR, opacity=0.9, size=60, clip=True).encode(
            x=x_enc,
            y=y_enc,
            tooltip=[
                alt.Tooltip("x:Q", format=".4f"),
                alt.Tooltip("y:Q", format=".4f"),
                alt.Tooltip("resid:Q", format=".4f", title="residual"),
            ],
        )
    )
    layers.append(
        alt.Chart(line_points(a, b, x_dom)).mark_line(color=line_color, strokeWidth=3, clip=True).encode(
            x=x_enc, y=y_enc,
        )
    )
    if true_line is not None:
        a0, b0 = true_line
        layers.append(
            alt.Chart(line_points(a0, b0, x_dom))
            .mark_line(color=TRUE_LINE_COLOR, strokeDash=[5, 5], strokeWidth=2, clip=True)
            .encode(x=x_enc, y=y_enc)
        )
    return alt.layer(*layers).properties(height=height)
