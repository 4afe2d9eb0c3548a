#!/usr/bin/env python3
"""
Render a static playground snapshot as a CI artifact (no browser needed).
Outputs:
  artifacts/playground.png
"""
from __future__ import annotations

import argparse
import colorsys
import os
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from playground.utils.charts import axis_domains, residual_segments
from playground.utils.config import load_config
from playground.utils.metrics import LIGHTNESS_PCT, SATURATION_PCT
from playground.utils.random_source import NumpyRandomSource
from playground.utils.session import PlaygroundSession

ART = Path(os.environ.get("ARTIFACTS_DIR", "artifacts"))


def hue_to_rgb(hue: float) -> tuple[float, float, float]:
    # colorsys takes HLS in [0, 1]
    return colorsys.hls_to_rgb(hue / 360.0, LIGHTNESS_PCT / 100.0, SATURATION_PCT / 100.0)


def render(session: PlaygroundSession, out: Path, show_true_line: bool = True) -> Path:
    ds = session.dataset
    a, b = session.candidate
    snap = session.snapshot()
    (x0, x1), (y0, y1) = axis_domains(ds)

    plt.figure(figsize=(8, 5))
    seg = residual_segments(ds, a, b)
    plt.vlines(seg["x"], seg["y"], seg["y_hat"], colors=(35 / 255, 170 / 255, 220 / 255, 0.35), linewidth=2)
    plt.scatter(ds.x, ds.y, color="#2563eb", alpha=0.9, zorder=3, label="samples")
    plt.plot([x0, x1], [a + b * x0, a + b * x1], color=hue_to_rgb(snap.hue), linewidth=3,
             label=f"candidate (SSE={snap.sse:.3f})")
    plt.plot([x0, x1], [session.ols.a_hat + session.ols.b_hat * x0, session.ols.a_hat + session.ols.b_hat * x1],
             color="#059669", linewidth=1, label=f"OLS (SSE={snap.sse_min:.3f})")
    if show_true_line:
        a0, b0 = session.true_line
        plt.plot([x0, x1], [a0 + b0 * x0, a0 + b0 * x1], color="#94a3b8", linestyle="--", linewidth=2,
                 label="true line")
    plt.xlim(x0, x1)
    plt.ylim(y0, y1)
    plt.title(f"OLS Playground (n={ds.n}, σ={session.noise_std:.2f})")
    plt.xlabel("x")
    plt.ylabel("y")
    plt.legend(loc="best", fontsize=8)
    out.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out)
    plt.close()
    print(f"[snapshot] Wrote {out}")
    return out


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render a playground snapshot PNG")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--n", type=int, default=None)
    p.add_argument("--noise", type=float, default=None)
    p.add_argument("--a", type=float, default=0.0, help="candidate intercept")
    p.add_argument("--b", type=float, default=0.0, help="candidate slope")
    p.add_argument("--out", default=str(ART / "playground.png"))
    return p.parse_args()


def main():
    args = parse_args()
    session = PlaygroundSession(load_config(), rng=NumpyRandomSource(args.seed), n=args.n, noise_std=args.noise)
    session.set_candidate(args.a, args.b)
    render(session, Path(args.out))


if __name__ == "__main__":
    main()
