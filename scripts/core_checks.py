#!/usr/bin/env python3
"""
Fast-fail numerical contracts for the playground core.

Usage:
  python scripts/core_checks.py --trials 200 --seed 7
  python scripts/core_checks.py --config config/config.yaml
"""
from __future__ import annotations

import argparse
import math
import os
import sys
from pathlib import Path
from typing import Callable

from playground.utils.config import PlaygroundConfig, load_config
from playground.utils.dataset import Dataset, generate
from playground.utils.errors import PlaygroundError, UndefinedEstimate
from playground.utils.metrics import color_for, mse, sse
from playground.utils.ols import fit
from playground.utils.random_source import NumpyRandomSource, RandomSource, SequenceRandomSource

TOL = 1e-9
PERTURBATIONS = [(1e-3, 0.0), (0.0, 1e-3), (-1e-3, 1e-3), (0.5, -0.25), (-2.0, 3.0)]


def _assert(cond: bool, msg: str, failures: list[str]) -> None:
    if not cond:
        failures.append(msg)


def _assert_raises(fn: Callable[[], object], exc: type, msg: str, failures: list[str]) -> None:
    try:
        fn()
    except exc:
        return
    failures.append(msg)


def check_optimality(rng: RandomSource, cfg: PlaygroundConfig, trials: int) -> list[str]:
    """OLS minimum beats nearby and far-away candidate lines on random datasets."""
    failures: list[str] = []
    lo, hi = cfg.n_range
    for i in range(trials):
        n = lo + int(rng.random() * (min(hi, 60) - lo + 1))
        noise = rng.uniform(*cfg.noise_range)
        gen = generate(n, noise, rng=rng, x_range=cfg.x_range, a0_range=cfg.a0_range, b0_range=cfg.b0_range)
        res = fit(gen.dataset)
        _assert(
            math.isclose(res.sse_min, sse(gen.dataset, res.a_hat, res.b_hat), rel_tol=TOL, abs_tol=TOL),
            f"trial {i}: sse_min disagrees with sse(a_hat, b_hat)",
            failures,
        )
        for da, db in PERTURBATIONS:
            other = sse(gen.dataset, res.a_hat + da, res.b_hat + db)
            _assert(other > res.sse_min, f"trial {i}: perturbation ({da}, {db}) did not increase SSE", failures)
        _assert(
            math.isclose(mse(gen.dataset, 1.0, 1.0), sse(gen.dataset, 1.0, 1.0) / n, rel_tol=TOL),
            f"trial {i}: mse != sse / n",
            failures,
        )
    return failures


def check_policies() -> list[str]:
    """Degenerate design, tiny inputs, noise-free generation and color bounds."""
    failures: list[str] = []

    res = fit([(1, 5), (1, 7), (1, 9)])
    _assert((res.a_hat, res.b_hat, res.sse_min) == (7.0, 0.0, 8.0),
            f"degenerate design: expected (7, 0, 8), got ({res.a_hat}, {res.b_hat}, {res.sse_min})", failures)

    res = fit([(0, 0), (2, 4)])
    _assert(abs(res.a_hat) < TOL and abs(res.b_hat - 2) < TOL and res.sse_min < TOL,
            "two-point fit should be exact (a=0, b=2)", failures)

    res = fit([(3.0, -2.5)])
    _assert((res.a_hat, res.b_hat, res.sse_min) == (-2.5, 0.0, 0.0), "single point should fit horizontally", failures)

    _assert_raises(lambda: fit(Dataset.from_points([])), UndefinedEstimate, "fit([]) must raise UndefinedEstimate", failures)
    _assert_raises(lambda: mse([], 0.0, 0.0), UndefinedEstimate, "mse([]) must raise UndefinedEstimate", failures)

    gen = generate(10, 0.0, true_line=(2.0, 3.0))
    _assert(all(y == 2.0 + 3.0 * x for x, y in gen.dataset), "noise=0 samples must lie on the true line", failures)

    _assert(color_for(4.2, 4.2) == 120.0, "color_for(sse_min, sse_min) must be pure green", failures)
    for s in (4.2, 10.0, 1e3, 1e9, math.inf):
        hue = color_for(s, 4.2)
        _assert(0.0 <= hue <= 120.0, f"hue out of [0, 120] for sse={s}: {hue}", failures)
    _assert(color_for(1e12, 1.0) > 0.0, "red must not be reached at a finite ratio", failures)

    draws = [0.13, 0.71, 0.42, 0.99, 0.05, 0.64, 0.37, 0.88, 0.21, 0.56, 0.77, 0.31]
    g1 = generate(3, 1.0, true_line=(0.0, 0.0), rng=SequenceRandomSource(draws))
    g2 = generate(3, 1.0, true_line=(0.0, 0.0), rng=SequenceRandomSource(draws))
    _assert(g1.samples == g2.samples, "fixed-sequence source must reproduce the same samples", failures)
    return failures


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Numerical contract checks for the OLS core")
    p.add_argument("--trials", type=int, default=100)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--config", default=os.environ.get("PLAYGROUND_CONFIG", "config/config.yaml"))
    return p.parse_args()


def main():
    args = parse_args()
    cfg = load_config(Path(args.config))
    rng = NumpyRandomSource(args.seed)

    print(f"[checks] CONFIG={cfg.source or 'defaults'} TRIALS={args.trials} SEED={args.seed}")

    failures = check_policies() + check_optimality(rng, cfg, args.trials)

    if failures:
        print("\n[CHECKS FAIL] One or more numerical contracts were violated:")
        for i, f in enumerate(failures, 1):
            print(f" {i:02d}. {f}")
        sys.exit(2)

    print("[checks] All checks passed ✔")


if __name__ == "__main__":
    try:
        main()
    except PlaygroundError as e:
        print(f"[FATAL][core] {type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"[FATAL] {type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(1)
