"""
Per-user playground state: (true line, dataset, candidate line) plus the
actions the UI can trigger. Every action recomputes downstream values
explicitly; nothing is derived lazily.

Two ways to get new data:
- resample(): new x positions and noise, SAME true line
- reset():    forget the true line, draw a new one, then resample
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional

from playground.utils.config import INIT_MODES, PlaygroundConfig
from playground.utils.dataset import Dataset, TrueLine, generate
from playground.utils.errors import ConfigError
from playground.utils.metrics import color_for, excess_ratio, hsl, mse, sse
from playground.utils.ols import OLSResult, fit
from playground.utils.random_source import RandomSource, default_source


class CandidateLine(NamedTuple):
    a: float
    b: float


@dataclass(frozen=True)
class Snapshot:
    sse: float
    sse_min: float
    mse: float
    mse_min: float
    ratio: float
    hue: float
    color: str


class PlaygroundSession:
    def __init__(
        self,
        config: Optional[PlaygroundConfig] = None,
        rng: Optional[RandomSource] = None,
        n: Optional[int] = None,
        noise_std: Optional[float] = None,
    ):
        self.config = config or PlaygroundConfig()
        self.rng = rng if rng is not None else default_source()
        self.n = int(n if n is not None else self.config.default_n)
        self.noise_std = float(noise_std if noise_std is not None else self.config.default_noise)
        self.init_mode = self.config.init_mode
        self.true_line: Optional[TrueLine] = None
        self.dataset: Optional[Dataset] = None
        self.ols: Optional[OLSResult] = None
        self.candidate = CandidateLine(0.0, 0.0)
        self.resample()

    # ---- data lifecycle ----
    def resample(self, n: Optional[int] = None, noise_std: Optional[float] = None) -> None:
        self._regenerate(
            int(n) if n is not None else self.n,
            float(noise_std) if noise_std is not None else self.noise_std,
            self.true_line,
        )

    def reset(self) -> None:
        self._regenerate(self.n, self.noise_std, None)

    def _regenerate(self, n: int, noise_std: float, true_line: Optional[TrueLine]) -> None:
        # state is only touched once generation and fit have both succeeded
        cfg = self.config
        gen = generate(
            n, noise_std, true_line=true_line, rng=self.rng,
            x_range=cfg.x_range, a0_range=cfg.a0_range, b0_range=cfg.b0_range,
        )
        ols = fit(gen.dataset)
        self.n, self.noise_std = n, noise_std
        self.true_line = gen.true_line
        self.dataset = gen.dataset
        self.ols = ols
        self._init_candidate()

    # ---- candidate line ----
    def set_init_mode(self, mode: str) -> None:
        if mode not in INIT_MODES:
            raise ConfigError(f"init_mode must be one of {INIT_MODES} (got {mode!r})")
        self.init_mode = mode
        self._init_candidate()

    def _init_candidate(self) -> None:
        if self.init_mode == "ols":
            self.snap_to_ols()
        else:
            self.zero_candidate()

    def snap_to_ols(self) -> None:
        self.candidate = CandidateLine(self.ols.a_hat, self.ols.b_hat)

    def zero_candidate(self) -> None:
        self.candidate = CandidateLine(0.0, 0.0)

    def set_candidate(self, a: float, b: float) -> None:
        self.candidate = CandidateLine(float(a), float(b))

    # ---- metrics ----
    def snapshot(self) -> Snapshot:
        cfg = self.config
        a, b = self.candidate
        cur = sse(self.dataset, a, b)
        sse_min = self.ols.sse_min
        hue = color_for(cur, sse_min, k=cfg.color_sensitivity, epsilon=cfg.epsilon)
        return Snapshot(
            sse=cur,
            sse_min=sse_min,
            mse=mse(self.dataset, a, b),
            mse_min=sse_min / self.dataset.n,
            ratio=excess_ratio(cur, sse_min, cfg.epsilon),
            hue=hue,
            color=hsl(hue),
        )
