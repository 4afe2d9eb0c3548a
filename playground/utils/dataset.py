"""
Synthetic data: a hidden true line y = a0 + b0*x plus Gaussian noise.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, NamedTuple, Optional, Union

import numpy as np
import pandas as pd

from playground.utils.errors import InvalidNoiseLevel, InvalidSampleCount
from playground.utils.random_source import RandomSource, default_source


class Sample(NamedTuple):
    x: float
    y: float


class TrueLine(NamedTuple):
    a0: float
    b0: float


def _frozen(values) -> np.ndarray:
    arr = np.array(values, dtype=float).reshape(-1)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class Dataset:
    x: np.ndarray
    y: np.ndarray

    def __post_init__(self):
        x, y = _frozen(self.x), _frozen(self.y)
        if x.size != y.size:
            raise ValueError(f"x and y differ in length ({x.size} vs {y.size})")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    @classmethod
    def from_points(cls, points: Iterable[Iterable[float]]) -> "Dataset":
        pts = [tuple(p) for p in points]
        return cls(x=[p[0] for p in pts], y=[p[1] for p in pts])

    @property
    def n(self) -> int:
        return int(self.x.size)

    def __len__(self) -> int:
        return self.n

    def __iter__(self) -> Iterator[Sample]:
        for x, y in zip(self.x, self.y):
            yield Sample(float(x), float(y))

    @property
    def samples(self) -> list[Sample]:
        return list(self)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"x": self.x, "y": self.y})


Samples = Union[Dataset, Iterable[Iterable[float]]]


def as_dataset(samples: Samples) -> Dataset:
    return samples if isinstance(samples, Dataset) else Dataset.from_points(samples)


@dataclass(frozen=True)
class Generated:
    true_line: TrueLine
    dataset: Dataset

    @property
    def a0(self) -> float:
        return self.true_line.a0

    @property
    def b0(self) -> float:
        return self.true_line.b0

    @property
    def samples(self) -> list[Sample]:
        return self.dataset.samples


def draw_true_line(
    rng: RandomSource,
    a0_range: tuple[float, float] = (-5.0, 5.0),
    b0_range: tuple[float, float] = (-4.0, 4.0),
) -> TrueLine:
    a0 = rng.uniform(*a0_range)
    b0 = rng.uniform(*b0_range)
    return TrueLine(a0, b0)


def generate(
    n: int,
    noise_std: float,
    true_line: Optional[tuple[float, float]] = None,
    rng: Optional[RandomSource] = None,
    x_range: tuple[float, float] = (-5.0, 5.0),
    a0_range: tuple[float, float] = (-5.0, 5.0),
    b0_range: tuple[float, float] = (-4.0, 4.0),
) -> Generated:
    """
    Draw n samples around a true line.

    - true_line=None draws a fresh (a0, b0); a supplied line is reused as-is,
      including (0, 0).
    - x values are sorted ascending before y is drawn. Order is cosmetic.
    - noise_std=0 puts every sample exactly on the line.
    """
    if n < 1:
        raise InvalidSampleCount(f"Need at least 1 sample (got n={n})")
    if not math.isfinite(noise_std) or noise_std < 0:
        raise InvalidNoiseLevel(f"noise_std must be finite and >= 0 (got {noise_std})")
    rng = rng if rng is not None else default_source()

    if true_line is not None:
        line = TrueLine(float(true_line[0]), float(true_line[1]))
    else:
        line = draw_true_line(rng, a0_range, b0_range)
    xs = sorted(rng.uniform(*x_range) for _ in range(int(n)))
    ys = [line.a0 + line.b0 * x + noise_std * rng.standard_normal() for x in xs]
    return Generated(true_line=line, dataset=Dataset(x=xs, y=ys))
