"""
Uniform and standard-normal deviates behind one injectable interface.

Every draw is built on a single primitive, `random()`, returning a float in [0, 1).
Swap the primitive to get determinism in tests (SequenceRandomSource).
"""
from __future__ import annotations

import math
from typing import Iterable, Iterator, Optional

import numpy as np


class RandomSource:
    def random(self) -> float:
        raise NotImplementedError

    def uniform(self, lo: float, hi: float) -> float:
        """Uniform draw in [lo, hi)."""
        return lo + self.random() * (hi - lo)

    def _nonzero_unit(self) -> float:
        # log(0) is undefined, so redraw until the value is in (0, 1)
        u = 0.0
        while u == 0.0:
            u = self.random()
        return u

    def standard_normal(self) -> float:
        """N(0, 1) draw via Box-Muller (cosine branch)."""
        u = self._nonzero_unit()
        v = self._nonzero_unit()
        return math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)


class NumpyRandomSource(RandomSource):
    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    def random(self) -> float:
        return float(self._rng.random())


class SequenceRandomSource(RandomSource):
    """Replays a fixed list of unit draws. Raises once the list runs out."""

    def __init__(self, values: Iterable[float]):
        self._values = [float(v) for v in values]
        for v in self._values:
            if not 0.0 <= v < 1.0:
                raise ValueError(f"unit draws must lie in [0, 1) (got {v})")
        self._it: Iterator[float] = iter(self._values)
        self.consumed = 0

    def random(self) -> float:
        try:
            v = next(self._it)
        except StopIteration:
            raise RuntimeError(f"SequenceRandomSource exhausted after {self.consumed} draws") from None
        self.consumed += 1
        return v


def default_source() -> RandomSource:
    return NumpyRandomSource()
