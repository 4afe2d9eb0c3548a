"""
Named error conditions raised by the numerical core.
All derive from ValueError so callers that already catch ValueError keep working.
"""
from __future__ import annotations


class PlaygroundError(ValueError):
    pass


class InvalidSampleCount(PlaygroundError):
    """Generator asked for fewer than one sample."""


class InvalidNoiseLevel(PlaygroundError):
    """Noise std is negative or not a finite number."""


class UndefinedEstimate(PlaygroundError):
    """Estimate requested on an empty dataset (n = 0)."""


class ConfigError(PlaygroundError):
    pass
