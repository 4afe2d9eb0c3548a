"""
Settings loader: config/config.yaml (or $PLAYGROUND_CONFIG) merged over built-in defaults.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from playground.utils.errors import ConfigError

CONFIG_PATH = Path(os.environ.get("PLAYGROUND_CONFIG", "config/config.yaml"))

INIT_MODES = ("zero", "ols")
LANGS = ("ja", "en")

Range = tuple[float, float]


@dataclass(frozen=True)
class PlaygroundConfig:
    x_range: Range = (-5.0, 5.0)
    a0_range: Range = (-5.0, 5.0)
    b0_range: Range = (-4.0, 4.0)
    n_range: tuple[int, int] = (5, 200)
    n_ui_range: tuple[int, int] = (5, 50)
    noise_range: Range = (0.01, 4.0)
    default_n: int = 20
    default_noise: float = 1.2
    color_sensitivity: float = 0.5
    epsilon: float = 1e-9
    a_slider: Range = (-10.0, 10.0)
    b_slider: Range = (-5.0, 5.0)
    fixed_x_domain: Range = (-6.0, 6.0)
    fixed_y_domain: Range = (-30.0, 30.0)
    init_mode: str = "zero"
    default_lang: str = "ja"
    source: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        for f in fields(self):
            if f.name.endswith(("_range", "_slider", "_domain")):
                lo, hi = getattr(self, f.name)
                if lo > hi:
                    raise ConfigError(f"{f.name}: lower bound {lo} exceeds upper bound {hi}")
        if self.n_range[0] < 1:
            raise ConfigError(f"n_range must start at 1 or more (got {self.n_range[0]})")
        if self.noise_range[0] < 0:
            raise ConfigError(f"noise_range must be non-negative (got {self.noise_range[0]})")
        if not self.n_range[0] <= self.default_n <= self.n_range[1]:
            raise ConfigError(f"default_n={self.default_n} outside n_range {self.n_range}")
        if self.init_mode not in INIT_MODES:
            raise ConfigError(f"init_mode must be one of {INIT_MODES} (got {self.init_mode!r})")
        if self.default_lang not in LANGS:
            raise ConfigError(f"default_lang must be one of {LANGS} (got {self.default_lang!r})")
        if self.color_sensitivity <= 0 or self.epsilon <= 0:
            raise ConfigError("color sensitivity and epsilon must be positive")


# yaml section -> (yaml key, dataclass field)
_KEYS: dict[str, list[tuple[str, str]]] = {
    "sampling": [
        ("x_range", "x_range"),
        ("a0_range", "a0_range"),
        ("b0_range", "b0_range"),
        ("n_range", "n_range"),
        ("n_ui_range", "n_ui_range"),
        ("noise_range", "noise_range"),
        ("default_n", "default_n"),
        ("default_noise", "default_noise"),
    ],
    "color": [
        ("sensitivity", "color_sensitivity"),
        ("epsilon", "epsilon"),
    ],
    "ui": [
        ("a_slider", "a_slider"),
        ("b_slider", "b_slider"),
        ("fixed_x_domain", "fixed_x_domain"),
        ("fixed_y_domain", "fixed_y_domain"),
        ("init_mode", "init_mode"),
        ("default_lang", "default_lang"),
    ],
}


def _coerce(name: str, value: Any, default: Any) -> Any:
    if isinstance(default, tuple):
        if not isinstance(value, (list, tuple)) or len(value) != 2:
            raise ConfigError(f"{name} must be a [low, high] pair (got {value!r})")
        cast = int if isinstance(default[0], int) else float
        return (cast(value[0]), cast(value[1]))
    if isinstance(default, str):
        return str(value)
    if isinstance(default, int):
        return int(value)
    return float(value)


def load_cfg(path: Optional[Path] = None) -> dict:
    path = Path(path) if path is not None else CONFIG_PATH
    if not path.exists():
        print(f"[config] {path} not found; using defaults")
        return {}
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def from_mapping(raw: dict, source: Optional[str] = None) -> PlaygroundConfig:
    defaults = PlaygroundConfig()
    values: dict[str, Any] = {}
    for section, keys in _KEYS.items():
        block = raw.get(section) or {}
        if not isinstance(block, dict):
            raise ConfigError(f"section '{section}' must be a mapping")
        for key, attr in keys:
            if key not in block:
                continue
            try:
                values[attr] = _coerce(f"{section}.{key}", block[key], getattr(defaults, attr))
            except ConfigError:
                raise
            except (TypeError, ValueError) as e:
                raise ConfigError(f"{section}.{key}: {e}") from e
    return PlaygroundConfig(source=source, **values)


def load_config(path: Optional[Path] = None) -> PlaygroundConfig:
    path = Path(path) if path is not None else CONFIG_PATH
    return from_mapping(load_cfg(path), source=str(path) if path.exists() else None)
