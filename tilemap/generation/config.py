from __future__ import annotations

import os
from dataclasses import dataclass
from numbers import Real
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from ..errors import MapConfigError


@dataclass
class MapConfig:
    width: int = 16
    height: int = 16
    wrap: bool = True
    # Chance that any single edge between two adjacent cells is closed.
    wall_probability: float = 0.5
    seed: Optional[int] = None
    enable_metrics: bool = True
    # Run invariant verification after every generation.
    strict: bool = False

    def validate(self) -> "MapConfig":
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise MapConfigError(f"{name} must be an int, got {value!r}")
            if value < 1:
                raise MapConfigError(f"{name} must be >= 1, got {value}")
        p = self.wall_probability
        if isinstance(p, bool) or not isinstance(p, Real):
            raise MapConfigError(f"wall_probability must be a number, got {p!r}")
        if not 0.0 <= p <= 1.0:
            raise MapConfigError(f"wall_probability must lie in [0, 1], got {p}")
        return self

    @classmethod
    def from_env(cls, **overrides) -> "MapConfig":
        """Build a config from ``TILEMAP_*`` environment variables.

        The nearest ``.env`` file from the working directory up is loaded first (existing
        environment variables take precedence). Keyword overrides win over
        both.
        """
        load_dotenv(find_dotenv(usecwd=True))
        cfg = cls()
        env_map = {
            "TILEMAP_WIDTH": ("width", int),
            "TILEMAP_HEIGHT": ("height", int),
            "TILEMAP_WRAP": ("wrap", _parse_bool),
            "TILEMAP_WALL_PROBABILITY": ("wall_probability", float),
            "TILEMAP_SEED": ("seed", int),
            "TILEMAP_ENABLE_GENERATION_METRICS": ("enable_metrics", _parse_bool),
            "TILEMAP_STRICT": ("strict", _parse_bool),
        }
        for env_key, (attr, parse) in env_map.items():
            if env_key not in os.environ:
                continue
            raw = os.environ.get(env_key, "")
            try:
                setattr(cfg, attr, parse(raw))
            except ValueError as exc:
                raise MapConfigError(f"{env_key}={raw!r} is not valid for {attr}") from exc
        for attr, value in overrides.items():
            if not hasattr(cfg, attr):
                raise MapConfigError(f"unknown config field {attr!r}")
            setattr(cfg, attr, value)
        return cfg


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() not in {"0", "false", "no", ""}


__all__ = ["MapConfig"]
