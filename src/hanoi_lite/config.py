"""Animation settings, optionally read from a YAML file."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ResourceError, UsageError
from .render import RENDER_MODES, SPACE_BETWEEN_POLES


@dataclass
class AnimationConfig:
    """How frames are drawn."""
    mode: str = "append"          # "append" or "inplace"
    delay: float = 1.0            # Seconds between in-place frames
    colormap: Optional[str] = None  # Path to an r,g,b colormap file
    spacing: int = SPACE_BETWEEN_POLES
    color: bool = False           # Forced on when a colormap is given

    def __post_init__(self) -> None:
        if not isinstance(self.mode, str) or self.mode not in RENDER_MODES:
            raise UsageError(f"mode must be one of {', '.join(RENDER_MODES)} (got '{self.mode}')")
        if isinstance(self.delay, bool) or not isinstance(self.delay, (int, float)):
            raise UsageError(f"delay must be a number of seconds (got {self.delay!r})")
        if not math.isfinite(self.delay) or self.delay < 0:
            raise UsageError(f"delay must be a finite non-negative number (got {self.delay})")
        if isinstance(self.spacing, bool) or not isinstance(self.spacing, int) or self.spacing < 1:
            raise UsageError(f"spacing must be an integer of at least 1 (got {self.spacing!r})")
        if self.colormap is not None and not isinstance(self.colormap, str):
            raise UsageError(f"colormap must be a file path (got {self.colormap!r})")
        if not isinstance(self.color, bool):
            raise UsageError(f"color must be true or false (got {self.color!r})")

    @property
    def use_color(self) -> bool:
        return self.color or self.colormap is not None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "AnimationConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(str(k) for k in set(d) - known)
        if unknown:
            raise ResourceError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**d)

    def merged(self, **overrides: Any) -> "AnimationConfig":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def load_config(path: str | Path) -> AnimationConfig:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            payload = yaml.safe_load(f)
    except FileNotFoundError as exc:
        raise ResourceError(f"Config not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise ResourceError(f"Invalid YAML in config: {path}") from exc

    if payload is None:
        return AnimationConfig()
    if not isinstance(payload, dict):
        raise ResourceError(f"Config {path} must be a mapping.")
    return AnimationConfig.from_dict(payload)
