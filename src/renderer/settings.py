# renderer/settings.py
from dataclasses import dataclass, replace
from typing import Optional

from core.errors import ConfigurationError

# Recursion in ray_color is bounded by max_depth; keep the stack small.
MAX_DEPTH_LIMIT = 50

QUALITY_PRESETS = {
    "preview": {"samples_per_pixel": 4, "max_depth": 8},
    "balanced": {"samples_per_pixel": 50, "max_depth": 25},
    "final": {"samples_per_pixel": 500, "max_depth": 50},
}


@dataclass(frozen=True)
class RenderSettings:
    width: int = 400
    aspect_ratio: float = 16.0 / 9.0
    samples_per_pixel: int = 100
    max_depth: int = 50
    seed: Optional[int] = None
    workers: int = 1
    t_min: float = 0.001

    def __post_init__(self):
        if self.width < 2:
            raise ConfigurationError(f"Image width must be at least 2, got {self.width}")
        if self.aspect_ratio <= 0:
            raise ConfigurationError(f"Aspect ratio must be positive, got {self.aspect_ratio}")
        if self.height < 2:
            raise ConfigurationError(
                f"Image height {self.height} (width {self.width} / aspect {self.aspect_ratio}) must be at least 2")
        if self.samples_per_pixel < 1:
            raise ConfigurationError(f"samples_per_pixel must be at least 1, got {self.samples_per_pixel}")
        if not 1 <= self.max_depth <= MAX_DEPTH_LIMIT:
            raise ConfigurationError(f"max_depth must be in [1, {MAX_DEPTH_LIMIT}], got {self.max_depth}")
        if self.workers < 1:
            raise ConfigurationError(f"workers must be at least 1, got {self.workers}")
        if self.t_min <= 0:
            raise ConfigurationError(f"t_min must be positive, got {self.t_min}")

    @property
    def height(self) -> int:
        return int(self.width / self.aspect_ratio)

    def with_quality(self, preset: str) -> "RenderSettings":
        """Returns a copy with the sample count and depth of a named preset."""
        try:
            quality = QUALITY_PRESETS[preset]
        except KeyError:
            raise ConfigurationError(
                f"Unknown quality preset {preset!r}; choose from {sorted(QUALITY_PRESETS)}") from None
        return replace(self, **quality)
