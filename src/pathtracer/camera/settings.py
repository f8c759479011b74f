# camera/settings.py
import dataclasses
import math
from dataclasses import dataclass, field
from typing import Optional
from pathtracer.core.vector import Point3, Vector3
from pathtracer.errors import ConfigurationError

# Named quality levels; each entry overrides part of a CameraSettings.
QUALITY_LEVELS = {
    "interactive": {
        "image_width": 320,
        "samples_per_pixel": 10,
        "max_depth": 8,
    },
    "balanced": {
        "image_width": 640,
        "samples_per_pixel": 50,
        "max_depth": 20,
    },
    "high_quality": {
        "image_width": 1200,
        "samples_per_pixel": 500,
        "max_depth": 50,
    },
}


@dataclass
class CameraSettings:
    """
    Declarative description of a render. Camera derives everything else
    from it and rejects malformed values before any work starts.
    """
    num_threads: int = 4
    aspect_ratio: float = 16.0 / 9.0
    image_width: int = 400
    samples_per_pixel: int = 100
    max_depth: int = 50
    vfov: float = 90.0
    lookfrom: Point3 = field(default_factory=lambda: Point3(0.0, 0.0, 0.0))
    lookat: Point3 = field(default_factory=lambda: Point3(0.0, 0.0, -1.0))
    vup: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, 0.0))
    defocus_angle: float = 0.0
    focus_dist: float = 10.0
    seed: Optional[int] = None

    @property
    def image_height(self) -> int:
        return int(self.image_width / self.aspect_ratio)

    def replace(self, **changes) -> "CameraSettings":
        return dataclasses.replace(self, **changes)

    def with_quality(self, name: str) -> "CameraSettings":
        try:
            overrides = QUALITY_LEVELS[name]
        except KeyError:
            raise ConfigurationError(
                f"Unknown quality level {name!r}; expected one of {sorted(QUALITY_LEVELS)}"
            ) from None
        return self.replace(**overrides)

    def validate(self):
        """Raise ConfigurationError describing the first invalid setting."""
        if self.num_threads < 1:
            raise ConfigurationError(f"num_threads must be at least 1, got {self.num_threads}")
        if not math.isfinite(self.aspect_ratio) or self.aspect_ratio <= 0:
            raise ConfigurationError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.image_width < 1:
            raise ConfigurationError(f"image_width must be at least 1, got {self.image_width}")
        if self.image_height < 1:
            raise ConfigurationError(
                f"image_width {self.image_width} with aspect_ratio {self.aspect_ratio} "
                f"gives an empty image")
        if self.samples_per_pixel < 1:
            raise ConfigurationError(
                f"samples_per_pixel must be at least 1, got {self.samples_per_pixel}")
        if self.max_depth < 1:
            raise ConfigurationError(f"max_depth must be at least 1, got {self.max_depth}")
        if not 0.0 < self.vfov < 180.0:
            raise ConfigurationError(f"vfov must lie in (0, 180) degrees, got {self.vfov}")
        if self.defocus_angle < 0:
            raise ConfigurationError(f"defocus_angle must not be negative, got {self.defocus_angle}")
        if self.focus_dist <= 0:
            raise ConfigurationError(f"focus_dist must be positive, got {self.focus_dist}")

        view = self.lookfrom - self.lookat
        if view.near_zero():
            raise ConfigurationError("lookfrom and lookat must be distinct points")
        if self.vup.cross(view).near_zero():
            raise ConfigurationError("vup must not be parallel to the viewing direction")
