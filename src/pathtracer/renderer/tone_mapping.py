# renderer/tone_mapping.py
import math
from typing import Tuple
from pathtracer.core.interval import Interval
from pathtracer.core.vector import Color

# Upper bound below 1.0 so 256 * value never reaches 256.
INTENSITY = Interval(0.000, 0.999)


def linear_to_gamma(linear_component: float) -> float:
    """Gamma 2 transform; non-positive components map to 0."""
    if linear_component > 0:
        return math.sqrt(linear_component)
    return 0.0


def to_byte(linear_component: float) -> int:
    """Translate a linear [0,1] component value to the byte range [0,255]."""
    return int(256 * INTENSITY.clamp(linear_to_gamma(linear_component)))


def write_color(pixel_color: Color) -> Tuple[int, int, int]:
    """
    Gamma-correct and quantize an averaged linear color.
    """
    return (to_byte(pixel_color.x), to_byte(pixel_color.y), to_byte(pixel_color.z))

