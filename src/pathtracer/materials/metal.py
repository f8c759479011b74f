# materials/metal.py
import random
from typing import Optional, Tuple
from pathtracer.core.ray import Ray
from pathtracer.core.utils import reflect, random_unit_vector
from pathtracer.core.vector import Color
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material


class Metal(Material):
    """
    Metal material with reflective properties. fuzz blurs the reflection;
    values are meant to lie in [0, 1] but are not clamped.
    """
    def __init__(self, albedo: Color, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = fuzz

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> Optional[Tuple[Color, Ray]]:
        reflected = reflect(ray_in.direction, rec.normal).normalize()
        # The fuzzed direction is not renormalized.
        scattered = Ray(rec.p, reflected + random_unit_vector(rng) * self.fuzz, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return self.albedo, scattered

        return None  # Absorb the ray if it would go below the surface

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
