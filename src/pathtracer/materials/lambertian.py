# materials/lambertian.py
import random
from typing import Tuple
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_unit_vector
from pathtracer.core.vector import Color
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material


class Lambertian(Material):
    """
    Lambertian diffuse material.
    """
    def __init__(self, albedo: Color):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> Tuple[Color, Ray]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Returns (attenuation, scattered_ray); diffuse surfaces never absorb.
        """
        # Adding a random unit vector to the normal gives a cosine-weighted direction.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        return self.albedo, Ray(rec.p, scatter_direction, ray_in.time)

    def __repr__(self) -> str:
        return f"Lambertian({self.albedo!r})"
