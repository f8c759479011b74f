"""Shared fixtures for the path tracer tests."""

import random

import pytest

from pathtracer.camera.settings import CameraSettings
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color, Point3, Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.material import Material


class FixedRandom:
    """Stand-in random source that always returns the same draw."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value

    def uniform(self, a, b):
        return a + (b - a) * self.value


class Redirect(Material):
    """Deterministic material: always scatters straight up with a fixed attenuation."""

    def __init__(self, attenuation):
        self.attenuation = attenuation

    def scatter(self, ray_in, rec, rng=random):
        return self.attenuation, Ray(rec.p, Vector3(0.0, 1.0, 0.0), ray_in.time)


class Absorber(Material):
    """Material that absorbs every ray."""

    def scatter(self, ray_in, rec, rng=random):
        return None


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def gray():
    return Lambertian(Color(0.5, 0.5, 0.5))


@pytest.fixture
def unit_sphere(gray):
    return Sphere(Point3(0.0, 0.0, 0.0), 1.0, gray)


@pytest.fixture
def ground_hit():
    """A hit on the top of a flat surface at the origin, seen from above."""

    def make(front_face=True, normal=None):
        return HitRecord(p=Point3(0.0, 0.0, 0.0),
                         normal=normal or Vector3(0.0, 1.0, 0.0),
                         t=1.0, front_face=front_face, material=None)

    return make


@pytest.fixture
def random_spheres():
    """Thirty spheres of varying size and material scattered in a box."""
    gen = random.Random(99)
    materials = [Lambertian(Color(gen.random(), gen.random(), gen.random())) for _ in range(5)]
    spheres = []
    for _ in range(30):
        center = Point3(gen.uniform(-10, 10), gen.uniform(-10, 10), gen.uniform(-10, 10))
        spheres.append(Sphere(center, gen.uniform(0.2, 2.0), gen.choice(materials)))
    return spheres


@pytest.fixture
def small_settings():
    """A tiny, fast render configuration looking down -z."""
    return CameraSettings(
        num_threads=3,
        aspect_ratio=2.0,
        image_width=8,
        samples_per_pixel=4,
        max_depth=4,
        vfov=90.0,
        lookfrom=Point3(0.0, 0.0, 0.0),
        lookat=Point3(0.0, 0.0, -1.0),
        vup=Vector3(0.0, 1.0, 0.0),
        defocus_angle=0.0,
        focus_dist=1.0,
        seed=7,
    )


@pytest.fixture
def empty_world():
    return HittableList()
