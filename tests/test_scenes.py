"""Tests for the built-in scenes."""

import math
import random

from pathtracer.camera.camera import Camera
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.world import HittableList
from pathtracer.materials import Dielectric, Lambertian, Metal
from pathtracer.scenes import SCENES
from pathtracer.scenes.final import SMALL_RADIUS, scatter_small_spheres


class TestFinalScene:
    """Tests for the cover scene."""

    def test_settings(self):
        _, settings = SCENES["final"](random.Random(0))
        assert settings.image_width == 1200
        assert settings.image_height == 675
        assert settings.samples_per_pixel == 500
        assert settings.max_depth == 50
        assert settings.vfov == 20
        assert settings.defocus_angle == 0.6
        assert settings.focus_dist == 10.0
        assert settings.lookfrom.as_tuple() == (13.0, 2.0, 3.0)

    def test_world_is_wrapped_bvh(self):
        world, settings = SCENES["final"](random.Random(0))
        assert isinstance(world, HittableList)
        assert len(world) == 1
        assert isinstance(world.objects[0], BVHNode)

        ray = Ray(settings.lookfrom, settings.lookat - settings.lookfrom)
        assert world.hit(ray, Interval(0.001, math.inf)) is not None

    def test_same_seed_same_scene(self):
        a = HittableList()
        b = HittableList()
        scatter_small_spheres(a, random.Random(42))
        scatter_small_spheres(b, random.Random(42))
        assert [s.center.origin.as_tuple() for s in a] == [s.center.origin.as_tuple() for s in b]

    def test_small_spheres_clear_the_metal_sphere(self):
        world = HittableList()
        scatter_small_spheres(world, random.Random(1))
        assert 0 < len(world) <= 22 * 22
        for sphere in world:
            assert sphere.radius == SMALL_RADIUS
            dx = sphere.center.origin.x - 4.0
            dz = sphere.center.origin.z
            assert math.hypot(dx, dz) > 0.9

    def test_camera_builds(self):
        _, settings = SCENES["final"](random.Random(0))
        Camera(settings)


class TestMovingScene:
    """Tests for the motion blur variant."""

    def test_only_diffuse_spheres_move(self):
        world = HittableList()
        scatter_small_spheres(world, random.Random(3), motion=True)
        kinds = set()
        for sphere in world:
            kinds.add(type(sphere.material))
            if isinstance(sphere.material, Lambertian):
                assert sphere.is_moving
                assert sphere.center.direction.x == 0.0
                assert 0.0 <= sphere.center.direction.y < 0.5
            else:
                assert isinstance(sphere.material, (Metal, Dielectric))
                assert not sphere.is_moving
        assert Lambertian in kinds

    def test_settings(self):
        _, settings = SCENES["moving"](random.Random(0))
        assert settings.image_width == 400
        assert settings.samples_per_pixel == 100
