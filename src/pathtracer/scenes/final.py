# scenes/final.py
"""
The cover scene: a field of small random spheres around three large ones
(glass, diffuse and polished metal), viewed with a slight depth of field.
"""
import random
from typing import Tuple
from pathtracer.camera.settings import CameraSettings
from pathtracer.core.utils import random_range, random_vector
from pathtracer.core.vector import Point3, Vector3
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.presets import ColorPresets, DielectricPresets, MetalPresets

SMALL_RADIUS = 0.2


def scatter_small_spheres(world: HittableList, rng=random, motion: bool = False):
    """
    Add the grid of jittered small spheres. With motion, the diffuse ones
    bounce upwards over the shutter interval.
    """
    glass = DielectricPresets.glass()
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), SMALL_RADIUS, b + 0.9 * rng.random())

            if (center - Point3(4, SMALL_RADIUS, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # diffuse
                albedo = random_vector(rng=rng) * random_vector(rng=rng)
                center2 = center + Vector3(0, random_range(0, 0.5, rng), 0) if motion else None
                world.add(Sphere(center, SMALL_RADIUS, Lambertian(albedo), center2))
            elif choose_mat < 0.95:
                # metal
                albedo = random_vector(0.5, 1.0, rng)
                fuzz = random_range(0, 0.5, rng)
                world.add(Sphere(center, SMALL_RADIUS, Metal(albedo, fuzz)))
            else:
                # glass
                world.add(Sphere(center, SMALL_RADIUS, glass))


def add_large_spheres(world: HittableList):
    world.add(Sphere(Point3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, ColorPresets.matte(ColorPresets.BROWN)))
    world.add(Sphere(Point3(4, 1, 0), 1.0, MetalPresets.polished_bronze()))


def default_settings() -> CameraSettings:
    return CameraSettings(
        num_threads=16,
        aspect_ratio=16.0 / 9.0,
        image_width=1200,
        samples_per_pixel=500,
        max_depth=50,
        vfov=20,
        lookfrom=Point3(13, 2, 3),
        lookat=Point3(0, 0, 0),
        vup=Vector3(0, 1, 0),
        defocus_angle=0.6,
        focus_dist=10.0,
    )


def create_scene(rng=random) -> Tuple[Hittable, CameraSettings]:
    world = HittableList()
    world.add(Sphere(Point3(0, -1000, 0), 1000, ColorPresets.matte(ColorPresets.GROUND)))
    scatter_small_spheres(world, rng)
    add_large_spheres(world)
    return HittableList.single(BVHNode.from_hittable_list(world)), default_settings()
