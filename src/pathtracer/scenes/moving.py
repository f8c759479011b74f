# scenes/moving.py
"""
The cover scene with the small diffuse spheres in motion, showing motion
blur. Rendered smaller and with fewer samples by default.
"""
import random
from typing import Tuple
from pathtracer.camera.settings import CameraSettings
from pathtracer.core.vector import Point3
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.presets import ColorPresets
from pathtracer.scenes.final import add_large_spheres, default_settings, scatter_small_spheres


def create_scene(rng=random) -> Tuple[Hittable, CameraSettings]:
    world = HittableList()
    world.add(Sphere(Point3(0, -1000, 0), 1000, ColorPresets.matte(ColorPresets.GROUND)))
    scatter_small_spheres(world, rng, motion=True)
    add_large_spheres(world)

    settings = default_settings().replace(image_width=400, samples_per_pixel=100)
    return HittableList.single(BVHNode.from_hittable_list(world)), settings
