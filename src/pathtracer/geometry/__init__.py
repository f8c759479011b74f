from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.geometry.bvh import BVHNode

__all__ = ["Hittable", "HitRecord", "Sphere", "HittableList", "BVHNode"]
