# geometry/sphere.py
import math
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.interval import Interval
from pathtracer.core.kernels import sphere_root
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3, Point3
from pathtracer.geometry.hittable import Hittable, HitRecord


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    Passing center2 makes a moving sphere: its center travels linearly from
    center (time 0) to center2 (time 1), and each ray sees it at ray.time.
    """
    def __init__(self, center: Point3, radius: float, material, center2: Point3 = None):
        if center2 is None:
            center2 = center
        self.center = Ray(center, center2 - center)
        self.radius = max(0.0, float(radius))
        self.material = material

        rvec = Vector3(self.radius, self.radius, self.radius)
        box0 = AABB.from_points(self.center.at(0.0) - rvec, self.center.at(0.0) + rvec)
        box1 = AABB.from_points(self.center.at(1.0) - rvec, self.center.at(1.0) + rvec)
        self.bbox = AABB.surrounding_box(box0, box1)

    @property
    def is_moving(self) -> bool:
        return not self.center.direction.near_zero()

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        if self.radius == 0.0:
            return None
        current_center = self.center.at(ray.time) if self.is_moving else self.center.origin
        root = sphere_root(current_center.as_tuple(), self.radius,
                           ray.origin_tuple, ray.direction_tuple,
                           float(ray_t.min), float(ray_t.max))
        if math.isnan(root):
            return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(root)
        outward_normal = (rec.p - current_center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        return self.bbox

    def __repr__(self) -> str:
        return f"Sphere({self.center.origin!r}, {self.radius})"
