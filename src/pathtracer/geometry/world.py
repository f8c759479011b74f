# geometry/world.py
from typing import Optional, List
from pathtracer.core.aabb import AABB
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord


class HittableList(Hittable):
    """
    An ordered list of Hittable objects together with the box enclosing them.
    Hits are resolved by exhaustive search; wrap the list in a BVHNode for
    large scenes.
    """
    def __init__(self, objects=None):
        self.objects: List[Hittable] = []
        self.bbox = AABB.EMPTY
        for obj in objects or ():
            self.add(obj)

    @staticmethod
    def single(obj: Hittable) -> "HittableList":
        return HittableList([obj])

    def add(self, obj: Hittable):
        self.bbox = AABB.surrounding_box(self.bbox, obj.bounding_box())
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()
        self.bbox = AABB.EMPTY

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        return self.bbox

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)
