# geometry/bvh.py
import logging
from typing import List, Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)


class BVHNode(Hittable):
    """
    Bounding volume hierarchy node. Children are either leaf primitives or
    further BVHNodes; leaves reference the original objects, nothing is
    copied or split. The tree is immutable once built, so any number of
    threads may traverse it concurrently.
    """
    def __init__(self, objects: List[Hittable], start: int, end: int):
        if end <= start:
            raise ValueError("Cannot build a BVH node from an empty span of objects")

        # Build the bounding box of the span of source objects.
        self.box = AABB.EMPTY
        for i in range(start, end):
            self.box = AABB.surrounding_box(self.box, objects[i].bounding_box())

        axis = self.box.longest_axis()
        object_span = end - start

        if object_span == 1:
            # Duplicate the leaf so traversal never has to special-case it.
            self.left = self.right = objects[start]
        elif object_span == 2:
            self.left = objects[start]
            self.right = objects[start + 1]
        else:
            objects[start:end] = sorted(
                objects[start:end],
                key=lambda obj: obj.bounding_box().axis_interval(axis).min)

            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid)
            self.right = BVHNode(objects, mid, end)

    @staticmethod
    def from_hittable_list(world) -> "BVHNode":
        """Build a tree over the objects of a HittableList, leaving the list untouched."""
        objects = list(world.objects)
        root = BVHNode(objects, 0, len(objects))
        logger.debug("Built BVH over %d objects, depth %d", len(objects), root.depth())
        return root

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        if not self.box.hit(ray, ray_t):
            return None

        hit_left = self.left.hit(ray, ray_t)

        # Anything on the right must be closer than the left hit to matter.
        t_max = hit_left.t if hit_left is not None else ray_t.max
        hit_right = self.right.hit(ray, Interval(ray_t.min, t_max))

        return hit_right if hit_right is not None else hit_left

    def bounding_box(self) -> AABB:
        return self.box

    def depth(self) -> int:
        """Number of node levels below and including this one."""
        left = self.left.depth() if isinstance(self.left, BVHNode) else 0
        right = self.right.depth() if isinstance(self.right, BVHNode) else 0
        return 1 + max(left, right)
