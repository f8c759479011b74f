# core/aabb.py
from pathtracer.core.interval import Interval
from pathtracer.core.kernels import slab_hit
from pathtracer.core.vector import Vector3


class AABB:
    """
    Axis-aligned bounding box stored as one Interval per axis.
    """
    __slots__ = ("x", "y", "z", "_min", "_max")

    def __init__(self, x: Interval = Interval.EMPTY, y: Interval = Interval.EMPTY,
                 z: Interval = Interval.EMPTY):
        self.x = x
        self.y = y
        self.z = z
        self._min = (float(x.min), float(y.min), float(z.min))
        self._max = (float(x.max), float(y.max), float(z.max))

    @staticmethod
    def from_points(a: Vector3, b: Vector3) -> "AABB":
        """Treat the two points as extrema; they may be given in any order."""
        return AABB(
            Interval(a.x, b.x) if a.x <= b.x else Interval(b.x, a.x),
            Interval(a.y, b.y) if a.y <= b.y else Interval(b.y, a.y),
            Interval(a.z, b.z) if a.z <= b.z else Interval(b.z, a.z),
        )

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        return AABB(
            Interval.surrounding(box0.x, box1.x),
            Interval.surrounding(box0.y, box1.y),
            Interval.surrounding(box0.z, box1.z),
        )

    @property
    def minimum(self) -> Vector3:
        return Vector3(*self._min)

    @property
    def maximum(self) -> Vector3:
        return Vector3(*self._max)

    def axis_interval(self, n: int) -> Interval:
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        return self.x

    def hit(self, ray, ray_t: Interval) -> bool:
        # Slab method: clip ray_t against each axis' slab in turn.
        return slab_hit(self._min, self._max, ray.origin_tuple, ray.direction_tuple,
                        float(ray_t.min), float(ray_t.max))

    def longest_axis(self) -> int:
        """Index of the longest axis; ties go to z, then y."""
        if self.x.size() > self.y.size():
            return 0 if self.x.size() > self.z.size() else 2
        return 1 if self.y.size() > self.z.size() else 2

    def __repr__(self) -> str:
        return f"AABB({self.x!r}, {self.y!r}, {self.z!r})"


AABB.EMPTY = AABB(Interval.EMPTY, Interval.EMPTY, Interval.EMPTY)
