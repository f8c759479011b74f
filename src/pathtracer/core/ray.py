# core/ray.py
from pathtracer.core.vector import Vector3


class Ray:
    """
    Represents a ray in 3D space with an origin, a direction and the time
    (in [0, 1)) at which it samples the scene.
    """
    __slots__ = ("origin", "direction", "time", "origin_tuple", "direction_tuple")

    def __init__(self, origin: Vector3, direction: Vector3, time: float = 0.0):
        self.origin = origin
        self.direction = direction
        self.time = time
        # Float tuples consumed by the compiled intersection kernels.
        self.origin_tuple = origin.as_tuple()
        self.direction_tuple = direction.as_tuple()

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r}, time={self.time})"
