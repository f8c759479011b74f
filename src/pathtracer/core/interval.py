# core/interval.py
import math


class Interval:
    """
    A closed range of real numbers [minimum, maximum].

    The default interval is empty (min=+inf, max=-inf), so the union of the
    empty interval with any other interval is that other interval.
    """
    __slots__ = ("min", "max")

    def __init__(self, minimum: float = math.inf, maximum: float = -math.inf):
        self.min = minimum
        self.max = maximum

    @staticmethod
    def surrounding(a: "Interval", b: "Interval") -> "Interval":
        """Return the interval tightly enclosing both inputs."""
        return Interval(a.min if a.min <= b.min else b.min,
                        a.max if a.max >= b.max else b.max)

    def union(self, other: "Interval") -> "Interval":
        return Interval.surrounding(self, other)

    def size(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        return self.min < x < self.max

    def expand(self, delta: float) -> "Interval":
        padding = delta / 2
        return Interval(self.min - padding, self.max + padding)

    def clamp(self, x: float) -> float:
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def __repr__(self) -> str:
        return f"Interval({self.min}, {self.max})"


Interval.EMPTY = Interval(math.inf, -math.inf)
Interval.UNIVERSE = Interval(-math.inf, math.inf)
