# core/utils.py
import math
import random
from pathtracer.core.vector import Vector3


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def random_double(rng=random) -> float:
    """
    Returns a random real in [0, 1).
    """
    return rng.random()


def random_range(lo: float, hi: float, rng=random) -> float:
    """
    Returns a random real in [lo, hi).
    """
    return lo + (hi - lo) * rng.random()


def random_vector(lo: float = 0.0, hi: float = 1.0, rng=random) -> Vector3:
    return Vector3(random_range(lo, hi, rng),
                   random_range(lo, hi, rng),
                   random_range(lo, hi, rng))


def random_unit_vector(rng=random) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_vector(-1.0, 1.0, rng)
        lensq = p.length_squared()
        # Tiny vectors would underflow to an infinite normalization factor.
        if 1e-160 < lensq <= 1.0:
            return p / math.sqrt(lensq)


def random_in_unit_disk(rng=random) -> Vector3:
    """Random point in the unit disk (z = 0), used for defocus blur."""
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0.0)
        if p.length_squared() < 1.0:
            return p


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    # uv is expected to be a unit vector.
    cos_theta = min((-uv).dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel
