# core/kernels.py
"""
Numba-compiled numeric kernels for the intersection hot paths.

Both kernels are compiled with ``error_model="numpy"`` so division by a zero
direction component yields +/-inf (and 0 * inf yields nan) exactly as IEEE-754
prescribes, instead of raising ZeroDivisionError like plain Python floats.
The slab test relies on that: comparisons against nan are always false, and
an infinite reciprocal produces the right slab interval for rays parallel to
an axis. ``nogil=True`` lets worker threads run the kernels concurrently.
"""
import math
from numba import njit


@njit(cache=True, nogil=True, error_model="numpy")
def slab_hit(box_min, box_max, origin, direction, t_min, t_max):
    """
    Slab test of a ray against an axis-aligned box, restricted to the
    parameter range (t_min, t_max). All vector arguments are 3-tuples.
    """
    for axis in range(3):
        adinv = 1.0 / direction[axis]
        t0 = (box_min[axis] - origin[axis]) * adinv
        t1 = (box_max[axis] - origin[axis]) * adinv

        if t0 < t1:
            if t0 > t_min:
                t_min = t0
            if t1 < t_max:
                t_max = t1
        else:
            if t1 > t_min:
                t_min = t1
            if t0 < t_max:
                t_max = t0

        if t_max <= t_min:
            return False
    return True


@njit(cache=True, nogil=True, error_model="numpy")
def sphere_root(center, radius, origin, direction, t_min, t_max):
    """
    Nearest root of the ray-sphere quadratic lying strictly inside
    (t_min, t_max), or nan when there is none.
    """
    ocx = center[0] - origin[0]
    ocy = center[1] - origin[1]
    ocz = center[2] - origin[2]
    dx = direction[0]
    dy = direction[1]
    dz = direction[2]

    a = dx * dx + dy * dy + dz * dz
    h = dx * ocx + dy * ocy + dz * ocz
    c = ocx * ocx + ocy * ocy + ocz * ocz - radius * radius

    discriminant = h * h - a * c
    if discriminant < 0.0:
        return math.nan

    sqrtd = math.sqrt(discriminant)

    root = (h - sqrtd) / a
    if not (t_min < root and root < t_max):
        root = (h + sqrtd) / a
        if not (t_min < root and root < t_max):
            return math.nan
    return root
