"""Unit tests for Vector3, Interval and the sampling helpers.

Tests cover:
- Vector arithmetic, indexing and degenerate normalization
- Interval containment, union, expansion and clamping
- reflect/refract and the random direction generators
"""

import math
import random

import pytest

from pathtracer.core.interval import Interval
from pathtracer.core.utils import (
    degrees_to_radians,
    random_in_unit_disk,
    random_unit_vector,
    reflect,
    refract,
)
from pathtracer.core.vector import Vector3


def assert_vec(v, x, y, z, tol=1e-9):
    assert v.x == pytest.approx(x, abs=tol)
    assert v.y == pytest.approx(y, abs=tol)
    assert v.z == pytest.approx(z, abs=tol)


class TestVector3:
    """Tests for vector arithmetic."""

    def test_arithmetic(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(4.0, 5.0, 6.0)
        assert_vec(a + b, 5, 7, 9)
        assert_vec(b - a, 3, 3, 3)
        assert_vec(a * b, 4, 10, 18)
        assert_vec(a * 2, 2, 4, 6)
        assert_vec(2 * a, 2, 4, 6)
        assert_vec(b / 2, 2, 2.5, 3)
        assert_vec(-a, -1, -2, -3)

    def test_dot_and_cross(self):
        x = Vector3(1.0, 0.0, 0.0)
        y = Vector3(0.0, 1.0, 0.0)
        assert x.dot(y) == 0.0
        assert_vec(x.cross(y), 0, 0, 1)
        assert_vec(y.cross(x), 0, 0, -1)

    def test_indexing(self):
        v = Vector3(7.0, 8.0, 9.0)
        assert (v[0], v[1], v[2]) == (7.0, 8.0, 9.0)
        assert list(v) == [7.0, 8.0, 9.0]
        with pytest.raises(IndexError):
            v[3]

    def test_length_and_normalize(self):
        v = Vector3(3.0, 4.0, 0.0)
        assert v.length_squared() == 25.0
        assert v.length() == 5.0
        assert_vec(v.normalize(), 0.6, 0.8, 0.0)
        assert v.unit_vector().length() == pytest.approx(1.0)

    def test_normalize_zero_vector_is_zero(self):
        """Degenerate input returns the zero vector instead of NaNs."""
        n = Vector3(0.0, 0.0, 0.0).normalize()
        assert_vec(n, 0, 0, 0)

    def test_near_zero(self):
        assert Vector3(1e-9, -1e-9, 0.0).near_zero()
        assert not Vector3(1e-9, 1e-7, 0.0).near_zero()

    def test_as_tuple_is_float(self):
        assert Vector3(1, 2, 3).as_tuple() == (1.0, 2.0, 3.0)
        assert all(isinstance(c, float) for c in Vector3(1, 2, 3).as_tuple())


class TestInterval:
    """Tests for scalar intervals."""

    def test_empty_default(self):
        empty = Interval()
        assert empty.min == math.inf
        assert empty.max == -math.inf
        assert not empty.contains(0.0)
        assert Interval.EMPTY.size() < 0

    def test_contains_vs_surrounds(self):
        i = Interval(0.0, 1.0)
        assert i.contains(0.0) and i.contains(1.0)
        assert not i.surrounds(0.0) and not i.surrounds(1.0)
        assert i.surrounds(0.5)

    def test_union(self):
        u = Interval.surrounding(Interval(0.0, 1.0), Interval(2.0, 3.0))
        assert (u.min, u.max) == (0.0, 3.0)
        e = Interval.EMPTY.union(Interval(-1.0, 1.0))
        assert (e.min, e.max) == (-1.0, 1.0)

    def test_expand(self):
        e = Interval(1.0, 2.0).expand(1.0)
        assert (e.min, e.max) == (0.5, 2.5)

    def test_clamp(self):
        i = Interval(0.0, 0.999)
        assert i.clamp(-1.0) == 0.0
        assert i.clamp(2.0) == 0.999
        assert i.clamp(0.5) == 0.5

    def test_universe(self):
        assert Interval.UNIVERSE.surrounds(1e300)


class TestUtils:
    """Tests for reflection, refraction and random sampling helpers."""

    def test_degrees_to_radians(self):
        assert degrees_to_radians(180.0) == pytest.approx(math.pi)

    def test_reflect(self):
        r = reflect(Vector3(1.0, -1.0, 0.0), Vector3(0.0, 1.0, 0.0))
        assert_vec(r, 1, 1, 0)

    def test_refract_normal_incidence_passes_straight(self):
        r = refract(Vector3(0.0, -1.0, 0.0), Vector3(0.0, 1.0, 0.0), 1.0 / 1.5)
        assert_vec(r, 0, -1, 0)

    def test_refract_obeys_snell(self):
        eta = 1.0 / 1.5
        incoming = Vector3(math.sin(0.5), -math.cos(0.5), 0.0)
        r = refract(incoming, Vector3(0.0, 1.0, 0.0), eta)
        sin_out = r.x / r.length()
        assert sin_out == pytest.approx(eta * math.sin(0.5))

    def test_random_unit_vector_is_unit(self):
        rng = random.Random(3)
        for _ in range(100):
            assert random_unit_vector(rng).length() == pytest.approx(1.0)

    def test_random_in_unit_disk(self):
        rng = random.Random(5)
        for _ in range(100):
            p = random_in_unit_disk(rng)
            assert p.z == 0.0
            assert p.length_squared() < 1.0
