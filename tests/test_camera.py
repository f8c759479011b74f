"""Tests for camera settings validation and primary ray generation."""

import math

import pytest

from pathtracer.camera import QUALITY_LEVELS, Camera, CameraSettings
from pathtracer.core.vector import Point3, Vector3
from pathtracer.errors import ConfigurationError

from conftest import FixedRandom


class TestCameraSettings:
    """Tests for the settings record."""

    def test_default_image_height(self):
        settings = CameraSettings()
        assert settings.image_width == 400
        assert settings.image_height == 225

    def test_height_truncates(self):
        assert CameraSettings(image_width=10, aspect_ratio=3.0).image_height == 3

    @pytest.mark.parametrize("changes", [
        {"num_threads": 0},
        {"aspect_ratio": 0.0},
        {"aspect_ratio": -1.0},
        {"aspect_ratio": math.inf},
        {"image_width": 0},
        {"image_width": 1, "aspect_ratio": 2.0},
        {"samples_per_pixel": 0},
        {"max_depth": 0},
        {"vfov": 0.0},
        {"vfov": 180.0},
        {"defocus_angle": -1.0},
        {"focus_dist": 0.0},
        {"lookat": Point3(0.0, 0.0, 0.0)},
        {"vup": Vector3(0.0, 0.0, 1.0)},
    ])
    def test_invalid_settings_rejected(self, changes):
        settings = CameraSettings(**changes)
        with pytest.raises(ConfigurationError):
            settings.validate()
        with pytest.raises(ValueError):
            Camera(settings)

    def test_defaults_are_valid(self):
        CameraSettings().validate()

    def test_with_quality(self):
        settings = CameraSettings(vfov=20.0).with_quality("interactive")
        for key, value in QUALITY_LEVELS["interactive"].items():
            assert getattr(settings, key) == value
        assert settings.vfov == 20.0

    def test_unknown_quality(self):
        with pytest.raises(ConfigurationError):
            CameraSettings().with_quality("ultra")

    def test_replace_leaves_original(self):
        base = CameraSettings()
        changed = base.replace(samples_per_pixel=7)
        assert changed.samples_per_pixel == 7
        assert base.samples_per_pixel == 100


class TestCamera:
    """Tests for primary rays."""

    def test_basis_is_orthonormal(self, small_settings):
        camera = Camera(small_settings.replace(lookfrom=Point3(3.0, 2.0, 1.0)))
        for a in (camera.u, camera.v, camera.w):
            assert a.length() == pytest.approx(1.0)
        assert camera.u.dot(camera.v) == pytest.approx(0.0, abs=1e-12)
        assert camera.u.dot(camera.w) == pytest.approx(0.0, abs=1e-12)
        assert camera.v.dot(camera.w) == pytest.approx(0.0, abs=1e-12)

    def test_center_of_image_looks_at_target(self, small_settings):
        camera = Camera(small_settings)
        # With a zero offset, (3.5, 1.5) is the middle of the 8x4 grid.
        ray = camera.get_ray(3.5, 1.5, FixedRandom(0.5))
        assert ray.origin.as_tuple() == (0.0, 0.0, 0.0)
        assert ray.direction.as_tuple() == pytest.approx((0.0, 0.0, -1.0))
        assert ray.time == 0.5

    def test_top_left_pixel_points_up_and_left(self, small_settings):
        camera = Camera(small_settings)
        ray = camera.get_ray(0, 0, FixedRandom(0.5))
        assert ray.direction.x < 0.0
        assert ray.direction.y > 0.0

    def test_pinhole_rays_start_at_lookfrom(self, small_settings, rng):
        camera = Camera(small_settings.replace(lookfrom=Point3(1.0, 2.0, 3.0)))
        for _ in range(20):
            ray = camera.get_ray(2, 1, rng)
            assert ray.origin.as_tuple() == (1.0, 2.0, 3.0)
            assert 0.0 <= ray.time < 1.0

    def test_defocus_origin_within_disk(self, small_settings, rng):
        settings = small_settings.replace(defocus_angle=10.0, focus_dist=2.0)
        camera = Camera(settings)
        radius = 2.0 * math.tan(math.radians(5.0))
        moved = False
        for _ in range(50):
            ray = camera.get_ray(4, 2, rng)
            offset = ray.origin - settings.lookfrom
            assert offset.length() <= radius + 1e-12
            # The disk lies in the plane of the viewport.
            assert offset.dot(camera.w) == pytest.approx(0.0, abs=1e-12)
            moved = moved or offset.length() > 0.0
        assert moved

    def test_pixel_samples_scale(self, small_settings):
        assert Camera(small_settings).pixel_samples_scale == pytest.approx(0.25)
