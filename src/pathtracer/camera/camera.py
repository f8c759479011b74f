# camera/camera.py
import math
import random
from pathtracer.camera.settings import CameraSettings
from pathtracer.core.ray import Ray
from pathtracer.core.utils import degrees_to_radians, random_in_unit_disk
from pathtracer.core.vector import Vector3


class Camera:
    """
    Immutable per-render view derived from a CameraSettings record. Holds the
    orthonormal basis, the pixel grid and the defocus disk, and generates
    jittered primary rays.
    """
    def __init__(self, settings: CameraSettings):
        settings.validate()
        self.settings = settings

        self.num_threads = settings.num_threads
        self.image_width = settings.image_width
        self.image_height = settings.image_height
        self.samples_per_pixel = settings.samples_per_pixel
        self.pixel_samples_scale = 1.0 / settings.samples_per_pixel
        self.max_depth = settings.max_depth
        self.defocus_angle = settings.defocus_angle
        self.seed = settings.seed
        self.center = settings.lookfrom

        self.update_camera()

    def update_camera(self):
        """Computes the camera's basis vectors, viewport and defocus disk."""
        s = self.settings

        # Viewport dimensions at the focus plane
        theta = degrees_to_radians(s.vfov)
        h = math.tan(theta / 2)
        viewport_height = 2.0 * h * s.focus_dist
        viewport_width = viewport_height * (self.image_width / self.image_height)

        # u, v, w unit basis vectors for the camera coordinate frame
        self.w = (s.lookfrom - s.lookat).normalize()
        self.u = s.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Vectors across the horizontal and down the vertical viewport edges
        viewport_u = self.u * viewport_width
        viewport_v = -self.v * viewport_height

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (self.center -
                               self.w * s.focus_dist -
                               viewport_u / 2 -
                               viewport_v / 2)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        defocus_radius = s.focus_dist * math.tan(degrees_to_radians(s.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

    def get_ray(self, i: float, j: float, rng=random) -> Ray:
        """
        Camera ray for pixel (i, j): aimed at a random point inside the pixel,
        starting on the defocus disk, at a random shutter time.
        """
        offset = sample_square(rng)
        pixel_sample = (self.pixel00_loc +
                        self.pixel_delta_u * (i + offset.x) +
                        self.pixel_delta_v * (j + offset.y))

        if self.defocus_angle <= 0:
            ray_origin = self.center
        else:
            ray_origin = self.defocus_disk_sample(rng)
        ray_direction = pixel_sample - ray_origin

        return Ray(ray_origin, ray_direction, rng.random())

    def defocus_disk_sample(self, rng=random) -> Vector3:
        p = random_in_unit_disk(rng)
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y


def sample_square(rng=random) -> Vector3:
    """Vector to a random point in the [-.5,-.5]-[+.5,+.5] unit square."""
    return Vector3(rng.random() - 0.5, rng.random() - 0.5, 0.0)
