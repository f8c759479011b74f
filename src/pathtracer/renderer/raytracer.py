# renderer/raytracer.py
import logging
import math
import random
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import NamedTuple, Tuple
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.errors import RenderError
from pathtracer.renderer.channel import Channel, ChannelClosed
from pathtracer.renderer.tone_mapping import write_color

logger = logging.getLogger(__name__)

# Lower bound of accepted hits; avoids re-hitting the surface a ray leaves from.
SHADOW_ACNE_EPSILON = 0.001

BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)


class PixelCoord(NamedTuple):
    x: int
    y: int


class Pixel(NamedTuple):
    """A finished pixel: its coordinate and gamma-corrected RGB bytes."""
    coord: PixelCoord
    color: Tuple[int, int, int]


def background_color(ray: Ray) -> Color:
    """Vertical white to sky-blue gradient lighting the scene."""
    unit_direction = ray.direction.normalize()
    a = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - a) + SKY_BLUE * a


def ray_color(ray: Ray, depth: int, world, rng=random) -> Color:
    """
    Radiance carried back along ray, following at most depth bounces.
    Running out of bounces gathers no more light.
    """
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, Interval(SHADOW_ACNE_EPSILON, math.inf))
    if rec is None:
        return background_color(ray)

    scattered = rec.material.scatter(ray, rec, rng)
    if scattered is None:
        return BLACK
    attenuation, scattered_ray = scattered
    return attenuation * ray_color(scattered_ray, depth - 1, world, rng)


def sample_pixel(camera, world, coord: PixelCoord, rng=random) -> Color:
    """Average of camera.samples_per_pixel path-traced samples for one pixel."""
    pixel_color = Color(0.0, 0.0, 0.0)
    for _ in range(camera.samples_per_pixel):
        ray = camera.get_ray(coord.x, coord.y, rng)
        pixel_color = pixel_color + ray_color(ray, camera.max_depth, world, rng)
    return pixel_color * camera.pixel_samples_scale


class Renderer:
    """
    Multithreaded per-pixel scheduler.

    A producer task shuffles every pixel coordinate into a work channel;
    camera.num_threads workers trace those pixels against the shared,
    read-only world and send finished Pixels to an output channel that the
    sink drains on the calling thread.
    """
    def __init__(self, camera):
        self.camera = camera
        self.width = camera.image_width
        self.height = camera.image_height
        self.num_threads = camera.num_threads

    def _rng(self, stream: int) -> random.Random:
        if self.camera.seed is None:
            return random.Random()
        return random.Random(self.camera.seed + stream)

    def pixel_coords(self):
        return [PixelCoord(i, j) for j in range(self.height) for i in range(self.width)]

    def _produce(self, work: Channel):
        try:
            all_px = self.pixel_coords()
            # Shuffled so expensive regions of the image are spread over all workers.
            self._rng(0).shuffle(all_px)
            for coord in all_px:
                work.send(coord)
        except ChannelClosed:
            logger.debug("Work channel closed before all pixels were queued")
        finally:
            work.close()

    def _work(self, worker_id: int, work: Channel, pixels: Channel, world,
              cancelled: threading.Event):
        rng = self._rng(worker_id + 1)
        count = 0
        for coord in work:
            if cancelled.is_set():
                break
            color = sample_pixel(self.camera, world, coord, rng)
            try:
                pixels.send(Pixel(coord, write_color(color)))
            except ChannelClosed:
                break
            count += 1
        logger.debug("Worker %d traced %d pixels", worker_id, count)

    def render(self, world, sink):
        """
        Render world and stream every finished pixel to sink.consume, which
        runs on the calling thread and blocks until the sink is done. If the
        sink returns early (a closed window) the remaining work is dropped.
        Raises RenderError if the producer, a worker or the sink fails.
        """
        logger.info("Rendering %dx%d, %d samples/pixel, max depth %d, %d threads",
                    self.width, self.height, self.camera.samples_per_pixel,
                    self.camera.max_depth, self.num_threads)
        start = time.perf_counter()

        work = Channel()
        pixels = Channel()
        remaining = [self.num_threads]
        remaining_lock = threading.Lock()
        cancelled = threading.Event()

        def abort():
            cancelled.set()
            pixels.close()
            work.close()

        def producer_done(future):
            if future.exception() is not None:
                abort()

        def worker_done(future):
            with remaining_lock:
                remaining[0] -= 1
                last = remaining[0] == 0
            if future.exception() is not None:
                abort()
            elif last:
                # The last worker out ends the output stream.
                pixels.close()

        try:
            executor = ThreadPoolExecutor(max_workers=self.num_threads + 1,
                                          thread_name_prefix="render")
        except (RuntimeError, ValueError) as e:
            raise RenderError(f"Could not create render thread pool: {e}") from e

        futures = []
        try:
            try:
                producer = executor.submit(self._produce, work)
                workers = [executor.submit(self._work, k, work, pixels, world, cancelled)
                           for k in range(self.num_threads)]
            except RuntimeError as e:
                work.close()
                pixels.close()
                raise RenderError(f"Could not start render tasks: {e}") from e
            futures = [producer] + workers
            producer.add_done_callback(producer_done)
            for future in workers:
                future.add_done_callback(worker_done)

            try:
                sink.consume(pixels)
            except Exception as e:
                raise RenderError(f"Output sink failed: {e!r}") from e
        finally:
            # Queued pixels are dropped if the sink left early; workers stop
            # after their current pixel.
            cancelled.set()
            work.close()
            executor.shutdown(wait=True)
            pixels.close()

        errors = [f.exception() for f in futures if f.exception() is not None]
        if errors:
            raise RenderError(f"Render task failed: {errors[0]!r}") from errors[0]

        elapsed = time.perf_counter() - start
        logger.info("Render finished in %.2fs", elapsed)
        return sink
