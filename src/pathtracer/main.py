# main.py
"""Command-line entry point.

Usage:
    pathtracer [--scene final|moving] [--quality LEVEL] [--threads N]
               [--width W] [--samples S] [--max-depth D] [--seed SEED]
               [--output PATH] [--log-level LEVEL]

Without --output the render is shown live in a window; with it the render
runs headless and the finished image is written to PATH.
"""
import argparse
import logging
import random
import sys
from pathtracer.camera.camera import Camera
from pathtracer.camera.settings import QUALITY_LEVELS
from pathtracer.errors import ConfigurationError, RenderError
from pathtracer.renderer.display import PygameDisplay
from pathtracer.renderer.image_output import FrameBuffer
from pathtracer.renderer.raytracer import Renderer
from pathtracer.scenes import SCENES

logger = logging.getLogger("pathtracer")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a sphere scene with a CPU path tracer.")
    parser.add_argument("--scene", choices=sorted(SCENES), default="final",
                        help="Scene to render (default: final)")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS),
                        help="Quality level overriding width, samples and depth")
    parser.add_argument("--threads", type=int, help="Worker thread count")
    parser.add_argument("--width", type=int, help="Image width in pixels")
    parser.add_argument("--samples", type=int, help="Samples per pixel")
    parser.add_argument("--max-depth", type=int, help="Maximum ray bounces")
    parser.add_argument("--seed", type=int,
                        help="Seed for scene generation and sampling")
    parser.add_argument("--output", help="Render headless and save the image to this path")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity (default: INFO)")
    return parser.parse_args(argv)


def build_settings(args, settings):
    if args.quality:
        settings = settings.with_quality(args.quality)
    overrides = {
        "num_threads": args.threads,
        "image_width": args.width,
        "samples_per_pixel": args.samples,
        "max_depth": args.max_depth,
        "seed": args.seed,
    }
    return settings.replace(**{k: v for k, v in overrides.items() if v is not None})


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    rng = random.Random(args.seed)
    world, settings = SCENES[args.scene](rng)

    try:
        camera = Camera(build_settings(args, settings))
    except ConfigurationError as e:
        logger.error("Invalid settings: %s", e)
        return 2

    if args.output:
        sink = FrameBuffer(camera.image_width, camera.image_height)
    else:
        sink = PygameDisplay(camera.image_width, camera.image_height)

    try:
        Renderer(camera).render(world, sink)
    except RenderError as e:
        logger.error("%s", e)
        return 1

    if args.output:
        sink.save(args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
