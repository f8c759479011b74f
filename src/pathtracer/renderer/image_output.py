# renderer/image_output.py
import logging
import os
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


class FrameBuffer:
    """
    Sink that collects the pixel stream into an (height, width, 3) uint8
    array. Pixels may arrive in any order.
    """
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.data = np.zeros((height, width, 3), dtype=np.uint8)
        self.count = 0

    def write(self, pixel):
        x, y = pixel.coord
        self.data[y, x] = pixel.color
        self.count += 1

    def consume(self, pixels):
        """Drain the channel until it is closed."""
        for pixel in pixels:
            self.write(pixel)

    @property
    def complete(self) -> bool:
        return self.count >= self.width * self.height

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.data)

    def save(self, path: str) -> str:
        """
        Write the buffer to an image file; the format follows the file
        extension and defaults to PNG.
        """
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fmt = None if os.path.splitext(path)[1] else "PNG"
        self.to_image().save(path, format=fmt)
        logger.info("Saved %dx%d image to %s", self.width, self.height, path)
        return path
