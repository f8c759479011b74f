from pathtracer.renderer.channel import Channel, ChannelClosed
from pathtracer.renderer.image_output import FrameBuffer
from pathtracer.renderer.raytracer import Renderer, Pixel, PixelCoord, ray_color, sample_pixel

__all__ = ["Channel", "ChannelClosed", "FrameBuffer", "Renderer", "Pixel", "PixelCoord",
           "ray_color", "sample_pixel"]
