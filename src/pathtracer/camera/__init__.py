from pathtracer.camera.settings import CameraSettings, QUALITY_LEVELS
from pathtracer.camera.camera import Camera

__all__ = ["Camera", "CameraSettings", "QUALITY_LEVELS"]
