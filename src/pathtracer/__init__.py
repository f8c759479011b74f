"""
CPU path tracer: spheres, a BVH, diffuse/metal/glass materials and a
multithreaded per-pixel scheduler.
"""

__version__ = "0.1.0"
