"""Exceptions raised by the path tracer."""


class PathTracerError(Exception):
    """Base class for all path tracer errors."""


class ConfigurationError(PathTracerError, ValueError):
    """Camera or render settings are malformed; raised before rendering starts."""


class RenderError(PathTracerError, RuntimeError):
    """A render could not be completed. Partial images are never returned."""
