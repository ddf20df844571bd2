# core/errors.py


class RayTracerError(Exception):
    """Base class for errors raised while setting up or running a render."""


class BVHConstructionError(RayTracerError):
    """A BVH could not be built from the given objects."""


class ConfigurationError(RayTracerError):
    """Invalid render settings, scene name or quality preset."""


class TextureLoadError(RayTracerError):
    """An image texture could not be read from disk."""
