# renderer/background.py
from core.ray import Ray
from core.vector import Vector3


class Background:
    """Radiance returned for rays that escape the scene."""
    def value(self, ray: Ray) -> Vector3:
        raise NotImplementedError("value() must be implemented by background subclasses.")


class SolidBackground(Background):
    def __init__(self, color: Vector3):
        self.color = color

    def value(self, ray: Ray) -> Vector3:
        return self.color


class SkyGradient(Background):
    """
    Linear blend from ``bottom`` to ``top`` along the ``up`` axis.

    A direction equal to ``up`` sees ``top``, its opposite sees ``bottom``.
    """
    def __init__(self, bottom: Vector3 = Vector3(1.0, 1.0, 1.0), top: Vector3 = Vector3(0.5, 0.7, 1.0),
                 up: Vector3 = Vector3(0.0, 1.0, 0.0)):
        self.bottom = bottom
        self.top = top
        self.up = up.normalize()

    def value(self, ray: Ray) -> Vector3:
        unit_direction = ray.direction.normalize()
        t = 0.5 * (unit_direction.dot(self.up) + 1.0)
        return self.bottom * (1.0 - t) + self.top * t
