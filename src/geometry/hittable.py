# geometry/hittable.py
from typing import Optional
from core.aabb import AABB
from core.vector import Vector3
from core.ray import Ray


class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("p", "normal", "t", "u", "v", "front_face", "material")

    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, front_face: bool = True, material=None,
                 u: float = 0.0, v: float = 0.0):
        self.p = p              # Intersection point
        self.normal = normal    # Surface normal, facing against the ray
        self.t = t              # Ray parameter at intersection
        self.u = u              # Surface coordinates for texture lookup
        self.v = v
        self.front_face = front_face
        self.material = material

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r}, front_face={self.front_face})"


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.

    ``rng`` is only consumed by stochastic objects (participating media); every
    composite passes it through to its children.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        """
        Box enclosing the object over the shutter interval, or None when the
        object is unbounded.
        """
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        """Density of sampling ``direction`` from ``origin`` towards this object."""
        return 0.0

    def random(self, origin: Vector3, rng) -> Vector3:
        """A direction from ``origin`` towards a random point on this object."""
        return Vector3(1, 0, 0)
