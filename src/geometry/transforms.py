# geometry/transforms.py
"""
Decorators that move, rotate or re-orient another hittable.

Each one maps the incoming ray into the wrapped object's space, delegates the
query, and maps the resulting hit back into world space. The face orientation
of the hit is recomputed against the world-space ray from the outward normal,
so ``front_face`` keeps its meaning through any chain of decorators.
"""
import math
from typing import Optional
from core.aabb import AABB
from core.ray import Ray
from core.utils import degrees_to_radians
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord


def _outward_normal(rec: HitRecord) -> Vector3:
    return rec.normal if rec.front_face else -rec.normal


class Translate(Hittable):
    def __init__(self, obj: Hittable, offset: Vector3):
        self.obj = obj
        self.offset = offset

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        moved = Ray(ray.origin - self.offset, ray.direction, ray.time)
        rec = self.obj.hit(moved, t_min, t_max, rng)
        if rec is None:
            return None
        rec.p = rec.p + self.offset
        rec.set_face_normal(moved, _outward_normal(rec))
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        box = self.obj.bounding_box(time0, time1)
        if box is None:
            return None
        return AABB(box.minimum + self.offset, box.maximum + self.offset)

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        return self.obj.pdf_value(origin - self.offset, direction)

    def random(self, origin: Vector3, rng) -> Vector3:
        return self.obj.random(origin - self.offset, rng)


class RotateY(Hittable):
    """
    Rotates the wrapped object by ``angle`` degrees about the Y axis.

    The world-space box is the extent of the eight rotated corners of the
    object's box, computed once over [time0, time1].
    """
    def __init__(self, obj: Hittable, angle: float, time0: float = 0.0, time1: float = 1.0):
        self.obj = obj
        radians = degrees_to_radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)
        self.box = None

        box = obj.bounding_box(time0, time1)
        if box is None:
            return

        minimum = [math.inf, math.inf, math.inf]
        maximum = [-math.inf, -math.inf, -math.inf]
        for corner in box.corners():
            rotated = self._to_world(corner)
            for c in range(3):
                minimum[c] = min(minimum[c], rotated[c])
                maximum[c] = max(maximum[c], rotated[c])
        self.box = AABB(Vector3(*minimum), Vector3(*maximum))

    def _to_object(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x - self.sin_theta * v.z,
                       v.y,
                       self.sin_theta * v.x + self.cos_theta * v.z)

    def _to_world(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x + self.sin_theta * v.z,
                       v.y,
                       -self.sin_theta * v.x + self.cos_theta * v.z)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        rotated = Ray(self._to_object(ray.origin), self._to_object(ray.direction), ray.time)
        rec = self.obj.hit(rotated, t_min, t_max, rng)
        if rec is None:
            return None
        outward = self._to_world(_outward_normal(rec))
        rec.p = self._to_world(rec.p)
        rec.set_face_normal(ray, outward)
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.box

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        return self.obj.pdf_value(self._to_object(origin), self._to_object(direction))

    def random(self, origin: Vector3, rng) -> Vector3:
        return self._to_world(self.obj.random(self._to_object(origin), rng))


class FlipFace(Hittable):
    """Swaps which side of the wrapped object counts as its front face."""
    def __init__(self, obj: Hittable):
        self.obj = obj

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        rec = self.obj.hit(ray, t_min, t_max, rng)
        if rec is None:
            return None
        rec.front_face = not rec.front_face
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.obj.bounding_box(time0, time1)

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        return self.obj.pdf_value(origin, direction)

    def random(self, origin: Vector3, rng) -> Vector3:
        return self.obj.random(origin, rng)
