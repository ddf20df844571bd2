# geometry/aarect.py
import math
from typing import Optional
from core.aabb import AABB
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord

# Flat rectangles get this much thickness so their boxes never collapse.
PADDING = 0.0001


def _point(axis_a: int, a: float, axis_b: int, b: float, axis_k: int, k: float) -> Vector3:
    coords = [0.0, 0.0, 0.0]
    coords[axis_a] = a
    coords[axis_b] = b
    coords[axis_k] = k
    return Vector3(*coords)


class AARect(Hittable):
    """
    Rectangle lying in the plane ``axis_k == k``, spanning [a0, a1] x [b0, b1]
    along the other two axes. Subclasses only choose the axes.
    """
    axis_a = 0
    axis_b = 1
    axis_k = 2

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material
        self.outward_normal = _point(self.axis_a, 0.0, self.axis_b, 0.0, self.axis_k, 1.0)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        dk = ray.direction[self.axis_k]
        if dk == 0.0:
            return None
        t = (self.k - ray.origin[self.axis_k]) / dk
        if t < t_min or t > t_max:
            return None

        a = ray.origin[self.axis_a] + t * ray.direction[self.axis_a]
        b = ray.origin[self.axis_b] + t * ray.direction[self.axis_b]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        rec = HitRecord()
        rec.u = (a - self.a0) / (self.a1 - self.a0)
        rec.v = (b - self.b0) / (self.b1 - self.b0)
        rec.t = t
        rec.set_face_normal(ray, self.outward_normal)
        rec.material = self.material
        rec.p = ray.at(t)
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        return AABB(
            _point(self.axis_a, self.a0, self.axis_b, self.b0, self.axis_k, self.k - PADDING),
            _point(self.axis_a, self.a1, self.axis_b, self.b1, self.axis_k, self.k + PADDING),
        )

    def area(self) -> float:
        return (self.a1 - self.a0) * (self.b1 - self.b0)

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        rec = self.hit(Ray(origin, direction), 0.001, math.inf)
        if rec is None:
            return 0.0
        length = direction.length()
        distance_squared = rec.t * rec.t * direction.length_squared()
        cosine = abs(direction.dot(rec.normal) / length)
        if cosine == 0.0:
            return 0.0
        return distance_squared / (cosine * self.area())

    def random(self, origin: Vector3, rng) -> Vector3:
        random_point = _point(self.axis_a, rng.uniform(self.a0, self.a1),
                              self.axis_b, rng.uniform(self.b0, self.b1),
                              self.axis_k, self.k)
        return random_point - origin


class XYRect(AARect):
    axis_a, axis_b, axis_k = 0, 1, 2


class XZRect(AARect):
    axis_a, axis_b, axis_k = 0, 2, 1


class YZRect(AARect):
    axis_a, axis_b, axis_k = 1, 2, 0
