# geometry/sphere.py
import math
from typing import Optional, Tuple
from core.vector import Vector3
from core.ray import Ray
from core.onb import ONB
from core.utils import random_to_sphere
from geometry.hittable import Hittable, HitRecord
from core.aabb import AABB


def get_sphere_uv(p: Vector3) -> Tuple[float, float]:
    """
    Maps a point on the unit sphere to (u, v) in [0, 1]^2.

    u is the angle around the Y axis from X=-1, v the angle from Y=-1 to Y=+1.
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return phi / (2 * math.pi), theta / math.pi


def _hit_sphere(center: Vector3, radius: float, material, ray: Ray,
                t_min: float, t_max: float) -> Optional[HitRecord]:
    oc = ray.origin - center
    a = ray.direction.length_squared()
    half_b = oc.dot(ray.direction)
    c = oc.length_squared() - radius * radius
    discriminant = half_b * half_b - a * c

    if discriminant < 0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    # Find the nearest root that lies in the acceptable range
    root = (-half_b - sqrt_disc) / a
    if root < t_min or root > t_max:
        root = (-half_b + sqrt_disc) / a
        if root < t_min or root > t_max:
            return None

    rec = HitRecord()
    rec.t = root
    rec.p = ray.at(rec.t)
    outward_normal = (rec.p - center) / radius
    rec.set_face_normal(ray, outward_normal)
    rec.u, rec.v = get_sphere_uv(outward_normal)
    rec.material = material
    return rec


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        return _hit_sphere(self.center, self.radius, self.material, ray, t_min, t_max)

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        offset = Vector3(self.radius, self.radius, self.radius)
        return AABB(self.center - offset, self.center + offset)

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        # Only directions that actually reach the sphere have non-zero density.
        if self.hit(Ray(origin, direction), 0.001, math.inf) is None:
            return 0.0
        distance_squared = (self.center - origin).length_squared()
        cos_theta_max = math.sqrt(max(0.0, 1 - self.radius * self.radius / distance_squared))
        solid_angle = 2 * math.pi * (1 - cos_theta_max)
        if solid_angle <= 0.0:
            return 0.0
        return 1 / solid_angle

    def random(self, origin: Vector3, rng) -> Vector3:
        direction = self.center - origin
        distance_squared = direction.length_squared()
        uvw = ONB(direction)
        return uvw.local(random_to_sphere(self.radius, distance_squared, rng))


class MovingSphere(Hittable):
    """
    A sphere whose center moves linearly from center0 at time0 to center1 at time1.
    """
    def __init__(self, center0: Vector3, center1: Vector3,
                 time0: float, time1: float, radius: float, material):
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Vector3:
        if self.time1 == self.time0:
            return self.center0
        return self.center0 + (self.center1 - self.center0) * ((time - self.time0) / (self.time1 - self.time0))

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        return _hit_sphere(self.center(ray.time), self.radius, self.material, ray, t_min, t_max)

    def bounding_box(self, time0: float, time1: float) -> AABB:
        offset = Vector3(self.radius, self.radius, self.radius)
        c0 = self.center(time0)
        c1 = self.center(time1)
        return AABB.surrounding_box(AABB(c0 - offset, c0 + offset),
                                    AABB(c1 - offset, c1 + offset))
