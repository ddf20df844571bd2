# geometry/constant_medium.py
import math
import random
from typing import Optional, Union
from core.aabb import AABB
from core.errors import ConfigurationError
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord
from materials.isotropic import Isotropic
from materials.textures import Texture

# Offset between the entry crossing and the search for the exit crossing.
EXIT_EPSILON = 0.0001


class ConstantMedium(Hittable):
    """
    Homogeneous participating medium (smoke, fog) filling a boundary shape.

    A ray that passes through the boundary scatters at a random free-flight
    distance drawn from an exponential distribution with rate ``density``;
    if that distance lies beyond the exit crossing the ray passes through.
    The boundary must be convex.
    """
    def __init__(self, boundary: Hittable, density: float, albedo: Union[Vector3, Texture]):
        if not density > 0:
            raise ConfigurationError(f"Medium density must be positive, got {density}")
        self.boundary = boundary
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        rng = rng if rng is not None else random

        rec1 = self.boundary.hit(ray, -math.inf, math.inf, rng)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, rec1.t + EXIT_EPSILON, math.inf, rng)
        if rec2 is None:
            return None

        t_enter = max(rec1.t, t_min)
        t_exit = min(rec2.t, t_max)
        if t_enter >= t_exit:
            return None
        if t_enter < 0:
            t_enter = 0.0

        ray_length = ray.direction.length()
        distance_inside_boundary = (t_exit - t_enter) * ray_length
        # 1 - random() lies in (0, 1], so the log is always defined.
        hit_distance = self.neg_inv_density * math.log(1.0 - rng.random())

        if hit_distance > distance_inside_boundary:
            return None

        rec = HitRecord()
        rec.t = t_enter + hit_distance / ray_length
        rec.p = ray.at(rec.t)
        rec.normal = Vector3(1, 0, 0)  # arbitrary
        rec.front_face = True          # also arbitrary
        rec.material = self.phase_function
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.boundary.bounding_box(time0, time1)
