# geometry/box.py
from typing import Optional
from core.aabb import AABB
from core.ray import Ray
from core.vector import Vector3
from geometry.aarect import XYRect, XZRect, YZRect
from geometry.hittable import Hittable, HitRecord
from geometry.transforms import FlipFace
from geometry.world import HittableList


class Box(Hittable):
    """
    Closed axis-aligned box made of six rectangles sharing one material.

    Rectangles face +axis, so the three min-side faces are flipped to keep
    every front face on the outside of the box.
    """
    def __init__(self, p0: Vector3, p1: Vector3, material):
        self.box_min = p0
        self.box_max = p1

        self.sides = HittableList()
        self.sides.add(XYRect(p0.x, p1.x, p0.y, p1.y, p1.z, material))
        self.sides.add(FlipFace(XYRect(p0.x, p1.x, p0.y, p1.y, p0.z, material)))

        self.sides.add(XZRect(p0.x, p1.x, p0.z, p1.z, p1.y, material))
        self.sides.add(FlipFace(XZRect(p0.x, p1.x, p0.z, p1.z, p0.y, material)))

        self.sides.add(YZRect(p0.y, p1.y, p0.z, p1.z, p1.x, material))
        self.sides.add(FlipFace(YZRect(p0.y, p1.y, p0.z, p1.z, p0.x, material)))

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        return self.sides.hit(ray, t_min, t_max, rng)

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        return AABB(self.box_min, self.box_max)
