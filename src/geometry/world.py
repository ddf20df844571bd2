# geometry/world.py
from typing import Iterable, List, Optional
from core.aabb import AABB
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord
from geometry.bvh import BVHNode


class HittableList(Hittable):
    """
    An unordered list of Hittable objects, intersected by linear scan.

    As a light source the list samples each member with equal probability.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def build_bvh(self, time0: float = 0.0, time1: float = 0.0, rng=None) -> BVHNode:
        """Builds a BVH over the current members; the list itself is left untouched."""
        return BVHNode(self.objects, 0, len(self.objects), time0, time1, rng=rng)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far, rng)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        if not self.objects:
            return None
        output_box = None
        for obj in self.objects:
            box = obj.bounding_box(time0, time1)
            if box is None:
                return None
            output_box = box if output_box is None else AABB.surrounding_box(output_box, box)
        return output_box

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        if not self.objects:
            return 0.0
        weight = 1.0 / len(self.objects)
        return sum(weight * obj.pdf_value(origin, direction) for obj in self.objects)

    def random(self, origin: Vector3, rng) -> Vector3:
        return self.objects[rng.randrange(len(self.objects))].random(origin, rng)
