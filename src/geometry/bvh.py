# geometry/bvh.py
import math
import random
from typing import List, Optional, Sequence, Tuple
from core.aabb import AABB
from core.errors import BVHConstructionError
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord


def _box_of(obj: Hittable, time0: float, time1: float) -> AABB:
    box = obj.bounding_box(time0, time1)
    if box is None:
        raise BVHConstructionError(f"No bounding box for {obj!r} in BVH construction")
    for a in range(3):
        if math.isnan(box.minimum[a]) or math.isnan(box.maximum[a]):
            raise BVHConstructionError(f"Bounding box of {obj!r} has NaN coordinates: {box!r}")
    return box


class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy over a span of hittables.

    Each node splits its span at the median after sorting by the minimum
    bounding-box coordinate along a randomly chosen axis. A span of one object
    stores that object as both children, so every node has two children.

    The caller's list is never reordered; the span is copied before sorting.
    """
    def __init__(self, objects: Sequence[Hittable], start: int, end: int,
                 time0: float = 0.0, time1: float = 0.0, rng=None):
        if end - start < 1:
            raise BVHConstructionError("Cannot build a BVH over an empty set of objects")
        rng = rng if rng is not None else random
        entries = [(obj, _box_of(obj, time0, time1)) for obj in objects[start:end]]
        self._build(entries, time0, time1, rng)

    @classmethod
    def _from_entries(cls, entries: List[Tuple[Hittable, AABB]], time0, time1, rng) -> "BVHNode":
        node = cls.__new__(cls)
        node._build(entries, time0, time1, rng)
        return node

    def _build(self, entries: List[Tuple[Hittable, AABB]], time0: float, time1: float, rng):
        axis = rng.randint(0, 2)
        object_span = len(entries)

        if object_span == 1:
            obj, box = entries[0]
            self.left = self.right = obj
            left_box = right_box = box
        elif object_span == 2:
            (first, first_box), (second, second_box) = entries
            if second_box.minimum[axis] < first_box.minimum[axis]:
                first, first_box, second, second_box = second, second_box, first, first_box
            self.left, left_box = first, first_box
            self.right, right_box = second, second_box
        else:
            # Stable sort; equal keys keep their relative order.
            entries = sorted(entries, key=lambda entry: entry[1].minimum[axis])
            mid = object_span // 2
            self.left = BVHNode._from_entries(entries[:mid], time0, time1, rng)
            self.right = BVHNode._from_entries(entries[mid:], time0, time1, rng)
            left_box = self.left.box
            right_box = self.right.box

        self.axis = axis
        self.box = AABB.surrounding_box(left_box, right_box)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max, rng)
        if self.right is self.left:
            return hit_left

        # Only a strictly closer hit in the right subtree can matter.
        hit_right = self.right.hit(ray, t_min, hit_left.t if hit_left else t_max, rng)
        return hit_right or hit_left

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        return self.box

