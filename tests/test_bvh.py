"""Tests for BVH construction and traversal.

Tests cover:
- Nearest hit agrees exactly with a linear scan over the same spheres
- Every interior node's box is exactly the union of its children's boxes
- Single-object spans, caller list left untouched
- Construction errors: empty span, unbounded objects, NaN boxes
"""
import math
import random

import pytest

from core.aabb import AABB
from core.errors import BVHConstructionError
from core.ray import Ray
from core.vector import Vector3
from geometry.bvh import BVHNode
from geometry.hittable import Hittable
from geometry.sphere import Sphere
from geometry.world import HittableList


def disjoint_spheres(rng, count, material):
    """Spheres on a jittered grid; each one stays inside its own cell."""
    spheres = []
    side = math.ceil(count ** (1 / 3))
    for idx in range(count):
        i, j, k = idx % side, (idx // side) % side, idx // (side * side)
        radius = rng.uniform(0.1, 0.4)
        jitter = Vector3.random(rng, -0.05, 0.05)
        spheres.append(Sphere(Vector3(i, j, k) + jitter, radius, material))
    return spheres


def hit_tuple(rec):
    return (rec.t, tuple(rec.p), tuple(rec.normal), rec.front_face)


def interior_nodes(node):
    if not isinstance(node, BVHNode):
        return
    yield node
    yield from interior_nodes(node.left)
    if node.right is not node.left:
        yield from interior_nodes(node.right)


class Unbounded(Hittable):
    def hit(self, ray, t_min, t_max, rng=None):
        return None

    def bounding_box(self, time0, time1):
        return None


class NaNBox(Unbounded):
    def bounding_box(self, time0, time1):
        return AABB(Vector3(math.nan, 0, 0), Vector3(1, 1, 1))


class TestBVHMatchesLinearScan:
    def test_nearest_hit_matches(self, rng, white):
        spheres = disjoint_spheres(rng, 64, white)
        world = HittableList(spheres)
        bvh = world.build_bvh(rng=random.Random(99))

        hits = 0
        for _ in range(300):
            origin = Vector3.random(rng, -3, 6)
            target = Vector3.random(rng, 0, 3)
            ray = Ray(origin, target - origin)
            expected = world.hit(ray, 0.001, math.inf)
            actual = bvh.hit(ray, 0.001, math.inf)
            if expected is None:
                assert actual is None
                continue
            hits += 1
            assert actual is not None
            assert hit_tuple(actual) == hit_tuple(expected)
        # The rays aim into the grid, so most of them must hit something.
        assert hits > 100

    def test_respects_t_max(self, white):
        bvh = BVHNode([Sphere(Vector3(0, 0, -5), 1, white), Sphere(Vector3(0, 0, -10), 1, white)], 0, 2)
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        assert bvh.hit(ray, 0.001, 3.0) is None
        assert bvh.hit(ray, 0.001, math.inf).t == pytest.approx(4.0)
        assert bvh.hit(ray, 7.0, math.inf).t == pytest.approx(9.0)


class TestBVHStructure:
    def test_node_box_is_union_of_children(self, rng, white):
        spheres = disjoint_spheres(rng, 100, white)
        root = BVHNode(spheres, 0, len(spheres), rng=rng)
        for node in interior_nodes(root):
            left = node.left.bounding_box(0, 0)
            right = node.right.bounding_box(0, 0)
            expected = AABB.surrounding_box(left, right)
            assert tuple(node.box.minimum) == tuple(expected.minimum)
            assert tuple(node.box.maximum) == tuple(expected.maximum)

    def test_split_axis_is_random_per_node(self, rng, white):
        spheres = disjoint_spheres(rng, 200, white)
        root = BVHNode(spheres, 0, len(spheres), rng=rng)
        assert {node.axis for node in interior_nodes(root)} == {0, 1, 2}

    def test_single_object_is_both_children(self, white):
        sphere = Sphere(Vector3(0, 0, 0), 1, white)
        node = BVHNode([sphere], 0, 1)
        assert node.left is sphere and node.right is sphere
        rec = node.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec.t == pytest.approx(4.0)

    def test_caller_list_is_not_reordered(self, rng, white):
        spheres = disjoint_spheres(rng, 30, white)
        rng.shuffle(spheres)
        before = list(spheres)
        BVHNode(spheres, 0, len(spheres), rng=rng)
        assert all(a is b for a, b in zip(spheres, before))

    def test_sub_span(self, white):
        spheres = [Sphere(Vector3(x, 0, 0), 0.25, white) for x in range(6)]
        node = BVHNode(spheres, 2, 4)
        assert node.box.minimum.x == pytest.approx(1.75)
        assert node.box.maximum.x == pytest.approx(3.25)

    def test_same_seed_same_tree(self, white):
        spheres = disjoint_spheres(random.Random(5), 50, white)
        a = BVHNode(spheres, 0, 50, rng=random.Random(1))
        b = BVHNode(spheres, 0, 50, rng=random.Random(1))
        assert [n.axis for n in interior_nodes(a)] == [n.axis for n in interior_nodes(b)]


class TestBVHConstructionErrors:
    def test_empty_span(self):
        with pytest.raises(BVHConstructionError):
            BVHNode([], 0, 0)

    def test_empty_list(self):
        with pytest.raises(BVHConstructionError):
            HittableList().build_bvh()

    def test_object_without_box(self, white):
        with pytest.raises(BVHConstructionError):
            BVHNode([Sphere(Vector3(0, 0, 0), 1, white), Unbounded()], 0, 2)

    def test_nan_box(self):
        with pytest.raises(BVHConstructionError):
            BVHNode([NaNBox()], 0, 1)
