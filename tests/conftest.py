"""Shared fixtures for the path tracer tests.

Every test that needs randomness takes the seeded ``rng`` fixture so runs are
reproducible.
"""
import random

import pytest

from core.vector import Vector3
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def white():
    return Lambertian(Vector3(0.73, 0.73, 0.73))


@pytest.fixture
def light():
    return DiffuseLight(Vector3(4.0, 4.0, 4.0))


def approx_vec(v, rel=1e-9, abs=1e-12):
    """pytest.approx over the components of a Vector3 (or any 3-iterable)."""
    return pytest.approx(tuple(v), rel=rel, abs=abs)
