# core/pdf.py
"""
Direction sampling strategies used for importance sampling.

Every PDF both draws directions (``generate``) and reports the probability
density of a given direction (``value``). The integrator mixes a light-directed
PDF with the material's own PDF so that it samples towards known emitters and
along the BRDF with equal probability.
"""
import math

from core.onb import ONB
from core.utils import random_cosine_direction, random_unit_vector
from core.vector import Vector3


class PDF:
    """Base class for direction sampling strategies."""
    def value(self, direction: Vector3) -> float:
        raise NotImplementedError("value() must be implemented by PDF subclasses.")

    def generate(self, rng) -> Vector3:
        raise NotImplementedError("generate() must be implemented by PDF subclasses.")


class SpherePDF(PDF):
    """Uniform density over the whole sphere of directions."""
    def value(self, direction: Vector3) -> float:
        return 1.0 / (4.0 * math.pi)

    def generate(self, rng) -> Vector3:
        return random_unit_vector(rng)


class CosinePDF(PDF):
    """Cosine-weighted density over the hemisphere around a normal."""
    def __init__(self, w: Vector3):
        self.uvw = ONB(w)

    def value(self, direction: Vector3) -> float:
        cosine_theta = direction.normalize().dot(self.uvw.w)
        return max(0.0, cosine_theta / math.pi)

    def generate(self, rng) -> Vector3:
        return self.uvw.local(random_cosine_direction(rng))


class HittablePDF(PDF):
    """Samples directions from ``origin`` towards a hittable (usually a light)."""
    def __init__(self, objects, origin: Vector3):
        self.objects = objects
        self.origin = origin

    def value(self, direction: Vector3) -> float:
        return self.objects.pdf_value(self.origin, direction)

    def generate(self, rng) -> Vector3:
        return self.objects.random(self.origin, rng)


class MixturePDF(PDF):
    """Equal-weight mixture of two PDFs."""
    def __init__(self, p0: PDF, p1: PDF):
        self.p = (p0, p1)

    def value(self, direction: Vector3) -> float:
        return 0.5 * self.p[0].value(direction) + 0.5 * self.p[1].value(direction)

    def generate(self, rng) -> Vector3:
        if rng.random() < 0.5:
            return self.p[0].generate(rng)
        return self.p[1].generate(rng)
