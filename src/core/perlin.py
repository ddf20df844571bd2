# core/perlin.py
import math
from typing import Optional

import numpy as np

from core.vector import Vector3

POINT_COUNT = 256


class Perlin:
    """
    Gradient (Perlin) noise over 3D points, with turbulence.

    Lattice gradients and permutation tables are drawn once from a seeded
    NumPy generator, so two instances built with the same seed are identical.
    """
    def __init__(self, seed: Optional[int] = None):
        gen = np.random.default_rng(seed)
        vectors = gen.uniform(-1.0, 1.0, size=(POINT_COUNT, 3))
        norms = np.linalg.norm(vectors, axis=1, keepdims=True)
        norms[norms == 0.0] = 1.0
        self.ranvec = [tuple(v) for v in (vectors / norms).tolist()]
        self.perm_x = gen.permutation(POINT_COUNT).tolist()
        self.perm_y = gen.permutation(POINT_COUNT).tolist()
        self.perm_z = gen.permutation(POINT_COUNT).tolist()

    def noise(self, p: Vector3) -> float:
        u = p.x - math.floor(p.x)
        v = p.y - math.floor(p.y)
        w = p.z - math.floor(p.z)

        i = int(math.floor(p.x))
        j = int(math.floor(p.y))
        k = int(math.floor(p.z))

        # Hermite smoothing of the fractional parts.
        uu = u * u * (3 - 2 * u)
        vv = v * v * (3 - 2 * v)
        ww = w * w * (3 - 2 * w)

        accum = 0.0
        for di in (0, 1):
            for dj in (0, 1):
                for dk in (0, 1):
                    gx, gy, gz = self.ranvec[
                        self.perm_x[(i + di) & 255]
                        ^ self.perm_y[(j + dj) & 255]
                        ^ self.perm_z[(k + dk) & 255]
                    ]
                    weight = gx * (u - di) + gy * (v - dj) + gz * (w - dk)
                    accum += ((di * uu + (1 - di) * (1 - uu))
                              * (dj * vv + (1 - dj) * (1 - vv))
                              * (dk * ww + (1 - dk) * (1 - ww))
                              * weight)
        return accum

    def turb(self, p: Vector3, depth: int = 7) -> float:
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2
        return abs(accum)
