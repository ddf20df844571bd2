# core/montecarlo.py
"""
Small Monte-Carlo estimators used to sanity check the sampling routines the
renderer relies on. Each returns the estimate; the exact value is noted in
the docstring so callers can report the error.
"""
import math
from typing import Tuple

import numpy as np

from core.utils import random_cosine_direction, random_unit_vector


def estimate_pi(sqrt_n: int, rng) -> Tuple[float, float]:
    """
    Estimates pi by dart throwing into [-1, 1]^2, both with plain uniform
    samples and with samples stratified on a sqrt_n x sqrt_n grid.

    Returns:
        (regular_estimate, stratified_estimate)
    """
    inside = 0
    inside_stratified = 0
    for i in range(sqrt_n):
        for j in range(sqrt_n):
            x = rng.uniform(-1, 1)
            y = rng.uniform(-1, 1)
            if x * x + y * y < 1:
                inside += 1
            x = 2 * ((i + rng.random()) / sqrt_n) - 1
            y = 2 * ((j + rng.random()) / sqrt_n) - 1
            if x * x + y * y < 1:
                inside_stratified += 1
    n = sqrt_n * sqrt_n
    return 4.0 * inside / n, 4.0 * inside_stratified / n


def integrate_x_squared(n: int, rng) -> float:
    """
    Integral of x^2 over [0, 2] (exactly 8/3), importance sampled with
    pdf(x) = 3x^2 / 8, which makes every sample contribute exactly 8/3.
    """
    total = 0.0
    for _ in range(n):
        x = math.pow(rng.uniform(0, 8), 1.0 / 3.0)
        if x == 0.0:
            continue
        total += (x * x) / (3 * x * x / 8)
    return total / n


def integrate_cos_squared_over_sphere(n: int, rng) -> float:
    """Integral of cos^2(theta) over the unit sphere (exactly 4*pi/3)."""
    pdf = 1 / (4 * math.pi)
    samples = np.empty(n)
    for idx in range(n):
        d = random_unit_vector(rng)
        samples[idx] = d.z * d.z / pdf
    return float(samples.mean())


def integrate_cos_cubed(n: int, rng, importance: bool = True) -> float:
    """
    Integral of cos^3(theta) over the hemisphere (exactly pi/2).

    With importance=True directions are cosine distributed, otherwise they
    are uniform over the hemisphere.
    """
    samples = np.empty(n)
    for idx in range(n):
        if importance:
            d = random_cosine_direction(rng)
            samples[idx] = d.z ** 3 / (d.z / math.pi) if d.z > 0 else 0.0
        else:
            cos_theta = 1 - rng.random()
            samples[idx] = cos_theta ** 3 * (2 * math.pi)
    return float(samples.mean())
