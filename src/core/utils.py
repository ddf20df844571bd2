# core/utils.py
import math
from core.vector import Vector3


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def clamp(x: float, lo: float, hi: float) -> float:
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x


def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p


def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalize()


def random_in_unit_disk(rng) -> Vector3:
    """
    Returns a random point inside the unit disk in the xy-plane.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0.0)
        if p.dot(p) < 1.0:
            return p


def random_cosine_direction(rng) -> Vector3:
    """
    Returns a direction in the local z-up frame distributed with density
    cos(theta) / pi over the upper hemisphere.
    """
    r1 = rng.random()
    r2 = rng.random()
    phi = 2 * math.pi * r1
    sqrt_r2 = math.sqrt(r2)
    return Vector3(math.cos(phi) * sqrt_r2,
                   math.sin(phi) * sqrt_r2,
                   math.sqrt(1 - r2))


def random_to_sphere(radius: float, distance_squared: float, rng) -> Vector3:
    """
    Returns a direction in the local z-up frame uniformly distributed over the
    cone subtended by a sphere of the given radius at the given squared distance.
    """
    r1 = rng.random()
    r2 = rng.random()
    cos_theta_max = math.sqrt(max(0.0, 1 - radius * radius / distance_squared))
    z = 1 + r2 * (cos_theta_max - 1)
    phi = 2 * math.pi * r1
    sin_theta = math.sqrt(max(0.0, 1 - z * z))
    return Vector3(math.cos(phi) * sin_theta, math.sin(phi) * sin_theta, z)


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with unit normal n (Snell's law).
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel


def schlick(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation of Fresnel reflectance."""
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)

