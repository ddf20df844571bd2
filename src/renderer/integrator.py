# renderer/integrator.py
"""
Recursive Monte-Carlo estimator of the rendering equation.

Diffuse bounces draw their direction from an equal mixture of a PDF aimed at
the scene's lights and the material's own PDF, and weight the incoming
radiance by ``brdf_pdf / mixture_pdf``. Specular bounces follow the ray the
material chose. Paths are truncated after ``depth`` bounces.
"""
import math
from typing import Optional

from core.pdf import HittablePDF, MixturePDF
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable
from renderer.background import Background

# Hits closer than this are treated as self-intersections.
T_MIN = 0.001

BLACK = Vector3(0.0, 0.0, 0.0)


def ray_color(ray: Ray, background: Background, world: Hittable,
              lights: Optional[Hittable], depth: int, rng, t_min: float = T_MIN) -> Vector3:
    """
    Radiance arriving along ``ray``.

    Args:
        ray: The ray to trace.
        background: Radiance for rays that leave the scene.
        world: Scene geometry (a BVH or a list).
        lights: Objects to sample explicitly. None or an empty list relies on
            material sampling only.
        depth: Remaining bounces; zero returns black.
        rng: random.Random used for every stochastic decision along the path.
        t_min: Self-intersection threshold.
    """
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, t_min, math.inf, rng)
    if rec is None:
        return background.value(ray)

    emitted = rec.material.emitted(ray, rec, rec.u, rec.v, rec.p)
    srec = rec.material.scatter(ray, rec, rng)
    if srec is None:
        return emitted

    if srec.skip_pdf:
        return emitted + srec.attenuation * ray_color(
            srec.skip_pdf_ray, background, world, lights, depth - 1, rng, t_min)

    # An empty HittableList is falsy, so it falls back to material sampling.
    if lights:
        pdf = MixturePDF(HittablePDF(lights, rec.p), srec.pdf)
    else:
        pdf = srec.pdf

    scattered = Ray(rec.p, pdf.generate(rng), ray.time)
    pdf_val = pdf.value(scattered.direction)
    # Degenerate direction: the sample contributes no scattered light.
    if not pdf_val > 0.0:
        return emitted

    scattering_pdf = rec.material.scattering_pdf(ray, rec, scattered)
    if scattering_pdf == 0.0:
        return emitted

    incoming = ray_color(scattered, background, world, lights, depth - 1, rng, t_min)
    return emitted + srec.attenuation * incoming * (scattering_pdf / pdf_val)
