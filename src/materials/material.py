# materials/material.py
from typing import Optional, Union
from core.pdf import PDF
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.textures import Texture, SolidColor


class ScatterRecord:
    """
    Outcome of a scattering event.

    Diffuse-style materials supply ``pdf`` and leave ``skip_pdf`` False so the
    integrator may mix in light sampling. Specular materials set ``skip_pdf``
    and give the already-determined ``skip_pdf_ray``.
    """
    __slots__ = ("attenuation", "pdf", "skip_pdf", "skip_pdf_ray")

    def __init__(self, attenuation: Vector3, pdf: Optional[PDF] = None,
                 skip_pdf: bool = False, skip_pdf_ray: Optional[Ray] = None):
        self.attenuation = attenuation
        self.pdf = pdf
        self.skip_pdf = skip_pdf
        self.skip_pdf_ray = skip_pdf_ray


def as_texture(albedo: Union[Vector3, Texture]) -> Texture:
    if isinstance(albedo, Texture):
        return albedo
    return SolidColor(albedo)


class Material:
    """
    Abstract material class. Materials are shared between objects and never
    mutated after construction.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[ScatterRecord]:
        """
        Returns a ScatterRecord, or None if the material absorbs the ray.
        """
        return None

    def scattering_pdf(self, ray_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        return 0.0

    def emitted(self, ray_in: Ray, rec: HitRecord, u: float, v: float, p: Vector3) -> Vector3:
        return Vector3(0, 0, 0)
