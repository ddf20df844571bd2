# materials/isotropic.py
import math
from typing import Union
from core.pdf import SpherePDF
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.material import Material, ScatterRecord, as_texture
from materials.textures import Texture


class Isotropic(Material):
    """Phase function of a participating medium: scatters uniformly in all directions."""
    def __init__(self, albedo: Union[Vector3, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterRecord:
        attenuation = self.texture.value(rec.u, rec.v, rec.p)
        return ScatterRecord(attenuation, pdf=SpherePDF())

    def scattering_pdf(self, ray_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        return 1.0 / (4.0 * math.pi)
