# materials/lambertian.py
import math
from typing import Union
from core.pdf import CosinePDF
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.material import Material, ScatterRecord, as_texture
from materials.textures import Texture


class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.

    The scattered direction is left to the integrator: the record carries a
    cosine-weighted PDF around the surface normal.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterRecord:
        attenuation = self.texture.value(rec.u, rec.v, rec.p)
        return ScatterRecord(attenuation, pdf=CosinePDF(rec.normal))

    def scattering_pdf(self, ray_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        cosine = rec.normal.dot(scattered.direction.normalize())
        return 0.0 if cosine < 0 else cosine / math.pi
