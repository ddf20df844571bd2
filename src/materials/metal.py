# materials/metal.py
from typing import Optional, Union
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material, ScatterRecord, as_texture
from materials.textures import Texture


class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float):
        self.texture = as_texture(albedo)
        self.fuzz = min(fuzz, 1)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[ScatterRecord]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * self.fuzz, ray_in.time)

        if scattered.direction.dot(rec.normal) <= 0:
            return None  # Absorb the ray if it does not scatter forward

        attenuation = self.texture.value(rec.u, rec.v, rec.p)
        return ScatterRecord(attenuation, skip_pdf=True, skip_pdf_ray=scattered)
