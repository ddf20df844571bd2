# materials/dielectric.py
import math
from core.ray import Ray
from core.utils import reflect, refract, schlick
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.material import Material, ScatterRecord


class Dielectric(Material):
    def __init__(self, ref_idx: float):
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterRecord:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        ni_over_nt = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        # Total internal reflection, or a Fresnel-weighted coin flip
        cannot_refract = ni_over_nt * sin_theta > 1.0
        if cannot_refract or schlick(cos_theta, ni_over_nt) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ni_over_nt)

        return ScatterRecord(attenuation, skip_pdf=True,
                             skip_pdf_ray=Ray(rec.p, direction, ray_in.time))
