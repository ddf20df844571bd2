# materials/diffuse_light.py
from typing import Union
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.material import Material, as_texture
from materials.textures import Texture


class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance with optional texture support.

    The light is one-sided: only hits on the front face emit, the back face is black.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        self.texture = as_texture(emit)

    def emitted(self, ray_in: Ray, rec: HitRecord, u: float, v: float, p: Vector3) -> Vector3:
        if not rec.front_face:
            return Vector3(0, 0, 0)
        return self.texture.value(u, v, p)
