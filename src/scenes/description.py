# scenes/description.py
from dataclasses import dataclass
from typing import Optional

from camera.camera import Camera
from geometry.hittable import Hittable
from renderer.background import Background


@dataclass
class SceneDescription:
    """
    Everything the renderer needs for one image.

    ``world`` is usually a BVH built over the scene's objects. ``lights`` holds
    the objects sampled explicitly at diffuse bounces; None disables light
    sampling. ``time0``/``time1`` is the shutter interval used for the
    moving-object bounding boxes and the camera.
    """
    world: Hittable
    lights: Optional[Hittable]
    camera: Camera
    background: Background
    time0: float = 0.0
    time1: float = 0.0
