# materials/textures.py
import math
from typing import Optional, Union
import numpy as np
from PIL import Image, UnidentifiedImageError
from core.errors import TextureLoadError
from core.perlin import Perlin
from core.utils import clamp
from core.vector import Vector3


class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        """Sample the texture at surface coordinates (u, v) and point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")


class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.color


class CheckerTexture(Texture):
    """A 3D checker pattern alternating between two textures."""
    def __init__(self, even: Union[Vector3, Texture], odd: Union[Vector3, Texture], scale: float = 10.0):
        self.even = even if isinstance(even, Texture) else SolidColor(even)
        self.odd = odd if isinstance(odd, Texture) else SolidColor(odd)
        self.scale = scale

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        sines = (math.sin(self.scale * p.x)
                 * math.sin(self.scale * p.y)
                 * math.sin(self.scale * p.z))
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)


class NoiseTexture(Texture):
    """A marble-like texture driven by Perlin turbulence."""
    def __init__(self, scale: float = 1.0, seed: Optional[int] = None):
        self.noise = Perlin(seed)
        self.scale = scale

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return Vector3(1, 1, 1) * 0.5 * (1 + math.sin(self.scale * p.z + 10 * self.noise.turb(p)))


class ImageTexture(Texture):
    """
    A texture from an image file.

    The file is read eagerly; a missing or unreadable image raises
    TextureLoadError instead of rendering with a placeholder.
    """
    def __init__(self, image_path: str):
        self.image_path = image_path
        try:
            with Image.open(image_path) as img:
                if img.mode != 'RGB':
                    img = img.convert('RGB')
                self.data = np.asarray(img, dtype=np.float64) / 255.0
        except (FileNotFoundError, UnidentifiedImageError, OSError) as e:
            raise TextureLoadError(f"Error loading texture {image_path}: {e}") from e
        self.height, self.width = self.data.shape[:2]

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        u = clamp(u, 0.0, 1.0)
        v = 1.0 - clamp(v, 0.0, 1.0)  # Flip V to image coordinates

        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        return Vector3(float(color[0]), float(color[1]), float(color[2]))
