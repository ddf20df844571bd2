# materials/presets.py
from core.vector import Vector3
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.textures import CheckerTexture, NoiseTexture


class ColorPresets:
    """Colors shared by the built-in scenes."""

    # Cornell box walls
    RED = Vector3(0.65, 0.05, 0.05)
    WHITE = Vector3(0.73, 0.73, 0.73)
    GREEN = Vector3(0.12, 0.45, 0.15)

    SKY = Vector3(0.7, 0.8, 1.0)
    CHECKER_DARK = Vector3(0.2, 0.3, 0.1)
    CHECKER_LIGHT = Vector3(0.9, 0.9, 0.9)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)


class MetalPresets:
    @staticmethod
    def aluminum() -> Metal:
        return Metal(Vector3(0.8, 0.85, 0.88), fuzz=0.0)

    @staticmethod
    def brushed(color: Vector3 = Vector3(0.8, 0.8, 0.9), fuzz: float = 1.0) -> Metal:
        return Metal(color, fuzz=fuzz)


class DielectricPresets:
    """Dielectrics by refractive index."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)


class LightPresets:
    @staticmethod
    def white(intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(Vector3(1.0, 1.0, 1.0) * intensity)


class TexturePresets:
    @staticmethod
    def checkerboard(color1: Vector3 = None, color2: Vector3 = None, scale: float = 10.0) -> CheckerTexture:
        """Create a checkerboard texture with default or custom colors."""
        if color1 is None:
            color1 = ColorPresets.CHECKER_DARK
        if color2 is None:
            color2 = ColorPresets.CHECKER_LIGHT
        return CheckerTexture(color1, color2, scale)

    @staticmethod
    def marble(scale: float = 4.0, seed: int = None) -> NoiseTexture:
        return NoiseTexture(scale, seed=seed)
