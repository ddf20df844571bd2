# materials/texture_loader.py
import logging
import os
from core.errors import TextureLoadError
from materials.textures import ImageTexture

logger = logging.getLogger(__name__)


def load_texture(image_path: str) -> ImageTexture:
    """
    Load an image file as a texture.

    Args:
        image_path: Path to the image file

    Returns:
        ImageTexture object

    Raises:
        TextureLoadError: If the file doesn't exist or cannot be decoded
    """
    if not os.path.exists(image_path):
        raise TextureLoadError(f"Texture file not found: {image_path}")

    texture = ImageTexture(image_path)
    logger.debug("Loaded texture %s (%dx%d)", image_path, texture.width, texture.height)
    return texture


def create_image_material(image_path: str, material_class, **material_params):
    """
    Create a material with an image texture.

    Args:
        image_path: Path to the image file
        material_class: Material class to instantiate (e.g., Lambertian, Isotropic)
        **material_params: Additional parameters for the material

    Returns:
        Material instance with the image texture
    """
    texture = load_texture(image_path)
    return material_class(texture, **material_params)
