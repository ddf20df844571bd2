# renderer/export.py
"""
Writing rendered images to disk.

Input images are the renderer's averaged linear radiance; they are gamma
corrected and quantised to 8 bits here. Supported formats:
    - PPM (plain-text P3)
    - PNG (via Pillow)
"""
import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from core.errors import ConfigurationError
from renderer.tone_mapping import to_uint8

logger = logging.getLogger(__name__)


def ppm_text(pixels: np.ndarray) -> str:
    """P3 text for an (H, W, 3) uint8 array, row-major with the top row first."""
    height, width = pixels.shape[:2]
    lines = [f"P3\n{width} {height}\n255"]
    for row in pixels:
        for r, g, b in row:
            lines.append(f"{r} {g} {b}")
    return "\n".join(lines) + "\n"


def write_ppm(image: np.ndarray, filepath: Union[str, Path]) -> None:
    pixels = to_uint8(image)
    Path(filepath).write_text(ppm_text(pixels))


def save_png(image: np.ndarray, filepath: Union[str, Path]) -> None:
    pixels = to_uint8(image)
    Image.fromarray(pixels).save(filepath)


def save_image(image: np.ndarray, filepath: Union[str, Path]) -> None:
    """Saves the image in the format given by the file suffix (.ppm or .png)."""
    suffix = Path(filepath).suffix.lower()
    if suffix == ".ppm":
        write_ppm(image, filepath)
    elif suffix == ".png":
        save_png(image, filepath)
    else:
        raise ConfigurationError(f"Unsupported output format {suffix!r}; use .ppm or .png")
    logger.info("Wrote %s", filepath)
