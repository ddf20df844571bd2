# renderer/tone_mapping.py
import numpy as np

# Largest value kept before scaling to 8 bits, so 256 * x never reaches 256.
MAX_INTENSITY = 0.999


def gamma_correct(averaged: np.ndarray, gamma: float = 2.0) -> np.ndarray:
    """
    Apply gamma correction (square root for gamma 2) to an image of averaged
    linear radiance and clamp it to [0, MAX_INTENSITY]. NaNs map to 0.
    """
    linear = np.nan_to_num(np.asarray(averaged, dtype=np.float64), nan=0.0, posinf=1.0, neginf=0.0)
    corrected = np.power(np.clip(linear, 0.0, None), 1.0 / gamma)
    return np.clip(corrected, 0.0, MAX_INTENSITY)


def to_uint8(averaged: np.ndarray, gamma: float = 2.0) -> np.ndarray:
    """Gamma corrects and scales an averaged image to 8-bit integers."""
    return (256.0 * gamma_correct(averaged, gamma)).astype(np.uint8)
