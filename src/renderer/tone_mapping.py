# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit

@njit
def linear_to_gamma(component):
    """Gamma 2 transfer: the square root of non-negative linear radiance."""
    if component > 0.0:
        return math.sqrt(component)
    return 0.0

@njit
def gamma_encode_kernel(linear_image, output_image):
    height, width, channels = linear_image.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                value = linear_to_gamma(linear_image[y, x, c])
                if value > 1.0:
                    value = 1.0
                output_image[y, x, c] = np.uint8(value * 255.9999)

def gamma_encode(linear_image: np.ndarray) -> np.ndarray:
    """
    Convert a (height, width, 3) linear radiance image to 8-bit sRGB-ish
    values: gamma 2, clamp to [0, 1], quantize.
    """
    linear_image = np.ascontiguousarray(linear_image, dtype=np.float32)
    if linear_image.ndim != 3 or linear_image.shape[2] != 3:
        raise ValueError(f"Expected a (height, width, 3) image, got shape {linear_image.shape}")
    output = np.empty(linear_image.shape, dtype=np.uint8)
    gamma_encode_kernel(linear_image, output)
    return output
