# renderer/tone_mapping.py
import numpy as np
from numba import njit

@njit(cache=True)
def gamma_kernel(linear_image, output_image):
    """
    Clamp to [0, 1], gamma 2 (square root), scale to 8 bits and truncate.
    """
    height, width, _ = linear_image.shape
    for y in range(height):
        for x in range(width):
            for c in range(3):
                v = linear_image[y, x, c]
                if v < 0.0:
                    v = 0.0
                v = min(1.0, np.sqrt(v))
                output_image[y, x, c] = np.uint8(int(255 * v))

def gamma_tone_mapping(accumulated: np.ndarray) -> np.ndarray:
    """
    Convert a (height, width, 3) linear radiance image to 8-bit sRGB-ish
    values with square-root gamma.
    """
    linear = np.ascontiguousarray(accumulated, dtype=np.float64)
    # NaN samples map to black rather than undefined casts.
    linear = np.nan_to_num(linear, nan=0.0, posinf=1.0, neginf=0.0)
    output = np.zeros(linear.shape, dtype=np.uint8)
    gamma_kernel(linear, output)
    return output

def reinhard_tone_mapping(accumulated, exposure=1.0, white_point=1.0, gamma=2.0):
    """
    Apply Reinhard tone mapping to a linear radiance image. Keeps detail in
    bright emissive regions that plain clamping flattens to white.
    """
    scaled = np.nan_to_num(accumulated, nan=0.0) * exposure
    scaled = np.maximum(scaled, 0.0)
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = mapped ** (1.0 / gamma)
    output = (mapped * 255).clip(0, 255).astype("uint8")
    return output

TONE_MAPPERS = {
    "gamma": gamma_tone_mapping,
    "reinhard": reinhard_tone_mapping,
}

def tone_map(accumulated: np.ndarray, method: str = "gamma") -> np.ndarray:
    if method not in TONE_MAPPERS:
        raise ValueError(f"Unknown tone mapping {method!r}, expected one of {sorted(TONE_MAPPERS)}")
    return TONE_MAPPERS[method](accumulated)
