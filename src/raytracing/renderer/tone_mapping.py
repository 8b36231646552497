# renderer/tone_mapping.py
import numpy as np
from numba import njit
from raytracing.core.vector import Vector3


def clamp_color(color: Vector3) -> Vector3:
    """
    Saturate each channel of a linear colour to [0, 1].
    """
    return Vector3(
        min(max(color.x, 0.0), 1.0),
        min(max(color.y, 0.0), 1.0),
        min(max(color.z, 0.0), 1.0)
    )


@njit(cache=False)
def quantize_kernel(linear_image, output_image):
    height, width, channels = linear_image.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                v = linear_image[y, x, c]
                if v < 0.0:
                    v = 0.0
                elif v > 1.0:
                    v = 1.0
                # Round to nearest 8-bit level.
                output_image[y, x, c] = int(v * 255.0 + 0.5)


def to_rgb8(linear_image: np.ndarray) -> np.ndarray:
    """
    Convert a linear float image of shape (height, width, 3) into 8-bit RGB.
    No gamma is applied.
    """
    linear = np.ascontiguousarray(linear_image, dtype=np.float32)
    output = np.empty(linear.shape, dtype=np.uint8)
    quantize_kernel(linear, output)
    return output
