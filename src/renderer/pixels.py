# renderer/pixels.py
import numpy as np


def unpack_rgb(buffer: np.ndarray, width: int, height: int) -> np.ndarray:
    """
    Splits a packed 0xRRGGBB frame into channels.

    Args:
        buffer: Row-major uint32 array of width * height pixels.
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        np.ndarray: A (height x width x 3) uint8 array.
    """
    packed = np.asarray(buffer, dtype=np.uint32).reshape(height, width)
    rgb = np.empty((height, width, 3), dtype=np.uint8)
    rgb[:, :, 0] = (packed >> 16) & 0xFF
    rgb[:, :, 1] = (packed >> 8) & 0xFF
    rgb[:, :, 2] = packed & 0xFF
    return rgb


def to_surface_array(buffer: np.ndarray, width: int, height: int) -> np.ndarray:
    """
    Returns the frame as a (width x height x 3) array, the layout
    pygame.surfarray expects.
    """
    return unpack_rgb(buffer, width, height).transpose(1, 0, 2)
