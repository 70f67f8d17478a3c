"""Per-pixel stylize kernels: threshold, solarize, posterize.

## Input Format

These functions operate on **numpy RGBA arrays only**:
- Shape: (height, width, 4) - always 4 channels (RGBA)
- dtype=np.uint8, values 0-255

Alpha is preserved.

Usage:
    from photostag.ops.stylize import posterize, solarize, threshold

    result = posterize(rgba_image, levels=4)
    result = solarize(rgba_image, threshold_val=128)
    result = threshold(rgba_image, threshold_val=128)
"""
import numpy as np

from .tone import _check_rgba, luminance


# ============================================================================
# Threshold
# ============================================================================

def threshold(image: np.ndarray, threshold_val: float = 128) -> np.ndarray:
    """Apply binary threshold.

    Converts to black/white based on luminance threshold.

    Args:
        image: RGBA uint8 array (H, W, 4)
        threshold_val: Luminance threshold (0-255); pixels at or above it
            become white

    Returns:
        Thresholded RGBA uint8 array (black or white)
    """
    _check_rgba(image)
    white = (luminance(image) >= threshold_val).astype(np.uint8) * 255
    return np.stack([white, white, white, image[:, :, 3]], axis=2)


# ============================================================================
# Solarize
# ============================================================================

def solarize(image: np.ndarray, threshold_val: float = 128) -> np.ndarray:
    """Apply solarize effect.

    Inverts the color of every pixel whose luminance is at or above the
    threshold, creating a part-negative effect.

    Args:
        image: RGBA uint8 array (H, W, 4)
        threshold_val: Luminance threshold (0-255)

    Returns:
        Solarized RGBA uint8 array
    """
    _check_rgba(image)
    mask = (luminance(image) >= threshold_val)[:, :, np.newaxis]
    result = image.copy()
    result[:, :, :3] = np.where(mask, 255 - image[:, :, :3], image[:, :, :3])
    return result


# ============================================================================
# Posterize
# ============================================================================

def posterize(image: np.ndarray, levels: int = 4) -> np.ndarray:
    """Reduce color levels / posterize.

    Quantizes each channel to the specified number of levels, evenly
    spread over 0-255.

    Args:
        image: RGBA uint8 array (H, W, 4)
        levels: Number of levels per channel (2-256)

    Returns:
        Posterized RGBA uint8 array
    """
    _check_rgba(image)
    levels = max(2, min(256, levels))
    divisor = 256 // levels
    multiplier = 255 // (levels - 1)

    result = image.copy()
    buckets = np.minimum(image[:, :, :3] // divisor, levels - 1)
    result[:, :, :3] = (buckets * multiplier).astype(np.uint8)
    return result


__all__ = ['threshold', 'solarize', 'posterize']
