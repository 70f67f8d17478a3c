"""Color adjustment kernels in normalized float space.

This module provides brightness, contrast, saturation and hue rotation
on float32 RGB arrays with values 0.0-1.0. Every function clamps its
output back to 0.0-1.0 so a stage never hands overflow to the next one.

## Supported Formats

| Format | Shape | Type | Description |
|--------|-------|------|-------------|
| RGB float | (H, W, 3) | float32 | 3 channels, 0.0-1.0 |

Use :func:`to_float` / :func:`to_u8` to move between RGBA uint8 rasters
and this representation; alpha stays outside the float pipeline.

Usage:
    from photostag.ops.color_adjust import to_float, to_u8, brightness, hue_rotate

    rgb = to_float(rgba)
    rgb = brightness(rgb, 1.2)
    rgb = hue_rotate(rgb, 45.0)
    rgba = to_u8(rgb, rgba[:, :, 3])
"""
import math

import numpy as np

from .tone import LUMA_R, LUMA_G, LUMA_B


def _check_rgb_f32(image: np.ndarray) -> None:
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected RGB image (H, W, 3), got shape {image.shape}")
    if image.dtype != np.float32:
        raise ValueError(f"Expected float32 dtype, got {image.dtype}")


# ============================================================================
# Conversion
# ============================================================================

def to_float(image: np.ndarray) -> np.ndarray:
    """RGB channels of an RGBA uint8 image as float32 0.0-1.0 (H, W, 3)."""
    if image.ndim != 3 or image.shape[2] != 4:
        raise ValueError(f"Expected RGBA image (H, W, 4), got shape {image.shape}")
    return image[:, :, :3].astype(np.float32) / 255.0


def to_u8(rgb: np.ndarray, alpha: np.ndarray) -> np.ndarray:
    """Recombine float RGB (0.0-1.0) and uint8 alpha into RGBA uint8."""
    _check_rgb_f32(rgb)
    result = np.empty(rgb.shape[:2] + (4,), dtype=np.uint8)
    result[:, :, :3] = np.clip(np.rint(rgb * 255.0), 0, 255).astype(np.uint8)
    result[:, :, 3] = alpha
    return result


# ============================================================================
# Adjustments
# ============================================================================

def brightness(image: np.ndarray, factor: float = 1.0) -> np.ndarray:
    """Scale brightness.

    Args:
        image: float32 RGB array (H, W, 3), values 0.0-1.0
        factor: 0.0 (black) upwards, 1.0 = no change

    Returns:
        Adjusted float32 RGB array
    """
    _check_rgb_f32(image)
    return np.clip(image * np.float32(factor), 0.0, 1.0)


def contrast(image: np.ndarray, factor: float = 1.0) -> np.ndarray:
    """Scale contrast around mid-gray.

    Args:
        image: float32 RGB array (H, W, 3), values 0.0-1.0
        factor: 0.0 (flat gray) upwards, 1.0 = no change

    Returns:
        Adjusted float32 RGB array
    """
    _check_rgb_f32(image)
    return np.clip((image - 0.5) * np.float32(factor) + 0.5, 0.0, 1.0)


def saturation(image: np.ndarray, factor: float = 1.0) -> np.ndarray:
    """Scale color saturation against BT.709 luminance.

    Args:
        image: float32 RGB array (H, W, 3), values 0.0-1.0
        factor: 0.0 (grayscale) upwards, 1.0 = no change

    Returns:
        Adjusted float32 RGB array
    """
    _check_rgb_f32(image)
    gray = (LUMA_R * image[:, :, 0] + LUMA_G * image[:, :, 1] + LUMA_B * image[:, :, 2])[:, :, np.newaxis]
    return np.clip(gray + (image - gray) * np.float32(factor), 0.0, 1.0).astype(np.float32)


def hue_rotation_matrix(degrees: float) -> np.ndarray:
    """Luminance-preserving 3x3 RGB hue rotation matrix."""
    rad = math.radians(degrees)
    c = math.cos(rad)
    s = math.sin(rad)
    return np.array([
        [0.213 + c * 0.787 - s * 0.213, 0.715 - c * 0.715 - s * 0.715, 0.072 - c * 0.072 + s * 0.928],
        [0.213 - c * 0.213 + s * 0.143, 0.715 + c * 0.285 + s * 0.140, 0.072 - c * 0.072 - s * 0.283],
        [0.213 - c * 0.213 - s * 0.787, 0.715 - c * 0.715 + s * 0.715, 0.072 + c * 0.928 + s * 0.072],
    ], dtype=np.float32)


def hue_rotate(image: np.ndarray, degrees: float = 0.0) -> np.ndarray:
    """Rotate hue by the given angle.

    Args:
        image: float32 RGB array (H, W, 3), values 0.0-1.0
        degrees: Rotation angle, 0 = no change

    Returns:
        Adjusted float32 RGB array
    """
    _check_rgb_f32(image)
    matrix = hue_rotation_matrix(degrees)
    return np.clip(image @ matrix.T, 0.0, 1.0).astype(np.float32)


__all__ = [
    'to_float', 'to_u8',
    'brightness', 'contrast', 'saturation',
    'hue_rotation_matrix', 'hue_rotate',
]
