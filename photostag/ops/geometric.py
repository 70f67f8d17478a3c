"""Geometric kernels: crop, resize, quarter-turn rotation and mirroring.

## Input Format

All functions support (H, W, C) uint8 arrays; the engine always passes
RGBA (C = 4).

## Rotation Direction

All rotations are clockwise (CW):
- 90° CW: (x, y) -> (H - 1 - y, x)
- 180°: (x, y) -> (W - 1 - x, H - 1 - y)
- 270° CW (90° CCW): (x, y) -> (y, W - 1 - x)

Usage:
    from photostag.ops.geometric import crop, resize, rotate, flip_horizontal

    region = crop(image, 10, 10, 64, 64)
    thumb = resize(region, 32, 32)
    turned = rotate(thumb, 90)  # (H, W, C) -> (W, H, C)
"""
import numpy as np
import PIL.Image

ROTATION_ANGLES = (90, 180, 270)


def _check_image(image: np.ndarray) -> None:
    if image.ndim != 3 or image.shape[2] not in (1, 3, 4):
        raise ValueError(f"Expected (H, W, C) with C in [1, 3, 4], got {image.shape}")
    if image.dtype != np.uint8:
        raise ValueError(f"Expected uint8, got {image.dtype}")


# ============================================================================
# Crop / Resize
# ============================================================================

def crop(image: np.ndarray, x: int, y: int, width: int, height: int) -> np.ndarray:
    """Cut out a rectangular region.

    Args:
        image: uint8 array (H, W, C)
        x, y: Top-left corner of the region
        width, height: Region size, the region must lie inside the image

    Returns:
        New uint8 array (height, width, C)
    """
    _check_image(image)
    h, w = image.shape[:2]
    if x < 0 or y < 0 or width <= 0 or height <= 0 or x + width > w or y + height > h:
        raise ValueError(f"Region ({x}, {y}, {width}, {height}) outside {w}x{h} image")
    return image[y:y + height, x:x + width].copy()


def fit_size(width: int, height: int, box_width: int, box_height: int) -> tuple[int, int]:
    """Largest size with the aspect ratio of width x height fitting the box.

    Args:
        width, height: Source size
        box_width, box_height: Bounding box

    Returns:
        (new_width, new_height), each at least 1 and within the box
    """
    scale = min(box_width / width, box_height / height)
    new_width = min(box_width, max(1, round(width * scale)))
    new_height = min(box_height, max(1, round(height * scale)))
    return new_width, new_height


def resize(image: np.ndarray, width: int, height: int) -> np.ndarray:
    """Resample to an exact size using Lanczos filtering.

    Resizing to the current size returns an unchanged copy.

    Args:
        image: RGBA uint8 array (H, W, 4)
        width, height: Target size, both >= 1

    Returns:
        Resized RGBA uint8 array (height, width, 4)
    """
    _check_image(image)
    if width < 1 or height < 1:
        raise ValueError(f"Target size must be positive, got {width}x{height}")
    if image.shape[1] == width and image.shape[0] == height:
        return image.copy()
    if image.shape[2] != 4:
        raise ValueError(f"Expected RGBA image (H, W, 4), got shape {image.shape}")
    pil_img = PIL.Image.fromarray(image)
    resized = pil_img.resize((width, height), PIL.Image.Resampling.LANCZOS)
    return np.array(resized, dtype=np.uint8)


# ============================================================================
# Rotation / Mirroring
# ============================================================================

def rotate(image: np.ndarray, degrees: int) -> np.ndarray:
    """Rotate image clockwise by 90, 180 or 270 degrees.

    Args:
        image: uint8 array (H, W, C)
        degrees: Rotation angle (must be 90, 180, or 270)

    Returns:
        Rotated uint8 array. For 90/270, dimensions are swapped.

    Raises:
        ValueError: If degrees is not 90, 180, or 270.
    """
    _check_image(image)
    if degrees not in ROTATION_ANGLES:
        raise ValueError(f"Degrees must be 90, 180, or 270, got {degrees}")
    return np.ascontiguousarray(np.rot90(image, k=-(degrees // 90)))


def flip_horizontal(image: np.ndarray) -> np.ndarray:
    """Flip image horizontally (mirror left-right)."""
    _check_image(image)
    return np.ascontiguousarray(image[:, ::-1])


def flip_vertical(image: np.ndarray) -> np.ndarray:
    """Flip image vertically (mirror top-bottom)."""
    _check_image(image)
    return np.ascontiguousarray(image[::-1])


__all__ = [
    'ROTATION_ANGLES',
    'crop', 'fit_size', 'resize',
    'rotate', 'flip_horizontal', 'flip_vertical',
]
