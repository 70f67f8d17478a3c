"""Per-pixel tone and color mapping kernels.

Building blocks for the filter catalog: luminance, channel matrices,
channel offsets, color overlays and per-channel tone curves (256 entry
lookup tables), plus the intensity blend every filter goes through.

## Input Format

All functions operate on **numpy RGBA arrays**:
- Shape: (height, width, 4)
- dtype: np.uint8, values 0-255

Alpha is passed through untouched by every function in this module.

Usage:
    from photostag.ops.tone import grayscale, sepia, blend

    filtered = sepia(rgba)
    result = blend(rgba, filtered, intensity=0.5)
"""
import numpy as np

# ITU-R BT.709 luminosity coefficients
LUMA_R = 0.2126
LUMA_G = 0.7152
LUMA_B = 0.0722

SEPIA_MATRIX = np.array([
    [0.393, 0.769, 0.189],
    [0.349, 0.686, 0.168],
    [0.272, 0.534, 0.131],
], dtype=np.float32)


def _check_rgba(image: np.ndarray) -> None:
    if image.ndim != 3 or image.shape[2] != 4:
        raise ValueError(f"Expected RGBA image (H, W, 4), got shape {image.shape}")
    if image.dtype != np.uint8:
        raise ValueError(f"Expected uint8 dtype, got {image.dtype}")


def _with_rgb(image: np.ndarray, rgb: np.ndarray) -> np.ndarray:
    """Assemble an RGBA uint8 result from float RGB and the source alpha."""
    result = np.empty_like(image)
    result[:, :, :3] = np.clip(np.rint(rgb), 0, 255).astype(np.uint8)
    result[:, :, 3] = image[:, :, 3]
    return result


# ============================================================================
# Luminance / monochrome
# ============================================================================

def luminance(image: np.ndarray) -> np.ndarray:
    """BT.709 luminance of an RGBA image as float32 (H, W), 0-255."""
    rgb = image[:, :, :3].astype(np.float32)
    return LUMA_R * rgb[:, :, 0] + LUMA_G * rgb[:, :, 1] + LUMA_B * rgb[:, :, 2]


def grayscale(image: np.ndarray) -> np.ndarray:
    """Convert RGBA image to grayscale.

    Uses ITU-R BT.709 luminosity coefficients:
    Y = 0.2126*R + 0.7152*G + 0.0722*B

    Args:
        image: RGBA uint8 array (H, W, 4)

    Returns:
        Grayscale RGBA uint8 array (H, W, 4) with R=G=B=luminosity
    """
    _check_rgba(image)
    gray = luminance(image)
    return _with_rgb(image, np.stack([gray, gray, gray], axis=2))


def sepia(image: np.ndarray) -> np.ndarray:
    """Apply the classic sepia tone matrix.

    Args:
        image: RGBA uint8 array (H, W, 4)

    Returns:
        Sepia-toned RGBA uint8 array
    """
    _check_rgba(image)
    rgb = image[:, :, :3].astype(np.float32)
    return _with_rgb(image, rgb @ SEPIA_MATRIX.T)


def invert(image: np.ndarray, channels: tuple[int, ...] = (0, 1, 2)) -> np.ndarray:
    """Invert the given color channels (255 - value).

    Args:
        image: RGBA uint8 array (H, W, 4)
        channels: Channel indices to invert, 0=R, 1=G, 2=B

    Returns:
        RGBA uint8 array with the selected channels inverted
    """
    _check_rgba(image)
    if any(c not in (0, 1, 2) for c in channels):
        raise ValueError(f"Only color channels 0-2 can be inverted, got {channels}")
    result = image.copy()
    for c in channels:
        result[:, :, c] = 255 - image[:, :, c]
    return result


# ============================================================================
# Channel offsets, overlays and contrast
# ============================================================================

def channel_offset(image: np.ndarray, red: float = 0.0, green: float = 0.0, blue: float = 0.0) -> np.ndarray:
    """Add a constant to each color channel, clamped to 0-255.

    Args:
        image: RGBA uint8 array (H, W, 4)
        red, green, blue: Offsets in 8-bit units, may be negative

    Returns:
        Shifted RGBA uint8 array
    """
    _check_rgba(image)
    rgb = image[:, :, :3].astype(np.float32)
    rgb += np.array([red, green, blue], dtype=np.float32)
    return _with_rgb(image, rgb)


def overlay(image: np.ndarray, color: tuple[int, int, int], mix: float) -> np.ndarray:
    """Mix a flat color into the image.

    Args:
        image: RGBA uint8 array (H, W, 4)
        color: RGB overlay color
        mix: 0.0 (no change) to 1.0 (solid color)

    Returns:
        Tinted RGBA uint8 array
    """
    _check_rgba(image)
    rgb = image[:, :, :3].astype(np.float32)
    tint = np.array(color, dtype=np.float32)
    return _with_rgb(image, rgb + (tint - rgb) * mix)


def contrast(image: np.ndarray, amount: float) -> np.ndarray:
    """Stretch or compress contrast around mid-gray.

    Uses the classic 8-bit contrast correction factor
    F = 259 * (C + 255) / (255 * (259 - C)).

    Args:
        image: RGBA uint8 array (H, W, 4)
        amount: -255 (flat gray) to 255 (maximum contrast), 0 = no change

    Returns:
        Contrast-adjusted RGBA uint8 array
    """
    _check_rgba(image)
    amount = max(-255.0, min(255.0, float(amount)))
    factor = (259.0 * (amount + 255.0)) / (255.0 * (259.0 - amount))
    rgb = image[:, :, :3].astype(np.float32)
    return _with_rgb(image, (rgb - 128.0) * factor + 128.0)


# ============================================================================
# Tone curves
# ============================================================================

def tone_curve(points: list[tuple[int, int]]) -> np.ndarray:
    """Build a 256 entry lookup table from curve control points.

    Points are (input, output) pairs in 0-255 and are linearly
    interpolated. The end points 0 and 255 default to identity.

    Args:
        points: Control points sorted by input value

    Returns:
        uint8 lookup table of shape (256,)
    """
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    if xs != sorted(xs):
        raise ValueError(f"Curve points must be sorted by input value, got {xs}")
    if xs[0] != 0:
        xs.insert(0, 0)
        ys.insert(0, 0)
    if xs[-1] != 255:
        xs.append(255)
        ys.append(255)
    lut = np.interp(np.arange(256), xs, ys)
    return np.clip(np.rint(lut), 0, 255).astype(np.uint8)


IDENTITY_CURVE = np.arange(256, dtype=np.uint8)


def apply_curves(
    image: np.ndarray,
    red: np.ndarray = IDENTITY_CURVE,
    green: np.ndarray = IDENTITY_CURVE,
    blue: np.ndarray = IDENTITY_CURVE,
) -> np.ndarray:
    """Map each color channel through its lookup table.

    Args:
        image: RGBA uint8 array (H, W, 4)
        red, green, blue: uint8 lookup tables of shape (256,)

    Returns:
        Mapped RGBA uint8 array
    """
    _check_rgba(image)
    result = image.copy()
    for c, lut in enumerate((red, green, blue)):
        if lut.shape != (256,):
            raise ValueError(f"Expected lookup table of shape (256,), got {lut.shape}")
        result[:, :, c] = lut[image[:, :, c]]
    return result


# ============================================================================
# Intensity blend
# ============================================================================

def blend(original: np.ndarray, filtered: np.ndarray, intensity: float) -> np.ndarray:
    """Linearly interpolate (or extrapolate) between two RGBA images.

    ``original + (filtered - original) * intensity``, rounded and clamped to
    0-255. Intensity 0 returns the original, 1 the filtered image, values
    above 1 push the effect further. Alpha is taken from the original.

    Args:
        original: RGBA uint8 array (H, W, 4)
        filtered: RGBA uint8 array of the same shape
        intensity: Blend factor, >= 0

    Returns:
        Blended RGBA uint8 array
    """
    _check_rgba(original)
    _check_rgba(filtered)
    if original.shape != filtered.shape:
        raise ValueError(f"Shape mismatch: {original.shape} vs {filtered.shape}")
    if intensity == 1.0:
        result = filtered.copy()
        result[:, :, 3] = original[:, :, 3]
        return result
    base = original[:, :, :3].astype(np.float32)
    target = filtered[:, :, :3].astype(np.float32)
    return _with_rgb(original, base + (target - base) * np.float32(intensity))


__all__ = [
    'LUMA_R', 'LUMA_G', 'LUMA_B',
    'luminance', 'grayscale', 'sepia', 'invert',
    'channel_offset', 'overlay', 'contrast',
    'tone_curve', 'apply_curves', 'IDENTITY_CURVE',
    'blend',
]
