"""Fixed-kernel convolution with clamp-to-edge borders.

Kernels are applied to the RGB channels of an RGBA uint8 image; alpha is
passed through. Border pixels are computed from a copy of the image padded
by repeating the nearest edge pixel, so the output always has the input's
dimensions.

Kernels are given in image orientation (row 0 is the row above the
center pixel) and applied as written, without flipping.

Usage:
    from photostag.ops.convolution import convolve, SHARPEN_KERNEL

    result = convolve(rgba_image, SHARPEN_KERNEL)
"""
import numpy as np

from .tone import _check_rgba, _with_rgb


# ============================================================================
# Kernels
# ============================================================================

EDGE_DETECTION_KERNEL = np.array([
    [-1, -1, -1],
    [-1, 8, -1],
    [-1, -1, -1],
], dtype=np.float32)

EMBOSS_KERNEL = np.array([
    [-2, -1, 0],
    [-1, 0, 1],
    [0, 1, 2],
], dtype=np.float32)

LAPLACE_KERNEL = np.array([
    [0, -1, 0],
    [-1, 4, -1],
    [0, -1, 0],
], dtype=np.float32)

SOBEL_HORIZONTAL_KERNEL = np.array([
    [-1, -2, -1],
    [0, 0, 0],
    [1, 2, 1],
], dtype=np.float32)

SOBEL_VERTICAL_KERNEL = np.array([
    [-1, 0, 1],
    [-2, 0, 2],
    [-1, 0, 1],
], dtype=np.float32)

SHARPEN_KERNEL = np.array([
    [0, -1, 0],
    [-1, 5, -1],
    [0, -1, 0],
], dtype=np.float32)


def gaussian_kernel(radius: int, sigma: float | None = None) -> np.ndarray:
    """Normalized square Gaussian kernel of size 2 * radius + 1.

    Args:
        radius: Kernel radius in pixels (>= 1)
        sigma: Standard deviation, defaults to radius / 2

    Returns:
        float32 kernel summing to 1.0
    """
    if radius < 1:
        raise ValueError(f"Radius must be >= 1, got {radius}")
    sigma = sigma if sigma is not None else max(radius / 2.0, 0.5)
    offsets = np.arange(-radius, radius + 1, dtype=np.float32)
    weights = np.exp(-(offsets ** 2) / (2.0 * sigma ** 2))
    kernel = np.outer(weights, weights)
    return (kernel / kernel.sum()).astype(np.float32)


GAUSSIAN_BLUR_RADIUS = 2
GAUSSIAN_BLUR_KERNEL = gaussian_kernel(GAUSSIAN_BLUR_RADIUS)

# The constants are shared by every caller
for _kernel in (
    EDGE_DETECTION_KERNEL, EMBOSS_KERNEL, LAPLACE_KERNEL,
    SOBEL_HORIZONTAL_KERNEL, SOBEL_VERTICAL_KERNEL, SHARPEN_KERNEL,
    GAUSSIAN_BLUR_KERNEL,
):
    _kernel.setflags(write=False)


# ============================================================================
# Convolution
# ============================================================================

def convolve(image: np.ndarray, kernel: np.ndarray, offset: float = 0.0) -> np.ndarray:
    """Apply a kernel to the RGB channels with clamp-to-edge padding.

    Args:
        image: RGBA uint8 array (H, W, 4)
        kernel: 2D float array with odd height and width
        offset: Constant added after weighting (e.g. 128 to center signed results)

    Returns:
        RGBA uint8 array of the same shape, values clamped to 0-255
    """
    _check_rgba(image)
    kernel = np.asarray(kernel, dtype=np.float32)
    if kernel.ndim != 2 or kernel.shape[0] % 2 == 0 or kernel.shape[1] % 2 == 0:
        raise ValueError(f"Expected 2D kernel with odd dimensions, got shape {kernel.shape}")

    h, w = image.shape[:2]
    ry, rx = kernel.shape[0] // 2, kernel.shape[1] // 2
    rgb = image[:, :, :3].astype(np.float32)
    padded = np.pad(rgb, ((ry, ry), (rx, rx), (0, 0)), mode="edge")

    acc = np.zeros_like(rgb)
    for ky in range(kernel.shape[0]):
        for kx in range(kernel.shape[1]):
            weight = kernel[ky, kx]
            if weight == 0.0:
                continue
            acc += weight * padded[ky:ky + h, kx:kx + w]
    if offset:
        acc += np.float32(offset)
    return _with_rgb(image, acc)


__all__ = [
    'EDGE_DETECTION_KERNEL', 'EMBOSS_KERNEL', 'LAPLACE_KERNEL',
    'SOBEL_HORIZONTAL_KERNEL', 'SOBEL_VERTICAL_KERNEL', 'SHARPEN_KERNEL',
    'GAUSSIAN_BLUR_RADIUS', 'GAUSSIAN_BLUR_KERNEL',
    'gaussian_kernel', 'convolve',
]
