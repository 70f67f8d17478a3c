"""Fixed-kernel convolution effects."""

from typing import ClassVar

import numpy as np

from photostag.ops import convolution

from .base import BaseEffect
from .registry import register_effect


class KernelEffect(BaseEffect):
    """Convolves RGB with a constant kernel, clamp-to-edge at the borders."""

    category: ClassVar[str] = "convolution"
    kernel: ClassVar[np.ndarray]
    offset: ClassVar[float] = 0.0

    def apply(self, image: np.ndarray) -> np.ndarray:
        return convolution.convolve(image, self.kernel, self.offset)


@register_effect("edge_detection")
class EdgeDetectionEffect(KernelEffect):
    """8-neighbour Laplacian edge detection."""

    effect_type: ClassVar[str] = "edge_detection"
    name: ClassVar[str] = "Edge Detection"
    description: ClassVar[str] = "Highlight edges in all directions"
    kernel: ClassVar[np.ndarray] = convolution.EDGE_DETECTION_KERNEL


@register_effect("emboss")
class EmbossEffect(KernelEffect):
    effect_type: ClassVar[str] = "emboss"
    name: ClassVar[str] = "Emboss"
    description: ClassVar[str] = "Raised relief look"
    kernel: ClassVar[np.ndarray] = convolution.EMBOSS_KERNEL
    # Centers flat areas on mid-gray
    offset: ClassVar[float] = 128.0


@register_effect("laplace")
class LaplaceEffect(KernelEffect):
    """4-neighbour Laplacian."""

    effect_type: ClassVar[str] = "laplace"
    name: ClassVar[str] = "Laplace"
    description: ClassVar[str] = "Laplacian edge detection"
    kernel: ClassVar[np.ndarray] = convolution.LAPLACE_KERNEL


@register_effect("sobel_horizontal")
class SobelHorizontalEffect(KernelEffect):
    """Responds to horizontal edges (vertical gradient)."""

    effect_type: ClassVar[str] = "sobel_horizontal"
    name: ClassVar[str] = "Sobel Horizontal"
    description: ClassVar[str] = "Detect horizontal edges"
    kernel: ClassVar[np.ndarray] = convolution.SOBEL_HORIZONTAL_KERNEL


@register_effect("sobel_vertical")
class SobelVerticalEffect(KernelEffect):
    """Responds to vertical edges (horizontal gradient)."""

    effect_type: ClassVar[str] = "sobel_vertical"
    name: ClassVar[str] = "Sobel Vertical"
    description: ClassVar[str] = "Detect vertical edges"
    kernel: ClassVar[np.ndarray] = convolution.SOBEL_VERTICAL_KERNEL


@register_effect("blur")
class BlurEffect(KernelEffect):
    """Gaussian blur with a fixed radius."""

    effect_type: ClassVar[str] = "blur"
    name: ClassVar[str] = "Blur"
    description: ClassVar[str] = f"Gaussian blur, radius {convolution.GAUSSIAN_BLUR_RADIUS}"
    category: ClassVar[str] = "blur"
    kernel: ClassVar[np.ndarray] = convolution.GAUSSIAN_BLUR_KERNEL


@register_effect("sharpen")
class SharpenEffect(KernelEffect):
    effect_type: ClassVar[str] = "sharpen"
    name: ClassVar[str] = "Sharpen"
    description: ClassVar[str] = "Sharpen details"
    category: ClassVar[str] = "sharpen"
    kernel: ClassVar[np.ndarray] = convolution.SHARPEN_KERNEL
