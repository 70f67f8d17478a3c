"""
Color adjustment engine.

Stages run in a fixed order, brightness -> contrast -> saturation -> hue,
in normalized float space with a clamp after each stage. A stage at its
identity value is skipped, so an all-default call returns the input
pixels unchanged.
"""

from __future__ import annotations

from .descriptor import AdjustOperation
from .exceptions import InvalidParameterError
from .ops import color_adjust
from .raster import RasterImage

FACTOR_RANGE = (0.0, 3.0)
HUE_RANGE = (-180.0, 180.0)


def _check_range(label: str, value: float, bounds: tuple[float, float]) -> None:
    low, high = bounds
    if not low <= value <= high:
        raise InvalidParameterError(f"{label} must be between {low} and {high}, got {value}")


def apply_adjustments(
    image: RasterImage,
    brightness: float = 1.0,
    contrast: float = 1.0,
    saturation: float = 1.0,
    hue_rotation: float = 0.0,
) -> RasterImage:
    """
    Applies color adjustments.

    :param image: Source raster, left untouched
    :param brightness: RGB multiplier, 0-3
    :param contrast: Scale around mid-gray, 0-3
    :param saturation: Scale against luminance, 0 (gray) to 3
    :param hue_rotation: Degrees, -180 to 180
    :return: New raster, alpha unchanged
    :raises InvalidParameterError: If a value is outside its range
    """
    _check_range("Brightness", brightness, FACTOR_RANGE)
    _check_range("Contrast", contrast, FACTOR_RANGE)
    _check_range("Saturation", saturation, FACTOR_RANGE)
    _check_range("Hue rotation", hue_rotation, HUE_RANGE)

    if brightness == 1.0 and contrast == 1.0 and saturation == 1.0 and hue_rotation == 0.0:
        return image.copy()

    rgb = color_adjust.to_float(image.pixels)
    if brightness != 1.0:
        rgb = color_adjust.brightness(rgb, brightness)
    if contrast != 1.0:
        rgb = color_adjust.contrast(rgb, contrast)
    if saturation != 1.0:
        rgb = color_adjust.saturation(rgb, saturation)
    if hue_rotation != 0.0:
        rgb = color_adjust.hue_rotate(rgb, hue_rotation)
    return RasterImage(color_adjust.to_u8(rgb, image.pixels[:, :, 3]))


def apply_adjust_operation(image: RasterImage, operation: AdjustOperation) -> RasterImage:
    """Applies the adjustments of an 'adjust' descriptor."""
    return apply_adjustments(
        image,
        brightness=operation.brightness,
        contrast=operation.contrast,
        saturation=operation.saturation,
        hue_rotation=operation.hue_rotation,
    )


__all__ = ["apply_adjustments", "apply_adjust_operation"]
