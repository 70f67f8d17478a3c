"""
Geometric transform engine: crop, resize, rotate and flip on rasters.

When several parts are requested they are applied in a fixed order:
crop, then resize, then rotate, then flip.

Usage:
    from photostag.transform import resize, rotate

    thumb = resize(image, width=100)
    turned = rotate(thumb, 90)
"""

from __future__ import annotations

from .config import settings
from .descriptor import TransformOperation
from .exceptions import InvalidParameterError, InvalidRegionError
from .ops import geometric
from .raster import RasterImage


def crop(image: RasterImage, x: int, y: int, width: int, height: int) -> RasterImage:
    """
    Cuts out a region.

    :param image: Source raster
    :param x: Left edge of the region
    :param y: Top edge of the region
    :param width: Region width, > 0
    :param height: Region height, > 0
    :return: New raster of size width x height
    :raises InvalidRegionError: If the region is empty or leaves the image
    """
    if (x < 0 or y < 0 or width <= 0 or height <= 0
            or x + width > image.width or y + height > image.height):
        raise InvalidRegionError(
            f"Crop region ({x}, {y}, {width}x{height}) is outside the "
            f"{image.width}x{image.height} image"
        )
    return RasterImage(geometric.crop(image.pixels, x, y, width, height))


def target_size(
    image: RasterImage,
    width: int | None = None,
    height: int | None = None,
    keep_aspect_ratio: bool = True,
) -> tuple[int, int]:
    """
    Computes the size :func:`resize` will produce.

    :raises InvalidRegionError: If no dimension is given, one is not positive
        or the result exceeds ``settings.MAX_IMAGE_PIXELS``
    """
    if width is None and height is None:
        raise InvalidRegionError("Resize requires a width, a height or both")
    for label, value in (("width", width), ("height", height)):
        if value is not None and value <= 0:
            raise InvalidRegionError(f"Resize {label} must be positive, got {value}")

    src_w, src_h = image.size
    if width is None:
        size = max(1, round(src_w * height / src_h)), height
    elif height is None:
        size = width, max(1, round(src_h * width / src_w))
    elif keep_aspect_ratio:
        size = geometric.fit_size(src_w, src_h, width, height)
    else:
        size = width, height
    if size[0] * size[1] > settings.MAX_IMAGE_PIXELS:
        raise InvalidRegionError(
            f"Resize target {size[0]}x{size[1]} exceeds {settings.MAX_IMAGE_PIXELS} pixels"
        )
    return size


def resize(
    image: RasterImage,
    width: int | None = None,
    height: int | None = None,
    keep_aspect_ratio: bool = True,
) -> RasterImage:
    """
    Resamples with Lanczos filtering.

    With one dimension the other follows the aspect ratio. With both and
    ``keep_aspect_ratio`` the image is scaled to fit inside the box, without
    it the exact size is forced. Resizing to the current size is a no-op.

    :return: New raster
    :raises InvalidRegionError: See :func:`target_size`
    """
    new_w, new_h = target_size(image, width, height, keep_aspect_ratio)
    return RasterImage(geometric.resize(image.pixels, new_w, new_h))


def rotate(image: RasterImage, angle: int) -> RasterImage:
    """
    Rotates clockwise by a quarter-turn multiple. 90 and 270 swap width and height.

    :raises InvalidParameterError: If the angle is not 90, 180 or 270
    """
    if angle not in geometric.ROTATION_ANGLES:
        raise InvalidParameterError(f"Rotation must be 90, 180 or 270 degrees, got {angle}")
    return RasterImage(geometric.rotate(image.pixels, angle))


def flip(image: RasterImage, horizontal: bool = False, vertical: bool = False) -> RasterImage:
    """Mirrors left-right and/or top-bottom."""
    pixels = image.pixels
    if horizontal:
        pixels = geometric.flip_horizontal(pixels)
    if vertical:
        pixels = geometric.flip_vertical(pixels)
    if pixels is image.pixels:
        pixels = pixels.copy()
    return RasterImage(pixels)


def apply_transform(image: RasterImage, operation: TransformOperation) -> RasterImage:
    """
    Applies every part present in the descriptor, crop -> resize -> rotate -> flip.

    A descriptor without any part returns an unchanged copy.
    """
    result = image
    if operation.crop is not None:
        c = operation.crop
        result = crop(result, c.x, c.y, c.width, c.height)
    if operation.resize is not None:
        r = operation.resize
        result = resize(result, r.width, r.height, r.keep_aspect_ratio)
    if operation.rotate is not None:
        result = rotate(result, operation.rotate)
    if operation.flip is not None:
        result = flip(result, operation.flip.horizontal, operation.flip.vertical)
    if result is image:
        result = image.copy()
    return result


__all__ = ["crop", "target_size", "resize", "rotate", "flip", "apply_transform"]
