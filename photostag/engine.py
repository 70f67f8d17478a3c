"""
Operation dispatcher: one image, one descriptor, one result.

:func:`process` runs decode -> validate -> route -> encode -> metadata. The
first failing stage short-circuits and every :class:`ProcessingError`
becomes a ``success=False`` result, so callers never see an exception for
bad input.

Usage:
    from photostag.engine import process

    result = process(png_bytes, {"operation": "effect", "effect": "blur"})
    if result.success:
        Path("out.png").write_bytes(result.encoded_bytes)
"""

from __future__ import annotations

import logging
import time
from typing import Any

from . import codec
from .adjust import apply_adjust_operation
from .descriptor import (
    AdjustOperation,
    EffectOperation,
    FilterOperation,
    OperationDescriptor,
    TransformOperation,
    parse_request,
)
from .effects import apply_effect, get_effect_class
from .exceptions import ProcessingError, UnknownOperationError
from .filters import apply_filter, get_filter_class
from .raster import RasterImage
from .results import ImageMetadata, ProcessingResult
from .transform import apply_transform

logger = logging.getLogger(__name__)


def validate_operation(operation: OperationDescriptor) -> None:
    """
    Checks catalog names and the output format before any pixel work.

    :raises UnknownFilterError: For a filter name outside the catalog
    :raises UnknownEffectError: For an effect name outside the catalog
    :raises EncodeError: For an unsupported output format
    """
    if isinstance(operation, FilterOperation):
        get_filter_class(operation.filter)
    elif isinstance(operation, EffectOperation):
        get_effect_class(operation.effect)
    codec.normalize_format(operation.output_format)


def apply_operation(image: RasterImage, operation: OperationDescriptor | dict[str, Any]) -> RasterImage:
    """
    Routes a raster to the engine of the descriptor's variant.

    :param image: Source raster, left untouched
    :param operation: Descriptor or request mapping
    :return: New raster
    :raises ProcessingError: From the engine
    """
    operation = parse_request(operation)
    if isinstance(operation, FilterOperation):
        return apply_filter(image, operation.filter, operation.intensity)
    if isinstance(operation, TransformOperation):
        return apply_transform(image, operation)
    if isinstance(operation, AdjustOperation):
        return apply_adjust_operation(image, operation)
    if isinstance(operation, EffectOperation):
        intensity = operation.intensity if "intensity" in operation.model_fields_set else None
        return apply_effect(image, operation.effect, intensity)
    raise UnknownOperationError(f"Unsupported operation: {type(operation).__name__}")


def process(source: Any, descriptor: OperationDescriptor | dict[str, Any]) -> ProcessingResult:
    """
    Decodes, transforms and re-encodes one image.

    :param source: Raw bytes, base64 text or a data URL
    :param descriptor: Descriptor or request mapping
    :return: The result; failures are reported, never raised
    """
    start = time.perf_counter()
    try:
        operation = parse_request(descriptor)
        image = codec.decode(source)
        validate_operation(operation)
        output = apply_operation(image, operation)
        fmt = codec.normalize_format(operation.output_format)
        data = codec.encode(output, fmt, operation.quality)
    except ProcessingError as e:
        logger.debug("Processing failed (%s): %s", e.error_type, e)
        return ProcessingResult.failure(e)
    except Exception as e:
        logger.exception("Unexpected error while processing image")
        return ProcessingResult.internal_error(e)

    elapsed_ms = round((time.perf_counter() - start) * 1000.0, 3)
    metadata = ImageMetadata(
        width=output.width,
        height=output.height,
        format=fmt,
        size_bytes=len(data),
        processing_time_ms=elapsed_ms,
    )
    logger.debug(
        "Processed %s -> %dx%d %s (%d bytes) in %.1f ms",
        operation.operation, output.width, output.height, fmt, len(data), elapsed_ms,
    )
    return ProcessingResult.ok(data, metadata)


__all__ = ["process", "apply_operation", "validate_operation"]
