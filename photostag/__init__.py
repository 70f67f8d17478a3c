"""
PhotoStag - declarative image processing for automation workflows.

An image goes in as bytes, base64 text or a data URL together with an
operation descriptor (filter, transform, adjust or effect) and comes out
re-encoded as PNG, JPEG or WebP with metadata describing the result.

Usage:
    from photostag import process

    result = process(data_url, {"operation": "filter", "filter": "sepia"})
    print(result.metadata.width, result.metadata.size_bytes)
"""

from .raster import RasterImage
from .exceptions import (
    BatchCancelledError,
    DecodeError,
    EncodeError,
    InvalidParameterError,
    InvalidRegionError,
    ProcessingError,
    UnknownEffectError,
    UnknownFilterError,
    UnknownOperationError,
)
from .results import BatchResult, ImageMetadata, ProcessingResult, ValidationResult
from .codec import decode, encode, inspect
from .descriptor import (
    AdjustOperation,
    EffectOperation,
    FilterOperation,
    TransformOperation,
    parse_request,
)
from .filters import apply_filter, available_filters
from .effects import apply_effect, available_effects
from .transform import apply_transform
from .adjust import apply_adjustments
from .engine import apply_operation, process
from .batch import BatchProcessor, process_batch

__version__ = "0.1.0"

__all__ = [
    'RasterImage',
    'ProcessingError',
    'DecodeError',
    'EncodeError',
    'UnknownOperationError',
    'UnknownFilterError',
    'UnknownEffectError',
    'InvalidRegionError',
    'InvalidParameterError',
    'BatchCancelledError',
    'ImageMetadata',
    'ProcessingResult',
    'BatchResult',
    'ValidationResult',
    'decode',
    'encode',
    'inspect',
    'FilterOperation',
    'TransformOperation',
    'AdjustOperation',
    'EffectOperation',
    'parse_request',
    'apply_filter',
    'available_filters',
    'apply_effect',
    'available_effects',
    'apply_transform',
    'apply_adjustments',
    'apply_operation',
    'process',
    'process_batch',
    'BatchProcessor',
]
