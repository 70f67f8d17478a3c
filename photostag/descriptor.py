"""
Operation descriptors: the declarative description of one processing call.

A descriptor is a closed tagged union discriminated by ``operation``.
Exactly one of the four variants is valid per call, and unknown fields are
rejected instead of ignored.

Usage:
    from photostag.descriptor import parse_request

    descriptor = parse_request({"operation": "filter", "filter": "sepia", "intensity": 0.8})
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from .codec import FORMAT_ALIASES
from .config import settings
from .exceptions import InvalidParameterError


class _StrictModel(BaseModel):
    model_config = ConfigDict(extra='forbid', frozen=True)


# ============================================================================
# Transform parts
# ============================================================================

class ResizeSpec(_StrictModel):
    """Target size. Geometry is checked against the image by the transform engine."""

    width: int | None = None
    height: int | None = None
    keep_aspect_ratio: bool = True


class CropSpec(_StrictModel):
    """Region with top-left corner (x, y)."""

    x: int
    y: int
    width: int
    height: int


class FlipSpec(_StrictModel):
    horizontal: bool = False
    vertical: bool = False


# ============================================================================
# Variants
# ============================================================================

class OperationBase(_StrictModel):
    """Fields shared by every variant."""

    output_format: str = Field(default_factory=lambda: settings.DEFAULT_OUTPUT_FORMAT)
    quality: int | None = Field(default=None, ge=1, le=100)
    output_as_binary: bool = False

    @field_validator('output_format')
    @classmethod
    def _canonical_format(cls, value: str) -> str:
        # Unsupported names are reported by the encoder as an EncodeError
        value = value.strip().lower()
        return FORMAT_ALIASES.get(value, value)


class FilterOperation(OperationBase):
    operation: Literal['filter'] = 'filter'
    filter: str
    intensity: float = Field(default=1.0, ge=0.0, le=2.0)


class TransformOperation(OperationBase):
    """Geometric transform; parts present are applied crop, resize, rotate, flip."""

    operation: Literal['transform'] = 'transform'
    resize: ResizeSpec | None = None
    crop: CropSpec | None = None
    rotate: int | None = None
    flip: FlipSpec | None = None


class AdjustOperation(OperationBase):
    operation: Literal['adjust'] = 'adjust'
    brightness: float = Field(default=1.0, ge=0.0, le=3.0)
    contrast: float = Field(default=1.0, ge=0.0, le=3.0)
    saturation: float = Field(default=1.0, ge=0.0, le=3.0)
    hue_rotation: float = Field(default=0.0, ge=-180.0, le=180.0)


class EffectOperation(OperationBase):
    """Effect by name; ``intensity`` is the cutoff for 'threshold' only."""

    operation: Literal['effect'] = 'effect'
    effect: str
    intensity: float = Field(default=0.5, ge=0.0, le=1.0)


OperationDescriptor = Annotated[
    Union[FilterOperation, TransformOperation, AdjustOperation, EffectOperation],
    Field(discriminator='operation'),
]

_descriptor_adapter: TypeAdapter[OperationDescriptor] = TypeAdapter(OperationDescriptor)


# ============================================================================
# Parsing
# ============================================================================

def _describe_errors(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item["loc"])
        parts.append(f"{location}: {item['msg']}" if location else item["msg"])
    return "; ".join(parts)


def parse_request(request: Any) -> OperationDescriptor:
    """
    Builds a descriptor from a request mapping.

    :param request: Mapping with an ``operation`` key and the variant's
        fields, or an already built descriptor
    :return: The validated descriptor
    :raises InvalidParameterError: For a missing or unknown operation,
        unknown fields, wrong types or out-of-range values
    """
    if isinstance(request, OperationBase):
        return request
    if not isinstance(request, dict):
        raise InvalidParameterError(
            f"Request must be an object, got {type(request).__name__}"
        )
    try:
        return _descriptor_adapter.validate_python(request)
    except ValidationError as e:
        raise InvalidParameterError(f"Invalid request: {_describe_errors(e)}") from e


__all__ = [
    "ResizeSpec", "CropSpec", "FlipSpec",
    "OperationBase", "FilterOperation", "TransformOperation",
    "AdjustOperation", "EffectOperation", "OperationDescriptor",
    "parse_request",
]
