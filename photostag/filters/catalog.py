"""Filter catalog lookups and the raster-level entry point."""

from __future__ import annotations

from typing import Any, Type

from pydantic import ValidationError

from photostag.exceptions import InvalidParameterError, UnknownFilterError
from photostag.raster import RasterImage

from .base import BaseFilter
from .registry import filter_registry, load_builtin_filters

load_builtin_filters()

FILTER_NAMES: tuple[str, ...] = (
    "grayscale", "sepia", "invert", "vintage", "noir", "warm", "cool",
    "dramatic", "firenze", "golden", "lix", "lofi", "neue", "obsidian",
    "pastel_pink", "ryo",
)
"Catalog order as reported to hosts"


def available_filters() -> list[str]:
    """Filter names in catalog order."""
    return [name for name in FILTER_NAMES if name in filter_registry]


def describe_filters() -> list[dict[str, Any]]:
    """Catalog entries (id, name, description, category) in catalog order."""
    return [filter_registry[name].describe() for name in available_filters()]


def get_filter_class(name: str) -> Type[BaseFilter]:
    """Look up a filter class by name.

    :raises UnknownFilterError: If the name is not in the catalog
    """
    try:
        return filter_registry[name]
    except (KeyError, TypeError):
        raise UnknownFilterError(f"Unknown filter: {name}") from None


def apply_filter(image: RasterImage, name: str, intensity: float = 1.0) -> RasterImage:
    """Apply a catalog filter at the given intensity.

    :param image: Source raster, left untouched
    :param name: Catalog name, e.g. 'sepia'
    :param intensity: 0 keeps the original, 1 is the canonical look,
        up to 2 extrapolates
    :return: A new raster of the same size
    :raises UnknownFilterError: If the name is not in the catalog
    :raises InvalidParameterError: If the intensity is outside 0-2
    """
    filter_cls = get_filter_class(name)
    try:
        instance = filter_cls(intensity=intensity)
    except ValidationError as e:
        raise InvalidParameterError(
            f"Filter intensity must be between 0.0 and 2.0, got {intensity}"
        ) from e
    return RasterImage(instance.apply(image.pixels))
