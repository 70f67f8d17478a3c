"""Effect catalog lookups and the raster-level entry point."""

from __future__ import annotations

import logging
from typing import Any, Type

from pydantic import ValidationError

from photostag.exceptions import InvalidParameterError, UnknownEffectError
from photostag.raster import RasterImage

from .base import BaseEffect
from .registry import effect_registry, load_builtin_effects

logger = logging.getLogger(__name__)

load_builtin_effects()

EFFECT_NAMES: tuple[str, ...] = (
    "edge_detection", "emboss", "laplace", "sobel_horizontal",
    "sobel_vertical", "blur", "sharpen", "threshold", "solarize", "posterize",
)
"Catalog order as reported to hosts"


def available_effects() -> list[str]:
    """Effect names in catalog order."""
    return [name for name in EFFECT_NAMES if name in effect_registry]


def describe_effects() -> list[dict[str, Any]]:
    """Catalog entries (id, name, description, category) in catalog order."""
    return [effect_registry[name].describe() for name in available_effects()]


def get_effect_class(name: str) -> Type[BaseEffect]:
    """Look up an effect class by name.

    :raises UnknownEffectError: If the name is not in the catalog
    """
    try:
        return effect_registry[name]
    except (KeyError, TypeError):
        raise UnknownEffectError(f"Unknown effect: {name}") from None


def apply_effect(image: RasterImage, name: str, intensity: float | None = None) -> RasterImage:
    """Apply a catalog effect.

    :param image: Source raster, left untouched
    :param name: Catalog name, e.g. 'blur'
    :param intensity: 0-1. Sets the threshold cutoff for 'threshold'; the
        other effects accept and ignore it.
    :return: A new raster of the same size
    :raises UnknownEffectError: If the name is not in the catalog
    :raises InvalidParameterError: If the intensity is outside 0-1
    """
    effect_cls = get_effect_class(name)
    params = {} if intensity is None else {"intensity": intensity}
    try:
        instance = effect_cls(**params)
    except ValidationError as e:
        raise InvalidParameterError(
            f"Effect intensity must be between 0.0 and 1.0, got {intensity}"
        ) from e
    if intensity is not None and not effect_cls.uses_intensity:
        logger.debug("Effect %s ignores intensity %s", name, intensity)
    return RasterImage(instance.apply(image.pixels))
