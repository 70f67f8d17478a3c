"""Classic photographic filters."""

from typing import ClassVar

import numpy as np

from photostag.ops import tone

from .base import BaseFilter
from .registry import register_filter

# Lifted blacks and dimmed whites for the faded film look
FADE_CURVE = tone.tone_curve([(0, 30), (128, 136), (255, 235)])


@register_filter("grayscale")
class GrayscaleFilter(BaseFilter):
    """Convert to grayscale."""

    filter_type: ClassVar[str] = "grayscale"
    name: ClassVar[str] = "Grayscale"
    description: ClassVar[str] = "Convert to grayscale"
    category: ClassVar[str] = "color"

    def render(self, image: np.ndarray) -> np.ndarray:
        return tone.grayscale(image)


@register_filter("sepia")
class SepiaFilter(BaseFilter):
    """Apply sepia tone."""

    filter_type: ClassVar[str] = "sepia"
    name: ClassVar[str] = "Sepia"
    description: ClassVar[str] = "Apply sepia tone"
    category: ClassVar[str] = "color"

    def render(self, image: np.ndarray) -> np.ndarray:
        return tone.sepia(image)


@register_filter("invert")
class InvertFilter(BaseFilter):
    """Invert colors."""

    filter_type: ClassVar[str] = "invert"
    name: ClassVar[str] = "Invert"
    description: ClassVar[str] = "Invert colors"
    category: ClassVar[str] = "color"

    def render(self, image: np.ndarray) -> np.ndarray:
        return tone.invert(image)


@register_filter("vintage")
class VintageFilter(BaseFilter):
    """Sepia base with a faded tone curve and a slight warm cast."""

    filter_type: ClassVar[str] = "vintage"
    name: ClassVar[str] = "Vintage"
    description: ClassVar[str] = "Vintage film look"
    category: ClassVar[str] = "film"

    def render(self, image: np.ndarray) -> np.ndarray:
        result = tone.sepia(image)
        result = tone.apply_curves(result, FADE_CURVE, FADE_CURVE, FADE_CURVE)
        return tone.channel_offset(result, red=8.0, blue=-8.0)


@register_filter("noir")
class NoirFilter(BaseFilter):
    """High-contrast black and white, slightly brightened."""

    filter_type: ClassVar[str] = "noir"
    name: ClassVar[str] = "Noir"
    description: ClassVar[str] = "Film noir effect"
    category: ClassVar[str] = "film"

    def render(self, image: np.ndarray) -> np.ndarray:
        result = tone.grayscale(image)
        result = tone.contrast(result, 40.0)
        return tone.channel_offset(result, 10.0, 10.0, 10.0)


@register_filter("warm")
class WarmFilter(BaseFilter):
    """Shift color temperature towards red."""

    filter_type: ClassVar[str] = "warm"
    name: ClassVar[str] = "Warm"
    description: ClassVar[str] = "Warm color temperature"
    category: ClassVar[str] = "temperature"

    def render(self, image: np.ndarray) -> np.ndarray:
        return tone.channel_offset(image, red=20.0, blue=-10.0)


@register_filter("cool")
class CoolFilter(BaseFilter):
    """Shift color temperature towards blue."""

    filter_type: ClassVar[str] = "cool"
    name: ClassVar[str] = "Cool"
    description: ClassVar[str] = "Cool color temperature"
    category: ClassVar[str] = "temperature"

    def render(self, image: np.ndarray) -> np.ndarray:
        return tone.channel_offset(image, red=-10.0, blue=20.0)


@register_filter("dramatic")
class DramaticFilter(BaseFilter):
    """Grayscale with strong contrast."""

    filter_type: ClassVar[str] = "dramatic"
    name: ClassVar[str] = "Dramatic"
    description: ClassVar[str] = "High contrast dramatic look"
    category: ClassVar[str] = "film"

    def render(self, image: np.ndarray) -> np.ndarray:
        return tone.contrast(tone.grayscale(image), 60.0)
