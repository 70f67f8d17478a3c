"""Branded preset filters.

Most presets are per-channel tone curves, optionally combined with a flat
color overlay or a contrast change. Curve tables are built once at import.
"""

from typing import ClassVar

import numpy as np

from photostag.ops import color_adjust, tone

from .base import BaseFilter
from .registry import register_filter

FIRENZE_RED = tone.tone_curve([(0, 10), (64, 80), (192, 220), (255, 255)])
FIRENZE_BLUE = tone.tone_curve([(0, 0), (64, 50), (192, 170), (255, 230)])

GOLDEN_RED = tone.tone_curve([(0, 20), (128, 150), (255, 255)])
GOLDEN_GREEN = tone.tone_curve([(0, 10), (128, 132), (255, 245)])
GOLDEN_BLUE = tone.tone_curve([(0, 0), (128, 108), (255, 215)])

PASTEL_CURVE = tone.tone_curve([(0, 60), (128, 160), (255, 250)])


@register_filter("firenze")
class FirenzeFilter(BaseFilter):
    """Warm Tuscan tones: lifted reds, muted blues, extra contrast."""

    filter_type: ClassVar[str] = "firenze"
    name: ClassVar[str] = "Firenze"
    description: ClassVar[str] = "Firenze filter"
    category: ClassVar[str] = "preset"

    def render(self, image: np.ndarray) -> np.ndarray:
        result = tone.apply_curves(image, red=FIRENZE_RED, blue=FIRENZE_BLUE)
        return tone.contrast(result, 15.0)


@register_filter("golden")
class GoldenFilter(BaseFilter):
    """Golden hour: gold overlay over warm curves."""

    filter_type: ClassVar[str] = "golden"
    name: ClassVar[str] = "Golden"
    description: ClassVar[str] = "Golden hour effect"
    category: ClassVar[str] = "preset"

    def render(self, image: np.ndarray) -> np.ndarray:
        result = tone.apply_curves(image, GOLDEN_RED, GOLDEN_GREEN, GOLDEN_BLUE)
        return tone.overlay(result, (235, 145, 50), 0.15)


@register_filter("lix")
class LixFilter(BaseFilter):
    """Invert the red and green channels."""

    filter_type: ClassVar[str] = "lix"
    name: ClassVar[str] = "Lix"
    description: ClassVar[str] = "Lix filter"
    category: ClassVar[str] = "preset"

    def render(self, image: np.ndarray) -> np.ndarray:
        return tone.invert(image, channels=(0, 1))


@register_filter("lofi")
class LofiFilter(BaseFilter):
    """Punchy contrast with boosted saturation."""

    filter_type: ClassVar[str] = "lofi"
    name: ClassVar[str] = "Lofi"
    description: ClassVar[str] = "Lo-fi aesthetic"
    category: ClassVar[str] = "preset"

    def render(self, image: np.ndarray) -> np.ndarray:
        result = tone.contrast(image, 30.0)
        rgb = color_adjust.saturation(color_adjust.to_float(result), 1.2)
        return color_adjust.to_u8(rgb, image[:, :, 3])


@register_filter("neue")
class NeueFilter(BaseFilter):
    """Invert the blue channel."""

    filter_type: ClassVar[str] = "neue"
    name: ClassVar[str] = "Neue"
    description: ClassVar[str] = "Neue filter"
    category: ClassVar[str] = "preset"

    def render(self, image: np.ndarray) -> np.ndarray:
        return tone.invert(image, channels=(2,))


@register_filter("obsidian")
class ObsidianFilter(BaseFilter):
    """Dark grayscale with moderate contrast."""

    filter_type: ClassVar[str] = "obsidian"
    name: ClassVar[str] = "Obsidian"
    description: ClassVar[str] = "Dark obsidian look"
    category: ClassVar[str] = "preset"

    def render(self, image: np.ndarray) -> np.ndarray:
        return tone.contrast(tone.grayscale(image), 25.0)


@register_filter("pastel_pink")
class PastelPinkFilter(BaseFilter):
    """Soft washed-out tones with a pink overlay."""

    filter_type: ClassVar[str] = "pastel_pink"
    name: ClassVar[str] = "Pastel Pink"
    description: ClassVar[str] = "Soft pastel pink tones"
    category: ClassVar[str] = "preset"

    def render(self, image: np.ndarray) -> np.ndarray:
        result = tone.apply_curves(image, PASTEL_CURVE, PASTEL_CURVE, PASTEL_CURVE)
        return tone.overlay(result, (220, 112, 170), 0.2)


@register_filter("ryo")
class RyoFilter(BaseFilter):
    """Invert the red and blue channels."""

    filter_type: ClassVar[str] = "ryo"
    name: ClassVar[str] = "Ryo"
    description: ClassVar[str] = "Ryo filter"
    category: ClassVar[str] = "preset"

    def render(self, image: np.ndarray) -> np.ndarray:
        return tone.invert(image, channels=(0, 2))
