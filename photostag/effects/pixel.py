"""Per-pixel stylize effects."""

from typing import ClassVar

import numpy as np

from photostag.ops import stylize

from .base import BaseEffect
from .registry import register_effect

SOLARIZE_THRESHOLD = 128
POSTERIZE_LEVELS = 4


@register_effect("threshold")
class ThresholdEffect(BaseEffect):
    """Binarize on BT.709 luminance; the cutoff is ``intensity * 255``."""

    effect_type: ClassVar[str] = "threshold"
    name: ClassVar[str] = "Threshold"
    description: ClassVar[str] = "Black and white by luminance cutoff"
    category: ClassVar[str] = "stylize"
    uses_intensity: ClassVar[bool] = True

    def apply(self, image: np.ndarray) -> np.ndarray:
        return stylize.threshold(image, self.intensity * 255.0)


@register_effect("solarize")
class SolarizeEffect(BaseEffect):
    effect_type: ClassVar[str] = "solarize"
    name: ClassVar[str] = "Solarize"
    description: ClassVar[str] = "Invert bright areas"
    category: ClassVar[str] = "stylize"

    def apply(self, image: np.ndarray) -> np.ndarray:
        return stylize.solarize(image, SOLARIZE_THRESHOLD)


@register_effect("posterize")
class PosterizeEffect(BaseEffect):
    effect_type: ClassVar[str] = "posterize"
    name: ClassVar[str] = "Posterize"
    description: ClassVar[str] = f"Reduce each channel to {POSTERIZE_LEVELS} levels"
    category: ClassVar[str] = "stylize"

    def apply(self, image: np.ndarray) -> np.ndarray:
        return stylize.posterize(image, POSTERIZE_LEVELS)
