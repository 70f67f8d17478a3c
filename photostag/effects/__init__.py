"""Convolution and stylize effect catalog.

Usage:
    from photostag.effects import apply_effect, available_effects

    edges = apply_effect(image, "edge_detection")
    bw = apply_effect(image, "threshold", intensity=0.6)
"""

from .base import BaseEffect
from .catalog import (
    EFFECT_NAMES,
    apply_effect,
    available_effects,
    describe_effects,
    get_effect_class,
)
from .registry import effect_registry, register_effect

__all__ = [
    'BaseEffect',
    'EFFECT_NAMES',
    'apply_effect',
    'available_effects',
    'describe_effects',
    'effect_registry',
    'get_effect_class',
    'register_effect',
]
