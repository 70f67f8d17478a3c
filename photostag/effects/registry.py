"""Effect registry."""

from types import MappingProxyType
from typing import Type

from .base import BaseEffect

# Populated by @register_effect at import time, read-only afterwards
_registry: dict[str, Type[BaseEffect]] = {}

effect_registry = MappingProxyType(_registry)


def register_effect(effect_id: str):
    """Decorator to register an effect class under a unique id."""

    def decorator(cls: Type[BaseEffect]):
        if effect_id in _registry:
            raise ValueError(f"Effect already registered: {effect_id}")
        cls.effect_type = effect_id  # type: ignore[attr-defined]
        _registry[effect_id] = cls
        return cls

    return decorator


def load_builtin_effects():
    """Import all built-in effect modules to trigger registration."""
    from . import kernels, pixel  # noqa: F401
