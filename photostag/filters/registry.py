"""Filter registry."""

from types import MappingProxyType
from typing import Type

from .base import BaseFilter

# Populated by @register_filter at import time, read-only afterwards
_registry: dict[str, Type[BaseFilter]] = {}

# Public read-only view of the registry
filter_registry = MappingProxyType(_registry)


def register_filter(filter_id: str):
    """Decorator to register a filter class.

    Sets filter_type on the class and records it in the catalog. Names are
    unique; registering the same id twice is a programming error.
    """

    def decorator(cls: Type[BaseFilter]):
        if filter_id in _registry:
            raise ValueError(f"Filter already registered: {filter_id}")
        cls.filter_type = filter_id  # type: ignore[attr-defined]
        _registry[filter_id] = cls
        return cls

    return decorator


def load_builtin_filters():
    """Import all built-in filter modules to trigger registration."""
    from . import classic, presets  # noqa: F401
