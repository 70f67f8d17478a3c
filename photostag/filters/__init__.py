"""Color filter catalog.

Filters are Pydantic models registered by name. Each one renders a
canonical look which :meth:`BaseFilter.apply` blends with the original by
intensity.

Usage:
    from photostag.filters import apply_filter, available_filters

    print(available_filters())
    result = apply_filter(image, "sepia", intensity=0.5)
"""

from .base import BaseFilter
from .catalog import (
    FILTER_NAMES,
    apply_filter,
    available_filters,
    describe_filters,
    get_filter_class,
)
from .registry import filter_registry, register_filter

__all__ = [
    'BaseFilter',
    'FILTER_NAMES',
    'apply_filter',
    'available_filters',
    'describe_filters',
    'filter_registry',
    'get_filter_class',
    'register_filter',
]
