"""Host-facing surfaces: the dict contract and the FastAPI router."""

from .contract import (
    get_available_effects,
    get_available_filters,
    get_version,
    process_image,
    process_image_batch,
    validate_image,
)

__all__ = [
    'process_image',
    'process_image_batch',
    'validate_image',
    'get_available_filters',
    'get_available_effects',
    'get_version',
]
