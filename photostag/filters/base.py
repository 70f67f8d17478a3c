"""Base filter class using Pydantic BaseModel."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from photostag.ops.tone import blend


class BaseFilter(BaseModel, ABC):
    """Base class for all catalog filters.

    A filter defines a canonical color transform in :meth:`render`.
    :meth:`apply` blends that canonical output with the original by
    ``intensity``: 0 keeps the original, 1 gives the canonical output and
    values up to 2 extrapolate linearly, clamped to 0-255. No filter caps
    its strength at 1.
    """

    model_config = ConfigDict(extra='forbid', frozen=True)

    # ClassVar metadata (not serialized as fields)
    filter_type: ClassVar[str] = "base"
    name: ClassVar[str] = "Base Filter"
    description: ClassVar[str] = "Base filter description"
    category: ClassVar[str] = "uncategorized"

    intensity: float = Field(default=1.0, ge=0.0, le=2.0)

    @abstractmethod
    def render(self, image: np.ndarray) -> np.ndarray:
        """Compute the canonical (intensity 1) output.

        Args:
            image: RGBA numpy array, shape (height, width, 4), dtype uint8

        Returns:
            Filtered RGBA numpy array, same shape and dtype
        """
        pass

    def apply(self, image: np.ndarray) -> np.ndarray:
        """Apply the filter at this instance's intensity."""
        if self.intensity == 0.0:
            return image.copy()
        return blend(image, self.render(image), self.intensity)

    @classmethod
    def describe(cls) -> dict[str, Any]:
        """Catalog entry for menus and docs."""
        return {
            'id': cls.filter_type,
            'name': cls.name,
            'description': cls.description,
            'category': cls.category,
        }
