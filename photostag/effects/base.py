"""Base effect class using Pydantic BaseModel."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

import numpy as np
from pydantic import BaseModel, ConfigDict, Field


class BaseEffect(BaseModel, ABC):
    """Base class for all catalog effects.

    Effects are spatial or per-pixel rules with fixed parameters. Only
    effects that set ``uses_intensity`` read :attr:`intensity`; the others
    accept it and produce the same output for any value.
    """

    model_config = ConfigDict(extra='forbid', frozen=True)

    # ClassVar metadata (not serialized as fields)
    effect_type: ClassVar[str] = "base"
    name: ClassVar[str] = "Base Effect"
    description: ClassVar[str] = "Base effect description"
    category: ClassVar[str] = "uncategorized"
    uses_intensity: ClassVar[bool] = False

    intensity: float = Field(default=0.5, ge=0.0, le=1.0)

    @abstractmethod
    def apply(self, image: np.ndarray) -> np.ndarray:
        """Apply the effect.

        Args:
            image: RGBA numpy array, shape (height, width, 4), dtype uint8

        Returns:
            New RGBA numpy array with the same shape, alpha preserved
        """
        pass

    @classmethod
    def describe(cls) -> dict[str, Any]:
        """Catalog entry for menus and docs."""
        return {
            'id': cls.effect_type,
            'name': cls.name,
            'description': cls.description,
            'category': cls.category,
        }
