"""
Implements the class :class:`.RasterImage`, the in-memory pixel container
every engine reads from and writes to.
"""

from __future__ import annotations

import numpy as np
import PIL.Image


class RasterImage:
    """
    A dense RGBA8 raster.

    The pixels are stored as a numpy array of shape (height, width, 4) with
    dtype uint8. Width and height are always derived from the buffer, so they
    can never disagree with it. Engines that change the dimensions build a
    new buffer and hand it to :meth:`replace`, which swaps it in as a whole.
    """

    __slots__ = ("_pixels",)

    def __init__(self, pixels: np.ndarray):
        """
        :param pixels: RGBA uint8 array (H, W, 4). The array is referenced,
            not copied.

        Raises a ValueError if the array is not a non-empty RGBA8 buffer.
        """
        self._pixels = self._validated(pixels)

    @staticmethod
    def _validated(pixels: np.ndarray) -> np.ndarray:
        if not isinstance(pixels, np.ndarray):
            raise ValueError(f"Expected numpy array, got {type(pixels).__name__}")
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise ValueError(f"Expected RGBA image (H, W, 4), got shape {pixels.shape}")
        if pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 dtype, got {pixels.dtype}")
        if pixels.shape[0] < 1 or pixels.shape[1] < 1:
            raise ValueError(f"Image must be at least 1x1, got {pixels.shape[1]}x{pixels.shape[0]}")
        return pixels

    @classmethod
    def new(
        cls,
        width: int,
        height: int,
        color: tuple[int, int, int, int] = (0, 0, 0, 255),
    ) -> RasterImage:
        """
        Creates a solid-colored raster.

        :param width: Width in pixels
        :param height: Height in pixels
        :param color: RGBA fill color
        :return: The new raster
        """
        pixels = np.empty((height, width, 4), dtype=np.uint8)
        pixels[:, :] = color
        return cls(pixels)

    @classmethod
    def from_pil(cls, pil_image: PIL.Image.Image) -> RasterImage:
        """
        Creates a raster from a Pillow image of any mode.

        :param pil_image: The Pillow image
        :return: The raster in RGBA
        """
        if pil_image.mode != "RGBA":
            pil_image = pil_image.convert("RGBA")
        return cls(np.array(pil_image, dtype=np.uint8))

    def to_pil(self) -> PIL.Image.Image:
        """
        Returns a Pillow RGBA image sharing no memory with this raster.
        """
        return PIL.Image.fromarray(self._pixels.copy())

    @property
    def pixels(self) -> np.ndarray:
        """The RGBA pixel buffer (H, W, 4)."""
        return self._pixels

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) tuple."""
        return self.width, self.height

    def replace(self, pixels: np.ndarray) -> None:
        """
        Replaces the whole pixel buffer, possibly with new dimensions.

        :param pixels: The new RGBA uint8 buffer
        """
        self._pixels = self._validated(pixels)

    def copy(self) -> RasterImage:
        """Returns a deep copy."""
        return RasterImage(self._pixels.copy())

    def tobytes(self) -> bytes:
        """The raw RGBA buffer, row by row. Length is width * height * 4."""
        return self._pixels.tobytes()

    def is_transparent(self) -> bool:
        """True if any pixel has an alpha value below 255."""
        return bool((self._pixels[:, :, 3] < 255).any())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RasterImage):
            return NotImplemented
        return self.size == other.size and np.array_equal(self._pixels, other._pixels)

    __hash__ = None

    def __repr__(self) -> str:
        return f"RasterImage({self.width}x{self.height})"
