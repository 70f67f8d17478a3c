"""
Pytest fixtures for PhotoStag tests
"""

import base64

import numpy as np
import pytest

from photostag.codec import encode, to_data_url
from photostag.raster import RasterImage


def make_gradient(width: int = 64, height: int = 48) -> RasterImage:
    """Horizontal black-to-white ramp in RGB with an opaque alpha."""
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    ramp = np.linspace(0, 255, width).round().astype(np.uint8)
    pixels[:, :, 0] = ramp
    pixels[:, :, 1] = ramp
    pixels[:, :, 2] = ramp
    pixels[:, :, 3] = 255
    return RasterImage(pixels)


def make_colorful(width: int = 32, height: int = 24, seed: int = 7) -> RasterImage:
    """Deterministic random colors with varying alpha."""
    rng = np.random.default_rng(seed)
    pixels = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
    return RasterImage(pixels)


@pytest.fixture
def solid_red() -> RasterImage:
    """10x10 opaque red."""
    return RasterImage.new(10, 10, (255, 0, 0, 255))


@pytest.fixture
def gradient() -> RasterImage:
    return make_gradient()


@pytest.fixture
def colorful() -> RasterImage:
    return make_colorful()


@pytest.fixture
def red_png() -> bytes:
    """Encoded 10x10 opaque red PNG."""
    return encode(RasterImage.new(10, 10, (255, 0, 0, 255)), "png")


@pytest.fixture
def red_png_base64(red_png) -> str:
    return base64.b64encode(red_png).decode("ascii")


@pytest.fixture
def red_png_data_url(red_png) -> str:
    return to_data_url(red_png, "png")


@pytest.fixture
def square_png_data_url() -> str:
    """200x200 gradient as a PNG data URL."""
    return to_data_url(encode(make_gradient(200, 200), "png"), "png")


@pytest.fixture
def gradient_png_base64() -> str:
    return base64.b64encode(encode(make_gradient(), "png")).decode("ascii")


@pytest.fixture
def noisy_large() -> RasterImage:
    """64x64 random colors; compresses poorly, so the PNG is large."""
    return make_colorful(64, 64, seed=3)


@pytest.fixture
def small_gradient() -> RasterImage:
    return make_gradient(8, 8)
