"""
Tests for the filter catalog.

Tests verify actual pixel values to ensure filters work correctly.
"""

from typing import ClassVar

import numpy as np
import pytest

from photostag.exceptions import InvalidParameterError, UnknownFilterError
from photostag.filters import (
    BaseFilter,
    FILTER_NAMES,
    apply_filter,
    available_filters,
    filter_registry,
    get_filter_class,
    register_filter,
)
from photostag.ops import tone
from photostag.raster import RasterImage


def solid(r: int, g: int, b: int, a: int = 255) -> RasterImage:
    return RasterImage.new(4, 4, (r, g, b, a))


def pixel(image: RasterImage) -> tuple[int, ...]:
    return tuple(int(v) for v in image.pixels[0, 0])


class TestFilterCatalog:
    """Catalog contents and lookups."""

    def test_catalog_order(self):
        assert available_filters() == [
            "grayscale", "sepia", "invert", "vintage", "noir", "warm", "cool",
            "dramatic", "firenze", "golden", "lix", "lofi", "neue", "obsidian",
            "pastel_pink", "ryo",
        ]

    def test_every_name_is_registered(self):
        assert set(FILTER_NAMES) == set(filter_registry)

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            filter_registry["custom"] = BaseFilter

    def test_duplicate_registration_fails(self):
        class AnotherSepia(BaseFilter):
            name: ClassVar[str] = "Another Sepia"

            def render(self, image):
                return image

        with pytest.raises(ValueError):
            register_filter("sepia")(AnotherSepia)
        assert get_filter_class("sepia") is not AnotherSepia

    def test_unknown_filter(self, solid_red):
        with pytest.raises(UnknownFilterError, match="filter"):
            apply_filter(solid_red, "nonexistent")

    def test_describe(self):
        entry = get_filter_class("pastel_pink").describe()
        assert entry["id"] == "pastel_pink"
        assert entry["name"] == "Pastel Pink"


class TestIntensity:
    """Blending between original and canonical output."""

    @pytest.mark.parametrize("name", FILTER_NAMES)
    def test_zero_intensity_is_identity(self, name, colorful):
        assert apply_filter(colorful, name, 0.0) == colorful

    @pytest.mark.parametrize("name", FILTER_NAMES)
    def test_alpha_and_size_preserved(self, name, colorful):
        result = apply_filter(colorful, name, 1.5)
        assert result.size == colorful.size
        np.testing.assert_array_equal(result.pixels[:, :, 3], colorful.pixels[:, :, 3])

    def test_full_intensity_is_canonical(self, colorful):
        result = apply_filter(colorful, "sepia", 1.0)
        np.testing.assert_array_equal(result.pixels, tone.sepia(colorful.pixels))

    def test_partial_intensity(self):
        result = apply_filter(solid(100, 100, 100), "invert", 0.25)
        # 100 + (155 - 100) * 0.25 = 113.75
        assert pixel(result) == (114, 114, 114, 255)

    def test_extrapolation_clamps(self, solid_red):
        result = apply_filter(solid_red, "grayscale", 2.0)
        # luminance of red is 54; 255 + (54 - 255) * 2 clamps to 0
        assert pixel(result) == (0, 108, 108, 255)

    def test_source_untouched(self, colorful):
        before = colorful.copy()
        apply_filter(colorful, "noir", 1.0)
        assert colorful == before

    @pytest.mark.parametrize("intensity", [-0.1, 2.01, 10.0])
    def test_intensity_out_of_range(self, solid_red, intensity):
        with pytest.raises(InvalidParameterError):
            apply_filter(solid_red, "sepia", intensity)


class TestFilterPixels:
    """Known outputs of the simple filters."""

    def test_grayscale_red(self, solid_red):
        result = apply_filter(solid_red, "grayscale")
        r, g, b, a = pixel(result)
        assert r == g == b == 54
        assert a == 255

    def test_invert(self):
        assert pixel(apply_filter(solid(10, 20, 30, 77), "invert")) == (245, 235, 225, 77)

    def test_warm(self):
        assert pixel(apply_filter(solid(100, 100, 100), "warm")) == (120, 100, 90, 255)

    def test_cool(self):
        assert pixel(apply_filter(solid(100, 100, 100), "cool")) == (90, 100, 120, 255)

    def test_warm_clamps(self):
        assert pixel(apply_filter(solid(250, 0, 5), "warm")) == (255, 0, 0, 255)

    @pytest.mark.parametrize("name, expected", [
        ("lix", (245, 235, 30, 255)),
        ("neue", (10, 20, 225, 255)),
        ("ryo", (245, 20, 225, 255)),
    ])
    def test_channel_inversions(self, name, expected):
        assert pixel(apply_filter(solid(10, 20, 30), name)) == expected

    @pytest.mark.parametrize("name", ["grayscale", "noir", "dramatic", "obsidian"])
    def test_monochrome_filters(self, name, colorful):
        rgb = apply_filter(colorful, name).pixels[:, :, :3]
        assert np.all(rgb[:, :, 0] == rgb[:, :, 1])
        assert np.all(rgb[:, :, 1] == rgb[:, :, 2])

    def test_sepia_is_warm(self, gradient):
        rgb = apply_filter(gradient, "sepia").pixels[:, :, :3].astype(int)
        assert np.all(rgb[:, :, 0] >= rgb[:, :, 2])

    def test_dramatic_increases_contrast(self, gradient):
        result = apply_filter(gradient, "dramatic")
        assert result.pixels[:, :, 0].std() > gradient.pixels[:, :, 0].std()

    @pytest.mark.parametrize("name", ["vintage", "pastel_pink"])
    def test_faded_looks_lift_blacks(self, name):
        r, g, b, _ = pixel(apply_filter(solid(0, 0, 0), name))
        assert min(r, g, b) > 0

    def test_golden_tints_warm(self):
        r, g, b, _ = pixel(apply_filter(solid(128, 128, 128), "golden"))
        assert r > g > b
