"""Tests for the convolution and stylize effect catalog."""

import logging

import numpy as np
import pytest

from photostag.effects import EFFECT_NAMES, apply_effect, available_effects, effect_registry
from photostag.exceptions import InvalidParameterError, UnknownEffectError
from photostag.ops import convolution
from photostag.raster import RasterImage


def gray_ramp(width: int = 16, height: int = 4) -> RasterImage:
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[:, :, :3] = np.linspace(0, 255, width).round().astype(np.uint8)[np.newaxis, :, np.newaxis]
    pixels[:, :, 3] = 255
    return RasterImage(pixels)


class TestEffectCatalog:
    """Catalog contents and lookups."""

    def test_catalog_order(self):
        assert available_effects() == [
            "edge_detection", "emboss", "laplace", "sobel_horizontal",
            "sobel_vertical", "blur", "sharpen", "threshold", "solarize", "posterize",
        ]

    def test_every_name_is_registered(self):
        assert set(EFFECT_NAMES) == set(effect_registry)

    def test_unknown_effect(self, solid_red):
        with pytest.raises(UnknownEffectError, match="effect"):
            apply_effect(solid_red, "melt")

    @pytest.mark.parametrize("intensity", [-0.01, 1.5])
    def test_intensity_out_of_range(self, solid_red, intensity):
        with pytest.raises(InvalidParameterError):
            apply_effect(solid_red, "threshold", intensity)

    @pytest.mark.parametrize("name", EFFECT_NAMES)
    def test_shape_and_alpha_preserved(self, name, colorful):
        result = apply_effect(colorful, name)
        assert result.size == colorful.size
        np.testing.assert_array_equal(result.pixels[:, :, 3], colorful.pixels[:, :, 3])

    def test_one_pixel_image(self):
        img = RasterImage.new(1, 1, (90, 60, 30, 255))
        assert apply_effect(img, "blur") == img


class TestConvolutionEffects:
    """Kernels with clamp-to-edge borders."""

    @pytest.mark.parametrize("name", [
        "edge_detection", "laplace", "sobel_horizontal", "sobel_vertical",
    ])
    def test_flat_image_has_no_edges(self, name):
        img = RasterImage.new(8, 8, (120, 80, 40, 255))
        result = apply_effect(img, name)
        assert np.all(result.pixels[:, :, :3] == 0)

    def test_emboss_centers_flat_areas(self):
        img = RasterImage.new(8, 8, (120, 80, 40, 255))
        assert np.all(apply_effect(img, "emboss").pixels[:, :, :3] == 128)

    def test_emboss_relief_on_edge(self):
        pixels = np.zeros((6, 6, 4), dtype=np.uint8)
        pixels[:, 3:, :3] = 100
        pixels[:, :, 3] = 255
        result = apply_effect(RasterImage(pixels), "emboss").pixels
        assert np.all(result[:, 2, 0] > 128)
        assert np.all(result[:, 0, 0] == 128)

    @pytest.mark.parametrize("name", ["blur", "sharpen"])
    def test_flat_image_unchanged(self, name):
        img = RasterImage.new(8, 8, (120, 80, 40, 255))
        assert apply_effect(img, name) == img

    def test_blur_matches_kernel(self, colorful):
        expected = convolution.convolve(colorful.pixels, convolution.GAUSSIAN_BLUR_KERNEL)
        np.testing.assert_array_equal(apply_effect(colorful, "blur").pixels, expected)

    def test_blur_smooths_noise(self, colorful):
        result = apply_effect(colorful, "blur")
        assert result.pixels[:, :, :3].std() < colorful.pixels[:, :, :3].std()

    def test_sobel_vertical_finds_vertical_edge(self):
        pixels = np.zeros((6, 6, 4), dtype=np.uint8)
        pixels[:, 3:, :3] = 200
        pixels[:, :, 3] = 255
        result = apply_effect(RasterImage(pixels), "sobel_vertical").pixels
        assert np.all(result[:, 2:4, 0] > 0)
        assert np.all(result[:, 0, 0] == 0)
        assert np.all(result[:, 5, 0] == 0)

    def test_sobel_horizontal_ignores_vertical_edge(self):
        pixels = np.zeros((6, 6, 4), dtype=np.uint8)
        pixels[:, 3:, :3] = 200
        pixels[:, :, 3] = 255
        result = apply_effect(RasterImage(pixels), "sobel_horizontal").pixels
        assert np.all(result[:, :, :3] == 0)


class TestPixelEffects:
    """Threshold, solarize and posterize."""

    def test_threshold_binarizes(self):
        result = apply_effect(gray_ramp(), "threshold", 0.5).pixels
        assert set(np.unique(result[:, :, :3])) <= {0, 255}
        # 0.5 * 255 = 127.5: ramp values 0, 17, ..., 119 are below
        assert np.all(result[:, :8, 0] == 0)
        assert np.all(result[:, 8:, 0] == 255)

    def test_threshold_default_intensity(self):
        assert apply_effect(gray_ramp(), "threshold") == apply_effect(gray_ramp(), "threshold", 0.5)

    def test_threshold_extremes(self):
        assert np.all(apply_effect(gray_ramp(), "threshold", 0.0).pixels[:, :, :3] == 255)
        result = apply_effect(gray_ramp(), "threshold", 1.0).pixels
        assert np.all(result[:, :-1, :3] == 0)

    def test_solarize(self):
        bright = RasterImage.new(2, 2, (200, 200, 200, 255))
        dark = RasterImage.new(2, 2, (50, 50, 50, 255))
        assert np.all(apply_effect(bright, "solarize").pixels[:, :, :3] == 55)
        assert apply_effect(dark, "solarize") == dark

    def test_posterize_four_levels(self, colorful):
        values = np.unique(apply_effect(colorful, "posterize").pixels[:, :, :3])
        assert set(values) <= {0, 85, 170, 255}

    def test_intensity_ignored_on_other_effects(self, colorful, caplog):
        with caplog.at_level(logging.DEBUG, logger="photostag.effects.catalog"):
            result = apply_effect(colorful, "emboss", 0.9)
        assert result == apply_effect(colorful, "emboss")
        assert "ignores intensity" in caplog.text
