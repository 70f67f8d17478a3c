"""Tests for the color adjustment engine."""

import numpy as np
import pytest

from photostag.adjust import apply_adjust_operation, apply_adjustments
from photostag.descriptor import parse_request
from photostag.exceptions import InvalidParameterError
from photostag.raster import RasterImage


def solid(r: int, g: int, b: int, a: int = 255) -> RasterImage:
    return RasterImage.new(3, 3, (r, g, b, a))


def pixel(image: RasterImage) -> tuple[int, ...]:
    return tuple(int(v) for v in image.pixels[1, 1])


class TestAdjustments:
    """Single stages."""

    def test_defaults_are_identity(self, colorful):
        assert apply_adjustments(colorful) == colorful

    def test_brightness(self):
        assert pixel(apply_adjustments(solid(100, 50, 20), brightness=2.0)) == (200, 100, 40, 255)

    def test_brightness_clamps(self):
        assert pixel(apply_adjustments(solid(200, 50, 20), brightness=3.0)) == (255, 150, 60, 255)

    def test_brightness_zero_is_black(self):
        assert pixel(apply_adjustments(solid(200, 50, 20, 90), brightness=0.0)) == (0, 0, 0, 90)

    def test_contrast_zero_is_mid_gray(self):
        r, g, b, _ = pixel(apply_adjustments(solid(10, 200, 90), contrast=0.0))
        assert r == g == b == 128

    def test_contrast_stretches(self):
        r, g, b, _ = pixel(apply_adjustments(solid(64, 128, 191), contrast=2.0))
        assert r < 64 and b > 191

    def test_saturation_zero_is_gray(self, colorful):
        rgb = apply_adjustments(colorful, saturation=0.0).pixels[:, :, :3].astype(int)
        assert np.abs(rgb[:, :, 0] - rgb[:, :, 1]).max() <= 1
        assert np.abs(rgb[:, :, 1] - rgb[:, :, 2]).max() <= 1

    def test_saturation_leaves_gray_alone(self):
        assert pixel(apply_adjustments(solid(90, 90, 90), saturation=2.5)) == (90, 90, 90, 255)

    def test_hue_rotation_changes_color(self):
        r, g, b, _ = pixel(apply_adjustments(solid(200, 40, 40), hue_rotation=120.0))
        assert g > r

    @pytest.mark.parametrize("degrees", [-180.0, -45.0, 90.0, 180.0])
    def test_hue_rotation_keeps_gray(self, degrees):
        gray = solid(100, 100, 100)
        assert apply_adjustments(gray, hue_rotation=degrees) == gray

    def test_alpha_preserved(self, colorful):
        result = apply_adjustments(colorful, 1.2, 0.8, 1.5, 30.0)
        np.testing.assert_array_equal(result.pixels[:, :, 3], colorful.pixels[:, :, 3])


class TestAdjustmentOrder:
    """Stages run brightness -> contrast -> saturation -> hue, clamping between."""

    def test_clamp_between_stages(self):
        # brightness clamps 200 * 2 to 1.0 before contrast 0.5 pulls it down
        result = apply_adjustments(solid(200, 200, 200), brightness=2.0, contrast=0.5)
        assert pixel(result)[:3] == (191, 191, 191)

    def test_descriptor(self):
        operation = parse_request({"operation": "adjust", "brightness": 0.5})
        assert pixel(apply_adjust_operation(solid(100, 60, 20), operation)) == (50, 30, 10, 255)


class TestAdjustValidation:
    """Range checks."""

    @pytest.mark.parametrize("kwargs", [
        {"brightness": -0.1},
        {"brightness": 3.5},
        {"contrast": 4.0},
        {"saturation": -1.0},
        {"hue_rotation": 181.0},
        {"hue_rotation": -200.0},
    ])
    def test_out_of_range(self, kwargs):
        with pytest.raises(InvalidParameterError):
            apply_adjustments(solid(1, 2, 3), **kwargs)
