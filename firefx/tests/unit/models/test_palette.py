"""Tests for fire palette generation."""

import pytest
import numpy as np

from firefx.models.palette import PALETTE_SIZE, build_fire_palette, quantize_channel


class TestQuantizeChannel:
    """Tests for [0,1] to byte quantization."""

    @pytest.mark.parametrize("value,expected", [
        (0.0, 0),
        (1.0, 255),
        (0.2, 51),
        (0.5, 128),        # 127.5 rounds away from zero
        (1.01, 255),
        (-0.01, 0),
    ])
    def test_quantize(self, value, expected):
        assert quantize_channel(value) == expected

    def test_returns_int(self):
        assert isinstance(quantize_channel(0.7), int)


class TestBuildFirePalette:
    """Tests for the 256 entry fire palette."""

    def test_shape_and_dtype(self, fire_palette):
        assert fire_palette.shape == (PALETTE_SIZE, 3)
        assert fire_palette.dtype == np.uint8

    def test_read_only(self, fire_palette):
        with pytest.raises(ValueError):
            fire_palette[0, 0] = 10

    def test_starts_black(self, fire_palette):
        np.testing.assert_array_equal(fire_palette[0], [0, 0, 0])

    def test_ends_white(self, fire_palette):
        np.testing.assert_array_equal(fire_palette[255], [255, 255, 255])

    def test_upper_half_is_white(self, fire_palette):
        assert np.all(fire_palette[128:] == 255)

    def test_red_channel_non_decreasing(self, fire_palette):
        red = fire_palette[:, 0].astype(int)
        assert np.all(np.diff(red) >= 0)

    def test_known_entries(self, fire_palette):
        np.testing.assert_array_equal(fire_palette[1], [4, 0, 0])
        np.testing.assert_array_equal(fire_palette[64], [255, 128, 1])

    def test_red_leads_green_leads_blue(self, fire_palette):
        """A fire ramp never has more green than red or more blue than green."""
        palette = fire_palette.astype(int)
        assert np.all(palette[:, 0] >= palette[:, 1])
        assert np.all(palette[:, 1] >= palette[:, 2])

    def test_deterministic(self, fire_palette):
        np.testing.assert_array_equal(build_fire_palette(), fire_palette)
