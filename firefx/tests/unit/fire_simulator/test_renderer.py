"""Tests for FrameRenderer palette lookup."""

import pytest
import numpy as np

from firefx.exceptions import ValidationError
from firefx.fire_simulator.renderer import FrameRenderer
from firefx.utilities.data_classes import HeatOverflow


@pytest.fixture
def ramp_palette():
    """Palette whose entry i is (i, 255 - i, i // 2), easy to invert."""
    index = np.arange(256)
    palette = np.stack([index, 255 - index, index // 2], axis=1).astype(np.uint8)
    palette.flags.writeable = False
    return palette


class TestFrameRendererInit:
    """Tests for renderer construction."""

    def test_buffer_size(self, ramp_palette):
        renderer = FrameRenderer(ramp_palette, (100, 30))
        assert renderer.buffer.shape == (9000,)
        assert renderer.buffer.dtype == np.uint8
        assert renderer.frame_image().shape == (100, 30, 3)

    def test_image_view_shares_buffer(self, ramp_palette):
        renderer = FrameRenderer(ramp_palette, (4, 5))
        assert np.shares_memory(renderer.buffer, renderer.frame_image())

    def test_default_overflow_is_wrap(self, ramp_palette):
        assert FrameRenderer(ramp_palette, (2, 2)).overflow == HeatOverflow.WRAP

    def test_bad_palette_shape(self):
        with pytest.raises(ValidationError):
            FrameRenderer(np.zeros((128, 3), dtype=np.uint8), (2, 2))

    def test_bad_overflow_mode(self, ramp_palette):
        with pytest.raises(ValidationError):
            FrameRenderer(ramp_palette, (2, 2), overflow="saturate")


class TestRender:
    """Tests for render()."""

    def test_zero_grid_uses_first_entry(self, fire_palette):
        renderer = FrameRenderer(fire_palette, (3, 4))
        frame = renderer.render(np.zeros((3, 4), dtype=np.uint32))
        assert not frame.any()

    def test_row_major_rgb_layout(self, ramp_palette):
        renderer = FrameRenderer(ramp_palette, (2, 2))
        heat = np.array([[0, 255], [64, 1]], dtype=np.uint32)

        frame = renderer.render(heat)

        expected = np.concatenate([ramp_palette[0], ramp_palette[255],
                                   ramp_palette[64], ramp_palette[1]])
        np.testing.assert_array_equal(frame, expected)

    def test_pixel_position(self, ramp_palette):
        renderer = FrameRenderer(ramp_palette, (3, 5))
        heat = np.zeros((3, 5), dtype=np.uint32)
        heat[2, 1] = 200

        frame = renderer.render(heat)

        index = (1 + 2 * 5) * 3
        np.testing.assert_array_equal(frame[index:index + 3], ramp_palette[200])

    def test_wrap_overflow(self, ramp_palette):
        renderer = FrameRenderer(ramp_palette, (1, 2), overflow=HeatOverflow.WRAP)
        frame = renderer.render(np.array([[300, 256]], dtype=np.uint32))
        np.testing.assert_array_equal(frame, np.concatenate([ramp_palette[44], ramp_palette[0]]))

    def test_clamp_overflow(self, ramp_palette):
        renderer = FrameRenderer(ramp_palette, (1, 2), overflow=HeatOverflow.CLAMP)
        frame = renderer.render(np.array([[300, 17]], dtype=np.uint32))
        np.testing.assert_array_equal(frame, np.concatenate([ramp_palette[255], ramp_palette[17]]))

    def test_modes_agree_in_byte_range(self, ramp_palette, seeded_rng):
        heat = seeded_rng.integers(0, 256, size=(6, 7)).astype(np.uint32)
        wrap = FrameRenderer(ramp_palette, (6, 7), HeatOverflow.WRAP).render(heat)
        clamp = FrameRenderer(ramp_palette, (6, 7), HeatOverflow.CLAMP).render(heat)
        np.testing.assert_array_equal(wrap, clamp)

    def test_buffer_reused(self, ramp_palette):
        renderer = FrameRenderer(ramp_palette, (2, 3))
        first = renderer.render(np.zeros((2, 3), dtype=np.uint32))
        second = renderer.render(np.full((2, 3), 9, dtype=np.uint32))
        assert first is second
        assert first[0] == 9

    def test_shape_mismatch(self, ramp_palette):
        renderer = FrameRenderer(ramp_palette, (2, 3))
        with pytest.raises(ValidationError):
            renderer.render(np.zeros((3, 2), dtype=np.uint32))
