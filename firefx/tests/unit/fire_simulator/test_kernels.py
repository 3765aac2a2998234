"""Tests for the compiled diffusion kernel.

The kernel updates the grid in place from top to bottom, so the second to
last row reads row 0 after row 0 has already been recomputed. These tests
pin that ordering as well as the four-tap decay formula.
"""

import pytest
import numpy as np

from firefx.fire_simulator.kernels import diffuse_heat


def reference_diffuse(heat):
    """Straightforward in-place reference loop."""
    rows, cols = heat.shape
    for y in range(rows - 1):
        for x in range(cols):
            total = (int(heat[(y + 1) % rows, (x - 1 + cols) % cols])
                     + int(heat[(y + 1) % rows, x])
                     + int(heat[(y + 1) % rows, (x + 1) % cols])
                     + int(heat[(y + 2) % rows, x]))
            heat[y, x] = (total * 32) // 129


class TestDiffuseFormula:
    """Hand-computed single steps."""

    def test_uniform_bottom_row(self):
        heat = np.zeros((4, 3), dtype=np.uint32)
        heat[3] = 129

        diffuse_heat(heat)

        np.testing.assert_array_equal(heat[0], [0, 0, 0])
        np.testing.assert_array_equal(heat[1], [32, 32, 32])    # 129 * 32 // 129
        np.testing.assert_array_equal(heat[2], [96, 96, 96])    # 3 * 129 * 32 // 129
        np.testing.assert_array_equal(heat[3], [129, 129, 129])

    def test_horizontal_wrap(self):
        heat = np.zeros((4, 4), dtype=np.uint32)
        heat[3, 0] = 129

        diffuse_heat(heat)

        # Row 1 only sees the hot cell two rows down
        np.testing.assert_array_equal(heat[1], [32, 0, 0, 0])
        # Row 2 sees it from columns 3, 0 and 1
        np.testing.assert_array_equal(heat[2], [32, 32, 0, 32])

    def test_vertical_wrap_reads_updated_top_row(self):
        heat = np.zeros((4, 3), dtype=np.uint32)
        heat[2] = 129

        diffuse_heat(heat)

        np.testing.assert_array_equal(heat[0], [32, 32, 32])
        np.testing.assert_array_equal(heat[1], [96, 96, 96])
        # Row 2 reads the zero bottom row and the new row 0: 32 * 32 // 129
        np.testing.assert_array_equal(heat[2], [7, 7, 7])

    def test_bottom_row_untouched(self, seeded_rng):
        heat = seeded_rng.integers(0, 256, size=(5, 6)).astype(np.uint32)
        bottom = heat[-1].copy()

        diffuse_heat(heat)

        np.testing.assert_array_equal(heat[-1], bottom)


class TestDiffuseMatchesReference:
    """Compare against the reference loop on random grids."""

    @pytest.mark.parametrize("shape", [(7, 5), (100, 30), (2, 4), (1, 5), (3, 1)])
    def test_random_grid(self, rng_factory, shape):
        rng = rng_factory(sum(shape))
        heat = rng.integers(0, 256, size=shape).astype(np.uint32)
        expected = heat.copy()

        diffuse_heat(heat)
        reference_diffuse(expected)

        np.testing.assert_array_equal(heat, expected)

    def test_keeps_dtype(self):
        heat = np.full((4, 4), 255, dtype=np.uint32)
        diffuse_heat(heat)
        assert heat.dtype == np.uint32


class TestDecay:
    """Heat cools when nothing new is injected."""

    def test_values_stay_in_byte_range(self):
        heat = np.full((6, 5), 255, dtype=np.uint32)
        for _ in range(10):
            diffuse_heat(heat)
        assert heat[:-1].max() <= 253

    def test_max_strictly_decreases_to_zero(self, seeded_rng):
        heat = seeded_rng.integers(0, 256, size=(6, 8)).astype(np.uint32)
        heat[-1] = 0

        previous = int(heat.max())
        steps = 0
        while previous > 0:
            diffuse_heat(heat)
            current = int(heat.max())
            assert current < previous
            previous = current
            steps += 1

        assert steps <= 255
        assert not heat.any()
