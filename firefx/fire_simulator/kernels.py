"""Compiled inner loops for the fire simulation.

.. autofunction:: diffuse_heat
"""

import numpy as np

from firefx.utilities.numba_utils import njit_if_enabled

# Four-tap sum is multiplied by DECAY_NUMERATOR and divided by DECAY_DENOMINATOR,
# a little under a quarter, so heat cools as it rises.
DECAY_NUMERATOR = 32
DECAY_DENOMINATOR = 129


@njit_if_enabled(cache=True)
def diffuse_heat(heat):
    """Advance every row except the bottom one, in place.

    Rows are processed top to bottom. Each cell becomes the decayed sum of the
    three cells below it and the cell two rows below. Columns wrap around, and
    so do rows: the second to last row reads row 0, which has already been
    updated this pass.

    Args:
        heat (np.ndarray): uint32 grid of shape (rows, cols), modified in place.
    """
    rows, cols = heat.shape
    for y in range(rows - 1):
        below = (y + 1) % rows
        below2 = (y + 2) % rows
        for x in range(cols):
            total = (np.int64(heat[below, (x - 1 + cols) % cols])
                     + np.int64(heat[below, x])
                     + np.int64(heat[below, (x + 1) % cols])
                     + np.int64(heat[below2, x]))
            heat[y, x] = (total * DECAY_NUMERATOR) // DECAY_DENOMINATOR
