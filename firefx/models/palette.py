"""Fire palette generation.

The palette maps a heat intensity in [0,255] to an RGB byte triple. Hue runs
from red to yellow over the whole range while lightness climbs from black to
full brightness over the first half, giving black -> red -> orange -> yellow
-> white.

.. autofunction:: build_fire_palette
"""

import numpy as np

from firefx.utilities.color_util import hsl_to_rgb

PALETTE_SIZE = 256


def quantize_channel(value: float) -> int:
    """Scale a [0,1] channel to a byte, rounding half away from zero."""
    scaled = value * 255
    byte = int(np.copysign(np.floor(abs(scaled) + 0.5), scaled))
    if byte > 255:
        byte = 255
    if byte < 0:
        byte = 0
    return byte


def build_fire_palette() -> np.ndarray:
    """Build the 256 entry fire palette.

    For intensity ``x``: hue is ``x/255`` scaled into the red to yellow third
    of the circle, saturation is full and lightness is ``min(1, 2x/255)``.

    Returns:
        np.ndarray: Read-only uint8 array of shape (256, 3).
    """
    palette = np.zeros((PALETTE_SIZE, 3), dtype=np.uint8)

    for x in range(PALETTE_SIZE):
        hue = x / 255.0
        lit = min(1.0, hue * 2)
        r, g, b = hsl_to_rgb(hue / 3, 1.0, lit)
        palette[x] = (quantize_channel(r), quantize_channel(g), quantize_channel(b))

    palette.flags.writeable = False
    return palette
