"""Palette lookup from the heat grid to an RGB byte buffer.

Classes:
    - FrameRenderer: Owns the output buffer and fills it from a heat grid.

.. autoclass:: FrameRenderer
    :members:
"""

from typing import Tuple

import numpy as np

from firefx.exceptions import ValidationError
from firefx.models.palette import PALETTE_SIZE
from firefx.utilities.data_classes import HeatOverflow


class FrameRenderer:
    """Maps heat values through the palette into a flat RGB buffer.

    The buffer is allocated once and overwritten on every ``render`` call.
    It is row-major with three consecutive bytes (R, G, B) per pixel.

    Attributes:
        palette (np.ndarray): (256, 3) uint8 palette.
        shape (Tuple[int, int]): Heat grid shape (rows, cols) this renderer accepts.
        overflow (str): ``HeatOverflow`` mode used to reduce heat to a palette index.
    """

    def __init__(self, palette: np.ndarray, shape: Tuple[int, int], overflow: str = HeatOverflow.WRAP):
        if palette.shape != (PALETTE_SIZE, 3):
            raise ValidationError(f"Palette must have shape ({PALETTE_SIZE}, 3)",
                                  field="palette", value=palette.shape)
        if overflow not in HeatOverflow.modes:
            raise ValidationError("Unknown overflow mode", field="overflow", value=overflow)

        self._palette = palette
        self._shape = tuple(shape)
        self._overflow = overflow

        rows, cols = self._shape
        self._buffer = np.zeros(rows * cols * 3, dtype=np.uint8)

        # (rows, cols, 3) view onto the same memory
        self._image = self._buffer.reshape(rows, cols, 3)
        self._index = np.zeros(self._shape, dtype=np.intp)

    @property
    def palette(self) -> np.ndarray:
        return self._palette

    @property
    def shape(self) -> Tuple[int, int]:
        return self._shape

    @property
    def overflow(self) -> str:
        return self._overflow

    @property
    def buffer(self) -> np.ndarray:
        """The output buffer, valid until the next ``render`` call."""
        return self._buffer

    def render(self, heat: np.ndarray) -> np.ndarray:
        """Fill the output buffer from a heat grid.

        Args:
            heat (np.ndarray): Heat grid with the renderer's shape.

        Raises:
            ValidationError: If the grid shape does not match.

        Returns:
            np.ndarray: The flat uint8 buffer of length ``rows * cols * 3``.
        """
        if heat.shape != self._shape:
            raise ValidationError("Heat grid shape does not match renderer",
                                  field="heat", value=heat.shape)

        if self._overflow == HeatOverflow.WRAP:
            np.remainder(heat, PALETTE_SIZE, out=self._index, casting="unsafe")
        else:
            np.minimum(heat, PALETTE_SIZE - 1, out=self._index, casting="unsafe")

        np.take(self._palette, self._index, axis=0, out=self._image)
        return self._buffer

    def frame_image(self) -> np.ndarray:
        """Return the buffer as a (rows, cols, 3) image view."""
        return self._image
