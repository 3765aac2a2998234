"""
Core fire effect model.

This module defines the `FireSim` class, which implements the classic
**scanline fire effect**: the bottom row of a heat grid is refilled with
random heat every frame and the rows above it are recomputed from the rows
beneath them, so heat drifts upward and cools. The grid is then mapped
through a fire palette into an RGB byte buffer.

Classes:
    - FireSim: The fire grid simulator and renderer pair.

Functions:
    - create_simulator: Build a `FireSim` from plain dimensions.

.. autoclass:: FireSim
    :members:
"""

from typing import Callable, Optional, Tuple

from tqdm import tqdm
import numpy as np

from firefx.fire_simulator.kernels import diffuse_heat
from firefx.fire_simulator.renderer import FrameRenderer
from firefx.models.palette import build_fire_palette
from firefx.utilities.data_classes import FireParams
from firefx.utilities.numba_utils import warmup_jit_cache

# Upper bound (exclusive) of the 31-bit signed draw that seeds the bottom row
RAND_MAX = 2**31 - 1


class FireSim:
    """A fixed-size fire grid that renders one RGB frame per update.

    Each call to `update` runs two phases, then renders:

    1. **Seed**: every cell of the bottom row gets a fresh heat value in [0,255].
    2. **Diffuse**: every other row, top to bottom, becomes a decayed four-tap
       average of the rows below it (see `kernels.diffuse_heat`).

    Attributes:
        params (FireParams): Grid size, seed and rendering options.
        heat (np.ndarray): Read-only view of the (height, width) uint32 heat grid.
        palette (np.ndarray): The (256, 3) uint8 fire palette.
        frame_count (int): Number of updates since construction or the last reset.

    Notes:
        - The returned buffer is reused between frames. Copy it if a frame must
          outlive the next `update`.
        - Not thread safe; the display must not read the buffer during `update`.
    """
    def __init__(self, params: FireParams, rng: Optional[np.random.Generator] = None):
        """Initialize a zeroed heat grid, the palette and the renderer.

        The diffusion kernel is compiled here so the first `update` runs at
        full speed.

        Args:
            params (FireParams): Simulation parameters, validated here.
            rng (np.random.Generator, optional): Generator used for seeding the
                bottom row. Defaults to ``np.random.default_rng(params.seed)``.

        Raises:
            ConfigurationError: If `params` is invalid.
        """
        params.validate()
        print(f"Fire Simulation Initializing ({params.width}x{params.height})...")

        self._params = params
        self._rng = rng if rng is not None else np.random.default_rng(params.seed)

        self._heat = np.zeros(params.shape, dtype=np.uint32)
        self._palette = build_fire_palette()
        self._renderer = FrameRenderer(self._palette, params.shape, params.overflow)

        self._frame_count = 0

        warmup_jit_cache()

    @property
    def params(self) -> FireParams:
        return self._params

    @property
    def width(self) -> int:
        return self._params.width

    @property
    def height(self) -> int:
        return self._params.height

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions (height, width)."""
        return self._params.shape

    @property
    def heat(self) -> np.ndarray:
        view = self._heat.view()
        view.flags.writeable = False
        return view

    @property
    def palette(self) -> np.ndarray:
        return self._palette

    @property
    def renderer(self) -> FrameRenderer:
        return self._renderer

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def seed(self):
        """Refill the bottom row with random heat in [0,255].

        Each value is the magnitude of a 32-bit signed sum ``32768 + draw``,
        reduced modulo 256.
        """
        draws = self._rng.integers(0, RAND_MAX, size=self.width, dtype=np.int64)
        signed = (draws + 32768 + 2**31) % 2**32 - 2**31
        self._heat[-1, :] = np.abs(signed) % 256

    def diffuse(self):
        """Recompute every row above the bottom one from the rows below it."""
        diffuse_heat(self._heat)

    def render(self) -> np.ndarray:
        """Map the current grid through the palette without advancing it."""
        return self._renderer.render(self._heat)

    def update(self) -> np.ndarray:
        """Advance the fire by one frame and render it.

        Returns:
            np.ndarray: Flat uint8 RGB buffer of length ``3 * width * height``.
        """
        self.seed()
        self.diffuse()
        frame = self.render()
        self._frame_count += 1
        return frame

    def run(self, num_frames: int, callback: Optional[Callable[[np.ndarray], None]] = None,
            progress: bool = False) -> np.ndarray:
        """Run several frames back to back.

        Args:
            num_frames (int): Number of updates to perform.
            callback (Callable, optional): Called with each rendered buffer.
            progress (bool, optional): Show a tqdm progress bar. Defaults to False.

        Returns:
            np.ndarray: The buffer after the last frame.
        """
        frames = range(num_frames)
        if progress:
            frames = tqdm(frames, desc="Rendering fire", unit="frame")

        frame = self._renderer.buffer
        for _ in frames:
            frame = self.update()
            if callback is not None:
                callback(frame)

        return frame

    def reset(self):
        """Zero the heat grid and the frame counter."""
        self._heat.fill(0)
        self._frame_count = 0


def create_simulator(width: int = 30, height: int = 100, seed: Optional[int] = None, **kwargs) -> FireSim:
    """Build a `FireSim` for a ``width`` x ``height`` grid.

    Extra keyword arguments are forwarded to `FireParams`.
    """
    return FireSim(FireParams(width=width, height=height, seed=seed, **kwargs))
