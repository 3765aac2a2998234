"""Shared pytest fixtures for FireFX test suite.

This module provides reusable fixtures for testing FireFX components,
including seeded random generators, palettes and small simulators.
"""

import pytest
import numpy as np


# ============================================================================
# Random Number Generator Fixtures
# ============================================================================

@pytest.fixture
def seeded_rng():
    """Provide seeded random number generator for reproducible tests.

    Returns:
        np.random.Generator: Seeded RNG with seed 42.
    """
    return np.random.default_rng(42)


@pytest.fixture
def rng_factory():
    """Provide factory for creating seeded random number generators.

    Returns:
        Callable: Function that takes a seed and returns an RNG.
    """
    def _create_rng(seed=42):
        return np.random.default_rng(seed)
    return _create_rng


# ============================================================================
# Palette and Simulator Fixtures
# ============================================================================

@pytest.fixture(scope="session")
def fire_palette():
    """Provide the fire palette, built once per test session.

    Returns:
        np.ndarray: (256, 3) uint8 palette.
    """
    from firefx.models.palette import build_fire_palette
    return build_fire_palette()


@pytest.fixture
def default_params():
    """Provide the default 30x100 parameters with a fixed seed.

    Returns:
        FireParams: Default grid with seed 7.
    """
    from firefx.utilities.data_classes import FireParams
    return FireParams(seed=7)


@pytest.fixture
def small_sim():
    """Provide a small seeded simulator.

    Returns:
        FireSim: 8 columns by 6 rows, seed 1234.
    """
    from firefx.fire_simulator.fire import create_simulator
    return create_simulator(width=8, height=6, seed=1234)


@pytest.fixture
def default_sim(default_params):
    """Provide a simulator with the default 30x100 grid.

    Returns:
        FireSim: Seeded default-size simulator.
    """
    from firefx.fire_simulator.fire import FireSim
    return FireSim(default_params)
