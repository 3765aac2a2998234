"""Numba JIT compilation utilities for FireFX.

This module provides configuration and helper utilities for Numba JIT
compilation used by the per-frame fire kernels.

Environment Variables:
    FIREFX_DISABLE_JIT: Set to '1' to disable JIT compilation globally.
                        Useful for debugging or stepping through the kernels.
    NUMBA_DISABLE_JIT: Numba's built-in flag, also respected.

Usage:
    from firefx.utilities.numba_utils import njit_if_enabled

    @njit_if_enabled(cache=True)
    def my_hot_function(heat):
        ...
"""

import os
from typing import Callable, Any

import numba
from numba import njit
from numba import config as numba_config

# Check if JIT should be disabled via environment variable
DISABLE_JIT = (os.environ.get('FIREFX_DISABLE_JIT', '0') == '1'
               or os.environ.get('NUMBA_DISABLE_JIT', '0') == '1')

if DISABLE_JIT:
    numba_config.DISABLE_JIT = True

NUMBA_VERSION = numba.__version__


def njit_if_enabled(**jit_kwargs: Any) -> Callable:
    """Decorator that applies Numba njit unless JIT is disabled.

    When JIT is disabled the function is returned unchanged and runs as
    plain Python over the same numpy arrays.

    Args:
        **jit_kwargs: Keyword arguments to pass to numba.njit.
                      Common options:
                      - cache=True: Cache compiled functions to disk
                      - fastmath=True: Use fast math optimizations

    Returns:
        Callable: Decorated function (JIT-compiled if enabled, else unchanged).
    """
    def decorator(func: Callable) -> Callable:
        if not DISABLE_JIT:
            return njit(**jit_kwargs)(func)
        return func
    return decorator


def get_numba_status() -> dict:
    """Get information about Numba configuration.

    Returns:
        dict: Dictionary containing:
            - version: str, installed Numba version
            - jit_enabled: bool, whether JIT compilation is enabled
            - disable_jit_env: bool, whether JIT was disabled from the environment
    """
    return {
        'version': NUMBA_VERSION,
        'jit_enabled': not DISABLE_JIT,
        'disable_jit_env': DISABLE_JIT,
    }


def warmup_jit_cache() -> None:
    """Compile the fire kernels ahead of the first frame.

    Runs every kernel once over a tiny grid so that compilation happens
    during initialization instead of inside the first ``update()``.
    """
    if DISABLE_JIT:
        return

    import numpy as np
    from firefx.fire_simulator import kernels

    kernels.diffuse_heat(np.zeros((3, 3), dtype=np.uint32))
