"""Shared utilities for the FireFX package.

Modules:
    - color_util: HSL/HSV/RGB conversion, hue helpers and lookup tables.
    - data_classes: Simulator parameters.
    - numba_utils: Numba JIT configuration helpers.
"""
