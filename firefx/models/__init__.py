"""Color models for FireFX.

Modules:
    - palette: Fire palette generation.
"""
