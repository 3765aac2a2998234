"""Fire grid simulation and rendering.

This package provides the fire grid simulator, the palette lookup renderer,
the compiled diffusion kernel and an optional real-time matplotlib display.

Classes:
    - FireSim: Fire grid simulator producing one RGB frame per update.
    - FrameRenderer: Maps a heat grid through the palette into an RGB buffer.
    - RealTimeVisualizer: Real-time display of a running simulator.

.. autoclass:: FireSim
    :members:

.. autoclass:: FrameRenderer
    :members:

.. autoclass:: RealTimeVisualizer
    :members:
"""
