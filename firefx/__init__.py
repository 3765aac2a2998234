"""FireFX - procedural fire effect rendered to raw RGB frames."""

from firefx.fire_simulator.fire import FireSim, create_simulator
from firefx.fire_simulator.renderer import FrameRenderer
from firefx.models.palette import build_fire_palette
from firefx.utilities.data_classes import FireParams, HeatOverflow
from firefx.exceptions import (
    FireFXError,
    ConfigurationError,
    ValidationError,
    ConversionError,
    HueRangeError,
)

__version__ = "0.1.0"

__all__ = [
    "FireSim",
    "create_simulator",
    "FrameRenderer",
    "build_fire_palette",
    "FireParams",
    "HeatOverflow",
    "FireFXError",
    "ConfigurationError",
    "ValidationError",
    "ConversionError",
    "HueRangeError",
]
