"""Custom exceptions for the FireFX fire effect package.

This module defines a hierarchy of exceptions used throughout FireFX
to provide clear, specific error messages and enable targeted exception
handling by users of the library.

Exception Hierarchy:
    FireFXError (base)
    ├── ConfigurationError - Invalid simulator parameters
    ├── ValidationError - Input precondition failures
    ├── ConversionError - Color value outside [0,1] beyond tolerance
    └── HueRangeError - Hue midpoint cannot be placed inside a hue range

Example:
    >>> from firefx.exceptions import ConfigurationError
    >>> raise ConfigurationError("Grid width must be positive", parameter="width")
"""

from typing import Optional


class FireFXError(Exception):
    """Base exception for all FireFX-related errors.

    All custom exceptions in FireFX inherit from this class, allowing
    users to catch all FireFX errors with a single except clause if desired.

    Example:
        >>> try:
        ...     frame = fire.update()
        ... except FireFXError as e:
        ...     print(f"Frame aborted: {e}")
    """

    pass


class ConfigurationError(FireFXError):
    """Raised when simulator parameters are invalid.

    This exception is raised when:
    - Grid dimensions are not positive integers
    - An unknown heat overflow mode is requested
    - The frame interval is not positive

    Attributes:
        message (str): Explanation of the configuration error.
        parameter (str): Name of the problematic parameter, if applicable.

    Example:
        >>> raise ConfigurationError("Unknown overflow mode", parameter="overflow")
    """

    def __init__(self, message: str, parameter: Optional[str] = None):
        self.parameter = parameter

        if parameter:
            full_message = f"{message} (parameter '{parameter}')"
        else:
            full_message = message

        super().__init__(full_message)


class ValidationError(FireFXError):
    """Raised when an input precondition fails.

    This exception is raised when:
    - RGB components passed to an RGB to HSL/HSV conversion are outside [0,1]
    - A heat grid or palette with the wrong shape is handed to the renderer

    These indicate programming errors in the caller and are not recoverable.

    Attributes:
        message (str): Explanation of the validation failure.
        field (str): Name of the field that failed validation, if applicable.
        value: The invalid value, if applicable.

    Example:
        >>> raise ValidationError(
        ...     "RGB component must be in [0,1]",
        ...     field="r",
        ...     value=1.5
        ... )
    """

    def __init__(self, message: str, field: Optional[str] = None, value=None):
        self.field = field
        self.value = value

        parts = []
        if field:
            parts.append(f"field '{field}'")
        if value is not None:
            parts.append(f"value={value!r}")

        if parts:
            full_message = f"{message} ({', '.join(parts)})"
        else:
            full_message = message

        super().__init__(full_message)


class ConversionError(FireFXError):
    """Raised when a color value falls outside [0,1] beyond tolerance.

    A conversion step produced (or was handed) a channel that cannot be
    snapped back into the unit interval. This signals a logic error upstream;
    the value is never silently clamped beyond the tolerance band.

    Attributes:
        message (str): Explanation of the conversion fault.
        value (float): The offending value, if available.
        tolerance (float): Tolerance band that was exceeded, if available.

    Example:
        >>> raise ConversionError("Value out of tolerance", value=1.2, tolerance=0.005)
    """

    def __init__(self, message: str, value: Optional[float] = None, tolerance: Optional[float] = None):
        self.value = value
        self.tolerance = tolerance

        parts = []
        if value is not None:
            parts.append(f"value={value!r}")
        if tolerance is not None:
            parts.append(f"tolerance={tolerance!r}")

        if parts:
            full_message = f"{message} ({', '.join(parts)})"
        else:
            full_message = message

        super().__init__(full_message)


class HueRangeError(FireFXError):
    """Raised when a hue midpoint cannot be placed inside a hue range.

    Attributes:
        message (str): Explanation of the range fault.
        hue_min (float): Normalized lower bound of the range.
        hue_mid (float): Normalized midpoint that could not be placed.
        hue_max (float): Normalized upper bound of the range.

    Example:
        >>> raise HueRangeError(
        ...     "Hue middle out of range",
        ...     hue_min=0.1, hue_mid=0.6, hue_max=0.3
        ... )
    """

    def __init__(self, message: str, hue_min: Optional[float] = None,
                 hue_mid: Optional[float] = None, hue_max: Optional[float] = None):
        self.hue_min = hue_min
        self.hue_mid = hue_mid
        self.hue_max = hue_max

        if None not in (hue_min, hue_mid, hue_max):
            full_message = f"{message} (min={hue_min:.4f}, mid={hue_mid:.4f}, max={hue_max:.4f})"
        else:
            full_message = message

        super().__init__(full_message)
