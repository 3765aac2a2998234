"""Color space conversion and hue helpers.

All colors are handled as real values in [0,1]. Hues are fractions of a turn:
0 is red, 1/3 green, 2/3 blue, and any real number maps onto the circle by
dropping its integer part.

Conversions validate their results against a small tolerance band and then
snap them into [0,1]. A value outside the band raises ``ConversionError``;
an RGB input outside [0,1] raises ``ValidationError``.

.. autofunction:: hslv_to_rgb

.. autofunction:: rgb_to_hslv

.. autofunction:: scale_hue
"""

from typing import Tuple

import numpy as np

from firefx.exceptions import ConversionError, HueRangeError, ValidationError

# Output check used by hslv_to_rgb
CONVERSION_TOLERANCE = 0.005

# Default snap band for clamp01 and the RGB to HSLV chroma test
CLAMP_TOLERANCE = 0.00001

# Spacing tolerance for hue ranges
HUE_RANGE_TOLERANCE = 0.0001

# Saturation below this is treated as achromatic
ACHROMATIC_TOLERANCE = 0.000001


class HueTables:
    """Fixed lookup tables used by the color helpers.

    Attributes:
        - **gamma** (np.ndarray): 256 entry byte gamma correction table for LED
          strands, ``round(255 * (n / 255) ** 2.8)``.
        - **hue_scale** (np.ndarray): 512 entry monotonic hue warp. Built
          offline from a rotated parabola with stretch parameter h=0.10 applied
          per 60 degree sector; entries are in units of 1/512 of a turn.
    """

    gamma = np.array([
        0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,
        0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  1,  1,  1,  1,
        1,  1,  1,  1,  1,  1,  1,  1,  1,  2,  2,  2,  2,  2,  2,  2,
        2,  3,  3,  3,  3,  3,  3,  3,  4,  4,  4,  4,  4,  5,  5,  5,
        5,  6,  6,  6,  6,  7,  7,  7,  7,  8,  8,  8,  9,  9,  9, 10,
        10, 10, 11, 11, 11, 12, 12, 13, 13, 13, 14, 14, 15, 15, 16, 16,
        17, 17, 18, 18, 19, 19, 20, 20, 21, 21, 22, 22, 23, 24, 24, 25,
        25, 26, 27, 27, 28, 29, 29, 30, 31, 32, 32, 33, 34, 35, 35, 36,
        37, 38, 39, 39, 40, 41, 42, 43, 44, 45, 46, 47, 48, 49, 50, 50,
        51, 52, 54, 55, 56, 57, 58, 59, 60, 61, 62, 63, 64, 66, 67, 68,
        69, 70, 72, 73, 74, 75, 77, 78, 79, 81, 82, 83, 85, 86, 87, 89,
        90, 92, 93, 95, 96, 98, 99, 101, 102, 104, 105, 107, 109, 110, 112, 114,
        115, 117, 119, 120, 122, 124, 126, 127, 129, 131, 133, 135, 137, 138, 140, 142,
        144, 146, 148, 150, 152, 154, 156, 158, 160, 162, 164, 167, 169, 171, 173, 175,
        177, 180, 182, 184, 186, 189, 191, 193, 196, 198, 200, 203, 205, 208, 210, 213,
        215, 218, 220, 223, 225, 228, 231, 233, 236, 239, 241, 244, 247, 249, 252, 255,
    ], dtype=np.uint8)

    hue_scale = np.array([
        0, 2, 4, 5, 7, 9, 10, 12, 13, 15, 16, 18, 19, 21, 22, 23, 25, 26, 27,
        29, 30, 31, 32, 34, 35, 36, 37, 38, 40, 41, 42, 43, 44, 45, 46, 47,
        48, 49, 50, 51, 52, 53, 54, 55, 56, 57, 58, 58, 59, 60, 61, 62, 63,
        63, 64, 65, 66, 67, 67, 68, 69, 70, 70, 71, 72, 73, 73, 74, 75, 75,
        76, 77, 77, 78, 79, 79, 80, 80, 81, 82, 82, 83, 83, 84, 85, 85, 86,
        86, 87, 87, 88, 89, 89, 90, 90, 91, 92, 92, 93, 94, 94, 95, 96, 96,
        97, 98, 98, 99, 100, 101, 101, 102, 103, 104, 104, 105, 106, 107,
        107, 108, 109, 110, 111, 112, 113, 113, 114, 115, 116, 117, 118, 119,
        120, 121, 122, 123, 124, 125, 126, 127, 128, 129, 130, 131, 133, 134,
        135, 136, 137, 139, 140, 141, 142, 144, 145, 146, 148, 149, 150, 152,
        153, 155, 156, 158, 159, 161, 163, 164, 166, 168, 169, 171, 173, 175,
        176, 178, 180, 181, 183, 184, 186, 187, 189, 190, 192, 193, 195, 196,
        197, 199, 200, 201, 202, 204, 205, 206, 207, 208, 209, 211, 212, 213,
        214, 215, 216, 217, 218, 219, 220, 221, 222, 223, 224, 225, 226, 227,
        228, 228, 229, 230, 231, 232, 233, 234, 234, 235, 236, 237, 238, 238,
        239, 240, 241, 241, 242, 243, 243, 244, 245, 246, 246, 247, 248, 248,
        249, 249, 250, 251, 251, 252, 253, 253, 254, 254, 255, 255, 256, 257,
        257, 258, 258, 259, 259, 260, 261, 261, 262, 263, 263, 264, 264, 265,
        266, 266, 267, 268, 269, 269, 270, 271, 271, 272, 273, 274, 274, 275,
        276, 277, 278, 278, 279, 280, 281, 282, 283, 284, 284, 285, 286, 287,
        288, 289, 290, 291, 292, 293, 294, 295, 296, 297, 298, 299, 300, 301,
        303, 304, 305, 306, 307, 308, 310, 311, 312, 313, 315, 316, 317, 319,
        320, 322, 323, 325, 326, 328, 329, 331, 332, 334, 336, 337, 339, 341,
        343, 344, 346, 348, 349, 351, 353, 354, 356, 357, 359, 360, 362, 363,
        364, 366, 367, 368, 370, 371, 372, 373, 375, 376, 377, 378, 379, 381,
        382, 383, 384, 385, 386, 387, 388, 389, 390, 391, 392, 393, 394, 395,
        396, 397, 398, 399, 399, 400, 401, 402, 403, 404, 405, 405, 406, 407,
        408, 408, 409, 410, 411, 411, 412, 413, 414, 414, 415, 416, 416, 417,
        418, 418, 419, 420, 420, 421, 422, 422, 423, 423, 424, 425, 425, 426,
        426, 427, 427, 428, 429, 429, 430, 430, 431, 432, 432, 433, 433, 434,
        435, 435, 436, 437, 437, 438, 439, 439, 440, 441, 442, 442, 443, 444,
        445, 445, 446, 447, 448, 449, 449, 450, 451, 452, 453, 454, 454, 455,
        456, 457, 458, 459, 460, 461, 462, 463, 464, 465, 466, 467, 468, 469,
        470, 471, 472, 474, 475, 476, 477, 478, 480, 481, 482, 483, 485, 486,
        487, 489, 490, 491, 493, 494, 496, 497, 499, 500, 502, 503, 505, 507,
        508, 510,
    ], dtype=np.uint16)

    gamma.flags.writeable = False
    hue_scale.flags.writeable = False


# ============================================================================
# Scalar helpers
# ============================================================================

def clamp01(value: float, tolerance: float = CLAMP_TOLERANCE) -> float:
    """Snap a value into [0,1].

    Values already in range pass through. Values within ``tolerance`` of
    either end snap to that end.

    Args:
        value (float): Value to clamp.
        tolerance (float, optional): Width of the snap band. Defaults to 1e-5.

    Raises:
        ConversionError: If the value lies outside the snap band.

    Returns:
        float: The clamped value.
    """
    if 0 <= value <= 1:
        return value
    if -tolerance < value < 0:
        return 0.0
    if 1 < value < 1 + tolerance:
        return 1.0

    raise ConversionError("Value out of tolerance", value=value, tolerance=tolerance)


def wrap01(value: float) -> float:
    """Wrap a real value into [0,1)."""
    return value - np.floor(value)


def normalize_hue(hue: float) -> float:
    """Return the representative of a hue in [0,1)."""
    return hue - np.floor(hue)


def positive_mod(a: float, b: float) -> float:
    """Remainder of ``|a|`` by ``|b|``, always in [0, |b|).

    Returns 0 when ``b`` is 0.
    """
    if b == 0:
        return 0.0
    a = abs(a)
    b = abs(b)
    return a - np.floor(a / b) * b


def upscale(real_color: float) -> int:
    """Convert a color channel in [0,1] to a byte.

    The channel falls into one of 256 bins of width 1/256, numbered from
    zero by subtracting one. This biases every value one bin lower than a
    plain ``floor(v * 256)``.

    Raises:
        ConversionError: If ``real_color`` is outside [0,1] beyond tolerance.
    """
    real_color = clamp01(real_color)

    bin_index = int(np.floor(real_color * 256)) - 1
    if bin_index < 0:
        bin_index = 0
    if bin_index > 255:
        bin_index = 255
    return bin_index


def gamma_correct(frame: np.ndarray) -> np.ndarray:
    """Map a byte buffer through the LED gamma table.

    Args:
        frame (np.ndarray): Array of uint8 channel values, any shape.

    Returns:
        np.ndarray: New uint8 array of the same shape.
    """
    return HueTables.gamma[np.asarray(frame, dtype=np.uint8)]


# ============================================================================
# HSL / HSV <-> RGB
# ============================================================================

def hslv_to_rgb(h: float, s: float, lv: float, use_value: bool) -> Tuple[float, float, float]:
    """Convert HSL or HSV to RGB, all components in [0,1].

    Hue runs red (0), yellow (1/6), green (1/3), cyan (1/2), blue (2/3),
    magenta (5/6) and is wrapped into [0,1) first.

    Args:
        h (float): Hue, any real value.
        s (float): Saturation in [0,1].
        lv (float): Lightness (HSL) or value (HSV) in [0,1].
        use_value (bool): Interpret ``lv`` as HSV value instead of HSL lightness.

    Raises:
        ConversionError: If a resulting channel lies more than 0.005 outside [0,1].

    Returns:
        Tuple[float, float, float]: (r, g, b).
    """
    h = h - np.floor(h)

    if abs(s) < ACHROMATIC_TOLERANCE:
        return lv, lv, lv

    if use_value:
        c = lv * s
        m = lv - c
    else:
        c = (1 - abs(2 * lv - 1)) * s
        m = lv - c * 0.5

    hp = 6 * h
    hp_mod2 = (hp / 2 - np.floor(hp / 2)) * 2
    x = c * (1 - abs(hp_mod2 - 1))

    r = g = b = 0.0
    if hp < 1:
        r, g = c, x
    elif hp < 2:
        r, g = x, c
    elif hp < 3:
        g, b = c, x
    elif hp < 4:
        g, b = x, c
    elif hp < 5:
        b, r = c, x
    elif hp < 6:
        b, r = x, c

    rgb = (r + m, g + m, b + m)

    for channel in rgb:
        if not -CONVERSION_TOLERANCE <= channel <= 1 + CONVERSION_TOLERANCE:
            raise ConversionError("HSL/HSV conversion produced channel outside [0,1]",
                                  value=channel, tolerance=CONVERSION_TOLERANCE)

    r, g, b = (clamp01(channel, CONVERSION_TOLERANCE) for channel in rgb)
    return r, g, b


def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    return hslv_to_rgb(h, s, l, False)


def hsv_to_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    return hslv_to_rgb(h, s, v, True)


def rgb_to_hslv(r: float, g: float, b: float) -> Tuple[float, float, float, float, float]:
    """Convert RGB in [0,1] to hue, both saturations, lightness and value.

    Args:
        r (float): Red in [0,1].
        g (float): Green in [0,1].
        b (float): Blue in [0,1].

    Raises:
        ValidationError: If any input component is outside [0,1].

    Returns:
        Tuple[float, float, float, float, float]: (h, s_hsl, s_hsv, l, v), each
        in [0,1], with h in [0,1).
    """
    for name, channel in (("r", r), ("g", g), ("b", b)):
        if not 0 <= channel <= 1:
            raise ValidationError("RGB component must be in [0,1]", field=name, value=channel)

    tolerance = CLAMP_TOLERANCE

    if r > g:
        c_max = max(r, b)
        c_min = min(g, b)
    else:
        c_max = max(g, b)
        c_min = min(r, b)
    c = c_max - c_min

    h = 0.0  # achromatic
    if abs(c) > tolerance:
        if abs(c_max - r) < tolerance:
            h = (g - b) / c
            if h < 0:
                h += 6
        elif abs(c_max - g) < tolerance:
            h = (b - r) / c + 2
        elif abs(c_max - b) < tolerance:
            h = (r - g) / c + 4

    h /= 6.0
    if h >= 1:
        h -= 1

    v = c_max
    l = (c_min + c_max) / 2.0

    s_hsv = 0.0
    if abs(v) > tolerance:
        s_hsv = clamp01(c / v)

    s_hsl = 0.0
    if tolerance < l < 1 - tolerance:
        s_hsl = clamp01(c / (1 - abs(2 * l - 1)))

    return h, s_hsl, s_hsv, l, v


def rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    h, s_hsl, _, l, _ = rgb_to_hslv(r, g, b)
    return h, s_hsl, l


def rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    h, _, s_hsv, _, v = rgb_to_hslv(r, g, b)
    return h, s_hsv, v


# ============================================================================
# Hue ranges
# ============================================================================

def normalize_hue_range(hue_min: float, hue_max: float) -> Tuple[float, float]:
    """Normalize a hue range.

    ``hue_min`` is brought into [0,1) and ``hue_max`` becomes the smallest
    equivalent hue strictly greater than it. A range spanning a full turn
    keeps its full-turn width.

    Returns:
        Tuple[float, float]: (hue_min, hue_max).
    """
    tolerance = HUE_RANGE_TOLERANCE
    delta = hue_max - hue_min
    hue_min = normalize_hue(hue_min)
    hue_max = normalize_hue(hue_max)
    if hue_max <= hue_min + tolerance:
        hue_max += 1.0
    if abs(hue_max - hue_min) < tolerance and abs(delta - 1.0) < tolerance:
        hue_max += 1.0
    return hue_min, hue_max


def normalize_hue_span(hue_min: float, hue_mid: float, hue_max: float) -> Tuple[float, float, float]:
    """Normalize a hue range and place ``hue_mid`` inside it.

    Raises:
        HueRangeError: If ``hue_mid`` does not lie inside the normalized range.

    Returns:
        Tuple[float, float, float]: (hue_min, hue_mid, hue_max).
    """
    hue_min, hue_max = normalize_hue_range(hue_min, hue_max)
    hue_mid = normalize_hue(hue_mid)
    if hue_mid < hue_min:
        hue_mid += 1.0
    if hue_max < hue_mid:
        raise HueRangeError("Hue middle out of range",
                            hue_min=hue_min, hue_mid=hue_mid, hue_max=hue_max)
    return hue_min, hue_mid, hue_max


def hue_distance(hue1: float, hue2: float) -> float:
    """Shortest distance around the circle between two hues, in [0, 0.5]."""
    hue1 = normalize_hue(hue1)
    hue2 = normalize_hue(hue2)
    dh = abs(hue1 - hue2)
    if dh > 0.5:
        dh = 1.0 - dh
    return dh


def hue_contained(hue_min: float, hue_max: float, hue: float) -> bool:
    """Return True if ``hue`` lies in [hue_min, hue_max) on the circle."""
    hue_min, hue_max = normalize_hue_range(hue_min, hue_max)
    hue = normalize_hue(hue)
    if hue < hue_min:
        # shift the window down; lifting the hue up a turn is numerically unstable
        hue_max -= 1.0
        hue_min -= 1.0
    return bool(hue_min <= hue < hue_max)


def scale_hue(hue: float) -> float:
    """Remap a hue through the perceptual warp table.

    Pulls colors away from the primaries so that evenly spaced hues look
    more evenly spaced on LEDs.

    Returns:
        float: Warped hue in [0,1).
    """
    hue = positive_mod(hue, 1.0)

    size = len(HueTables.hue_scale)
    index = int(hue * size) % size
    return HueTables.hue_scale[index] / 512.0
