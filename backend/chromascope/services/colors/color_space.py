"""
Color space conversions.

Pure RGB -> HSL and RGB <-> hex helpers shared by the ranking and
classification stages. All rounding is half-up so results match what a
browser canvas pipeline reports for the same channels.
"""

import math
from typing import Tuple


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up."""
    return int(math.floor(value + 0.5))


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[int, int, int]:
    """
    Convert 8-bit RGB channels to integer HSL.

    Args:
        r, g, b: Channel values in [0, 255]

    Returns:
        Tuple of (hue degrees in [0, 360), saturation %, lightness %)
    """
    r_n = r / 255
    g_n = g / 255
    b_n = b / 255

    c_max = max(r_n, g_n, b_n)
    c_min = min(r_n, g_n, b_n)
    h = 0.0
    s = 0.0
    l = (c_max + c_min) / 2

    if c_max != c_min:
        d = c_max - c_min
        s = d / (2 - c_max - c_min) if l > 0.5 else d / (c_max + c_min)

        # Red wins ties for the maximum, then green
        if c_max == r_n:
            h = (g_n - b_n) / d + (6 if g_n < b_n else 0)
        elif c_max == g_n:
            h = (b_n - r_n) / d + 2
        else:
            h = (r_n - g_n) / d + 4
        h /= 6

    return (
        round_half_up(h * 360) % 360,
        round_half_up(s * 100),
        round_half_up(l * 100),
    )


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB channels to an upper-case ``#RRGGBB`` string."""
    return f"#{int(r):02X}{int(g):02X}{int(b):02X}"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """
    Convert hex color string to RGB tuple.

    Raises:
        ValueError: If the string is not ``#RRGGBB`` or ``RRGGBB``
    """
    hex_clean = hex_color.lstrip('#')
    if len(hex_clean) != 6:
        raise ValueError(f"Invalid hex color format: {hex_color}")

    try:
        return tuple(int(hex_clean[i:i+2], 16) for i in (0, 2, 4))
    except ValueError:
        raise ValueError(f"Invalid hex color format: {hex_color}")
