"""
Contrast suggestion from the dominant color's lightness.
"""

from typing import Sequence

from chromascope.schemas import ColorData

LIGHT_CONTRAST = "#FFFFFF"
DARK_CONTRAST = "#000000"


def contrast_for_lightness(lightness: int) -> str:
    """White for dark colors (lightness below 50%), black otherwise."""
    return LIGHT_CONTRAST if lightness < 50 else DARK_CONTRAST


def suggest_contrast(palette: Sequence[ColorData]) -> str:
    if not palette:
        return LIGHT_CONTRAST
    return contrast_for_lightness(palette[0].hsl[2])
