"""
Chromascope Colors Module

Provides pixel quantization, histogram ranking, color space conversion,
hue harmony classification and contrast suggestions for palette analysis.
"""

from .analysis import analyze, analyze_image
from .color_space import hex_to_rgb, rgb_to_hex, rgb_to_hsl
from .contrast import suggest_contrast
from .harmony import Harmony, HueMode, classify_harmony
from .quantization import ColorBucket, build_histogram
from .ranking import build_palette, rank_buckets

__all__ = [
    "analyze", "analyze_image",
    "hex_to_rgb", "rgb_to_hex", "rgb_to_hsl",
    "suggest_contrast",
    "Harmony", "HueMode", "classify_harmony",
    "ColorBucket", "build_histogram",
    "build_palette", "rank_buckets",
]
