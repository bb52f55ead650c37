"""
Chromascope

Deterministic color palette analysis for raster images: quantization,
histogram ranking, HSL conversion, harmony labelling and contrast advice.
"""

__version__ = "1.0.0"
