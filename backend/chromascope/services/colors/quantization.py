"""
Color quantization and histogram accumulation.

Opaque pixels are snapped onto a coarse RGB grid and counted. Buckets come
back in the order their first pixel was seen so later ranking can break
ties deterministically.
"""

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np
from loguru import logger

QUANT_STEP = 20
ALPHA_THRESHOLD = 128


@dataclass(frozen=True)
class ColorBucket:
    """Quantized color and the number of opaque pixels that fell into it."""
    key: Tuple[int, int, int]
    count: int
    first_seen: int  # index of the first pixel in the scan


def quantize_channels(values: np.ndarray, step: int = QUANT_STEP) -> np.ndarray:
    """
    Snap channel values to the nearest multiple of ``step``.

    Halves round up, and results are clamped to [0, 255] since 255 would
    otherwise land on 260 with the default step.

    Args:
        values: Integer channel values in [0, 255], any shape
        step: Grid spacing

    Returns:
        int32 array of quantized values, same shape as ``values``
    """
    v = values.astype(np.int32)
    quantized = (2 * v + step) // (2 * step) * step
    return np.clip(quantized, 0, 255)


def build_histogram(pixels_rgba: np.ndarray,
                    step: int = QUANT_STEP,
                    alpha_threshold: int = ALPHA_THRESHOLD) -> List[ColorBucket]:
    """
    Count opaque pixels per quantized color.

    Args:
        pixels_rgba: (N, 4) uint8 array of RGBA samples in scan order
        step: Quantization grid spacing
        alpha_threshold: Pixels with alpha below this are skipped

    Returns:
        Buckets in first-seen order; empty when no pixel is opaque
    """
    opaque_idx = np.flatnonzero(pixels_rgba[:, 3] >= alpha_threshold)
    logger.debug(f"Opaque pixels: {opaque_idx.size}/{pixels_rgba.shape[0]}")

    if opaque_idx.size == 0:
        return []

    quantized = quantize_channels(pixels_rgba[opaque_idx, :3], step)
    keys = (quantized[:, 0] << 16) | (quantized[:, 1] << 8) | quantized[:, 2]

    unique_keys, first_idx, counts = np.unique(keys, return_index=True, return_counts=True)
    order = np.argsort(first_idx, kind="stable")

    buckets = []
    for i in order:
        key = int(unique_keys[i])
        buckets.append(ColorBucket(
            key=((key >> 16) & 0xFF, (key >> 8) & 0xFF, key & 0xFF),
            count=int(counts[i]),
            first_seen=int(opaque_idx[first_idx[i]])
        ))

    logger.debug(f"Histogram built with {len(buckets)} buckets")
    return buckets
