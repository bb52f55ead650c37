"""
Histogram ranking and palette construction.
"""

from typing import List, Sequence

from loguru import logger

from chromascope.schemas import ColorData
from .color_space import rgb_to_hex, rgb_to_hsl, round_half_up
from .quantization import ColorBucket

TOP_K = 5


def rank_buckets(buckets: Sequence[ColorBucket]) -> List[ColorBucket]:
    """Sort buckets by descending count, earliest-seen first among equals."""
    return sorted(buckets, key=lambda b: (-b.count, b.first_seen))


def bucket_percentage(count: int, total: int) -> int:
    """Share of ``total`` as an integer percent (0 when ``total`` is 0)."""
    if total <= 0:
        return 0
    return round_half_up(count / total * 100)


def histogram_percentages(buckets: Sequence[ColorBucket]) -> List[int]:
    """Percentages for every bucket of a histogram, in ranked order."""
    total = sum(b.count for b in buckets)
    return [bucket_percentage(b.count, total) for b in rank_buckets(buckets)]


def build_palette(buckets: Sequence[ColorBucket], top_k: int = TOP_K) -> List[ColorData]:
    """
    Select the ``top_k`` most frequent buckets and describe each one.

    Percentages are relative to all opaque pixels, not just the selected
    buckets, so the palette may sum to less than 100.

    Args:
        buckets: Full histogram
        top_k: Maximum number of palette entries

    Returns:
        Palette entries, most frequent first; empty for an empty histogram
    """
    total_opaque = sum(b.count for b in buckets)
    if total_opaque == 0:
        return []

    palette = []
    for bucket in rank_buckets(buckets)[:top_k]:
        r, g, b = bucket.key
        palette.append(ColorData(
            hex=rgb_to_hex(r, g, b),
            rgb=(r, g, b),
            hsl=rgb_to_hsl(r, g, b),
            percentage=bucket_percentage(bucket.count, total_opaque)
        ))

    shares = [f"{c.hex}:{c.percentage}%" for c in palette]
    logger.info(f"Ranked {len(buckets)} buckets, kept {len(palette)}: {shares}")
    return palette
