"""
Hue harmony classification.

Labels a palette by how widely its hues are spread around the color wheel.
The spread is measured either linearly (max hue minus min hue, matching the
historical output) or on the 360 degree ring, where hues straddling 0/360
count as neighbours.
"""

from enum import Enum
from typing import Iterable, Sequence

from chromascope.schemas import ColorData


class Harmony(str, Enum):
    """Harmony labels reported for a palette."""
    MONOCHROMATIC = "Monochromatic"
    COMPLEMENTARY = "Complementary"
    ANALOGOUS = "Analogous"
    TRIADIC = "Triadic"
    MIXED = "Mixed Harmony"


class HueMode(str, Enum):
    """How the hue spread is measured."""
    LINEAR = "linear"
    CIRCULAR = "circular"


def hue_spread(hues: Sequence[int], mode: str = HueMode.LINEAR) -> int:
    """
    Width of the hue range covered by ``hues``.

    Linear mode is ``max - min``. Circular mode is the shortest arc of the
    ring that contains every hue: 360 minus the largest gap between
    neighbouring hues, the wrap-around gap included.
    """
    if len(hues) < 2:
        return 0

    ordered = sorted(h % 360 for h in hues)
    if HueMode(mode) is HueMode.LINEAR:
        return ordered[-1] - ordered[0]

    gaps = [b - a for a, b in zip(ordered, ordered[1:])]
    gaps.append(ordered[0] + 360 - ordered[-1])
    return 360 - max(gaps)


def classify_harmony(hues: Sequence[int], mode: str = HueMode.LINEAR) -> str:
    """
    Assign one harmony label to a set of hues.

    Rules are checked in order: complementary (150-210), analogous (<= 60),
    triadic (100-140), otherwise mixed.

    Raises:
        ValueError: If ``mode`` is not a known hue mode
    """
    mode = HueMode(mode)
    if len(hues) < 2:
        return Harmony.MONOCHROMATIC.value

    spread = hue_spread(hues, mode)

    if 150 <= spread <= 210:
        return Harmony.COMPLEMENTARY.value
    if spread <= 60:
        return Harmony.ANALOGOUS.value
    if 100 <= spread <= 140:
        return Harmony.TRIADIC.value
    return Harmony.MIXED.value


def classify_palette_harmony(palette: Iterable[ColorData], mode: str = HueMode.LINEAR) -> str:
    """Classify the harmony of a ranked palette by its hues."""
    return classify_harmony([color.hsl[0] for color in palette], mode)
