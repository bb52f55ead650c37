"""
Palette analysis pipeline.

Runs quantization, ranking, harmony classification and contrast selection
over one RGBA pixel buffer, and wires the sampler in front of them for
encoded images. Every call allocates its own histogram and result.
"""

import time

from loguru import logger

from chromascope.schemas import AnalysisResult
from chromascope.services.imaging import PixelSource, SAMPLE_MAX_EDGE, pixel_rows, sample_image
from .contrast import suggest_contrast
from .harmony import HueMode, classify_palette_harmony
from .quantization import build_histogram
from .ranking import build_palette

EMPTY_DOMINANT_COLOR = "#000000"


def analyze(pixel_source: PixelSource, width: int, height: int,
            hue_mode: str = HueMode.LINEAR) -> AnalysisResult:
    """
    Analyze a row-major RGBA pixel buffer.

    Args:
        pixel_source: At least ``width * height * 4`` bytes, one per channel
        width: Image width in pixels
        height: Image height in pixels
        hue_mode: "linear" or "circular" hue spread for harmony labelling

    Returns:
        AnalysisResult. Images without opaque pixels get an empty palette,
        a black dominant color, a monochromatic label and a white contrast.

    Raises:
        SamplingError: If the pixel source does not cover the dimensions
    """
    start_time = time.time()
    pixels = pixel_rows(pixel_source, width, height)

    buckets = build_histogram(pixels)
    if not buckets:
        logger.warning(f"No opaque pixels in {width}x{height} image; using fallback result")

    palette = build_palette(buckets)
    result = AnalysisResult(
        palette=palette,
        dominant_color=palette[0].hex if palette else EMPTY_DOMINANT_COLOR,
        color_harmony=classify_palette_harmony(palette, hue_mode),
        contrast_suggestion=suggest_contrast(palette)
    )

    duration_ms = (time.time() - start_time) * 1000
    logger.info(
        f"Analysis complete in {duration_ms:.1f}ms: dominant={result.dominant_color} "
        f"harmony={result.color_harmony} contrast={result.contrast_suggestion}"
    )
    return result


def analyze_image(image_bytes: bytes, max_size: int = SAMPLE_MAX_EDGE,
                  hue_mode: str = HueMode.LINEAR) -> AnalysisResult:
    """
    Decode, downsample and analyze an encoded image.

    Raises:
        SamplingError: If the image cannot be decoded or resized
    """
    try:
        buffer = sample_image(image_bytes, max_size)
    except Exception as e:
        logger.error(f"Sampling failed: {e}")
        raise

    return analyze(buffer.data, buffer.width, buffer.height, hue_mode)
