"""
Chromascope Imaging Utilities
Handles image decoding, downsampling and RGBA pixel buffer access.
"""
import base64
import binascii
import io
from dataclasses import dataclass
from typing import Tuple, Union

import cv2
import numpy as np
from loguru import logger
from PIL import Image, UnidentifiedImageError

SAMPLE_MAX_EDGE = 200

SUPPORTED_FORMATS = {"PNG", "JPEG", "WEBP", "GIF"}

PixelSource = Union[bytes, bytearray, memoryview, np.ndarray]


class SamplingError(ValueError):
    """Raised when an image cannot be turned into an RGBA pixel buffer."""
    pass


@dataclass(frozen=True)
class PixelBuffer:
    """Row-major RGBA samples of a downsampled image."""
    width: int
    height: int
    data: bytes


def decode_base64_image(b64_data: str) -> bytes:
    """
    Decode base64 image data, accepting an optional data URL prefix.

    Raises:
        SamplingError: If the payload is not valid base64
    """
    # Remove data URL prefix if present
    if ',' in b64_data:
        b64_data = b64_data.split(',', 1)[1]

    try:
        img_bytes = base64.b64decode(b64_data.strip(), validate=True)
    except (binascii.Error, ValueError) as e:
        raise SamplingError(f"Invalid base64 image data: {str(e)}")

    if not img_bytes:
        raise SamplingError("Empty image data")
    return img_bytes


def decode_image(image_bytes: bytes) -> Image.Image:
    """
    Decode encoded image bytes with PIL.

    Raises:
        SamplingError: For corrupt data or formats other than PNG/JPEG/WebP/GIF
    """
    try:
        pil_image = Image.open(io.BytesIO(image_bytes))
        pil_image.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
        raise SamplingError(f"Failed to decode image: {str(e)}")

    if pil_image.format not in SUPPORTED_FORMATS:
        raise SamplingError(f"Unsupported image format: {pil_image.format}")

    return pil_image


def scaled_dimensions(width: int, height: int, max_size: int = SAMPLE_MAX_EDGE) -> Tuple[int, int]:
    """
    Fit ``width`` x ``height`` so the longer side equals ``max_size``.

    The shorter side is scaled by the same ratio and truncated, never below 1.

    Raises:
        SamplingError: If either dimension is not positive
    """
    if width <= 0 or height <= 0:
        raise SamplingError(f"Image has no area: {width}x{height}")

    ratio = max_size / max(width, height)
    if width >= height:
        return max_size, max(1, int(height * ratio))
    return max(1, int(width * ratio)), max_size


def sample_image(image_bytes: bytes, max_size: int = SAMPLE_MAX_EDGE) -> PixelBuffer:
    """
    Decode an image and redraw it at sampling resolution.

    Args:
        image_bytes: Encoded image file contents
        max_size: Target length of the longer side

    Returns:
        PixelBuffer with RGBA samples of the resized image

    Raises:
        SamplingError: If the image cannot be decoded or resized
    """
    pil_image = decode_image(image_bytes)
    rgba = np.asarray(pil_image.convert("RGBA"), dtype=np.uint8)

    height, width = rgba.shape[:2]
    new_width, new_height = scaled_dimensions(width, height, max_size)

    if (new_width, new_height) != (width, height):
        # INTER_AREA for downscaling, linear when a small image is drawn larger
        interpolation = cv2.INTER_AREA if new_width < width else cv2.INTER_LINEAR
        try:
            rgba = cv2.resize(rgba, (new_width, new_height), interpolation=interpolation)
        except cv2.error as e:
            raise SamplingError(f"Failed to resize image: {str(e)}")

    logger.debug(f"Sampled {width}x{height} image at {new_width}x{new_height}")
    return PixelBuffer(
        width=new_width,
        height=new_height,
        data=np.ascontiguousarray(rgba).tobytes()
    )


def pixel_rows(pixel_source: PixelSource, width: int, height: int) -> np.ndarray:
    """
    View a row-major RGBA pixel source as an (N, 4) uint8 array.

    Bytes past ``width * height * 4`` are ignored.

    Raises:
        SamplingError: If the dimensions are not positive, the source is not
            byte data, or it holds fewer than ``width * height * 4`` bytes
    """
    if width <= 0 or height <= 0:
        raise SamplingError(f"Image has no area: {width}x{height}")

    if isinstance(pixel_source, np.ndarray):
        if pixel_source.dtype != np.uint8:
            raise SamplingError(f"Expected uint8 pixel data, got {pixel_source.dtype}")
        flat = pixel_source.reshape(-1)
    else:
        try:
            flat = np.frombuffer(pixel_source, dtype=np.uint8)
        except (TypeError, ValueError) as e:
            raise SamplingError(f"Unreadable pixel source: {str(e)}")

    needed = width * height * 4
    if flat.size < needed:
        raise SamplingError(
            f"Pixel source too short: {flat.size} bytes < {needed} for {width}x{height} RGBA"
        )

    return flat[:needed].reshape(-1, 4)
