"""
Test configuration and fixtures for Chromascope tests.
"""
import io

import numpy as np
import pytest
from fastapi.testclient import TestClient
from PIL import Image

# Import the main app
from main import app


@pytest.fixture
def test_client():
    """Create test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def reset_metrics():
    """Reset metrics before each test."""
    from chromascope.utils.metrics import reset_metrics
    reset_metrics()


def encode_image(rgba: np.ndarray, fmt: str = "PNG") -> bytes:
    """Encode an (H, W, 4) uint8 array with PIL."""
    image = Image.fromarray(rgba)
    if fmt in ("JPEG", "BMP"):
        image = image.convert("RGB")
    buffer = io.BytesIO()
    image.save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def solid_red_png():
    """10x10 opaque pure red PNG."""
    rgba = np.zeros((10, 10, 4), dtype=np.uint8)
    rgba[:, :] = (255, 0, 0, 255)
    return encode_image(rgba)


@pytest.fixture
def red_blue_png():
    """400x200 PNG, left half red and right half blue."""
    rgba = np.zeros((200, 400, 4), dtype=np.uint8)
    rgba[:, :200] = (255, 0, 0, 255)
    rgba[:, 200:] = (0, 0, 255, 255)
    return encode_image(rgba)


@pytest.fixture
def transparent_png():
    """64x32 PNG with every pixel fully transparent."""
    rgba = np.zeros((32, 64, 4), dtype=np.uint8)
    rgba[:, :] = (90, 200, 30, 0)
    return encode_image(rgba)


@pytest.fixture
def make_image():
    """Factory encoding RGBA arrays to image bytes."""
    return encode_image
