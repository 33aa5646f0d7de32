"""
Shared fixtures for the palettekit test-suite.
"""
import io
from typing import List, Optional

import pytest
from loguru import logger
from PIL import Image


class FakePixelSource:
    """Minimal in-memory PixelSource."""

    def __init__(self, width: int, height: int, rgba=(0, 0, 0, 255)):
        self.width = width
        self.height = height
        self._buffer = bytes(rgba) * (width * height)

    def read_pixels(self) -> bytes:
        return self._buffer


class RecordingQuantizer:
    """Quantizer stub that records its input and returns a canned palette."""

    def __init__(self, palette: Optional[List[tuple]] = None):
        self.palette = palette
        self.calls = []

    def reduce(self, colors, target_count):
        self.calls.append((list(colors), target_count))
        return self.palette


@pytest.fixture
def fake_source():
    return FakePixelSource


@pytest.fixture
def recording_quantizer():
    return RecordingQuantizer


@pytest.fixture
def solid_image():
    """Factory for a single-colour RGBA Pillow image."""
    def _make(color=(204, 44, 84, 255), size=(50, 50)):
        return Image.new("RGBA", size, color)
    return _make


@pytest.fixture
def png_bytes(solid_image):
    """Factory returning encoded PNG bytes for a single-colour image."""
    def _make(color=(204, 44, 84, 255), size=(50, 50)):
        buf = io.BytesIO()
        solid_image(color, size).save(buf, format="PNG")
        return buf.getvalue()
    return _make


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop sinks added during a test so they don't outlive captured streams."""
    yield
    logger.remove()
