"""
pixels.py
─────────
Pixel sources: the boundary between image decoding and palette extraction.

A ``PixelSource`` is anything exposing ``width``, ``height`` and
``read_pixels()`` returning a flat RGBA byte buffer.  ``ImagePixelSource``
is the Pillow-backed implementation used for files, bytes and downloads.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any, BinaryIO, Protocol, Union, runtime_checkable

import requests
from loguru import logger
from PIL import Image, UnidentifiedImageError

from .errors import ImageLoadError

ImageInput = Union[str, Path, bytes, bytearray, BinaryIO, Image.Image]

DEFAULT_TIMEOUT = 30


@runtime_checkable
class PixelSource(Protocol):
    """Supplies an RGBA buffer of ``width * height * 4`` bytes."""

    width: int
    height: int

    def read_pixels(self) -> bytes: ...


class ImagePixelSource:
    """Wraps a Pillow image and exposes it as an RGBA pixel source."""

    def __init__(self, image: Image.Image) -> None:
        self._image = image if image.mode == "RGBA" else image.convert("RGBA")
        self.width, self.height = self._image.size

    # ── Construction ──────────────────────────────────────────────────────────

    @classmethod
    def open(cls, source: ImageInput) -> "ImagePixelSource":
        """
        Open *source* with Pillow.

        *source* may be a path, raw encoded bytes, a binary file object or an
        already-open ``PIL.Image.Image``.

        Raises
        ------
        ImageLoadError
            If the file is missing or the data cannot be decoded.
        """
        if isinstance(source, Image.Image):
            return cls(source)
        if isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(source)
        elif isinstance(source, (str, Path)) and not Path(source).exists():
            raise ImageLoadError(f"Image not found: {source}")
        try:
            img = Image.open(source)
            img.load()
        except (UnidentifiedImageError, OSError) as exc:
            raise ImageLoadError(f"Could not decode image: {exc}") from exc
        return cls(img)

    # ── PixelSource ───────────────────────────────────────────────────────────

    def read_pixels(self) -> bytes:
        return self._image.tobytes()

    @property
    def pixel_count(self) -> int:
        return self.width * self.height


def as_pixel_source(image: Any) -> PixelSource:
    """Return *image* unchanged if it is already a pixel source, else open it."""
    if isinstance(image, PixelSource):
        return image
    return ImagePixelSource.open(image)


def fetch_image(url: str, timeout: float = DEFAULT_TIMEOUT) -> ImagePixelSource:
    """
    Download *url* and decode it.

    The request is attempted once.  Any transport error, non-2xx status or
    undecodable payload is reported as ``ImageLoadError``.
    """
    url = url.strip().replace("\r", "").replace("\n", "")
    logger.info("Fetching image {}", url)
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise ImageLoadError(f"Could not download image: {exc}") from exc
    return ImagePixelSource.open(resp.content)
