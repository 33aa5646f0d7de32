"""
extractor.py
────────────
Extracts colour palettes from images.

Pipeline
────────
  1. Normalise ``color_count`` / ``quality``.
  2. Read the RGBA buffer from the pixel source (zero-width → empty palette).
  3. Sample every ``quality``-th pixel, dropping transparent and near-white ones.
  4. Cluster the samples with the quantizer (median cut by default).
  5. Express each representative colour as a ``ColorItem``.

"No colours found" is never an error here: the plain functions return an
empty list (or ``None`` / a black fallback for the dominant colour).  Only
the URL variants that promise a colour raise ``EmptyPaletteError``.
"""

from __future__ import annotations

from typing import Any, List, Optional

from loguru import logger

from .converters import RGBColor
from .errors import EmptyPaletteError
from .options import DEFAULT_COLOR_COUNT, DEFAULT_QUALITY, validate_options
from .pixels import DEFAULT_TIMEOUT, as_pixel_source, fetch_image
from .quantizer import MMCQQuantizer, Quantizer
from .sampler import create_pixel_array
from .types import BLACK_FALLBACK, ColorItem, PaletteResult

DOMINANT_CANDIDATES = 5


class PaletteExtractor:
    """Runs the sampling + quantization pipeline with a pluggable quantizer."""

    def __init__(self, quantizer: Optional[Quantizer] = None) -> None:
        self.quantizer: Quantizer = quantizer or MMCQQuantizer()

    def get_palette(
        self,
        source: Any,
        color_count: Any = None,
        quality: Any = None,
    ) -> List[RGBColor]:
        """
        Return up to *color_count* representative colours, most populous
        cluster first.  Empty when the image has no width or no colour
        survives sampling.
        """
        options = validate_options(color_count, quality)

        image = as_pixel_source(source)
        if image.width == 0:
            return []
        pixel_count = image.width * image.height

        pixels = create_pixel_array(image.read_pixels(), pixel_count, options.quality)
        logger.debug(
            "Sampled {}/{} pixels at quality={}",
            len(pixels), pixel_count, options.quality,
        )

        palette = self.quantizer.reduce(pixels, options.color_count)
        return list(palette) if palette else []

    def get_color(self, source: Any, quality: Any = None) -> Optional[RGBColor]:
        """Return the colour of the largest cluster, or ``None``."""
        palette = self.get_palette(source, DOMINANT_CANDIDATES, quality)
        return palette[0] if palette else None


_default_extractor = PaletteExtractor()


def _items(palette: List[RGBColor]) -> List[ColorItem]:
    return [ColorItem.from_rgb(color) for color in palette]


# ── In-memory images ──────────────────────────────────────────────────────────

def get_palette(
    image: Any,
    color_count: int = DEFAULT_COLOR_COUNT,
    quality: int = DEFAULT_QUALITY,
    extractor: Optional[PaletteExtractor] = None,
) -> List[ColorItem]:
    """
    Extract a colour palette from *image*.

    Parameters
    ----------
    image : PixelSource, path, bytes, file object or PIL image
    color_count : int
        Number of colours to extract (2–20, default 10).
    quality : int
        Sampling stride; 1 is the most accurate, 10 the default.
    """
    ex = extractor or _default_extractor
    return _items(ex.get_palette(image, color_count, quality))


def get_dominant_color(
    image: Any,
    quality: int = DEFAULT_QUALITY,
    extractor: Optional[PaletteExtractor] = None,
) -> Optional[ColorItem]:
    """Return the dominant colour of *image*, or ``None`` if none was found."""
    ex = extractor or _default_extractor
    color = ex.get_color(image, quality)
    return ColorItem.from_rgb(color) if color is not None else None


def get_palette_with_dominant(
    image: Any,
    color_count: int = DEFAULT_COLOR_COUNT,
    quality: int = DEFAULT_QUALITY,
    extractor: Optional[PaletteExtractor] = None,
) -> PaletteResult:
    """
    Extract the palette once and report its first colour as dominant.

    When nothing is extracted the dominant colour is black and the palette
    is empty.
    """
    ex = extractor or _default_extractor
    colors = _items(ex.get_palette(image, color_count, quality))
    if not colors:
        return PaletteResult(dominant=BLACK_FALLBACK, palette=[])
    return PaletteResult(dominant=colors[0], palette=colors)


# ── Remote images ─────────────────────────────────────────────────────────────

def get_palette_from_url(
    url: str,
    color_count: int = DEFAULT_COLOR_COUNT,
    quality: int = DEFAULT_QUALITY,
    timeout: float = DEFAULT_TIMEOUT,
    extractor: Optional[PaletteExtractor] = None,
) -> List[ColorItem]:
    """Download *url* and extract its palette (may be empty)."""
    return get_palette(fetch_image(url, timeout), color_count, quality, extractor)


def get_dominant_color_from_url(
    url: str,
    quality: int = DEFAULT_QUALITY,
    timeout: float = DEFAULT_TIMEOUT,
    extractor: Optional[PaletteExtractor] = None,
) -> ColorItem:
    """
    Download *url* and return its dominant colour.

    Raises
    ------
    ImageLoadError
        If the image cannot be downloaded or decoded.
    EmptyPaletteError
        If no colour could be extracted.
    """
    color = get_dominant_color(fetch_image(url, timeout), quality, extractor)
    if color is None:
        logger.warning("No dominant colour found in {}", url)
        raise EmptyPaletteError("Failed to extract color from image")
    return color


def get_palette_with_dominant_from_url(
    url: str,
    color_count: int = DEFAULT_COLOR_COUNT,
    quality: int = DEFAULT_QUALITY,
    timeout: float = DEFAULT_TIMEOUT,
    extractor: Optional[PaletteExtractor] = None,
) -> PaletteResult:
    """Download *url* and return dominant colour + palette; raises if empty."""
    colors = get_palette(fetch_image(url, timeout), color_count, quality, extractor)
    if not colors:
        logger.warning("No palette found in {}", url)
        raise EmptyPaletteError("Failed to extract palette from image")
    return PaletteResult(dominant=colors[0], palette=colors)
