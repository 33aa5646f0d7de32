"""
errors.py
─────────
Exception hierarchy shared by the extraction and harmony layers.
"""

from __future__ import annotations


class PaletteError(Exception):
    """Base class for every error raised by palettekit."""


class InvalidParameterError(PaletteError, ValueError):
    """A palette option was supplied with a value that cannot be normalised."""


class InvalidColorError(PaletteError, ValueError):
    """A colour string could not be parsed."""


class ImageLoadError(PaletteError):
    """An image could not be downloaded, opened or decoded."""


class EmptyPaletteError(PaletteError):
    """No colours survived sampling and quantization."""
