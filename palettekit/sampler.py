"""
sampler.py
──────────
Turns a raw RGBA buffer into the list of RGB triples handed to the quantizer.

Only every ``quality``-th pixel is visited.  Pixels that are mostly
transparent or almost pure white are dropped so that padding and white
backgrounds do not dominate the palette.
"""

from __future__ import annotations

from typing import List, Sequence, Union

from .converters import RGBColor

ALPHA_THRESHOLD = 125   # keep pixels with alpha >= this
WHITE_THRESHOLD = 250   # drop pixels whose R, G and B all exceed this

PixelBuffer = Union[bytes, bytearray, memoryview, Sequence[int]]


def is_sampled(r: int, g: int, b: int, a: int) -> bool:
    """Return True if the pixel is opaque enough and not near-white."""
    if a < ALPHA_THRESHOLD:
        return False
    return not (r > WHITE_THRESHOLD and g > WHITE_THRESHOLD and b > WHITE_THRESHOLD)


def create_pixel_array(pixels: PixelBuffer, pixel_count: int, quality: int) -> List[RGBColor]:
    """
    Sample *pixels* (flat RGBA, 4 values per pixel) at a stride of *quality*.

    Parameters
    ----------
    pixels : bytes-like or sequence of int
        ``pixel_count * 4`` channel values.
    pixel_count : int
        Number of pixels in the buffer.
    quality : int
        Stride in pixels; 1 visits every pixel.

    Returns
    -------
    List of ``(r, g, b)`` tuples in scan order.
    """
    sampled: List[RGBColor] = []
    for i in range(0, pixel_count, quality):
        offset = i * 4
        r, g, b, a = pixels[offset:offset + 4]
        if is_sampled(r, g, b, a):
            sampled.append((int(r), int(g), int(b)))
    return sampled
