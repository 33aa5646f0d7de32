"""
converters.py
─────────────
Conversions between RGB, hex, HSL, CMYK and the CIE spaces used by the
harmony generators.

The public helpers (``rgb_to_hex``, ``hex_to_rgb``, ``rgb_to_hsl``,
``rgb_to_cmyk``) work on 8-bit integer triples.  The lower-level helpers work
on float RGB triples in 0–255 so that chained adjustments (shades, tints,
tones) do not accumulate rounding error before the final hex conversion.
"""

from __future__ import annotations

import colorsys
import math
import re
from typing import Optional, Sequence, Tuple

from PIL import ImageColor

from .errors import InvalidColorError

# Convenience type aliases
RGBColor = Tuple[int, int, int]
FloatRGB = Tuple[float, float, float]

_BARE_HEX = re.compile(r"^(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

# ── Lab constants (D65 reference white) ───────────────────────────────────────

KN = 18             # L* units per darken/brighten/desaturate step
_XN = 0.950470
_YN = 1.0
_ZN = 1.088830
_T0 = 0.137931034   # 4 / 29
_T1 = 0.206896552   # 6 / 29
_T2 = 0.12841855    # 3 * t1^2
_T3 = 0.008856452   # t1^3


def _round(value: float) -> int:
    """Round half up (the builtin ``round`` rounds half to even)."""
    return int(math.floor(value + 0.5))


def _clip(value: float) -> float:
    return min(255.0, max(0.0, value))


# ── Public 8-bit conversions ──────────────────────────────────────────────────

def rgb_to_hex(rgb: Optional[Sequence[float]]) -> str:
    """Convert an RGB triple to ``#rrggbb``.  ``None`` maps to white."""
    if rgb is None:
        return "#ffffff"
    return format_hex(rgb)


def hex_to_rgb(value: str) -> RGBColor:
    """Parse any supported colour string into an integer RGB triple."""
    r, g, b = parse_color(value)
    return (_round(r), _round(g), _round(b))


def rgb_to_hsl(rgb: Sequence[float]) -> Tuple[int, int, int]:
    """
    Return ``(hue°, saturation%, lightness%)`` rounded to integers.

    Achromatic colours have no defined hue; they report ``0``.
    """
    h, s, l = hsl_components(rgb)
    return (_round(h), _round(s * 100), _round(l * 100))


def rgb_to_cmyk(rgb: Sequence[float]) -> Tuple[int, int, int, int]:
    """Return ``(c, m, y, k)`` percentages using the naive subtractive model."""
    r, g, b = (channel / 255.0 for channel in rgb)
    k = 1 - max(r, g, b)
    f = 1 / (1 - k) if k < 1 else 0
    c = (1 - r - k) * f
    m = (1 - g - k) * f
    y = (1 - b - k) * f
    return (_round(c * 100), _round(m * 100), _round(y * 100), _round(k * 100))


# ── Parsing / formatting ──────────────────────────────────────────────────────

def parse_color(value: str) -> FloatRGB:
    """
    Parse a colour string into a float RGB triple.

    Accepts hex with or without a leading ``#`` (3, 4, 6 or 8 digits), CSS
    ``rgb()`` / ``hsl()`` notation and CSS colour names.  Alpha is ignored.

    Raises
    ------
    InvalidColorError
        If *value* is not a string or cannot be understood.
    """
    if not isinstance(value, str):
        raise InvalidColorError(f"Colour must be a string, got {type(value).__name__}")
    text = value.strip()
    if _BARE_HEX.match(text):
        text = "#" + text
    try:
        rgba = ImageColor.getrgb(text)
    except ValueError as exc:
        raise InvalidColorError(f"Unknown colour: {value!r}") from exc
    return (float(rgba[0]), float(rgba[1]), float(rgba[2]))


def format_hex(rgb: Sequence[float]) -> str:
    """Clip, round and format a float RGB triple as lowercase ``#rrggbb``."""
    r, g, b = (_round(_clip(channel)) for channel in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


# ── HSL ───────────────────────────────────────────────────────────────────────

def hsl_components(rgb: Sequence[float]) -> Tuple[float, float, float]:
    """Return unrounded ``(hue°, saturation 0–1, lightness 0–1)``."""
    h, l, s = colorsys.rgb_to_hls(rgb[0] / 255.0, rgb[1] / 255.0, rgb[2] / 255.0)
    return (h * 360.0, s, l)


def from_hsl(hue: float, saturation: float, lightness: float) -> FloatRGB:
    """Build a float RGB triple from hue in degrees and s/l fractions."""
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360.0, lightness, saturation)
    return (_clip(r * 255), _clip(g * 255), _clip(b * 255))


def set_hue(rgb: Sequence[float], hue: float) -> FloatRGB:
    """Replace the HSL hue of *rgb*, keeping saturation and lightness."""
    _, s, l = hsl_components(rgb)
    return from_hsl(hue, s, l)


# ── CIE Lab / LCh ─────────────────────────────────────────────────────────────

def _rgb_xyz(channel: float) -> float:
    channel /= 255.0
    if channel <= 0.04045:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def _xyz_lab(t: float) -> float:
    if t > _T3:
        return t ** (1 / 3)
    return t / _T2 + _T0


def _lab_xyz(t: float) -> float:
    return t * t * t if t > _T1 else _T2 * (t - _T0)


def _xyz_rgb(v: float) -> float:
    return 255 * (12.92 * v if v <= 0.00304 else 1.055 * v ** (1 / 2.4) - 0.055)


def rgb_to_lab(rgb: Sequence[float]) -> Tuple[float, float, float]:
    r, g, b = (_rgb_xyz(channel) for channel in rgb)
    x = _xyz_lab((0.4124564 * r + 0.3575761 * g + 0.1804375 * b) / _XN)
    y = _xyz_lab((0.2126729 * r + 0.7151522 * g + 0.0721750 * b) / _YN)
    z = _xyz_lab((0.0193339 * r + 0.1191920 * g + 0.9503041 * b) / _ZN)
    lightness = 116 * y - 16
    return (max(lightness, 0.0), 500 * (x - y), 200 * (y - z))


def lab_to_rgb(lab: Sequence[float]) -> FloatRGB:
    lightness, a, b = lab
    y = (lightness + 16) / 116
    x = y + a / 500
    z = y - b / 200
    x = _XN * _lab_xyz(x)
    y = _YN * _lab_xyz(y)
    z = _ZN * _lab_xyz(z)
    r = _xyz_rgb(3.2404542 * x - 1.5371385 * y - 0.4985314 * z)
    g = _xyz_rgb(-0.9692660 * x + 1.8760108 * y + 0.0415560 * z)
    b_ = _xyz_rgb(0.0556434 * x - 0.2040259 * y + 1.0572252 * z)
    return (_clip(r), _clip(g), _clip(b_))


def lab_to_lch(lab: Sequence[float]) -> Tuple[float, float, float]:
    lightness, a, b = lab
    chroma = math.hypot(a, b)
    hue = (math.degrees(math.atan2(b, a)) + 360) % 360
    if _round(chroma * 10000) == 0:
        hue = 0.0
    return (lightness, chroma, hue)


def lch_to_lab(lch: Sequence[float]) -> Tuple[float, float, float]:
    lightness, chroma, hue = lch
    rad = math.radians(hue)
    return (lightness, math.cos(rad) * chroma, math.sin(rad) * chroma)


# ── Perceptual adjustments ────────────────────────────────────────────────────

def darken(rgb: Sequence[float], amount: float = 1.0) -> FloatRGB:
    """Lower Lab lightness by ``KN * amount``."""
    lightness, a, b = rgb_to_lab(rgb)
    return lab_to_rgb((lightness - KN * amount, a, b))


def brighten(rgb: Sequence[float], amount: float = 1.0) -> FloatRGB:
    return darken(rgb, -amount)


def desaturate(rgb: Sequence[float], amount: float = 1.0) -> FloatRGB:
    """Lower LCh chroma by ``KN * amount`` without going below zero."""
    lightness, chroma, hue = lab_to_lch(rgb_to_lab(rgb))
    chroma = max(chroma - KN * amount, 0.0)
    return lab_to_rgb(lch_to_lab((lightness, chroma, hue)))
