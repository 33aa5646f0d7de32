"""
types.py
────────
Value objects returned by the palette API.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .converters import RGBColor, rgb_to_cmyk, rgb_to_hex, rgb_to_hsl

HSLColor = Tuple[int, int, int]
CMYKColor = Tuple[int, int, int, int]


# ── Colour item ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ColorItem:
    """One colour expressed in every supported encoding."""

    hex:  str
    rgb:  RGBColor
    hsl:  HSLColor
    cmyk: CMYKColor
    name: Optional[str] = None

    @classmethod
    def from_rgb(cls, rgb: Sequence[int], name: Optional[str] = None) -> "ColorItem":
        color = (int(rgb[0]), int(rgb[1]), int(rgb[2]))
        return cls(
            hex=rgb_to_hex(color),
            rgb=color,
            hsl=rgb_to_hsl(color),
            cmyk=rgb_to_cmyk(color),
            name=name,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "hex":  self.hex,
            "rgb":  list(self.rgb),
            "hsl":  list(self.hsl),
            "cmyk": list(self.cmyk),
        }


BLACK_FALLBACK = ColorItem(hex="#000000", rgb=(0, 0, 0), hsl=(0, 0, 0), cmyk=(0, 0, 0, 100))


# ── Options / results ─────────────────────────────────────────────────────────

@dataclass(frozen=True)
class PaletteOptions:
    """Normalised extraction options (see ``options.validate_options``)."""

    color_count: int = 10
    quality:     int = 10


@dataclass(frozen=True)
class PaletteResult:
    """The dominant colour together with the full palette it was taken from."""

    dominant: ColorItem
    palette:  List[ColorItem] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dominant": self.dominant.to_dict(),
            "palette":  [item.to_dict() for item in self.palette],
        }
