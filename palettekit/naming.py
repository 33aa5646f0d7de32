"""
naming.py
─────────
Human-readable names for palette colours.
"""

from __future__ import annotations

import dataclasses
from typing import Dict, Optional, Protocol

from PIL import ImageColor

from .converters import RGBColor, hex_to_rgb
from .types import ColorItem


class NameResolver(Protocol):
    def lookup(self, hex_value: str) -> Optional[str]: ...


class CSSNameResolver:
    """Nearest CSS colour name, using Pillow's named-colour table."""

    def __init__(self) -> None:
        self._table: Dict[str, RGBColor] = {}
        for name in sorted(ImageColor.colormap):
            r, g, b = ImageColor.getrgb(name)[:3]
            self._table[name] = (r, g, b)

    def lookup(self, hex_value: str) -> Optional[str]:
        target = hex_to_rgb(hex_value)
        best_name: Optional[str] = None
        best_dist = None
        for name, rgb in self._table.items():
            dist = sum((a - b) ** 2 for a, b in zip(rgb, target))
            if best_dist is None or dist < best_dist:
                best_name, best_dist = name, dist
        return best_name


_default_resolver = CSSNameResolver()


def _resolver(resolver: Optional[NameResolver]) -> NameResolver:
    return resolver if resolver is not None else _default_resolver


def fetch_color_name(item: ColorItem, resolver: Optional[NameResolver] = None) -> str:
    """Return a display name for *item*, falling back to its hex string."""
    return _resolver(resolver).lookup(item.hex) or item.hex


def with_name(item: ColorItem, resolver: Optional[NameResolver] = None) -> ColorItem:
    """Return a copy of *item* with ``name`` filled in."""
    return dataclasses.replace(item, name=fetch_color_name(item, resolver))
