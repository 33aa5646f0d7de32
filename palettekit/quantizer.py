"""
quantizer.py
────────────
Palette reduction behind a small interface so the extractor does not depend
on one clustering implementation.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Sequence

from colorthief import MMCQ
from loguru import logger

from .converters import RGBColor


class Quantizer(Protocol):
    """Reduces a list of colours to at most *target_count* representatives."""

    def reduce(self, colors: Sequence[RGBColor], target_count: int) -> Optional[List[RGBColor]]:
        """
        Return representative colours ordered by cluster weight, largest
        first, or ``None`` when no palette could be built.
        """
        ...


class MMCQQuantizer:
    """Modified median-cut quantization (colorthief's port of Leptonica's MMCQ)."""

    def reduce(self, colors: Sequence[RGBColor], target_count: int) -> Optional[List[RGBColor]]:
        if not colors:
            return None
        cmap = MMCQ.quantize(list(colors), target_count)
        if not cmap:
            return None
        palette = [tuple(int(c) for c in color) for color in cmap.palette]
        logger.debug("MMCQ reduced {} pixels to {} colours", len(colors), len(palette))
        return palette
