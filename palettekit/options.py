"""
options.py
──────────
Normalisation of the ``color_count`` / ``quality`` extraction parameters.
"""

from __future__ import annotations

import math
from typing import Any, Optional

from loguru import logger

from .errors import InvalidParameterError
from .types import PaletteOptions

DEFAULT_COLOR_COUNT = 10
DEFAULT_QUALITY     = 10
MIN_COLOR_COUNT     = 2
MAX_COLOR_COUNT     = 20


def _as_integer(value: Any) -> Optional[int]:
    """Return *value* as an int if it is an integral, finite number, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    return None


def validate_options(color_count: Any = None, quality: Any = None) -> PaletteOptions:
    """
    Normalise user-supplied palette options.

    * ``color_count`` that is missing or not an integer falls back to 10.
    * ``color_count == 1`` is rejected: a one-colour palette is what
      ``get_dominant_color`` is for.
    * Any other integer is clamped into [2, 20].
    * ``quality`` that is missing, not an integer or below 1 falls back to 10.

    Raises
    ------
    InvalidParameterError
        If ``color_count`` is exactly 1.
    """
    count = _as_integer(color_count)
    if count is None:
        count = DEFAULT_COLOR_COUNT
    elif count == 1:
        raise InvalidParameterError(
            "color_count should be between 2 and 20. "
            "To get one color, call get_dominant_color() instead of get_palette()."
        )
    else:
        count = min(max(count, MIN_COLOR_COUNT), MAX_COLOR_COUNT)

    step = _as_integer(quality)
    if step is None or step < 1:
        step = DEFAULT_QUALITY

    logger.debug(
        "Validated options color_count={}->{} quality={}->{}",
        color_count, count, quality, step,
    )
    return PaletteOptions(color_count=count, quality=step)
