"""
harmony.py
──────────
Colour-theory variants derived from a single seed colour.

Every generator accepts any colour string ``hex_to_rgb`` understands and
returns lowercase ``#rrggbb`` strings.  Unparsable input raises
``InvalidColorError``.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence, Tuple, Union

from .converters import (
    FloatRGB,
    brighten,
    darken,
    desaturate,
    format_hex,
    from_hsl,
    hsl_components,
    parse_color,
    set_hue,
)

CHAIN_LENGTH = 10


def _chain(base: FloatRGB, step: Callable[[FloatRGB, float], FloatRGB]) -> List[str]:
    """Apply *step* to the previous result with amount ``i * 0.1``, i = 0..9."""
    colors: List[FloatRGB] = []
    for i in range(CHAIN_LENGTH):
        previous = colors[i - 1] if colors else base
        colors.append(step(previous, i * 0.1))
    return [format_hex(c) for c in colors]


# ── Shades / tints / tones ────────────────────────────────────────────────────

def generate_shades(color: str) -> List[str]:
    """Ten progressively darker colours, starting with *color* itself."""
    return _chain(parse_color(color), darken)


def generate_tints(color: str) -> List[str]:
    """Ten progressively lighter colours, starting with *color* itself."""
    return _chain(parse_color(color), brighten)


def generate_tones(color: str) -> List[str]:
    """Ten progressively greyer colours, starting with *color* itself."""
    return _chain(parse_color(color), desaturate)


# ── Hue rotations ─────────────────────────────────────────────────────────────

def get_analogous_colors(color: str) -> List[str]:
    """The base colour and its neighbours 6° either side on the hue wheel."""
    base = parse_color(color)
    hue, _, _ = hsl_components(base)
    return [format_hex(c) for c in (base, set_hue(base, hue - 6), set_hue(base, hue + 6))]


def get_monochromatic_colors(color: str) -> List[str]:
    """The base colour and two darker variants scaled by its lightness."""
    base = parse_color(color)
    _, _, lightness = hsl_components(base)
    variants = (base, darken(base, lightness * 6), darken(base, lightness * 3))
    return [format_hex(c) for c in variants]


def get_triadic_colors(color: str) -> List[str]:
    """Three colours 120° apart sharing the base's saturation and lightness."""
    base = parse_color(color)
    hue, saturation, lightness = hsl_components(base)
    rotated = [
        from_hsl(h, saturation, lightness)
        for h in ((hue + 120) % 360, (hue - 120 + 360) % 360)
    ]
    return [format_hex(base)] + [format_hex(c) for c in rotated]


def get_tetradic_colors(color: str) -> List[str]:
    """The base, its complement, and the complement rotated ±60°."""
    base = parse_color(color)
    hue, _, _ = hsl_components(base)
    complement = set_hue(base, (hue + 180) % 360)
    comp_hue, _, _ = hsl_components(complement)
    first = set_hue(complement, (comp_hue + 60) % 360)
    second = set_hue(complement, (comp_hue - 60 + 360) % 360)
    return [format_hex(c) for c in (base, complement, first, second)]


def _opposite_hsl(base: Sequence[float]) -> Tuple[float, float, float]:
    hue, _, _ = hsl_components(base)
    return ((hue + 180) % 360, 1.0, 0.0)


def get_opposite_color(color: str) -> str:
    """
    Rotate the hue by 180° with saturation forced to 100% and lightness to 0%.

    Lightness 0 always renders as black; callers wanting a visible
    complement should use ``get_tetradic_colors(color)[1]``.
    """
    return format_hex(from_hsl(*_opposite_hsl(parse_color(color))))


def get_adjacent_colors(color: str) -> List[str]:
    """The base and two colours offset −108° / +36° from its opposite's hue."""
    base = parse_color(color)
    comp_hue, _, _ = _opposite_hsl(base)
    split = (set_hue(base, (comp_hue - 108) % 360), set_hue(base, (comp_hue + 36) % 360))
    return [format_hex(base)] + [format_hex(c) for c in split]


# ── Dispatch ──────────────────────────────────────────────────────────────────

HARMONIES: Dict[str, Callable[[str], Union[List[str], str]]] = {
    "shades":        generate_shades,
    "tints":         generate_tints,
    "tones":         generate_tones,
    "analogous":     get_analogous_colors,
    "monochromatic": get_monochromatic_colors,
    "triadic":       get_triadic_colors,
    "tetradic":      get_tetradic_colors,
    "adjacent":      get_adjacent_colors,
    "opposite":      get_opposite_color,
}


def generate_harmony(name: str, color: str) -> List[str]:
    """Run the generator registered under *name*; always returns a list."""
    try:
        generator = HARMONIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown harmony {name!r}; choose from {', '.join(sorted(HARMONIES))}"
        ) from None
    result = generator(color)
    return [result] if isinstance(result, str) else list(result)
