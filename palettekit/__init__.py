"""palettekit – image colour palettes and colour-harmony schemes."""
from .converters import hex_to_rgb, rgb_to_cmyk, rgb_to_hex, rgb_to_hsl
from .errors import (
    EmptyPaletteError,
    ImageLoadError,
    InvalidColorError,
    InvalidParameterError,
    PaletteError,
)
from .extractor import (
    PaletteExtractor,
    get_dominant_color,
    get_dominant_color_from_url,
    get_palette,
    get_palette_from_url,
    get_palette_with_dominant,
    get_palette_with_dominant_from_url,
)
from .harmony import (
    HARMONIES,
    generate_harmony,
    generate_shades,
    generate_tints,
    generate_tones,
    get_adjacent_colors,
    get_analogous_colors,
    get_monochromatic_colors,
    get_opposite_color,
    get_tetradic_colors,
    get_triadic_colors,
)
from .naming import CSSNameResolver, fetch_color_name, with_name
from .options import validate_options
from .pixels import ImagePixelSource, PixelSource, fetch_image
from .quantizer import MMCQQuantizer, Quantizer
from .sampler import create_pixel_array
from .types import ColorItem, PaletteOptions, PaletteResult

__version__ = "0.1.0"

__all__ = [
    "ColorItem",
    "PaletteOptions",
    "PaletteResult",
    "PaletteExtractor",
    "PixelSource",
    "ImagePixelSource",
    "Quantizer",
    "MMCQQuantizer",
    "CSSNameResolver",
    "PaletteError",
    "InvalidParameterError",
    "InvalidColorError",
    "ImageLoadError",
    "EmptyPaletteError",
    "get_palette",
    "get_dominant_color",
    "get_palette_with_dominant",
    "get_palette_from_url",
    "get_dominant_color_from_url",
    "get_palette_with_dominant_from_url",
    "fetch_image",
    "validate_options",
    "create_pixel_array",
    "rgb_to_hex",
    "hex_to_rgb",
    "rgb_to_hsl",
    "rgb_to_cmyk",
    "HARMONIES",
    "generate_harmony",
    "generate_shades",
    "generate_tints",
    "generate_tones",
    "get_analogous_colors",
    "get_monochromatic_colors",
    "get_triadic_colors",
    "get_tetradic_colors",
    "get_adjacent_colors",
    "get_opposite_color",
    "fetch_color_name",
    "with_name",
]
