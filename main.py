#!/usr/bin/env python3
"""
main.py
───────
palettekit – command-line entry point.

Usage examples
──────────────
  # Palette of a local image
  python main.py photo.jpg --count 6

  # Palette of a remote image, with colour names, as JSON
  python main.py https://example.com/cover.png --names --json

  # Palette plus triadic / shade schemes for the dominant colour
  python main.py photo.jpg --harmony triadic --harmony shades

  # Harmonies for a single colour, no image involved
  python main.py --color "#ff5733" --harmony analogous --harmony tetradic
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Dict, List, Optional

from palettekit import (
    HARMONIES,
    ColorItem,
    PaletteError,
    PaletteResult,
    generate_harmony,
    get_palette_with_dominant,
    get_palette_with_dominant_from_url,
    with_name,
)
from palettekit.utils import build_default_config, configure_logging, load_config


# ── CLI definition ─────────────────────────────────────────────────────────────

def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="palettekit",
        description="Extract a colour palette from an image and derive colour schemes.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    p.add_argument(
        "image",
        nargs="?",
        metavar="IMAGE",
        help="Image file path or http(s) URL.",
    )
    p.add_argument(
        "--color",
        metavar="HEX",
        help="Skip extraction and derive harmonies from this colour.",
    )
    p.add_argument(
        "--count", "-n",
        type=int,
        metavar="N",
        help="Number of palette colours (2-20, default 10).",
    )
    p.add_argument(
        "--quality", "-q",
        type=int,
        metavar="Q",
        help="Sampling stride; 1 = best, 10 = default.",
    )
    p.add_argument(
        "--harmony",
        action="append",
        choices=sorted(HARMONIES),
        metavar="NAME",
        help=f"Colour scheme to derive (repeatable): {', '.join(sorted(HARMONIES))}.",
    )
    p.add_argument(
        "--names",
        action="store_true",
        default=None,
        help="Look up the nearest CSS colour name for each palette entry.",
    )
    p.add_argument("--json", action="store_true", help="Print JSON instead of a table.")
    p.add_argument("--config", "-c", metavar="PATH", help="Path to a JSON config file.")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    return p


# ── Helpers ────────────────────────────────────────────────────────────────────

def _is_url(value: str) -> bool:
    return value.lower().startswith(("http://", "https://"))


def _extract(image: str, cfg: dict) -> PaletteResult:
    if _is_url(image):
        result = get_palette_with_dominant_from_url(
            image, cfg["color_count"], cfg["quality"], timeout=cfg["timeout"],
        )
    else:
        result = get_palette_with_dominant(
            image, cfg["color_count"], cfg["quality"],
        )
    if cfg["names"] and result.palette:
        palette = [with_name(item) for item in result.palette]
        result = PaletteResult(dominant=palette[0], palette=palette)
    return result


def _harmonies(color: str, names: List[str]) -> Dict[str, List[str]]:
    return {name: generate_harmony(name, color) for name in names}


def _format_item(item: ColorItem) -> str:
    line = f"{item.hex}  rgb{item.rgb}  hsl{item.hsl}  cmyk{item.cmyk}"
    return f"{line}  {item.name}" if item.name else line


def _print_report(result: Optional[PaletteResult], harmonies: Dict[str, List[str]]) -> None:
    if result is not None:
        print()
        if result.palette:
            print(f"  Dominant  {_format_item(result.dominant)}")
            print(f"\n  Palette ({len(result.palette)} colours)")
            for i, item in enumerate(result.palette, 1):
                print(f"  {i:>2}. {_format_item(item)}")
        else:
            print("  No colours found.")
    for name, colors in harmonies.items():
        print(f"\n  {name.capitalize():<14} {'  '.join(colors)}")
    print()


# ── Main ───────────────────────────────────────────────────────────────────────

def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args   = parser.parse_args(argv)

    if not args.image and not args.color:
        parser.error("an IMAGE or --color is required")

    configure_logging(args.verbose)

    try:
        cfg = load_config(args.config) if args.config else build_default_config()
        # CLI flags override the config file (when explicitly provided)
        overrides = {
            "color_count": args.count,
            "quality":     args.quality,
            "harmonies":   args.harmony,
            "names":       args.names,
        }
        cfg.update({k: v for k, v in overrides.items() if v is not None})

        result: Optional[PaletteResult] = None
        if args.color:
            seed = args.color
        else:
            result = _extract(args.image, cfg)
            seed = result.dominant.hex
        harmonies = _harmonies(seed, cfg["harmonies"]) if (result is None or result.palette) else {}
    except (PaletteError, FileNotFoundError, ValueError) as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1

    if args.json:
        payload = result.to_dict() if result is not None else {}
        payload["harmonies"] = harmonies
        print(json.dumps(payload, indent=2))
    else:
        _print_report(result, harmonies)
    return 0


if __name__ == "__main__":
    sys.exit(main())
