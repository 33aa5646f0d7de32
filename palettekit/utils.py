"""
utils.py
────────
Configuration loading, validation, and logging setup.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict

from loguru import logger

from .harmony import HARMONIES
from .options import DEFAULT_COLOR_COUNT, DEFAULT_QUALITY
from .pixels import DEFAULT_TIMEOUT


Config = Dict[str, Any]

_DEFAULTS: Config = {
    "color_count": DEFAULT_COLOR_COUNT,
    "quality":     DEFAULT_QUALITY,
    "harmonies":   [],
    "names":       False,
    "timeout":     DEFAULT_TIMEOUT,
}


# ── Config I/O ────────────────────────────────────────────────────────────────

def load_config(path: str | Path) -> Config:
    """
    Load a JSON configuration file and return it merged over the defaults.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file is not valid JSON or fails basic schema checks.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")
    if p.suffix.lower() != ".json":
        raise ValueError(f"Config file must be a .json file, got: {p.suffix}")

    with p.open("r", encoding="utf-8") as fh:
        try:
            cfg = json.load(fh)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in config file: {exc}") from exc

    _validate_config(cfg)
    return build_default_config(**cfg)


def _validate_config(cfg: Config) -> None:
    if not isinstance(cfg, dict):
        raise ValueError("Config root must be a JSON object.")
    unknown = set(cfg) - set(_DEFAULTS)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
    if "color_count" in cfg and not _is_int(cfg["color_count"]):
        raise ValueError("'color_count' must be an integer.")
    if "quality" in cfg and not (_is_int(cfg["quality"]) and cfg["quality"] >= 1):
        raise ValueError("'quality' must be an integer >= 1.")
    if "names" in cfg and not isinstance(cfg["names"], bool):
        raise ValueError("'names' must be true or false.")
    if "timeout" in cfg:
        timeout = cfg["timeout"]
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ValueError("'timeout' must be a positive number.")
    harmonies = cfg.get("harmonies", [])
    if not isinstance(harmonies, list):
        raise ValueError("'harmonies' must be a list.")
    for name in harmonies:
        if name not in HARMONIES:
            raise ValueError(
                f"Unknown harmony {name!r}; choose from {', '.join(sorted(HARMONIES))}."
            )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def build_default_config(**overrides: Any) -> Config:
    """Return the default settings updated with every non-``None`` override."""
    cfg = dict(_DEFAULTS)
    cfg["harmonies"] = list(_DEFAULTS["harmonies"])
    cfg.update({k: v for k, v in overrides.items() if v is not None})
    return cfg


# ── Logging ───────────────────────────────────────────────────────────────────

def configure_logging(verbose: bool = False) -> None:
    """Replace loguru's default sink with a stderr sink at INFO or DEBUG."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="{time:HH:mm:ss} | {level} | {message}",
        level="DEBUG" if verbose else "INFO",
    )
