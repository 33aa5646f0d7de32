"""
api/palette.py
──────────────
Vercel Python serverless function – POST /api/palette

Downloads an image from a public URL, extracts its palette and, optionally,
colour schemes derived from the dominant colour.

Request body (JSON):
{
  "file_url":    "https://…/cover.png",
  "color_count": 6,                       // optional, 2-20
  "quality":     10,                      // optional, >= 1
  "harmonies":   ["triadic", "shades"]    // optional
}

Response: application/json
{
  "dominant":  {"name": null, "hex": "#…", "rgb": […], "hsl": […], "cmyk": […]},
  "palette":   [ … ],
  "harmonies": {"triadic": ["#…", …], …}
}
"""

from __future__ import annotations

import json
from http.server import BaseHTTPRequestHandler
from typing import Any, Dict, Tuple

from loguru import logger

from palettekit import (
    HARMONIES,
    EmptyPaletteError,
    ImageLoadError,
    InvalidParameterError,
    generate_harmony,
    get_palette_with_dominant_from_url,
)
from palettekit.options import DEFAULT_COLOR_COUNT, DEFAULT_QUALITY

# ── CORS headers sent with every response ─────────────────────────────────────
_CORS = {
    "Access-Control-Allow-Origin":  "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


# ── Vercel handler class ───────────────────────────────────────────────────────

class handler(BaseHTTPRequestHandler):

    def log_message(self, fmt, *args):  # silence default access-log noise
        pass

    # ── CORS preflight ─────────────────────────────────────────────────────────
    def do_OPTIONS(self):
        self.send_response(200)
        for k, v in _CORS.items():
            self.send_header(k, v)
        self.end_headers()

    # ── Main POST ──────────────────────────────────────────────────────────────
    def do_POST(self):
        # Parse request body
        try:
            length = int(self.headers.get("Content-Length", 0))
            body   = self.rfile.read(length)
            data   = json.loads(body)
        except (ValueError, TypeError) as exc:
            self._json_response(400, {"error": f"Invalid request body: {exc}"})
            return

        try:
            status, payload = _run(data)
        except Exception as exc:
            logger.exception("Palette request failed")
            self._json_response(500, {"error": str(exc)})
            return
        self._json_response(status, payload)

    # ── Response helper ────────────────────────────────────────────────────────
    def _json_response(self, code: int, payload: Dict[str, Any]) -> None:
        body = json.dumps(payload).encode()
        self.send_response(code)
        for k, v in _CORS.items():
            self.send_header(k, v)
        self.send_header("Content-Type",   "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)


# ── Core logic ─────────────────────────────────────────────────────────────────

def _run(data: Any) -> Tuple[int, Dict[str, Any]]:
    """Return ``(status_code, json_payload)`` for a parsed request body."""
    if not isinstance(data, dict):
        return 400, {"error": "Request body must be a JSON object"}

    file_url    = data.get("file_url") or ""
    color_count = data.get("color_count", DEFAULT_COLOR_COUNT)
    quality     = data.get("quality", DEFAULT_QUALITY)
    harmonies   = data.get("harmonies") or []

    if not isinstance(file_url, str):
        return 400, {"error": "file_url must be a string"}
    file_url = file_url.strip()
    if not file_url:
        return 400, {"error": "file_url is required"}
    if not isinstance(harmonies, list) or any(not isinstance(h, str) or h not in HARMONIES for h in harmonies):
        return 400, {"error": f"harmonies must be a list drawn from: {', '.join(sorted(HARMONIES))}"}

    try:
        result = get_palette_with_dominant_from_url(file_url, color_count, quality)
    except InvalidParameterError as exc:
        return 400, {"error": str(exc)}
    except ImageLoadError as exc:
        logger.warning("Image load failed for {}: {}", file_url, exc)
        return 502, {"error": str(exc)}
    except EmptyPaletteError as exc:
        return 422, {"error": str(exc)}

    payload = result.to_dict()
    payload["harmonies"] = {
        name: generate_harmony(name, result.dominant.hex) for name in harmonies
    }
    return 200, payload
