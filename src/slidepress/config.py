"""Local configuration for slidepress."""

from __future__ import annotations

import os


DEFAULT_STRICT_HEADERS = False
DEFAULT_INDENT_WIDTH = 2
DEFAULT_TAB_SIZE = 4
DEFAULT_RENDER_WORKERS = 1

# Strict mode rejects headers that skip a nesting level instead of clamping them.
SLIDEPRESS_STRICT_HEADERS = os.getenv("SLIDEPRESS_STRICT_HEADERS", str(DEFAULT_STRICT_HEADERS)).lower() in {"1", "true", "yes"}
SLIDEPRESS_INDENT_WIDTH = int(os.getenv("SLIDEPRESS_INDENT_WIDTH", str(DEFAULT_INDENT_WIDTH)))
SLIDEPRESS_TAB_SIZE = int(os.getenv("SLIDEPRESS_TAB_SIZE", str(DEFAULT_TAB_SIZE)))
SLIDEPRESS_RENDER_WORKERS = int(os.getenv("SLIDEPRESS_RENDER_WORKERS", str(DEFAULT_RENDER_WORKERS)))
