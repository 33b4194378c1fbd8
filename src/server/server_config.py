"""Configuration for the server."""

from __future__ import annotations

import os

# Content longer than this is cropped in API responses; the full digest stays downloadable.
MAX_DISPLAY_SIZE: int = int(os.getenv("DIVI2HTML_MAX_DISPLAY_SIZE", "300000"))
# Upper bound for markup posted to /api/parse, in characters.
MAX_CONTENT_SIZE: int = int(os.getenv("DIVI2HTML_MAX_CONTENT_SIZE", "5000000"))
