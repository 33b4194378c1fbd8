"""Local configuration for divi2html."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_CACHE_DIR = ".divi2html_cache"
DEFAULT_CACHE_TTL_SECONDS = 24 * 60 * 60
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "divi2html/0.1 (+https://github.com/divi2html/divi2html)"
DEFAULT_WORDPRESS_URL = "https://wp.saabuildingblocks.com"

# Local-only cache directory for fetched posts and stored digests.
DIVI2HTML_CACHE_PATH = Path(os.getenv("DIVI2HTML_CACHE_PATH", DEFAULT_CACHE_DIR)).expanduser().resolve()
DIVI2HTML_CACHE_TTL_SECONDS = int(os.getenv("DIVI2HTML_CACHE_TTL_SECONDS", str(DEFAULT_CACHE_TTL_SECONDS)))
DIVI2HTML_FETCH_TIMEOUT_S = float(os.getenv("DIVI2HTML_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
DIVI2HTML_FETCH_MAX_RETRIES = int(os.getenv("DIVI2HTML_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
DIVI2HTML_FETCH_BACKOFF_S = float(os.getenv("DIVI2HTML_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
DIVI2HTML_USER_AGENT = os.getenv("DIVI2HTML_USER_AGENT", DEFAULT_USER_AGENT)

# WordPress REST API access. Reading published posts needs no credentials;
# an application password unlocks ``context=edit`` (raw shortcode content).
WORDPRESS_URL = os.getenv("WORDPRESS_URL", DEFAULT_WORDPRESS_URL).rstrip("/")
WORDPRESS_USER = os.getenv("WORDPRESS_USER", "")
WORDPRESS_APP_PASSWORD = os.getenv("WORDPRESS_APP_PASSWORD", "")

DIVI2HTML_LOG_LEVEL = os.getenv("DIVI2HTML_LOG_LEVEL", "INFO").upper()
DIVI2HTML_LOG_FORMAT = os.getenv("DIVI2HTML_LOG_FORMAT", "text").lower()
