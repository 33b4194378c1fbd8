"""On-disk cache for fetched WordPress payloads."""

from __future__ import annotations

import asyncio
import re
import time
from pathlib import Path
from urllib.parse import urlparse

_UNSAFE_CHARS_RE = re.compile(r"[^A-Za-z0-9._-]+")


def is_cache_fresh(path: Path, ttl_seconds: int) -> bool:
    """Return True if ``path`` exists and is younger than ``ttl_seconds``.

    A TTL of zero or less keeps cached files forever.
    """
    try:
        mtime = path.stat().st_mtime
    except FileNotFoundError:
        return False
    if ttl_seconds <= 0:
        return True
    return time.time() - mtime <= ttl_seconds


def cache_dir_for(base_url: str, post_type: str, post_id: int, base_path: Path) -> Path:
    """Directory holding cached data for one post.

    The name combines site host, REST collection and post ID, so posts from
    different sites never share a directory. A path prefix on the site URL
    does not take part in the key.
    """
    host = urlparse(base_url).netloc or base_url
    return base_path / _UNSAFE_CHARS_RE.sub("_", f"{host}__{post_type}__{post_id}")


async def read_cached_text(path: Path, ttl_seconds: int) -> str | None:
    """Read ``path`` in a worker thread, or return None when stale or missing."""
    if not is_cache_fresh(path, ttl_seconds):
        return None
    return await asyncio.to_thread(path.read_text, encoding="utf-8")


async def write_cached_text(path: Path, content: str) -> None:
    """Write ``content`` to ``path`` in a worker thread, creating parents."""

    def _write() -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    await asyncio.to_thread(_write)
