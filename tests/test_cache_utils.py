"""Tests for cache utilities module."""

from __future__ import annotations

import os
import time
from pathlib import Path

import pytest

from divi2html.cache_utils import cache_dir_for, is_cache_fresh, read_cached_text, write_cached_text


def _make_old(path: Path) -> None:
    old_time = time.time() - 100000
    os.utime(path, (old_time, old_time))


class TestIsCacheFresh:
    """Tests for is_cache_fresh function."""

    def test_returns_false_when_path_missing(self, tmp_path: Path) -> None:
        assert not is_cache_fresh(tmp_path / "nonexistent", ttl_seconds=86400)

    def test_returns_true_when_file_is_new(self, tmp_path: Path) -> None:
        path = tmp_path / "post.json"
        path.write_text("{}")

        assert is_cache_fresh(path, ttl_seconds=86400)

    def test_returns_false_when_file_is_old(self, tmp_path: Path) -> None:
        path = tmp_path / "post.json"
        path.write_text("{}")
        _make_old(path)

        assert not is_cache_fresh(path, ttl_seconds=1)

    @pytest.mark.parametrize("ttl", [0, -1])
    def test_non_positive_ttl_caches_forever(self, tmp_path: Path, ttl: int) -> None:
        """A TTL of zero or less never expires."""
        path = tmp_path / "post.json"
        path.write_text("{}")
        _make_old(path)

        assert is_cache_fresh(path, ttl_seconds=ttl)


class TestCacheDirFor:
    """Tests for cache_dir_for function."""

    def test_basic_site(self, tmp_path: Path) -> None:
        result = cache_dir_for("https://example.com", "posts", 5, tmp_path)
        assert result == tmp_path / "example.com__posts__5"

    def test_pages_are_separate_from_posts(self, tmp_path: Path) -> None:
        posts = cache_dir_for("https://example.com", "posts", 5, tmp_path)
        pages = cache_dir_for("https://example.com", "pages", 5, tmp_path)
        assert posts != pages

    def test_port_is_made_filesystem_safe(self, tmp_path: Path) -> None:
        result = cache_dir_for("http://localhost:8080", "pages", 12, tmp_path)
        assert result == tmp_path / "localhost_8080__pages__12"

    def test_path_prefix_is_ignored(self, tmp_path: Path) -> None:
        result = cache_dir_for("https://example.com/blog", "posts", 1, tmp_path)
        assert result == tmp_path / "example.com__posts__1"


class TestReadCachedText:
    """Tests for read_cached_text."""

    @pytest.mark.asyncio
    async def test_reads_fresh_file(self, tmp_path: Path) -> None:
        path = tmp_path / "post.json"
        path.write_text('{"id": 1}', encoding="utf-8")

        assert await read_cached_text(path, ttl_seconds=60) == '{"id": 1}'

    @pytest.mark.asyncio
    async def test_stale_file_is_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "post.json"
        path.write_text('{"id": 1}', encoding="utf-8")
        _make_old(path)

        assert await read_cached_text(path, ttl_seconds=60) is None

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path: Path) -> None:
        assert await read_cached_text(tmp_path / "post.json", ttl_seconds=0) is None


class TestWriteCachedText:
    """Tests for write_cached_text."""

    @pytest.mark.asyncio
    async def test_creates_parent_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "example.com__posts__1" / "post.json"

        await write_cached_text(path, "Café")

        assert path.read_text(encoding="utf-8") == "Café"

    @pytest.mark.asyncio
    async def test_overwrites_existing(self, tmp_path: Path) -> None:
        path = tmp_path / "post.json"
        path.write_text("old", encoding="utf-8")

        await write_cached_text(path, "new")

        assert path.read_text(encoding="utf-8") == "new"
