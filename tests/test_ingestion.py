"""Tests for the conversion pipeline."""

from __future__ import annotations

import logging
import uuid
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from divi2html.exceptions import PostNotFoundError
from divi2html.ingestion import ConversionOptions, convert_markup, convert_post
from divi2html.schemas import WordPressPost, WordPressQuery


def _query(tmp_path: Path) -> WordPressQuery:
    return WordPressQuery(
        input_text="12",
        post_id=12,
        base_url="https://example.com",
        api_url="https://example.com/wp-json/wp/v2/posts/12",
        id=uuid.uuid4(),
        cache_dir=tmp_path,
    )


class TestConvertMarkup:
    """Tests for convert_markup."""

    def test_layout_renderer(self, simple_layout: str) -> None:
        result, metadata = convert_markup(simple_layout, title="Home", post_id=3)

        assert metadata == {
            "title": "Home",
            "post_id": 3,
            "renderer": "layout",
            "has_errors": False,
        }
        assert '<div class="text-module">Hello</div>' in result.html
        assert result.plain_text == "Hello"
        assert result.summary.startswith("Title: Home\nPost: 3")

    def test_cleanup_fallback_without_sections(self) -> None:
        result, metadata = convert_markup("<p>Plain post</p><p></p>[vc_row]x[/vc_row]")

        assert metadata["renderer"] == "cleanup"
        assert result.html == "<p>Plain post</p>x"
        assert result.plain_text == "Plain postx"

    def test_fallback_disabled(self) -> None:
        options = ConversionOptions(fallback_to_cleanup=False)

        result, metadata = convert_markup("<p>Plain post</p>", options=options)

        assert metadata["renderer"] == "layout"
        assert result.html == ""

    def test_module_filter(self, nested_layout: str) -> None:
        options = ConversionOptions(module_filter_mode="exclude", modules=["toggle"])

        result, _ = convert_markup(nested_layout, options=options)

        assert result.layout is not None
        assert result.layout.metadata.module_types == {"et_pb_accordion": 1}
        assert "Modules: 1" in result.summary

    def test_parse_errors_are_reported(self, simple_layout: str, caplog: pytest.LogCaptureFixture) -> None:
        with patch("divi2html.parser._extract_sections", side_effect=RuntimeError("boom")):
            with caplog.at_level(logging.WARNING, logger="divi2html.ingestion"):
                result, metadata = convert_markup(simple_layout, post_id=3)

        assert metadata["has_errors"] is True
        assert metadata["renderer"] == "cleanup"
        assert "Errors: 1" in result.summary
        assert any(record.getMessage() == "Divi content parsed with errors" for record in caplog.records)


class TestConvertPost:
    """Tests for convert_post."""

    @pytest.mark.asyncio
    async def test_converts_fetched_post(self, tmp_path: Path, simple_layout: str) -> None:
        post = WordPressPost(
            id=12,
            title="Welcome",
            content=simple_layout,
            link="https://example.com/welcome/",
            raw=True,
        )
        mock_fetch = AsyncMock(return_value=post)

        with patch("divi2html.ingestion.fetch_wordpress_post", mock_fetch):
            result, metadata = await convert_post(_query(tmp_path), ConversionOptions(use_cache=False))

        assert mock_fetch.call_args.kwargs == {"use_cache": False}
        assert metadata["source"] == "raw"
        assert metadata["link"] == "https://example.com/welcome/"
        assert metadata["post_id"] == 12
        assert "Source: https://example.com/welcome/" in result.summary

    @pytest.mark.asyncio
    async def test_rendered_post_without_link(self, tmp_path: Path) -> None:
        post = WordPressPost(id=12, content="<p>Rendered</p>")

        with patch("divi2html.ingestion.fetch_wordpress_post", AsyncMock(return_value=post)):
            result, metadata = await convert_post(_query(tmp_path))

        assert metadata["source"] == "rendered"
        assert metadata["title"] is None
        assert metadata["renderer"] == "cleanup"
        assert "Source: https://example.com/wp-json/wp/v2/posts/12" in result.summary

    @pytest.mark.asyncio
    async def test_fetch_errors_propagate(self, tmp_path: Path) -> None:
        mock_fetch = AsyncMock(side_effect=PostNotFoundError("gone"))

        with patch("divi2html.ingestion.fetch_wordpress_post", mock_fetch):
            with pytest.raises(PostNotFoundError):
                await convert_post(_query(tmp_path))
