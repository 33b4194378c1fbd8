"""Tests for media URL extraction."""

from __future__ import annotations

from divi2html.media import extract_media_urls
from divi2html.parser import DiviParser
from divi2html.schemas import (
    ColumnLayout,
    DiviModule,
    ParseResult,
    RowLayout,
    SectionLayout,
    SectionMetadata,
)


class TestExtractMediaUrls:
    """Tests for extract_media_urls."""

    def test_first_seen_order_without_duplicates(self, media_layout: str) -> None:
        result = DiviParser().parse(media_layout)
        assert extract_media_urls(result) == [
            "https://x/bg.jpg",
            "https://x/y.jpg",
            "https://x/a.mp3",
        ]

    def test_empty_src_is_skipped(self) -> None:
        markup = (
            "[et_pb_section][et_pb_row][et_pb_column]"
            '[et_pb_video src=""][/et_pb_video][et_pb_image][/et_pb_image]'
            "[/et_pb_column][/et_pb_row][/et_pb_section]"
        )
        assert extract_media_urls(DiviParser().parse(markup)) == []

    def test_nested_children_are_not_inspected(self) -> None:
        markup = (
            "[et_pb_section][et_pb_row][et_pb_column]"
            '[et_pb_slider][et_pb_image src="https://x/nested.png"][/et_pb_image][/et_pb_slider]'
            "[/et_pb_column][/et_pb_row][/et_pb_section]"
        )
        result = DiviParser().parse(markup)
        assert result.metadata.total_modules == 2
        assert extract_media_urls(result) == []

    def test_src_only_read_for_image_and_video(self) -> None:
        module = DiviModule(type="et_pb_blurb", attributes={"src": "https://x/ignored.png"})
        result = ParseResult(
            sections=[
                SectionLayout(
                    id="section-1",
                    rows=[RowLayout(id="row-1", columns=[ColumnLayout(id="column-1", modules=[module])])],
                )
            ]
        )
        assert extract_media_urls(result) == []

    def test_section_background_without_rows(self) -> None:
        result = ParseResult(
            sections=[
                SectionLayout(
                    id="section-1",
                    metadata=SectionMetadata(background_image="https://x/hero.jpg"),
                )
            ]
        )
        assert extract_media_urls(result) == ["https://x/hero.jpg"]

    def test_empty_result(self) -> None:
        assert extract_media_urls(ParseResult()) == []
