"""Tests for the Divi module catalog."""

from __future__ import annotations

import pytest

from divi2html.catalog import (
    LAYOUT_TAGS,
    MODULE_TYPES,
    UNKNOWN_MODULE,
    get_module_info,
    is_layout_tag,
)


class TestCatalog:
    """Tests for catalog lookups."""

    def test_layout_tags_are_catalogued(self) -> None:
        for tag in LAYOUT_TAGS:
            assert MODULE_TYPES[tag].category == "layout"
            assert MODULE_TYPES[tag].has_children is True

    @pytest.mark.parametrize(
        ("tag", "category", "has_children"),
        [
            ("et_pb_text", "content", False),
            ("et_pb_image", "media", False),
            ("et_pb_accordion", "interactive", True),
            ("et_pb_gallery", "media", True),
            ("et_pb_divider", "design", False),
            ("et_pb_fullwidth_header", "layout", False),
        ],
    )
    def test_known_tags(self, tag: str, category: str, has_children: bool) -> None:
        info = get_module_info(tag)
        assert info.category == category
        assert info.has_children is has_children

    def test_unknown_tag_is_a_leaf(self) -> None:
        assert get_module_info("et_pb_custom_widget") is UNKNOWN_MODULE
        assert UNKNOWN_MODULE.has_children is False

    def test_is_layout_tag(self) -> None:
        assert is_layout_tag("et_pb_row")
        assert not is_layout_tag("et_pb_fullwidth_header")
        assert not is_layout_tag("et_pb_text")
