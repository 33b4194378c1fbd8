"""Tests for HTML skeleton rendering."""

from __future__ import annotations

import pytest

from divi2html.parser import DiviParser
from divi2html.render import module_to_html, to_html
from divi2html.schemas import (
    ColumnLayout,
    DiviModule,
    ParseResult,
    RowLayout,
    SectionLayout,
)


def _result_with(*modules: DiviModule) -> ParseResult:
    column = ColumnLayout(id="column-1", modules=list(modules))
    row = RowLayout(id="row-1", columns=[column])
    return ParseResult(sections=[SectionLayout(id="section-1", rows=[row])])


class TestToHtml:
    """Tests for to_html."""

    def test_simple_layout(self, simple_layout: str) -> None:
        html = to_html(DiviParser().parse(simple_layout))
        assert html == (
            "<section>\n"
            '<div class="row">\n'
            '<div class="column">\n'
            '<div class="text-module">Hello</div>\n'
            "</div>\n"
            "</div>\n"
            "</section>"
        )

    def test_empty_result(self) -> None:
        assert to_html(ParseResult()) == ""

    def test_empty_section(self) -> None:
        result = ParseResult(sections=[SectionLayout(id="section-1")])
        assert to_html(result) == "<section>\n</section>"

    def test_children_are_not_rendered(self, nested_layout: str) -> None:
        html = to_html(DiviParser().parse(nested_layout))
        assert html.count("<div class=") == 3
        assert 'class="module-et_pb_accordion"' in html
        assert "module-et_pb_toggle" not in html

    def test_matches_parser_method(self, simple_layout: str) -> None:
        parser = DiviParser()
        result = parser.parse(simple_layout)
        assert parser.to_html(result) == to_html(result)


class TestModuleToHtml:
    """Tests for per-module rendering."""

    def test_image(self) -> None:
        module = DiviModule(type="et_pb_image", attributes={"src": "https://x/y.jpg", "alt": "Logo"})
        assert module_to_html(module) == '<img src="https://x/y.jpg" alt="Logo" />'

    def test_image_without_attributes(self) -> None:
        assert module_to_html(DiviModule(type="et_pb_image")) == '<img src="" alt="" />'

    def test_button_with_url(self) -> None:
        module = DiviModule(
            type="et_pb_button", attributes={"button_url": "/join"}, content="Join now"
        )
        assert module_to_html(module) == '<a href="/join" class="button">Join now</a>'

    def test_button_without_url_links_to_hash(self) -> None:
        module = DiviModule(type="et_pb_button", content="Go")
        assert module_to_html(module) == '<a href="#" class="button">Go</a>'

    def test_video(self) -> None:
        module = DiviModule(type="et_pb_video", attributes={"src": "https://x/v.mp4"})
        assert module_to_html(module) == '<video src="https://x/v.mp4" controls></video>'

    def test_heading(self) -> None:
        assert module_to_html(DiviModule(type="et_pb_heading", content="Title")) == "<h2>Title</h2>"

    @pytest.mark.parametrize("module_type", ["et_pb_blurb", "et_pb_custom_widget"])
    def test_fallback_div(self, module_type: str) -> None:
        module = DiviModule(type=module_type, content="Body")
        assert module_to_html(module) == f'<div class="module-{module_type}">Body</div>'

    def test_attribute_values_are_escaped(self) -> None:
        module = DiviModule(
            type="et_pb_image", attributes={"src": 'a.png" onerror="x', "alt": "<b>"}
        )
        assert module_to_html(module) == (
            '<img src="a.png&quot; onerror=&quot;x" alt="&lt;b&gt;" />'
        )

    def test_multiple_modules_keep_order(self) -> None:
        result = _result_with(
            DiviModule(type="et_pb_text", content="One"),
            DiviModule(type="et_pb_heading", content="Two"),
        )
        lines = to_html(result).split("\n")
        assert lines[3:5] == ['<div class="text-module">One</div>', "<h2>Two</h2>"]
