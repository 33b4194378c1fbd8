"""Serialize a parsed Divi layout into a minimal HTML skeleton."""

from __future__ import annotations

from html import escape

from divi2html.schemas import DiviModule, ParseResult


def to_html(parse_result: ParseResult) -> str:
    """Render sections, rows, columns and top-level modules as HTML.

    Nested ``children`` are not rendered; container modules emit only their
    own cleaned ``content``.
    """
    lines: list[str] = []
    for section in parse_result.sections:
        lines.append("<section>")
        for row in section.rows:
            lines.append('<div class="row">')
            for column in row.columns:
                lines.append('<div class="column">')
                lines.extend(module_to_html(module) for module in column.modules)
                lines.append("</div>")
            lines.append("</div>")
        lines.append("</section>")
    return "\n".join(lines)


def module_to_html(module: DiviModule) -> str:
    """Render a single module; unknown types fall back to a classed div."""
    attributes = module.attributes
    content = module.content

    if module.type == "et_pb_text":
        return f'<div class="text-module">{content}</div>'
    if module.type == "et_pb_image":
        return f'<img src="{_attr(attributes.get("src"))}" alt="{_attr(attributes.get("alt"))}" />'
    if module.type == "et_pb_button":
        href = _attr(attributes.get("button_url") or "#")
        return f'<a href="{href}" class="button">{content}</a>'
    if module.type == "et_pb_video":
        return f'<video src="{_attr(attributes.get("src"))}" controls></video>'
    if module.type == "et_pb_heading":
        return f"<h2>{content}</h2>"
    return f'<div class="module-{module.type}">{content}</div>'


def _attr(value: str | None) -> str:
    return escape(value or "", quote=True)
