"""Format a parsed Divi layout into summary, tree, and content outputs."""

from __future__ import annotations

import logging

import tiktoken

from divi2html.media import extract_media_urls
from divi2html.render import to_html
from divi2html.schemas import ConversionResult, DiviModule, ParseResult

logger = logging.getLogger(__name__)


def format_layout(
    *,
    parse_result: ParseResult,
    title: str | None = None,
    post_id: int | None = None,
    source_url: str | None = None,
) -> ConversionResult:
    """Create summary, layout tree, HTML and plain text."""
    tree = "Layout:\n" + create_layout_tree(parse_result)
    html = to_html(parse_result)
    metadata = parse_result.metadata

    summary_lines = []
    if title:
        summary_lines.append(f"Title: {title}")
    if post_id is not None:
        summary_lines.append(f"Post: {post_id}")
    if source_url:
        summary_lines.append(f"Source: {source_url}")
    summary_lines.append(f"Sections: {metadata.total_sections}")
    summary_lines.append(f"Rows: {metadata.total_rows}")
    summary_lines.append(f"Modules: {metadata.total_modules}")
    if metadata.module_types:
        types = ", ".join(
            f"{name} ({count})"
            for name, count in sorted(metadata.module_types.items(), key=lambda item: (-item[1], item[0]))
        )
        summary_lines.append(f"Module types: {types}")
    if metadata.has_errors:
        summary_lines.append(f"Errors: {len(metadata.errors)}")

    token_estimate = _format_token_count(parse_result.plain_text)
    if token_estimate:
        summary_lines.append(f"Estimated tokens: {token_estimate}")

    return ConversionResult(
        summary="\n".join(summary_lines),
        layout_tree=tree,
        html=html,
        plain_text=parse_result.plain_text,
        media_urls=extract_media_urls(parse_result),
        layout=parse_result,
    )


def create_layout_tree(parse_result: ParseResult) -> str:
    """Render the layout as an indented outline, one node per line."""
    lines: list[str] = []
    for section in parse_result.sections:
        lines.append(section.id)
        for row in section.rows:
            structure = row.metadata.column_structure
            lines.append(" " * 4 + (f"{row.id} [{structure}]" if structure else row.id))
            for column in row.columns:
                lines.append(" " * 8 + column.id)
                lines.extend(_module_lines(column.modules, indent=3))
    if not lines:
        return "(no Divi sections found)"
    return "\n".join(lines)


def _module_lines(modules: list[DiviModule], indent: int) -> list[str]:
    lines: list[str] = []
    for module in modules:
        lines.append(" " * (indent * 4) + module.type)
        if module.children:
            lines.extend(_module_lines(module.children, indent + 1))
    return lines


def _format_token_count(text: str) -> str | None:
    try:
        encoding = tiktoken.get_encoding("o200k_base")
        total_tokens = len(encoding.encode(text, disallowed_special=()))
    except Exception as exc:
        logger.debug("Token estimate unavailable: %s", exc)
        return None

    if total_tokens >= 1_000_000:
        return f"{total_tokens / 1_000_000:.1f}M"
    if total_tokens >= 1_000:
        return f"{total_tokens / 1_000:.1f}k"
    return str(total_tokens)
