"""Parse Divi builder shortcodes into a section/row/column/module tree."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from divi2html.catalog import get_module_info, is_layout_tag
from divi2html.media import extract_media_urls
from divi2html.render import to_html
from divi2html.schemas import (
    ColumnLayout,
    DiviModule,
    ModuleMetadata,
    ParseMetadata,
    ParseResult,
    RowLayout,
    RowMetadata,
    SectionLayout,
    SectionMetadata,
)

logger = logging.getLogger(__name__)

_SECTION_RE = re.compile(r"\[et_pb_section([^\]]*)\](.*?)\[/et_pb_section\]", re.DOTALL)
_ROW_RE = re.compile(r"\[et_pb_row([^\]]*)\](.*?)\[/et_pb_row\]", re.DOTALL)
_COLUMN_RE = re.compile(r"\[et_pb_column([^\]]*)\](.*?)\[/et_pb_column\]", re.DOTALL)
_MODULE_RE = re.compile(r"\[et_pb_(\w+)([^\]]*)\](.*?)\[/et_pb_\1\]", re.DOTALL)
_ATTRIBUTE_RE = re.compile(r"""(\w+)=["']([^"']*?)["']""")
_HTML_TAG_RE = re.compile(r"<[^>]*>")
_BRACKET_TOKEN_RE = re.compile(r"\[[^\]]*\]")
_WHITESPACE_RE = re.compile(r"\s+")
_NESTED_MARKER = "[et_pb_"

# Applied in this order, so ``&amp;lt;`` decodes all the way to ``<``.
_ATTRIBUTE_ENTITIES = (
    ("&quot;", '"'),
    ("&#039;", "'"),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
)


@dataclass
class _ParseContext:
    """Per-call counters and accumulated errors."""

    sections: int = 0
    rows: int = 0
    columns: int = 0
    errors: list[str] = field(default_factory=list)

    def next_id(self, kind: str) -> str:
        count = getattr(self, kind) + 1
        setattr(self, kind, count)
        return f"{kind[:-1]}-{count}"

    def record(self, message: str) -> None:
        logger.warning(message)
        self.errors.append(message)


def decode_attribute_value(value: str) -> str:
    """Decode the HTML entities Divi escapes in attribute values.

    Divi also doubles pipes to separate list-valued attributes; ``||`` is
    collapsed back into a single ``|``.
    """
    for entity, char in _ATTRIBUTE_ENTITIES:
        value = value.replace(entity, char)
    return value.replace("||", "|").strip()


def parse_attributes(attributes_str: str) -> dict[str, str]:
    """Parse ``key="value"`` / ``key='value'`` pairs from an opening tag.

    Fragments that do not match are dropped. Later duplicates win.
    """
    attributes: dict[str, str] = {}
    if not attributes_str or not attributes_str.strip():
        return attributes

    for match in _ATTRIBUTE_RE.finditer(attributes_str):
        key, value = match.groups()
        attributes[key] = decode_attribute_value(value)
    return attributes


def clean_content(content: str) -> str:
    """Strip HTML tags and ``&nbsp;`` and collapse whitespace."""
    content = _HTML_TAG_RE.sub("", content)
    content = content.replace("&nbsp;", " ")
    return _WHITESPACE_RE.sub(" ", content).strip()


def extract_plain_text(content: str) -> str:
    """Return ``content`` with every bracketed token and HTML tag removed."""
    text = _BRACKET_TOKEN_RE.sub("", content)
    text = _HTML_TAG_RE.sub("", text)
    text = decode_attribute_value(text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def _extract_sections(content: str, ctx: _ParseContext) -> list[SectionLayout]:
    sections: list[SectionLayout] = []
    for match in _SECTION_RE.finditer(content):
        attributes_str, section_content = match.groups()
        try:
            attributes = parse_attributes(attributes_str)
            rows = _extract_rows(section_content, ctx)
            sections.append(
                SectionLayout(
                    id=ctx.next_id("sections"),
                    attributes=attributes,
                    rows=rows,
                    metadata=SectionMetadata(
                        background_color=attributes.get("background_color"),
                        background_image=attributes.get("background_image"),
                        custom_css=attributes.get("custom_css"),
                    ),
                )
            )
        except Exception as exc:
            ctx.record(f"Section parsing error: {exc}")
    return sections


def _extract_rows(content: str, ctx: _ParseContext) -> list[RowLayout]:
    rows: list[RowLayout] = []
    for match in _ROW_RE.finditer(content):
        attributes_str, row_content = match.groups()
        try:
            attributes = parse_attributes(attributes_str)
            columns = _extract_columns(row_content, ctx)
            rows.append(
                RowLayout(
                    id=ctx.next_id("rows"),
                    attributes=attributes,
                    columns=columns,
                    metadata=RowMetadata(
                        column_structure=attributes.get("column_structure"),
                        custom_padding=attributes.get("custom_padding"),
                    ),
                )
            )
        except Exception as exc:
            ctx.record(f"Row parsing error: {exc}")
    return rows


def _extract_columns(content: str, ctx: _ParseContext) -> list[ColumnLayout]:
    columns: list[ColumnLayout] = []
    for match in _COLUMN_RE.finditer(content):
        attributes_str, column_content = match.groups()
        try:
            attributes = parse_attributes(attributes_str)
            modules = _extract_modules(column_content, ctx)
            columns.append(
                ColumnLayout(
                    id=ctx.next_id("columns"),
                    attributes=attributes,
                    modules=modules,
                )
            )
        except Exception as exc:
            ctx.record(f"Column parsing error: {exc}")
    return columns


def _extract_modules(content: str, ctx: _ParseContext) -> list[DiviModule]:
    modules: list[DiviModule] = []
    for match in _MODULE_RE.finditer(content):
        name, attributes_str, module_content = match.groups()
        module_type = f"et_pb_{name}"
        # Layout tags are handled by the outer passes.
        if is_layout_tag(module_type):
            continue

        try:
            children = None
            if get_module_info(module_type).has_children and _NESTED_MARKER in module_content:
                children = _extract_modules(module_content, ctx)

            modules.append(
                DiviModule(
                    type=module_type,
                    attributes=parse_attributes(attributes_str),
                    # ``content`` keeps the raw text of nested shortcodes.
                    content=clean_content(module_content),
                    children=children,
                    metadata=ModuleMetadata(original_shortcode=match.group(0)),
                )
            )
        except Exception as exc:
            ctx.record(f"Module parsing error ({module_type}): {exc}")
    return modules


def _count_modules(modules: list[DiviModule], module_types: dict[str, int]) -> int:
    total = 0
    for module in modules:
        total += 1
        module_types[module.type] = module_types.get(module.type, 0) + 1
        if module.children:
            total += _count_modules(module.children, module_types)
    return total


def calculate_metadata(sections: list[SectionLayout], errors: list[str]) -> ParseMetadata:
    """Aggregate section, row and module counts for a parsed tree."""
    module_types: dict[str, int] = {}
    total_rows = 0
    total_modules = 0

    for section in sections:
        total_rows += len(section.rows)
        for row in section.rows:
            for column in row.columns:
                total_modules += _count_modules(column.modules, module_types)

    return ParseMetadata(
        total_sections=len(sections),
        total_rows=total_rows,
        total_modules=total_modules,
        module_types=module_types,
        has_errors=bool(errors),
        errors=list(errors),
    )


class DiviParser:
    """Parser for Divi builder shortcode markup.

    Parsing state is local to each :meth:`parse` call, so one instance may be
    shared freely.

    Example:
        >>> parser = DiviParser()
        >>> result = parser.parse("[et_pb_section][et_pb_row][et_pb_column]"
        ...     "[et_pb_text]Hello[/et_pb_text]"
        ...     "[/et_pb_column][/et_pb_row][/et_pb_section]")
        >>> result.sections[0].rows[0].columns[0].modules[0].content
        'Hello'
    """

    def parse(self, content: str) -> ParseResult:
        """Parse raw WordPress content containing Divi shortcodes.

        Never raises: block-level failures are recorded in
        ``metadata.errors`` and a top-level failure degrades to an empty
        tree with ``metadata.has_errors`` set.
        """
        ctx = _ParseContext()
        try:
            sections = _extract_sections(content, ctx)
            plain_text = extract_plain_text(content)
            metadata = calculate_metadata(sections, ctx.errors)
            return ParseResult(sections=sections, plain_text=plain_text, metadata=metadata)
        except Exception as exc:
            ctx.record(f"Parse error: {exc}")
            plain_text = extract_plain_text(content) if isinstance(content, str) else ""
            return ParseResult(
                sections=[],
                plain_text=plain_text,
                metadata=ParseMetadata(has_errors=True, errors=list(ctx.errors)),
            )

    def parse_attributes(self, attributes_str: str) -> dict[str, str]:
        return parse_attributes(attributes_str)

    def decode_attribute_value(self, value: str) -> str:
        return decode_attribute_value(value)

    def clean_content(self, content: str) -> str:
        return clean_content(content)

    def to_html(self, parse_result: ParseResult) -> str:
        return to_html(parse_result)

    def extract_media_urls(self, parse_result: ParseResult) -> list[str]:
        return extract_media_urls(parse_result)


def parse_divi_content(content: str) -> ParseResult:
    """Parse ``content`` with a fresh :class:`DiviParser`."""
    return DiviParser().parse(content)


def extract_plain_text_from_divi(content: str) -> str:
    return DiviParser().parse(content).plain_text


def extract_media_from_divi(content: str) -> list[str]:
    """Parse ``content`` and return every media URL it references."""
    parser = DiviParser()
    return parser.extract_media_urls(parser.parse(content))
