"""Divi layout tree models.

Attribute names are snake_case in Python and camelCase when dumped with
``by_alias=True`` (``plainText``, ``totalModules``, ...), which is the shape
JSON consumers of the parser read.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _LayoutModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ModuleMetadata(_LayoutModel):
    """Bookkeeping carried by every parsed module."""

    original_shortcode: str
    # Reserved; nested modules are not tracked by depth.
    depth: int = 0


class DiviModule(_LayoutModel):
    """A content module (text, image, button, ...), possibly with children."""

    type: str
    attributes: dict[str, str] = Field(default_factory=dict)
    content: str = ""
    children: list["DiviModule"] | None = None
    metadata: ModuleMetadata | None = None


class ColumnLayout(_LayoutModel):
    """A column inside a row."""

    id: str
    type: Literal["column"] = "column"
    attributes: dict[str, str] = Field(default_factory=dict)
    modules: list[DiviModule] = Field(default_factory=list)


class RowMetadata(_LayoutModel):
    column_structure: str | None = None
    custom_padding: str | None = None


class RowLayout(_LayoutModel):
    """A row inside a section."""

    id: str
    type: Literal["row"] = "row"
    attributes: dict[str, str] = Field(default_factory=dict)
    columns: list[ColumnLayout] = Field(default_factory=list)
    metadata: RowMetadata = Field(default_factory=RowMetadata)


class SectionMetadata(_LayoutModel):
    background_color: str | None = None
    background_image: str | None = None
    custom_css: str | None = None


class SectionLayout(_LayoutModel):
    """A top-level layout container."""

    id: str
    type: Literal["section"] = "section"
    attributes: dict[str, str] = Field(default_factory=dict)
    rows: list[RowLayout] = Field(default_factory=list)
    metadata: SectionMetadata = Field(default_factory=SectionMetadata)


class ParseMetadata(_LayoutModel):
    """Aggregate statistics for a parse call."""

    total_sections: int = 0
    total_rows: int = 0
    total_modules: int = 0
    module_types: dict[str, int] = Field(default_factory=dict)
    has_errors: bool = False
    errors: list[str] = Field(default_factory=list)


class ParseResult(_LayoutModel):
    """Complete output of one parse call."""

    sections: list[SectionLayout] = Field(default_factory=list)
    plain_text: str = ""
    metadata: ParseMetadata = Field(default_factory=ParseMetadata)
