"""Shared schemas for divi2html."""

from divi2html.schemas.conversion import ConversionResult
from divi2html.schemas.layout import (
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
from divi2html.schemas.query import WordPressPost, WordPressQuery

__all__ = [
    "ColumnLayout",
    "ConversionResult",
    "DiviModule",
    "ModuleMetadata",
    "ParseMetadata",
    "ParseResult",
    "RowLayout",
    "RowMetadata",
    "SectionLayout",
    "SectionMetadata",
    "WordPressPost",
    "WordPressQuery",
]
