"""Conversion output model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from divi2html.schemas.layout import ParseResult


class ConversionResult(BaseModel):
    """Final conversion output."""

    summary: str
    layout_tree: str
    html: str
    plain_text: str
    media_urls: list[str] = Field(default_factory=list)
    layout: ParseResult | None = None
