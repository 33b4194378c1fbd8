"""Pydantic models for the API."""

from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from divi2html.schemas import ParseResult
from server.server_config import MAX_CONTENT_SIZE


class ModuleFilterMode(str, Enum):
    """Enumeration for module filtering modes."""

    INCLUDE = "include"
    EXCLUDE = "exclude"


def _normalize_modules(v: str | list[str] | None) -> list[str]:
    if not v:
        return []
    if isinstance(v, str):
        return [item.strip() for item in v.split(",") if item.strip()]
    return [item.strip() for item in v if item.strip()]


class ParseRequest(BaseModel):
    """Request model for the /api/parse endpoint.

    Attributes
    ----------
    content : str
        Raw WordPress content containing Divi shortcodes.
    module_filter_mode : ModuleFilterMode
        Module filtering mode (include or exclude).
    modules : list[str]
        Module types to include or exclude.

    """

    content: str = Field(..., max_length=MAX_CONTENT_SIZE, description="Raw Divi markup")
    module_filter_mode: ModuleFilterMode = Field(
        default=ModuleFilterMode.EXCLUDE,
        description="Module filtering mode",
    )
    modules: list[str] = Field(default_factory=list, description="Module types to include or exclude")

    @field_validator("modules", mode="before")
    @classmethod
    def normalize_modules(cls, v: str | list[str] | None) -> list[str]:
        """Normalize module inputs from comma-separated strings or lists."""
        return _normalize_modules(v)


class ParseResponse(BaseModel):
    """Response model for the /api/parse endpoint."""

    # Same key style as the nested layout result.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    result: ParseResult = Field(..., description="Parsed layout tree and statistics")
    html: str = Field(..., description="HTML serialization of the layout")
    layout_tree: str = Field(..., description="Indented layout outline")
    media_urls: list[str] = Field(default_factory=list, description="Referenced media URLs")
    renderer: str = Field(..., description="Renderer that produced the HTML (layout or cleanup)")


class IngestRequest(BaseModel):
    """Request model for the /api/ingest endpoint.

    Attributes
    ----------
    input_text : str
        WordPress post ID, ``page:<id>``, or post URL.
    site : str | None
        Site root used for bare IDs; defaults to ``WORDPRESS_URL``.
    module_filter_mode : ModuleFilterMode
        Module filtering mode (include or exclude).
    modules : list[str]
        Module types to include or exclude.
    use_cache : bool
        Serve the post from the local cache when fresh.

    """

    input_text: str = Field(..., description="WordPress post ID or URL to ingest")
    site: str | None = Field(default=None, description="WordPress site root for bare IDs")
    module_filter_mode: ModuleFilterMode = Field(
        default=ModuleFilterMode.EXCLUDE,
        description="Module filtering mode",
    )
    modules: list[str] = Field(default_factory=list, description="Module types to include or exclude")
    use_cache: bool = Field(default=True, description="Use cached WordPress payloads")

    @field_validator("input_text")
    @classmethod
    def validate_input_text(cls, v: str) -> str:
        """Validate that ``input_text`` is not empty."""
        if not v.strip():
            err = "input_text cannot be empty"
            raise ValueError(err)
        return v.strip()

    @field_validator("modules", mode="before")
    @classmethod
    def normalize_modules(cls, v: str | list[str] | None) -> list[str]:
        """Normalize module inputs from comma-separated strings or lists."""
        return _normalize_modules(v)


class IngestSuccessResponse(BaseModel):
    """Success response model for the /api/ingest endpoint.

    Attributes
    ----------
    post_id : int | None
        The WordPress post identifier.
    title : str | None
        The post title.
    source_url : str | None
        Permalink or REST URL of the post.
    source : str | None
        ``raw`` when unrendered shortcodes were fetched, else ``rendered``.
    renderer : str
        Renderer that produced the HTML (layout or cleanup).
    summary : str
        Summary of the conversion including counts and token estimate.
    digest_url : str
        URL to download the full digest from the local cache.
    tree : str
        Layout outline of the post.
    html : str
        Converted HTML (possibly cropped).
    plain_text : str
        Plain text of the post (possibly cropped).
    media_urls : list[str]
        Media URLs referenced by the layout.

    """

    post_id: int | None = Field(default=None, description="WordPress post ID")
    title: str | None = Field(default=None, description="Post title")
    source_url: str | None = Field(default=None, description="Post URL")
    source: str | None = Field(default=None, description="raw or rendered content")
    renderer: str = Field(..., description="layout or cleanup")
    summary: str = Field(..., description="Conversion summary with token estimate")
    digest_url: str = Field(..., description="URL to download the full digest content")
    tree: str = Field(..., description="Layout outline")
    html: str = Field(..., description="Converted HTML")
    plain_text: str = Field(..., description="Plain text content")
    media_urls: list[str] = Field(default_factory=list, description="Referenced media URLs")


class IngestErrorResponse(BaseModel):
    """Error response model for the API.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.
    error_type : str | None
        Error category: ``invalid_input``, ``not_found`` or ``upstream``.

    """

    error: str = Field(..., description="Error message")
    error_type: str | None = Field(default=None, description="Error category")


# Union type for API responses
IngestResponse = Union[IngestSuccessResponse, IngestErrorResponse]
