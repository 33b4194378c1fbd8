"""Query model for WordPress ingestion."""

from __future__ import annotations

from pathlib import Path
from typing import Literal
from uuid import UUID

from pydantic import BaseModel


class WordPressQuery(BaseModel):
    """Parsed WordPress query details.

    Attributes:
        input_text: The original input text provided by the user.
        post_id: Numeric WordPress post or page identifier.
        post_type: REST collection the ID belongs to (``posts`` or ``pages``).
        base_url: Site root, without trailing slash.
        api_url: REST endpoint for the post.
        id: Unique identifier for this query (used for caching).
        cache_dir: Directory path for caching this query's results.
    """

    input_text: str
    post_id: int
    post_type: Literal["posts", "pages"] = "posts"
    base_url: str
    api_url: str
    id: UUID
    cache_dir: Path


class WordPressPost(BaseModel):
    """Post content returned by the WordPress REST API."""

    id: int
    title: str = ""
    content: str = ""
    link: str | None = None
    modified: str | None = None
    raw: bool = False
