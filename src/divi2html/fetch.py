"""Fetch and cache WordPress posts."""

from __future__ import annotations

import json
import logging

import httpx

from divi2html.cache_utils import read_cached_text, write_cached_text
from divi2html.config import (
    DIVI2HTML_CACHE_TTL_SECONDS,
    WORDPRESS_APP_PASSWORD,
    WORDPRESS_USER,
)
from divi2html.exceptions import ParseError, PostNotFoundError
from divi2html.http_utils import fetch_with_retries
from divi2html.schemas import WordPressPost, WordPressQuery

logger = logging.getLogger(__name__)

_404_MESSAGE = (
    "This post does not exist on the WordPress site, or it is not published. "
    "Configure WORDPRESS_USER and WORDPRESS_APP_PASSWORD to read drafts."
)


async def fetch_wordpress_post(
    query: WordPressQuery,
    *,
    use_cache: bool = True,
    client: httpx.AsyncClient | None = None,
) -> WordPressPost:
    """Fetch a post from the WordPress REST API and cache it locally.

    With credentials configured the post is requested with ``context=edit``
    so the raw, unrendered shortcode markup is returned; otherwise the
    public rendered content is used.

    Args:
        query: Resolved WordPress query.
        use_cache: Whether to use a cached payload if available.
        client: Optional httpx.AsyncClient for connection pooling.

    Returns:
        The post title and content.

    Raises:
        PostNotFoundError: If the post does not exist.
        AuthenticationError: If the credentials are rejected.
        FetchError: If a network error occurs.
        ParseError: If the response is not a WordPress post payload.
    """
    params: dict[str, str] | None = None
    auth: httpx.BasicAuth | None = None
    if WORDPRESS_USER and WORDPRESS_APP_PASSWORD:
        params = {"context": "edit"}
        auth = httpx.BasicAuth(WORDPRESS_USER, WORDPRESS_APP_PASSWORD)

    # Raw and rendered payloads of the same post are cached side by side.
    payload_path = query.cache_dir / cache_filename(edit=auth is not None)

    if use_cache:
        cached = await read_cached_text(payload_path, DIVI2HTML_CACHE_TTL_SECONDS)
        if cached is not None:
            logger.debug("Using cached payload for %s", query.api_url)
            return parse_post_payload(cached)

    if auth is None:
        logger.info("WordPress credentials not configured, reading rendered content")

    text = await fetch_with_retries(
        query.api_url,
        client=client,
        params=params,
        auth=auth,
        on_404=PostNotFoundError,
        on_404_message=_404_MESSAGE,
    )
    post = parse_post_payload(text)

    await write_cached_text(payload_path, text)
    return post


def cache_filename(*, edit: bool) -> str:
    return "post.edit.json" if edit else "post.view.json"


def parse_post_payload(text: str) -> WordPressPost:
    """Build a :class:`WordPressPost` from a REST API JSON payload.

    Prefers ``raw`` fields (present with ``context=edit``) over ``rendered``.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"WordPress returned invalid JSON: {exc}") from exc

    if not isinstance(payload, dict) or "id" not in payload:
        raise ParseError("WordPress response is not a post object")

    content_field = payload.get("content") or {}
    title_field = payload.get("title") or {}
    raw = isinstance(content_field, dict) and "raw" in content_field

    return WordPressPost(
        id=payload["id"],
        title=_field_text(title_field),
        content=_field_text(content_field),
        link=payload.get("link"),
        modified=payload.get("modified"),
        raw=raw,
    )


def _field_text(field: dict | str) -> str:
    if isinstance(field, str):
        return field
    if "raw" in field:
        return field["raw"] or ""
    return field.get("rendered") or ""
