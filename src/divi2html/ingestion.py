"""Conversion pipeline for Divi markup -> HTML, text and layout outline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal

from divi2html.cleanup import clean_post_html
from divi2html.fetch import fetch_wordpress_post
from divi2html.filters import filter_modules
from divi2html.output_formatter import format_layout
from divi2html.parser import DiviParser
from divi2html.schemas import ConversionResult, WordPressQuery

logger = logging.getLogger(__name__)

ConversionMetadata = dict[str, str | int | bool | None]


@dataclass
class ConversionOptions:
    """Options for converting Divi content.

    Attributes:
        module_filter_mode: Mode for module filtering ("include" or "exclude").
        modules: Module types to include or exclude (``text`` or
            ``et_pb_text``).
        fallback_to_cleanup: If True and no Divi sections are found, emit the
            input with stray shortcodes stripped and empty tags removed
            instead of an empty layout.
        use_cache: Whether fetched posts may be served from the local cache.
    """

    module_filter_mode: Literal["include", "exclude"] = "exclude"
    modules: list[str] = field(default_factory=list)
    fallback_to_cleanup: bool = True
    use_cache: bool = True


_parser = DiviParser()


def convert_markup(
    content: str,
    *,
    title: str | None = None,
    post_id: int | None = None,
    source_url: str | None = None,
    options: ConversionOptions | None = None,
) -> tuple[ConversionResult, ConversionMetadata]:
    """Parse Divi markup and format it.

    Returns:
        Tuple of (result, metadata) where metadata records which renderer
        produced the HTML (``layout`` or ``cleanup``).
    """
    opts = options or ConversionOptions()
    parsed = _parser.parse(content)
    parsed = filter_modules(parsed, mode=opts.module_filter_mode, selected=opts.modules)

    result = format_layout(
        parse_result=parsed,
        title=title,
        post_id=post_id,
        source_url=source_url,
    )

    renderer = "layout"
    if not parsed.sections and opts.fallback_to_cleanup:
        renderer = "cleanup"
        result = result.model_copy(update={"html": clean_post_html(content)})

    if parsed.metadata.has_errors:
        logger.warning(
            "Divi content parsed with errors",
            extra={"post_id": post_id, "errors": len(parsed.metadata.errors)},
        )

    metadata: ConversionMetadata = {
        "title": title,
        "post_id": post_id,
        "renderer": renderer,
        "has_errors": parsed.metadata.has_errors,
    }
    return result, metadata


async def convert_post(
    query: WordPressQuery,
    options: ConversionOptions | None = None,
) -> tuple[ConversionResult, ConversionMetadata]:
    """Fetch a WordPress post and convert its Divi content.

    Raises:
        PostNotFoundError: If the post does not exist.
        FetchError: If fetching fails.
        ParseError: If the REST payload is malformed.
    """
    opts = options or ConversionOptions()
    post = await fetch_wordpress_post(query, use_cache=opts.use_cache)

    result, metadata = convert_markup(
        post.content,
        title=post.title or None,
        post_id=post.id,
        source_url=post.link or query.api_url,
        options=opts,
    )
    metadata["source"] = "raw" if post.raw else "rendered"
    metadata["link"] = post.link
    return result, metadata
