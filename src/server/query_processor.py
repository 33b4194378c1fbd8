"""Resolve a WordPress input, convert the post and keep a downloadable digest."""

from __future__ import annotations

from divi2html.config import DIVI2HTML_CACHE_PATH
from divi2html.exceptions import Divi2htmlError, InvalidQueryError, PostNotFoundError
from divi2html.ingestion import ConversionOptions, convert_post
from divi2html.query_parser import parse_wordpress_input
from divi2html.schemas import ConversionResult, WordPressQuery
from divi2html.utils.logging_config import get_logger
from server.models import IngestErrorResponse, IngestResponse, IngestSuccessResponse, ModuleFilterMode
from server.server_config import MAX_DISPLAY_SIZE

logger = get_logger(__name__)

DIGEST_FILENAME = "digest.txt"


def _write_digest(query: WordPressQuery, result: ConversionResult) -> str:
    """Store summary, outline, HTML and text under the query ID; return the download URL."""
    digest_dir = DIVI2HTML_CACHE_PATH / str(query.id)
    digest_dir.mkdir(parents=True, exist_ok=True)
    body = "\n\n".join([result.summary, result.layout_tree, result.html, result.plain_text])
    (digest_dir / DIGEST_FILENAME).write_text(body, encoding="utf-8")
    return f"/api/download/file/{query.id}"


def _crop(text: str) -> str:
    if len(text) <= MAX_DISPLAY_SIZE:
        return text
    return (
        f"(Content cropped to {MAX_DISPLAY_SIZE // 1_000}k characters, "
        "download full digest to see more)\n" + text[:MAX_DISPLAY_SIZE]
    )


def _estimated_tokens(summary: str) -> str | None:
    for line in summary.splitlines():
        if line.startswith("Estimated tokens:"):
            return line.partition(":")[2].strip()
    return None


async def process_query(
    input_text: str,
    *,
    site: str | None = None,
    module_filter_mode: str = ModuleFilterMode.EXCLUDE.value,
    modules: list[str] | None = None,
    use_cache: bool = True,
) -> IngestResponse:
    """Convert the post behind ``input_text``.

    Failures come back as :class:`IngestErrorResponse` with ``error_type``
    ``invalid_input``, ``not_found`` or ``upstream``.
    """
    try:
        query = parse_wordpress_input(input_text, base_url=site)
    except InvalidQueryError as exc:
        logger.warning("Failed to parse WordPress input", extra={"input_text": input_text, "error": str(exc)})
        return IngestErrorResponse(error=str(exc), error_type="invalid_input")

    options = ConversionOptions(
        module_filter_mode="include" if module_filter_mode == ModuleFilterMode.INCLUDE.value else "exclude",
        modules=modules or [],
        use_cache=use_cache,
    )

    try:
        result, metadata = await convert_post(query, options)
        digest_url = _write_digest(query, result)
    except Divi2htmlError as exc:
        error_type = "not_found" if isinstance(exc, PostNotFoundError) else "upstream"
        logger.error(
            "Query processing failed",
            extra={"url": query.api_url, "error_class": type(exc).__name__, "error": str(exc)},
        )
        return IngestErrorResponse(error=str(exc), error_type=error_type)

    renderer = str(metadata.get("renderer"))
    logger.info(
        "Query processing completed",
        extra={"url": query.api_url, "renderer": renderer, "estimated_tokens": _estimated_tokens(result.summary)},
    )

    return IngestSuccessResponse(
        post_id=query.post_id,
        title=metadata.get("title"),
        source_url=metadata.get("link") or query.api_url,
        source=metadata.get("source"),
        renderer=renderer,
        summary=result.summary,
        digest_url=digest_url,
        tree=result.layout_tree,
        html=_crop(result.html),
        plain_text=_crop(result.plain_text),
        media_urls=result.media_urls,
    )
