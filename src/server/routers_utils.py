"""Utility functions for the ingest endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from server.models import IngestErrorResponse, IngestSuccessResponse
from server.query_processor import process_query

COMMON_INGEST_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_200_OK: {"model": IngestSuccessResponse, "description": "Successful conversion"},
    status.HTTP_400_BAD_REQUEST: {"model": IngestErrorResponse, "description": "Invalid post ID or URL"},
    status.HTTP_404_NOT_FOUND: {"model": IngestErrorResponse, "description": "Post not found"},
    status.HTTP_502_BAD_GATEWAY: {"model": IngestErrorResponse, "description": "WordPress request failed"},
}

_ERROR_STATUS = {
    "invalid_input": status.HTTP_400_BAD_REQUEST,
    "not_found": status.HTTP_404_NOT_FOUND,
    "upstream": status.HTTP_502_BAD_GATEWAY,
}


async def _perform_ingestion(
    *,
    input_text: str,
    site: str | None,
    module_filter_mode: str,
    modules: list[str],
    use_cache: bool,
) -> JSONResponse:
    """Run :func:`process_query` and map its outcome to a JSON response."""
    result = await process_query(
        input_text,
        site=site,
        module_filter_mode=module_filter_mode,
        modules=modules,
        use_cache=use_cache,
    )

    if isinstance(result, IngestErrorResponse):
        status_code = _ERROR_STATUS.get(result.error_type or "", status.HTTP_400_BAD_REQUEST)
        return JSONResponse(status_code=status_code, content=result.model_dump())

    return JSONResponse(content=result.model_dump())
