"""WordPress ingest and digest download endpoints."""

from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import FileResponse, JSONResponse

from divi2html.config import DIVI2HTML_CACHE_PATH
from server.models import IngestRequest, ModuleFilterMode
from server.routers_utils import COMMON_INGEST_RESPONSES, _perform_ingestion

router = APIRouter()


@router.post("/api/ingest", responses=COMMON_INGEST_RESPONSES)
async def api_ingest(ingest_request: IngestRequest) -> JSONResponse:
    """Fetch a WordPress post and convert its Divi layout.

    Accepts a post ID, ``page:<id>``, a REST URL or a permalink. The response
    carries the summary, the layout outline, HTML, plain text and media URLs,
    plus a ``digest_url`` for the full, uncropped output.
    """
    return await _perform_ingestion(
        input_text=ingest_request.input_text,
        site=ingest_request.site,
        module_filter_mode=ingest_request.module_filter_mode.value,
        modules=ingest_request.modules,
        use_cache=ingest_request.use_cache,
    )


@router.get("/api/posts/{post_id}", responses=COMMON_INGEST_RESPONSES)
async def api_post(
    post_id: int,
    post_type: str = Query("posts", pattern="^(posts|pages)$"),
    site: str | None = None,
) -> JSONResponse:
    """Convert one post or page by ID with default options."""
    kind = "page" if post_type == "pages" else "post"
    return await _perform_ingestion(
        input_text=f"{kind}:{post_id}",
        site=site,
        module_filter_mode=ModuleFilterMode.EXCLUDE.value,
        modules=[],
        use_cache=True,
    )


@router.get("/api/download/file/{ingest_id}", response_model=None)
async def download_digest(ingest_id: UUID) -> FileResponse:
    """Return the stored ``digest.txt`` for an earlier ingest as plain text."""
    digest_dir = (DIVI2HTML_CACHE_PATH / str(ingest_id)).resolve()
    if not digest_dir.is_relative_to(DIVI2HTML_CACHE_PATH.resolve()):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=f"Invalid ingest ID: {ingest_id}")
    if not digest_dir.is_dir():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Digest {ingest_id} not found")

    digest = next(iter(sorted(digest_dir.glob("*.txt"))), None)
    if digest is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No .txt file found for digest {ingest_id}",
        )
    return FileResponse(path=digest, media_type="text/plain", filename=digest.name)
