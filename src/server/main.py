"""FastAPI application for divi2html."""

from __future__ import annotations

from fastapi import FastAPI

from divi2html.utils.logging_config import get_logger
from server.routers import ingest, parse

logger = get_logger(__name__)

app = FastAPI(
    title="divi2html",
    description="Convert Divi builder shortcodes from WordPress into clean HTML and text.",
    version="0.1.0",
)
app.include_router(parse.router)
app.include_router(ingest.router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}
