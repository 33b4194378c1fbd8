"""Run the API with ``python -m server``."""

from __future__ import annotations

import os

import uvicorn

from divi2html.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def main() -> None:
    host = os.getenv("DIVI2HTML_HOST", "127.0.0.1")
    port = int(os.getenv("DIVI2HTML_PORT", "8000"))
    reload = os.getenv("DIVI2HTML_RELOAD", "").lower() in {"1", "true", "yes"}

    configure_logging()
    logger.info("Starting divi2html server", extra={"host": host, "port": port, "reload": reload})
    # uvicorn logs through the root handler installed above.
    uvicorn.run("server.main:app", host=host, port=port, reload=reload, log_config=None)


if __name__ == "__main__":
    main()
