"""Command line entry point: ``divi2html FILE`` or ``divi2html --post ID``."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from divi2html.exceptions import Divi2htmlError
from divi2html.ingestion import ConversionOptions, convert_markup, convert_post
from divi2html.query_parser import parse_wordpress_input
from divi2html.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

_FORMATS = ("html", "text", "json", "media", "tree", "summary")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="divi2html",
        description="Convert Divi builder shortcode markup into HTML, plain text or JSON.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("file", nargs="?", help="File containing Divi markup ('-' for stdin)")
    source.add_argument("--post", help="WordPress post ID, 'page:<id>', or post URL to fetch")
    parser.add_argument("--site", help="WordPress site root for bare post IDs")
    parser.add_argument("--format", choices=_FORMATS, default="html", help="Output format (default: html)")
    filters = parser.add_mutually_exclusive_group()
    filters.add_argument("--include", action="append", default=[], metavar="TYPE", help="Only keep these module types")
    filters.add_argument("--exclude", action="append", default=[], metavar="TYPE", help="Drop these module types")
    parser.add_argument("--no-cache", action="store_true", help="Always fetch posts from WordPress")
    parser.add_argument("--no-fallback", action="store_true", help="Do not clean non-Divi content into HTML")
    parser.add_argument("--log-level", default=None, help="Logging level (default: DIVI2HTML_LOG_LEVEL)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level)

    options = ConversionOptions(
        module_filter_mode="include" if args.include else "exclude",
        modules=args.include or args.exclude,
        fallback_to_cleanup=not args.no_fallback,
        use_cache=not args.no_cache,
    )

    try:
        if args.post:
            query = parse_wordpress_input(args.post, base_url=args.site)
            result, metadata = asyncio.run(convert_post(query, options))
        else:
            result, metadata = convert_markup(_read_input(args.file), options=options)
    except (Divi2htmlError, OSError) as exc:
        logger.error("Conversion failed", extra={"error": str(exc)})
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.format == "html":
        output = result.html
    elif args.format == "text":
        output = result.plain_text
    elif args.format == "media":
        output = "\n".join(result.media_urls)
    elif args.format == "tree":
        output = result.layout_tree
    elif args.format == "summary":
        output = result.summary
    else:
        payload = {"metadata": metadata, **result.model_dump(by_alias=True)}
        output = json.dumps(payload, indent=2, ensure_ascii=False)

    print(output)
    return 0


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


if __name__ == "__main__":
    sys.exit(main())
