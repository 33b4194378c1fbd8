"""Collect media URLs referenced by a parsed Divi layout."""

from __future__ import annotations

from typing import Iterable

from divi2html.schemas import DiviModule, ParseResult

_SRC_MODULES = frozenset({"et_pb_image", "et_pb_video"})


def extract_media_urls(parse_result: ParseResult) -> list[str]:
    """Return media URLs in first-seen order, without duplicates or blanks.

    Covers section background images and the ``src``/``audio``/
    ``background_image`` attributes of top-level modules. Nested children
    are not inspected.
    """
    urls: dict[str, None] = {}
    for section in parse_result.sections:
        if section.metadata.background_image:
            urls[section.metadata.background_image] = None

        for row in section.rows:
            for column in row.columns:
                for url in _iter_module_urls(column.modules):
                    urls[url] = None

    return [url for url in urls if url]


def _iter_module_urls(modules: Iterable[DiviModule]) -> Iterable[str]:
    for module in modules:
        attributes = module.attributes
        if module.type in _SRC_MODULES and attributes.get("src"):
            yield attributes["src"]
        if module.type == "et_pb_audio" and attributes.get("audio"):
            yield attributes["audio"]
        if attributes.get("background_image"):
            yield attributes["background_image"]
