"""Inspect Divi shortcode and HTML usage in a post to aid catalog updates."""

from __future__ import annotations

import argparse
import re
from collections import Counter
from pathlib import Path

import httpx
from bs4 import BeautifulSoup

from divi2html.catalog import MODULE_TYPES

_OPEN_TAG_RE = re.compile(r"\[(et_pb_\w+)([^\]]*)\]")
_ATTRIBUTE_NAME_RE = re.compile(r"""(\w+)=["']""")


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect Divi shortcodes, attributes, and HTML tags.")
    parser.add_argument("--url", help="URL to fetch (e.g. https://example.com/wp-json/wp/v2/posts/1)")
    parser.add_argument("--file", help="Local file path")
    parser.add_argument("--unknown-only", action="store_true", help="Show only shortcodes missing from the catalog")
    args = parser.parse_args()

    if not args.url and not args.file:
        parser.error("Provide --url or --file")

    text = load_text(url=args.url, file_path=args.file)
    shortcodes, attributes = collect_shortcode_stats(text)
    tags = collect_html_stats(text)

    print("Shortcodes:")
    for name, count in shortcodes.most_common():
        if args.unknown_only and name in MODULE_TYPES:
            continue
        print(f"{name}: {count}")

    print("\nAttributes:")
    for name, count in attributes.most_common():
        print(f"{name}: {count}")

    print("\nHTML tags:")
    for name, count in tags.most_common():
        print(f"{name}: {count}")


def load_text(*, url: str | None, file_path: str | None) -> str:
    if url:
        response = httpx.get(url, follow_redirects=True, timeout=15.0)
        response.raise_for_status()
        return response.text

    path = Path(file_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    return path.read_text(encoding="utf-8")


def collect_shortcode_stats(text: str) -> tuple[Counter, Counter]:
    shortcodes = Counter()
    attributes = Counter()

    for match in _OPEN_TAG_RE.finditer(text):
        shortcodes[match.group(1)] += 1
        for name in _ATTRIBUTE_NAME_RE.findall(match.group(2)):
            attributes[name] += 1
    return shortcodes, attributes


def collect_html_stats(text: str) -> Counter:
    soup = BeautifulSoup(text, "html.parser")
    tags = Counter()
    for tag in soup.find_all(True):
        tags[tag.name] += 1
    return tags


if __name__ == "__main__":
    main()
