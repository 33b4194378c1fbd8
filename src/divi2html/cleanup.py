"""Strip page-builder shortcodes and tidy the HTML left behind."""

from __future__ import annotations

import re

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


_DIVI_TOKEN_RE = re.compile(r"\[/?et_pb_[^\]]*\]")
# Leftovers from other builders that were used on the same sites.
_OTHER_BUILDER_TOKEN_RE = re.compile(r"\[/?(?:vc_|fusion_|divi_|elementor-)[^\]]*\]")
_HEADINGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
# Post body wrappers, tried in order.
_CONTENT_SELECTORS = ("div.entry-content", "div.et_pb_post_content", "article")
_BLANK_LINES_RE = re.compile(r"\n{3,}")


def has_divi_shortcodes(text: str) -> bool:
    return "[et_pb_" in text


def strip_shortcodes(text: str) -> str:
    """Remove opening and closing builder shortcode tokens, keeping inner text."""
    text = _DIVI_TOKEN_RE.sub("", text)
    return _OTHER_BUILDER_TOKEN_RE.sub("", text)


def tidy_html(html: str) -> str:
    """Drop empty headings and paragraphs and squeeze blank lines."""
    soup = BeautifulSoup(html, "html.parser")
    root = _content_root(soup)

    for heading in root.find_all(_HEADINGS):
        if not heading.get_text(strip=True) and not heading.find("img"):
            heading.decompose()
    for paragraph in root.find_all("p"):
        if not paragraph.get_text(strip=True) and not paragraph.find(True):
            paragraph.decompose()

    tidied = root.decode_contents() if root is not soup else str(soup)
    return _BLANK_LINES_RE.sub("\n\n", tidied).strip()


def _content_root(soup: BeautifulSoup) -> BeautifulSoup | Tag:
    """Narrow a full page to the post body; fragments are returned as is."""
    for selector in _CONTENT_SELECTORS:
        node = soup.select_one(selector)
        if node is not None:
            return node
    return soup.body or soup


def clean_post_html(html: str) -> str:
    """Strip shortcodes from rendered post HTML and tidy the result."""
    return tidy_html(strip_shortcodes(html))
