"""Resolve user input (IDs, REST URLs, permalinks) into a WordPress query."""

from __future__ import annotations

import re
import uuid
from urllib.parse import parse_qs, urlparse

from divi2html.cache_utils import cache_dir_for
from divi2html.config import DIVI2HTML_CACHE_PATH, WORDPRESS_URL
from divi2html.exceptions import InvalidQueryError
from divi2html.schemas import WordPressQuery

_ID_RE = re.compile(r"^\d+$")
_TYPED_ID_RE = re.compile(r"^(post|posts|page|pages):(\d+)$", re.IGNORECASE)
_REST_PATH_RE = re.compile(r"^(?P<prefix>.*?)/wp-json/wp/v2/(?P<type>posts|pages)/(?P<id>\d+)/?$")
_REST_ROUTE_RE = re.compile(r"^/wp/v2/(?P<type>posts|pages)/(?P<id>\d+)/?$")


def parse_wordpress_input(input_text: str, *, base_url: str | None = None) -> WordPressQuery:
    """Parse a post ID or WordPress URL into a :class:`WordPressQuery`.

    Args:
        input_text: ``245590``, ``page:12``, a ``/wp-json/wp/v2/...`` URL, or a
            permalink using ``?p=``/``?page_id=``.
        base_url: Site root used for bare IDs. Defaults to ``WORDPRESS_URL``.

    Raises:
        InvalidQueryError: If the input cannot be resolved to a post.
    """
    text = input_text.strip()
    if not text:
        raise InvalidQueryError("Input cannot be empty")

    site = (base_url or WORDPRESS_URL).rstrip("/")

    if _ID_RE.match(text):
        return _build_query(text, site, "posts", int(text))

    typed = _TYPED_ID_RE.match(text)
    if typed:
        kind, post_id = typed.groups()
        post_type = "pages" if kind.lower().startswith("page") else "posts"
        return _build_query(text, site, post_type, int(post_id))

    if "://" in text:
        return _parse_url(text)

    raise InvalidQueryError(f"Unrecognized WordPress input: {input_text!r}")


def _parse_url(text: str) -> WordPressQuery:
    parsed = urlparse(text)
    if parsed.scheme not in {"http", "https"}:
        raise InvalidQueryError(f"Unsupported URL scheme: {parsed.scheme!r}")
    if parsed.username or parsed.password:
        raise InvalidQueryError("URLs with credentials are not allowed")
    if not parsed.hostname:
        raise InvalidQueryError(f"URL has no host: {text!r}")

    origin = f"{parsed.scheme}://{parsed.netloc}"

    rest = _REST_PATH_RE.match(parsed.path)
    if rest:
        site = origin + rest.group("prefix").rstrip("/")
        return _build_query(text, site, rest.group("type"), int(rest.group("id")))

    query = parse_qs(parsed.query)
    site = origin + parsed.path.rstrip("/")
    if site.endswith("/index.php"):
        site = site[: -len("/index.php")]

    route = query.get("rest_route", [""])[0]
    route_match = _REST_ROUTE_RE.match(route)
    if route_match:
        return _build_query(text, site, route_match.group("type"), int(route_match.group("id")))

    for key, post_type in (("page_id", "pages"), ("p", "posts")):
        value = query.get(key, [""])[0]
        if _ID_RE.match(value):
            return _build_query(text, site, post_type, int(value))

    raise InvalidQueryError(f"Could not find a post ID in URL: {text!r}")


def _build_query(input_text: str, base_url: str, post_type: str, post_id: int) -> WordPressQuery:
    return WordPressQuery(
        input_text=input_text,
        post_id=post_id,
        post_type=post_type,
        base_url=base_url,
        api_url=f"{base_url}/wp-json/wp/v2/{post_type}/{post_id}",
        id=uuid.uuid4(),
        cache_dir=cache_dir_for(base_url, post_type, post_id, DIVI2HTML_CACHE_PATH),
    )
