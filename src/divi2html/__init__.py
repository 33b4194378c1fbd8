"""divi2html: turn Divi builder shortcodes into a layout tree, HTML and text."""

from divi2html.catalog import MODULE_TYPES, ModuleInfo, get_module_info
from divi2html.exceptions import (
    AuthenticationError,
    Divi2htmlError,
    FetchError,
    InvalidQueryError,
    ParseError,
    PostNotFoundError,
    RateLimitError,
)
from divi2html.ingestion import ConversionOptions, convert_markup, convert_post
from divi2html.parser import (
    DiviParser,
    extract_media_from_divi,
    extract_plain_text_from_divi,
    parse_divi_content,
)
from divi2html.query_parser import parse_wordpress_input
from divi2html.schemas import ConversionResult, ParseResult, WordPressQuery

__all__ = [
    "MODULE_TYPES",
    "AuthenticationError",
    "ConversionOptions",
    "ConversionResult",
    "Divi2htmlError",
    "DiviParser",
    "FetchError",
    "InvalidQueryError",
    "ModuleInfo",
    "ParseError",
    "ParseResult",
    "PostNotFoundError",
    "RateLimitError",
    "WordPressQuery",
    "convert_markup",
    "convert_post",
    "extract_media_from_divi",
    "extract_plain_text_from_divi",
    "get_module_info",
    "parse_divi_content",
    "parse_wordpress_input",
]
