"""Custom exceptions for divi2html."""


class Divi2htmlError(Exception):
    """Base exception for divi2html operations."""


class FetchError(Divi2htmlError):
    """Error during content fetching."""


class PostNotFoundError(FetchError):
    """Requested post or page does not exist on the WordPress site."""


class AuthenticationError(FetchError):
    """WordPress rejected the configured credentials."""


class RateLimitError(FetchError):
    """Rate limited by the WordPress host."""


class ParseError(Divi2htmlError):
    """Error during content parsing."""


class InvalidQueryError(Divi2htmlError, ValueError):
    """Input could not be resolved to a WordPress post."""
