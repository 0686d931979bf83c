"""urlshort exception hierarchy.

Shared across the document parsers, handlers, app, and CLI so every
module raises and catches the same types.
"""


class UrlshortError(Exception):
    """Base for all urlshort-specific errors."""


class DecodeError(UrlshortError):
    """Raised when a redirect document cannot be decoded.

    Covers syntax errors, a top-level value that is not a sequence, and
    records that are not ``{path, url}`` mappings of strings. Raised at
    handler construction time; no handler is built.
    """


class ConfigurationError(UrlshortError):
    """Raised when app or CLI configuration is invalid.

    Typically an unknown document format or an unreadable redirects file.
    """
