"""Request handlers: the two redirect resolvers plus stock fallbacks.

Usage::

    from urlshort.handlers import map_handler, yaml_handler, not_found

    by_yaml = yaml_handler(Path("paths.yaml").read_bytes(), not_found)
    handler = map_handler({"/yaml": "https://yaml.org"}, by_yaml)
"""

from urlshort.handlers.document import DocumentHandler, document_handler, yaml_handler
from urlshort.handlers.fallback import not_found, text_handler
from urlshort.handlers.mapping import MapHandler, map_handler
from urlshort.handlers.protocol import Handler, lookup_key

__all__ = [
    "DocumentHandler",
    "Handler",
    "MapHandler",
    "document_handler",
    "lookup_key",
    "map_handler",
    "not_found",
    "text_handler",
    "yaml_handler",
]
