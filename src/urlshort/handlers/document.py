"""Document-backed resolver — redirects driven by a parsed record list.

The document is decoded exactly once, when the handler is built.
Requests then scan the records in document order; the first record
whose ``path`` matches wins, so later duplicates are never reached.
"""

from dataclasses import dataclass

from urlshort.documents import DocumentParser, PathRecord, parse_yaml
from urlshort.handlers.protocol import Handler, lookup_key
from urlshort.http.request import Request
from urlshort.http.response import MOVED_PERMANENTLY, AnyResponse, Redirect


@dataclass(frozen=True, slots=True)
class DocumentHandler:
    """Redirect using the first record whose path matches the request."""

    records: tuple[PathRecord, ...]
    fallback: Handler

    def resolve(self, key: str) -> str | None:
        """Target URL for an escaped lookup key, or None."""
        for record in self.records:
            if record.path == key:
                return record.url
        return None

    async def __call__(self, request: Request) -> AnyResponse:
        url = self.resolve(lookup_key(request))
        if url is not None:
            return Redirect(url, status=MOVED_PERMANENTLY)
        return await self.fallback(request)


def document_handler(
    document: bytes | str,
    fallback: Handler,
    *,
    parser: DocumentParser = parse_yaml,
) -> DocumentHandler:
    """Decode *document* with *parser* and build a ``DocumentHandler``.

    Raises:
        DecodeError: If the document is malformed. Nothing is built.
    """
    return DocumentHandler(records=parser(document), fallback=fallback)


def yaml_handler(document: bytes | str, fallback: Handler) -> DocumentHandler:
    """Build a ``DocumentHandler`` from a YAML redirect document.

    YAML is expected to be in the format::

        - path: /some-path
          url: https://www.some-url.com/demo

    Raises:
        DecodeError: If the YAML is invalid or not a list of records.
    """
    return document_handler(document, fallback, parser=parse_yaml)
