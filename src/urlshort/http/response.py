"""HTTP response values with a chainable .with_*() API.

Each transformation returns a new value. Immutable by convention,
built incrementally by design.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeAlias
from dataclasses import dataclass, replace
from urllib.parse import quote

MOVED_PERMANENTLY = 301

# Reserved and already-escaped characters pass through; everything else is percent-encoded
_LOCATION_SAFE = ":/?#[]@!$&'()*+,;=%~"


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    Construct with a body, then chain ``.with_*()`` calls to set
    status and headers. Each call returns a new ``Response``.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/html; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Return a new Response with additional headers."""
        return replace(self, headers=(*self.headers, *headers.items()))

    def with_content_type(self, content_type: str) -> Response:
        """Return a new Response with a different content type."""
        return replace(self, content_type=content_type)

    def header(self, name: str) -> str | None:
        """First value of header *name* (case-insensitive), or None."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body


@dataclass(frozen=True, slots=True)
class Redirect:
    """A redirect response. Sent with a ``Location`` header and no body."""

    url: str
    status: int = MOVED_PERMANENTLY
    headers: tuple[tuple[str, str], ...] = ()

    def with_header(self, name: str, value: str) -> Redirect:
        """Return a new Redirect with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    @property
    def location(self) -> str:
        """The target URL as sent in the ``Location`` header."""
        return quote(self.url, safe=_LOCATION_SAFE)

    def to_response(self) -> Response:
        """Render as a plain ``Response``: status, Location, empty body.

        Non-ASCII characters in the target are percent-encoded (UTF-8) so
        the header can always be sent.
        """
        return Response(
            body=b"",
            status=self.status,
            headers=(("Location", self.location), *self.headers),
        )


# Anything a handler may return
AnyResponse: TypeAlias = Response | Redirect
