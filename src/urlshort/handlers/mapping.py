"""Direct mapping resolver — redirects paths found in a fixed dict."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from urlshort.handlers.protocol import Handler, lookup_key
from urlshort.http.request import Request
from urlshort.http.response import MOVED_PERMANENTLY, AnyResponse, Redirect


@dataclass(frozen=True, slots=True)
class MapHandler:
    """Redirect any path that is a key in ``paths`` to its value.

    Paths that are not in the mapping are passed, untouched, to
    ``fallback``.
    """

    paths: Mapping[str, str]
    fallback: Handler

    async def __call__(self, request: Request) -> AnyResponse:
        url = self.paths.get(lookup_key(request))
        if url is not None:
            return Redirect(url, status=MOVED_PERMANENTLY)
        return await self.fallback(request)


def map_handler(paths: Mapping[str, str], fallback: Handler) -> MapHandler:
    """Build a ``MapHandler`` over a read-only copy of *paths*.

    Construction never fails. An empty mapping is valid and simply
    delegates every request to *fallback*.
    """
    return MapHandler(paths=MappingProxyType(dict(paths)), fallback=fallback)
