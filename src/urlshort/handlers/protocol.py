"""Handler protocol and the shared lookup-key rule.

A handler is any async callable matching::

    async def handler(request: Request) -> AnyResponse: ...

No base class required. Resolvers, fallbacks, and user functions all
share this shape, so any handler can be another handler's fallback.
"""

import html
from collections.abc import Awaitable, Callable
from typing import TypeAlias

from urlshort.http.request import Request
from urlshort.http.response import AnyResponse

Handler: TypeAlias = Callable[[Request], Awaitable[AnyResponse]]


def lookup_key(request: Request) -> str:
    """The HTML-escaped request path used to match configured redirects.

    The escaped value is only ever used for the lookup. Fallbacks always
    receive the original request.
    """
    return html.escape(request.path)
