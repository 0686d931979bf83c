"""Ready-made fallback handlers for requests no redirect matches."""

import html

from urlshort.handlers.protocol import Handler
from urlshort.http.request import Request
from urlshort.http.response import Response


async def not_found(request: Request) -> Response:
    """404 page naming the requested path (escaped for HTML)."""
    body = f"<h1>Not Found</h1><p>No redirect is configured for {html.escape(request.path)}</p>"
    return Response(body=body, status=404)


def text_handler(
    body: str,
    status: int = 200,
    content_type: str = "text/plain; charset=utf-8",
) -> Handler:
    """Build a handler that answers every request with the same response."""
    response = Response(body=body, status=status, content_type=content_type)

    async def handler(request: Request) -> Response:  # noqa: ARG001
        return response

    return handler
