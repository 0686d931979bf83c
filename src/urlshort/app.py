"""The urlshort ASGI application and handler-chain assembly.

``App`` is the only component that touches raw ASGI scopes. It turns
each HTTP scope into a ``Request``, awaits the configured handler, and
sends whatever comes back (``Response`` or ``Redirect``).

Basic usage::

    from urlshort import App, AppConfig

    app = App.from_config(AppConfig(redirects_file="paths.yaml"))
    # uvicorn module:app
"""

from __future__ import annotations

import logging

from urlshort._internal.asgi import Receive, Scope, Send
from urlshort.config import AppConfig
from urlshort.documents import load_document
from urlshort.handlers.document import DocumentHandler
from urlshort.handlers.fallback import not_found, text_handler
from urlshort.handlers.mapping import map_handler
from urlshort.handlers.protocol import Handler
from urlshort.http.request import Request
from urlshort.http.response import AnyResponse, Redirect, Response
from urlshort.server.sender import send_response

logger = logging.getLogger("urlshort.server")


def build_handler(config: AppConfig) -> Handler:
    """Assemble the handler chain described by *config*.

    Order: in-memory ``redirects`` first, then the records in
    ``redirects_file`` (if any), then the fallback (``fallback_text``
    or the built-in 404 page).

    Raises:
        ConfigurationError: If the redirects file is unreadable or its
            format is unknown.
        DecodeError: If the redirects file is not a valid document.
    """
    handler: Handler = not_found
    if config.fallback_text is not None:
        handler = text_handler(config.fallback_text)

    if config.redirects_file is not None:
        records = load_document(config.redirects_file, format=config.document_format)
        logger.info("Loaded %d redirect(s) from %s", len(records), config.redirects_file)
        handler = DocumentHandler(records=records, fallback=handler)

    if config.redirects:
        handler = map_handler(config.redirects, handler)

    return handler


class App:
    """ASGI 3.0 application wrapping a single handler."""

    __slots__ = ("config", "handler")

    def __init__(self, handler: Handler, config: AppConfig | None = None) -> None:
        self.handler = handler
        self.config = config or AppConfig()

    @classmethod
    def from_config(cls, config: AppConfig) -> App:
        """Build the handler chain from *config* and wrap it."""
        return cls(build_handler(config), config)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return
        if scope["type"] != "http":
            return

        request = Request.from_asgi(scope, receive)
        response = await self._dispatch(request)
        await send_response(response, send)

    async def _dispatch(self, request: Request) -> AnyResponse:
        try:
            response = await self.handler(request)
        except Exception as exc:
            logger.exception("500 %s %s", request.method, request.path)
            detail = "Internal Server Error"
            if self.config.debug:
                detail = f"{detail}: {type(exc).__name__}: {exc}"
            return Response(body=detail, status=500, content_type="text/plain; charset=utf-8")

        if isinstance(response, Redirect):
            logger.debug(
                "%d %s %s -> %s", response.status, request.method, request.path, response.url
            )
        else:
            logger.debug("%d %s %s", response.status, request.method, request.path)
        return response

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol. There is nothing to set up."""
        while True:
            message = await receive()
            msg_type = message["type"]
            if msg_type == "lifespan.startup":
                logger.debug("Startup complete")
                await send({"type": "lifespan.startup.complete"})
            elif msg_type == "lifespan.shutdown":
                logger.debug("Shutdown complete")
                await send({"type": "lifespan.shutdown.complete"})
                return
