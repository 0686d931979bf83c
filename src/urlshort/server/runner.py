"""Serve an urlshort App with uvicorn."""

import logging

import uvicorn

logger = logging.getLogger("urlshort.server")


def run_server(app: object, host: str, port: int, *, log_level: str = "info") -> None:
    """Start a uvicorn server with the given ASGI app.

    Blocks until the server exits.

    Args:
        app: ASGI callable (an urlshort ``App``).
        host: Bind host address.
        port: Bind port number.
        log_level: uvicorn log level name (``"debug"``, ``"info"``, ...).
    """
    logger.info("Serving redirects on http://%s:%d", host, port)
    uvicorn.run(app, host=host, port=port, log_level=log_level.lower())
