"""``urlshort run`` — build the handler chain and serve it."""

import argparse
import logging
import sys
from dataclasses import replace

from urlshort.app import App
from urlshort.config import AppConfig
from urlshort.errors import UrlshortError
from urlshort.server.runner import run_server

logger = logging.getLogger("urlshort.cli")


def run(args: argparse.Namespace, config: AppConfig | None = None) -> None:
    """Start serving the document named by ``args.file``.

    CLI flags override *config* (or the ``AppConfig`` defaults).
    Configuration and decode errors exit with status 1.
    """
    config = config or AppConfig()
    config = replace(
        config,
        host=args.host or config.host,
        port=args.port if args.port is not None else config.port,
        debug=args.debug or config.debug,
        redirects_file=args.file,
        document_format=args.format or config.document_format,
        fallback_text=args.fallback_text if args.fallback_text is not None else config.fallback_text,
        log_level=args.log_level or config.log_level,
    )

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        app = App.from_config(config)
    except UrlshortError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    run_server(app, config.host, config.port, log_level=config.log_level)
