"""urlshort CLI — serve and validate redirect documents.

Entry point registered as ``urlshort`` in ``pyproject.toml``::

    [project.scripts]
    urlshort = "urlshort.cli:main"
"""

import argparse
import sys

from urlshort.documents import PARSERS


def _add_document_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", help="Redirect document (e.g. paths.yaml)")
    parser.add_argument(
        "--format",
        choices=sorted(PARSERS),
        default=None,
        help="Document format (default: from the file suffix)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``urlshort`` command."""
    parser = argparse.ArgumentParser(
        prog="urlshort",
        description="urlshort — permanent redirects from a list of paths.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- urlshort run -----------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Serve the redirects in a document")
    _add_document_args(run_parser)
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument(
        "--fallback-text",
        default=None,
        help="Body served (200) for unmatched paths instead of the 404 page",
    )
    run_parser.add_argument(
        "--debug",
        action="store_true",
        help="Show exception details in 500 responses",
    )
    run_parser.add_argument(
        "--log-level",
        default=None,
        choices=["critical", "error", "warning", "info", "debug"],
        help="Log level (default: info)",
    )

    # -- urlshort check ---------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate a redirect document")
    _add_document_args(check_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from urlshort.cli._run import run

        run(args)
    elif args.command == "check":
        from urlshort.cli._check import run_check

        run_check(args)
