"""``urlshort check`` — decode a redirect document and list its records."""

import argparse
import sys

from urlshort.documents import load_document
from urlshort.errors import UrlshortError


def run_check(args: argparse.Namespace) -> None:
    """Print one ``path -> url`` line per record.

    Records whose path repeats an earlier one can never match; they are
    reported as warnings on stderr. Exits 1 if the document is invalid.
    """
    try:
        records = load_document(args.file, format=args.format)
    except UrlshortError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    seen: set[str] = set()
    for record in records:
        if record.path in seen:
            print(f"Warning: {record.path} is shadowed by an earlier record", file=sys.stderr)
        seen.add(record.path)
        print(f"{record.path} -> {record.url}")

    print(f"{len(records)} record(s) OK")
