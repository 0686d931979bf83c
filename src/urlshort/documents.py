"""Redirect documents: decoding ``{path, url}`` record lists.

A redirect document is a top-level sequence of records, each with a
``path`` and a ``url`` string::

    - path: /some-path
      url: https://www.some-url.com/demo
    - path: /another-path
      url: https://www.another-url.com

Parsers are plain callables (``DocumentParser``) so a handler can be
built from any format that produces the same shape. YAML (PyYAML) is
the default; JSON is also provided.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeAlias

import yaml

from urlshort.errors import ConfigurationError, DecodeError


@dataclass(frozen=True, slots=True)
class PathRecord:
    """One redirect entry: requests for ``path`` go to ``url``."""

    path: str
    url: str


DocumentParser: TypeAlias = Callable[[bytes | str], tuple[PathRecord, ...]]


def records_from_data(data: Any) -> tuple[PathRecord, ...]:
    """Validate decoded document data and build the record tuple.

    ``None`` (an empty document) yields no records. Fields other than
    ``path`` and ``url`` are ignored.

    Raises:
        DecodeError: If *data* is not a sequence of mappings with
            string ``path`` and ``url`` fields.
    """
    if data is None:
        return ()
    if not isinstance(data, list):
        msg = f"expected a sequence of records, got {type(data).__name__}"
        raise DecodeError(msg)

    records: list[PathRecord] = []
    for index, item in enumerate(data):
        if not isinstance(item, Mapping):
            msg = f"record {index}: expected a mapping, got {type(item).__name__}"
            raise DecodeError(msg)
        for key in ("path", "url"):
            value = item.get(key)
            if not isinstance(value, str):
                found = "missing" if value is None else type(value).__name__
                msg = f"record {index}: field {key!r} must be a string ({found})"
                raise DecodeError(msg)
        records.append(PathRecord(path=item["path"], url=item["url"]))
    return tuple(records)


def parse_yaml(document: bytes | str) -> tuple[PathRecord, ...]:
    """Decode a YAML redirect document.

    Raises:
        DecodeError: On YAML syntax errors or a malformed record shape.
    """
    try:
        data = yaml.safe_load(document)
    except yaml.YAMLError as exc:
        msg = f"invalid YAML: {exc}"
        raise DecodeError(msg) from exc
    return records_from_data(data)


def parse_json(document: bytes | str) -> tuple[PathRecord, ...]:
    """Decode a JSON redirect document (``[{"path": ..., "url": ...}]``).

    An empty document yields no records, matching ``parse_yaml``.

    Raises:
        DecodeError: On JSON syntax errors or a malformed record shape.
    """
    if not document.strip():
        return ()
    try:
        data = json.loads(document)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        msg = f"invalid JSON: {exc}"
        raise DecodeError(msg) from exc
    return records_from_data(data)


PARSERS: Mapping[str, DocumentParser] = {
    "yaml": parse_yaml,
    "yml": parse_yaml,
    "json": parse_json,
}


def parser_for(name: str | Path) -> DocumentParser:
    """Pick a parser by format name (``"yaml"``) or file name (``paths.json``).

    Raises:
        ConfigurationError: If the format is not one of ``PARSERS``.
    """
    text = str(name)
    fmt = text.lower() if text.lower() in PARSERS else Path(text).suffix.lower().lstrip(".")
    try:
        return PARSERS[fmt]
    except KeyError:
        known = ", ".join(sorted(PARSERS))
        msg = f"Unknown document format for {text!r} (expected one of: {known})"
        raise ConfigurationError(msg) from None


def load_document(path: str | Path, *, format: str | None = None) -> tuple[PathRecord, ...]:  # noqa: A002
    """Read and decode a redirect document from disk.

    The format is taken from *format* when given, else from the file suffix.

    Raises:
        ConfigurationError: If the format is unknown or the file is unreadable.
        DecodeError: If the contents are not a valid redirect document.
    """
    parser = parser_for(format or path)
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        msg = f"Cannot read redirects file {str(path)!r}: {exc.strerror or exc}"
        raise ConfigurationError(msg) from exc
    return parser(raw)
