"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(port=3000, redirects_file="paths.yaml")
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False  # Exception details in 500 bodies

    # Redirect sources — in-memory paths are consulted before the file
    redirects: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    redirects_file: str | Path | None = None
    document_format: str | None = None  # None = infer from file suffix

    # Fallback — None serves the built-in 404 page
    fallback_text: str | None = None

    # Logging
    log_level: str = "info"
