"""urlshort — permanent redirects for configured request paths.

Resolves an incoming path against a fixed mapping or a YAML document
of ``{path, url}`` records. A match answers ``301 Moved Permanently``;
anything else is handed to a fallback handler.

Basic usage::

    from urlshort import App, map_handler, yaml_handler, not_found

    yaml_doc = b'''
    - path: /urlshort
      url: https://github.com/gophercises/urlshort
    '''
    by_yaml = yaml_handler(yaml_doc, not_found)
    app = App(map_handler({"/yaml": "https://yaml.org"}, by_yaml))
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "DecodeError",
    "DocumentHandler",
    "MapHandler",
    "PathRecord",
    "Redirect",
    "Request",
    "Response",
    "UrlshortError",
    "document_handler",
    "map_handler",
    "not_found",
    "text_handler",
    "yaml_handler",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import urlshort`` cheap; PyYAML is only loaded on first use.
    """
    if name in ("App", "build_handler"):
        from urlshort import app

        return getattr(app, name)

    if name == "AppConfig":
        from urlshort.config import AppConfig

        return AppConfig

    if name in ("UrlshortError", "DecodeError", "ConfigurationError"):
        from urlshort import errors

        return getattr(errors, name)

    if name == "PathRecord":
        from urlshort.documents import PathRecord

        return PathRecord

    if name in ("Request",):
        from urlshort.http.request import Request

        return Request

    if name in ("Response", "Redirect"):
        from urlshort.http import response

        return getattr(response, name)

    if name in (
        "DocumentHandler",
        "MapHandler",
        "document_handler",
        "map_handler",
        "not_found",
        "text_handler",
        "yaml_handler",
    ):
        from urlshort import handlers

        return getattr(handlers, name)

    msg = f"module 'urlshort' has no attribute {name!r}"
    raise AttributeError(msg)
