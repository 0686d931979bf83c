"""Tests for urlshort.errors — exception hierarchy."""

import pytest

import urlshort
from urlshort.errors import ConfigurationError, DecodeError, UrlshortError


class TestHierarchy:
    def test_decode_error_is_urlshort_error(self) -> None:
        assert issubclass(DecodeError, UrlshortError)

    def test_configuration_error_is_urlshort_error(self) -> None:
        assert issubclass(ConfigurationError, UrlshortError)

    def test_catchable_as_base(self) -> None:
        with pytest.raises(UrlshortError, match="bad doc"):
            raise DecodeError("bad doc")


class TestPublicApi:
    def test_lazy_exports(self) -> None:
        assert urlshort.DecodeError is DecodeError
        assert urlshort.App.__name__ == "App"
        assert callable(urlshort.yaml_handler)

    def test_unknown_attribute(self) -> None:
        with pytest.raises(AttributeError):
            urlshort.NoSuchThing  # noqa: B018
