"""Tests for urlshort.app — ASGI App and handler-chain assembly."""

import logging

import httpx
import pytest

from urlshort.app import App, build_handler
from urlshort.config import AppConfig
from urlshort.errors import ConfigurationError, DecodeError
from urlshort.handlers import map_handler, not_found, text_handler, yaml_handler
from urlshort.testing import TestClient

YAML_DOC = b"""
- path: /urlshort
  url: https://github.com/gophercises/urlshort
- path: /yaml
  url: https://example.com/shadowed-by-map
"""


@pytest.fixture
def demo_app() -> App:
    """Mapping handler layered over a YAML handler over a hello fallback."""
    by_yaml = yaml_handler(YAML_DOC, text_handler("Hello, world!"))
    return App(
        map_handler(
            {
                "/urlshort-godoc": "https://godoc.org/github.com/gophercises/urlshort",
                "/yaml": "https://yaml.org",
            },
            by_yaml,
        )
    )


class TestAppRequests:
    async def test_map_redirect(self, demo_app) -> None:
        async with TestClient(demo_app) as client:
            response = await client.get("/yaml")
        assert response.status == 301
        assert response.header("location") == "https://yaml.org"
        assert response.body == b""

    async def test_falls_through_to_yaml(self, demo_app) -> None:
        async with TestClient(demo_app) as client:
            response = await client.get("/urlshort")
        assert response.status == 301
        assert response.header("location") == "https://github.com/gophercises/urlshort"

    async def test_falls_through_to_fallback(self, demo_app) -> None:
        async with TestClient(demo_app) as client:
            response = await client.get("/elsewhere")
        assert response.status == 200
        assert response.text == "Hello, world!"

    async def test_any_method_is_redirected(self, demo_app) -> None:
        async with TestClient(demo_app) as client:
            response = await client.post("/yaml", body=b"ignored")
        assert response.status == 301

    async def test_redirect_is_logged(self, demo_app, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="urlshort.server")
        async with TestClient(demo_app) as client:
            await client.get("/yaml")
        assert "301 GET /yaml -> https://yaml.org" in caplog.text


class TestAppErrors:
    async def test_failing_fallback_becomes_500(self, caplog) -> None:
        async def broken(request):
            raise RuntimeError("boom")

        app = App(map_handler({"/ok": "https://ok.example"}, broken))
        async with TestClient(app) as client:
            ok = await client.get("/ok")
            failed = await client.get("/other")

        assert ok.status == 301
        assert failed.status == 500
        assert failed.text == "Internal Server Error"
        assert "500 GET /other" in caplog.text


class TestAppScopes:
    async def test_lifespan(self) -> None:
        app = App(not_found)
        incoming = iter([{"type": "lifespan.startup"}, {"type": "lifespan.shutdown"}])
        sent: list[dict] = []

        async def receive():
            return next(incoming)

        async def send(message):
            sent.append(message)

        await app({"type": "lifespan"}, receive, send)
        assert [m["type"] for m in sent] == [
            "lifespan.startup.complete",
            "lifespan.shutdown.complete",
        ]

    async def test_websocket_scope_ignored(self) -> None:
        sent: list[dict] = []

        async def send(message):
            sent.append(message)

        await App(not_found)({"type": "websocket", "path": "/"}, None, send)
        assert sent == []


class TestHttpxTransport:
    async def test_end_to_end(self, demo_app) -> None:
        transport = httpx.ASGITransport(app=demo_app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            hit = await client.get("/urlshort-godoc")
            miss = await client.get("/nothing-here")

        assert hit.status_code == 301
        assert hit.headers["location"] == "https://godoc.org/github.com/gophercises/urlshort"
        assert hit.content == b""
        assert miss.status_code == 200
        assert miss.text == "Hello, world!"


class TestBuildHandler:
    async def test_default_is_not_found(self) -> None:
        app = App.from_config(AppConfig())
        async with TestClient(app) as client:
            response = await client.get("/x")
        assert response.status == 404

    async def test_full_chain(self, tmp_path) -> None:
        doc = tmp_path / "paths.yaml"
        doc.write_bytes(YAML_DOC)
        config = AppConfig(
            redirects={"/yaml": "https://yaml.org"},
            redirects_file=doc,
            fallback_text="default",
        )
        app = App.from_config(config)
        assert app.config is config

        async with TestClient(app) as client:
            from_map = await client.get("/yaml")
            from_file = await client.get("/urlshort")
            fallback = await client.get("/bar")

        assert from_map.header("location") == "https://yaml.org"
        assert from_file.header("location") == "https://github.com/gophercises/urlshort"
        assert (fallback.status, fallback.text) == (200, "default")

    def test_bad_file_raises_decode_error(self, tmp_path) -> None:
        doc = tmp_path / "paths.yaml"
        doc.write_text("just a scalar")
        with pytest.raises(DecodeError):
            build_handler(AppConfig(redirects_file=doc))

    def test_unknown_format_raises(self, tmp_path) -> None:
        doc = tmp_path / "paths.ini"
        doc.write_text("")
        with pytest.raises(ConfigurationError):
            build_handler(AppConfig(redirects_file=doc))


class TestNonAsciiTargets:
    async def test_non_latin1_target_still_redirects(self) -> None:
        app = App(yaml_handler("- path: /jp\n  url: https://例え.jp/ページ\n", not_found))
        async with TestClient(app) as client:
            response = await client.get("/jp")
        assert response.status == 301
        assert response.header("location") == (
            "https://%E4%BE%8B%E3%81%88.jp/%E3%83%9A%E3%83%BC%E3%82%B8"
        )

    async def test_non_ascii_target_over_httpx(self) -> None:
        app = App(map_handler({"/café": "https://example.com/café"}, not_found))
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            response = await client.get("/café")
        assert response.status_code == 301
        assert response.headers["location"] == "https://example.com/caf%C3%A9"


class TestDebugErrors:
    @staticmethod
    async def _broken(request):
        raise ValueError("bad fallback")

    async def test_debug_names_exception(self) -> None:
        app = App(self._broken, AppConfig(debug=True))
        async with TestClient(app) as client:
            response = await client.get("/x")
        assert response.status == 500
        assert response.text == "Internal Server Error: ValueError: bad fallback"

    async def test_without_debug_hides_exception(self) -> None:
        app = App(self._broken)
        async with TestClient(app) as client:
            response = await client.get("/x")
        assert response.text == "Internal Server Error"
