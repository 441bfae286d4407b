"""End-to-end tests for inkwell.app — requests through the ASGI interface."""

from pathlib import Path

import pytest

from inkwell.app import App
from inkwell.config import ServerConfig
from inkwell.errors import ConfigurationError, RenderError
from inkwell.templating.template import Template
from inkwell.testing import ResponseAborted, TestClient


class _BrokenTemplate(Template):
    """A template whose every render fails."""

    def render(self, context):  # type: ignore[override]
        raise RenderError("boom")


class TestPages:
    async def test_page_listing(self, app: App) -> None:
        async with TestClient(app) as client:
            response = await client.get("/pages/_pages")
            assert response.status == 200
            assert response.text.count("<li>") == 3
            first = response.text.index('href="/pages/a"')
            second = response.text.index('href="/pages/b"')
            assert first < second
            assert "notes" not in response.text

    async def test_page_listing_without_index(
        self, tmp_path: Path, static_dir: Path, template: Template, markdown
    ) -> None:
        docs = tmp_path / "only"
        docs.mkdir()
        (docs / "a.md").write_text("A", encoding="utf-8")
        (docs / "b.md").write_text("B", encoding="utf-8")
        (docs / "readme.txt").write_text("ignored", encoding="utf-8")
        app = App(
            ServerConfig(docs_dir=docs, static_dir=static_dir),
            template=template,
            renderer=markdown,
        )
        async with TestClient(app) as client:
            response = await client.get("/pages/_pages")
        assert response.text == (
            "<title>All pages</title><main><ul>\n"
            '<li><a href="/pages/a">a</a></li>\n'
            '<li><a href="/pages/b">b</a></li>\n'
            "</ul></main>"
        )

    async def test_missing_page(self, app: App) -> None:
        async with TestClient(app) as client:
            response = await client.get("/pages/missing")
            assert response.status == 404
            assert response.content_type == "text/html; charset=utf-8"
            assert "<title>Not Found</title>" in response.text

    async def test_index(self, app: App) -> None:
        async with TestClient(app) as client:
            response = await client.get("/")
            assert response.status == 200
            assert "<md>Welcome home</md>" in response.text

    async def test_query_string_is_ignored(self, app: App) -> None:
        async with TestClient(app) as client:
            response = await client.get("/pages/a?ref=home")
            assert response.status == 200
            assert "<md>Page A</md>" in response.text

    async def test_non_ascii_title_from_the_wire(self, app: App) -> None:
        async with TestClient(app) as client:
            response = await client.get("/pages/café")
            assert response.status == 400

    async def test_post_is_bad_request(self, app: App) -> None:
        async with TestClient(app) as client:
            response = await client.request("POST", "/pages/a")
            assert response.status == 400
            assert "<title>Bad Request</title>" in response.text

    async def test_malformed_escape_is_bad_request(self, app: App) -> None:
        async with TestClient(app) as client:
            response = await client.get("/pages/%FF")
            assert response.status == 400


class TestStatic:
    async def test_css(self, app: App) -> None:
        async with TestClient(app) as client:
            response = await client.get("/static/site.css")
            assert response.status == 200
            assert response.content_type.split(";")[0] == "text/css"
            assert response.body == b"body { color: red; }"

    async def test_missing(self, app: App) -> None:
        async with TestClient(app) as client:
            response = await client.get("/static/nope.css")
            assert response.status == 404


class TestHeaders:
    @pytest.mark.parametrize(
        "path", ["/", "/pages/a", "/pages/missing", "/pages/%", "/static/site.css"]
    )
    async def test_content_length_matches_body(self, app: App, path: str) -> None:
        async with TestClient(app) as client:
            response = await client.get(path)
            assert response.header("content-length") == str(len(response.body_bytes))
            assert response.content_type

    async def test_multibyte_content_length(
        self, docs_dir: Path, app: App
    ) -> None:
        (docs_dir / "korean.md").write_text("가나다", encoding="utf-8")
        async with TestClient(app) as client:
            response = await client.get("/pages/korean")
            assert response.header("content-length") == str(len(response.body_bytes))
            assert len(response.body_bytes) > len(response.text)


class TestRenderFailure:
    async def test_response_is_dropped(
        self, docs_dir: Path, static_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        app = App(
            ServerConfig(docs_dir=docs_dir, static_dir=static_dir),
            template=_BrokenTemplate(tokens=()),
            renderer=str,
        )
        async with TestClient(app) as client:
            with pytest.raises(ResponseAborted):
                await client.get("/pages/a")
        assert "response dropped" in caplog.text

    async def test_error_pages_are_dropped_too(self, docs_dir: Path, static_dir: Path) -> None:
        app = App(
            ServerConfig(docs_dir=docs_dir, static_dir=static_dir),
            template=_BrokenTemplate(tokens=()),
            renderer=str,
        )
        async with TestClient(app) as client:
            with pytest.raises(ResponseAborted):
                await client.get("/pages/missing")

    async def test_static_still_served(self, docs_dir: Path, static_dir: Path) -> None:
        app = App(
            ServerConfig(docs_dir=docs_dir, static_dir=static_dir),
            template=_BrokenTemplate(tokens=()),
            renderer=str,
        )
        async with TestClient(app) as client:
            response = await client.get("/static/site.css")
            assert response.status == 200


class TestUnexpectedErrors:
    async def test_internal_error_is_plain_500(
        self, docs_dir: Path, static_dir: Path, template: Template
    ) -> None:
        def exploding(text: str) -> str:
            raise RuntimeError("renderer crashed")

        app = App(
            ServerConfig(docs_dir=docs_dir, static_dir=static_dir),
            template=template,
            renderer=exploding,
        )
        async with TestClient(app) as client:
            response = await client.get("/pages/a")
            assert response.status == 500
            assert response.content_type == "text/plain; charset=utf-8"

            # The app keeps serving after a failure
            response = await client.get("/pages/_pages")
            assert response.status == 200


class TestTemplateLoading:
    async def test_template_loaded_from_config(
        self, tmp_path: Path, docs_dir: Path, static_dir: Path, markdown
    ) -> None:
        path = tmp_path / "page.mustache"
        path.write_text("[{{ title }}] {{content}}", encoding="utf-8")
        app = App(
            ServerConfig(docs_dir=docs_dir, static_dir=static_dir, template_path=path),
            renderer=markdown,
        )
        async with TestClient(app) as client:
            response = await client.get("/pages/b")
            assert response.text == "[b] <md>Page B</md>"

    def test_template_compiled_once(self, app: App) -> None:
        assert app.template is app.template

    def test_missing_template_fails_at_freeze(self, tmp_path: Path) -> None:
        app = App(ServerConfig(template_path=tmp_path / "missing.mustache"), renderer=str)
        with pytest.raises(ConfigurationError):
            app._ensure_frozen()


class TestLifespan:
    async def _run_lifespan(self, app: App) -> list[dict]:
        messages = iter([{"type": "lifespan.startup"}, {"type": "lifespan.shutdown"}])
        sent: list[dict] = []

        async def receive() -> dict:
            return next(messages)

        async def send(message: dict) -> None:
            sent.append(message)

        await app({"type": "lifespan"}, receive, send)
        return sent

    async def test_startup_and_shutdown(self, app: App) -> None:
        sent = await self._run_lifespan(app)
        assert [m["type"] for m in sent] == [
            "lifespan.startup.complete",
            "lifespan.shutdown.complete",
        ]

    async def test_startup_failure_reported(self, tmp_path: Path) -> None:
        app = App(ServerConfig(template_path=tmp_path / "missing.mustache"), renderer=str)
        sent = await self._run_lifespan(app)
        assert sent[0]["type"] == "lifespan.startup.failed"
        assert "missing.mustache" in sent[0]["message"]
