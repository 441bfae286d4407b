"""Shared fixtures: a docs tree, a static tree, and a small page template."""

from pathlib import Path

import pytest

from inkwell.app import App
from inkwell.config import ServerConfig
from inkwell.templating.template import Template

TEMPLATE_SOURCE = "<title>{{title}}</title><main>{{content}}</main>"


def fake_markdown(source: str) -> str:
    """Stand-in markdown renderer so tests do not depend on patitas output."""
    return f"<md>{source.strip()}</md>"


@pytest.fixture
def markdown():
    return fake_markdown


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "index.md").write_text("Welcome home", encoding="utf-8")
    (docs / "a.md").write_text("Page A", encoding="utf-8")
    (docs / "b.md").write_text("Page B", encoding="utf-8")
    (docs / "notes.txt").write_text("not markdown", encoding="utf-8")
    return docs


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    static = tmp_path / "static"
    static.mkdir()
    (static / "site.css").write_text("body { color: red; }", encoding="utf-8")
    (static / "logo.svg").write_text("<svg></svg>", encoding="utf-8")
    (static / "robots.txt").write_text("User-agent: *", encoding="utf-8")
    (static / "image.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    return static


@pytest.fixture
def template() -> Template:
    return Template.compile(TEMPLATE_SOURCE)


@pytest.fixture
def app(docs_dir: Path, static_dir: Path, template: Template) -> App:
    config = ServerConfig(docs_dir=docs_dir, static_dir=static_dir)
    return App(config, template=template, renderer=fake_markdown)
