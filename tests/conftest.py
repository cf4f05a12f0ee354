"""Shared fixtures for finch tests."""

from pathlib import Path

import pytest

from finch.config import ViewConfig
from finch.dispatcher import Dispatcher
from finch.registry import RendererRegistry
from finch.store import ViewDataStore


@pytest.fixture
def views_dir(tmp_path: Path) -> Path:
    """A view directory with a few kida and .tpl templates."""
    views = tmp_path / "views"
    views.mkdir()
    (views / "home.html").write_text("<h1>{{ title }}</h1>")
    (views / "plain.html").write_text("<p>static</p>")
    (views / "my page.html").write_text("<p>spaced</p>")

    admin = views / "admin"
    admin.mkdir()
    (admin / "users.html").write_text("<ul>{{ count }}</ul>")

    (views / "home.tpl").write_text("ignored by the fake renderer")
    return views


@pytest.fixture
def registry() -> RendererRegistry:
    return RendererRegistry()


@pytest.fixture
def store() -> ViewDataStore:
    return ViewDataStore()


@pytest.fixture
def make_dispatcher(registry: RendererRegistry, store: ViewDataStore):
    """Factory for a Dispatcher over the shared registry and store."""

    def _make(**config: object) -> Dispatcher:
        return Dispatcher(ViewConfig(**config), registry, store)

    return _make
