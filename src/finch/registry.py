"""Renderer registry — named strategies that turn a template file into HTML.

A renderer is a name, a file extension, and an action::

    async def action(file_path: Path, view_data: Any) -> str: ...

Sync actions are accepted too; ``Renderer.render`` awaits either kind.
When no extension is given, the renderer's files end in ``"." + name``.
"""

import inspect
from collections.abc import Awaitable, Callable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from finch.errors import ConfigurationError

type RenderAction = Callable[[Path, Any], Awaitable[str] | str]


@dataclass(frozen=True, slots=True)
class Renderer:
    """A registered renderer. Immutable; re-register to replace it."""

    name: str
    action: RenderAction
    extension: str | None = None

    @property
    def file_extension(self) -> str:
        """The suffix appended to a view id to find its template file."""
        return self.extension or f".{self.name}"

    async def render(self, file_path: Path, view_data: Any) -> Any:
        """Run the action on *file_path*; an awaitable result is awaited."""
        result = self.action(file_path, view_data)
        if inspect.isawaitable(result):
            result = await result
        return result


class RendererRegistry:
    """Renderers keyed by name, seeded with finch's built-in renderers.

    Registration under an existing name replaces the earlier renderer.
    """

    __slots__ = ("_renderers",)

    def __init__(self, *, defaults: bool = True) -> None:
        self._renderers: dict[str, Renderer] = {}
        if defaults:
            self.populate_defaults()

    def register(
        self,
        name: str,
        action: RenderAction,
        *,
        extension: str | None = None,
    ) -> Renderer:
        """Insert or replace the renderer stored under *name*."""
        if not name:
            raise ConfigurationError("Renderer name required")
        renderer = Renderer(name=name, action=action, extension=extension)
        self._renderers[name] = renderer
        return renderer

    def get(self, name: str) -> Renderer | None:
        return self._renderers.get(name)

    def require(self, name: str) -> Renderer:
        """Return the renderer for *name* or raise ``ConfigurationError``."""
        renderer = self._renderers.get(name)
        if renderer is None:
            available = ", ".join(sorted(self._renderers)) or "none"
            msg = f"No renderer registered under {name!r}. Registered: {available}"
            raise ConfigurationError(msg)
        return renderer

    def names(self) -> list[str]:
        return list(self._renderers)

    def __contains__(self, name: object) -> bool:
        return name in self._renderers

    def __iter__(self) -> Iterator[Renderer]:
        return iter(self._renderers.values())

    def __len__(self) -> int:
        return len(self._renderers)

    # -- Built-in renderers --

    def populate_defaults(self) -> None:
        self._populate_kida_renderer()
        self._populate_jinja_renderer()
        self._populate_mako_renderer()

    def _populate_kida_renderer(self) -> None:
        from finch.renderers.kida import render_file

        self.register("kida", render_file, extension=".html")

    def _populate_jinja_renderer(self) -> None:
        # TODO: add a Jinja2 renderer once jinja2 is an optional dependency
        pass

    def _populate_mako_renderer(self) -> None:
        # TODO: add a Mako renderer once mako is an optional dependency
        pass
