"""Kida renderer — the default template engine for view files.

Each render builds a kida Environment rooted at the template's directory,
so ``{% extends %}`` and ``{% include %}`` resolve relative to the view.
Compilation and file reads run on a worker thread; the caller's event
loop never blocks on disk.

View data becomes the template context:

- a mapping is used as-is (``{{ title }}``)
- ``None`` renders with an empty context
- anything else is exposed as ``{{ data }}``
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import anyio
from kida import Environment, FileSystemLoader

from finch.errors import RenderError


def build_context(view_data: Any) -> dict[str, Any]:
    """Turn arbitrary view data into a template context dict."""
    if view_data is None:
        return {}
    if isinstance(view_data, Mapping):
        return dict(view_data)
    return {"data": view_data}


def to_render_error(exc: BaseException, file_path: Path) -> RenderError:
    """Convert a kida exception into a ``RenderError`` with location context.

    Syntax errors carry ``filename``/``lineno``/``col_offset``; runtime
    errors carry ``template_name``/``lineno``; undefined-variable errors
    carry ``template``/``lineno``.
    """
    template = (
        getattr(exc, "filename", None)
        or getattr(exc, "template_name", None)
        or getattr(exc, "template", None)
    )
    line = getattr(exc, "lineno", None)
    column = getattr(exc, "col_offset", None)
    message = getattr(exc, "message", None) or str(exc) or type(exc).__name__
    return RenderError(
        message=f"{type(exc).__name__}: {message}",
        file=str(template) if template else str(file_path),
        line=line if isinstance(line, int) else None,
        column=column if isinstance(column, int) else None,
    )


def _render_sync(file_path: Path, context: dict[str, Any]) -> str:
    if not file_path.is_file():
        raise RenderError(f"Template not found: {file_path}", file=str(file_path))
    env = Environment(
        loader=FileSystemLoader(str(file_path.parent)),
        autoescape=True,
    )
    try:
        template = env.get_template(file_path.name)
        return template.render(context)
    except Exception as exc:
        raise to_render_error(exc, file_path) from exc


async def render_file(file_path: Path, view_data: Any) -> str:
    """Render *file_path* with *view_data* on a worker thread."""
    context = build_context(view_data)
    return await anyio.to_thread.run_sync(
        _render_sync, Path(file_path), context, abandon_on_cancel=True
    )
