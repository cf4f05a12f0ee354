"""View-protocol dispatcher — turns a view URL into rendered HTML.

Lifecycle::

    IDLE -> AWAITING_ACTIVATION   (construction)
    AWAITING_ACTIVATION -> ACTIVE (first successful activate())

``ACTIVE`` is terminal: activating again swaps the renderer but there is
no way back.

Pipeline for ``render(url)``::

    1. Resolve the URL path; parse the query; read the ``_view`` key
    2. Ignored suffix?            -> empty text/html, renderer untouched
    3. Not active?                -> NotActivatedError
    4. Compose view_dir / path + extension (ignored suffix? -> empty)
    5. Snapshot view data (stored entry, else query params, else None)
    6. Await the renderer action under the render timeout
    7. Wrap the HTML as a text/html Response

View data is read synchronously before the first await, so a request
always sees the store as it was when the request arrived. A navigation
that lands while a render is in flight affects only later requests.
"""

import html
import logging
from enum import Enum, auto
from pathlib import Path
from typing import Any

import anyio

from finch.config import ViewConfig
from finch.errors import FinchError, NotActivatedError, RenderError, RenderTimeout
from finch.paths import QueryParams, resolve_path
from finch.registry import Renderer, RendererRegistry
from finch.response import EMPTY_HTML, Response
from finch.store import ViewDataStore
from finch.terminal_errors import log_error

logger = logging.getLogger("finch.dispatch")

# Query key that carries the navigation id used to look up stored view data
VIEW_KEY = "_view"


class DispatcherState(Enum):
    IDLE = auto()
    AWAITING_ACTIVATION = auto()
    ACTIVE = auto()


def default_error_page(status: int, detail: str) -> str:
    """Minimal HTML snippet for failed view requests."""
    return f'<div class="finch-error" data-status="{status}">{html.escape(detail)}</div>'


def _status_for(exc: BaseException) -> int:
    if isinstance(exc, NotActivatedError):
        return 503
    if isinstance(exc, RenderTimeout):
        return 504
    return 500


class Dispatcher:
    """Resolves view requests against the active renderer and view-data store."""

    __slots__ = ("_config", "_current", "_registry", "_state", "_store", "_view_dir")

    def __init__(
        self,
        config: ViewConfig,
        registry: RendererRegistry,
        store: ViewDataStore,
    ) -> None:
        self._state = DispatcherState.IDLE
        self._config = config
        self._registry = registry
        self._store = store
        self._view_dir = Path(config.view_dir)
        self._current: Renderer | None = None
        self._state = DispatcherState.AWAITING_ACTIVATION

    @property
    def state(self) -> DispatcherState:
        return self._state

    @property
    def current_renderer(self) -> Renderer | None:
        return self._current

    def activate(self, name: str) -> Renderer:
        """Select the renderer that serves every subsequent request.

        Raises ``ConfigurationError`` if *name* is not registered; the
        previous selection (if any) stays in place.
        """
        renderer = self._registry.require(name)
        self._current = renderer
        self._state = DispatcherState.ACTIVE
        logger.debug("Activated renderer %r (%s)", name, renderer.file_extension)
        return renderer

    # -- Request handling --

    def is_ignored(self, path: str) -> bool:
        return any(path.endswith(suffix) for suffix in self._config.ignored_suffixes)

    def template_path(self, resolved: str, renderer: Renderer) -> Path:
        """Compose ``view_dir / resolved + extension``."""
        return self._view_dir / f"{resolved}{renderer.file_extension}"

    def view_data_for(self, query: QueryParams) -> Any:
        """Return the data a request should render with.

        The stored entry for the ``_view`` key wins. Without one, the
        remaining query parameters are used; with none of those, ``None``.
        """
        view_id = query.get(VIEW_KEY)
        if view_id is not None and view_id in self._store:
            return self._store.get(view_id)
        params = query.without(VIEW_KEY)
        return params or None

    async def render(self, url: str) -> Response:
        """Render the view addressed by *url*.

        Raises ``NotActivatedError`` before activation and ``RenderError``
        (or ``RenderTimeout``) when the renderer fails.
        """
        resolved = resolve_path(url)
        query = QueryParams.from_url(url)

        if self.is_ignored(resolved):
            return EMPTY_HTML

        renderer = self._current
        if self._state is not DispatcherState.ACTIVE or renderer is None:
            raise NotActivatedError(f"No renderer activated; cannot serve {url}")

        file_path = self.template_path(resolved, renderer)
        if self.is_ignored(str(file_path)):
            return EMPTY_HTML

        view_data = self.view_data_for(query)

        try:
            with anyio.fail_after(self._config.render_timeout) as scope:
                rendered = await renderer.render(file_path, view_data)
        except TimeoutError as exc:
            # Only our own deadline is a timeout; the action may raise TimeoutError itself
            if not scope.cancelled_caught:
                raise RenderError(f"TimeoutError: {exc}", file=str(file_path)) from exc
            msg = f"Renderer {renderer.name!r} timed out after {self._config.render_timeout}s"
            raise RenderTimeout(msg, file=str(file_path)) from exc
        except FinchError:
            raise
        except Exception as exc:
            msg = f"{type(exc).__name__}: {exc}"
            raise RenderError(msg, file=str(file_path)) from exc

        if not isinstance(rendered, str):
            msg = f"Renderer {renderer.name!r} returned {type(rendered).__name__}, expected str"
            raise RenderError(msg, file=str(file_path))

        return Response.html(rendered)

    async def handle(self, url: str) -> Response:
        """Protocol handler: render *url*, converting failures to responses.

        Every failure is logged and answered with an error payload, so one
        bad render never takes down the protocol handler.
        """
        try:
            return await self.render(url)
        except Exception as exc:
            log_error(exc, url)
            status = _status_for(exc)
            detail = str(exc) if self._config.debug else "View could not be rendered"
            return Response.html(default_error_page(status, detail)).with_status(status)
