"""Finch view renderer — the host-facing entry point.

One ``ViewRenderer`` per application. It owns the renderer registry,
the view-data store, the dispatcher, and (optionally) the asset
resolver; nothing lives at module level.

Typical wiring in a shell::

    views = ViewRenderer(ViewConfig(view_dir="app/views", use_assets=True), host=shell)
    views.activate_renderer("kida")

    views.navigate(main_window, "dashboard", {"user": user})
"""

import logging
from typing import Any

from finch.assets import AssetResolver
from finch.config import ViewConfig
from finch.dispatcher import VIEW_KEY, Dispatcher
from finch.errors import ProtocolRegistrationError
from finch.host import Host, Window
from finch.paths import format_view_url
from finch.registry import Renderer, RendererRegistry, RenderAction
from finch.store import ViewDataStore

logger = logging.getLogger("finch.app")


class ViewRenderer:
    """Serve templates over a custom URL scheme inside a desktop shell.

    Setup is synchronous and fails fast: registering a nameless renderer
    or activating an unknown one raises ``ConfigurationError``. Protocol
    registration waits for the host to be ready and never raises; a
    refused scheme is logged and the application carries on without it.
    """

    __slots__ = (
        "_assets",
        "_dispatcher",
        "_host",
        "_registered_schemes",
        "_registry",
        "_setup_requested",
        "_store",
        "config",
    )

    def __init__(self, config: ViewConfig | None = None, *, host: Host) -> None:
        self.config: ViewConfig = config or ViewConfig()
        self._host = host
        self._registry = RendererRegistry()
        self._store = ViewDataStore(max_entries=self.config.max_view_data)
        self._dispatcher = Dispatcher(self.config, self._registry, self._store)
        self._assets: AssetResolver | None = (
            AssetResolver(self.config.assets_dir) if self.config.use_assets else None
        )
        self._registered_schemes: set[str] = set()
        self._setup_requested = False

    # -- Accessors --

    @property
    def renderers(self) -> RendererRegistry:
        return self._registry

    @property
    def current_renderer(self) -> Renderer | None:
        return self._dispatcher.current_renderer

    @property
    def store(self) -> ViewDataStore:
        return self._store

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    @property
    def assets(self) -> AssetResolver | None:
        return self._assets

    @property
    def registered_schemes(self) -> frozenset[str]:
        """Schemes the host has accepted so far."""
        return frozenset(self._registered_schemes)

    # -- Renderers --

    def register_renderer(
        self,
        name: str,
        action: RenderAction,
        *,
        extension: str | None = None,
    ) -> Renderer:
        """Register (or replace) a renderer.

        Args:
            name: Unique renderer name.
            action: ``(file_path, view_data) -> str``, sync or async.
            extension: Template file suffix. Defaults to ``"." + name``.
        """
        return self._registry.register(name, action, extension=extension)

    def activate_renderer(self, name: str) -> Renderer:
        """Make *name* the active renderer and set up protocols with the host.

        Protocol registration is requested once; activating another
        renderer later only swaps the renderer.
        """
        renderer = self._dispatcher.activate(name)
        if not self._setup_requested:
            self._setup_requested = True
            self._host.when_ready(self._setup_protocols)
        return renderer

    # -- Navigation --

    def navigate(
        self,
        window: Window,
        view_id: str,
        data: Any = None,
        **options: Any,
    ) -> Any:
        """Record *data* for *view_id* and point *window* at the view.

        Extra keyword options are passed through to ``window.load_url``.
        Returns whatever the window returns.
        """
        self._store.put(view_id, data)
        url = format_view_url(self.config.view_scheme, view_id, {VIEW_KEY: view_id})
        logger.debug("Navigating to %s", url)
        return window.load_url(url, **options)

    # -- Protocol setup --

    def _setup_protocols(self) -> None:
        self._register(
            self.config.view_scheme,
            self._host.register_buffer_protocol,
            self._dispatcher.handle,
        )
        if self._assets is not None:
            self._register(
                self.config.asset_scheme,
                self._host.register_file_protocol,
                self._assets.handle,
            )

    def _register(self, scheme: str, register: Any, handler: Any) -> None:
        if scheme in self._registered_schemes:
            return
        try:
            accepted = register(scheme, handler)
        except ProtocolRegistrationError as exc:
            logger.error("%s", exc)
            return
        if accepted is False:
            logger.error("Failed to register %r protocol", scheme)
            return
        self._registered_schemes.add(scheme)
        logger.info("Registered %r protocol", scheme)
