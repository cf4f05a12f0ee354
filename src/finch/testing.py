"""In-memory host shell for testing finch applications.

Uses the same Response and FileResponse types as production.
No real windows, no real protocol interception.

Usage::

    host = FakeHost(ready=True)
    views = ViewRenderer(ViewConfig(view_dir=tmp_path), host=host)
    views.activate_renderer("kida")

    window = FakeWindow(host)
    views.navigate(window, "home", {"title": "Hi"})
    response = await window.reload()
    assert response.text == "<h1>Hi</h1>"
"""

from collections.abc import Callable
from typing import Any
from urllib.parse import urlsplit

from finch.errors import ProtocolRegistrationError
from finch.host import BufferHandler, FileHandler
from finch.response import FileResponse, Response


class FakeHost:
    """A host shell that records protocol registrations and routes URLs to them.

    Args:
        ready: Start in the ready state (``when_ready`` callbacks run at once).
        refuse: Schemes whose registration is refused with
            ``ProtocolRegistrationError``.
    """

    def __init__(self, *, ready: bool = False, refuse: frozenset[str] = frozenset()) -> None:
        self.is_ready = ready
        self.refuse = refuse
        self.buffer_handlers: dict[str, BufferHandler] = {}
        self.file_handlers: dict[str, FileHandler] = {}
        self._pending: list[Callable[[], None]] = []

    # -- Host protocol --

    def register_buffer_protocol(self, scheme: str, handler: BufferHandler) -> bool:
        self._check_scheme(scheme)
        self.buffer_handlers[scheme] = handler
        return True

    def register_file_protocol(self, scheme: str, handler: FileHandler) -> bool:
        self._check_scheme(scheme)
        self.file_handlers[scheme] = handler
        return True

    def when_ready(self, callback: Callable[[], None]) -> None:
        if self.is_ready:
            callback()
        else:
            self._pending.append(callback)

    # -- Test controls --

    def ready(self) -> None:
        """Signal readiness and run every deferred callback."""
        self.is_ready = True
        pending, self._pending = self._pending, []
        for callback in pending:
            callback()

    async def request(self, url: str) -> Response:
        """Send *url* through the registered buffer handler for its scheme."""
        scheme = urlsplit(url).scheme
        handler = self.buffer_handlers.get(scheme)
        if handler is None:
            msg = f"No buffer protocol registered for {scheme!r}"
            raise LookupError(msg)
        return await handler(url)

    def request_file(self, url: str) -> FileResponse:
        """Send *url* through the registered file handler for its scheme."""
        scheme = urlsplit(url).scheme
        handler = self.file_handlers.get(scheme)
        if handler is None:
            msg = f"No file protocol registered for {scheme!r}"
            raise LookupError(msg)
        return handler(url)

    def _check_scheme(self, scheme: str) -> None:
        if scheme in self.refuse:
            raise ProtocolRegistrationError(scheme, "scheme already taken")
        if scheme in self.buffer_handlers or scheme in self.file_handlers:
            raise ProtocolRegistrationError(scheme, "scheme already registered")


class FakeWindow:
    """A window that remembers the URLs it was pointed at.

    ``reload()`` replays the current URL through the host, the way a real
    window would request it after navigation.
    """

    def __init__(self, host: FakeHost) -> None:
        self.host = host
        self.history: list[tuple[str, dict[str, Any]]] = []

    @property
    def url(self) -> str | None:
        return self.history[-1][0] if self.history else None

    def load_url(self, url: str, **options: Any) -> None:
        self.history.append((url, options))

    async def reload(self) -> Response:
        if self.url is None:
            raise LookupError("Window has not been navigated")
        return await self.host.request(self.url)
