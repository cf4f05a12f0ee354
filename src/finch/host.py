"""Interfaces finch needs from the host application shell.

The shell owns windows, navigation, and URL interception. Finch only
checks the shape, not the lineage: any object with these methods works.

A buffer handler answers a view request::

    async def handler(url: str) -> Response: ...

A file handler answers an asset request::

    def handler(url: str) -> FileResponse: ...
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from finch.response import FileResponse, Response

type BufferHandler = Callable[[str], Awaitable[Response]]

type FileHandler = Callable[[str], FileResponse]


class Host(Protocol):
    """Protocol-registration facility of the shell.

    ``register_*`` methods may signal refusal either by raising
    ``ProtocolRegistrationError`` or by returning ``False``.
    """

    def register_buffer_protocol(self, scheme: str, handler: BufferHandler) -> bool | None: ...

    def register_file_protocol(self, scheme: str, handler: FileHandler) -> bool | None: ...

    def when_ready(self, callback: Callable[[], None]) -> None:
        """Run *callback* once the shell is ready (immediately if it already is)."""
        ...


class Window(Protocol):
    """A navigable shell window."""

    def load_url(self, url: str, **options: Any) -> Any: ...
