"""Protocol responses handed back to the host shell.

``Response`` carries rendered bytes for buffer protocols; ``FileResponse``
points file protocols at a path on disk. Immutable by convention,
transformed through ``.with_*()`` calls.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Response:
    """A buffer-protocol response: bytes plus a MIME type.

    ``status`` is an HTTP-analogous marker used only to tell the host
    a request failed; successful renders always carry 200.
    """

    data: bytes = b""
    mime_type: str = "text/html"
    status: int = 200

    @property
    def ok(self) -> bool:
        return self.status < 400

    @property
    def text(self) -> str:
        """The payload decoded as UTF-8."""
        return self.data.decode("utf-8")

    @classmethod
    def html(cls, html: str) -> Response:
        """Wrap rendered HTML as a successful ``text/html`` response."""
        return cls(data=html.encode("utf-8"))

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status."""
        return replace(self, status=status)


@dataclass(frozen=True, slots=True)
class FileResponse:
    """A file-protocol response: the host streams ``path`` itself."""

    path: Path


EMPTY_HTML = Response()
