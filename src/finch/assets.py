"""Asset-protocol resolution.

Maps asset URLs to files under an assets directory. The URL host, when
present, names a sub-directory::

    asset://css/main.css   -> <assets_dir>/css/main.css
    asset:///main.css      -> <assets_dir>/main.css

Only the path is computed. The host shell streams the file and owns
file-not-found handling.
"""

from pathlib import Path

from finch.paths import resolve_host, resolve_path
from finch.response import FileResponse


class AssetResolver:
    """Resolve asset URLs to absolute paths under ``directory``."""

    __slots__ = ("_directory",)

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory).absolute()

    @property
    def directory(self) -> Path:
        return self._directory

    def resolve(self, url: str) -> Path:
        """Return ``directory / host / path`` for *url*."""
        host = resolve_host(url)
        relative = resolve_path(url)
        if host:
            return self._directory / host / relative
        return self._directory / relative

    def handle(self, url: str) -> FileResponse:
        """File-protocol handler for the host shell."""
        return FileResponse(path=self.resolve(url))
