"""View renderer configuration.

ViewConfig is a frozen dataclass, immutable after creation and passed to
ViewRenderer at construction.
"""

from dataclasses import dataclass
from pathlib import Path

from finch.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ViewConfig:
    """View renderer configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ViewConfig(view_dir="app/views", use_assets=True)
    """

    # Views
    view_dir: str | Path = "views"
    view_scheme: str = "view"

    # Assets
    use_assets: bool = False
    assets_dir: str | Path = "assets"
    asset_scheme: str = "asset"

    # Suffixes answered with empty HTML instead of being rendered (e.g. source maps)
    ignored_suffixes: tuple[str, ...] = (".map",)

    # Seconds before an in-flight render fails; None waits forever
    render_timeout: float | None = 30.0

    # Cap on stored view-data entries; None keeps every entry for the process lifetime
    max_view_data: int | None = None

    # Include error detail in failure payloads
    debug: bool = False

    def __post_init__(self) -> None:
        if not self.view_scheme:
            raise ConfigurationError("view_scheme must be a non-empty scheme name")
        if self.use_assets:
            if not self.asset_scheme:
                raise ConfigurationError("asset_scheme must be a non-empty scheme name")
            if self.asset_scheme == self.view_scheme:
                msg = (
                    f"asset_scheme and view_scheme are both {self.view_scheme!r}. "
                    "Each protocol needs its own scheme."
                )
                raise ConfigurationError(msg)
        if self.render_timeout is not None and self.render_timeout <= 0:
            raise ConfigurationError("render_timeout must be positive or None")
        if self.max_view_data is not None and self.max_view_data <= 0:
            raise ConfigurationError("max_view_data must be positive or None")
