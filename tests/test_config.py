"""Tests for finch.config — ViewConfig frozen dataclass."""

from pathlib import Path

import pytest

from finch.config import ViewConfig
from finch.errors import ConfigurationError


class TestViewConfig:
    def test_defaults(self) -> None:
        cfg = ViewConfig()

        assert cfg.view_dir == "views"
        assert cfg.view_scheme == "view"
        assert cfg.use_assets is False
        assert cfg.assets_dir == "assets"
        assert cfg.asset_scheme == "asset"
        assert cfg.ignored_suffixes == (".map",)
        assert cfg.render_timeout == 30.0
        assert cfg.max_view_data is None
        assert cfg.debug is False

    def test_override(self) -> None:
        cfg = ViewConfig(view_dir=Path("app/views"), view_scheme="page", use_assets=True)

        assert cfg.view_dir == Path("app/views")
        assert cfg.view_scheme == "page"
        assert cfg.use_assets is True

    def test_frozen(self) -> None:
        cfg = ViewConfig()

        with pytest.raises(AttributeError):
            cfg.debug = True  # type: ignore[misc]


class TestValidation:
    def test_empty_view_scheme(self) -> None:
        with pytest.raises(ConfigurationError, match="view_scheme"):
            ViewConfig(view_scheme="")

    def test_empty_asset_scheme_with_assets(self) -> None:
        with pytest.raises(ConfigurationError, match="asset_scheme"):
            ViewConfig(use_assets=True, asset_scheme="")

    def test_empty_asset_scheme_ignored_without_assets(self) -> None:
        assert ViewConfig(asset_scheme="").asset_scheme == ""

    def test_clashing_schemes(self) -> None:
        with pytest.raises(ConfigurationError, match="own scheme"):
            ViewConfig(use_assets=True, view_scheme="app", asset_scheme="app")

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_non_positive_timeout(self, timeout: float) -> None:
        with pytest.raises(ConfigurationError, match="render_timeout"):
            ViewConfig(render_timeout=timeout)

    def test_timeout_disabled(self) -> None:
        assert ViewConfig(render_timeout=None).render_timeout is None

    def test_non_positive_cap(self) -> None:
        with pytest.raises(ConfigurationError, match="max_view_data"):
            ViewConfig(max_view_data=0)
