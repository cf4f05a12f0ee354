"""Finch — render templates as static pages over a custom URL scheme.

Lets a desktop shell navigate windows to ``view:///<view-id>`` URLs and
answers each request by rendering the matching template with the data
supplied at navigation time.

Basic usage::

    from finch import ViewConfig, ViewRenderer

    views = ViewRenderer(ViewConfig(view_dir="app/views"), host=shell)
    views.activate_renderer("kida")

    views.navigate(window, "index", {"title": "Home"})
"""

__version__ = "0.1.0-dev"
__all__ = [
    "AssetResolver",
    "ConfigurationError",
    "Dispatcher",
    "FileResponse",
    "FinchError",
    "NotActivatedError",
    "ProtocolRegistrationError",
    "RenderError",
    "RenderTimeout",
    "Renderer",
    "RendererRegistry",
    "Response",
    "ViewConfig",
    "ViewDataStore",
    "ViewRenderer",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import finch`` fast; kida and anyio load on first use.
    """
    if name == "ViewRenderer":
        from finch.app import ViewRenderer

        return ViewRenderer

    if name == "ViewConfig":
        from finch.config import ViewConfig

        return ViewConfig

    if name == "Dispatcher":
        from finch.dispatcher import Dispatcher

        return Dispatcher

    if name == "AssetResolver":
        from finch.assets import AssetResolver

        return AssetResolver

    if name in ("Renderer", "RendererRegistry"):
        from finch import registry as _registry

        return getattr(_registry, name)

    if name == "ViewDataStore":
        from finch.store import ViewDataStore

        return ViewDataStore

    if name in ("Response", "FileResponse"):
        from finch import response as _resp

        return getattr(_resp, name)

    if name in (
        "ConfigurationError",
        "FinchError",
        "NotActivatedError",
        "ProtocolRegistrationError",
        "RenderError",
        "RenderTimeout",
    ):
        from finch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
