"""Terminal error formatting for failed view requests.

Provides structured, human-readable log output when a render fails,
instead of a raw ``logger.exception()`` dump.

For render errors:
    Shows the engine message, the template location, and the requested
    URL. Produces output like::

        -- Render Error -------------------------------------------------
        UndefinedError: Undefined variable 'usernme'
          At:   views/home.html:42:7
          URL:  view:///home?_view=home
        -----------------------------------------------------------------

For other errors:
    Uses configurable traceback verbosity (compact/full/minimal) controlled
    by the ``FINCH_TRACEBACK`` environment variable.
"""

import logging
import os
import sysconfig
import traceback as _traceback

from finch.errors import FinchError, RenderError, RenderTimeout

logger = logging.getLogger("finch.dispatch")

# Width of the terminal error banner
_BANNER_WIDTH = 65

# Most application frames a compact trace shows
_MAX_FRAMES = 5

_LIBRARY_ROOTS = tuple(
    {sysconfig.get_path(key) for key in ("stdlib", "platstdlib", "purelib", "platlib")}
)


def _rule(title: str = "") -> str:
    if not title:
        return "-" * _BANNER_WIDTH
    head = f"-- {title} "
    return head + "-" * (_BANNER_WIDTH - len(head))


def _frames(exc: BaseException) -> _traceback.StackSummary:
    return _traceback.extract_tb(exc.__traceback__)


def _from_library(frame: _traceback.FrameSummary) -> bool:
    """Frames from the interpreter, installed packages, or generated code."""
    return frame.filename.startswith("<") or frame.filename.startswith(_LIBRARY_ROOTS)


def format_render_error(exc: RenderError, url: str | None = None) -> str:
    """Format a render error for terminal display.

    Args:
        exc: The render failure.
        url: The view URL that triggered it (optional).

    Returns:
        Formatted multi-line string for terminal output.
    """
    title = "Render Timeout" if isinstance(exc, RenderTimeout) else "Render Error"
    parts = [_rule(title), exc.message]

    if exc.location:
        parts.append(f"  At:   {exc.location}")
    if url is not None:
        parts.append(f"  URL:  {url}")

    parts.append(_rule())
    return "\n".join(parts)


def format_compact_traceback(exc: BaseException) -> str:
    """Exception line plus the innermost application frames.

    Frames from the stdlib and installed packages are hidden. When
    every frame is library code the last three are shown instead.
    """
    frames = _frames(exc)
    shown = [frame for frame in frames if not _from_library(frame)] or frames[-3:]

    lines = [f"{type(exc).__name__}: {exc}"]
    if shown:
        lines.append("  Trace (app frames):")
    for frame in shown[-_MAX_FRAMES:]:
        lines.append(f"    {frame.filename}:{frame.lineno} in {frame.name}")
        if frame.line:
            lines.append(f"      {frame.line.strip()}")
    return "\n".join(lines)


def format_minimal_error(exc: BaseException) -> str:
    """``Type at file:line: message`` on a single line."""
    frames = _frames(exc)
    where = f" at {frames[-1].filename}:{frames[-1].lineno}" if frames else ""
    return f"{type(exc).__name__}{where}: {exc}"


def log_error(exc: BaseException, url: str | None = None) -> None:
    """Log a failed view request with appropriate formatting.

    Render errors get the banner format. ``NotActivatedError`` and other
    finch errors are configuration mistakes and log as one line. Anything
    else uses the ``FINCH_TRACEBACK`` verbosity (compact, full, minimal).
    """
    prefix = f"Failed {url}" if url is not None else "View request failed"

    if isinstance(exc, RenderError):
        logger.error("%s\n%s", prefix, format_render_error(exc, url))
        return

    if isinstance(exc, FinchError):
        logger.error("%s: %s", prefix, exc)
        return

    traceback_style = os.environ.get("FINCH_TRACEBACK", "compact").lower()

    if traceback_style == "full":
        logger.error("%s", prefix, exc_info=exc)
    elif traceback_style == "minimal":
        logger.error("%s - %s", prefix, format_minimal_error(exc))
    else:
        logger.error("%s\n%s", prefix, format_compact_traceback(exc))
