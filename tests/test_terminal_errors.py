"""Tests for finch.terminal_errors — log formatting for failed requests."""

import json
import logging

import pytest

from finch.errors import NotActivatedError, RenderError, RenderTimeout
from finch.terminal_errors import (
    format_compact_traceback,
    format_minimal_error,
    format_render_error,
    log_error,
)


def _raised(exc: BaseException) -> BaseException:
    try:
        raise exc
    except BaseException as caught:
        return caught


class TestFormatRenderError:
    def test_banner_with_location_and_url(self) -> None:
        err = RenderError("Undefined variable 'usernme'", file="views/home.html", line=42, column=7)
        text = format_render_error(err, "view:///home?_view=home")
        lines = text.splitlines()
        assert lines[0].startswith("-- Render Error ")
        assert len(lines[0]) == 65
        assert "Undefined variable 'usernme'" in text
        assert "At:   views/home.html:42:7" in text
        assert "URL:  view:///home?_view=home" in text
        assert lines[-1] == "-" * 65

    def test_without_location(self) -> None:
        text = format_render_error(RenderError("boom"))
        assert "At:" not in text
        assert "URL:" not in text

    def test_timeout_title(self) -> None:
        text = format_render_error(RenderTimeout("slow"))
        assert text.startswith("-- Render Timeout ")


class TestTracebackFormats:
    def test_compact(self) -> None:
        text = format_compact_traceback(_raised(ValueError("bad value")))
        assert text.startswith("ValueError: bad value")
        assert "Trace (app frames):" in text

    def test_compact_hides_stdlib_frames(self) -> None:
        try:
            json.loads("{")
        except ValueError as exc:
            text = format_compact_traceback(exc)
        assert "in test_compact_hides_stdlib_frames" in text
        assert "decoder.py" not in text

    def test_minimal(self) -> None:
        text = format_minimal_error(_raised(ValueError("bad value")))
        assert text.startswith("ValueError at ")
        assert text.endswith(": bad value")
        assert "\n" not in text

    def test_minimal_without_traceback(self) -> None:
        assert format_minimal_error(ValueError("x")) == "ValueError: x"


class TestLogError:
    def test_render_error_banner(self, caplog) -> None:
        with caplog.at_level(logging.ERROR, logger="finch.dispatch"):
            log_error(RenderError("bad", file="a.html", line=1), "view:///a")
        assert "Failed view:///a" in caplog.text
        assert "-- Render Error" in caplog.text

    def test_finch_error_one_line(self, caplog) -> None:
        with caplog.at_level(logging.ERROR, logger="finch.dispatch"):
            log_error(NotActivatedError(), "view:///a")
        assert caplog.records[-1].getMessage() == "Failed view:///a: No renderer has been activated"

    @pytest.mark.parametrize("style", ["compact", "minimal", "full"])
    def test_traceback_styles(self, style: str, caplog, monkeypatch) -> None:
        monkeypatch.setenv("FINCH_TRACEBACK", style)
        with caplog.at_level(logging.ERROR, logger="finch.dispatch"):
            log_error(_raised(ValueError("bad value")), "view:///my%20page")
        record = caplog.records[-1]
        assert record.getMessage().startswith("Failed view:///my%20page")
        if style == "full":
            assert record.exc_info is not None
        else:
            assert "bad value" in record.getMessage()

    def test_without_url(self, caplog) -> None:
        with caplog.at_level(logging.ERROR, logger="finch.dispatch"):
            log_error(RenderError("bad"))
        assert "View request failed" in caplog.text
