"""Finch exception hierarchy.

Shared across the registry, dispatcher, and app facade so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class FinchError(Exception):
    """Base for all finch-specific errors."""


class ConfigurationError(FinchError):
    """Raised when renderer setup or configuration is invalid.

    Always raised synchronously, at the call that caused it.
    """


class NotActivatedError(FinchError):
    """A view request arrived before any renderer was activated."""

    def __init__(self, detail: str = "No renderer has been activated") -> None:
        super().__init__(detail)


class ProtocolRegistrationError(FinchError):
    """The host refused to register a URL scheme (e.g. already taken)."""

    def __init__(self, scheme: str, detail: str = "") -> None:
        self.scheme = scheme
        message = f"Failed to register {scheme!r} protocol"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


@dataclass(frozen=True, slots=True)
class RenderError(FinchError):
    """The template engine failed to produce HTML.

    Carries file/line/column context when the engine supplies it.
    """

    message: str
    file: str | None = None
    line: int | None = None
    column: int | None = None

    @property
    def location(self) -> str | None:
        """``file:line:column`` when the file is known, else None."""
        if self.file is None:
            return None
        parts = [self.file]
        if self.line is not None:
            parts.append(str(self.line))
            if self.column is not None:
                parts.append(str(self.column))
        return ":".join(parts)

    def __str__(self) -> str:
        location = self.location
        if location:
            return f"{self.message}\n\nERROR @({location})"
        return self.message


class RenderTimeout(RenderError):
    """The renderer did not complete within ``ViewConfig.render_timeout``."""
