"""Exception taxonomy shared by mediators, panels and the HTTP layer."""

from __future__ import annotations

from typing import Optional


class FarmConnectError(Exception):
    """Base class for every error raised by this package."""


class InvalidFieldError(FarmConnectError, ValueError):
    """A required form field is missing or a numeric field does not parse."""

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class RemoteCallError(FarmConnectError):
    """The generation backend failed to produce a reply."""


class ResponseParseError(FarmConnectError):
    """The reply could not be decoded into the expected structured shape."""

    def __init__(self, message: str, *, raw: str = "") -> None:
        super().__init__(message)
        self.raw = raw


class CredentialMissingError(FarmConnectError):
    """No API key is configured for the selected model provider."""


class MediatorBusyError(FarmConnectError):
    """A request or message was submitted while another one is in flight."""


class SessionUnavailableError(FarmConnectError):
    """The conversation could not be established and accepts no input."""
