"""Installer error hierarchy.

Every failure is terminal for the run: the CLI catches `InstallError` at the
top level, prints its message and exits with code 1. Kinds are string enums so
they read well in logs and tests.
"""

from __future__ import annotations

from enum import Enum


class InstallError(Exception):
    """Base class for failures the CLI reports as `Install failed: ...`."""


class ValidationError(InstallError):
    """A malformed command-line argument."""


class PolicyError(ValidationError):
    """An argument that tries to override the official setup endpoint."""


class VersionError(InstallError):
    """The running interpreter is older than the supported minimum."""


class FetchErrorKind(str, Enum):
    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"
    EMPTY_RESPONSE = "empty_response"
    NETWORK = "network"


class FetchError(InstallError):
    def __init__(
        self,
        kind: FetchErrorKind,
        message: str,
        *,
        status: int | None = None,
        body_excerpt: str = "",
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.status = status
        self.body_excerpt = body_excerpt


class RunErrorKind(str, Enum):
    SPAWN_FAILURE = "spawn_failure"
    SIGNAL = "signal"


class RunError(InstallError):
    def __init__(self, kind: RunErrorKind, message: str, *, signal: str | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.signal = signal
