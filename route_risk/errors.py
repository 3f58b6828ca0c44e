"""Failure taxonomy for calls against the remote route/weather service."""

from __future__ import annotations

from typing import Any, Mapping


class RemoteServiceError(Exception):
    """Base class for every failure raised while talking to the remote service."""

    def __init__(self, message: str, *, operation: str, target: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.operation = operation
        self.target = dict(target or {})

    def log_context(self) -> dict[str, Any]:
        """Structured fields for log records."""
        return {"operation": self.operation, "error_kind": type(self).__name__, **self.target}


class TransportError(RemoteServiceError):
    """Network unreachable, connection refused or the request timed out."""


class ServerError(RemoteServiceError):
    """The service answered with a non-success status."""

    def __init__(self, message: str, *, operation: str, status_code: int,
                 target: Mapping[str, Any] | None = None) -> None:
        super().__init__(message, operation=operation, target=target)
        self.status_code = status_code

    def log_context(self) -> dict[str, Any]:
        return {**super().log_context(), "status_code": self.status_code}


class DecodeError(RemoteServiceError):
    """The response body was not valid JSON or did not match the expected schema."""


class RemoteDisabledError(RemoteServiceError):
    """Remote access is turned off (fallback-only mode) and no fallback exists."""
