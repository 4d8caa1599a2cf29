"""Infrastructure-specific exception classes."""

from typing import Any

from .base import InfrastructureError


class NetworkError(InfrastructureError):
    """Raised when a single HTTP exchange fails below the HTTP layer.

    Connection resets, DNS failures and timeouts land here. Transient
    *responses* (429, 5xx) are never raised; they are returned to the caller.
    """

    def __init__(
        self,
        message: str,
        method: str | None = None,
        url: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        details: dict[str, Any] = {}
        if method:
            details["method"] = method
        if url:
            details["url"] = url
        super().__init__(message, details=details)
        self.method = method
        self.url = url
        self.original_error = original_error


class ApiTimeoutError(NetworkError):
    """Raised when an HTTP exchange exceeds the configured timeout."""

    pass


class ClientConfigurationError(InfrastructureError):
    """Raised when a client cannot be built from the given configuration."""

    pass
