"""Base exception classes for the objects API client."""

from typing import Any


class ObjectsApiError(Exception):
    """Base exception for all client errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__.upper()
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the exception."""
        if self.details:
            return f"{self.message}. Details: {self.details}"
        return self.message


class ApplicationError(ObjectsApiError):
    """Base class for test harness and application layer errors."""

    pass


class InfrastructureError(ObjectsApiError):
    """Base class for transport and client construction errors."""

    pass
