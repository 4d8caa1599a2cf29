"""Core module containing cross-cutting concerns."""

from .exceptions import (
    ApiTimeoutError,
    ApplicationError,
    ClientConfigurationError,
    FixtureNotFoundError,
    InfrastructureError,
    NetworkError,
    ObjectsApiError,
)

__all__ = [
    "ObjectsApiError",
    "ApplicationError",
    "InfrastructureError",
    "NetworkError",
    "ApiTimeoutError",
    "ClientConfigurationError",
    "FixtureNotFoundError",
]
