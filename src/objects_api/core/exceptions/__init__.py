"""Exception hierarchy for the objects API client.

Only network-level failures are raised out of client operations. HTTP error
statuses and undecodable bodies travel back inside the returned result.
"""

from .application import FixtureNotFoundError
from .base import (
    ApplicationError,
    InfrastructureError,
    ObjectsApiError,
)
from .infrastructure import (
    ApiTimeoutError,
    ClientConfigurationError,
    NetworkError,
)

__all__ = [
    # Base exceptions
    "ObjectsApiError",
    "ApplicationError",
    "InfrastructureError",
    # Infrastructure exceptions
    "NetworkError",
    "ApiTimeoutError",
    "ClientConfigurationError",
    # Application exceptions
    "FixtureNotFoundError",
]
