"""Resilience patterns for HTTP clients."""

from .retry import DEFAULT_RETRY_POLICY, RetryableClient, RetryPolicy, execute_with_retry, is_transient_status

__all__ = [
    "DEFAULT_RETRY_POLICY",
    "RetryPolicy",
    "RetryableClient",
    "execute_with_retry",
    "is_transient_status",
]
