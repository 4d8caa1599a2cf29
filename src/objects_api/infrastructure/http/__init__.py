"""HTTP clients, resilience and the in-memory mock backend."""

from .clients.base_client import ApiResult, BaseResourceClient, decode_json_or_none
from .clients.mock_server import MockConfig, MockObjectsApi
from .clients.objects_client import ObjectsClient, ObjectsClientConfig
from .factory import ObjectsClientFactory
from .resilience.retry import DEFAULT_RETRY_POLICY, RetryableClient, RetryPolicy, execute_with_retry, is_transient_status

__all__ = [
    # Clients
    "ApiResult",
    "BaseResourceClient",
    "decode_json_or_none",
    "ObjectsClient",
    "ObjectsClientConfig",
    "MockConfig",
    "MockObjectsApi",
    # Factory
    "ObjectsClientFactory",
    # Resilience
    "DEFAULT_RETRY_POLICY",
    "RetryPolicy",
    "RetryableClient",
    "execute_with_retry",
    "is_transient_status",
]
