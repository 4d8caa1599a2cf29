"""HTTP client implementations."""

from .base_client import ApiResult, BaseResourceClient, decode_json_or_none
from .mock_server import MockConfig, MockObjectsApi
from .objects_client import ObjectsClient, ObjectsClientConfig

__all__ = [
    "ApiResult",
    "BaseResourceClient",
    "decode_json_or_none",
    "ObjectsClient",
    "ObjectsClientConfig",
    "MockConfig",
    "MockObjectsApi",
]
