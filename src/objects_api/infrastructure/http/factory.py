"""Factory for creating objects clients based on configuration."""

from __future__ import annotations

import logging
from typing import Any

from ...config.config import ApiMode, Settings
from ...core.exceptions import ClientConfigurationError
from .clients.mock_server import MockConfig, MockObjectsApi
from .clients.objects_client import ObjectsClient, ObjectsClientConfig
from .resilience.retry import RetryPolicy

logger = logging.getLogger(__name__)


class ObjectsClientFactory:
    """Factory for creating objects clients."""

    @staticmethod
    def create_client(
        mode: str,
        config: dict[str, Any],
        retry_policy: RetryPolicy | None = None,
        mock_api: MockObjectsApi | None = None,
    ) -> ObjectsClient:
        """Create an objects client for the given mode.

        Args:
            mode: Backend mode (live, mock)
            config: ``ObjectsClientConfig`` keyword values
            retry_policy: Retry configuration, defaults to the standard policy
            mock_api: Backing mock for ``mock`` mode, a fresh one is built if omitted

        Returns:
            Configured objects client

        Raises:
            ClientConfigurationError: If mode is not supported or configuration is invalid
        """
        mode_lower = mode.lower()

        try:
            client_config = ObjectsClientConfig(**config)
        except Exception as e:
            raise ClientConfigurationError(f"Invalid objects client configuration: {e}") from e

        if mode_lower == ApiMode.LIVE.value:
            logger.info(f"Created live objects client for {client_config.base_url}")
            return ObjectsClient(client_config, retry_policy=retry_policy)

        if mode_lower == ApiMode.MOCK.value:
            api = mock_api or MockObjectsApi(MockConfig(collection=client_config.collection))
            logger.info("Created mock objects client")
            return ObjectsClient(client_config, transport=api.transport(), retry_policy=retry_policy)

        raise ClientConfigurationError(
            f"Unsupported API mode: {mode}", details={"supported": ObjectsClientFactory.get_supported_modes()}
        )

    @staticmethod
    def from_settings(settings: Settings, mock_api: MockObjectsApi | None = None) -> ObjectsClient:
        """Create a client from application settings."""
        return ObjectsClientFactory.create_client(
            settings.api_mode.value,
            settings.client_config(),
            retry_policy=settings.retry_policy(),
            mock_api=mock_api,
        )

    @staticmethod
    def get_supported_modes() -> list[str]:
        """Get list of supported API modes."""
        return [mode.value for mode in ApiMode]
