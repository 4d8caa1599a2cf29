"""
Pytest configuration and shared fixtures for the objects API tests.

The CRUD suite runs against whatever ``API_MODE`` selects. It defaults to the
in-memory mock here so a plain ``pytest`` run needs no network; export
``API_MODE=live`` to exercise https://api.restful-api.dev.
"""

import os
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio

# Set test environment before imports
os.environ.setdefault("API_MODE", "mock")
os.environ.setdefault("ENVIRONMENT", "ci")
os.environ.setdefault("LOG_LEVEL", "INFO")

pytest.register_assert_rewrite("objects_api.testing.assertions", "objects_api.testing.cleanup")

from objects_api.config import Settings, configure_logging, get_settings  # noqa: E402
from objects_api.domain import ObjectCreateRequest  # noqa: E402
from objects_api.infrastructure.http import (  # noqa: E402
    MockConfig,
    MockObjectsApi,
    ObjectsClient,
    ObjectsClientFactory,
)
from objects_api.testing import load_fixture  # noqa: E402


class SleepRecorder:
    """Stand-in for ``asyncio.sleep`` that records delays instead of waiting."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: CRUD contract test against the configured API mode")


@pytest.fixture(scope="session")
def settings() -> Settings:
    """Settings resolved from the test environment."""
    get_settings.cache_clear()
    return get_settings()


@pytest.fixture(scope="session", autouse=True)
def session_logging(settings: Settings) -> None:
    """Apply LOG_LEVEL, LOG_FORMAT and LOG_FILE once, inside pytest output capture."""
    configure_logging(settings)


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def mock_api() -> MockObjectsApi:
    """Fresh in-memory objects API with deterministic fault injection."""
    return MockObjectsApi(MockConfig(random_seed=1234))


@pytest_asyncio.fixture
async def mock_client(mock_api: MockObjectsApi, sleep_recorder: SleepRecorder) -> AsyncGenerator[ObjectsClient, None]:
    """Objects client wired to ``mock_api`` whose retries do not wait."""
    async with ObjectsClient(transport=mock_api.transport(), sleep=sleep_recorder) as client:
        yield client


@pytest_asyncio.fixture
async def objects_client(settings: Settings, mock_api: MockObjectsApi) -> AsyncGenerator[ObjectsClient, None]:
    """Objects client for the configured API mode."""
    async with ObjectsClientFactory.from_settings(settings, mock_api=mock_api) as client:
        yield client


@pytest.fixture
def create_template() -> ObjectCreateRequest:
    return load_fixture("create-ipad.json")


@pytest.fixture
def update_template() -> ObjectCreateRequest:
    return load_fixture("update-ipad.json")
