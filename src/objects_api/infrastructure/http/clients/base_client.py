"""Base HTTP resource client and common functionality."""

from __future__ import annotations

import asyncio
from functools import lru_cache
from typing import Any, Generic, NamedTuple, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from ....config.logging import get_logger, log_error
from ....core.exceptions import ApiTimeoutError, NetworkError
from ....domain.enums import StatusClass
from ..resilience.retry import RetryableClient, RetryPolicy, Sleep

T = TypeVar("T")

logger = get_logger(__name__)


class ApiResult(NamedTuple, Generic[T]):
    """Terminal status code paired with the best-effort decoded body.

    Unpacks as ``status, body = result``. ``body`` is None when the response
    had no body or the body could not be decoded, independent of the status.
    """

    status_code: int
    body: T | None

    @property
    def is_success(self) -> bool:
        return self.status_class is StatusClass.SUCCESS

    @property
    def status_class(self) -> StatusClass:
        return StatusClass.from_status(self.status_code)


@lru_cache(maxsize=32)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def decode_json_or_none(response: httpx.Response, target: Any) -> Any | None:
    """Decode a response body into ``target`` without ever raising.

    Args:
        response: A response whose body has been read
        target: Pydantic model or type expression to validate against

    Returns:
        The decoded value, or None for an empty, malformed or mismatched body
    """
    text = response.text
    if not text or not text.strip():
        return None

    try:
        return _adapter(target).validate_json(text)
    except ValidationError as e:
        logger.debug("Response body not decodable", status_code=response.status_code, errors=e.error_count())
        return None


class BaseResourceClient(RetryableClient):
    """Async HTTP client for one REST resource with retry on transient failures."""

    def __init__(
        self,
        name: str,
        base_url: str,
        timeout: float,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        retry_policy: RetryPolicy | None = None,
        sleep: Sleep = asyncio.sleep,
        log_payloads: bool = False,
    ):
        """Initialize the resource client.

        Args:
            name: Human-readable name for this client
            base_url: Origin every request path is resolved against
            timeout: Per-exchange timeout in seconds
            transport: Optional transport replacing the network, used for the in-memory mock
            retry_policy: Retry configuration
            sleep: Awaitable used to wait between attempts
            log_payloads: Whether to log request and response bodies
        """
        RetryableClient.__init__(self, retry_policy, sleep)
        self.name = name
        self.log_payloads = log_payloads

        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout),
            headers={"Accept": "application/json"},
            transport=transport,
            event_hooks={"request": [self._log_request], "response": [self._log_response]},
        )

    async def _send(
        self,
        method: str,
        path: str,
        *,
        json: Any | None = None,
        params: Any | None = None,
    ) -> httpx.Response:
        """Send one request through the retry executor.

        Raises:
            NetworkError: If the final attempt fails below the HTTP layer
        """

        async def operation() -> httpx.Response:
            try:
                return await self._client.request(method, path, json=json, params=params)
            except httpx.TimeoutException as e:
                raise ApiTimeoutError(
                    f"{self.name} request timed out", method=method, url=path, original_error=e
                ) from e
            except httpx.TransportError as e:
                raise NetworkError(
                    f"{self.name} network error: {e}", method=method, url=path, original_error=e
                ) from e
            except httpx.RequestError as e:
                raise NetworkError(
                    f"{self.name} request failed: {e}", method=method, url=path, original_error=e
                ) from e

        try:
            return await self.execute_with_retry(operation)
        except NetworkError as e:
            log_error(e, {"client": self.name, "method": method, "path": path})
            raise

    async def _log_request(self, request: httpx.Request) -> None:
        fields: dict[str, Any] = {"method": request.method, "url": str(request.url)}
        if self.log_payloads and request.content:
            fields["body"] = request.content.decode("utf-8", errors="replace")
        logger.info("HTTP request", client=self.name, **fields)

    async def _log_response(self, response: httpx.Response) -> None:
        fields: dict[str, Any] = {
            "method": response.request.method,
            "url": str(response.request.url),
            "status_code": response.status_code,
        }
        if self.log_payloads:
            await response.aread()
            fields["body"] = response.text
        logger.info("HTTP response", client=self.name, **fields)

    async def close(self) -> None:
        """Close HTTP client connections."""
        await self._client.aclose()

    async def __aenter__(self) -> BaseResourceClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
