"""Typed client for the /objects REST resource."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import BaseModel, Field

from ....domain.models import DeleteResponse, ObjectCreateRequest, ObjectData, ObjectResponse
from ..resilience.retry import RetryPolicy, Sleep
from .base_client import ApiResult, BaseResourceClient, decode_json_or_none


class ObjectsClientConfig(BaseModel):
    """Configuration for the objects client."""

    base_url: str = "https://api.restful-api.dev"
    collection: str = Field(default="objects", min_length=1)
    timeout: float = Field(default=30.0, gt=0)
    log_payloads: bool = False


class ObjectsClient(BaseResourceClient):
    """CRUD operations over the remote objects collection.

    Every operation is one retried exchange followed by a best-effort decode.
    Only network failures that survive the retry policy are raised; HTTP error
    statuses are returned in the ``ApiResult``.
    """

    def __init__(
        self,
        config: ObjectsClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        retry_policy: RetryPolicy | None = None,
        sleep: Sleep = asyncio.sleep,
    ):
        """Initialize the objects client.

        Args:
            config: Client configuration
            transport: Optional transport replacing the network
            retry_policy: Retry configuration
            sleep: Awaitable used to wait between attempts
        """
        self.config = config or ObjectsClientConfig()
        super().__init__(
            "Objects",
            self.config.base_url,
            self.config.timeout,
            transport=transport,
            retry_policy=retry_policy,
            sleep=sleep,
            log_payloads=self.config.log_payloads,
        )

    @property
    def collection_path(self) -> str:
        return "/" + self.config.collection.strip("/")

    def item_path(self, object_id: str) -> str:
        """Path of a single object, with the identifier fully percent-escaped."""
        return f"{self.collection_path}/{quote(object_id, safe='')}"

    @staticmethod
    def _result(response: httpx.Response, target: Any) -> ApiResult[Any]:
        # Error bodies ({"error": ...}) are never an entity
        if not response.is_success:
            return ApiResult(response.status_code, None)
        return ApiResult(response.status_code, decode_json_or_none(response, target))

    async def list_objects_raw(self) -> httpx.Response:
        """GET the collection and return the undecoded response."""
        return await self._send("GET", self.collection_path)

    async def list_objects(self) -> ApiResult[list[ObjectResponse]]:
        """GET the whole collection."""
        response = await self.list_objects_raw()
        return self._result(response, list[ObjectResponse])

    async def get_objects_by_ids(self, object_ids: Iterable[str]) -> ApiResult[list[ObjectResponse]]:
        """GET the collection filtered to the given identifiers."""
        params = [("id", object_id) for object_id in object_ids]
        response = await self._send("GET", self.collection_path, params=params)
        return self._result(response, list[ObjectResponse])

    async def create(self, request: ObjectCreateRequest) -> ApiResult[ObjectResponse]:
        """POST a new object.

        A 2xx status alone does not prove creation; callers should also check
        that the returned body carries an ``id`` and ``created_at``.
        """
        response = await self._send("POST", self.collection_path, json=request.to_payload())
        return self._result(response, ObjectResponse)

    async def create_object(self, name: str, data: ObjectData | None = None) -> ApiResult[ObjectResponse]:
        return await self.create(ObjectCreateRequest(name=name, data=data))

    async def get_by_id(self, object_id: str) -> ApiResult[ObjectResponse]:
        """GET one object. Unknown identifiers come back as a non-success status."""
        response = await self._send("GET", self.item_path(object_id))
        return self._result(response, ObjectResponse)

    async def update(self, object_id: str, request: ObjectCreateRequest) -> ApiResult[ObjectResponse]:
        """PUT a full replacement: attributes missing from ``request.data`` are dropped."""
        response = await self._send("PUT", self.item_path(object_id), json=request.to_payload())
        return self._result(response, ObjectResponse)

    async def update_object(
        self, object_id: str, name: str, data: ObjectData | None = None
    ) -> ApiResult[ObjectResponse]:
        return await self.update(object_id, ObjectCreateRequest(name=name, data=data))

    async def delete(self, object_id: str) -> ApiResult[DeleteResponse]:
        """DELETE one object. The returned message is informational only."""
        response = await self._send("DELETE", self.item_path(object_id))
        return self._result(response, DeleteResponse)
