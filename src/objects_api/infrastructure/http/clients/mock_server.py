"""In-memory emulation of the remote /objects resource for offline runs."""

from __future__ import annotations

import asyncio
import json
import random
import time
import uuid
from collections import deque
from typing import Any
from urllib.parse import parse_qs, unquote

import httpx
from pydantic import BaseModel, Field

BAD_BODY_ERROR = (
    "400 Bad Request. If you are trying to create or update the data, "
    "potential issue is that you are sending incorrect body json or it is missing at all."
)

SEED_OBJECTS: list[dict[str, Any]] = [
    {"id": "1", "name": "Google Pixel 6 Pro", "data": {"color": "Cloudy White", "capacity": "128 GB"}},
    {"id": "2", "name": "Apple iPhone 12 Mini, 256GB, Blue", "data": None},
    {"id": "3", "name": "Apple iPhone 12 Pro Max", "data": {"color": "Cloudy White", "capacity GB": 512}},
]


class MockConfig(BaseModel):
    """Configuration for the mock objects API."""

    collection: str = "objects"
    seed_reserved_objects: bool = True
    simulate_delay: bool = False
    min_delay_ms: int = Field(default=5, ge=0)
    max_delay_ms: int = Field(default=50, ge=0)
    failure_rate: float = Field(default=0.0, ge=0.0, le=1.0)  # 0.0 = no failures, 1.0 = always fail
    failure_status: int = 503
    random_seed: int | None = None


class MockObjectsApi:
    """Stateful fake of the objects API served through ``httpx.MockTransport``.

    Identifiers and timestamps are assigned here, never by the caller. Seeded
    objects are reserved and reject PUT and DELETE with 405, as the public
    service does.
    """

    def __init__(self, config: MockConfig | None = None):
        self.config = config or MockConfig()
        self.objects: dict[str, dict[str, Any]] = {}
        self.reserved_ids: set[str] = set()
        self.requests: list[httpx.Request] = []
        self._scripted: deque[int | Exception] = deque()
        self._random = random.Random(self.config.random_seed)

        if self.config.seed_reserved_objects:
            for obj in SEED_OBJECTS:
                self.objects[obj["id"]] = dict(obj)
                self.reserved_ids.add(obj["id"])

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def fail_next(self, *outcomes: int | Exception) -> None:
        """Queue outcomes served before normal handling.

        An int is returned as a bare response with that status; an exception
        instance is raised from the transport.
        """
        self._scripted.extend(outcomes)

    def count_requests(self, method: str | None = None) -> int:
        if method is None:
            return len(self.requests)
        return sum(1 for r in self.requests if r.method == method.upper())

    async def handle(self, request: httpx.Request) -> httpx.Response:
        """Serve one request."""
        self.requests.append(request)

        if self.config.simulate_delay:
            await asyncio.sleep(self._random.randint(self.config.min_delay_ms, self.config.max_delay_ms) / 1000)

        if self._scripted:
            outcome = self._scripted.popleft()
            if isinstance(outcome, Exception):
                raise outcome
            return httpx.Response(outcome, json={"error": f"Scripted status {outcome}"})

        if self.config.failure_rate > 0 and self._random.random() < self.config.failure_rate:
            return httpx.Response(self.config.failure_status, json={"error": "Simulated failure"})

        return self._route(request)

    def _route(self, request: httpx.Request) -> httpx.Response:
        raw_path, _, raw_query = request.url.raw_path.decode("ascii").partition("?")
        prefix = "/" + self.config.collection.strip("/")

        if raw_path.rstrip("/") == prefix:
            if request.method == "GET":
                return self._list(parse_qs(raw_query).get("id"))
            if request.method == "POST":
                return self._create(request)
            return self._method_not_allowed(request)

        if raw_path.startswith(prefix + "/"):
            object_id = unquote(raw_path[len(prefix) + 1 :])
            if request.method == "GET":
                return self._get(object_id)
            if request.method == "PUT":
                return self._replace(object_id, request)
            if request.method == "DELETE":
                return self._delete(object_id)
            return self._method_not_allowed(request)

        return httpx.Response(404, json={"error": f"Path {raw_path} not found"})

    def _list(self, ids: list[str] | None) -> httpx.Response:
        if ids is None:
            items = list(self.objects.values())
        else:
            items = [self.objects[i] for i in ids if i in self.objects]
        return httpx.Response(200, json=[self._public_view(obj) for obj in items])

    def _create(self, request: httpx.Request) -> httpx.Response:
        body = self._parse_body(request)
        if body is None:
            return httpx.Response(400, json={"error": BAD_BODY_ERROR})

        object_id = uuid.uuid4().hex
        obj = {"id": object_id, "name": body.get("name"), "data": body.get("data"), "createdAt": _now_ms()}
        self.objects[object_id] = obj
        return httpx.Response(200, json=dict(obj))

    def _get(self, object_id: str) -> httpx.Response:
        obj = self.objects.get(object_id)
        if obj is None:
            return self._not_found(object_id)
        return httpx.Response(200, json=self._public_view(obj))

    def _replace(self, object_id: str, request: httpx.Request) -> httpx.Response:
        if object_id in self.reserved_ids:
            return self._reserved(object_id, "updated")
        obj = self.objects.get(object_id)
        if obj is None:
            return self._not_found(object_id)

        body = self._parse_body(request)
        if body is None:
            return httpx.Response(400, json={"error": BAD_BODY_ERROR})

        obj["name"] = body.get("name")
        obj["data"] = body.get("data")
        obj["updatedAt"] = max(_now_ms(), obj["createdAt"])
        return httpx.Response(
            200, json={"id": object_id, "name": obj["name"], "data": obj["data"], "updatedAt": obj["updatedAt"]}
        )

    def _delete(self, object_id: str) -> httpx.Response:
        if object_id in self.reserved_ids:
            return self._reserved(object_id, "deleted")
        if self.objects.pop(object_id, None) is None:
            return self._not_found(object_id)
        return httpx.Response(200, json={"message": f"Object with id = {object_id} has been deleted."})

    @staticmethod
    def _parse_body(request: httpx.Request) -> dict[str, Any] | None:
        try:
            body = json.loads(request.content or b"")
        except ValueError:
            return None
        if not isinstance(body, dict):
            return None
        if body.get("data") is not None and not isinstance(body["data"], dict):
            return None
        return body

    @staticmethod
    def _public_view(obj: dict[str, Any]) -> dict[str, Any]:
        return {"id": obj["id"], "name": obj["name"], "data": obj["data"]}

    @staticmethod
    def _not_found(object_id: str) -> httpx.Response:
        return httpx.Response(404, json={"error": f"Object with id={object_id} was not found."})

    @staticmethod
    def _reserved(object_id: str, verb: str) -> httpx.Response:
        return httpx.Response(
            405, json={"error": f"{object_id} is a reserved id and the data object of it cannot be {verb}."}
        )

    @staticmethod
    def _method_not_allowed(request: httpx.Request) -> httpx.Response:
        return httpx.Response(405, json={"error": f"Method {request.method} not allowed"})


def _now_ms() -> int:
    return int(time.time() * 1000)
