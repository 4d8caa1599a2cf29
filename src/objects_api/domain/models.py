"""Wire models for the /objects resource.

Attribute maps are typed as ``dict[str, JsonValue]`` so that strings, integers,
floats, booleans, nulls and nested containers survive a create/read cycle
without coercion.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, JsonValue, field_validator

ObjectData = dict[str, JsonValue]


class ObjectCreateRequest(BaseModel):
    """Request body for create (POST) and full-replace update (PUT)."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Display name, assigned by the caller and not required to be unique")
    data: ObjectData | None = Field(default=None, description="Free-form attribute map, serialized verbatim")

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON document sent on the wire."""
        return self.model_dump(mode="json", by_alias=True)


class ObjectResponse(BaseModel):
    """Entity view returned by the remote API."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str | None = None
    name: str | None = None
    data: ObjectData | None = None
    created_at: int | None = Field(default=None, alias="createdAt", description="Epoch milliseconds")
    updated_at: int | None = Field(default=None, alias="updatedAt", description="Epoch milliseconds")

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def normalize_timestamp(cls, v: Any) -> Any:
        """Accept epoch milliseconds or ISO-8601 strings, yield epoch milliseconds."""
        if v is None or isinstance(v, bool):
            return v
        if isinstance(v, int | float):
            return int(v)
        if isinstance(v, str):
            text = v.strip()
            if text.lstrip("-").isdigit():
                return int(text)
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=timezone.utc)
            return round(parsed.timestamp() * 1000)
        return v


class DeleteResponse(BaseModel):
    """Advisory body returned by DELETE."""

    model_config = ConfigDict(extra="ignore")

    message: str | None = None
