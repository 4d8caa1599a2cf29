"""Domain layer - entity models and status classification."""

from .enums import StatusClass
from .models import DeleteResponse, ObjectCreateRequest, ObjectData, ObjectResponse

__all__ = [
    "StatusClass",
    "ObjectData",
    "ObjectCreateRequest",
    "ObjectResponse",
    "DeleteResponse",
]
