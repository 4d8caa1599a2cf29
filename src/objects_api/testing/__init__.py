"""Test harness helpers: fixture loading, assertions and scoped cleanup."""

from .assertions import (
    CREATE_ACCEPTABLE,
    DELETE_ACCEPTABLE,
    assert_delete_acceptable,
    assert_ok_or_created,
    make_unique,
    require_boolean,
    require_integer,
    require_number,
    require_string,
)
from .cleanup import ManagedObject, managed_object
from .data_loader import PACKAGED_DATA_DIR, load_fixture, load_fixture_raw

__all__ = [
    "CREATE_ACCEPTABLE",
    "DELETE_ACCEPTABLE",
    "assert_ok_or_created",
    "assert_delete_acceptable",
    "make_unique",
    "require_string",
    "require_number",
    "require_integer",
    "require_boolean",
    "ManagedObject",
    "managed_object",
    "PACKAGED_DATA_DIR",
    "load_fixture",
    "load_fixture_raw",
]
