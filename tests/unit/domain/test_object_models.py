"""Tests for the /objects wire models."""

import time

import pytest
from pydantic import ValidationError

from objects_api.domain import DeleteResponse, ObjectCreateRequest, ObjectResponse, StatusClass


class TestObjectCreateRequest:
    """Test cases for ObjectCreateRequest."""

    def test_payload_includes_null_data(self):
        assert ObjectCreateRequest(name="Bare").to_payload() == {"name": "Bare", "data": None}

    def test_payload_preserves_value_types(self):
        data = {"year": 2019, "price": 1849.99, "CPU model": "Intel Core i9", "active": True, "tags": ["a", 1]}

        payload = ObjectCreateRequest(name="Laptop", data=data).to_payload()

        assert payload["data"] == data
        assert type(payload["data"]["year"]) is int
        assert type(payload["data"]["active"]) is bool

    def test_empty_name_is_allowed(self):
        assert ObjectCreateRequest(name="").name == ""

    def test_name_is_required(self):
        with pytest.raises(ValidationError):
            ObjectCreateRequest()  # type: ignore[call-arg]

    def test_data_must_be_a_map(self):
        with pytest.raises(ValidationError):
            ObjectCreateRequest(name="x", data=["not", "a", "map"])  # type: ignore[arg-type]

    def test_is_frozen(self):
        request = ObjectCreateRequest(name="x")

        with pytest.raises(ValidationError):
            request.name = "y"  # type: ignore[misc]


class TestObjectResponse:
    """Test cases for ObjectResponse."""

    def test_validates_wire_names(self):
        response = ObjectResponse.model_validate(
            {"id": "ff80", "name": "N", "data": {"k": "v"}, "createdAt": 1700000000000, "updatedAt": 1700000005000}
        )

        assert response.id == "ff80"
        assert response.created_at == 1700000000000
        assert response.updated_at == 1700000005000

    def test_accepts_field_names(self):
        assert ObjectResponse(id="a", created_at=5).created_at == 5

    def test_all_fields_optional(self):
        response = ObjectResponse.model_validate({})

        assert response.id is None
        assert response.name is None
        assert response.data is None
        assert response.created_at is None

    def test_unknown_fields_are_ignored(self):
        response = ObjectResponse.model_validate({"id": "a", "extra": 1})

        assert not hasattr(response, "extra")

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (1669060899419, 1669060899419),
            (1669060899419.0, 1669060899419),
            ("1669060899419", 1669060899419),
            ("2022-11-21T20:01:39.419+00:00", 1669060899419),
            ("2022-11-21T20:01:39.419Z", 1669060899419),
            ("2022-11-21T22:01:39.419+02:00", 1669060899419),
        ],
    )
    def test_timestamp_normalization(self, raw, expected):
        assert ObjectResponse.model_validate({"createdAt": raw}).created_at == expected

    @pytest.mark.parametrize("tz", ["UTC", "America/New_York", "Asia/Tokyo"])
    def test_naive_iso_timestamp_is_utc(self, monkeypatch, tz):
        monkeypatch.setenv("TZ", tz)
        time.tzset()
        try:
            response = ObjectResponse.model_validate({"createdAt": "2022-11-21T20:01:39.419"})
        finally:
            monkeypatch.undo()
            time.tzset()

        assert response.created_at == 1669060899419

    def test_invalid_timestamp(self):
        with pytest.raises(ValidationError):
            ObjectResponse.model_validate({"updatedAt": "yesterday"})

    def test_dumps_wire_names(self):
        response = ObjectResponse(id="a", name="n", created_at=1)

        assert response.model_dump(by_alias=True)["createdAt"] == 1


class TestDeleteResponse:
    """Test cases for DeleteResponse."""

    def test_message(self):
        assert DeleteResponse.model_validate({"message": "gone"}).message == "gone"

    def test_message_optional(self):
        assert DeleteResponse.model_validate({}).message is None


class TestStatusClass:
    """Test cases for StatusClass."""

    @pytest.mark.parametrize(
        "status, expected",
        [
            (100, StatusClass.INFORMATIONAL),
            (201, StatusClass.SUCCESS),
            (304, StatusClass.REDIRECTION),
            (429, StatusClass.CLIENT_ERROR),
            (500, StatusClass.SERVER_ERROR),
            (600, StatusClass.UNKNOWN),
            (0, StatusClass.UNKNOWN),
        ],
    )
    def test_from_status(self, status, expected):
        assert StatusClass.from_status(status) is expected
