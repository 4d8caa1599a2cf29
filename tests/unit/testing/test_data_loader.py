"""Tests for the JSON fixture loader."""

import json

import pytest

from objects_api.config import get_settings
from objects_api.core.exceptions import FixtureNotFoundError
from objects_api.domain import ObjectResponse
from objects_api.testing import PACKAGED_DATA_DIR, load_fixture, load_fixture_raw
from objects_api.testing.data_loader import fixture_dir


class TestLoadFixture:
    """Test cases for load_fixture."""

    def test_create_template(self):
        request = load_fixture("create-ipad.json")

        assert request.name == "Apple iPad Air"
        assert request.data["capacity"] == "256 GB"
        assert request.data["price"] == 799.99
        assert request.data["screenSize"] == 10.9

    def test_update_template(self):
        request = load_fixture("update-ipad.json")

        assert request.name == "Apple iPad Air (Updated)"
        assert request.data["capacity"] == "512 GB"
        assert request.data["color"] == "Space Gray"

    def test_missing_file(self):
        with pytest.raises(FixtureNotFoundError) as exc_info:
            load_fixture("missing.json")

        assert exc_info.value.path == PACKAGED_DATA_DIR / "missing.json"
        assert isinstance(exc_info.value, FileNotFoundError)

    def test_custom_directory_and_model(self, tmp_path):
        (tmp_path / "entity.json").write_text(json.dumps({"id": "7", "createdAt": 10}), encoding="utf-8")

        response = load_fixture("entity.json", ObjectResponse, data_dir=tmp_path)

        assert response == ObjectResponse(id="7", created_at=10)

    def test_raw_document(self):
        raw = load_fixture_raw("create-ipad.json")

        assert raw["data"]["brand"] == "Apple"

    def test_raw_missing_file(self, tmp_path):
        with pytest.raises(FixtureNotFoundError):
            load_fixture_raw("missing.json", data_dir=tmp_path)


class TestFixtureDir:
    """Test cases for fixture directory resolution."""

    def test_defaults_to_packaged_data(self, monkeypatch):
        monkeypatch.delenv("TEST_DATA_DIR", raising=False)
        get_settings.cache_clear()

        try:
            assert fixture_dir() == PACKAGED_DATA_DIR
        finally:
            get_settings.cache_clear()

    def test_environment_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TEST_DATA_DIR", str(tmp_path))
        get_settings.cache_clear()

        try:
            assert fixture_dir() == tmp_path
        finally:
            get_settings.cache_clear()
