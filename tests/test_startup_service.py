"""
Tests for the startup load result
"""
from unittest.mock import Mock

import pytest

from conftest import write_bundle
from domain.errors import DataDecodeError, ResourceNotFoundError
from repositories.bundle import BundleDecoder
from repositories.mission_repo import MissionRepository
from services.startup_service import StartupResult, load_catalog


class TestLoadCatalog:
    def test_ok(self, armstrong_bundle):
        result = load_catalog(MissionRepository(BundleDecoder(armstrong_bundle)))
        assert result.is_ok
        assert result.fault is None
        assert result.message == ""
        assert result.catalog.missions[0].id == 11

    def test_missing_file_is_captured_not_raised(self, tmp_path):
        result = load_catalog(MissionRepository(BundleDecoder(tmp_path)))
        assert not result.is_ok
        assert result.catalog is None
        assert isinstance(result.fault, ResourceNotFoundError)
        assert "astronauts.json" in result.message

    def test_malformed_file_is_captured(self, tmp_path):
        bundle = write_bundle(tmp_path, {}, [{"id": 8, "launchDate": "Dec 21", "crew": [], "description": ""}])
        result = load_catalog(MissionRepository(BundleDecoder(bundle)))
        assert isinstance(result.fault, DataDecodeError)
        assert "missions.json" in result.message

    def test_unparseable_json_is_captured(self, tmp_path):
        bundle = write_bundle(tmp_path, {}, None)
        (bundle / "missions.json").write_text("[" * 200000 + "]" * 200000, encoding="utf-8")
        result = load_catalog(MissionRepository(BundleDecoder(bundle)))
        assert isinstance(result.fault, DataDecodeError)
        assert "missions.json" in result.message

    def test_other_errors_propagate(self):
        repo = Mock()
        repo.load_catalog.side_effect = RuntimeError("boom")
        with pytest.raises(RuntimeError):
            load_catalog(repo)


class TestStartupResult:
    def test_requires_exactly_one_outcome(self, sample_catalog):
        with pytest.raises(ValueError):
            StartupResult()
        with pytest.raises(ValueError):
            StartupResult(catalog=sample_catalog, fault=DataDecodeError("x"))
