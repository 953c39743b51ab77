"""Tests for reading settings documents."""

import pytest

from nmskeys.exceptions import DocumentLoadError, NmsKeysError
from nmskeys.services.document_loader import load_bindings, load_document, parse_document


class TestLoadDocument:
    def test_returns_document_element(self, settings_file):
        root = load_document(settings_file)
        assert root.tag == "Data"
        assert root.get("template") == "GcUserSettingsData"

    def test_accepts_string_path(self, settings_file):
        assert load_document(str(settings_file)).tag == "Data"

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "nope.MXML"
        with pytest.raises(DocumentLoadError) as exc_info:
            load_document(missing)
        assert exc_info.value.context["path"] == str(missing)
        assert "not found" in str(exc_info.value)

    def test_directory_is_not_a_document(self, tmp_path):
        with pytest.raises(DocumentLoadError):
            load_document(tmp_path)

    def test_malformed_document(self, broken_file):
        with pytest.raises(DocumentLoadError, match="well-formed"):
            load_document(broken_file)

    def test_error_is_an_nmskeys_error(self, broken_file):
        with pytest.raises(NmsKeysError):
            load_document(broken_file)


class TestParseDocument:
    def test_parses_text(self, scenario_xml):
        assert parse_document(scenario_xml).tag == "Data"

    def test_rejects_malformed_text(self):
        with pytest.raises(DocumentLoadError) as exc_info:
            parse_document("<Data>", source="inline")
        assert exc_info.value.context == {"path": "inline"}


class TestLoadBindings:
    def test_runs_extraction(self, settings_file):
        result = load_bindings(settings_file)
        assert [r.action_name for r in result.records] == ["ToggleMap", "Boost"]
        assert result.catalogue() == ["All", "FRONTEND", "SHIP"]

    def test_document_without_bindings(self, tmp_path):
        path = tmp_path / "empty.MXML"
        path.write_text('<Data template="GcUserSettingsData" />')
        result = load_bindings(path)
        assert result.records == []
        assert result.groups == []
