"""Tests for shared utilities."""

import pytest
from pathlib import Path

from countryidentity.utils.build_utils import expand_aliases
from countryidentity.utils.dataloader import (
    find_data_file,
    load_records_file,
    format_not_found_error,
)


class TestFindDataFile:
    """Test data file finding utility"""

    def test_find_module_local_data(self):
        """Test finding the packaged country table"""
        from countryidentity.countries import countryindex
        path = find_data_file(
            module_file=countryindex.__file__,
            filenames=["countries.yaml"],
        )
        assert path is not None
        assert path.exists()
        assert path.name == "countries.yaml"

    def test_env_var_takes_priority(self, tmp_path, monkeypatch):
        """Test that an existing env var path wins over package data"""
        from countryidentity.countries import countryindex
        override = tmp_path / "override.csv"
        override.write_text("code,name\nFR,France\n", encoding="utf-8")
        monkeypatch.setenv("TEST_COUNTRY_DATA", str(override))

        path = find_data_file(countryindex.__file__, ["countries.yaml"], env_var="TEST_COUNTRY_DATA")
        assert path == override

    def test_missing_env_path_falls_back(self, tmp_path, monkeypatch):
        from countryidentity.countries import countryindex
        monkeypatch.setenv("TEST_COUNTRY_DATA", str(tmp_path / "missing.csv"))

        path = find_data_file(countryindex.__file__, ["countries.yaml"], env_var="TEST_COUNTRY_DATA")
        assert path.name == "countries.yaml"

    def test_find_nonexistent_file(self, tmp_path):
        """Test that None is returned when file not found"""
        path = find_data_file(
            module_file=str(tmp_path / "module.py"),
            filenames=["missing.yaml"],
        )
        assert path is None


class TestLoadRecordsFile:
    """Test data loading utility"""

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "data.yml"
        path.write_text("countries:\n  - {code: CL, names: [Chile]}\n", encoding="utf-8")

        assert load_records_file(path, "countries") == [{"code": "CL", "names": ["Chile"]}]

    def test_load_csv_keeps_strings(self, tmp_path):
        """Test that 'NA' (Namibia) is not read as missing"""
        path = tmp_path / "data.csv"
        path.write_text("code,name,alias1\nNA,Namibia,\n", encoding="utf-8")

        assert load_records_file(path, "countries") == [{"code": "NA", "name": "Namibia", "alias1": ""}]

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "data.parquet"
        path.write_bytes(b"")
        with pytest.raises(ValueError, match="Unsupported file format"):
            load_records_file(path, "countries")

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "data.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ValueError, match="Expected a list"):
            load_records_file(path, "countries")


class TestFormatNotFoundError:
    """Test error message formatting"""

    def test_message(self):
        msg = format_not_found_error(
            "countries",
            [("Package data", Path("/pkg/countries/data/countries.yaml"))],
            ["Set COUNTRYIDENTITY_DATA_PATH"],
        )
        assert "No countries data found" in msg
        assert "1. Package data: /pkg/countries/data/countries.yaml" in msg
        assert "Set COUNTRYIDENTITY_DATA_PATH" in msg


class TestExpandAliases:
    """Test alias column expansion"""

    def test_expand(self):
        result = expand_aliases(["Swaziland", "Kingdom of Eswatini"])
        assert result["alias1"] == "Swaziland"
        assert result["alias2"] == "Kingdom of Eswatini"
        assert result["alias3"] == ""
        assert len(result) == 10

    def test_none(self):
        assert set(expand_aliases(None).values()) == {""}

    def test_max_columns(self):
        assert list(expand_aliases(["a", "b", "c"], max_columns=2)) == ["alias1", "alias2"]

    def test_overflow_dropped(self):
        result = expand_aliases([f"name{i}" for i in range(12)])
        assert len(result) == 10
        assert result["alias10"] == "name9"
