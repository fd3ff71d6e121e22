"""Tests for resource path resolution."""

from pathlib import Path

from airportdb.core.resource_path import (
    get_config_path,
    get_data_path,
    get_project_root,
    get_resource_path,
)


def test_project_root_holds_sources() -> None:
    """Test the root is the directory containing src/airportdb."""
    assert (get_project_root() / "src" / "airportdb").is_dir()


def test_config_and_data_paths() -> None:
    """Test config and data files live under the project root."""
    assert get_config_path("settings.yaml") == get_project_root() / "config" / "settings.yaml"
    assert get_data_path("airports.csv") == get_project_root() / "data" / "airports.csv"


def test_bundled_settings_exist() -> None:
    """Test the shipped configuration files are found."""
    assert get_config_path("settings.yaml").exists()
    assert get_config_path("logging.yaml").exists()


def test_absolute_path_unchanged(tmp_path: Path) -> None:
    """Test absolute paths bypass the project root."""
    assert get_resource_path(tmp_path) == tmp_path
