"""
Unit tests for the ConfigAccessor class and the NuGet settings in dmcommon.config.
"""

from datetime import timedelta
from unittest.mock import patch

import pytest

from dmcommon import config as config_module
from dmcommon.config import (
    DEFAULT_NUGET_INDEX_URL,
    ConfigAccessor,
    config_dir,
    get_devpack_cache_duration,
    get_nuget_index_url,
    set_config,
)


@pytest.fixture
def temp_config_file(tmp_path):
    """Create a temporary config file for testing."""
    path = tmp_path / "dmcommon.cfg"
    path.write_text(
        """
[nuget]
index_url = https://feed.example/v3/index.json
cache_minutes = 2.5

[another_section]
key3 = value3
"""
    )
    return path


@pytest.fixture
def global_config():
    """Restore the global config accessor after the test."""
    yield
    set_config(None)


@pytest.mark.short
def test_config_accessor_get_existing(temp_config_file):
    """Test getting existing values from the config."""
    config = ConfigAccessor(temp_config_file)

    assert config.get("nuget", "index_url") == "https://feed.example/v3/index.json"
    assert config.get("another_section", "key3") == "value3"


@pytest.mark.short
def test_config_accessor_get_missing_with_default(temp_config_file):
    """Test getting missing values with defaults."""
    config = ConfigAccessor(temp_config_file)

    assert config.get("nuget", "missing_key", default="default") == "default"
    assert config.get("missing_section", "key", default="default") == "default"
    assert config.get("missing_section", "key") is None


@pytest.mark.short
def test_config_accessor_set_and_save(tmp_path):
    """Test setting values and saving to config file."""
    path = tmp_path / "new.cfg"
    config = ConfigAccessor(path)

    config.set("nuget", "cache_minutes", "5")
    config.save()

    new_config = ConfigAccessor(path)
    assert new_config.get("nuget", "cache_minutes") == "5"
    assert new_config.sections() == ["nuget"]


@pytest.mark.short
def test_save_failure_is_logged_not_raised(tmp_path, caplog):
    """Test that saving gracefully handles unwritable files."""
    config = ConfigAccessor(tmp_path / "test.cfg")
    config.set("section", "key", "value")

    with patch("builtins.open", side_effect=PermissionError("read-only")):
        config.save()

    assert "Could not save configuration" in caplog.text
    assert config.get("section", "key") == "value"


@pytest.mark.short
def test_default_config_path(tmp_path, monkeypatch):
    """Test that ConfigAccessor uses the default path when none is provided."""
    monkeypatch.setattr(config_module, "config_dir", tmp_path / "cfg")

    config = ConfigAccessor()

    assert config.config_path == tmp_path / "cfg" / "dmcommon.cfg"
    assert (tmp_path / "cfg").is_dir()
    assert config_dir.name == "dmcommon"


@pytest.mark.short
def test_init_dirs_failure_is_logged(tmp_path, monkeypatch, caplog):
    """Test that init_dirs handles directory creation errors gracefully."""
    monkeypatch.setattr(config_module, "config_dir", tmp_path / "cfg")

    with patch("os.makedirs", side_effect=OSError("read-only file system")):
        config_module.init_dirs()

    assert "Could not create config directory" in caplog.text


@pytest.mark.short
def test_nuget_settings(temp_config_file, global_config):
    set_config(ConfigAccessor(temp_config_file))

    assert get_nuget_index_url() == "https://feed.example/v3/index.json"
    assert get_devpack_cache_duration() == timedelta(minutes=2.5)


@pytest.mark.short
def test_nuget_settings_defaults(tmp_path, global_config):
    set_config(ConfigAccessor(tmp_path / "empty.cfg"))

    assert get_nuget_index_url() == DEFAULT_NUGET_INDEX_URL
    assert get_devpack_cache_duration() == timedelta(minutes=10)


@pytest.mark.short
@pytest.mark.parametrize("value", ["soon", "-1"])
def test_invalid_cache_duration(tmp_path, global_config, caplog, value):
    config = ConfigAccessor(tmp_path / "dmcommon.cfg")
    config.set("nuget", "cache_minutes", value)
    set_config(config)

    assert get_devpack_cache_duration() == timedelta(minutes=10)
    assert "Invalid nuget.cache_minutes" in caplog.text
