"""Tests for config loading and saving"""

import pytest

from repotyper.core.config import (
    ConfigInvalidError,
    ConfigNotFoundError,
    config_exists,
    create_config,
    get_config_path,
    load_config,
)


def test_create_and_load_config(tmp_path, monkeypatch):
    """Test a created config round-trips through YAML"""
    monkeypatch.chdir(tmp_path)

    created = create_config(str(tmp_path), stop_on_error=True, tab_size=4)

    assert config_exists()
    loaded = load_config()
    assert loaded == created
    assert loaded.settings.stop_on_error
    assert loaded.settings.tab_size == 4
    assert loaded.folder_path == tmp_path


def test_missing_config(tmp_path, monkeypatch):
    """Test loading without a config file"""
    monkeypatch.chdir(tmp_path)

    assert not config_exists()
    with pytest.raises(ConfigNotFoundError):
        load_config()


@pytest.mark.parametrize(
    "content",
    [
        "",
        "folder: [unclosed\n",
        "folder: relative/path\n",
        "folder: /abs\nsettings:\n  tab_size: 0\n",
    ],
)
def test_invalid_config(tmp_path, monkeypatch, content):
    """Test empty, malformed and invalid config files"""
    monkeypatch.chdir(tmp_path)
    config_path = get_config_path()
    config_path.parent.mkdir()
    config_path.write_text(content)

    with pytest.raises(ConfigInvalidError):
        load_config()


def test_create_config_rejects_relative_folder(tmp_path, monkeypatch):
    """Test validation errors surface as ConfigInvalidError"""
    monkeypatch.chdir(tmp_path)

    with pytest.raises(ConfigInvalidError):
        create_config("relative")
    assert not config_exists()
