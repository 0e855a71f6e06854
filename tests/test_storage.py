"""Tests for preference storage."""

import json
import logging
import os
from unittest.mock import patch

import pytest

from passgen.storage import (
    Config,
    ConfigFormatError,
    ConfigManager,
    FileConfigManager,
    MemoryConfigManager,
)


@pytest.fixture
def config_path(tmp_path):
    return str(tmp_path / "prefs" / "config.json")


def _write(path, text):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


class TestConfig:
    def test_default_is_hidden(self):
        assert Config().show_password is False

    def test_to_dict_has_single_field(self):
        assert Config(show_password=True).to_dict() == {"show_password": True}

    def test_from_dict_ignores_unknown_fields(self):
        cfg = Config.from_dict({"show_password": True, "theme": "dark", "version": 3})
        assert cfg == Config(show_password=True)

    def test_from_dict_missing_field_means_hidden(self):
        assert Config.from_dict({}) == Config(show_password=False)

    @pytest.mark.parametrize("data", [[], "true", 1, None])
    def test_from_dict_rejects_non_objects(self, data):
        with pytest.raises(ConfigFormatError):
            Config.from_dict(data)

    @pytest.mark.parametrize("value", ["yes", 1, 0, None, [True]])
    def test_from_dict_rejects_non_bool(self, value):
        with pytest.raises(ConfigFormatError):
            Config.from_dict({"show_password": value})


class TestFileConfigManager:
    @pytest.mark.parametrize("value", [True, False])
    def test_round_trip(self, config_path, value):
        manager = FileConfigManager(config_path)
        manager.save(Config(show_password=value))
        assert manager.last_error is None
        assert FileConfigManager(config_path).load() == Config(show_password=value)

    def test_saved_file_holds_exactly_one_field(self, config_path):
        FileConfigManager(config_path).save(Config(show_password=True))
        with open(config_path, encoding="utf-8") as f:
            assert json.load(f) == {"show_password": True}
        assert not os.path.exists(config_path + ".tmp")

    def test_missing_file_falls_back(self, config_path):
        manager = FileConfigManager(config_path)
        assert manager.load() == Config(show_password=False)
        assert isinstance(manager.last_error, FileNotFoundError)

    @pytest.mark.parametrize("content", [
        "{not json",
        "",
        "[true]",
        '"show_password"',
        '{"show_password": "yes"}',
        '{"show_password": 1}',
    ])
    def test_corrupt_file_falls_back(self, config_path, content, caplog):
        _write(config_path, content)
        manager = FileConfigManager(config_path)
        with caplog.at_level(logging.WARNING, logger="passgen.storage"):
            assert manager.load() == Config(show_password=False)
        assert isinstance(manager.last_error, ValueError)
        assert "Ignoring unreadable preferences file" in caplog.text

    @pytest.mark.parametrize("opener", ["[", "{\"a\": "])
    def test_deeply_nested_file_falls_back(self, config_path, opener, caplog):
        _write(config_path, opener * 200000)
        manager = FileConfigManager(config_path)
        with caplog.at_level(logging.WARNING, logger="passgen.storage"):
            assert manager.load() == Config(show_password=False)
        assert isinstance(manager.last_error, RecursionError)
        assert "Ignoring unreadable preferences file" in caplog.text

    def test_undecodable_file_falls_back(self, config_path):
        os.makedirs(os.path.dirname(config_path), exist_ok=True)
        with open(config_path, "wb") as f:
            f.write(b"\xff\xfe\x00garbage")
        manager = FileConfigManager(config_path)
        assert manager.load() == Config()
        assert manager.last_error is not None

    def test_unknown_fields_ignored(self, config_path):
        _write(config_path, '{"show_password": true, "window": {"x": 10}}')
        manager = FileConfigManager(config_path)
        assert manager.load() == Config(show_password=True)
        assert manager.last_error is None

    def test_clean_load_clears_last_error(self, config_path):
        manager = FileConfigManager(config_path)
        manager.load()
        assert manager.last_error is not None
        manager.save(Config(show_password=True))
        assert manager.load() == Config(show_password=True)
        assert manager.last_error is None

    def test_directory_as_path_falls_back(self, tmp_path):
        manager = FileConfigManager(str(tmp_path))
        assert manager.load() == Config()
        assert isinstance(manager.last_error, OSError)

    def test_save_onto_directory_reports_failure(self, tmp_path):
        target = tmp_path / "prefs"
        target.mkdir()
        manager = FileConfigManager(str(target))
        manager.save(Config(show_password=True))
        assert isinstance(manager.last_error, OSError)
        assert os.listdir(str(target)) == []
        assert not os.path.exists(str(target) + ".tmp")
        assert manager.load() == Config()

    def test_save_failure_is_swallowed(self, config_path, caplog):
        manager = FileConfigManager(config_path)
        with patch("passgen.storage.os.replace", side_effect=PermissionError("read-only")):
            with caplog.at_level(logging.ERROR, logger="passgen.storage"):
                manager.save(Config(show_password=True))
        assert isinstance(manager.last_error, PermissionError)
        assert "Error saving preferences file" in caplog.text
        assert not os.path.exists(config_path + ".tmp")
        assert not os.path.exists(config_path)

    def test_save_into_unwritable_location_is_swallowed(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        manager = FileConfigManager(str(blocker / "config.json"))
        manager.save(Config(show_password=True))
        assert isinstance(manager.last_error, OSError)

    def test_default_path_is_in_home(self, tmp_path):
        with patch("passgen.storage.os.path.expanduser", return_value=str(tmp_path)):
            manager = FileConfigManager()
        assert manager.filepath == os.path.join(str(tmp_path), ".passgen", "config.json")


class TestMemoryConfigManager:
    def test_defaults_before_save(self):
        assert MemoryConfigManager().load() == Config()

    def test_round_trip_and_count(self):
        manager = MemoryConfigManager()
        manager.save(Config(show_password=True))
        assert manager.load() == Config(show_password=True)
        assert manager.save_count == 1

    def test_does_not_alias_caller_state(self):
        manager = MemoryConfigManager()
        cfg = Config(show_password=True)
        manager.save(cfg)
        cfg.show_password = False
        loaded = manager.load()
        loaded.show_password = False
        assert manager.load() == Config(show_password=True)

    def test_base_manager_is_abstract(self):
        with pytest.raises(NotImplementedError):
            ConfigManager().load()
        with pytest.raises(NotImplementedError):
            ConfigManager().save(Config())
