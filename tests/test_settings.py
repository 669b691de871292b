"""Unit tests for the scoped JSON settings store."""

import json
import logging
from unittest.mock import patch

import pytest

from modelhub.settings import SettingScope, SettingsStore, default_user_dir


class TestSettingsPaths:
    """Test where settings files live."""

    def test_scope_paths(self, tmp_path):
        store = SettingsStore(user_dir=tmp_path / "home", workspace_dir=tmp_path / "proj")

        assert store.path_for(SettingScope.USER) == tmp_path / "home" / "settings.json"
        assert store.path_for(SettingScope.WORKSPACE) == tmp_path / "proj" / ".modelhub" / "settings.json"

    def test_user_dir_env_override(self, tmp_path, monkeypatch):
        """MODELHUB_HOME replaces ~/.modelhub."""
        monkeypatch.setenv("MODELHUB_HOME", str(tmp_path / "custom"))
        assert default_user_dir() == tmp_path / "custom"

    def test_user_dir_default(self, monkeypatch):
        monkeypatch.delenv("MODELHUB_HOME", raising=False)
        assert default_user_dir().name == ".modelhub"


class TestSettingsReadWrite:
    """Test get/set semantics."""

    def test_missing_files_read_as_empty(self, settings_store):
        assert settings_store.get(SettingScope.USER, "modelRegistry") is None
        assert settings_store.merged == {}
        assert settings_store.read("modelRegistry") is None

    def test_set_then_get(self, settings_store):
        """Values round-trip through the file and create its directory."""
        settings_store.set_value(SettingScope.USER, "modelRegistry", {"currentModel": "gpt-4o"})

        path = settings_store.path_for(SettingScope.USER)
        assert path.exists()
        assert json.loads(path.read_text()) == {"modelRegistry": {"currentModel": "gpt-4o"}}
        assert settings_store.get(SettingScope.USER, "modelRegistry") == {"currentModel": "gpt-4o"}

    def test_set_preserves_other_keys(self, settings_store):
        settings_store.set_value(SettingScope.USER, "theme", "dark")
        settings_store.set_value(SettingScope.USER, "modelRegistry", {"currentModel": "x"})

        assert settings_store.get(SettingScope.USER, "theme") == "dark"

    def test_write_leaves_no_temp_files(self, settings_store):
        settings_store.set_value(SettingScope.USER, "a", 1)
        settings_store.set_value(SettingScope.USER, "a", 2)

        files = list(settings_store.path_for(SettingScope.USER).parent.iterdir())
        assert [f.name for f in files] == ["settings.json"]

    def test_failed_write_keeps_previous_file(self, settings_store):
        """A failure mid-write leaves the old file intact and cleans up."""
        settings_store.set_value(SettingScope.USER, "a", 1)

        with patch("modelhub.settings.json.dump", side_effect=OSError("disk full")):
            with pytest.raises(OSError, match="disk full"):
                settings_store.set_value(SettingScope.USER, "a", 2)

        assert settings_store.get(SettingScope.USER, "a") == 1
        files = list(settings_store.path_for(SettingScope.USER).parent.iterdir())
        assert [f.name for f in files] == ["settings.json"]

    def test_workspace_overrides_user(self, settings_store):
        """Workspace keys shadow user keys in the merged view."""
        settings_store.set_value(SettingScope.USER, "modelRegistry", {"currentModel": "user"})
        settings_store.set_value(SettingScope.USER, "theme", "dark")
        settings_store.set_value(SettingScope.WORKSPACE, "modelRegistry", {"currentModel": "ws"})

        assert settings_store.read("modelRegistry") == {"currentModel": "ws"}
        assert settings_store.read("theme") == "dark"


class TestSettingsCorruption:
    """Test recovery from unreadable settings files."""

    def test_invalid_json(self, settings_store, caplog):
        path = settings_store.path_for(SettingScope.USER)
        path.parent.mkdir(parents=True)
        path.write_text("{ invalid json")

        with caplog.at_level(logging.WARNING):
            assert settings_store.load_scope(SettingScope.USER) == {}
        assert "Failed to read settings" in caplog.text

    def test_non_object_json(self, settings_store, caplog):
        path = settings_store.path_for(SettingScope.USER)
        path.parent.mkdir(parents=True)
        path.write_text("[1, 2, 3]")

        with caplog.at_level(logging.WARNING):
            assert settings_store.load_scope(SettingScope.USER) == {}
        assert "invalid structure" in caplog.text

    def test_write_over_corrupt_file(self, settings_store):
        """Writing replaces a corrupt file with a valid one."""
        path = settings_store.path_for(SettingScope.USER)
        path.parent.mkdir(parents=True)
        path.write_text("garbage")

        settings_store.set_value(SettingScope.USER, "k", "v")

        assert json.loads(path.read_text()) == {"k": "v"}
