"""Scoped JSON settings store for modelhub."""

import json
import logging
import os
import tempfile
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import SETTINGS_DIRNAME, SETTINGS_FILENAME, SETTINGS_HOME_ENV_VAR


class SettingScope(str, Enum):
    """Where a setting lives. Workspace values shadow user values."""
    USER = "user"
    WORKSPACE = "workspace"


def default_user_dir() -> Path:
    """Return the user settings directory (``$MODELHUB_HOME`` or ``~/.modelhub``)."""
    override = os.environ.get(SETTINGS_HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / SETTINGS_DIRNAME


class SettingsStore:
    """Settings persisted as one JSON object per scope.

    Every write replaces the whole file through a temporary file and
    ``os.replace``, so readers never see a half-written snapshot.
    """

    def __init__(
        self,
        user_dir: Optional[Path] = None,
        workspace_dir: Optional[Path] = None,
        logger: Optional[logging.Logger] = None
    ):
        """Initialize the store.

        Args:
            user_dir: Directory holding the user-scope settings file
            workspace_dir: Project directory; its settings live in ``.modelhub/``
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self._paths = {
            SettingScope.USER: (user_dir or default_user_dir()) / SETTINGS_FILENAME,
            SettingScope.WORKSPACE: (
                (workspace_dir or Path.cwd()) / SETTINGS_DIRNAME / SETTINGS_FILENAME
            ),
        }

    def path_for(self, scope: SettingScope) -> Path:
        return self._paths[SettingScope(scope)]

    def load_scope(self, scope: SettingScope) -> Dict[str, Any]:
        """Read every setting of *scope*. Missing or unreadable files yield ``{}``."""
        path = self.path_for(scope)
        if not path.exists():
            return {}

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            self.logger.warning(f"Failed to read settings {path}: {e}")
            return {}

        if not isinstance(data, dict):
            self.logger.warning(f"Settings file {path} has invalid structure, ignoring it")
            return {}
        return data

    def get(self, scope: SettingScope, key: str) -> Any:
        """Return the value of *key* in *scope*, or None."""
        return self.load_scope(scope).get(key)

    @property
    def merged(self) -> Dict[str, Any]:
        """User settings shallow-overridden by workspace settings."""
        merged = self.load_scope(SettingScope.USER)
        merged.update(self.load_scope(SettingScope.WORKSPACE))
        return merged

    def read(self, key: str) -> Any:
        """Return the effective (merged) value of *key*, or None."""
        return self.merged.get(key)

    def set_value(self, scope: SettingScope, key: str, value: Any) -> None:
        """Persist *value* under *key* in *scope*, replacing the file atomically.

        Raises:
            OSError: If the settings file cannot be written
        """
        path = self.path_for(scope)
        data = self.load_scope(scope)
        data[key] = value

        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=".settings-", suffix=".json", dir=path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=4)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"Saved '{key}' to {path}")
