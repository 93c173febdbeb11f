"""File-backed key/value store for per-project setup state."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml
from loguru import logger


CONSTANTS_CLASS_NAME_KEY = "proj.ConstantsClassName"
RESOURCE_DATA_KEY = "proj.ResourceData"
APP_ID_KEY = "proj.AppId"
ANDROID_CLIENT_ID_KEY = "and.ClientId"
ANDROID_SETUP_DONE_KEY = "android.SetupDone"
NEARBY_SERVICE_ID_KEY = "android.NearbyServiceId"

DEFAULT_SETTINGS_FILE = Path("ProjectSettings") / "GooglePlayGameSettings.yml"


class SettingsError(Exception):
    """Raised when the settings file cannot be read."""


class ProjectSettings:
    """Mutable settings backed by a YAML mapping on disk.

    Values are held in memory between :meth:`load` and :meth:`save`; nothing
    reaches the file until :meth:`save` is called.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._values: Dict[str, Any] = {}
        self._dirty = False

    @classmethod
    def open(cls, path: Path) -> "ProjectSettings":
        settings = cls(path)
        settings.load()
        return settings

    def load(self) -> None:
        if not self.path.exists():
            logger.debug("Settings file {} does not exist; starting empty", self.path)
            self._values = {}
            self._dirty = False
            return
        try:
            data = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise SettingsError(f"Failed to parse settings file {self.path}: {exc}") from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {self.path} must contain a mapping")
        self._values = {str(key): value for key, value in data.items()}
        self._dirty = False

    def get(self, key: str, default: str = "") -> str:
        value = self._values.get(key)
        if value is None:
            return default
        return str(value)

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._values.get(key)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() == "true"

    def set(self, key: str, value: Any) -> None:
        if key in self._values and self._values[key] == value:
            return
        self._values[key] = value
        self._dirty = True

    @property
    def dirty(self) -> bool:
        return self._dirty

    def save(self) -> None:
        if not self._dirty:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            yaml.safe_dump(self._values, sort_keys=True, allow_unicode=True),
            encoding="utf-8",
        )
        self._dirty = False
        logger.debug("Saved settings to {}", self.path)

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._values)


__all__ = [
    "ANDROID_CLIENT_ID_KEY",
    "ANDROID_SETUP_DONE_KEY",
    "APP_ID_KEY",
    "CONSTANTS_CLASS_NAME_KEY",
    "DEFAULT_SETTINGS_FILE",
    "NEARBY_SERVICE_ID_KEY",
    "RESOURCE_DATA_KEY",
    "ProjectSettings",
    "SettingsError",
]
