"""Configuration loading and validation for the Android setup tool."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .settings import DEFAULT_SETTINGS_FILE


DEFAULT_CLIENT_ID_PLACEHOLDER = "__ANDROID_CLIENT_ID__"


class SetupConfig(BaseModel):
    """Project layout used when generating and patching files.

    Relative paths are resolved against ``project_root``.
    """

    project_root: Path = Path(".")
    settings_file: Path = DEFAULT_SETTINGS_FILE
    assets_dir: Path = Path("Assets")
    game_info_path: Path = Path("Assets") / "GooglePlayGames" / "GameInfo.cs"
    manifest_path: Path = (
        Path("Assets") / "Plugins" / "Android" / "GooglePlayGamesManifest.plugin" / "AndroidManifest.xml"
    )
    plugin_dir: Path = Path("Assets") / "Plugins" / "Android"
    support_libs_dir: Optional[Path] = None
    android_sdk_path: Optional[Path] = None
    client_id_placeholder: str = DEFAULT_CLIENT_ID_PLACEHOLDER
    package_name: str = Field(
        default="com.google.example.games.mainlibproj",
        description="Package name written into the generated plugin manifest.",
    )

    @field_validator("client_id_placeholder")
    @classmethod
    def _placeholder_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("client_id_placeholder cannot be empty")
        return value

    def resolve(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        return self.project_root / path

    @property
    def settings_path(self) -> Path:
        return self.resolve(self.settings_file)

    @property
    def assets_path(self) -> Path:
        return self.resolve(self.assets_dir)

    @property
    def game_info_file(self) -> Path:
        return self.resolve(self.game_info_path)

    @property
    def manifest_file(self) -> Path:
        return self.resolve(self.manifest_path)

    @property
    def plugin_path(self) -> Path:
        return self.resolve(self.plugin_dir)


class ConfigError(Exception):
    """Raised when a configuration file is invalid."""


def load_config(path: Path | None) -> SetupConfig:
    """Load configuration from a YAML file, or return defaults when ``path`` is None."""

    if path is None:
        return SetupConfig(project_root=Path.cwd())

    try:
        data = yaml.safe_load(path.read_text())
    except FileNotFoundError as exc:
        raise ConfigError(f"Configuration file not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse YAML: {exc}") from exc

    try:
        config = SetupConfig.model_validate(data or {})
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc

    if not config.project_root.is_absolute():
        config.project_root = (path.parent / config.project_root).resolve()
    return config


def save_config(config: SetupConfig, path: Path) -> None:
    """Persist configuration to disk as YAML."""

    rendered = config.model_dump(mode="json")
    path.write_text(yaml.safe_dump(rendered, sort_keys=False))


__all__ = [
    "ConfigError",
    "DEFAULT_CLIENT_ID_PLACEHOLDER",
    "SetupConfig",
    "load_config",
    "save_config",
]
