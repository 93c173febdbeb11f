"""Host collaborators invoked by the setup workflow."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Optional, Protocol

from loguru import logger

from .config import SetupConfig
from .generator import generate_android_manifest
from .settings import APP_ID_KEY, NEARBY_SERVICE_ID_KEY, ProjectSettings
from .validators import looks_like_valid_service_id


SDK_ENVIRONMENT_VARIABLES = ("ANDROID_HOME", "ANDROID_SDK_ROOT")


class Toolchain(Protocol):
    """Operations the setup workflow delegates to the host project."""

    def has_android_sdk(self) -> bool: ...

    def copy_support_libs(self) -> None: ...

    def generate_android_manifest(self) -> None: ...

    def setup_nearby(self, service_id: str) -> bool: ...

    def refresh_assets(self) -> None: ...


class ProjectToolchain:
    """Default collaborators working directly on the project directory."""

    def __init__(self, config: SetupConfig, settings: ProjectSettings) -> None:
        self._config = config
        self._settings = settings

    def android_sdk_path(self) -> Optional[Path]:
        if self._config.android_sdk_path is not None:
            return self._config.resolve(self._config.android_sdk_path)
        for name in SDK_ENVIRONMENT_VARIABLES:
            value = os.environ.get(name)
            if value:
                return Path(value)
        return None

    def has_android_sdk(self) -> bool:
        sdk_path = self.android_sdk_path()
        found = sdk_path is not None and sdk_path.is_dir()
        logger.debug("Android SDK path {} (found={})", sdk_path, found)
        return found

    def copy_support_libs(self) -> None:
        source = self._config.support_libs_dir
        if source is None:
            return
        source = self._config.resolve(source)
        if not source.is_dir():
            logger.warning("Support library directory {} does not exist; skipping copy", source)
            return
        destination = self._config.plugin_path / source.name
        shutil.copytree(source, destination, dirs_exist_ok=True)
        logger.info("Copied support libraries from {} to {}", source, destination)

    def generate_android_manifest(self) -> None:
        service_id = self._settings.get(NEARBY_SERVICE_ID_KEY) or None
        generate_android_manifest(
            self._config.manifest_file,
            package_name=self._config.package_name,
            app_id=self._settings.get(APP_ID_KEY),
            service_id=service_id,
        )

    def setup_nearby(self, service_id: str) -> bool:
        if not looks_like_valid_service_id(service_id):
            logger.error("Invalid nearby service id {!r}", service_id)
            return False
        self._settings.set(NEARBY_SERVICE_ID_KEY, service_id)
        self._settings.save()
        return True

    def refresh_assets(self) -> None:
        logger.info("Project assets under {} updated", self._config.assets_path)


__all__ = ["ProjectToolchain", "Toolchain", "SDK_ENVIRONMENT_VARIABLES"]
