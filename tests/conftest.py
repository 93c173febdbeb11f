from __future__ import annotations

from pathlib import Path
from typing import Dict, List

import pytest

from gpgs_setup.config import SetupConfig
from gpgs_setup.settings import ProjectSettings


def build_resources_xml(entries: Dict[str, str]) -> str:
    lines = ['<?xml version="1.0" encoding="utf-8"?>', "<resources>"]
    for name, value in entries.items():
        lines.append(f'    <string name="{name}" translatable="false">{value}</string>')
    lines.append("</resources>")
    return "\n".join(lines) + "\n"


class RecordingToolchain:
    """Toolchain double that records the order of collaborator calls."""

    def __init__(self, *, has_sdk: bool = True, nearby_ok: bool = True) -> None:
        self.has_sdk = has_sdk
        self.nearby_ok = nearby_ok
        self.calls: List[str] = []

    def has_android_sdk(self) -> bool:
        self.calls.append("has_android_sdk")
        return self.has_sdk

    def copy_support_libs(self) -> None:
        self.calls.append("copy_support_libs")

    def generate_android_manifest(self) -> None:
        self.calls.append("generate_android_manifest")

    def setup_nearby(self, service_id: str) -> bool:
        self.calls.append(f"setup_nearby:{service_id}")
        return self.nearby_ok

    def refresh_assets(self) -> None:
        self.calls.append("refresh_assets")


@pytest.fixture()
def sdk_dir(tmp_path: Path) -> Path:
    path = tmp_path / "android-sdk"
    path.mkdir()
    return path


@pytest.fixture()
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture()
def config(project_root: Path, sdk_dir: Path) -> SetupConfig:
    return SetupConfig(project_root=project_root, android_sdk_path=sdk_dir)


@pytest.fixture()
def settings(config: SetupConfig) -> ProjectSettings:
    return ProjectSettings.open(config.settings_path)


@pytest.fixture()
def toolchain() -> RecordingToolchain:
    return RecordingToolchain()


@pytest.fixture()
def sample_xml() -> str:
    return build_resources_xml(
        {
            "app_id": "123456789012",
            "package_name": "com.example.game",
            "achievement_first_steps": "CgkIxxxxxxxxEAIQAQ",
            "leaderboard_high_scores": "CgkIxxxxxxxxEAIQAg",
        }
    )
