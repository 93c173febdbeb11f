from __future__ import annotations

from gpgs_setup.config import SetupConfig
from gpgs_setup.models import SetupOutcome, SetupRequest
from gpgs_setup.settings import (
    ANDROID_CLIENT_ID_KEY,
    ANDROID_SETUP_DONE_KEY,
    APP_ID_KEY,
    CONSTANTS_CLASS_NAME_KEY,
    RESOURCE_DATA_KEY,
    ProjectSettings,
)
from gpgs_setup.workflow import perform_setup, perform_setup_with_app_id
from .conftest import RecordingToolchain, build_resources_xml

CLASS_NAME = "GooglePlayGames.GPGSIds"
COMPLETION_CALLS = [
    "has_android_sdk",
    "copy_support_libs",
    "generate_android_manifest",
    "refresh_assets",
]


def _request(resource_xml: str, client_id: str = "", service_id: str | None = None) -> SetupRequest:
    return SetupRequest(
        client_id=client_id,
        class_name=CLASS_NAME,
        resource_xml=resource_xml,
        service_id=service_id,
    )


def test_setup_from_resources(
    config: SetupConfig, settings: ProjectSettings, toolchain: RecordingToolchain, sample_xml: str
) -> None:
    result = perform_setup(_request(sample_xml), settings, toolchain, config)

    assert result.ok
    assert result.app_id == "123456789012"
    assert toolchain.calls == COMPLETION_CALLS

    stored = ProjectSettings.open(config.settings_path)
    assert stored.get(APP_ID_KEY) == "123456789012"
    assert stored.get(ANDROID_CLIENT_ID_KEY) == ""
    assert stored.get(CONSTANTS_CLASS_NAME_KEY) == CLASS_NAME
    assert stored.get(RESOURCE_DATA_KEY) == sample_xml
    assert stored.get_bool(ANDROID_SETUP_DONE_KEY)

    constants = config.assets_path / "GooglePlayGames" / "GPGSIds.cs"
    assert "achievement_first_steps" in constants.read_text()
    game_info = config.game_info_file.read_text()
    assert config.client_id_placeholder not in game_info


def test_client_id_overrides_extracted_app_id(
    config: SetupConfig, settings: ProjectSettings, toolchain: RecordingToolchain, sample_xml: str
) -> None:
    result = perform_setup(_request(sample_xml, client_id="111-ANDROID"), settings, toolchain, config)

    assert result.ok
    assert result.app_id == "111"
    stored = ProjectSettings.open(config.settings_path)
    assert stored.get(APP_ID_KEY) == "111"
    assert stored.get(ANDROID_CLIENT_ID_KEY) == "111-ANDROID"
    assert 'WebClientId = "111-ANDROID"' in config.game_info_file.read_text()


def test_empty_resources_abort_without_changes(
    config: SetupConfig, settings: ProjectSettings, toolchain: RecordingToolchain
) -> None:
    result = perform_setup(_request("<resources></resources>"), settings, toolchain, config)

    assert result.outcome == SetupOutcome.MALFORMED_INPUT
    assert settings.as_dict() == {}
    assert not config.settings_path.exists()
    assert toolchain.calls == []


def test_unparseable_resources_are_reported_as_malformed(
    config: SetupConfig, settings: ProjectSettings, toolchain: RecordingToolchain
) -> None:
    result = perform_setup(_request("<resources><string name="), settings, toolchain, config)

    assert result.outcome == SetupOutcome.MALFORMED_INPUT
    assert settings.as_dict() == {}


def test_invalid_client_id_leaves_store_unchanged(
    config: SetupConfig, toolchain: RecordingToolchain, sample_xml: str
) -> None:
    config.settings_path.parent.mkdir(parents=True)
    config.settings_path.write_text("proj.AppId: '99999'\nand.ClientId: 99999-old\n")
    before = config.settings_path.read_text()
    settings = ProjectSettings.open(config.settings_path)

    result = perform_setup(_request(sample_xml, client_id="not-a-client-id"), settings, toolchain, config)

    assert result.outcome == SetupOutcome.INVALID_CLIENT_ID
    assert config.settings_path.read_text() == before
    assert settings.get(ANDROID_CLIENT_ID_KEY) == "99999-old"
    assert not settings.get_bool(ANDROID_SETUP_DONE_KEY)
    assert not config.game_info_file.exists()
    assert toolchain.calls == []


def test_invalid_app_id_aborts_before_saving(
    config: SetupConfig, settings: ProjectSettings, toolchain: RecordingToolchain
) -> None:
    markup = build_resources_xml({"app_id": "12"})
    result = perform_setup(_request(markup), settings, toolchain, config)

    assert result.outcome == SetupOutcome.INVALID_APP_ID
    assert not config.settings_path.exists()
    assert toolchain.calls == []


def test_missing_sdk_keeps_saved_identifiers(
    config: SetupConfig, settings: ProjectSettings, sample_xml: str
) -> None:
    toolchain = RecordingToolchain(has_sdk=False)
    result = perform_setup(_request(sample_xml), settings, toolchain, config)

    assert result.outcome == SetupOutcome.MISSING_TOOLCHAIN
    assert toolchain.calls == ["has_android_sdk"]
    stored = ProjectSettings.open(config.settings_path)
    assert stored.get(APP_ID_KEY) == "123456789012"
    assert not stored.get_bool(ANDROID_SETUP_DONE_KEY)
    assert config.client_id_placeholder in config.game_info_file.read_text()


def test_nearby_failure_does_not_roll_back(
    config: SetupConfig, settings: ProjectSettings, sample_xml: str
) -> None:
    toolchain = RecordingToolchain(nearby_ok=False)
    result = perform_setup(_request(sample_xml, service_id="svc.id"), settings, toolchain, config)

    assert result.outcome == SetupOutcome.DELEGATE_FAILURE
    assert toolchain.calls == ["setup_nearby:svc.id"]
    assert settings.get(CONSTANTS_CLASS_NAME_KEY) == CLASS_NAME
    assert settings.get(RESOURCE_DATA_KEY) == sample_xml
    assert not settings.get_bool(ANDROID_SETUP_DONE_KEY)


def test_nearby_service_id_is_delegated(
    config: SetupConfig, settings: ProjectSettings, toolchain: RecordingToolchain, sample_xml: str
) -> None:
    result = perform_setup(_request(sample_xml, service_id="svc.id"), settings, toolchain, config)

    assert result.ok
    assert toolchain.calls == ["setup_nearby:svc.id", *COMPLETION_CALLS]


def test_setup_with_app_id_for_automated_builds(
    config: SetupConfig, settings: ProjectSettings, toolchain: RecordingToolchain
) -> None:
    result = perform_setup_with_app_id(
        "", "123456789012", None, settings=settings, toolchain=toolchain, config=config
    )

    assert result.ok
    assert ProjectSettings.open(config.settings_path).get(APP_ID_KEY) == "123456789012"
    assert toolchain.calls == COMPLETION_CALLS
