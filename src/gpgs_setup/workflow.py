"""High level Android setup routine."""

from __future__ import annotations

from functools import partial
from typing import Optional

from loguru import logger

from . import strings
from .config import SetupConfig
from .generator import fill_in_app_data, update_game_info, write_resource_ids
from .models import SetupOutcome, SetupRequest, SetupResult
from .resources import ResourceParseError, parse_resources
from .settings import (
    ANDROID_CLIENT_ID_KEY,
    ANDROID_SETUP_DONE_KEY,
    APP_ID_KEY,
    CONSTANTS_CLASS_NAME_KEY,
    NEARBY_SERVICE_ID_KEY,
    RESOURCE_DATA_KEY,
    ProjectSettings,
)
from .toolchain import Toolchain
from .validators import app_id_from_client_id, looks_like_valid_app_id, looks_like_valid_client_id


def _result(outcome: SetupOutcome, app_id: Optional[str] = None) -> SetupResult:
    return SetupResult(outcome=outcome, message=strings.message_for(outcome), app_id=app_id)


def perform_setup(
    request: SetupRequest,
    settings: ProjectSettings,
    toolchain: Toolchain,
    config: SetupConfig,
) -> SetupResult:
    """Run setup from the resource XML downloaded from the Play Console.

    The class name and resource XML are recorded only once the XML yields an
    ``app_id``; the rest of the run continues in :func:`perform_setup_with_app_id`.
    """

    logger.info("Starting Android setup for constants class {}", request.class_name)
    writer = partial(write_resource_ids, config.assets_path)
    try:
        extraction = parse_resources(request.class_name, request.resource_xml, settings, writer)
    except ResourceParseError as exc:
        logger.error("Resource data rejected: {}", exc)
        return _result(SetupOutcome.MALFORMED_INPUT)
    if not extraction.success:
        return _result(SetupOutcome.MALFORMED_INPUT)

    settings.set(CONSTANTS_CLASS_NAME_KEY, request.class_name)
    settings.set(RESOURCE_DATA_KEY, request.resource_xml)
    return perform_setup_with_app_id(
        request.client_id,
        settings.get(APP_ID_KEY),
        request.service_id,
        settings=settings,
        toolchain=toolchain,
        config=config,
    )


def perform_setup_with_app_id(
    client_id: str,
    app_id: str,
    service_id: Optional[str],
    *,
    settings: ProjectSettings,
    toolchain: Toolchain,
    config: SetupConfig,
) -> SetupResult:
    """Set up the project from an app id directly, as used by automated builds.

    A non-empty client id takes precedence: its prefix before the first dash
    becomes the app id. Settings are saved before the SDK check, so a missing
    SDK leaves the identifiers persisted without the generated files.
    """

    client_id = client_id or ""
    if client_id:
        if not looks_like_valid_client_id(client_id):
            logger.error("Client id {!r} is not valid", client_id)
            return _result(SetupOutcome.INVALID_CLIENT_ID)
        app_id = app_id_from_client_id(client_id)
    elif not looks_like_valid_app_id(app_id):
        logger.error("App id {!r} is not valid", app_id)
        return _result(SetupOutcome.INVALID_APP_ID)

    if service_id is not None:
        if not toolchain.setup_nearby(service_id):
            logger.error("Nearby connections setup failed for service id {!r}", service_id)
            return _result(SetupOutcome.DELEGATE_FAILURE, app_id)

    settings.set(APP_ID_KEY, app_id)
    settings.set(ANDROID_CLIENT_ID_KEY, client_id)
    settings.save()
    update_game_info(
        config.game_info_file,
        app_id=app_id,
        client_id_placeholder=config.client_id_placeholder,
        service_id=settings.get(NEARBY_SERVICE_ID_KEY) or None,
    )

    if not toolchain.has_android_sdk():
        logger.error("Android SDK not found.")
        return _result(SetupOutcome.MISSING_TOOLCHAIN, app_id)

    toolchain.copy_support_libs()
    toolchain.generate_android_manifest()

    game_info = config.game_info_file
    fill_in_app_data(game_info, game_info, client_id, config.client_id_placeholder)

    toolchain.refresh_assets()
    settings.set(ANDROID_SETUP_DONE_KEY, True)
    settings.save()
    logger.info("Android setup complete for app id {}", app_id)
    return _result(SetupOutcome.SUCCESS, app_id)


__all__ = ["perform_setup", "perform_setup_with_app_id"]
