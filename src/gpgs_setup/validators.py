"""Format checks for identifiers entered during setup."""

from __future__ import annotations

import re


_CLIENT_ID_RE = re.compile(r"^\d+-\S+$")

MIN_APP_ID_LENGTH = 5
MIN_SERVICE_ID_LENGTH = 3


def looks_like_valid_client_id(value: str | None) -> bool:
    """Return True for OAuth client ids of the form ``<digits>-<suffix>``."""

    if not value:
        return False
    return _CLIENT_ID_RE.match(value) is not None


def looks_like_valid_app_id(value: str | None) -> bool:
    """Return True when the value is a numeric Play Console application id."""

    if not value or len(value) < MIN_APP_ID_LENGTH:
        return False
    return all("0" <= char <= "9" for char in value)


def looks_like_valid_service_id(value: str | None) -> bool:
    """Nearby service ids are letters, digits and dots."""

    if not value or len(value) < MIN_SERVICE_ID_LENGTH:
        return False
    return all(char.isalnum() or char == "." for char in value)


def app_id_from_client_id(client_id: str) -> str:
    """The app id is the client id's prefix before the first dash."""

    return client_id.split("-", 1)[0]


__all__ = [
    "app_id_from_client_id",
    "looks_like_valid_app_id",
    "looks_like_valid_client_id",
    "looks_like_valid_service_id",
]
