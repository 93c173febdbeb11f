"""Shared models for resource extraction and setup results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


APP_ID_RESOURCE = "app_id"
DEFAULT_CLASS_NAME = "GooglePlayGames.GPGSIds"


class SetupOutcome(str, Enum):
    """Terminal state of a setup run."""

    SUCCESS = "success"
    MALFORMED_INPUT = "malformed_input"
    INVALID_CLIENT_ID = "invalid_client_id"
    INVALID_APP_ID = "invalid_app_id"
    DELEGATE_FAILURE = "delegate_failure"
    MISSING_TOOLCHAIN = "missing_toolchain"


@dataclass(slots=True)
class ResourceEntry:
    """A named string value found inside a resources block."""

    name: str
    value: str


@dataclass(slots=True)
class ExtractionResult:
    """Outcome of scanning a resources document."""

    app_id: Optional[str] = None
    entries: Dict[str, str] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.app_id is not None

    def add(self, entry: ResourceEntry) -> None:
        if entry.name == APP_ID_RESOURCE:
            self.app_id = entry.value
        else:
            self.entries[entry.name] = entry.value


@dataclass(slots=True)
class SetupRequest:
    """Values collected from the user for an Android setup run."""

    client_id: str
    class_name: str
    resource_xml: str
    service_id: Optional[str] = None


@dataclass(slots=True)
class SetupResult:
    """Structured result handed back to the CLI or GUI."""

    outcome: SetupOutcome
    message: str
    app_id: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome == SetupOutcome.SUCCESS


__all__ = [
    "APP_ID_RESOURCE",
    "DEFAULT_CLASS_NAME",
    "SetupOutcome",
    "ResourceEntry",
    "ExtractionResult",
    "SetupRequest",
    "SetupResult",
]
