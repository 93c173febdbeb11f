"""Extraction of string resources pasted from the Play Console."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Union

from loguru import logger
from lxml import etree

from .models import ExtractionResult, ResourceEntry
from .settings import APP_ID_KEY, ProjectSettings


RESOURCES_TAG = "resources"
STRING_TAG = "string"
NAME_ATTRIBUTE = "name"

ConstantsWriter = Callable[[str, Dict[str, str]], object]


class ResourceParseError(Exception):
    """Raised when the resource markup is not well-formed XML."""


class ResourceScanner:
    """lxml parser target that collects ``<string>`` values as events arrive.

    Once a ``resources`` start tag has been seen the scanner stays inside the
    resources region for the rest of the document, including after the
    matching end tag. Character data between two structural events is treated
    as one value and is only consumed while a string name is pending.
    """

    def __init__(self) -> None:
        self.result = ExtractionResult()
        self._in_resources = False
        self._pending_name: Optional[str] = None
        self._text: List[str] = []

    def start(self, tag, attrib) -> None:
        self._flush_text()
        if tag == RESOURCES_TAG:
            self._in_resources = True
        if self._in_resources and tag == STRING_TAG:
            self._pending_name = attrib.get(NAME_ATTRIBUTE)

    def end(self, tag) -> None:
        self._flush_text()
        if self._in_resources and tag == STRING_TAG:
            self._pending_name = None

    def data(self, data: str) -> None:
        self._text.append(data)

    def comment(self, text: str) -> None:
        self._flush_text()

    def pi(self, target: str, data: str) -> None:
        self._flush_text()

    def close(self) -> ExtractionResult:
        self._flush_text()
        return self.result

    def _flush_text(self) -> None:
        if not self._text:
            return
        value = "".join(self._text)
        self._text.clear()
        if not self._pending_name:
            return
        self.result.add(ResourceEntry(self._pending_name, value))
        self._pending_name = None


def extract_resources(markup: Union[str, bytes]) -> ExtractionResult:
    """Scan ``markup`` and return the app id plus the remaining string entries.

    Text is already decoded, so any encoding named in its XML declaration is
    ignored. Raw bytes are decoded by lxml according to the declaration.
    """

    if not markup or not markup.strip():
        raise ResourceParseError("Resource data is empty")

    if isinstance(markup, str):
        data = markup.encode("utf-8")
        encoding: Optional[str] = "utf-8"
    else:
        data = markup
        encoding = None

    scanner = ResourceScanner()
    parser = etree.XMLParser(
        target=scanner,
        encoding=encoding,
        resolve_entities=False,
        no_network=True,
        remove_blank_text=False,
    )
    try:
        parser.feed(data)
        result = parser.close()
    except etree.XMLSyntaxError as exc:
        raise ResourceParseError(f"Resource data is not valid XML: {exc}") from exc

    logger.debug(
        "Scanned resources: app_id found={}, {} other entries",
        result.success,
        len(result.entries),
    )
    return result


def decode_resources(data: bytes) -> str:
    """Decode a resources file using the encoding its XML declaration names."""

    if not data or not data.strip():
        raise ResourceParseError("Resource data is empty")

    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(data, parser)
    except etree.XMLSyntaxError as exc:
        raise ResourceParseError(f"Resource data is not valid XML: {exc}") from exc

    encoding = root.getroottree().docinfo.encoding or "utf-8"
    try:
        return data.decode(encoding)
    except (LookupError, UnicodeDecodeError) as exc:
        raise ResourceParseError(f"Resource data is not valid {encoding}: {exc}") from exc


def parse_resources(
    class_name: str,
    markup: str,
    settings: ProjectSettings,
    write_constants: ConstantsWriter,
) -> ExtractionResult:
    """Extract resources and hand the results to their consumers.

    On success a non-empty resource set is passed to ``write_constants`` keyed
    by ``class_name``, and the app id is stored in ``settings``. Nothing is
    persisted when no ``app_id`` entry is present.
    """

    result = extract_resources(markup)
    if not result.success:
        logger.warning("No app_id entry found in resource data")
        return result

    if result.entries:
        write_constants(class_name, dict(result.entries))
    settings.set(APP_ID_KEY, result.app_id)
    return result


__all__ = [
    "ResourceParseError",
    "ResourceScanner",
    "decode_resources",
    "extract_resources",
    "parse_resources",
]
