"""Rendering of the files produced by Android setup."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from jinja2 import Environment, FileSystemLoader
from loguru import logger


TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
CONSTANTS_TEMPLATE = "constants.cs.j2"
GAME_INFO_TEMPLATE = "game_info.cs.j2"
MANIFEST_TEMPLATE = "AndroidManifest.xml.j2"


def _environment(template_dir: Path = TEMPLATES_DIR) -> Environment:
    loader = FileSystemLoader(str(template_dir))
    return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True, keep_trailing_newline=True)


def make_identifier(key: str) -> str:
    """Turn a resource name into a valid C# identifier."""

    cleaned = "".join(
        char for char in key.strip().replace(" ", "_") if char.isalnum() or char == "_"
    )
    if not cleaned or cleaned[0].isdigit():
        cleaned = "_" + cleaned
    return cleaned


def escape_string_literal(value: str) -> str:
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\r", "\\r")
        .replace("\n", "\\n")
    )


def split_class_name(class_name: str) -> tuple[List[str], str]:
    """Split ``Some.Namespace.ClassName`` into namespace parts and the class."""

    parts = [part.strip() for part in class_name.strip().split(".")]
    if not parts or any(not part for part in parts):
        raise ValueError(f"Invalid constants class name '{class_name}'")
    return parts[:-1], parts[-1]


def write_resource_ids(assets_dir: Path, class_name: str, resources: Dict[str, str]) -> Path:
    """Write a constants class with one entry per resource.

    The file lands in a directory per namespace component below
    ``assets_dir``, e.g. ``GooglePlayGames.GPGSIds`` becomes
    ``<assets>/GooglePlayGames/GPGSIds.cs``.
    """

    namespace_parts, simple_name = split_class_name(class_name)
    target_dir = assets_dir.joinpath(*namespace_parts)
    target_dir.mkdir(parents=True, exist_ok=True)
    output_path = target_dir / f"{simple_name}.cs"

    constants = []
    used: set[str] = set()
    for name, value in sorted(resources.items()):
        identifier = base = make_identifier(name)
        suffix = 2
        while identifier in used:
            identifier = f"{base}_{suffix}"
            suffix += 1
        if identifier != base:
            logger.warning("Resource '{}' clashes with identifier {}; writing it as {}", name, base, identifier)
        used.add(identifier)
        constants.append({"identifier": identifier, "value": escape_string_literal(value)})
    namespace = ".".join(namespace_parts)
    template = _environment().get_template(CONSTANTS_TEMPLATE)
    rendered = template.render(
        class_name=simple_name,
        namespace=namespace,
        indent="    " if namespace else "",
        constants=constants,
    )
    output_path.write_text(rendered, encoding="utf-8")
    logger.info("Wrote {} resource constants to {}", len(constants), output_path)
    return output_path


def update_game_info(
    output_path: Path,
    *,
    app_id: str,
    client_id_placeholder: str,
    service_id: Optional[str] = None,
) -> Path:
    """Regenerate the game info source with the current identifiers."""

    template = _environment().get_template(GAME_INFO_TEMPLATE)
    rendered = template.render(
        app_id=escape_string_literal(app_id),
        client_id_placeholder=client_id_placeholder,
        service_id=escape_string_literal(service_id or "__NEARBY_SERVICE_ID__"),
    )
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(rendered, encoding="utf-8")
    logger.debug("Updated game info at {}", output_path)
    return output_path


def generate_android_manifest(
    output_path: Path,
    *,
    package_name: str,
    app_id: str,
    service_id: Optional[str] = None,
) -> Path:
    template = _environment().get_template(MANIFEST_TEMPLATE)
    rendered = template.render(package_name=package_name, app_id=app_id, service_id=service_id)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(rendered, encoding="utf-8")
    logger.info("Generated Android manifest at {}", output_path)
    return output_path


def fill_in_app_data(source_path: Path, output_path: Path, client_id: str, placeholder: str) -> None:
    """Replace ``placeholder`` with the client id, reading ``source_path`` and writing ``output_path``."""

    body = source_path.read_text(encoding="utf-8")
    output_path.write_text(body.replace(placeholder, client_id), encoding="utf-8")


__all__ = [
    "escape_string_literal",
    "fill_in_app_data",
    "generate_android_manifest",
    "make_identifier",
    "split_class_name",
    "update_game_info",
    "write_resource_ids",
]
