"""Typer-based CLI for Play Games Android setup."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from .config import ConfigError, SetupConfig, load_config, save_config
from .models import DEFAULT_CLASS_NAME, SetupOutcome, SetupRequest
from .resources import ResourceParseError, decode_resources, extract_resources
from .settings import (
    ANDROID_CLIENT_ID_KEY,
    CONSTANTS_CLASS_NAME_KEY,
    RESOURCE_DATA_KEY,
    ProjectSettings,
    SettingsError,
)
from .toolchain import ProjectToolchain
from .workflow import perform_setup

EXIT_CODES = {
    SetupOutcome.SUCCESS: 0,
    SetupOutcome.MALFORMED_INPUT: 3,
    SetupOutcome.INVALID_CLIENT_ID: 4,
    SetupOutcome.INVALID_APP_ID: 4,
    SetupOutcome.DELEGATE_FAILURE: 5,
    SetupOutcome.MISSING_TOOLCHAIN: 5,
}
CONFIG_ERROR_EXIT = 6

app = typer.Typer(help="Configure a game project for Google Play Games Services on Android.")
console = Console()


def _configure_logging(level: str, log_file: Path | None) -> None:
    logger.remove()
    logger.add(console.print, level=level)
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, level=level)


def _load(config_path: Optional[Path]) -> tuple[SetupConfig, ProjectSettings]:
    try:
        config = load_config(config_path)
        settings = ProjectSettings.open(config.settings_path)
    except (ConfigError, SettingsError) as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(code=CONFIG_ERROR_EXIT)
    return config, settings


@app.command()
def setup(
    resources: Optional[Path] = typer.Option(
        None,
        "--resources",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Android resources XML from the Play Console (defaults to the stored resource data)",
    ),
    client_id: Optional[str] = typer.Option(None, "--client-id", help="OAuth client id"),
    class_name: Optional[str] = typer.Option(None, "--class-name", help="Fully qualified constants class name"),
    service_id: Optional[str] = typer.Option(None, "--service-id", help="Nearby Connections service id"),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to configuration YAML"),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level"),
) -> None:
    """Run Android setup and write the generated files into the project."""

    setup_config, settings = _load(config)
    _configure_logging(log_level.upper(), setup_config.project_root / "Logs" / "gpgs_setup.log")

    if resources:
        try:
            resource_xml = decode_resources(resources.read_bytes())
        except ResourceParseError as exc:
            console.print(f"[red]ERROR:[/red] {exc}")
            raise typer.Exit(code=EXIT_CODES[SetupOutcome.MALFORMED_INPUT])
    else:
        resource_xml = settings.get(RESOURCE_DATA_KEY)
    request = SetupRequest(
        client_id=client_id if client_id is not None else settings.get(ANDROID_CLIENT_ID_KEY),
        class_name=class_name or settings.get(CONSTANTS_CLASS_NAME_KEY) or DEFAULT_CLASS_NAME,
        resource_xml=resource_xml,
        service_id=service_id,
    )
    toolchain = ProjectToolchain(setup_config, settings)
    try:
        result = perform_setup(request, settings, toolchain, setup_config)
    except ValueError as exc:
        console.print(f"[red]ERROR:[/red] {exc}")
        raise typer.Exit(code=CONFIG_ERROR_EXIT)

    if result.ok:
        console.print(f"[green]{result.message}[/green] App ID: {result.app_id}")
    else:
        console.print(f"[red]ERROR:[/red] {result.message}")
    raise typer.Exit(code=EXIT_CODES[result.outcome])


@app.command()
def extract(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
) -> None:
    """Show the app id and string resources found in PATH without changing anything."""

    try:
        result = extract_resources(path.read_bytes())
    except ResourceParseError as exc:
        console.print(f"[red]ERROR:[/red] {exc}")
        raise typer.Exit(code=EXIT_CODES[SetupOutcome.MALFORMED_INPUT])

    table = Table(title="Android Resources")
    table.add_column("Name", no_wrap=True)
    table.add_column("Value")
    table.add_row("app_id", result.app_id if result.app_id is not None else "[red]missing[/red]")
    for name, value in sorted(result.entries.items()):
        table.add_row(name, value)
    console.print(table)
    if not result.success:
        raise typer.Exit(code=EXIT_CODES[SetupOutcome.MALFORMED_INPUT])


@app.command("show-settings")
def show_settings(
    config: Optional[Path] = typer.Option(None, "--config", help="Path to configuration YAML"),
) -> None:
    """Print the values stored in the project settings file."""

    setup_config, settings = _load(config)
    table = Table(title=str(setup_config.settings_path))
    table.add_column("Key", no_wrap=True)
    table.add_column("Value")
    for key, value in sorted(settings.as_dict().items()):
        table.add_row(key, str(value))
    console.print(table)


@app.command("init-config")
def init_config(path: Path = typer.Argument(..., writable=True, resolve_path=True)) -> None:
    """Write an example configuration file to PATH."""

    save_config(SetupConfig(), path)
    console.print(f"[green]Wrote configuration to {path}[/green]")


if __name__ == "__main__":
    app()
