"""Typer CLI interface for Libby Import."""

import logging
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import typer
from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.table import Table

from libby_import.config import DEFAULT_SETTINGS_PATH, ImportSettings, load_settings, save_settings
from libby_import.exceptions import ImportCancelledError, LibbyImportError
from libby_import.ingestion import LibbyAdapter
from libby_import.models.enums import ConflictPolicy
from libby_import.models.journey import BookRecord
from libby_import.normalization import normalize
from libby_import.output import NoteWriter, format_file_name
from libby_import.reports import render

app = typer.Typer(
    name="libby-import",
    help="Libby Import: turn Libby reading-journey exports into Markdown notes.",
)

console = Console()

SETTINGS_OPTION = typer.Option(
    DEFAULT_SETTINGS_PATH,
    "--settings",
    envvar="LIBBY_IMPORT_SETTINGS",
    help="Path to the settings JSON file",
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Libby Import: turn Libby reading-journey exports into Markdown notes."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _ask_conflict(path: Path) -> ConflictPolicy:
    choice = Prompt.ask(
        f'File "{path.name}" already exists. Replace, save as new, or cancel?',
        choices=[policy.value for policy in ConflictPolicy],
        default=ConflictPolicy.CANCEL.value,
        console=console,
    )
    return ConflictPolicy(choice)


def _load_settings_or_exit(path: Path) -> ImportSettings:
    try:
        return load_settings(path)
    except ValueError as exc:
        typer.echo(f"Error: Invalid settings file {path}: {exc}", err=True)
        raise typer.Exit(1)


def _render_file(file: Path, settings: ImportSettings, assume_yes: bool) -> tuple[BookRecord, str]:
    """Parse, version-check, normalize and render an export. Returns (record, text)."""
    adapter = LibbyAdapter()
    raw = adapter.parse(file)

    advisory = adapter.check_version(raw)
    if advisory is not None:
        typer.echo(f"Warning: {advisory.message}", err=True)
        if not assume_yes and not Confirm.ask("Import anyway?", default=False, console=console):
            raise ImportCancelledError()

    record = normalize(raw)
    return record, render(record, tz=settings.tzinfo)


@app.command(name="import")
def import_cmd(
    file: Path = typer.Argument(..., help="Libby reading-journey export (.json)"),
    folder: Path | None = typer.Option(None, "--folder", "-f", help="Folder for the new note"),
    name: str | None = typer.Option(
        None,
        "--name",
        "-n",
        help="File name template, e.g. '{{title}} - {{author}}'",
    ),
    on_conflict: str = typer.Option(
        "ask",
        "--on-conflict",
        help="What to do when the note exists: ask, replace, new, cancel",
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Import newer export versions without asking"),
    settings_path: Path = SETTINGS_OPTION,
) -> None:
    """Import a Libby export and write it as a Markdown note.

    \b
    File name variables:
      {{title}} {{author}} {{publisher}} {{format}} {{ISBN}}
      {{dateImported}} {{dateBorrowed}}
    """
    if on_conflict != "ask" and on_conflict not in {policy.value for policy in ConflictPolicy}:
        typer.echo(f"Error: Invalid --on-conflict '{on_conflict}'. Valid: ask, replace, new, cancel", err=True)
        raise typer.Exit(1)

    settings = _load_settings_or_exit(settings_path)

    try:
        record, text = _render_file(file, settings, yes)
        base_name = format_file_name(record, name or settings.new_file_name)
        writer = NoteWriter(folder or settings.folder)
        resolve = _ask_conflict if on_conflict == "ask" else ConflictPolicy(on_conflict)
        path = writer.write(base_name, text, resolve)
    except FileNotFoundError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)
    except ImportCancelledError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1)
    except LibbyImportError as exc:
        typer.echo(f"Error: The file could not be imported: {exc}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Imported {record.title or file.name} to {path}")


@app.command()
def preview(
    file: Path = typer.Argument(..., help="Libby reading-journey export (.json)"),
    tz: str | None = typer.Option(None, "--tz", help="IANA timezone for dates (default: settings, then local)"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Render newer export versions without asking"),
    settings_path: Path = SETTINGS_OPTION,
) -> None:
    """Print the Markdown note for an export without writing a file."""
    settings = _load_settings_or_exit(settings_path)
    if tz:
        try:
            ZoneInfo(tz)
        except (ZoneInfoNotFoundError, ValueError):
            typer.echo(f"Error: Unknown timezone '{tz}'", err=True)
            raise typer.Exit(1)
        settings = settings.model_copy(update={"timezone": tz})

    try:
        _, text = _render_file(file, settings, yes)
    except FileNotFoundError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)
    except LibbyImportError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    typer.echo(text, nl=False)


@app.command()
def settings(
    folder: str | None = typer.Option(None, "--folder", "-f", help="Default folder for new notes"),
    name: str | None = typer.Option(None, "--name", "-n", help="Default file name template"),
    timezone: str | None = typer.Option(None, "--timezone", help="IANA timezone for dates ('' for local)"),
    settings_path: Path = SETTINGS_OPTION,
) -> None:
    """Show the current settings, or update them when options are given."""
    current = _load_settings_or_exit(settings_path)
    updates = {
        key: value
        for key, value in {"new_file_location": folder, "new_file_name": name, "timezone": timezone}.items()
        if value is not None
    }

    if updates:
        try:
            current = ImportSettings.model_validate({**current.model_dump(), **updates})
        except ValueError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1)
        save_settings(current, settings_path)
        typer.echo(f"Saved settings to {settings_path}")

    table = Table(title="Libby Import Settings")
    table.add_column("Setting")
    table.add_column("Value")
    table.add_row("New file location", current.new_file_location or "(current folder)")
    table.add_row("New file name", current.new_file_name)
    table.add_row("Timezone", current.timezone or "(local)")
    console.print(table)
