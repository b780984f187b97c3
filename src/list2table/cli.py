"""Click CLI for list2table — convert lists to tables."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import IO

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from list2table.config.defaults import DEFAULT_SETTINGS_PATH
from list2table.config.hierarchy import load_config_hierarchy
from list2table.config.store import SettingsStore, build_settings
from list2table.core import convert_list_to_table
from list2table.errors import List2TableError
from list2table.types import ConversionConfig

console = Console()
error_console = Console(stderr=True)


def _setup_logging(verbosity: int, default_level: str = "WARNING") -> None:
    """Configure logging based on verbosity level."""
    level = logging.getLevelName(default_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
    )


@click.group()
@click.version_option(package_name="list2table")
def cli() -> None:
    """list2table — turn bulleted, numbered and to-do lists into tables."""


@cli.command()
@click.argument("input_file", type=click.File("r"), default="-")
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Output file path.")
@click.option(
    "--header/--empty-header",
    default=None,
    help="Use the first item as the header row, or leave the header blank.",
)
@click.option("-c", "--columns", type=click.IntRange(min=0), default=None, help="Empty columns to add.")
@click.option(
    "--lines",
    "line_range",
    type=str,
    default=None,
    help="Convert only lines START:END (1-based, inclusive) and print the whole document.",
)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
def convert(
    input_file: IO[str],
    output: str | None,
    header: bool | None,
    columns: int | None,
    line_range: str | None,
    verbose: int,
) -> None:
    """Convert a list read from INPUT_FILE (default stdin) into a table."""
    config = load_config_hierarchy(
        leave_header_empty=None if header is None else not header,
        number_of_empty_columns=columns,
    )
    _setup_logging(verbose, str(config.get("log_level", "WARNING")))

    conversion_config = build_settings(config, source="configuration")

    text = input_file.read()

    if line_range is None:
        result = convert_list_to_table(text, conversion_config)
    else:
        try:
            result = _convert_lines(text, line_range, conversion_config)
        except List2TableError as e:
            error_console.print(f"[red]Error:[/red] {escape(e.message)}")
            sys.exit(1)

    if not result:
        error_console.print("[yellow]No list items found, nothing to convert.[/yellow]")
        return

    if output:
        try:
            Path(output).write_text(result)
        except OSError as e:
            error_console.print(f"[red]Error:[/red] cannot write {escape(output)}: {escape(str(e))}")
            sys.exit(1)
        error_console.print(f"[green]Written to {output}[/green]")
    else:
        click.echo(result, nl=False)


def _convert_lines(text: str, line_range: str, config: ConversionConfig) -> str:
    """Run the editor command over a line range and return the whole document."""
    from list2table.editor import ListToTableCommand, TextDocument, parse_line_range

    document = TextDocument(text)
    selection = parse_line_range(line_range, document)
    command = ListToTableCommand(lambda: config)
    if command.run(document, [selection], selection.head) is None:
        return ""
    return document.text


@cli.group("config")
def config_group() -> None:
    """Show and edit conversion settings."""


@config_group.command("show")
def config_show() -> None:
    """Show the resolved configuration."""
    config = load_config_hierarchy()

    table = Table(title="Configuration", show_header=True)
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    for key, value in config.items():
        table.add_row(key, str(value))

    console.print(table)


_settings_option = click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False),
    default=str(DEFAULT_SETTINGS_PATH),
    show_default=True,
    help="Settings file to update.",
)


@config_group.command("set-columns")
@click.argument("value", type=str)
@_settings_option
def config_set_columns(value: str, settings_path: str) -> None:
    """Set the number of empty columns; invalid values are ignored."""
    store = SettingsStore(settings_path)
    store.load()
    if not store.set_number_of_empty_columns(value):
        error_console.print(
            f"[yellow]Ignored '{escape(value)}', keeping "
            f"{store.settings.number_of_empty_columns} empty column(s).[/yellow]"
        )
        return
    _save(store)
    console.print(f"Empty columns set to {store.settings.number_of_empty_columns}")


@config_group.command("set-header-empty")
@click.argument("value", type=bool)
@_settings_option
def config_set_header_empty(value: bool, settings_path: str) -> None:
    """Choose whether the header row is left empty."""
    store = SettingsStore(settings_path)
    store.load()
    store.set_leave_header_empty(value)
    _save(store)
    console.print(f"Leave header empty set to {value}")


def _save(store: SettingsStore) -> None:
    try:
        store.save()
    except List2TableError as e:
        error_console.print(f"[red]Error:[/red] {escape(e.message)}")
        sys.exit(1)


@cli.command("commands")
def list_editor_commands() -> None:
    """List available editor commands."""
    import list2table.editor  # noqa: F401
    from list2table.commands import list_commands

    table = Table(title="Editor Commands", show_header=True)
    table.add_column("ID", style="cyan")
    table.add_column("Name")

    for info in list_commands():
        table.add_row(info.id, info.name)

    console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    cli()
