"""Attendance CLI - log and query attended subjects."""

import json
import logging
import sys
from pathlib import Path

import click

from . import __version__
from .config import CONFIG_FILE, load_config
from .core import Entry
from .errors import AttendanceError, InputParseError
from .workflows import (
    add_attendance,
    get_store,
    list_all,
    list_by_date,
    list_by_range,
    list_by_subject,
)


@click.group()
@click.version_option(version=__version__)
@click.option("--store", "store_path", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Store file to use (overrides attendance.conf)")
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              default=CONFIG_FILE, show_default=True, help="Config file to read")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, store_path: Path | None, config_path: Path, debug: bool):
    """Attendance - log the subjects you attended each day."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    try:
        config = load_config(config_path)
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"Error: failed to read config {config_path}: {e}", err=True)
        sys.exit(1)

    if store_path is not None:
        config.store_path = store_path
    ctx.obj = get_store(config)


@main.command()
@click.option("--date", "-d", "date_text", required=True, help="Date attended (YYYY-MM-DD)")
@click.option("--subjects", "-s", "subjects_text", required=True,
              help='Comma separated subjects, e.g. "Dms, Tc"')
@click.pass_obj
def add(store, date_text: str, subjects_text: str):
    """Add attended subjects for a date."""
    try:
        entry = add_attendance(store, date_text, subjects_text)
    except InputParseError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except AttendanceError as e:
        click.echo(f"Error while adding entry: {e}", err=True)
        sys.exit(1)

    click.echo(f"Added entry for {entry.date}: {_format_subjects(entry)}")


def _format_subjects(entry: Entry) -> str:
    return ", ".join(str(s) for s in entry.subjects)


def _show_entries(entries: list[Entry], as_json: bool) -> None:
    """Shared entry display logic."""
    if as_json:
        click.echo(json.dumps([e.to_dict() for e in entries], indent=2))
        return

    if not entries:
        click.echo("No entries.")
        return

    for entry in entries:
        click.echo(f"{entry.date}  {_format_subjects(entry)}")


def _run_list(ctx: click.Context, fetch, *args) -> None:
    try:
        entries = fetch(ctx.obj, *args)
    except InputParseError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except AttendanceError as e:
        click.echo(f"Error while listing entries: {e}", err=True)
        sys.exit(1)

    _show_entries(entries, ctx.meta["as_json"])


@main.group("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def list_group(ctx, as_json: bool):
    """Show stored entries."""
    ctx.meta["as_json"] = as_json


@list_group.command("all")
@click.pass_context
def list_all_cmd(ctx):
    """Show every entry."""
    _run_list(ctx, list_all)


@list_group.command("date")
@click.option("--date", "-d", "date_text", required=True, help="Date to show (YYYY-MM-DD)")
@click.pass_context
def list_date_cmd(ctx, date_text: str):
    """Show the entry on a specific date."""
    _run_list(ctx, list_by_date, date_text)


@list_group.command("range")
@click.option("--range", "-r", "range_text", required=True,
              help="Inclusive range, e.g. 2026-01-01..2026-01-07")
@click.pass_context
def list_range_cmd(ctx, range_text: str):
    """Show entries within a date range, in order."""
    _run_list(ctx, list_by_range, range_text)


@list_group.command("subject")
@click.option("--subject", "-s", "subject_text", required=True, help="Subject name, e.g. Dms")
@click.pass_context
def list_subject_cmd(ctx, subject_text: str):
    """Show entries that include a subject."""
    _run_list(ctx, list_by_subject, subject_text)
