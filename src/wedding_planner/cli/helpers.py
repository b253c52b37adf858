"""Shared console, option and error helpers for CLI commands."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from wedding_planner.core.constants import (
    SEATING_PLAN_ENV_VAR,
    SEATING_PLAN_FILE,
    WEDDING_INVITE_FILE,
)
from wedding_planner.exceptions import UnsupportedArchitectureError, WeddingPlannerError
from wedding_planner.runner import AttendeeReport

console = Console()

FILE_OPTION = typer.Option(
    SEATING_PLAN_FILE,
    "--file",
    "-f",
    envvar=SEATING_PLAN_ENV_VAR,
    help="Seating plan file, relative to the current directory",
)

INVITE_OPTION = typer.Option(
    WEDDING_INVITE_FILE,
    "--invite",
    "-i",
    help="Wedding invite of the current repository, relative to the current directory",
)


def configure_logging(verbose: bool = False) -> None:
    """Route log records through rich; debug level with ``--verbose``."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=verbose, rich_tracebacks=True)],
        force=True,
    )


def resolve_manifest_path(file_name: str) -> Path:
    """Resolve a manifest argument against the current working directory."""
    return Path.cwd() / file_name


@contextmanager
def report_errors() -> Iterator[None]:
    """Turn engine errors into a red message and a non-zero exit."""
    try:
        yield
    except UnsupportedArchitectureError as exc:
        console.print(f"[red]Fatal:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(2) from exc
    except WeddingPlannerError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(1) from exc
    except OSError as exc:
        console.print(f"[red]Filesystem error:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(1) from exc


def exit_with(returncode: int) -> None:
    """Propagate a non-zero external command status as the CLI exit code."""
    if returncode != 0:
        raise typer.Exit(returncode)


def render_report(report: AttendeeReport, title: str) -> None:
    table = Table(title=title)
    table.add_column("Attendee", style="cyan")
    table.add_column("Status")
    table.add_column("Detail", style="dim")

    for outcome in report.outcomes:
        color = "red" if outcome.error else "green"
        table.add_row(outcome.name, f"[{color}]{outcome.status}[/{color}]", escape(outcome.error or ""))

    console.print(table)


__all__ = [
    "FILE_OPTION",
    "INVITE_OPTION",
    "configure_logging",
    "console",
    "exit_with",
    "render_report",
    "report_errors",
    "resolve_manifest_path",
]
