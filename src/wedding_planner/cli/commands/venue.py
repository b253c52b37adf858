"""Venue commands: setup, install, build, run and teardown of all attendees."""

from __future__ import annotations

import json

import typer

from wedding_planner.cli.helpers import (
    FILE_OPTION,
    console,
    exit_with,
    render_report,
    report_errors,
    resolve_manifest_path,
)
from wedding_planner.runner import Runner


def _load_runner(file_name: str) -> Runner:
    return Runner.from_file(resolve_manifest_path(file_name))


def _teardown(file_name: str, remote: bool, clean: bool) -> None:
    with report_errors():
        result = _load_runner(file_name).teardown(remote=remote, clean=clean)
    if result.cleaned is not None:
        render_report(result.cleaned, "Clean")
    exit_with(result.exit_code)


def setup(file: str = FILE_OPTION) -> None:
    """Create the venue directory."""
    with report_errors():
        runner = _load_runner(file)
        if runner.create_venue():
            console.print(f"[green]✓[/green] Created venue {runner.venue}")
        else:
            console.print(f"[dim]{runner.venue} already exists, skipping[/dim]")


def install(
    file: str = FILE_OPTION,
    json_output: bool = typer.Option(False, "--json", help="Emit install outcomes as JSON"),
) -> None:
    """Clone every attendee, check out its branch and install its Dockerfiles."""
    with report_errors():
        report = _load_runner(file).install()

    if json_output:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        render_report(report, "Install")

    if not report.passed:
        raise typer.Exit(1)


def build(
    file: str = FILE_OPTION,
    no_cache: bool = typer.Option(True, "--no-cache/--cache", help="Build images without the docker layer cache"),
) -> None:
    """Build every attendee's images with docker-compose."""
    with report_errors():
        exit_with(_load_runner(file).build(no_cache=no_cache))


def run(
    file: str = FILE_OPTION,
    detach: bool = typer.Option(False, "--detach", "-d", help="Run containers in the background"),
) -> None:
    """Start every attendee from locally built images."""
    with report_errors():
        exit_with(_load_runner(file).run(detach=detach))


def remoterun(
    file: str = FILE_OPTION,
    detach: bool = typer.Option(False, "--detach", "-d", help="Run containers in the background"),
) -> None:
    """Start every attendee from remote images."""
    with report_errors():
        exit_with(_load_runner(file).run(remote=True, detach=detach))


def teardown(
    file: str = FILE_OPTION,
    clean: bool = typer.Option(False, "--clean", help="Remove installed Dockerfiles afterwards"),
) -> None:
    """Stop and remove the locally built containers."""
    _teardown(file, remote=False, clean=clean)


def remoteteardown(
    file: str = FILE_OPTION,
    clean: bool = typer.Option(False, "--clean", help="Remove installed Dockerfiles afterwards"),
) -> None:
    """Stop and remove the containers started from remote images."""
    _teardown(file, remote=True, clean=clean)


__all__ = ["setup", "install", "build", "run", "remoterun", "teardown", "remoteteardown"]
