"""Dress rehearsal commands: the venue plus the repository in the current directory."""

from __future__ import annotations

import os

import typer

from wedding_planner.cli.helpers import (
    FILE_OPTION,
    INVITE_OPTION,
    console,
    exit_with,
    render_report,
    report_errors,
    resolve_manifest_path,
)
from wedding_planner.dress_rehearsal import DressRehearsal

app = typer.Typer(
    name="dress",
    help="Rehearse the venue together with the current repository",
    no_args_is_help=True,
)


def _load_rehearsal(file_name: str, invite_name: str) -> DressRehearsal:
    return DressRehearsal.from_files(
        resolve_manifest_path(file_name),
        resolve_manifest_path(invite_name),
        os.getcwd(),
    )


@app.command("setup")
def setup_command(file: str = FILE_OPTION, invite: str = INVITE_OPTION) -> None:
    """Create the venue directory."""
    with report_errors():
        rehearsal = _load_rehearsal(file, invite)
        if rehearsal.setup():
            console.print(f"[green]✓[/green] Created venue {rehearsal.runner.venue}")
        else:
            console.print(f"[dim]{rehearsal.runner.venue} already exists, skipping[/dim]")


@app.command("install")
def install_command(file: str = FILE_OPTION, invite: str = INVITE_OPTION) -> None:
    """Install every attendee of the venue."""
    with report_errors():
        report = _load_rehearsal(file, invite).install()
    render_report(report, "Install")
    if not report.passed:
        raise typer.Exit(1)


@app.command("build")
def build_command(
    file: str = FILE_OPTION,
    invite: str = INVITE_OPTION,
    no_cache: bool = typer.Option(True, "--no-cache/--cache", help="Build images without the docker layer cache"),
) -> None:
    """Build the venue and the current repository."""
    with report_errors():
        exit_with(_load_rehearsal(file, invite).build(no_cache=no_cache))


@app.command("run")
def run_command(
    file: str = FILE_OPTION,
    invite: str = INVITE_OPTION,
    detach: bool = typer.Option(False, "--detach", "-d", help="Run containers in the background"),
) -> None:
    """Run the venue and the current repository from local images."""
    with report_errors():
        exit_with(_load_rehearsal(file, invite).run(detach=detach))


@app.command("remoterun")
def remoterun_command(
    file: str = FILE_OPTION,
    invite: str = INVITE_OPTION,
    detach: bool = typer.Option(False, "--detach", "-d", help="Run containers in the background"),
) -> None:
    """Run the venue and the current repository from remote images."""
    with report_errors():
        exit_with(_load_rehearsal(file, invite).run(remote=True, detach=detach))


@app.command("teardown")
def teardown_command(file: str = FILE_OPTION, invite: str = INVITE_OPTION) -> None:
    """Tear down the local rehearsal."""
    with report_errors():
        exit_with(_load_rehearsal(file, invite).teardown())


@app.command("remoteteardown")
def remoteteardown_command(file: str = FILE_OPTION, invite: str = INVITE_OPTION) -> None:
    """Tear down the remote-image rehearsal."""
    with report_errors():
        exit_with(_load_rehearsal(file, invite).teardown(remote=True))


__all__ = ["app"]
