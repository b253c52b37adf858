"""CLI command modules for wedding planner."""

from __future__ import annotations

import typer

from . import dress, venue


def register_commands(app: typer.Typer) -> None:
    """Attach every command to the root ``wedp`` app."""
    app.command()(venue.setup)
    app.command()(venue.install)
    app.command()(venue.build)
    app.command()(venue.run)
    app.command()(venue.remoterun)
    app.command()(venue.teardown)
    app.command()(venue.remoteteardown)
    app.add_typer(dress.app, name="dress")


__all__ = ["register_commands"]
