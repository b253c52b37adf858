"""
Wedding Planner - run a venue of independently hosted services locally.

Usage:
    wedp setup -f wedding_planner.yml
    wedp install -f wedding_planner.yml
    wedp build
    wedp run
    wedp teardown
"""

import typer

from wedding_planner.cli.commands import register_commands
from wedding_planner.cli.helpers import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="wedp",
    help="Clone, build and run docker-compose services from other git repositories",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Wedding planner: orchestrate a local venue of services."""
    configure_logging(verbose)


register_commands(app)


def main():
    app()


if __name__ == "__main__":
    main()
