"""Assembly of the compound docker-compose command for a venue.

Every attendee contributes one ``-f <venue>/<name>/<file> `` flag per compose
file, in manifest order. Later files override earlier ones under compose
semantics, so the order is preserved exactly.
"""

from __future__ import annotations

import os
from typing import Callable

from wedding_planner.core.constants import COMPOSE_COMMAND
from wedding_planner.exceptions import MissingRemoteRunnerFilesError
from wedding_planner.manifest.seating_plan import Dependency, SeatingPlan
from wedding_planner.manifest.wedding_invite import WeddingInvite

InviteLoader = Callable[[Dependency, str], WeddingInvite]


def load_invite(dependency: Dependency, venue: str) -> WeddingInvite:
    return dependency.wedding_invite(venue)


def file_flags(files: list[str], root: str) -> str:
    """``-f <root>/<file> `` for each file, in order."""
    return "".join(f"-f {root}/{file} " for file in files)


def compose_file_flags(invite: WeddingInvite, venue: str, name: str, remote: bool = False) -> str:
    """Compose flags contributed by a single repository.

    Raises:
        MissingRemoteRunnerFilesError: If ``remote`` is requested and the
            invite declares no ``remote_runner_files``.
    """
    if remote:
        if invite.remote_runner_files is None:
            raise MissingRemoteRunnerFilesError(name)
        files = invite.remote_runner_files
    else:
        files = invite.runner_files
    return file_flags(files, os.path.join(venue, name))


def assemble_compose_command(
    seating_plan: SeatingPlan,
    remote: bool = False,
    loader: InviteLoader = load_invite,
    base: str = COMPOSE_COMMAND,
) -> str:
    """Build the docker-compose prefix covering every attendee.

    The result ends with a trailing space; callers append the subcommand
    (``build --no-cache``, ``up``, ``down`` ...).

    Raises:
        ManifestError: If any attendee's wedding invite cannot be loaded.
        MissingRemoteRunnerFilesError: See ``compose_file_flags``.
    """
    parts = [f"{base} "]
    venue = seating_plan.venue
    for dependency in seating_plan.attendees:
        invite = loader(dependency, venue)
        parts.append(compose_file_flags(invite, venue, dependency.name, remote))
    return "".join(parts)


__all__ = [
    "InviteLoader",
    "assemble_compose_command",
    "compose_file_flags",
    "file_flags",
    "load_invite",
]
