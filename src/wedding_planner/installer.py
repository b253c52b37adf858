"""Architecture-aware Dockerfile installation for attendee repositories.

Each repository may ship one Dockerfile per CPU type. Before building, the
one matching the host is copied to ``<build_root>/Dockerfile``; on teardown
it can be removed again. A locked target is never touched.
"""

from __future__ import annotations

import logging
import os

from wedding_planner.core.constants import DOCKERFILE_NAME
from wedding_planner.core.cpu import CpuType, resolve_cpu_type
from wedding_planner.core.file_handle import FileHandle
from wedding_planner.exceptions import ArchitectureMismatchError, MissingBuildFilesError
from wedding_planner.manifest.seating_plan import repo_path as _repo_path
from wedding_planner.manifest.wedding_invite import BuildTarget, WeddingInvite

logger = logging.getLogger(__name__)


def dockerfile_path(target: BuildTarget, repo_path: str) -> str:
    """Where the selected Dockerfile for ``target`` is installed."""
    return os.path.join(repo_path, target.build_root, DOCKERFILE_NAME)


def prepare_target(
    target: BuildTarget,
    repo_path: str,
    handle: FileHandle,
    cpu_type: CpuType | None = None,
) -> int:
    """Copy the Dockerfile for the host architecture into the build root.

    Returns:
        Number of bytes copied (0 for a locked target).

    Raises:
        MissingBuildFilesError: If the target declares no ``build_files``.
        ArchitectureMismatchError: If no file is declared for the architecture.
        UnsupportedArchitectureError: If the host architecture is unknown.
    """
    if target.locked:
        logger.info("Build locked for %s, leaving Dockerfile untouched", repo_path)
        return 0
    if target.build_files is None:
        raise MissingBuildFilesError(f"No build_files declared for build root '{target.build_root}' in {repo_path}")

    cpu = cpu_type or resolve_cpu_type()
    relative = target.build_files.get(cpu.value)
    if relative is None:
        raise ArchitectureMismatchError(cpu.value, list(target.build_files))

    source = os.path.join(repo_path, relative)
    destination = dockerfile_path(target, repo_path)
    logger.info("Installing %s as %s", source, destination)
    return handle.copy(source, destination)


def delete_target(target: BuildTarget, repo_path: str, handle: FileHandle) -> None:
    """Remove the installed Dockerfile of ``target`` unless it is locked."""
    if target.locked:
        logger.info("Build locked for %s, keeping Dockerfile", repo_path)
        return
    handle.remove(dockerfile_path(target, repo_path))


def prepare_build_file(
    invite: WeddingInvite,
    venue_path: str,
    name: str,
    handle: FileHandle,
    cpu_type: CpuType | None = None,
) -> int:
    return prepare_target(invite.build_target, _repo_path(venue_path, name), handle, cpu_type)


def delete_build_file(invite: WeddingInvite, venue_path: str, name: str, handle: FileHandle) -> None:
    delete_target(invite.build_target, _repo_path(venue_path, name), handle)


def prepare_init_build_file(
    invite: WeddingInvite,
    venue_path: str,
    name: str,
    handle: FileHandle,
    cpu_type: CpuType | None = None,
) -> int:
    """Like ``prepare_build_file`` for the init build; a no-op when none is declared."""
    if invite.init_build is None:
        return 0
    return prepare_target(invite.init_build, _repo_path(venue_path, name), handle, cpu_type)


def delete_init_build_file(invite: WeddingInvite, venue_path: str, name: str, handle: FileHandle) -> None:
    if invite.init_build is None:
        return
    delete_target(invite.init_build, _repo_path(venue_path, name), handle)


__all__ = [
    "dockerfile_path",
    "prepare_target",
    "delete_target",
    "prepare_build_file",
    "delete_build_file",
    "prepare_init_build_file",
    "delete_init_build_file",
]
