"""
Wedding Planner Exceptions
==========================

Every error the engine raises on purpose derives from ``WeddingPlannerError``
so the CLI can report it in one place. Filesystem failures are left as the
native ``OSError`` raised by the operation that failed.
"""

from __future__ import annotations


class WeddingPlannerError(RuntimeError):
    """Base exception for all wedding planner errors."""


class ManifestError(WeddingPlannerError):
    """Raised when a seating plan or wedding invite cannot be read or parsed."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class ArchitectureMismatchError(WeddingPlannerError):
    """Raised when a build target has no Dockerfile for the host architecture."""

    def __init__(self, cpu_type: str, available: list[str] | None = None):
        self.cpu_type = cpu_type
        self.available = sorted(available or [])
        message = f"No build file for CPU type: {cpu_type}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class UnsupportedArchitectureError(WeddingPlannerError):
    """Raised when the host machine is outside the supported architecture set.

    Nothing in the engine recovers from this; no build selection is possible.
    """

    def __init__(self, machine: str):
        self.machine = machine
        super().__init__(f"Unsupported CPU type: {machine}")


class MissingBuildFilesError(WeddingPlannerError):
    """Raised when a build file is requested from a target that declares none."""


class MissingRemoteRunnerFilesError(WeddingPlannerError):
    """Raised when remote compose files are requested but not declared."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} does not declare remote_runner_files")


class CommandError(WeddingPlannerError):
    """Raised when an external command cannot be spawned or exits non-zero."""

    def __init__(
        self,
        message: str,
        command: str | None = None,
        returncode: int | None = None,
        stderr: str = "",
    ):
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr


__all__ = [
    "WeddingPlannerError",
    "ManifestError",
    "ArchitectureMismatchError",
    "UnsupportedArchitectureError",
    "MissingBuildFilesError",
    "MissingRemoteRunnerFilesError",
    "CommandError",
]
