"""Core collaborators: architecture detection, commands and file access."""

from .command_runner import CommandResult, CommandRunner, ShellCommandRunner
from .constants import (
    COMPOSE_COMMAND,
    DOCKERFILE_NAME,
    SEATING_PLAN_ENV_VAR,
    SEATING_PLAN_FILE,
    WEDDING_INVITE_FILE,
)
from .cpu import CpuType, resolve_cpu_type
from .file_handle import FileHandle, LocalFileHandle

__all__ = [
    "COMPOSE_COMMAND",
    "DOCKERFILE_NAME",
    "SEATING_PLAN_ENV_VAR",
    "SEATING_PLAN_FILE",
    "WEDDING_INVITE_FILE",
    "CommandResult",
    "CommandRunner",
    "ShellCommandRunner",
    "CpuType",
    "resolve_cpu_type",
    "FileHandle",
    "LocalFileHandle",
]
