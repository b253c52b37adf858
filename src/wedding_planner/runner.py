"""The Runner drives every attendee in the seating plan through its lifecycle.

Operations:
    - setup: create the venue directory
    - install: fresh clone + checkout of every attendee, then Dockerfile selection
    - build / run / teardown: one docker-compose invocation over all attendees
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from wedding_planner.compose import InviteLoader, assemble_compose_command, load_invite
from wedding_planner.core.command_runner import CommandRunner, ShellCommandRunner
from wedding_planner.core.file_handle import FileHandle, LocalFileHandle
from wedding_planner.exceptions import (
    ArchitectureMismatchError,
    CommandError,
    ManifestError,
    MissingBuildFilesError,
)
from wedding_planner.installer import (
    delete_build_file,
    delete_init_build_file,
    prepare_build_file,
    prepare_init_build_file,
)
from wedding_planner.manifest.seating_plan import Dependency, SeatingPlan

logger = logging.getLogger(__name__)

# Per-attendee failures that must not stop the pass over the remaining attendees
RECOVERABLE_ERRORS = (
    CommandError,
    ManifestError,
    ArchitectureMismatchError,
    MissingBuildFilesError,
    OSError,
)


@dataclass
class AttendeeOutcome:
    """Result of processing a single attendee."""

    name: str
    status: str
    error: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {"name": self.name, "status": self.status, "error": self.error}


@dataclass
class AttendeeReport:
    """Outcomes of a pass over all attendees, in seating plan order."""

    outcomes: list[AttendeeOutcome] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(outcome.error is None for outcome in self.outcomes)

    @property
    def failures(self) -> list[AttendeeOutcome]:
        return [outcome for outcome in self.outcomes if outcome.error is not None]

    def to_dict(self) -> dict[str, object]:
        return {
            "passed": self.passed,
            "attendees": [outcome.to_dict() for outcome in self.outcomes],
        }


@dataclass
class TeardownResult:
    """Compose exit status of a teardown plus the optional cleanup pass."""

    returncode: int
    cleaned: AttendeeReport | None = None

    @property
    def exit_code(self) -> int:
        if self.returncode != 0:
            return self.returncode
        if self.cleaned is not None and not self.cleaned.passed:
            return 1
        return 0


class Runner:
    """Orchestrates the attendees of a seating plan."""

    def __init__(
        self,
        seating_plan: SeatingPlan,
        command_runner: CommandRunner | None = None,
        file_handle: FileHandle | None = None,
        invite_loader: InviteLoader = load_invite,
    ):
        self.seating_plan = seating_plan
        self.command_runner = command_runner or ShellCommandRunner()
        self.file_handle = file_handle or LocalFileHandle()
        self.invite_loader = invite_loader

    @classmethod
    def from_file(cls, path: str | Path, **kwargs) -> "Runner":
        """Create a runner from a seating plan file.

        Raises:
            ManifestError: If the seating plan cannot be loaded.
        """
        return cls(SeatingPlan.from_yaml_file(path), **kwargs)

    @property
    def venue(self) -> str:
        return self.seating_plan.venue

    def create_venue(self) -> bool:
        return self.seating_plan.create_venue(self.file_handle)

    def compose_command(self, remote: bool = False) -> str:
        return assemble_compose_command(self.seating_plan, remote=remote, loader=self.invite_loader)

    def run_compose(
        self,
        subcommand: str,
        failure_message: str,
        remote: bool = False,
        extra_flags: str = "",
    ) -> int:
        """Stream ``<compose command><extra_flags><subcommand>`` and return its exit status."""
        command = f"{self.compose_command(remote)}{extra_flags}{subcommand}"
        return self.command_runner.run_streaming(command, failure_message)

    def _install_dependency(self, dependency: Dependency) -> None:
        path = dependency.repo_path(self.venue)
        if Path(path).is_dir():
            logger.info("Removing existing checkout %s", path)
            self.file_handle.remove_tree(path)

        dependency.clone(self.venue, self.command_runner)
        dependency.checkout(self.venue, self.command_runner)
        invite = self.invite_loader(dependency, self.venue)

        if invite.build_files is not None:
            prepare_build_file(invite, self.venue, dependency.name, self.file_handle)
        if invite.init_build is not None:
            prepare_init_build_file(invite, self.venue, dependency.name, self.file_handle)

    def install(self) -> AttendeeReport:
        """Freshly install every attendee, continuing past individual failures."""
        report = AttendeeReport()
        for dependency in self.seating_plan.attendees:
            try:
                self._install_dependency(dependency)
            except RECOVERABLE_ERRORS as exc:
                logger.error("Failed to install %s: %s", dependency.name, exc)
                report.outcomes.append(AttendeeOutcome(dependency.name, "failed", str(exc)))
                continue
            report.outcomes.append(AttendeeOutcome(dependency.name, "installed"))
        return report

    def clean_build_files(self) -> AttendeeReport:
        """Remove the Dockerfiles installed for every attendee."""
        report = AttendeeReport()
        for dependency in self.seating_plan.attendees:
            try:
                invite = self.invite_loader(dependency, self.venue)
                if invite.build_files is not None:
                    delete_build_file(invite, self.venue, dependency.name, self.file_handle)
                delete_init_build_file(invite, self.venue, dependency.name, self.file_handle)
            except RECOVERABLE_ERRORS as exc:
                logger.error("Failed to clean %s: %s", dependency.name, exc)
                report.outcomes.append(AttendeeOutcome(dependency.name, "failed", str(exc)))
                continue
            report.outcomes.append(AttendeeOutcome(dependency.name, "cleaned"))
        return report

    def build(self, no_cache: bool = True) -> int:
        subcommand = "build --no-cache" if no_cache else "build"
        return self.run_compose(subcommand, "failed to build")

    def run(self, remote: bool = False, detach: bool = False) -> int:
        subcommand = "up -d" if detach else "up"
        return self.run_compose(subcommand, "failed to run", remote=remote)

    def teardown(self, remote: bool = False, clean: bool = False) -> TeardownResult:
        returncode = self.run_compose("down", "failed to tear down", remote=remote)
        cleaned = self.clean_build_files() if clean else None
        return TeardownResult(returncode, cleaned)


__all__ = ["AttendeeOutcome", "AttendeeReport", "RECOVERABLE_ERRORS", "Runner", "TeardownResult"]
