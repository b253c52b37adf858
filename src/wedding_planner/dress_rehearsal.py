"""Dress rehearsal: run the venue together with the repository you are in.

A repository that is itself an attendee elsewhere can rehearse against the
rest of the venue: its own ``wedding_invite.yml`` ``runner_files`` are
appended after every attendee's, so they take precedence. A remote rehearsal
pulls the attendees' remote files but still uses the local ones here.
"""

from __future__ import annotations

import os
from pathlib import Path

from wedding_planner.compose import file_flags
from wedding_planner.manifest.wedding_invite import WeddingInvite
from wedding_planner.runner import AttendeeReport, Runner


class DressRehearsal:
    """Runner wrapper that adds the working directory's own compose files."""

    def __init__(self, runner: Runner, wedding_invite: WeddingInvite, working_directory: str):
        self.runner = runner
        self.wedding_invite = wedding_invite
        self.working_directory = working_directory

    @classmethod
    def from_files(
        cls,
        seating_plan_path: str | Path,
        wedding_invite_path: str | Path,
        working_directory: str | None = None,
        **runner_kwargs,
    ) -> "DressRehearsal":
        """Load both manifests.

        Raises:
            ManifestError: If either manifest cannot be loaded.
        """
        runner = Runner.from_file(seating_plan_path, **runner_kwargs)
        invite = WeddingInvite.from_yaml_file(wedding_invite_path)
        return cls(runner, invite, working_directory or os.getcwd())

    def local_flags(self) -> str:
        # The working repository is always built locally, even against remote images.
        return file_flags(self.wedding_invite.runner_files, self.working_directory)

    def compose_command(self, remote: bool = False) -> str:
        return self.runner.compose_command(remote) + self.local_flags()

    def _run(self, subcommand: str, failure_message: str, remote: bool = False) -> int:
        return self.runner.run_compose(
            subcommand,
            failure_message,
            remote=remote,
            extra_flags=self.local_flags(),
        )

    def setup(self) -> bool:
        return self.runner.create_venue()

    def install(self) -> AttendeeReport:
        return self.runner.install()

    def build(self, no_cache: bool = True) -> int:
        return self._run("build --no-cache" if no_cache else "build", "failed to build")

    def run(self, remote: bool = False, detach: bool = False) -> int:
        return self._run("up -d" if detach else "up", "failed to run", remote=remote)

    def teardown(self, remote: bool = False) -> int:
        return self._run("down", "failed to tear down", remote=remote)


__all__ = ["DressRehearsal"]
