"""Seating plan: the top-level manifest listing attendees and the venue.

Example ``wedding_planner.yml``::

    attendees:
      - name: users-service
        url: https://github.com/example/users-service
        branch: development
      - name: billing-service
        url: https://github.com/example/billing-service
        branch: main
    venue: ../sandbox/services/

Attendees are processed strictly in the order they are listed.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from wedding_planner.core.command_runner import CommandRunner
from wedding_planner.core.constants import WEDDING_INVITE_FILE
from wedding_planner.core.file_handle import FileHandle
from wedding_planner.core.git_commands import checkout_command, clone_command
from wedding_planner.manifest.loader import load_model
from wedding_planner.manifest.wedding_invite import WeddingInvite

logger = logging.getLogger(__name__)


def repo_path(venue: str, name: str) -> str:
    """Materialized path of attendee ``name`` inside ``venue``."""
    return os.path.join(venue, name)


class Dependency(BaseModel):
    """A git repository attending the venue."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    url: str
    branch: str

    def repo_path(self, venue: str) -> str:
        return repo_path(venue, self.name)

    def invite_path(self, venue: str) -> str:
        return os.path.join(self.repo_path(venue), WEDDING_INVITE_FILE)

    def clone(self, venue: str, runner: CommandRunner) -> bool:
        """Clone the repository into the venue unless it is already there.

        Returns:
            True if a clone was run, False if the checkout already existed.

        Raises:
            CommandError: If git could not be run or failed.
        """
        path = self.repo_path(venue)
        if os.path.exists(path):
            logger.info("%s already exists, skipping", self.name)
            return False

        logger.info("Cloning %s into %s", self.url, venue)
        runner.run(clone_command(self.url, path))
        return True

    def checkout(self, venue: str, runner: CommandRunner) -> None:
        """Check out the declared branch in the materialized repository."""
        logger.info("Checking out %s for %s", self.branch, self.name)
        runner.run(checkout_command(self.repo_path(venue), self.branch))

    def wedding_invite(self, venue: str) -> WeddingInvite:
        """Load this attendee's wedding invite from disk (never cached)."""
        return WeddingInvite.from_yaml_file(self.invite_path(venue))


class SeatingPlan(BaseModel):
    """Ordered attendees plus the venue directory they are cloned into."""

    model_config = ConfigDict(frozen=True)

    attendees: List[Dependency] = Field(default_factory=list)
    venue: str

    @classmethod
    def from_yaml_file(cls, path: str | Path) -> "SeatingPlan":
        """Load a seating plan from YAML.

        Raises:
            ManifestError: If the file is missing, unreadable or malformed.
        """
        return load_model(cls, path, "seating plan")

    def create_venue(self, handle: FileHandle) -> bool:
        """Create the venue directory if it does not exist yet.

        Returns:
            True if the directory was created, False if it already existed.
        """
        if os.path.isdir(self.venue):
            logger.info("%s already exists, skipping", self.venue)
            return False

        logger.info("Creating venue directory %s", self.venue)
        handle.create_directory_if_absent(self.venue)
        return True


__all__ = ["Dependency", "SeatingPlan", "repo_path"]
