"""Wedding invite: the manifest each attendee repository carries in its root.

Example ``wedding_invite.yml``::

    build_root: "."
    runner_files:
      - runner_files/base.yml
      - runner_files/database.yml
    remote_runner_files:
      - runner_files/remote.yml
    build_files:
      x86_64: builds/Dockerfile.x86_64
      aarch64: builds/Dockerfile.aarch64
    init_build:
      build_files:
        x86_64: database/builds/Dockerfile.x86_64
        aarch64: database/builds/Dockerfile.aarch64
      build_root: database

``build_files`` maps a CPU type to the Dockerfile that should be copied to
``<build_root>/Dockerfile`` before building. Setting ``build_lock: true``
leaves the repository's own Dockerfile alone.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from wedding_planner.manifest.loader import load_model


class BuildTarget(BaseModel):
    """A single Dockerfile-producing target inside a repository.

    Attributes:
        build_files: CPU type to Dockerfile path, relative to the repository root
        build_root: Directory (relative to the repository root) that receives
            the selected ``Dockerfile``
        build_lock: When true the target is left untouched by the installer
    """

    model_config = ConfigDict(frozen=True)

    build_files: Optional[Dict[str, str]] = Field(
        default=None,
        description="CPU type to Dockerfile path (relative to repository root)",
    )
    build_root: str = Field(..., description="Directory receiving the selected Dockerfile")
    build_lock: Optional[bool] = Field(
        default=None,
        description="Skip Dockerfile selection for this target when true",
    )

    @property
    def locked(self) -> bool:
        return self.build_lock is True


class InitBuild(BuildTarget):
    """Secondary build target, e.g. a database init container."""

    build_files: Dict[str, str] = Field(
        ...,
        description="CPU type to Dockerfile path (relative to repository root)",
    )


class WeddingInvite(BaseModel):
    """Per-repository manifest describing build artifacts and compose files."""

    model_config = ConfigDict(frozen=True)

    build_files: Optional[Dict[str, str]] = None
    build_root: str
    init_build: Optional[InitBuild] = None
    runner_files: List[str]
    remote_runner_files: Optional[List[str]] = None
    build_lock: Optional[bool] = None

    @property
    def build_target(self) -> BuildTarget:
        """The top-level build target of this repository."""
        return BuildTarget(
            build_files=self.build_files,
            build_root=self.build_root,
            build_lock=self.build_lock,
        )

    @classmethod
    def from_yaml_file(cls, path: str | Path) -> "WeddingInvite":
        """Load a wedding invite from YAML.

        Raises:
            ManifestError: If the file is missing, unreadable or malformed.
        """
        return load_model(cls, path, "wedding invite")


__all__ = ["BuildTarget", "InitBuild", "WeddingInvite"]
