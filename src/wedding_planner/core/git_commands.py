"""Git command strings used to materialize attendees in the venue."""

from __future__ import annotations

import shlex


def clone_command(url: str, repo_path: str) -> str:
    """Command that clones ``url`` into ``repo_path``."""
    return f"git clone {shlex.quote(url)} {shlex.quote(repo_path)}"


def checkout_command(repo_path: str, branch: str) -> str:
    """Command that checks out ``branch`` inside ``repo_path``."""
    return f"cd {shlex.quote(repo_path)} && git checkout {shlex.quote(branch)}"


__all__ = ["clone_command", "checkout_command"]
