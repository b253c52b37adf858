"""Filesystem primitives used by the installer and venue setup."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Protocol, runtime_checkable

PathLike = str | Path


@runtime_checkable
class FileHandle(Protocol):
    """Minimal file operations the engine needs."""

    def copy(self, src: PathLike, dst: PathLike) -> int:
        """Copy ``src`` over ``dst`` and return the number of bytes copied."""
        ...

    def remove(self, path: PathLike) -> None:
        """Remove a single file."""
        ...

    def create_directory_if_absent(self, path: PathLike) -> None:
        """Create ``path`` and any missing parents."""
        ...

    def remove_tree(self, path: PathLike) -> None:
        """Remove a directory and everything below it."""
        ...


class LocalFileHandle:
    """FileHandle backed by the local filesystem."""

    def copy(self, src: PathLike, dst: PathLike) -> int:
        shutil.copyfile(src, dst)
        return os.path.getsize(dst)

    def remove(self, path: PathLike) -> None:
        os.remove(path)

    def create_directory_if_absent(self, path: PathLike) -> None:
        os.makedirs(path, exist_ok=True)

    def remove_tree(self, path: PathLike) -> None:
        shutil.rmtree(path)


__all__ = ["FileHandle", "LocalFileHandle", "PathLike"]
