"""Tests for the local filesystem handle."""

from __future__ import annotations

from pathlib import Path

import pytest

from wedding_planner.core.file_handle import FileHandle, LocalFileHandle


def test_local_handle_satisfies_protocol() -> None:
    assert isinstance(LocalFileHandle(), FileHandle)


def test_copy_overwrites_and_reports_size(tmp_path: Path) -> None:
    src = tmp_path / "Dockerfile.x86_64"
    dst = tmp_path / "Dockerfile"
    src.write_text("FROM python\n", encoding="utf-8")
    dst.write_text("stale content that is longer\n", encoding="utf-8")

    copied = LocalFileHandle().copy(src, dst)

    assert copied == len("FROM python\n")
    assert dst.read_text(encoding="utf-8") == "FROM python\n"


def test_remove_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        LocalFileHandle().remove(tmp_path / "Dockerfile")


def test_create_directory_if_absent_is_idempotent(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "venue"
    handle = LocalFileHandle()

    handle.create_directory_if_absent(target)
    handle.create_directory_if_absent(target)

    assert target.is_dir()


def test_remove_tree(tmp_path: Path) -> None:
    tree = tmp_path / "repo"
    (tree / "nested").mkdir(parents=True)
    (tree / "nested" / "file.txt").write_text("x", encoding="utf-8")

    LocalFileHandle().remove_tree(tree)

    assert not tree.exists()
