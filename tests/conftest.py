from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from tests.fakes import INVITE_YAML, FakeCommandRunner, RecordingFileHandle, write_repo
from wedding_planner.core.cpu import CpuType


@pytest.fixture()
def fake_runner() -> FakeCommandRunner:
    return FakeCommandRunner()


@pytest.fixture()
def file_handle() -> RecordingFileHandle:
    return RecordingFileHandle()


@pytest.fixture()
def repo_factory(tmp_path: Path) -> Callable[..., Path]:
    def _make(name: str = "test_repo", invite: str = INVITE_YAML, parent: Path | None = None) -> Path:
        return write_repo((parent or tmp_path / "remotes") / name, invite)

    return _make


@pytest.fixture()
def host_x86_64(monkeypatch: pytest.MonkeyPatch) -> CpuType:
    monkeypatch.setattr("wedding_planner.installer.resolve_cpu_type", lambda: CpuType.X86_64)
    return CpuType.X86_64


@pytest.fixture()
def host_aarch64(monkeypatch: pytest.MonkeyPatch) -> CpuType:
    monkeypatch.setattr("wedding_planner.installer.resolve_cpu_type", lambda: CpuType.AARCH64)
    return CpuType.AARCH64
