"""Tests for shell command execution and output draining."""

from __future__ import annotations

import shutil
import subprocess
from unittest.mock import patch

import pytest

from wedding_planner.core.command_runner import STDERR, STDOUT, ShellCommandRunner
from wedding_planner.exceptions import CommandError

needs_bash = pytest.mark.skipif(shutil.which("bash") is None, reason="bash not available")


@needs_bash
def test_run_captures_stdout() -> None:
    result = ShellCommandRunner().run("echo hello")

    assert result.ok
    assert result.stdout.strip() == "hello"


@needs_bash
def test_run_raises_on_non_zero_exit() -> None:
    with pytest.raises(CommandError) as exc_info:
        ShellCommandRunner().run("echo broken >&2; exit 3")

    assert exc_info.value.returncode == 3
    assert "broken" in str(exc_info.value)


def test_run_raises_when_shell_missing() -> None:
    with patch(
        "wedding_planner.core.command_runner.subprocess.run",
        side_effect=FileNotFoundError("bash"),
    ):
        with pytest.raises(CommandError) as exc_info:
            ShellCommandRunner().run("ls")

    assert exc_info.value.command == "ls"


@needs_bash
def test_run_streaming_drains_both_streams() -> None:
    seen: list[tuple[str, str]] = []

    returncode = ShellCommandRunner().run_streaming(
        "for i in 1 2 3; do echo out$i; echo err$i >&2; done; exit 4",
        "failed to run",
        on_line=lambda stream, line: seen.append((stream, line)),
    )

    assert returncode == 4
    assert [line for stream, line in seen if stream == STDOUT] == ["out1", "out2", "out3"]
    assert [line for stream, line in seen if stream == STDERR] == ["err1", "err2", "err3"]


@needs_bash
def test_run_streaming_does_not_stall_on_large_stderr() -> None:
    seen: list[str] = []

    returncode = ShellCommandRunner().run_streaming(
        "for i in $(seq 1 5000); do echo line$i >&2; done; echo done",
        "failed to run",
        on_line=lambda stream, line: seen.append(line),
    )

    assert returncode == 0
    assert len(seen) == 5001
    assert "done" in seen


def test_run_streaming_spawn_failure_uses_failure_message() -> None:
    with patch(
        "wedding_planner.core.command_runner.subprocess.Popen",
        side_effect=OSError("no such file"),
    ):
        with pytest.raises(CommandError) as exc_info:
            ShellCommandRunner().run_streaming("docker-compose up", "failed to run")

    assert str(exc_info.value).startswith("failed to run")


def test_run_passes_command_to_shell() -> None:
    completed = subprocess.CompletedProcess(args=[], returncode=0, stdout="", stderr="")
    with patch("wedding_planner.core.command_runner.subprocess.run", return_value=completed) as run:
        ShellCommandRunner(shell="sh").run("git status")

    assert run.call_args.args[0] == ["sh", "-c", "git status"]
