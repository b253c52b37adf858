"""Shell command execution for git and docker-compose invocations.

Two flavours are provided:
    - ``run``: capture output, raise ``CommandError`` on failure
    - ``run_streaming``: echo stdout and stderr line by line while the
      process runs, for long docker-compose builds and ``up`` sessions
"""

from __future__ import annotations

import logging
import queue
import subprocess
import threading
from dataclasses import dataclass
from typing import IO, Callable, Protocol, runtime_checkable

from rich.console import Console

from wedding_planner.exceptions import CommandError

logger = logging.getLogger(__name__)

LineCallback = Callable[[str, str], None]

STDOUT = "stdout"
STDERR = "stderr"


@dataclass
class CommandResult:
    """Captured result of a completed command."""

    command: str
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@runtime_checkable
class CommandRunner(Protocol):
    """Capability used by the engine to run external commands."""

    def run(self, command: str) -> CommandResult:
        ...

    def run_streaming(
        self,
        command: str,
        failure_message: str,
        on_line: LineCallback | None = None,
    ) -> int:
        ...


def _first_line(text: str) -> str:
    for line in text.splitlines():
        stripped = line.strip()
        if stripped:
            return stripped
    return ""


def _pump(stream: IO[str], name: str, lines: "queue.Queue[tuple[str, str | None]]") -> None:
    """Push every line of ``stream`` onto ``lines``, then an end marker."""
    try:
        for line in iter(stream.readline, ""):
            lines.put((name, line.rstrip("\n")))
    finally:
        stream.close()
        lines.put((name, None))


class ShellCommandRunner:
    """CommandRunner that executes commands through ``bash -c``."""

    def __init__(self, shell: str = "bash", console: Console | None = None):
        self.shell = shell
        self.console = console or Console()

    def run(self, command: str) -> CommandResult:
        logger.debug("Running: %s", command)
        try:
            completed = subprocess.run(
                [self.shell, "-c", command],
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as exc:
            raise CommandError(f"Failed to start command: {exc}", command=command) from exc

        result = CommandResult(
            command=command,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
        if not result.ok:
            detail = _first_line(result.stderr) or f"exit code {result.returncode}"
            raise CommandError(
                f"Command failed: {command}: {detail}",
                command=command,
                returncode=result.returncode,
                stderr=result.stderr,
            )
        return result

    def _echo(self, stream: str, line: str) -> None:
        self.console.print(line, markup=False, highlight=False)

    def run_streaming(
        self,
        command: str,
        failure_message: str,
        on_line: LineCallback | None = None,
    ) -> int:
        """Run ``command`` and forward its output as it is produced.

        Both pipes are drained by reader threads into a single queue, so a
        chatty stderr never blocks stdout (or the reverse). The loop ends once
        both streams have reached end of file.

        Returns:
            The process exit status.

        Raises:
            CommandError: If the process could not be started.
        """
        callback = on_line or self._echo
        logger.debug("Streaming: %s", command)
        try:
            process = subprocess.Popen(
                [self.shell, "-c", command],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                bufsize=1,
            )
        except OSError as exc:
            raise CommandError(f"{failure_message}: {exc}", command=command) from exc

        lines: "queue.Queue[tuple[str, str | None]]" = queue.Queue()
        readers = [
            threading.Thread(target=_pump, args=(process.stdout, STDOUT, lines), daemon=True),
            threading.Thread(target=_pump, args=(process.stderr, STDERR, lines), daemon=True),
        ]
        for reader in readers:
            reader.start()

        open_streams = len(readers)
        while open_streams:
            stream, line = lines.get()
            if line is None:
                open_streams -= 1
                continue
            callback(stream, line)

        for reader in readers:
            reader.join()
        returncode = process.wait()
        logger.debug("Command exited with %s: %s", returncode, command)
        return returncode


__all__ = [
    "CommandResult",
    "CommandRunner",
    "LineCallback",
    "ShellCommandRunner",
    "STDOUT",
    "STDERR",
]
