"""Tests for docker-compose command assembly."""

from __future__ import annotations

from pathlib import Path

import pytest

from wedding_planner.compose import assemble_compose_command, compose_file_flags
from wedding_planner.exceptions import ManifestError, MissingRemoteRunnerFilesError
from wedding_planner.manifest import Dependency, SeatingPlan, WeddingInvite


def _plan(*names: str, venue: str = "./venue") -> SeatingPlan:
    return SeatingPlan(
        attendees=[Dependency(name=name, url=f"https://example.com/{name}.git", branch="main") for name in names],
        venue=venue,
    )


def _loader(invites: dict[str, WeddingInvite]):
    return lambda dependency, venue: invites[dependency.name]


def test_single_attendee_end_to_end(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    svc = tmp_path / "venue" / "svc"
    svc.mkdir(parents=True)
    (svc / "wedding_invite.yml").write_text("build_root: .\nrunner_files: [compose/base.yml]\n", encoding="utf-8")

    command = assemble_compose_command(_plan("svc"))

    assert command == "docker-compose -f ./venue/svc/compose/base.yml "


def test_order_follows_attendees() -> None:
    invites = {
        "A": WeddingInvite(build_root=".", runner_files=["x"]),
        "B": WeddingInvite(build_root=".", runner_files=["y"]),
    }

    forward = assemble_compose_command(_plan("A", "B"), loader=_loader(invites))
    backward = assemble_compose_command(_plan("B", "A"), loader=_loader(invites))

    assert forward == "docker-compose -f ./venue/A/x -f ./venue/B/y "
    assert backward == "docker-compose -f ./venue/B/y -f ./venue/A/x "


def test_runner_files_order_is_verbatim() -> None:
    invite = WeddingInvite(build_root=".", runner_files=["runner_files/base.yml", "runner_files/database.yml"])

    flags = compose_file_flags(invite, "./tests/", "test_repo")

    assert flags == "-f ./tests/test_repo/runner_files/base.yml -f ./tests/test_repo/runner_files/database.yml "


def test_remote_uses_remote_runner_files() -> None:
    invites = {
        "svc": WeddingInvite(
            build_root=".",
            runner_files=["local.yml"],
            remote_runner_files=["remote.yml", "remote-db.yml"],
        )
    }

    command = assemble_compose_command(_plan("svc"), remote=True, loader=_loader(invites))

    assert command == "docker-compose -f ./venue/svc/remote.yml -f ./venue/svc/remote-db.yml "


def test_remote_without_remote_files_fails() -> None:
    invites = {
        "svc": WeddingInvite(build_root=".", runner_files=["local.yml"], remote_runner_files=["r.yml"]),
        "legacy": WeddingInvite(build_root=".", runner_files=["local.yml"]),
    }

    with pytest.raises(MissingRemoteRunnerFilesError) as exc_info:
        assemble_compose_command(_plan("svc", "legacy"), remote=True, loader=_loader(invites))

    assert exc_info.value.name == "legacy"


def test_unloadable_invite_fails_whole_assembly(tmp_path: Path) -> None:
    with pytest.raises(ManifestError):
        assemble_compose_command(_plan("missing", venue=str(tmp_path)))


def test_empty_plan_is_just_the_base() -> None:
    assert assemble_compose_command(_plan()) == "docker-compose "


def test_custom_base() -> None:
    invites = {"svc": WeddingInvite(build_root=".", runner_files=["a.yml"])}

    command = assemble_compose_command(_plan("svc"), loader=_loader(invites), base="docker compose")

    assert command == "docker compose -f ./venue/svc/a.yml "
