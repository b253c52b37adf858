"""Shared file names and command constants for wedding planner."""

from __future__ import annotations

SEATING_PLAN_FILE = "wedding_planner.yml"
WEDDING_INVITE_FILE = "wedding_invite.yml"
DOCKERFILE_NAME = "Dockerfile"
COMPOSE_COMMAND = "docker-compose"
SEATING_PLAN_ENV_VAR = "WEDDING_PLANNER_FILE"

__all__ = [
    "SEATING_PLAN_FILE",
    "WEDDING_INVITE_FILE",
    "DOCKERFILE_NAME",
    "COMPOSE_COMMAND",
    "SEATING_PLAN_ENV_VAR",
]
