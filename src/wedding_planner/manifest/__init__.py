"""Manifest models: the seating plan and per-repository wedding invites."""

from .loader import load_model, load_yaml_mapping
from .seating_plan import Dependency, SeatingPlan, repo_path
from .wedding_invite import BuildTarget, InitBuild, WeddingInvite

__all__ = [
    "BuildTarget",
    "Dependency",
    "InitBuild",
    "SeatingPlan",
    "WeddingInvite",
    "load_model",
    "load_yaml_mapping",
    "repo_path",
]
