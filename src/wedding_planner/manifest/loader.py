"""YAML loading shared by the seating plan and wedding invite models."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from wedding_planner.exceptions import ManifestError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _describe_validation_error(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
        problems.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(problems)


def load_yaml_mapping(path: str | Path, label: str) -> dict[str, Any]:
    """Read ``path`` and return its top-level mapping.

    Raises:
        ManifestError: If the file cannot be read or is not a YAML mapping.
    """
    manifest_path = Path(path)
    yaml = YAML(typ="safe")

    try:
        with open(manifest_path, "r", encoding="utf-8") as f:
            data = yaml.load(f)
    except OSError as exc:
        raise ManifestError(f"Could not open {label} {manifest_path}: {exc}", path=str(path)) from exc
    except YAMLError as exc:
        raise ManifestError(f"Invalid YAML in {label} {manifest_path}: {exc}", path=str(path)) from exc

    if not isinstance(data, dict):
        raise ManifestError(f"Invalid {label} {manifest_path}: root must be a mapping", path=str(path))
    return data


def load_model(model: type[ModelT], path: str | Path, label: str) -> ModelT:
    """Load ``path`` as YAML and validate it into ``model``."""
    data = load_yaml_mapping(path, label)
    try:
        instance = model.model_validate(data)
    except ValidationError as exc:
        raise ManifestError(
            f"Could not parse {label} {path}: {_describe_validation_error(exc)}",
            path=str(path),
        ) from exc
    logger.debug("Loaded %s from %s", label, path)
    return instance


__all__ = ["load_yaml_mapping", "load_model"]
