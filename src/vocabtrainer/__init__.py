"""vocabtrainer package."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

__all__ = ["__version__"]


def _version_from_pyproject() -> str | None:
    """Best-effort version lookup from a checkout's pyproject.toml."""
    for base in Path(__file__).resolve().parents:
        pyproject = base / "pyproject.toml"
        if not pyproject.exists():
            continue
        with pyproject.open("rb") as handle:
            data = tomllib.load(handle)
        project = data.get("project", {})
        if project.get("name") != "vocabtrainer":
            continue
        value = project.get("version")
        return str(value) if value else None
    return None


def _resolve_version() -> str:
    found = _version_from_pyproject()
    if found is not None:
        return found
    try:
        return version("vocabtrainer")
    except PackageNotFoundError:
        return "0+unknown"


__version__ = _resolve_version()
