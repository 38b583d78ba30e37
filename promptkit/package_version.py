"""Project package version lookup from common manifest files."""

from __future__ import annotations

import json
import tomllib
from collections.abc import Callable
from os import PathLike
from pathlib import Path
from typing import Any

from promptkit.utils import read_file


def format_version(version: str) -> str:
    """Strip quotes and whitespace and ensure a leading ``v``."""
    cleaned = version.replace('"', "").strip()
    return cleaned if cleaned.startswith("v") else f"v{cleaned}"


def _lookup(document: Any, *keys: str) -> str | None:
    for key in keys:
        if not isinstance(document, dict) or key not in document:
            return None
        document = document[key]
    return document if isinstance(document, str) else None


def _load_toml(file_contents: str) -> Any:
    try:
        return tomllib.loads(file_contents)
    except tomllib.TOMLDecodeError:
        return None


def _load_json(file_contents: str) -> Any:
    try:
        return json.loads(file_contents)
    except ValueError:
        return None


def extract_cargo_version(file_contents: str) -> str | None:
    """Return ``package.version`` from a Cargo manifest."""
    raw_version = _lookup(_load_toml(file_contents), "package", "version")
    return None if raw_version is None else format_version(raw_version)


def _extract_json_version(file_contents: str) -> str | None:
    raw_version = _lookup(_load_json(file_contents), "version")
    if raw_version is None or raw_version == "null":
        return None
    return format_version(raw_version)


def extract_package_version(file_contents: str) -> str | None:
    """Return ``version`` from a ``package.json`` document."""
    return _extract_json_version(file_contents)


def extract_poetry_version(file_contents: str) -> str | None:
    """Return ``tool.poetry.version`` from a ``pyproject.toml`` document."""
    raw_version = _lookup(_load_toml(file_contents), "tool", "poetry", "version")
    return None if raw_version is None else format_version(raw_version)


def extract_composer_version(file_contents: str) -> str | None:
    """Return ``version`` from a ``composer.json`` document."""
    return _extract_json_version(file_contents)


_MANIFESTS: tuple[tuple[str, Callable[[str], str | None]], ...] = (
    ("Cargo.toml", extract_cargo_version),
    ("package.json", extract_package_version),
    ("pyproject.toml", extract_poetry_version),
    ("composer.json", extract_composer_version),
)


def get_package_version(base_dir: str | PathLike[str]) -> str | None:
    """Return the version of the first readable manifest in ``base_dir``.

    Manifests are tried in a fixed order; the first one that can be read
    decides the result, even when it carries no version.
    """
    base = Path(base_dir)
    for file_name, extract in _MANIFESTS:
        try:
            contents = read_file(base / file_name)
        except (OSError, UnicodeDecodeError):
            continue
        return extract(contents)
    return None