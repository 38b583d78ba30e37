"""Version string formatting and environment lookups for language toolchains."""

from __future__ import annotations

import os
from os import PathLike
from pathlib import Path, PurePath

from promptkit.utils import read_file


def _strip_prefix_repeatedly(text: str, prefix: str) -> str:
    while prefix and text.startswith(prefix):
        text = text[len(prefix):]
    return text


def _strip_suffix_repeatedly(text: str, suffix: str) -> str:
    while suffix and text.endswith(suffix):
        text = text[: -len(suffix)]
    return text


def format_go_version(go_stdout: str) -> str | None:
    """Turn ``go version go1.13.3 linux/amd64`` into ``v1.13.3``."""
    _, marker, remainder = go_stdout.partition("go version go")
    if not marker:
        return None
    words = remainder.split()
    if not words:
        return None
    return f"v{words[0]}"


def format_haskell_version(haskell_version: str) -> str:
    """Prefix the numeric GHC version with ``v``."""
    return f"v{haskell_version.strip()}"


def format_php_version(php_version: str) -> str:
    """Prefix the PHP version with ``v``."""
    return f"v{php_version}"


def format_ruby_version(ruby_version: str) -> str | None:
    """Turn ``ruby 2.6.0p0 (...)`` into ``v2.6.0``.

    Takes the first five bytes of the second word; returns None when that
    word is missing or too short.
    """
    words = ruby_version.split()
    if len(words) < 2:
        return None
    raw = words[1].encode("utf-8")
    if len(raw) < 5:
        return None
    try:
        version = raw[:5].decode("utf-8")
    except UnicodeDecodeError:
        return None
    return f"v{version}"


def format_python_version(python_stdout: str) -> str:
    """Turn ``Python 3.7.2`` (optionally with an Anaconda tag) into ``v3.7.2``."""
    text = _strip_prefix_repeatedly(python_stdout, "Python ")
    text = _strip_suffix_repeatedly(text, ":: Anaconda, Inc.")
    return f"v{text.strip()}"


def format_terraform_version(version: str) -> str | None:
    """Return the version from the first line of ``terraform version``.

    The result carries a trailing space to separate it from the workspace.
    """
    if not version:
        return None
    first_line = version.split("\n", 1)[0]
    if first_line.endswith("\r"):
        first_line = first_line[:-1]
    first_line = _strip_prefix_repeatedly(first_line, "Terraform ")
    return first_line.strip() + " "


def get_python_virtual_env() -> str | None:
    """Return the final path component of ``$VIRTUAL_ENV``, if set."""
    venv = os.environ.get("VIRTUAL_ENV")
    if venv is None:
        return None
    name = PurePath(venv).name
    if not name or name == "..":
        return None
    return name


def get_terraform_workspace(cwd: str | PathLike[str]) -> str | None:
    """Determine the currently selected Terraform workspace.

    ``$TF_WORKSPACE`` wins outright. Otherwise the ``environment`` file in
    the data directory (``$TF_DATA_DIR`` or ``.terraform``) is read; a
    missing file means the ``default`` workspace, any other failure None.
    """
    workspace_override = os.environ.get("TF_WORKSPACE")
    if workspace_override is not None:
        return workspace_override

    data_dir_env = os.environ.get("TF_DATA_DIR")
    datadir = Path(data_dir_env) if data_dir_env is not None else Path(cwd) / ".terraform"

    try:
        return read_file(datadir / "environment")
    except FileNotFoundError:
        return "default"
    except (OSError, UnicodeDecodeError):
        return None