"""Toolchain detection for rustc that never triggers a rustup install."""

from __future__ import annotations

import enum
import os
import subprocess
from os import PathLike
from pathlib import Path, PurePath

_NOT_INSTALLED_PREFIX = "error: toolchain '"
_NOT_INSTALLED_SUFFIX = "' is not installed\n"


class RustupOutcome(enum.Enum):
    """What running ``rustup run <toolchain> rustc --version`` told us."""

    RUSTC_VERSION = "rustc_version"
    TOOLCHAIN_NAME = "toolchain_name"
    RUSTUP_NOT_WORKING = "rustup_not_working"
    ERROR = "error"


def env_rustup_toolchain() -> str | None:
    """Return ``$RUSTUP_TOOLCHAIN`` stripped of whitespace, if set."""
    value = os.environ.get("RUSTUP_TOOLCHAIN")
    return None if value is None else value.strip()


def extract_toolchain_from_rustup_override_list(
    stdout: str, cwd: str | PathLike[str]
) -> str | None:
    """Find the override toolchain that applies to ``cwd``.

    Each line of ``rustup override list`` holds a directory and a toolchain;
    the first directory that ``cwd`` lies within wins.
    """
    if stdout == "no overrides\n":
        return None
    cwd_path = PurePath(cwd)
    for line in stdout.splitlines():
        words = line.split()
        if len(words) < 2:
            continue
        directory, toolchain = words[0], words[1]
        if cwd_path.is_relative_to(PurePath(directory)):
            return toolchain
    return None


def extract_toolchain_from_rustup_run_rustc_version(
    returncode: int, stdout: bytes, stderr: bytes
) -> tuple[RustupOutcome, str | None]:
    """Classify the result of ``rustup run <toolchain> rustc --version``.

    Returns the outcome together with the rustc output or the name of the
    toolchain that is not installed; the text is None for other outcomes.
    """
    if returncode == 0:
        try:
            return RustupOutcome.RUSTC_VERSION, stdout.decode("utf-8")
        except UnicodeDecodeError:
            return RustupOutcome.ERROR, None

    try:
        message = stderr.decode("utf-8")
    except UnicodeDecodeError:
        return RustupOutcome.ERROR, None

    if (
        message.startswith(_NOT_INSTALLED_PREFIX)
        and message.endswith(_NOT_INSTALLED_SUFFIX)
        and len(message) >= len(_NOT_INSTALLED_PREFIX) + len(_NOT_INSTALLED_SUFFIX)
    ):
        name = message[len(_NOT_INSTALLED_PREFIX) : len(message) - len(_NOT_INSTALLED_SUFFIX)]
        return RustupOutcome.TOOLCHAIN_NAME, name
    return RustupOutcome.ERROR, None


def format_rustc_version(rustc_stdout: str) -> str:
    """Turn ``rustc 1.34.0 (91856ed52 2019-04-10)`` into ``v1.34.0``."""
    head = rustc_stdout.partition("(")[0]
    return f"v{head.replace('rustc', '').strip()}"


def _read_first_line(path: Path) -> str | None:
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    if not content:
        return None
    first = content.split("\n", 1)[0]
    if first.endswith("\r"):
        first = first[:-1]
    return first.strip()


def find_rust_toolchain_file(current_dir: str | PathLike[str]) -> str | None:
    """Look for a ``rust-toolchain`` file in ``current_dir`` or its parents.

    Returns the stripped first line of the nearest such file. Returns None
    when ``current_dir`` cannot be listed.
    """
    start = Path(current_dir)
    try:
        os.listdir(start)
    except OSError:
        return None

    for directory in (start, *start.parents):
        toolchain = _read_first_line(directory / "rust-toolchain")
        if toolchain is not None:
            return toolchain
    return None


def _execute_rustup_override_list(cwd: Path) -> str | None:
    try:
        completed = subprocess.run(
            ["rustup", "override", "list"], capture_output=True, check=False
        )
    except OSError:
        return None
    try:
        stdout = completed.stdout.decode("utf-8")
    except UnicodeDecodeError:
        return None
    return extract_toolchain_from_rustup_override_list(stdout, cwd)


def _execute_rustup_run_rustc_version(toolchain: str) -> tuple[RustupOutcome, str | None]:
    try:
        completed = subprocess.run(
            ["rustup", "run", toolchain, "rustc", "--version"],
            capture_output=True,
            check=False,
        )
    except OSError:
        return RustupOutcome.RUSTUP_NOT_WORKING, None
    return extract_toolchain_from_rustup_run_rustc_version(
        completed.returncode, completed.stdout, completed.stderr
    )


def _execute_rustc_version() -> str | None:
    try:
        completed = subprocess.run(["rustc", "--version"], capture_output=True, check=False)
    except OSError:
        return None
    return completed.stdout.decode("utf-8")


def _formatted_rustc_version() -> str | None:
    output = _execute_rustc_version()
    return None if output is None else format_rustc_version(output)


def detect_rust_version(current_dir: str | PathLike[str]) -> str | None:
    """Return the rustc version string that applies to ``current_dir``.

    Checks, in order, ``$RUSTUP_TOOLCHAIN``, the rustup override list and a
    ``rust-toolchain`` file, so a toolchain that is not installed is reported
    by name and never fetched.
    """
    cwd = Path(current_dir)
    toolchain = (
        env_rustup_toolchain()
        or _execute_rustup_override_list(cwd)
        or find_rust_toolchain_file(cwd)
    )
    if toolchain is None:
        return _formatted_rustc_version()

    outcome, text = _execute_rustup_run_rustc_version(toolchain)
    if outcome is RustupOutcome.RUSTC_VERSION:
        return format_rustc_version(text or "")
    if outcome is RustupOutcome.TOOLCHAIN_NAME:
        return text
    if outcome is RustupOutcome.RUSTUP_NOT_WORKING:
        return _formatted_rustc_version()
    return None