"""Helpers for describing Git and Mercurial repositories in a prompt."""

from __future__ import annotations

import logging
import re as _stdlib_re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

import regex

log = logging.getLogger(__name__)

_GRAPHEME = regex.compile(r"\X")
_COUNT = _stdlib_re.compile(r"\+?[0-9]+")


def truncate_graphemes(text: str, length: int | None) -> str:
    """Return the first ``length`` grapheme clusters of ``text``.

    A length of None keeps the whole text.
    """
    clusters = _GRAPHEME.findall(text)
    if length is None:
        return "".join(clusters)
    return "".join(clusters[:length])


def graphemes_len(text: str) -> int:
    """Return the number of grapheme clusters in ``text``."""
    return len(_GRAPHEME.findall(text))


def truncate_branch(branch_name: str, truncation_length: int, truncation_symbol: str) -> str:
    """Shorten a branch name to ``truncation_length`` graphemes.

    The first grapheme of ``truncation_symbol`` is appended only when the
    name was actually cut. A non-positive length disables truncation.
    """
    if truncation_length <= 0:
        log.warning(
            '"truncation_length" should be a positive value, found %s', truncation_length
        )
        return branch_name

    truncated = truncate_graphemes(branch_name, truncation_length)
    if truncation_length < graphemes_len(branch_name):
        return truncated + truncate_graphemes(truncation_symbol, 1)
    return truncated


def id_to_hex_abbrev(data: bytes, length: int) -> str:
    """Return the first ``length`` characters of the hex encoding of ``data``."""
    return data.hex()[:length]


@dataclass(frozen=True)
class RebaseProgress:
    """Step reached in an ongoing rebase, out of the total number of steps."""

    current: int
    total: int


def _read_count(path: Path) -> int | None:
    try:
        contents = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    text = contents.strip()
    if not _COUNT.fullmatch(text):
        return None
    return int(text)


def _progress_from(dot_git: Path, current_name: str, total_name: str) -> RebaseProgress | None:
    current = _read_count(dot_git / current_name)
    if current is None:
        return None
    total = _read_count(dot_git / total_name)
    if total is None:
        return None
    return RebaseProgress(current, total)


def rebase_progress(root: str | PathLike[str]) -> RebaseProgress | None:
    """Read the progress of a rebase from the ``.git`` directory under ``root``.

    Returns None when no progress information can be read.
    """
    dot_git = Path(root) / ".git"
    if (dot_git / "rebase-merge").exists():
        return _progress_from(dot_git, "rebase-merge/msgnum", "rebase-merge/end")
    if (dot_git / "rebase-apply").exists():
        return _progress_from(dot_git, "rebase-apply/next", "rebase-apply/last")
    return None


def _read_stripped(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError):
        return None


def get_hg_branch_name(current_dir: str | PathLike[str]) -> str:
    """Return the Mercurial branch name, ``default`` when none is recorded."""
    name = _read_stripped(Path(current_dir) / ".hg" / "branch")
    return "default" if name is None else name


def get_hg_current_bookmark(current_dir: str | PathLike[str]) -> str | None:
    """Return the active Mercurial bookmark, if any."""
    return _read_stripped(Path(current_dir) / ".hg" / "bookmarks.current")