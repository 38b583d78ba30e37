"""File reading and external command helpers."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike

log = logging.getLogger(__name__)


def read_file(path: str | PathLike[str]) -> str:
    """Return the text contents of a file."""
    with open(path, encoding="utf-8") as handle:
        return handle.read()


@dataclass(frozen=True)
class CommandOutput:
    """Captured standard output and error of a finished command."""

    stdout: str
    stderr: str


def exec_cmd(cmd: str, args: Iterable[str] = ()) -> CommandOutput | None:
    """Run a command and return its output if it exits successfully.

    Returns None when the command cannot be started or exits with a
    non-zero status.
    """
    arguments = list(args)
    log.debug("Executing command %r with args %r", cmd, arguments)
    try:
        completed = subprocess.run([cmd, *arguments], capture_output=True, check=False)
    except OSError:
        return None

    stdout = completed.stdout.decode("utf-8")
    stderr = completed.stderr.decode("utf-8")

    if completed.returncode != 0:
        log.debug("Non-zero exit code %r", completed.returncode)
        log.debug("stdout: %s", stdout)
        log.debug("stderr: %s", stderr)
        return None

    return CommandOutput(stdout=stdout, stderr=stderr)