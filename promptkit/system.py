"""Helpers for the host, user, shell and memory parts of a prompt."""

from __future__ import annotations

import math
import os
import re

from promptkit.utils import exec_cmd

_BINARY_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_UNSIGNED = re.compile(r"\+?[0-9]+")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U32_MAX = 2**32 - 1


def get_env_value(name: str, default: str | None = None) -> str | None:
    """Return the value of environment variable ``name``.

    Falls back to ``default`` when the variable is unset. A value that is
    not valid Unicode yields None.
    """
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return value


def trim_hostname(host: str, trim_at: str) -> str:
    """Cut ``host`` at the first occurrence of ``trim_at``.

    An empty ``trim_at``, or one that does not occur, leaves the host whole.
    """
    if not trim_at:
        return host
    head, marker, _ = host.partition(trim_at)
    return head if marker else host


def format_kib(n_kib: int) -> str:
    """Render a size in KiB with the largest fitting binary unit, e.g. ``8GiB``."""
    value = float(max(n_kib, 0) * 1024)
    unit = 0
    while value >= 1024 and unit < len(_BINARY_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{value:.0f}{_BINARY_UNITS[unit]}"


def _format_percent(used: int, total: int) -> str:
    if total == 0:
        percent = math.nan if used == 0 else math.inf
    else:
        percent = used / total * 100.0
    if math.isnan(percent):
        return "NaN"
    return f"{percent:.0f}"


def format_memory(
    used_kib: int, total_kib: int, show_percentage: bool, percent_sign: str = "%"
) -> str:
    """Describe memory use as a percentage or as ``used/total`` sizes.

    ``percent_sign`` is ``%%`` for shells such as zsh that treat ``%`` as an
    escape character.
    """
    if show_percentage:
        return f"{_format_percent(used_kib, total_kib)}{percent_sign}"
    return f"{format_kib(used_kib)}/{format_kib(total_kib)}"


def parse_jobs(value: str | None) -> int | None:
    """Parse the number of background jobs reported by the shell.

    A missing value counts as zero jobs; an unparsable one yields None.
    """
    text = ("0" if value is None else value).strip()
    if not _INTEGER.fullmatch(text):
        return None
    number = int(text)
    if not _I64_MIN <= number <= _I64_MAX:
        return None
    return number


def nix_shell_label(
    shell_type: str, pure_msg: str, impure_msg: str, name: str | None = None
) -> str | None:
    """Return the label for a nix-shell of type ``shell_type``.

    ``$IN_NIX_SHELL`` is ``pure``, ``impure`` or ``1`` (impure). Any other
    value means no nix-shell label. With ``name`` given the label reads
    ``name (message)``.
    """
    if shell_type in ("1", "impure"):
        message = impure_msg
    elif shell_type == "pure":
        message = pure_msg
    else:
        return None
    return message if name is None else f"{name} ({message})"


def get_uid() -> int | None:
    """Return the numeric id of the current user as reported by ``id -u``."""
    output = exec_cmd("id", ["-u"])
    if output is None:
        return None
    text = output.stdout.strip()
    if not _UNSIGNED.fullmatch(text):
        return None
    uid = int(text)
    return uid if uid <= _U32_MAX else None