"""Java runtime version detection from ``java -Xinternalversion`` output."""

from __future__ import annotations

import os
import re

from promptkit.utils import exec_cmd

_VERSION = re.compile(r"[0-9.]+")
_PREFIXES = ("JRE (", "VM (")


def parse_jre_version(text: str) -> str | None:
    """Extract the version number from ``java -Xinternalversion`` output.

    Recognised shapes include ``JRE (1.8.0_222-b10)``,
    ``JRE (Zulu 8.40.0.25-CA-linux64) (1.8.0_222-b10)`` and
    ``VM (1.8.0_222-b10)``.
    """
    for prefix in _PREFIXES:
        index = text.find(prefix)
        if index != -1:
            position = index + len(prefix)
            break
    else:
        return None

    direct = _VERSION.match(text, position)
    if direct:
        return direct.group()

    paren = text.find("(", position)
    if paren == -1:
        return None
    nested = _VERSION.match(text, paren + 1)
    return nested.group() if nested else None


def format_java_version(java_out: str) -> str | None:
    """Return the Java version prefixed with ``v``, or None if not found."""
    version = parse_jre_version(java_out)
    return None if version is None else f"v{version}"


def get_java_version() -> str | None:
    """Run the Java runtime and return its combined internal version output."""
    java_home = os.environ.get("JAVA_HOME")
    java_command = f"{java_home}/bin/java" if java_home is not None else "java"
    output = exec_cmd(java_command, ["-Xinternalversion"])
    if output is None:
        return None
    return output.stdout + output.stderr