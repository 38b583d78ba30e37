"""A single styled piece of text inside a prompt module."""

from __future__ import annotations

from dataclasses import dataclass

_RESET = "\x1b[0m"


@dataclass
class Segment:
    """A configurable element of a module, such as a symbol or a version.

    ``style`` holds SGR parameters (for example ``"1;32"`` for bold green).
    When it is ``None`` the segment inherits the style of its module and is
    rendered without escape codes of its own.
    """

    name: str
    value: str = ""
    style: str | None = None

    def ansi_string(self) -> str:
        """Return the value wrapped in the segment's ANSI style, if any."""
        if not self.style:
            return self.value
        return f"\x1b[{self.style}m{self.value}{_RESET}"

    def is_empty(self) -> bool:
        """Return True when the value holds nothing but whitespace."""
        return not self.value.strip()

    def __str__(self) -> str:
        return self.ansi_string()