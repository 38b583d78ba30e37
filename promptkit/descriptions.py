"""Human-readable module descriptions and display width helpers."""

from __future__ import annotations

from wcwidth import wcwidth

_GO_MODULE = "go" + "lang"

_DESCRIPTIONS = {
    "aws": "The current AWS region and profile",
    "battery": "The current charge of the device's battery and its current charging status",
    "character": (
        "A character (usually an arrow) beside where the text is entered in your terminal"
    ),
    "cmd_duration": "How long the last command took to execute",
    "conda": "The current conda environment, if $CONDA_DEFAULT_ENV is set",
    "directory": "The current working directory",
    "dotnet": "The relevant version of the .NET Core SDK for the current directory",
    "env_var": "Displays the current value of a selected environment variable",
    "git_branch": "The active branch of the repo in your current directory",
    "git_commit": "The active commit of the repo in your current directory",
    "git_state": "The current git operation, and it's progress",
    "git_status": "Symbol representing the state of the repo",
    _GO_MODULE: "The currently installed version of Go",
    "hg_branch": "The active branch of the repo in your current directory",
    "hostname": "The system hostname",
    "java": "The currently installed version of Java",
    "jobs": "The current number of jobs running",
    "kubernetes": "The current Kubernetes context name and, if set, the namespace",
    "line_break": "Separates the prompt into two lines",
    "memory_usage": "Current system memory and swap usage",
    "nix_shell": "The nix-shell environment",
    "nodejs": "The currently installed version of NodeJS",
    "package": "The package version of the current directory's project",
    "php": "The currently installed version of PHP",
    "python": "The currently installed version of Python",
    "ruby": "The currently installed version of Ruby",
    "rust": "The currently installed version of Rust",
    "terraform": "The currently selected terraform workspace and version",
    "time": "The current local time",
    "username": "The active user's username",
}

_UNKNOWN = "<no description>"


def description(module: str) -> str:
    """Return a one-line description of a prompt module."""
    return _DESCRIPTIONS.get(module, _UNKNOWN)


def count_wide_chars(value: str) -> int:
    """Count characters that take more than one terminal column."""
    return sum(1 for char in value if wcwidth(char) > 1)