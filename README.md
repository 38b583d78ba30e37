# promptkit

promptkit gathers the pieces of information a shell prompt shows. It finds the
versions of installed tools, reads repository details from the current
directory, formats the current time at a chosen offset, reads the active
Kubernetes context, and reports facts about the system and session.

It is a library and has no command of its own. Python 3.11 or later is needed.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Modules

- `promptkit.segment`: `Segment`, one piece of prompt text with an optional
  SGR style. `ansi_string()` wraps the value in escape codes when a style is
  set; `is_empty()` is true for whitespace-only values.
- `promptkit.utils`: `read_file` and `exec_cmd`. `exec_cmd` runs a program and
  returns a `CommandOutput` holding its stdout and stderr. It returns `None`
  when the program cannot be started or exits with a non-zero status.
- `promptkit.directory`: `truncate`, which keeps only the last few components
  of a slash-separated path.
- `promptkit.java_version`: `parse_jre_version`, `format_java_version` and
  `get_java_version`, for the output of `java -Xinternalversion`.
- `promptkit.versions`: formatters for the version output of Go, Haskell
  Stack, PHP, Ruby, Python and Terraform, plus `get_python_virtual_env` and
  `get_terraform_workspace`.
- `promptkit.package_version`: reads the version of the project in a directory
  from `Cargo.toml`, `package.json`, `pyproject.toml` (Poetry) or
  `composer.json`, trying them in that order.
- `promptkit.rust_toolchain`: `detect_rust_version` works out the rustc version
  in effect for a directory from `$RUSTUP_TOOLCHAIN`, the rustup override list
  or a `rust-toolchain` file, without causing a toolchain to be installed.
  `RustupOutcome` classifies the result of `rustup run`.
- `promptkit.clock`: `format_time`, `create_offset_time_string` and
  `current_time_string`.
- `promptkit.kubernetes`: `get_kube_context`, `parse_kubectl_file` and
  `current_kube_context`.
- `promptkit.vcs`: branch-name truncation by grapheme cluster, abbreviated
  commit hashes, rebase progress read from `.git`, and the Mercurial branch and
  bookmark.
- `promptkit.system`: environment variables, hostname trimming, memory
  formatting, the job count, the nix-shell label and the user id.
- `promptkit.descriptions`: `description` returns a one-line description of a
  prompt module. `count_wide_chars` counts the characters that take two
  terminal columns.

## Examples

```python
from datetime import datetime, timezone

from promptkit.clock import create_offset_time_string
from promptkit.directory import truncate
from promptkit.package_version import format_version

truncate("~/projects/app/src/lib", 3)               # "app/src/lib"
format_version('"0.1.0"')                           # "v0.1.0"

moment = datetime(2014, 7, 8, 15, 36, 47, tzinfo=timezone.utc)
create_offset_time_string(moment, "+5", "%r")       # "08:36:47 PM"
```

`create_offset_time_string` raises `InvalidOffsetError` when the offset is not
a number strictly between -24 and 24 hours.

## What it does not do

promptkit supplies the parts, not a finished prompt. It has no command to run,
reads no configuration file, and does not assemble modules into a prompt line
for any shell. It does not open Git repositories itself: it does not read the
current branch, the commit at HEAD or the working-tree status, so those values
have to be obtained elsewhere and passed to the helpers in `promptkit.vcs`.
Memory figures are formatted by `promptkit.system` but not measured.

## Tests

```
pytest
```