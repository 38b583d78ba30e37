import subprocess
from unittest import mock

import pytest

from promptkit.rust_toolchain import (
    RustupOutcome,
    detect_rust_version,
    env_rustup_toolchain,
    extract_toolchain_from_rustup_override_list,
    extract_toolchain_from_rustup_run_rustc_version,
    find_rust_toolchain_file,
    format_rustc_version,
)

OVERRIDES_INPUT = (
    "/home/user/src/a                                beta-x86_64-unknown-linux-gnu\n"
    "/home/user/src/b                                nightly-x86_64-unknown-linux-gnu\n"
)


def test_override_list_no_overrides():
    assert extract_toolchain_from_rustup_override_list("no overrides\n", "") is None


@pytest.mark.parametrize(
    ("cwd", "expected"),
    [
        ("/home/user/src/a/src", "beta-x86_64-unknown-linux-gnu"),
        ("/home/user/src/b/tests", "nightly-x86_64-unknown-linux-gnu"),
        ("/home/user/src/c/examples", None),
    ],
)
def test_override_list(cwd, expected):
    assert extract_toolchain_from_rustup_override_list(OVERRIDES_INPUT, cwd) == expected


def test_override_list_matches_whole_components_only():
    assert extract_toolchain_from_rustup_override_list(OVERRIDES_INPUT, "/home/user/src/ab") is None


def test_run_rustc_version_success():
    assert extract_toolchain_from_rustup_run_rustc_version(0, b"rustc 1.34.0\n", b"") == (
        RustupOutcome.RUSTC_VERSION,
        "rustc 1.34.0\n",
    )


def test_run_rustc_version_toolchain_not_installed():
    stderr = b"error: toolchain 'channel-triple' is not installed\n"
    assert extract_toolchain_from_rustup_run_rustc_version(1, b"", stderr) == (
        RustupOutcome.TOOLCHAIN_NAME,
        "channel-triple",
    )


def test_run_rustc_version_invalid_stdout():
    assert extract_toolchain_from_rustup_run_rustc_version(0, b"\xc3\x28", b"") == (
        RustupOutcome.ERROR,
        None,
    )


def test_run_rustc_version_invalid_stderr():
    assert extract_toolchain_from_rustup_run_rustc_version(1, b"", b"\xc3\x28") == (
        RustupOutcome.ERROR,
        None,
    )


def test_run_rustc_version_unexpected_error_format():
    assert extract_toolchain_from_rustup_run_rustc_version(1, b"", b"error:") == (
        RustupOutcome.ERROR,
        None,
    )


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("rustc 1.34.0-nightly (b139669f3 2019-04-10)", "v1.34.0-nightly"),
        ("rustc 1.34.0-beta.1 (2bc1d406d 2019-04-10)", "v1.34.0-beta.1"),
        ("rustc 1.34.0 (91856ed52 2019-04-10)", "v1.34.0"),
        ("rustc 1.34.0", "v1.34.0"),
    ],
)
def test_format_rustc_version(text, expected):
    assert format_rustc_version(text) == expected


def test_env_rustup_toolchain_strips(monkeypatch):
    monkeypatch.setenv("RUSTUP_TOOLCHAIN", "  stable \n")
    assert env_rustup_toolchain() == "stable"


def test_env_rustup_toolchain_unset(monkeypatch):
    monkeypatch.delenv("RUSTUP_TOOLCHAIN", raising=False)
    assert env_rustup_toolchain() is None


def test_find_toolchain_file_in_current_dir(tmp_path):
    (tmp_path / "rust-toolchain").write_text("  nightly-2019-01-01 \nignored\n")
    assert find_rust_toolchain_file(tmp_path) == "nightly-2019-01-01"


def test_find_toolchain_file_in_parent(tmp_path):
    (tmp_path / "rust-toolchain").write_text("beta\n")
    child = tmp_path / "a" / "b"
    child.mkdir(parents=True)
    assert find_rust_toolchain_file(child) == "beta"


def test_find_toolchain_file_missing_dir(tmp_path):
    assert find_rust_toolchain_file(tmp_path / "does-not-exist") is None


def _fake_run(responses):
    def run(args, **kwargs):
        key = tuple(args[:2])
        result = responses[key]
        if isinstance(result, BaseException):
            raise result
        return result

    return run


def test_detect_uses_env_toolchain(monkeypatch, tmp_path):
    monkeypatch.setenv("RUSTUP_TOOLCHAIN", "stable")
    responses = {
        ("rustup", "run"): subprocess.CompletedProcess(
            [], 0, b"rustc 1.40.0 (73528e339 2019-12-16)\n", b""
        ),
    }
    with mock.patch("promptkit.rust_toolchain.subprocess.run", side_effect=_fake_run(responses)):
        assert detect_rust_version(tmp_path) == "v1.40.0"


def test_detect_reports_uninstalled_toolchain(monkeypatch, tmp_path):
    monkeypatch.setenv("RUSTUP_TOOLCHAIN", "custom")
    responses = {
        ("rustup", "run"): subprocess.CompletedProcess(
            [], 1, b"", b"error: toolchain 'custom' is not installed\n"
        ),
    }
    with mock.patch("promptkit.rust_toolchain.subprocess.run", side_effect=_fake_run(responses)):
        assert detect_rust_version(tmp_path) == "custom"


def test_detect_falls_back_to_rustc_without_rustup(monkeypatch, tmp_path):
    monkeypatch.setenv("RUSTUP_TOOLCHAIN", "stable")
    responses = {
        ("rustup", "run"): FileNotFoundError("rustup"),
        ("rustc", "--version"): subprocess.CompletedProcess(
            [], 0, b"rustc 1.38.0 (625451e37 2019-09-23)\n", b""
        ),
    }
    with mock.patch("promptkit.rust_toolchain.subprocess.run", side_effect=_fake_run(responses)):
        assert detect_rust_version(tmp_path) == "v1.38.0"