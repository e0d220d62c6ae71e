"""Module entry stories ensuring `python -m` mirrors the CLI."""

from __future__ import annotations

import runpy
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from buildshim import __init__conf__, entry
from buildshim.adapters import cli as cli_mod


@pytest.mark.os_agnostic
def test_module_entry_executes_cli_and_shows_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """python -m invocation with no args shows help and exits 0."""
    monkeypatch.setattr(sys, "argv", ["buildshim"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("buildshim.__main__", run_name="__main__")

    captured = capsys.readouterr()
    assert exc.value.code == 0
    assert "Usage:" in captured.out
    assert __init__conf__.shell_command in captured.out


@pytest.mark.os_agnostic
def test_module_entry_reports_missing_source_with_exit_code(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
    tmp_path: Path,
) -> None:
    """A missing source file exits 2 without launching anything."""
    missing = tmp_path / "nowhere.js"
    monkeypatch.setattr(sys, "argv", ["buildshim", "build", str(missing), "wasm32"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("buildshim.__main__", run_name="__main__")

    captured = capsys.readouterr()
    assert exc.value.code == cli_mod.ExitCode.FILE_NOT_FOUND
    assert "does not exist" in strip_ansi(captured.err)
    assert "Done!" not in captured.out


@pytest.mark.os_agnostic
def test_module_entry_cli_exports_all_registered_commands() -> None:
    """CLI facade exports all registered commands."""
    exported = {name for name in dir(cli_mod) if name.startswith("cli_")}

    assert {"cli_build", "cli_config", "cli_info"}.issubset(exported)
    assert set(cli_mod.cli.commands) == {"build", "config", "info"}


@pytest.mark.os_agnostic
def test_module_entry_subprocess_help() -> None:
    """Verify `python -m buildshim --help` works via subprocess."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "buildshim", "--help"],
        capture_output=True,
        timeout=30,
        check=False,
        # rich-click output may hold characters cp1252 cannot decode
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert "Usage:" in result.stdout
    assert __init__conf__.shell_command in result.stdout


@pytest.mark.os_agnostic
def test_module_entry_subprocess_version() -> None:
    """Verify `python -m buildshim --version` outputs version."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "buildshim", "--version"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert __init__conf__.version in result.stdout


@pytest.mark.os_agnostic
def test_entry_main_invokes_cli_with_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """entry.main() wires production services and invokes the CLI."""
    monkeypatch.setattr(sys, "argv", ["buildshim", "--help"])

    exit_code = entry.main()

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Usage:" in captured.out
    assert __init__conf__.shell_command in captured.out


@pytest.mark.os_agnostic
def test_entry_main_returns_usage_error_without_target(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    """entry.main() returns 2 when build is missing SOURCE or TARGET."""
    monkeypatch.setattr(sys, "argv", ["buildshim", "build", "hello.js"])

    exit_code = entry.main()

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exit_code == 2
    assert "SOURCE and TARGET are required" in plain_err
