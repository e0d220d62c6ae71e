"""Shared pytest fixtures for CLI, dispatcher, and module-entry tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
import sys
import textwrap
from collections.abc import Callable, Iterator
from dataclasses import fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from buildshim.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for local test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

#: Stand-in toolchain: echoes its arguments as one line, then greets.
#: Target "fail" exits 101 after writing to stderr, like a failed cargo build.
FAKE_TOOLCHAIN_SOURCE = textwrap.dedent(
    """
    import json
    import sys

    args = sys.argv[1:]
    target = args[args.index("--target") + 1]
    if target == "fail":
        print("error: could not compile `hello`", file=sys.stderr)
        sys.exit(101)
    if target == "warn":
        print("warning: unused variable", file=sys.stderr)
    print(json.dumps(args))
    print("Hello, world!")
    """
)


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Click 8.2+ keeps ``result.stdout`` and ``result.stderr`` separate; log
    records go to stderr, so stdout assertions stay clean.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from buildshim.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before the test.

    Only clears before, not after, because a test may monkeypatch the loader.
    """
    from buildshim.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts, without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def inject_services() -> Callable[..., Callable[[], AppServices]]:
    """Return a factory that swaps selected production services.

    Example:
        def test_x(cli_runner, inject_services) -> None:
            spy = ToolchainSpy()
            factory = inject_services(run_toolchain=spy.run_toolchain)
            cli_runner.invoke(cli, ["build", "a.js", "wasm32"], obj=factory)
    """
    from buildshim.composition import AppServices, build_production

    def _inject(**overrides: Any) -> Callable[[], AppServices]:
        services = replace(build_production(), **overrides)
        return lambda: services

    return _inject


@pytest.fixture
def inject_config(
    clear_config_cache: None,
    inject_services: Callable[..., Callable[[], AppServices]],
) -> Callable[..., Callable[[], AppServices]]:
    """Return a factory providing services whose ``get_config`` returns ``config``.

    Extra keyword arguments replace further services.
    """

    def _inject(config: Config, **overrides: Any) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        return inject_services(get_config=_fake_get_config, **overrides)

    return _inject


@pytest.fixture
def hello_source(tmp_path: Path) -> Path:
    """A readable source file with a one-line JavaScript program."""
    source = tmp_path / "hello.js"
    source.write_text('console.log("Hello, world!");\n', encoding="utf-8")
    return source


@pytest.fixture
def fake_toolchain(tmp_path: Path) -> Path:
    """Write the stand-in toolchain script and return its path."""
    script = tmp_path / "fake_toolchain.py"
    script.write_text(FAKE_TOOLCHAIN_SOURCE, encoding="utf-8")
    return script


@pytest.fixture
def fake_toolchain_config(fake_toolchain: Path) -> Callable[..., dict[str, Any]]:
    """Return config data that runs the stand-in toolchain with this interpreter.

    Keyword arguments are merged into the ``[dispatch]`` section.
    """

    def _data(**dispatch: Any) -> dict[str, Any]:
        return {
            "toolchain": {
                "program": sys.executable,
                "arguments": [str(fake_toolchain)],
                "target_option": "--target",
            },
            "dispatch": {"exit_policy": "mirror", **dispatch},
        }

    return _data
