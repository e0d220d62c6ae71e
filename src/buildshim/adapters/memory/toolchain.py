"""In-memory toolchain and source adapters for testing.

Contents:
    * :class:`ToolchainSpy` - records launches instead of spawning processes.
    * :class:`SourceStub` - serves source files from a dict.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from ...domain.errors import SourceFileError, SourceFileReason, ToolchainLaunchError
from ...domain.models import InvocationResult


@dataclass
class ToolchainSpy:
    """Captures toolchain launches for test assertions.

    Each test should create its own spy. ``run_toolchain`` matches the
    RunToolchain protocol expected by AppServices.

    Attributes:
        launches: argv tuples in launch order.
        exit_status: Status reported for every launch.
        stdout: Standard output reported for every launch.
        stderr: Standard error reported for every launch.
        missing: When True, every launch fails as "program not found".

    Example:
        >>> spy = ToolchainSpy(stdout="Hello, world!\\n")
        >>> spy.run_toolchain(["cargo", "run", "-r", "--target", "wasm32"]).stdout
        'Hello, world!\\n'
        >>> spy.launches
        [('cargo', 'run', '-r', '--target', 'wasm32')]
    """

    launches: list[tuple[str, ...]] = field(default_factory=list)
    cwds: list[Path | None] = field(default_factory=list)
    exit_status: int = 0
    stdout: str = ""
    stderr: str = ""
    missing: bool = False

    def run_toolchain(self, argv: Sequence[str], *, cwd: Path | None = None) -> InvocationResult:
        command = tuple(argv)
        self.launches.append(command)
        self.cwds.append(cwd)
        if self.missing:
            error = ToolchainLaunchError(command[0], "No such file or directory", not_found=True)
            return InvocationResult(argv=command, launch_error=error)
        return InvocationResult(
            argv=command,
            exit_status=self.exit_status,
            stdout=self.stdout,
            stderr=self.stderr,
        )


@dataclass
class SourceStub:
    """Serves source contents from memory; unknown paths are missing.

    Example:
        >>> stub = SourceStub({"hello.js": 'console.log("Hello, world!");'})
        >>> stub.validate_source("hello.js")
        'console.log("Hello, world!");'
        >>> stub.reads
        ['hello.js']
    """

    files: dict[str, str] = field(default_factory=dict)
    reads: list[str] = field(default_factory=list)

    def validate_source(self, source_path: str | Path, *, encoding: str | None = None) -> str:
        key = str(source_path)
        self.reads.append(key)
        if key not in self.files:
            raise SourceFileError(key, SourceFileReason.MISSING)
        return self.files[key]


__all__ = ["SourceStub", "ToolchainSpy"]
