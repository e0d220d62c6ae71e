"""Value objects describing one dispatch: request, command shape, and result."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import ToolchainExitError, ToolchainLaunchError


@dataclass(frozen=True, slots=True)
class InvocationRequest:
    """Source file and target identifier for a single build attempt.

    The source path is kept exactly as given; the target is opaque and
    passed through verbatim to the toolchain.

    Example:
        >>> req = InvocationRequest(source_path="hello.js", target="wasm32")
        >>> req.target
        'wasm32'
    """

    source_path: str
    target: str


@dataclass(frozen=True, slots=True)
class ToolchainCommand:
    """Shape of the external command, independent of the target.

    Defaults reproduce ``cargo run -r --target <target>``.

    Example:
        >>> ToolchainCommand().program
        'cargo'
    """

    program: str = "cargo"
    arguments: tuple[str, ...] = ("run", "-r")
    target_option: str = "--target"


@dataclass(frozen=True, slots=True)
class InvocationResult:
    """Everything captured from one toolchain invocation.

    Attributes:
        argv: The argument vector that was (or would have been) executed.
        exit_status: Normalised exit status, ``None`` when the process never started.
        stdout: Complete standard output of the child.
        stderr: Complete standard error of the child.
        launch_error: Set when the program could not be started.

    Example:
        >>> ok = InvocationResult(argv=("cargo",), exit_status=0, stdout="Hello, world!\\n")
        >>> ok.succeeded, ok.error is None
        (True, True)
        >>> failed = InvocationResult(argv=("cargo",), exit_status=101)
        >>> str(failed.error)
        'Command failed with exit status 101: cargo'
    """

    argv: tuple[str, ...]
    exit_status: int | None = None
    stdout: str = ""
    stderr: str = ""
    launch_error: ToolchainLaunchError | None = field(default=None)

    @property
    def launched(self) -> bool:
        return self.launch_error is None

    @property
    def succeeded(self) -> bool:
        return self.launch_error is None and self.exit_status == 0

    @property
    def error(self) -> ToolchainLaunchError | ToolchainExitError | None:
        """Execution error for this run, if any."""
        if self.launch_error is not None:
            return self.launch_error
        if self.exit_status is not None and self.exit_status != 0:
            return ToolchainExitError(self.argv, self.exit_status)
        return None


__all__ = [
    "InvocationRequest",
    "InvocationResult",
    "ToolchainCommand",
]
