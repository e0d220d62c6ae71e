"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

import shlex
from enum import Enum


class SourceFileReason(str, Enum):
    """Why a source path was rejected by the input validator.

    Example:
        >>> SourceFileReason.MISSING.value
        'missing'
    """

    MISSING = "missing"
    DIRECTORY = "directory"
    UNREADABLE = "unreadable"
    UNDECODABLE = "undecodable"


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when a configuration section cannot be parsed into its settings
    model. Caught at the CLI boundary and reported with ``CONFIG_ERROR``.

    Example:
        >>> err = ConfigurationError("toolchain.program must not be empty")
        >>> str(err)
        'toolchain.program must not be empty'
    """


class SourceFileError(Exception):
    """The source path does not name a readable text file.

    No toolchain process is ever launched once this is raised.

    Attributes:
        path: The rejected path as given by the caller.
        reason: Which check failed.

    Example:
        >>> err = SourceFileError("missing.txt", SourceFileReason.MISSING)
        >>> str(err)
        "Source file 'missing.txt' does not exist"
        >>> err.reason is SourceFileReason.MISSING
        True
    """

    _MESSAGES = {
        SourceFileReason.MISSING: "does not exist",
        SourceFileReason.DIRECTORY: "is a directory",
        SourceFileReason.UNREADABLE: "is not readable",
        SourceFileReason.UNDECODABLE: "is not valid text",
    }

    def __init__(self, path: str, reason: SourceFileReason, detail: str | None = None) -> None:
        self.path = path
        self.reason = reason
        self.detail = detail
        message = f"Source file {path!r} {self._MESSAGES[reason]}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ToolchainLaunchError(Exception):
    """The toolchain executable could not be started.

    Never raised by the dispatcher itself; it is stored on the invocation
    result and reported through the execution-error channel.

    Attributes:
        program: The program that failed to start.
        not_found: True when the program could not be located at all.

    Example:
        >>> err = ToolchainLaunchError("cargo", "No such file or directory", not_found=True)
        >>> str(err)
        "Failed to launch 'cargo': No such file or directory"
    """

    def __init__(self, program: str, detail: str, *, not_found: bool = False) -> None:
        self.program = program
        self.detail = detail
        self.not_found = not_found
        super().__init__(f"Failed to launch {program!r}: {detail}")


class ToolchainExitError(Exception):
    """The toolchain ran but finished with a failing status.

    Example:
        >>> err = ToolchainExitError(("cargo", "run"), 101)
        >>> str(err)
        'Command failed with exit status 101: cargo run'
    """

    def __init__(self, argv: tuple[str, ...], exit_status: int) -> None:
        self.argv = argv
        self.exit_status = exit_status
        super().__init__(f"Command failed with exit status {exit_status}: {shlex.join(argv)}")


__all__ = [
    "ConfigurationError",
    "SourceFileError",
    "SourceFileReason",
    "ToolchainExitError",
    "ToolchainLaunchError",
]
