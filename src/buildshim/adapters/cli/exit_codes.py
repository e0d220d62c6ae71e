"""POSIX-conventional exit codes for CLI error paths.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes following sysexits.h, errno and shell conventions.

    * 0, 1: generic success and failure
    * 2, 13: errno-derived (ENOENT, EACCES) for unusable source files
    * 22: EINVAL for directories and undecodable sources
    * 78: EX_CONFIG (sysexits.h)
    * 126/127: toolchain not executable / not found (shell convention)
    * 128+N: signal N, produced by a signal-terminated toolchain

    Under the ``mirror`` exit policy any other toolchain status is passed
    through unchanged.

    Example:
        >>> int(ExitCode.COMMAND_NOT_FOUND)
        127
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    PERMISSION_DENIED = 13
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    COMMAND_NOT_EXECUTABLE = 126
    COMMAND_NOT_FOUND = 127
    SIGNAL_INT = 130
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
