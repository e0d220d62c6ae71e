"""Use-case: validate the source file, then dispatch one toolchain build."""

from __future__ import annotations

import logging
from pathlib import Path

from ..domain.behaviors import build_command_argv
from ..domain.models import InvocationRequest, InvocationResult, ToolchainCommand
from .ports import RunToolchain, ValidateSource

logger = logging.getLogger(__name__)


def dispatch_build(
    request: InvocationRequest,
    *,
    command: ToolchainCommand,
    validate_source: ValidateSource,
    run_toolchain: RunToolchain,
    encoding: str | None = None,
    cwd: Path | None = None,
) -> InvocationResult:
    """Run the validate → dispatch pipeline for one request.

    Validation failures propagate as ``SourceFileError`` before any process
    is launched. Everything that happens after launch is reported on the
    returned result instead of being raised.

    Args:
        request: Source path and target for this build.
        command: Toolchain command shape to parameterise with the target.
        validate_source: Port that reads the source file.
        run_toolchain: Port that launches the process and captures output.
        encoding: Source text encoding; ``None`` uses the platform default.
        cwd: Working directory for the toolchain; ``None`` inherits ours.

    Returns:
        The captured invocation result.

    Raises:
        SourceFileError: If the source path is not a readable text file.
    """
    contents = validate_source(request.source_path, encoding=encoding)
    logger.debug("Validated source %s (%d characters)", request.source_path, len(contents))

    argv = build_command_argv(command, request.target)
    logger.debug("Launching %s", argv)
    result = run_toolchain(argv, cwd=cwd)

    if result.launch_error is not None:
        logger.error("Toolchain could not be started: %s", result.launch_error)
    elif not result.succeeded:
        logger.warning("Toolchain exited with status %s", result.exit_status)
    else:
        logger.info("Toolchain finished for target %s", request.target)
    return result


__all__ = ["dispatch_build"]
