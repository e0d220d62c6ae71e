"""Build dispatcher process runner.

Launches exactly one toolchain process from an argument vector and captures
its complete stdout, stderr, and exit status. No shell is involved at any
point, so the target string reaches the toolchain as a single argument.

Contents:
    * :func:`run_toolchain` - launch, drain, and wrap the outcome.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from buildshim.domain.behaviors import normalize_returncode
from buildshim.domain.errors import ToolchainLaunchError
from buildshim.domain.models import InvocationResult

logger = logging.getLogger(__name__)


def run_toolchain(argv: Sequence[str], *, cwd: Path | None = None) -> InvocationResult:
    """Run the toolchain to completion and capture everything it produced.

    Both pipes are drained concurrently while waiting, so a chatty child
    cannot deadlock on a full pipe. There is no timeout: the call returns
    when the child exits.

    Args:
        argv: Program followed by its discrete arguments.
        cwd: Working directory for the child; ``None`` inherits ours.

    Returns:
        InvocationResult with streams and normalised exit status, or with
        ``launch_error`` set when the program could not be started.

    Example:
        >>> import sys
        >>> result = run_toolchain([sys.executable, "-c", "print('Hello, world!')"])
        >>> result.exit_status, result.stdout.strip()
        (0, 'Hello, world!')
    """
    command = tuple(argv)
    logger.debug("Launching toolchain: %s", command)
    if cwd is not None and not cwd.is_dir():
        error = ToolchainLaunchError(command[0], f"working directory {str(cwd)!r} does not exist")
        return InvocationResult(argv=command, launch_error=error)
    try:
        completed = subprocess.run(  # noqa: S603
            command,
            cwd=cwd,
            capture_output=True,
            text=True,
            errors="replace",
            check=False,
        )
    except FileNotFoundError as exc:
        error = ToolchainLaunchError(command[0], exc.strerror or str(exc), not_found=True)
        return InvocationResult(argv=command, launch_error=error)
    except OSError as exc:
        error = ToolchainLaunchError(command[0], exc.strerror or str(exc))
        return InvocationResult(argv=command, launch_error=error)

    return InvocationResult(
        argv=command,
        exit_status=normalize_returncode(completed.returncode),
        stdout=completed.stdout,
        stderr=completed.stderr,
    )


__all__ = ["run_toolchain"]
