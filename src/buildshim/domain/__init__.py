"""Domain layer - pure business logic with no I/O or framework dependencies.

Contains the value objects and pure behaviours of a single dispatch.

Contents:
    * :mod:`.models` - InvocationRequest, InvocationResult, ToolchainCommand
    * :mod:`.behaviors` - argv construction, report ordering, exit-status policy
    * :mod:`.enums` - Domain enumerations (OutputFormat, ExitPolicy)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    COMPLETION_MARKER,
    ReportLine,
    build_command_argv,
    normalize_returncode,
    render_report,
    resolve_exit_code,
)
from .enums import ExitPolicy, OutputFormat
from .errors import (
    ConfigurationError,
    SourceFileError,
    SourceFileReason,
    ToolchainExitError,
    ToolchainLaunchError,
)
from .models import InvocationRequest, InvocationResult, ToolchainCommand

__all__ = [
    # Behaviors
    "COMPLETION_MARKER",
    "ReportLine",
    "build_command_argv",
    "normalize_returncode",
    "render_report",
    "resolve_exit_code",
    # Models
    "InvocationRequest",
    "InvocationResult",
    "ToolchainCommand",
    # Enums
    "ExitPolicy",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "SourceFileError",
    "SourceFileReason",
    "ToolchainExitError",
    "ToolchainLaunchError",
]
