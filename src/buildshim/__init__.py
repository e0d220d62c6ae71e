"""Public package surface: dispatch pipeline, configuration, and metadata.

Routes imports through the architectural layers:
- Domain exports: request/result value objects and pure behaviours
- Application exports: the validate-then-dispatch use case
- Composition exports: wired adapter services
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.dispatch import dispatch_build

# Composition exports (wired adapters)
from .composition import build_production, get_config, run_toolchain, validate_source

# Domain exports
from .domain import (
    COMPLETION_MARKER,
    ExitPolicy,
    InvocationRequest,
    InvocationResult,
    SourceFileError,
    ToolchainCommand,
    ToolchainLaunchError,
    build_command_argv,
)

__all__ = [
    "COMPLETION_MARKER",
    "ExitPolicy",
    "InvocationRequest",
    "InvocationResult",
    "SourceFileError",
    "ToolchainCommand",
    "ToolchainLaunchError",
    "build_command_argv",
    "build_production",
    "dispatch_build",
    "get_config",
    "print_info",
    "run_toolchain",
    "validate_source",
]
