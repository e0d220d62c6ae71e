"""Application layer - use cases and port definitions.

Contains the dispatch use case that orchestrates domain logic and the port
protocols that define the interfaces for adapter implementations.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.dispatch` - Validate-then-dispatch use case
"""

from __future__ import annotations

from .dispatch import dispatch_build
from .ports import (
    DisplayConfig,
    GetConfig,
    InitLogging,
    RunToolchain,
    ValidateSource,
)

__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "RunToolchain",
    "ValidateSource",
    "dispatch_build",
]
