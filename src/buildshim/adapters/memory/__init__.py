"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that operate entirely
in memory -- no filesystem, no child processes, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.logging` - In-memory logging adapter
    * :mod:`.toolchain` - ToolchainSpy and SourceStub
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory
from .logging import init_logging_in_memory
from .toolchain import SourceStub, ToolchainSpy

# Static conformance assertions
if TYPE_CHECKING:
    from buildshim.application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        RunToolchain,
        ValidateSource,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_run_toolchain: RunToolchain = ToolchainSpy().run_toolchain
    _assert_validate_source: ValidateSource = SourceStub().validate_source

__all__ = [
    "SourceStub",
    "ToolchainSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
