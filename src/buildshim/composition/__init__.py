"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config

# Configuration services
from ..adapters.config.loader import get_config

# Logging services
from ..adapters.logging.setup import init_logging

# Build services
from ..adapters.source.validator import validate_source
from ..adapters.toolchain.runner import run_toolchain

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory import SourceStub, ToolchainSpy
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        RunToolchain,
        ValidateSource,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_validate_source: ValidateSource = validate_source
    _assert_run_toolchain: RunToolchain = run_toolchain


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging
    validate_source: ValidateSource
    run_toolchain: RunToolchain


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
        validate_source=validate_source,
        run_toolchain=run_toolchain,
    )


def build_testing(*, spy: ToolchainSpy | None = None, source: SourceStub | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional ToolchainSpy capturing launches. A fresh one is created
            when None; pass your own to assert on launches.
        source: Optional SourceStub serving source files. When None the real
            filesystem validator is used.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        ToolchainSpy,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    toolchain_spy = spy if spy is not None else ToolchainSpy()

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        validate_source=source.validate_source if source is not None else validate_source,
        run_toolchain=toolchain_spy.run_toolchain,
    )


__all__ = [
    # Configuration
    "display_config",
    "get_config",
    # Logging
    "init_logging",
    # Build
    "run_toolchain",
    "validate_source",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
