"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.cli` - Click CLI framework integration
    * :mod:`.config` - Configuration loading, overrides, and display
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.source` - Source file validation
    * :mod:`.toolchain` - Toolchain process launch and settings
    * :mod:`.memory` - In-memory adapters for tests
"""

from __future__ import annotations

__all__: list[str] = []
