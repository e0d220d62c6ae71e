"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Build command from :mod:`.build_cmd`
    * Config command from :mod:`.config`
    * Info command from :mod:`.info`
"""

from __future__ import annotations

from .build_cmd import cli_build
from .config import cli_config
from .info import cli_info

__all__ = [
    "cli_build",
    "cli_config",
    "cli_info",
]
