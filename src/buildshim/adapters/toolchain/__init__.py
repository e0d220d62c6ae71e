"""Toolchain adapter - external process launch and its settings.

Contents:
    * :mod:`.runner` - Launch one toolchain process and capture its output
    * :mod:`.settings` - Pydantic models for the build-related config sections
"""

from __future__ import annotations

from .runner import run_toolchain
from .settings import BuildSettings, load_build_settings

__all__ = ["BuildSettings", "load_build_settings", "run_toolchain"]
