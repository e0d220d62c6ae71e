"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function.  Existing module-level functions
satisfy these protocols automatically via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters.  Infrastructure types (``Config``)
    are imported under ``TYPE_CHECKING`` only so that layer contracts stay
    satisfied at runtime.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat
from ..domain.models import InvocationResult

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class ValidateSource(Protocol):
    """Read the source file fully, raising ``SourceFileError`` when unusable."""

    def __call__(self, source_path: str | Path, *, encoding: str | None = ...) -> str: ...


class RunToolchain(Protocol):
    """Launch one toolchain process and capture its streams and exit status."""

    def __call__(self, argv: Sequence[str], *, cwd: Path | None = ...) -> InvocationResult: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "RunToolchain",
    "ValidateSource",
]
