"""Typed views of the ``[toolchain]``, ``[source]`` and ``[dispatch]`` sections.

Configuration dictionaries are parsed once at the boundary with Pydantic and
turned into domain values; malformed sections surface as
``ConfigurationError``.

Contents:
    * :class:`ToolchainSettings` - external command shape and working directory.
    * :class:`SourceSettings` - source file text encoding.
    * :class:`DispatchSettings` - exit-status policy.
    * :class:`BuildSettings` - the three sections bundled together.
    * :func:`load_build_settings` - parse all sections from a Config.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from pathlib import Path
from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from buildshim.domain.enums import ExitPolicy
from buildshim.domain.errors import ConfigurationError
from buildshim.domain.models import ToolchainCommand


class ToolchainSettings(BaseModel):
    """Pydantic model for the ``[toolchain]`` section.

    Example:
        >>> settings = ToolchainSettings()
        >>> settings.to_command()
        ToolchainCommand(program='cargo', arguments=('run', '-r'), target_option='--target')
        >>> settings.cwd is None
        True
    """

    program: str = "cargo"
    arguments: list[str] = ["run", "-r"]
    target_option: str = "--target"
    working_dir: str = ""

    model_config = ConfigDict(extra="forbid")

    @field_validator("program", "target_option")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    def to_command(self) -> ToolchainCommand:
        return ToolchainCommand(
            program=self.program,
            arguments=tuple(self.arguments),
            target_option=self.target_option,
        )

    @property
    def cwd(self) -> Path | None:
        return Path(self.working_dir).expanduser() if self.working_dir else None


class SourceSettings(BaseModel):
    """Pydantic model for the ``[source]`` section.

    Example:
        >>> SourceSettings(encoding="").text_encoding is None
        True
        >>> SourceSettings(encoding="utf-8").text_encoding
        'utf-8'
    """

    encoding: str = ""

    model_config = ConfigDict(extra="forbid")

    @field_validator("encoding")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        if value:
            try:
                codecs.lookup(value)
            except LookupError as exc:
                raise ValueError(f"unknown encoding {value!r}") from exc
        return value

    @property
    def text_encoding(self) -> str | None:
        return self.encoding or None


class DispatchSettings(BaseModel):
    """Pydantic model for the ``[dispatch]`` section.

    Example:
        >>> DispatchSettings().exit_policy
        <ExitPolicy.MIRROR: 'mirror'>
    """

    exit_policy: ExitPolicy = ExitPolicy.MIRROR

    model_config = ConfigDict(extra="forbid")


@dataclass(frozen=True, slots=True)
class BuildSettings:
    """All settings a ``build`` run needs."""

    toolchain: ToolchainSettings
    source: SourceSettings
    dispatch: DispatchSettings


def _section(config: Config, name: str) -> dict[str, object]:
    raw: object = config.as_dict().get(name, {})
    if not raw:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"[{name}] must be a table, got {type(raw).__name__}")
    return cast("dict[str, object]", raw)


def load_build_settings(config: Config) -> BuildSettings:
    """Parse the build-related sections of ``config``.

    Args:
        config: Already-loaded layered configuration.

    Returns:
        Validated settings; missing sections fall back to defaults.

    Raises:
        ConfigurationError: If any section contains invalid values.

    Example:
        >>> settings = load_build_settings(Config({"dispatch": {"exit_policy": "always-success"}}, {}))
        >>> settings.dispatch.exit_policy
        <ExitPolicy.ALWAYS_SUCCESS: 'always-success'>
    """
    try:
        return BuildSettings(
            toolchain=ToolchainSettings.model_validate(_section(config, "toolchain")),
            source=SourceSettings.model_validate(_section(config, "source")),
            dispatch=DispatchSettings.model_validate(_section(config, "dispatch")),
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid build configuration: {exc}") from exc


__all__ = [
    "BuildSettings",
    "DispatchSettings",
    "SourceSettings",
    "ToolchainSettings",
    "load_build_settings",
]
