"""Type-safe domain enums for output formats and exit-status policy."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class ExitPolicy(str, Enum):
    """How a finished dispatch translates into this process's exit status.

    Attributes:
        MIRROR: Exit with the toolchain's own status (127/126 when it could
            not be started).
        ALWAYS_SUCCESS: Exit 0 whenever the source validated, regardless of
            the build outcome.

    Example:
        >>> ExitPolicy("always-success") is ExitPolicy.ALWAYS_SUCCESS
        True
    """

    MIRROR = "mirror"
    ALWAYS_SUCCESS = "always-success"


__all__ = [
    "ExitPolicy",
    "OutputFormat",
]
