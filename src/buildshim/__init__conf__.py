"""Static package metadata surfaced to CLI commands and documentation.

The ``version`` line is kept in sync with ``pyproject.toml``.

Contents:
    * Package identity (``name``, ``title``, ``version``, ``shell_command``).
    * ``LAYEREDCONF_*`` identifiers consumed by ``lib_layered_config``.
    * :func:`print_info` - render the metadata block for ``buildshim info``.
"""

from __future__ import annotations

name = "buildshim"
title = "Validate a source file and dispatch one cross-compiling toolchain build"
version = "0.1.0"
homepage = "https://github.com/buildshim/buildshim"
author = "buildshim maintainers"
author_email = "maintainers@buildshim.dev"
shell_command = "buildshim"

#: Vendor, app and slug identifiers that select platform config directories.
LAYEREDCONF_VENDOR = "buildshim"
LAYEREDCONF_APP = "buildshim"
LAYEREDCONF_SLUG = "buildshim"


def print_info() -> None:
    """Print the summarised metadata block used by ``buildshim info``.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for buildshim:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
