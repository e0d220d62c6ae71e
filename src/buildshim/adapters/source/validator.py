"""Input validator: gate the pipeline on a readable source file.

Contents:
    * :func:`validate_source` - read the source file or raise ``SourceFileError``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from buildshim.domain.errors import SourceFileError, SourceFileReason

logger = logging.getLogger(__name__)


def validate_source(source_path: str | Path, *, encoding: str | None = None) -> str:
    """Read the whole source file as text.

    Performs exactly one read. The contents are returned but never
    inspected; the toolchain owns all language-aware work.

    Args:
        source_path: Path taken from the invocation arguments.
        encoding: Text encoding; ``None`` uses the platform default.

    Returns:
        The file contents.

    Raises:
        SourceFileError: If the path is empty, missing, a directory,
            unreadable, or not decodable with ``encoding``.

    Example:
        >>> validate_source("definitely-missing.txt")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        SourceFileError: Source file 'definitely-missing.txt' does not exist
    """
    raw = str(source_path)
    if not raw:
        raise SourceFileError(raw, SourceFileReason.MISSING, "empty path")

    path = Path(raw)
    try:
        return path.read_text(encoding=encoding)
    except FileNotFoundError as exc:
        raise SourceFileError(raw, SourceFileReason.MISSING) from exc
    except IsADirectoryError as exc:
        raise SourceFileError(raw, SourceFileReason.DIRECTORY) from exc
    except PermissionError as exc:
        # Windows reports directories as PermissionError on open().
        if path.is_dir():
            raise SourceFileError(raw, SourceFileReason.DIRECTORY) from exc
        raise SourceFileError(raw, SourceFileReason.UNREADABLE, exc.strerror) from exc
    except UnicodeDecodeError as exc:
        raise SourceFileError(raw, SourceFileReason.UNDECODABLE, exc.reason) from exc
    except OSError as exc:
        logger.debug("Reading %s failed", raw, exc_info=True)
        raise SourceFileError(raw, SourceFileReason.UNREADABLE, exc.strerror or str(exc)) from exc


__all__ = ["validate_source"]
