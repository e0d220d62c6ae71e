"""Source adapter - filesystem access for the input validator.

Contents:
    * :func:`.validator.validate_source` - read the source file or fail
"""

from __future__ import annotations

from .validator import validate_source

__all__ = ["validate_source"]
