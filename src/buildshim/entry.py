"""Console script entry point with production wiring.

Lives at package level (outside adapters) so composition can be wired into
the adapters layer without an upward import.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI with production services and return its exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
