"""CLI package for DynamicPageList command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from DynamicPageList.cli.runner import CommandRunner
from DynamicPageList.cli.ui import cli


def main() -> None:
    """Run DynamicPageList CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
