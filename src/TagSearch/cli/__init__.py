"""TagSearch command line: ``tagsearch [--config PATH] [--journal PATH] COMMAND``."""

from __future__ import annotations

from typing import Sequence

from TagSearch.cli.runner import CommandRunner
from TagSearch.cli.ui import cli

__all__ = ["CommandRunner", "cli", "main"]


def main(argv: Sequence[str] | None = None) -> None:
    """Console-script entry point; `argv` defaults to ``sys.argv[1:]``."""
    cli.main(args=list(argv) if argv is not None else None, prog_name="tagsearch")
