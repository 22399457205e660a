"""Smoke test for TagSearch CLI.

Run:
  python test/smoke_test.py

This script runs the CLI against the fixture journal and validates that a
basic query executes and renders at least one matching trade.
"""

from __future__ import annotations

import sys
from pathlib import Path

from click.testing import CliRunner


REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"
sys.path.insert(0, str(SRC_DIR))

FIXTURE = REPO_ROOT / "test" / "data" / "trades.json"


def _make_runner() -> CliRunner:
    """Create CliRunner with best-effort stderr capture."""
    try:
        return CliRunner(mix_stderr=True)
    except TypeError:
        # Newer Click versions always mix stderr into output.
        return CliRunner()


def main() -> int:
    from TagSearch.cli import cli

    runner = _make_runner()
    result = runner.invoke(
        cli,
        [
            "--config",
            str(REPO_ROOT / "config" / "default.yml"),
            "--journal",
            str(FIXTURE),
            "search",
            "#morning AND (#scalping OR #swing)",
        ],
        catch_exceptions=False,
    )

    output = result.output
    assert result.exit_code == 0, output
    assert "Matches: 2" in output, output
    assert "[#morning]" in output, output
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
