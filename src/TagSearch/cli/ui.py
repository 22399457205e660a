"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import click
from dotenv import load_dotenv

from TagSearch.cli.runner import CommandRunner
from TagSearch.config import DEFAULT_CONFIG_PATH, JournalConfig, load_config, load_config_with_defaults


@click.group(help="TagSearch: query trading journal tags with AND / OR / NOT.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to YAML config file.",
)
@click.option(
    "--journal",
    "journal_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Trades JSON file; overrides journal.path.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path, journal_path: Path | None) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.
    A non-default config file is merged over the default one when it exists.

    Args:
        ctx: Click context.
        config_path: Path to YAML config file.
        journal_path: Optional journal file override.
    """
    load_dotenv()

    if config_path != DEFAULT_CONFIG_PATH and DEFAULT_CONFIG_PATH.exists():
        cfg = load_config_with_defaults(config_path)
    else:
        cfg = load_config(config_path)
    if journal_path is not None:
        cfg = replace(cfg, journal=JournalConfig(path=str(journal_path)))
    ctx.obj = cfg


@cli.command("search")
@click.argument("query")
@click.pass_context
def search_cmd(ctx: click.Context, query: str) -> None:
    """Print journal trades matching QUERY.

    Exits with status 1 when the query is invalid.
    """
    runner = CommandRunner(ctx.obj)
    if not runner.run_search(action=ctx.command.name, query=query):
        ctx.exit(1)


@cli.command("validate")
@click.argument("query")
@click.pass_context
def validate_cmd(ctx: click.Context, query: str) -> None:
    """Check QUERY for syntax errors; exits with status 1 when invalid."""
    runner = CommandRunner(ctx.obj)
    if not runner.run_validate(action=ctx.command.name, query=query):
        ctx.exit(1)


@cli.command("suggest")
@click.argument("partial", default="")
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Maximum number of completions.")
@click.pass_context
def suggest_cmd(ctx: click.Context, partial: str, limit: int | None) -> None:
    """Print completions for a PARTIAL query."""
    CommandRunner(ctx.obj).run_suggest(action=ctx.command.name, partial_input=partial, limit=limit)


@cli.command("tags")
@click.option("--limit", type=click.IntRange(min=1), default=20, show_default=True, help="Number of tags.")
@click.pass_context
def tags_cmd(ctx: click.Context, limit: int) -> None:
    """Print the most used tags of the journal."""
    CommandRunner(ctx.obj).run_tags(action=ctx.command.name, limit=limit)
