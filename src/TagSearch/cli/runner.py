"""Command runner for coordinating CLI execution.

Manages logging configuration, component creation, and error handling for
command execution.
"""

from __future__ import annotations

import click

from TagSearch.cli.commands import SearchCommand, SuggestCommand, TagsCommand, ValidateCommand
from TagSearch.config import AppConfig
from TagSearch.renderers import create_output_writer
from TagSearch.services import TradeSnapshot, create_search_service
from TagSearch.storage import load_journal
from TagSearch.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution.

    Handles logging configuration, journal loading and error handling for
    CLI commands. Failures are logged and turned into `click.Abort`.
    """

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def _configure(self, action: str) -> None:
        log_path = configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        if log_path is not None:
            log.debug("Logging to %s", log_path)

    def run_search(self, action: str, query: str) -> bool:
        """Execute a query against the configured journal.

        Returns:
            Whether the query was valid.

        Raises:
            click.Abort: When loading or searching fails.
        """
        self._configure(action)
        try:
            trades = load_journal(self.config)
            output_writer = create_output_writer(self.config)
            command = SearchCommand(
                search_service=create_search_service(self.config),
                snapshot=TradeSnapshot.from_records(trades, version=self.config.journal.path),
                output_writer=output_writer,
            )
            result = command.execute(query)
            output_writer.finalize(action)
            return result.is_valid
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Search failed: %s", e)
            raise click.Abort from e

    def run_validate(self, action: str, query: str) -> bool:
        """Validate a query without loading the journal."""
        self._configure(action)
        command = ValidateCommand(search_service=create_search_service(self.config))
        return command.execute(query).is_valid

    def run_suggest(self, action: str, partial_input: str, limit: int | None) -> list[str]:
        """Print completions for a partial query.

        Raises:
            click.Abort: When loading the journal fails.
        """
        self._configure(action)
        try:
            output_writer = create_output_writer(self.config)
            command = SuggestCommand(
                search_service=create_search_service(self.config),
                trades=load_journal(self.config),
                output_writer=output_writer,
            )
            suggestions = command.execute(partial_input, limit)
            output_writer.finalize(action)
            return suggestions
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Suggest failed: %s", e)
            raise click.Abort from e

    def run_tags(self, action: str, limit: int) -> None:
        """Print the most used tags.

        Raises:
            click.Abort: When loading the journal fails.
        """
        self._configure(action)
        try:
            TagsCommand(trades=load_journal(self.config)).execute(limit)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Listing tags failed: %s", e)
            raise click.Abort from e
