"""Trade record loading for TagSearch."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from TagSearch.core.models import Trade
from TagSearch.storage.journal import load_trades, parse_trade
from TagSearch.utils.log import log

if TYPE_CHECKING:
    from TagSearch.config import AppConfig


def load_journal(config: AppConfig) -> list[Trade]:
    """Load the trades of the configured journal file.

    Args:
        config: Application configuration.

    Returns:
        Trades in file order.
    """
    path = Path(config.journal.path)
    trades = load_trades(path)
    log.info("Journal loaded: %s (%d trades)", path, len(trades))
    return trades


__all__ = [
    "load_journal",
    "load_trades",
    "parse_trade",
]
