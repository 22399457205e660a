"""TagSearch logging utilities.

Library modules only emit through `log` and never attach handlers. The CLI
calls `configure_logging` once per command; every line is prefixed with
``mm-dd HH:MM:SS [LVL]`` where LVL is DEBG, INFO, WARN or ERRO.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Final

_LEVEL_ABBREV: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}
_LINE_FORMAT: Final = "%(asctime)s [%(levelabbr)s] %(message)s"
_DATE_FORMAT: Final = "%m-%d %H:%M:%S"


class _AbbrevLevelFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__(fmt=_LINE_FORMAT, datefmt=_DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - record is stdlib name
        record.levelabbr = _LEVEL_ABBREV.get(record.levelno, record.levelname[:4])
        return super().format(record)


log = logging.getLogger("TagSearch")
log.addHandler(logging.NullHandler())


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> Path | None:
    """Route the TagSearch logger to stderr and, optionally, a per-command file.

    The file, when enabled, always records DEBUG so that rejected queries and
    cache activity can be inspected after the fact.

    Args:
        level: Console level name (e.g. INFO, DEBUG); unknown names mean INFO.
        action: CLI command name; file logging needs it for the path.
        log_to_file: Whether to mirror logs to ``<log_dir>/<action>/``.
        log_dir: Base directory for log files.

    Returns:
        Path of the log file, or None when only the console is used.
    """
    console_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    formatter = _AbbrevLevelFormatter()

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(formatter)
    handlers: list[logging.Handler] = [console]

    log_path = None
    if log_to_file and action:
        log_path = _log_file_path(Path(log_dir or "log"), action)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    _replace_handlers(handlers)
    log.setLevel(min(logging.DEBUG, console_level))
    log.propagate = False
    return log_path


def reset_logging() -> None:
    """Detach every handler and go back to the silent library default."""
    _replace_handlers([logging.NullHandler()])
    log.setLevel(logging.NOTSET)
    log.propagate = True


def _log_file_path(root: Path, action: str) -> Path:
    action_dir = root / action
    action_dir.mkdir(parents=True, exist_ok=True)
    return action_dir / f"{action}_{datetime.now().strftime('%m%d%H%M%S')}.log"


def _replace_handlers(handlers: list[logging.Handler]) -> None:
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()
    for handler in handlers:
        log.addHandler(handler)
