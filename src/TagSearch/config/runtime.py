"""Runtime domain configuration: the ``log`` section."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from TagSearch.config.common import ConfigSection

_ALLOWED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Logging settings applied by the CLI before each command.

    Attributes:
        level: Console log level name.
        to_file: Mirror logs into ``<dir>/<command>/`` as well.
        dir: Base directory for log files.
    """

    level: str
    to_file: bool
    dir: str


def load_runtime(raw: Mapping[str, Any]) -> RuntimeConfig:
    """Read the required ``log`` section; only ``log.level`` must be present."""
    section = ConfigSection.of(raw, "log", required=True)
    return RuntimeConfig(
        level=section.get_str("level").strip().upper(),
        to_file=section.get_bool("to_file", False),
        dir=section.get_str("dir", "log"),
    )


def check_runtime(config: RuntimeConfig) -> None:
    if config.level not in _ALLOWED_LOG_LEVELS:
        raise ValueError(f"log.level must be one of {list(_ALLOWED_LOG_LEVELS)}, got {config.level!r}")
    if config.to_file and not config.dir.strip():
        raise ValueError("log.dir must not be empty when log.to_file=true")
