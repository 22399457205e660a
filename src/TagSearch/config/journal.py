from __future__ import annotations

"""Journal domain configuration: where trade records are read from."""

import os
from dataclasses import dataclass
from typing import Any, Mapping

from TagSearch.config.common import ConfigSection

JOURNAL_PATH_ENV = "TAGSEARCH_JOURNAL"


@dataclass(frozen=True, slots=True)
class JournalConfig:
    """Location of the trades JSON export."""

    path: str


def load_journal(raw: Mapping[str, Any]) -> JournalConfig:
    """Load journal config; a non-blank ``TAGSEARCH_JOURNAL`` wins over ``journal.path``."""
    section = ConfigSection.of(raw, "journal", required=True)
    env_path = os.getenv(JOURNAL_PATH_ENV, "").strip()
    if env_path:
        return JournalConfig(path=env_path)
    return JournalConfig(path=section.get_str("path"))


def check_journal(config: JournalConfig) -> None:
    if not config.path.strip():
        raise ValueError("journal.path must not be empty")
