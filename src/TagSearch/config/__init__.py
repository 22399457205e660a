"""Configuration for the TagSearch CLI.

A config file has four sections: ``log``, ``search``, ``journal`` and
``output``. Files given with ``--config`` are layered over
``config/default.yml``.
"""

from __future__ import annotations

from TagSearch.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
    read_yaml_file,
)
from TagSearch.config.journal import JOURNAL_PATH_ENV, JournalConfig
from TagSearch.config.output import OUTPUT_FORMATS, OutputConfig
from TagSearch.config.runtime import RuntimeConfig
from TagSearch.config.search import SearchConfig

__all__ = [
    "AppConfig",
    "DEFAULT_CONFIG_PATH",
    "JOURNAL_PATH_ENV",
    "JournalConfig",
    "OUTPUT_FORMATS",
    "OutputConfig",
    "RuntimeConfig",
    "SearchConfig",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
    "read_yaml_file",
]
