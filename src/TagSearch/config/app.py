from __future__ import annotations

"""Application config: section assembly and YAML layering."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from TagSearch.config.journal import JournalConfig, check_journal, load_journal
from TagSearch.config.output import OutputConfig, check_output, load_output
from TagSearch.config.runtime import RuntimeConfig, check_runtime, load_runtime
from TagSearch.config.search import SearchConfig, check_search, load_search

DEFAULT_CONFIG_PATH = Path("config/default.yml")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Validated configuration of one CLI invocation."""

    runtime: RuntimeConfig
    search: SearchConfig
    journal: JournalConfig
    output: OutputConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Build an `AppConfig` from an already merged mapping.

    Every section is loaded before any is checked, so type errors surface
    ahead of constraint errors.

    Raises:
        TypeError: If a value has the wrong type.
        ValueError: If a value is missing or violates a constraint.
    """
    config = AppConfig(
        runtime=load_runtime(raw),
        search=load_search(raw),
        journal=load_journal(raw),
        output=load_output(raw),
    )
    check_runtime(config.runtime)
    check_search(config.search)
    check_journal(config.journal)
    check_output(config.output)
    return config


def load_config(path: Path) -> AppConfig:
    """Load a single YAML file without layering it over the defaults."""
    return parse_config_dict(read_yaml_file(path))


def load_config_with_defaults(config_path: Path, default_path: Path = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load `config_path` deep-merged over the defaults file."""
    base = read_yaml_file(default_path)
    if config_path == default_path:
        return parse_config_dict(base)
    return parse_config_dict(merge_config_dicts(base, read_yaml_file(config_path)))


def read_yaml_file(path: Path) -> dict[str, Any]:
    """Read and parse a YAML config file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the YAML is malformed or its root is not a mapping.
    """
    text = path.read_text(encoding="utf-8")
    try:
        return parse_yaml(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e


def parse_yaml(text: str) -> dict[str, Any]:
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge `override` into `base`; lists and scalars are replaced, not merged."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(current, value)
        else:
            merged[key] = value
    return merged
