"""Output domain configuration for CLI rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from TagSearch.config.common import ConfigSection

OUTPUT_FORMATS = ("console", "json")


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Where and how search results are written.

    Attributes:
        base_dir: Root directory for file outputs (``<base_dir>/json/``).
        formats: Enabled writers, lowercase, in configured order.
    """

    base_dir: str
    formats: tuple[str, ...]


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Read the required ``output`` section.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If ``output.formats`` is missing.
    """
    section = ConfigSection.of(raw, "output", required=True)
    formats = tuple(item.strip().lower() for item in section.get_str_list("formats"))
    return OutputConfig(base_dir=section.get_str("base_dir", "output"), formats=formats)


def check_output(config: OutputConfig) -> None:
    """Validate enabled formats and the file output directory.

    Raises:
        ValueError: If formats are empty or unknown, or ``base_dir`` is blank
            while json output is enabled.
    """
    if not config.formats:
        raise ValueError("output.formats must include at least one format")
    unknown = sorted(set(config.formats).difference(OUTPUT_FORMATS))
    if unknown:
        raise ValueError(f"output.formats has unknown values: {unknown}")
    if "json" in config.formats and not config.base_dir.strip():
        raise ValueError("output.base_dir must not be empty when json output is enabled")
