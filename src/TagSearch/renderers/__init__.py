"""Output renderers for command results.

Provides abstraction and implementations for writing search results to
console or JSON, and a factory to instantiate writers based on configuration.
"""

from __future__ import annotations

from TagSearch.config import AppConfig
from TagSearch.renderers.base import MultiOutputWriter, OutputWriter
from TagSearch.renderers.console import ConsoleOutputWriter, render_suggestions_text, render_text
from TagSearch.renderers.json import JsonFileWriter, render_json, render_suggestions_json
from TagSearch.renderers.mapper import map_search_to_view, map_trade_to_view
from TagSearch.renderers.view_models import SearchView, SuggestionView, TradeView


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.

    Returns:
        OutputWriter delegating to every configured format.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter())
    if "json" in config.output.formats:
        writers.append(JsonFileWriter(config.output.base_dir))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "MultiOutputWriter",
    "create_output_writer",
    "map_search_to_view",
    "map_trade_to_view",
    "SearchView",
    "SuggestionView",
    "TradeView",
    "render_json",
    "render_suggestions_json",
    "render_suggestions_text",
    "render_text",
]
