"""Output writer interface.

Commands hand view models to an `OutputWriter` and call `finalize` once at
the end, so file-based writers can batch everything a command produced.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from TagSearch.renderers.view_models import SearchView, SuggestionView


class OutputWriter(ABC):
    """Destination for command results."""

    @abstractmethod
    def write_search_result(self, search: SearchView) -> None:
        """Emit the outcome of one query, valid or not."""

    @abstractmethod
    def write_suggestions(self, suggestions: SuggestionView) -> None:
        """Emit the completions computed for a partial query."""

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Flush buffered output; `action` is the CLI command name."""


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Fan every call out to `writers`, in configured order."""

    writers: Sequence[OutputWriter]

    def write_search_result(self, search: SearchView) -> None:
        for writer in self.writers:
            writer.write_search_result(search)

    def write_suggestions(self, suggestions: SuggestionView) -> None:
        for writer in self.writers:
            writer.write_suggestions(suggestions)

    def finalize(self, action: str) -> None:
        for writer in self.writers:
            writer.finalize(action)
