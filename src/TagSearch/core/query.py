"""Query language data types.

A query string flows through three representations:

- `Token`: flat lexical units produced by the tokenizer.
- `QueryNode`: the expression tree produced by the parser. It is a closed
  union of `TagNode`, `AndNode`, `OrNode` and `NotNode`.
- `ValidationResult` / `SearchResult`: plain result values handed back to
  callers. Malformed user input is reported through these, never raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence, Union


class TokenType(str, Enum):
    """Lexical category of a query token."""

    TAG = "TAG"
    AND = "AND"
    OR = "OR"
    NOT = "NOT"
    LPAREN = "("
    RPAREN = ")"


BINARY_OPERATORS = frozenset({TokenType.AND, TokenType.OR})
OPERATORS = frozenset({TokenType.AND, TokenType.OR, TokenType.NOT})


@dataclass(frozen=True, slots=True)
class Token:
    """One lexical unit of a query.

    Attributes:
        type: Token category.
        value: Canonical tag for `TAG` tokens, None otherwise.
    """

    type: TokenType
    value: str | None = None

    @property
    def is_operator(self) -> bool:
        return self.type in OPERATORS

    @property
    def is_binary_operator(self) -> bool:
        return self.type in BINARY_OPERATORS


@dataclass(frozen=True, slots=True)
class TagNode:
    """Leaf matching a single canonical tag."""

    value: str


@dataclass(frozen=True, slots=True)
class AndNode:
    """Matches when every child matches (vacuously true without children)."""

    children: tuple[QueryNode, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True, slots=True)
class OrNode:
    """Matches when at least one child matches (vacuously false without children)."""

    children: tuple[QueryNode, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True, slots=True)
class NotNode:
    """Matches when its single child does not match."""

    children: tuple[QueryNode, ...]

    def __post_init__(self) -> None:
        children = tuple(self.children)
        if len(children) != 1:
            raise ValueError(f"NotNode requires exactly one child, got {len(children)}")
        object.__setattr__(self, "children", children)

    @property
    def child(self) -> QueryNode:
        return self.children[0]


QueryNode = Union[TagNode, AndNode, OrNode, NotNode]

EMPTY_QUERY: QueryNode = AndNode(())


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of structural query validation."""

    is_valid: bool
    errors: tuple[str, ...] = ()

    @classmethod
    def from_errors(cls, errors: Sequence[str]) -> ValidationResult:
        return cls(is_valid=not errors, errors=tuple(errors))


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Outcome of running a query against a record collection.

    Attributes:
        is_valid: False when the query failed validation or parsing.
        trades: Matching records in input order; empty when invalid.
        matching_tags: Distinct tags referenced by the query, first occurrence first.
        errors: Human-readable validation errors.
        query: Parsed expression tree (`EMPTY_QUERY` when invalid).
    """

    is_valid: bool
    trades: tuple[Any, ...] = ()
    matching_tags: tuple[str, ...] = ()
    errors: tuple[str, ...] = ()
    query: QueryNode = EMPTY_QUERY


@dataclass(frozen=True, slots=True)
class SearchHighlight:
    """Tags of one trade that should be highlighted for a search result."""

    trade_id: str
    matching_tags: tuple[str, ...]
