"""Recursive-descent query parser.

Grammar, tightest binding first::

    Primary := TAG | '(' OrExpr ')'
    NotExpr := NOT TAG | Primary
    AndExpr := NotExpr (AND NotExpr)*
    OrExpr  := AndExpr (OR AndExpr)*
    Query   := OrExpr

Operands joined by the same operator are collected under one node, so
``a AND b AND c`` yields a single `AndNode` with three children. A lone
operand is returned as-is rather than wrapped.
"""

from __future__ import annotations

from typing import Sequence

from TagSearch.core.query import (
    EMPTY_QUERY,
    AndNode,
    NotNode,
    OrNode,
    QueryNode,
    TagNode,
    Token,
    TokenType,
)


class QuerySyntaxError(ValueError):
    """Raised when a token stream does not match the query grammar."""


class _Parser:
    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = tokens
        self._pos = 0

    def parse(self) -> QueryNode:
        if not self._tokens:
            return EMPTY_QUERY
        node = self._parse_or()
        if not self._at_end():
            raise QuerySyntaxError(f"Unexpected token {self._describe(self._peek())} at position {self._pos}")
        return node

    def _parse_or(self) -> QueryNode:
        children = [self._parse_and()]
        while self._match(TokenType.OR):
            children.append(self._parse_and())
        return children[0] if len(children) == 1 else OrNode(tuple(children))

    def _parse_and(self) -> QueryNode:
        children = [self._parse_not()]
        while self._match(TokenType.AND):
            children.append(self._parse_not())
        return children[0] if len(children) == 1 else AndNode(tuple(children))

    def _parse_not(self) -> QueryNode:
        if self._match(TokenType.NOT):
            token = self._advance()
            if token is None or token.type is not TokenType.TAG:
                raise QuerySyntaxError("NOT operator must be followed by a tag")
            return NotNode((TagNode(token.value or ""),))
        return self._parse_primary()

    def _parse_primary(self) -> QueryNode:
        token = self._advance()
        if token is None:
            raise QuerySyntaxError("Unexpected end of query")
        if token.type is TokenType.TAG:
            return TagNode(token.value or "")
        if token.type is TokenType.LPAREN:
            node = self._parse_or()
            if not self._match(TokenType.RPAREN):
                raise QuerySyntaxError("Unmatched opening parenthesis")
            return node
        raise QuerySyntaxError(f"Unexpected token {self._describe(token)} at position {self._pos - 1}")

    def _peek(self) -> Token | None:
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _advance(self) -> Token | None:
        token = self._peek()
        if token is not None:
            self._pos += 1
        return token

    def _match(self, token_type: TokenType) -> bool:
        token = self._peek()
        if token is not None and token.type is token_type:
            self._pos += 1
            return True
        return False

    def _at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    @staticmethod
    def _describe(token: Token | None) -> str:
        if token is None:
            return "<end>"
        return token.value if token.type is TokenType.TAG and token.value else token.type.value


def parse(tokens: Sequence[Token]) -> QueryNode:
    """Build an expression tree from validated tokens.

    Args:
        tokens: Output of `tokenize`, ideally already accepted by `validate`.

    Returns:
        Root `QueryNode`; `EMPTY_QUERY` for an empty stream.

    Raises:
        QuerySyntaxError: If the tokens do not match the grammar.
    """
    return _Parser(tokens).parse()
