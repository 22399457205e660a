"""Query tokenizer.

Splits a raw query into `Token`s. Whitespace separates chunks and
parentheses are always tokens of their own, even when glued to a tag
(``(#a`` -> ``(``, ``#a``). Classification is purely lexical: the keywords
AND / OR / NOT are matched case-insensitively and everything else becomes a
normalized tag.
"""

from __future__ import annotations

import re

from TagSearch.core.query import Token, TokenType
from TagSearch.core.tags import normalize_tag

_CHUNK_RE = re.compile(r"[()]|[^\s()]+")

_KEYWORDS: dict[str, TokenType] = {
    "AND": TokenType.AND,
    "OR": TokenType.OR,
    "NOT": TokenType.NOT,
}


def tokenize(query: str) -> list[Token]:
    """Split a query string into tokens.

    Chunks with no valid tag characters (e.g. ``###``) are dropped rather
    than turned into empty tags.

    Args:
        query: Raw query text.

    Returns:
        Tokens in left-to-right order.
    """
    tokens: list[Token] = []
    for chunk in _CHUNK_RE.findall(query or ""):
        if chunk == "(":
            tokens.append(Token(TokenType.LPAREN))
            continue
        if chunk == ")":
            tokens.append(Token(TokenType.RPAREN))
            continue

        keyword = _KEYWORDS.get(chunk.upper())
        if keyword is not None:
            tokens.append(Token(keyword))
            continue

        tag = normalize_tag(chunk)
        if tag:
            tokens.append(Token(TokenType.TAG, tag))
    return tokens
