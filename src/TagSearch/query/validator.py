"""Structural query validation.

Runs over the token stream before parsing and reports every structural
problem as a display-ready message. Validation never raises: a failed check
is returned as data so callers can render inline feedback.
"""

from __future__ import annotations

from typing import Sequence

from TagSearch.core.query import Token, TokenType, ValidationResult

UNMATCHED_OPENING = "Unmatched opening parenthesis"
UNMATCHED_CLOSING = "Unmatched closing parenthesis"
CONSECUTIVE_OPERATORS = "Cannot have consecutive operators"
TRAILING_OPERATOR = "Query cannot end with AND or OR"
LEADING_OPERATOR = "Query cannot start with AND or OR"
DANGLING_NOT = "NOT operator must be followed by a tag"
EMPTY_PARENTHESES = "Empty parentheses"
OPERATOR_AFTER_OPENING = "Operator cannot follow an opening parenthesis"
OPERATOR_BEFORE_CLOSING = "Operator cannot precede a closing parenthesis"
MISSING_OPERATOR = "Missing operator between terms"

_OPERAND_END = frozenset({TokenType.TAG, TokenType.RPAREN})
_OPERAND_START = frozenset({TokenType.TAG, TokenType.LPAREN, TokenType.NOT})


def validate(tokens: Sequence[Token]) -> ValidationResult:
    """Check a token stream for structural errors.

    An empty stream is valid. `NOT` may start a query but must always be
    followed directly by a tag.

    Args:
        tokens: Output of `tokenize`.

    Returns:
        Validation result; each distinct error appears once.
    """
    if not tokens:
        return ValidationResult(is_valid=True)

    errors: list[str] = []
    opening, closing = _check_parentheses(tokens)
    if opening:
        errors.append(UNMATCHED_OPENING)
    if closing:
        errors.append(UNMATCHED_CLOSING)

    pairs = list(zip(tokens, tokens[1:]))

    if any(left.is_binary_operator and right.is_binary_operator for left, right in pairs):
        errors.append(CONSECUTIVE_OPERATORS)
    if tokens[-1].is_binary_operator:
        errors.append(TRAILING_OPERATOR)
    if tokens[0].is_binary_operator:
        errors.append(LEADING_OPERATOR)
    if _has_dangling_not(tokens):
        errors.append(DANGLING_NOT)
    if any(left.type is TokenType.LPAREN and right.type is TokenType.RPAREN for left, right in pairs):
        errors.append(EMPTY_PARENTHESES)
    if any(left.type is TokenType.LPAREN and right.is_binary_operator for left, right in pairs):
        errors.append(OPERATOR_AFTER_OPENING)
    if any(left.is_binary_operator and right.type is TokenType.RPAREN for left, right in pairs):
        errors.append(OPERATOR_BEFORE_CLOSING)
    if any(left.type in _OPERAND_END and right.type in _OPERAND_START for left, right in pairs):
        errors.append(MISSING_OPERATOR)

    return ValidationResult.from_errors(errors)


def _check_parentheses(tokens: Sequence[Token]) -> tuple[bool, bool]:
    """Return (has unmatched opening, has unmatched closing)."""
    depth = 0
    unmatched_closing = False
    for token in tokens:
        if token.type is TokenType.LPAREN:
            depth += 1
        elif token.type is TokenType.RPAREN:
            if depth == 0:
                unmatched_closing = True
            else:
                depth -= 1
    return depth > 0, unmatched_closing


def _has_dangling_not(tokens: Sequence[Token]) -> bool:
    for index, token in enumerate(tokens):
        if token.type is not TokenType.NOT:
            continue
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        if following is None or following.type is not TokenType.TAG:
            return True
    return False
