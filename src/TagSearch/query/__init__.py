"""Boolean tag query language: tokenizer, validator, parser and evaluator."""

from __future__ import annotations

from TagSearch.query.evaluator import evaluate, referenced_tags, to_query_string
from TagSearch.query.parser import QuerySyntaxError, parse
from TagSearch.query.tokenizer import tokenize
from TagSearch.query.validator import validate

__all__ = [
    "QuerySyntaxError",
    "evaluate",
    "parse",
    "referenced_tags",
    "to_query_string",
    "tokenize",
    "validate",
]
