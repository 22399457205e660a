"""Expression tree evaluation and traversal."""

from __future__ import annotations

from typing import AbstractSet

from TagSearch.core.query import AndNode, NotNode, OrNode, QueryNode, TagNode


def evaluate(node: QueryNode, record_tags: AbstractSet[str]) -> bool:
    """Evaluate an expression tree against one record's canonical tag set.

    An `AndNode` without children matches everything; an `OrNode` without
    children matches nothing.

    Raises:
        TypeError: If `node` is not a query node.
    """
    if isinstance(node, TagNode):
        return node.value in record_tags
    if isinstance(node, AndNode):
        return all(evaluate(child, record_tags) for child in node.children)
    if isinstance(node, OrNode):
        return any(evaluate(child, record_tags) for child in node.children)
    if isinstance(node, NotNode):
        return not evaluate(node.child, record_tags)
    raise TypeError(f"Unsupported query node: {type(node).__name__}")


def referenced_tags(node: QueryNode) -> list[str]:
    """Return every tag literal in the tree, deduplicated in first-occurrence order."""
    seen: dict[str, None] = {}

    def visit(current: QueryNode) -> None:
        if isinstance(current, TagNode):
            seen.setdefault(current.value, None)
            return
        if not isinstance(current, (AndNode, OrNode, NotNode)):
            raise TypeError(f"Unsupported query node: {type(current).__name__}")
        for child in current.children:
            visit(child)

    visit(node)
    return list(seen)


def to_query_string(node: QueryNode) -> str:
    """Render an expression tree back into query syntax.

    Nested groups are parenthesized so that parsing the output of any parsed
    tree yields the same tree. The empty conjunction renders as the empty
    query. Empty groups anywhere else have no query syntax.

    Raises:
        ValueError: If the tree holds an empty OR node, or an empty AND node
            below the root.
    """
    if isinstance(node, AndNode) and not node.children:
        return ""
    return _render(node)


def _render(node: QueryNode) -> str:
    if isinstance(node, TagNode):
        return node.value
    if isinstance(node, NotNode):
        return f"NOT {_render_operand(node.child)}"
    if isinstance(node, (AndNode, OrNode)) and not node.children:
        raise ValueError(f"Empty {type(node).__name__} cannot be rendered as a query")
    if isinstance(node, AndNode):
        return " AND ".join(_render_operand(child) for child in node.children)
    if isinstance(node, OrNode):
        return " OR ".join(
            _render(child) if isinstance(child, AndNode) else _render_operand(child)
            for child in node.children
        )
    raise TypeError(f"Unsupported query node: {type(node).__name__}")


def _render_operand(node: QueryNode) -> str:
    if isinstance(node, (TagNode, NotNode)):
        return _render(node)
    return f"({_render(node)})"
