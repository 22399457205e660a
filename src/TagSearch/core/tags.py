"""Tag normalization and validation.

Canonical tags look like ``#some_tag``: one leading marker followed by a
lowercase body restricted to ``[a-z0-9_]``. Every comparison in the engine is
done on canonical forms, so ``#Scalping``, ``scalping`` and ``##scalping!``
all refer to the same tag.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

TAG_MARKER = "#"
MAX_TAG_LENGTH = 50
MAX_TAGS_PER_TRADE = 20

_INVALID_BODY_RE = re.compile(r"[^a-z0-9_]")
_VALID_CONTENT_RE = re.compile(r"^[A-Za-z0-9_]+$")


@dataclass(frozen=True, slots=True)
class TagIssue:
    """A single tag validation problem."""

    code: str
    message: str


@dataclass(frozen=True, slots=True)
class TagValidationResult:
    """Validation outcome for one tag or a tag list.

    Attributes:
        is_valid: True when no issues were found.
        errors: Issues found, in check order.
        sanitized_value: Canonical form of a single tag, if one exists.
    """

    is_valid: bool
    errors: tuple[TagIssue, ...] = ()
    sanitized_value: str | None = None


def normalize_tag(raw: str) -> str:
    """Return the canonical form of a raw tag.

    Args:
        raw: Tag text as typed, with or without the marker.

    Returns:
        ``#`` + lowercase ``[a-z0-9_]`` body, or ``""`` when no valid body
        character remains. Callers must drop empty results.
    """
    if not raw:
        return ""
    body = raw.strip().lower().lstrip(TAG_MARKER)
    body = _INVALID_BODY_RE.sub("", body)
    return f"{TAG_MARKER}{body}" if body else ""


def validate_tag(raw: str) -> TagValidationResult:
    """Validate a tag as entered by the user, before sanitizing it."""
    if not isinstance(raw, str) or not raw.strip():
        return TagValidationResult(
            is_valid=False,
            errors=(TagIssue("TAG_EMPTY", "Tag cannot be empty"),),
        )

    trimmed = raw.strip()
    content = trimmed[1:] if trimmed.startswith(TAG_MARKER) else trimmed

    errors: list[TagIssue] = []
    if not content:
        errors.append(TagIssue("TAG_EMPTY", "Tag cannot be empty"))
    if len(content) > MAX_TAG_LENGTH:
        errors.append(
            TagIssue("TAG_TOO_LONG", f"Tag cannot be longer than {MAX_TAG_LENGTH} characters")
        )
    if content and not _VALID_CONTENT_RE.match(content):
        errors.append(
            TagIssue("TAG_INVALID_CHARS", "Tag can only contain letters, numbers, and underscores")
        )

    return TagValidationResult(
        is_valid=not errors,
        errors=tuple(errors),
        sanitized_value=normalize_tag(trimmed) or None,
    )


def validate_tags(tags: Sequence[str]) -> TagValidationResult:
    """Validate a whole tag list, prefixing issues with the 1-based position."""
    if isinstance(tags, str) or not isinstance(tags, Sequence):
        return TagValidationResult(
            is_valid=False,
            errors=(TagIssue("TAGS_NOT_ARRAY", "Tags must be a list"),),
        )

    errors: list[TagIssue] = []
    if len(tags) > MAX_TAGS_PER_TRADE:
        errors.append(TagIssue("TOO_MANY_TAGS", f"Cannot have more than {MAX_TAGS_PER_TRADE} tags"))

    for index, tag in enumerate(tags, start=1):
        result = validate_tag(tag)
        errors.extend(TagIssue(issue.code, f"Tag {index}: {issue.message}") for issue in result.errors)

    return TagValidationResult(is_valid=not errors, errors=tuple(errors))


def process_tags(tags: Iterable[str]) -> list[str]:
    """Normalize a tag list, dropping empty, oversized and duplicate tags.

    Order of first occurrence is preserved.
    """
    seen: set[str] = set()
    out: list[str] = []
    for raw in tags:
        tag = normalize_tag(str(raw))
        if not tag or len(tag) - 1 > MAX_TAG_LENGTH or tag in seen:
            continue
        seen.add(tag)
        out.append(tag)
    return out


def raw_tags(record: Any) -> tuple[str, ...]:
    """Return the raw tag strings of a record.

    Records may be objects with a `tags` attribute or mappings with a
    ``"tags"`` key. Missing or null tags yield an empty tuple.
    """
    if isinstance(record, Mapping):
        tags = record.get("tags")
    else:
        tags = getattr(record, "tags", None)
    if not tags:
        return ()
    if isinstance(tags, str):
        return (tags,)
    return tuple(str(tag) for tag in tags if tag is not None)


def record_tags(record: Any) -> frozenset[str]:
    """Return the canonical tag set of a record."""
    return frozenset(tag for tag in map(normalize_tag, raw_tags(record)) if tag)
