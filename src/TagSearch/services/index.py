"""Tag frequency index and precomputed record snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Iterable, Mapping, Sequence

from TagSearch.core.tags import record_tags
from TagSearch.utils.dates import date_sort_value
from TagSearch.utils.log import log


@dataclass(frozen=True, slots=True)
class TagStats:
    """Usage statistics of one canonical tag.

    Attributes:
        tag: Canonical tag.
        count: Number of records carrying the tag.
        last_used: Most recent record date carrying the tag ("" if unknown).
        trade_ids: Ids of the records carrying the tag, in collection order.
        last_used_at: Sortable timestamp of `last_used`; derived from it when
            not given. Unparseable dates are `-inf`.
    """

    tag: str
    count: int
    last_used: str
    trade_ids: tuple[str, ...] = ()
    last_used_at: float | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.last_used_at is None:
            object.__setattr__(self, "last_used_at", date_sort_value(self.last_used))


TagFrequencyIndex = Mapping[str, TagStats]


def record_field(record: Any, name: str) -> Any:
    """Read a field from an attribute-style or mapping-style record."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


@dataclass(frozen=True, slots=True)
class TradeSnapshot:
    """Immutable view of a record collection with precomputed tag sets.

    Build one per collection state and reuse it across keystrokes; bump
    `version` whenever the underlying collection changes so caches keyed on
    it are not reused.
    """

    records: tuple[Any, ...]
    tag_sets: tuple[frozenset[str], ...]
    version: Hashable | None = None

    @classmethod
    def from_records(cls, records: Iterable[Any], *, version: Hashable | None = None) -> TradeSnapshot:
        items = tuple(records)
        return cls(records=items, tag_sets=tuple(record_tags(record) for record in items), version=version)

    def __len__(self) -> int:
        return len(self.records)


def build_tag_index(records: Iterable[Any] | TradeSnapshot) -> dict[str, TagStats]:
    """Compute the tag frequency index of a record collection.

    Each record counts once per distinct canonical tag and its date is parsed
    once, however many tags it carries. Rebuilding is a full recompute.
    """
    snapshot = records if isinstance(records, TradeSnapshot) else TradeSnapshot.from_records(records)

    counts: dict[str, int] = {}
    last_used: dict[str, tuple[float, str]] = {}
    trade_ids: dict[str, list[str]] = {}

    for record, tags in zip(snapshot.records, snapshot.tag_sets):
        if not tags:
            continue
        date = str(record_field(record, "date") or "")
        stamp = date_sort_value(date)
        record_id = record_field(record, "id")
        for tag in tags:
            counts[tag] = counts.get(tag, 0) + 1
            if tag not in last_used or stamp > last_used[tag][0]:
                last_used[tag] = (stamp, date)
            if record_id is not None:
                trade_ids.setdefault(tag, []).append(str(record_id))

    index = {
        tag: TagStats(
            tag=tag,
            count=count,
            last_used=last_used[tag][1],
            trade_ids=tuple(trade_ids.get(tag, ())),
            last_used_at=last_used[tag][0],
        )
        for tag, count in counts.items()
    }
    log.debug("Built tag index: records=%d tags=%d", len(snapshot), len(index))
    return index


def rank_key(stats: TagStats) -> tuple[int, float, str]:
    """Sort key: higher count first, then more recent, then alphabetical."""
    return (-stats.count, -stats.last_used_at, stats.tag)


def most_used_tags(index: TagFrequencyIndex, limit: int = 10) -> list[TagStats]:
    """Return the top `limit` tags by frequency, recency, then name."""
    if limit <= 0:
        return []
    return sorted(index.values(), key=rank_key)[:limit]


def recent_tags(index: TagFrequencyIndex, limit: int = 10) -> list[TagStats]:
    """Return the top `limit` tags by most recent use, then frequency."""
    if limit <= 0:
        return []
    return sorted(
        index.values(),
        key=lambda stats: (-stats.last_used_at, -stats.count, stats.tag),
    )[:limit]


def search_tags(index: TagFrequencyIndex, text: str) -> list[TagStats]:
    """Return index entries whose canonical form contains `text`, ranked."""
    needle = (text or "").strip().lower()
    entries: Sequence[TagStats] = list(index.values())
    if needle:
        entries = [stats for stats in entries if needle in stats.tag]
    return sorted(entries, key=rank_key)
