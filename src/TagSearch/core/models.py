from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence


@dataclass(frozen=True, slots=True)
class Trade:
    """Journal trade record.

    The search engine only reads `tags`; the remaining attributes feed the
    contextual suggestion heuristics and the CLI renderers.

    Attributes:
        id: Journal-unique trade identifier.
        date: Trade date as recorded by the journal (ISO date string).
        tags: Raw tag strings as entered by the user.
        currency_pair: Instrument, e.g. "EUR/USD".
        session: Trading session ("asian", "european", "us").
        side: "long" or "short".
        strategy: Free-text strategy name.
        status: "open" or "closed".
        timeframe: Chart timeframe, e.g. "H1".
        lot_size: Position size in lots.
        leverage: Account leverage used for the trade.
        pnl: Realized profit/loss if closed.
        extra: Extension point for journal-specific fields.
    """

    id: str
    date: str
    tags: Sequence[str] = ()
    currency_pair: Optional[str] = None
    session: Optional[str] = None
    side: Optional[str] = None
    strategy: Optional[str] = None
    status: Optional[str] = None
    timeframe: Optional[str] = None
    lot_size: Optional[float] = None
    leverage: Optional[float] = None
    pnl: Optional[float] = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", tuple(self.tags))
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))
