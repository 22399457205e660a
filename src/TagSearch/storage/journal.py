"""Read trade records from a JSON journal export.

The export is either a list of trade objects or an object with a
``"trades"`` list. Keys may be snake_case or the camelCase used by the
journal front end (``currencyPair``, ``lotSize``); unknown keys are kept in
`Trade.extra`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from TagSearch.core.models import Trade
from TagSearch.utils.log import log

_FIELD_ALIASES: dict[str, str] = {
    "currencyPair": "currency_pair",
    "lotSize": "lot_size",
}
_TRADE_FIELDS = frozenset(
    {
        "id",
        "date",
        "tags",
        "currency_pair",
        "session",
        "side",
        "strategy",
        "status",
        "timeframe",
        "lot_size",
        "leverage",
        "pnl",
    }
)


def load_trades(path: Path) -> list[Trade]:
    """Load all trades from a journal file.

    Args:
        path: JSON file path.

    Returns:
        Trades in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON or has an unexpected shape.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid journal JSON in {path}: {e}") from e

    if isinstance(data, Mapping):
        data = data.get("trades")
    if not isinstance(data, list):
        raise ValueError(f"Journal {path} must contain a list of trades")

    trades = [parse_trade(item, f"trades[{idx}]") for idx, item in enumerate(data)]
    log.debug("Loaded %d trades from %s", len(trades), path)
    return trades


def parse_trade(item: Any, key: str = "trade") -> Trade:
    """Build a `Trade` from one decoded JSON object.

    Raises:
        ValueError: If the object is not a mapping or lacks an id.
    """
    if not isinstance(item, Mapping):
        raise ValueError(f"{key} must be an object")

    fields: dict[str, Any] = {}
    extra: dict[str, Any] = {}
    for raw_key, value in item.items():
        name = _FIELD_ALIASES.get(raw_key, raw_key)
        if name in _TRADE_FIELDS:
            fields[name] = value
        else:
            extra[raw_key] = value

    if fields.get("id") in (None, ""):
        raise ValueError(f"{key}.id is required")

    tags = fields.pop("tags", None) or ()
    if isinstance(tags, str):
        tags = (tags,)
    return Trade(
        id=str(fields.pop("id")),
        date=str(fields.pop("date", "") or ""),
        tags=tuple(str(tag) for tag in tags),
        extra=extra,
        **fields,
    )
