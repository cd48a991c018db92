from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional

from ctbrief.models import MentionCount, Snapshot

TICKER_MARKER = "$"
DEFAULT_TICKER_LIMIT = 15
COMMODITY_MACRO_KEYWORDS = frozenset(
    {"gold", "silver", "copper", "oil", "corn", "coffee"}
)


def normalize_ticker(symbol: str) -> str:
    if symbol.startswith(TICKER_MARKER):
        return symbol[len(TICKER_MARKER):]
    return symbol


def count_tickers(snapshots: Iterable[Snapshot]) -> Dict[str, int]:
    """Sum mentions per normalized ticker, keeping first-seen order."""

    counts: Dict[str, int] = {}
    for snap in snapshots:
        for symbol, count in snap.top_tickers:
            ticker = normalize_ticker(symbol)
            counts[ticker] = counts.get(ticker, 0) + count
    return counts


def _rank(counts: Mapping[str, int], limit: Optional[int] = None) -> List[MentionCount]:
    # sorted() is stable, so ties keep insertion order.
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    if limit is not None:
        ranked = ranked[:limit]
    return [MentionCount(name=name, mentions=mentions) for name, mentions in ranked]


def rank_tickers(
    snapshots: Iterable[Snapshot], limit: int = DEFAULT_TICKER_LIMIT
) -> List[MentionCount]:
    return _rank(count_tickers(snapshots), limit)


def rank_commodities(snapshots: Iterable[Snapshot]) -> List[MentionCount]:
    """Rank allow-listed macro keywords together with all commodity keywords."""

    counts: Dict[str, int] = {}
    for snap in snapshots:
        for keyword, count in snap.macro_keywords.items():
            if keyword in COMMODITY_MACRO_KEYWORDS:
                counts[keyword] = counts.get(keyword, 0) + count
        for keyword, count in snap.commodity_keywords.items():
            counts[keyword] = counts.get(keyword, 0) + count
    return _rank(counts)
