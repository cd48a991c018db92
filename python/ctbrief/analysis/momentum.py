"""Mention-rate momentum between the active window and older history.

The full history is split at the first snapshot of the window. Each side is
reduced to a mentions-per-scan rate for every ticker so that a 24h window
can be compared against weeks of archive without the bucket sizes skewing
the result. Thin histories are rejected outright instead of producing noisy
spikes.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from ctbrief.models import MomentumDirection, MomentumEntry, Snapshot
from ctbrief.analysis.formatting import format_fixed, round_half_up
from ctbrief.analysis.mentions import count_tickers

MIN_HISTORY_SCANS = 40
MIN_RECENT_SCANS = 10
MIN_TOTAL_MENTIONS = 5
MIN_NEW_MENTIONS = 3
CHANGE_THRESHOLD_PCT = 30
NEW_TICKER_CHANGE = 999
MAX_MOMENTUM_ENTRIES = 12


def _format_rate(rate: float) -> str:
    return format_fixed(rate, 2)


def detect_momentum(
    history: Sequence[Snapshot], recent: Sequence[Snapshot]
) -> List[MomentumEntry]:
    """Flag tickers whose mention rate moved sharply or that just appeared.

    Both inputs must be sorted oldest first; ``recent`` is the windowed
    subset of ``history``.
    """

    if len(history) < MIN_HISTORY_SCANS or len(recent) < MIN_RECENT_SCANS:
        return []

    recent_start = recent[0].timestamp
    recent_bucket = [snap for snap in history if snap.timestamp >= recent_start]
    prior_bucket = [snap for snap in history if snap.timestamp < recent_start]
    recent_counts = count_tickers(recent_bucket)
    prior_counts = count_tickers(prior_bucket)

    recent_size = len(recent_bucket) or 1
    # Known approximation: an empty prior bucket divides by one.
    prior_size = max(len(prior_bucket), 1)

    entries: List[MomentumEntry] = []
    tickers: Dict[str, None] = dict.fromkeys([*recent_counts, *prior_counts])
    for ticker in tickers:
        recent_count = recent_counts.get(ticker, 0)
        prior_count = prior_counts.get(ticker, 0)
        if recent_count + prior_count < MIN_TOTAL_MENTIONS:
            continue

        recent_rate = recent_count / recent_size
        prior_rate = prior_count / prior_size

        if prior_rate > 0:
            change = round_half_up((recent_rate - prior_rate) / prior_rate * 100)
            if abs(change) <= CHANGE_THRESHOLD_PCT:
                continue
            direction = MomentumDirection.UP if change > 0 else MomentumDirection.DOWN
            entries.append(
                MomentumEntry(
                    ticker=ticker,
                    recent_rate=_format_rate(recent_rate),
                    prior_rate=_format_rate(prior_rate),
                    change=change,
                    direction=direction,
                )
            )
        elif recent_count >= MIN_NEW_MENTIONS:
            entries.append(
                MomentumEntry(
                    ticker=ticker,
                    recent_rate=_format_rate(recent_rate),
                    prior_rate=_format_rate(0.0),
                    change=NEW_TICKER_CHANGE,
                    direction=MomentumDirection.NEW,
                )
            )

    entries.sort(key=lambda entry: abs(entry.change), reverse=True)
    return entries[:MAX_MOMENTUM_ENTRIES]
