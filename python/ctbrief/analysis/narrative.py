"""Templated one-paragraph market narrative.

The wording is chosen from fixed templates keyed by the regime and fear
labels, followed by optional momentum call-outs. Nothing here is generative:
identical inputs always produce the same text.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from ctbrief.models import (
    FearInfo,
    FearLevel,
    MomentumDirection,
    MomentumEntry,
    Regime,
    RegimeInfo,
    SentimentSummary,
)
from ctbrief.analysis.mentions import TICKER_MARKER

MAX_NAMED_TICKERS = 3

EUPHORIA_OPENING = (
    "CT is running hot. Multiple signals pointing toward risk-on euphoria."
)
BULLISH_OPENING = (
    "Structural optimism holds with a {ratio}:1 bull/bear ratio, "
    "though the mood is {trend}."
)
NEUTRAL_OPENING = (
    "Markets are in wait-and-see mode. Neither conviction nor fear dominating."
)
CAUTION_OPENING = "Caution dominates. Bears have the floor."

FEAR_SENTENCES: Dict[FearLevel, str] = {
    FearLevel.EXTREME: (
        "Gold mentions are at extreme levels; historically this precedes "
        "volatility, not necessarily direction."
    ),
    FearLevel.HIGH: (
        "The fear gauge is elevated. Commodity mentions suggest macro "
        "uncertainty is on traders' minds."
    ),
}


def _opening(sentiment: SentimentSummary, regime: RegimeInfo) -> str:
    if regime.label == Regime.EUPHORIA:
        return EUPHORIA_OPENING
    if regime.label == Regime.BULLISH:
        return BULLISH_OPENING.format(
            ratio=sentiment.ratio, trend=sentiment.trend.value.lower()
        )
    if regime.label == Regime.NEUTRAL:
        return NEUTRAL_OPENING
    return CAUTION_OPENING


def _ticker_list(entries: Sequence[MomentumEntry]) -> str:
    return ", ".join(f"{TICKER_MARKER}{entry.ticker}" for entry in entries)


def rising_entries(momentum: Sequence[MomentumEntry]) -> List[MomentumEntry]:
    return [
        m
        for m in momentum
        if m.direction in (MomentumDirection.UP, MomentumDirection.NEW)
    ]


def falling_entries(momentum: Sequence[MomentumEntry]) -> List[MomentumEntry]:
    return [m for m in momentum if m.direction == MomentumDirection.DOWN]


def compose_narrative(
    sentiment: SentimentSummary,
    regime: RegimeInfo,
    fear: FearInfo,
    momentum: Sequence[MomentumEntry],
) -> str:
    parts = [_opening(sentiment, regime)]

    fear_sentence = FEAR_SENTENCES.get(fear.level)
    if fear_sentence:
        parts.append(fear_sentence)

    rising = rising_entries(momentum)[:MAX_NAMED_TICKERS]
    falling = falling_entries(momentum)[:MAX_NAMED_TICKERS]
    if rising:
        parts.append(f"Attention building on {_ticker_list(rising)}.")
    if falling:
        parts.append(f"Narrative fading for {_ticker_list(falling)}.")

    return " ".join(parts)
