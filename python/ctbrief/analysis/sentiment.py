"""Window-level bull/bear averages and the first-half vs second-half trend."""

from __future__ import annotations

from typing import Sequence

from ctbrief.analysis.formatting import format_fixed
from ctbrief.models import SentimentSummary, Snapshot, Trend

INFINITY_RATIO = "∞"
ZERO_RATIO = "0"

RISING_FACTOR = 1.1
DECLINING_FACTOR = 0.9


def _mean_bullish(snapshots: Sequence[Snapshot]) -> float:
    # An empty half divides by one so its mean is 0.
    return sum(snap.bullish for snap in snapshots) / (len(snapshots) or 1)


def format_ratio(bull: float, bear: float) -> str:
    if bear > 0:
        return format_fixed(bull / bear, 2)
    if bull > 0:
        return INFINITY_RATIO
    return ZERO_RATIO


def classify_trend(snapshots: Sequence[Snapshot]) -> Trend:
    mid = len(snapshots) // 2
    first_bull = _mean_bullish(snapshots[:mid])
    second_bull = _mean_bullish(snapshots[mid:])
    if second_bull > first_bull * RISING_FACTOR:
        return Trend.RISING
    if second_bull < first_bull * DECLINING_FACTOR:
        return Trend.DECLINING
    return Trend.STABLE


def analyze_sentiment(snapshots: Sequence[Snapshot]) -> SentimentSummary:
    """Average bullish/bearish readings over time-sorted ``snapshots``."""

    if not snapshots:
        return SentimentSummary(
            bull=ZERO_RATIO, bear=ZERO_RATIO, ratio=ZERO_RATIO, trend=Trend.UNKNOWN
        )

    count = len(snapshots)
    bull = sum(snap.bullish for snap in snapshots) / count
    bear = sum(snap.bearish for snap in snapshots) / count
    return SentimentSummary(
        bull=format_fixed(bull, 1),
        bear=format_fixed(bear, 1),
        ratio=format_ratio(bull, bear),
        trend=classify_trend(snapshots),
    )
