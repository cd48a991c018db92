"""Table-driven mapping of continuous readings onto regime and fear labels.

Every table is ordered from the highest threshold down and each boundary is
inclusive, so a reading equal to a threshold lands in that tier.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple, TypeVar

from ctbrief.models import FearInfo, FearLevel, MentionCount, Regime, RegimeInfo
from ctbrief.analysis.sentiment import INFINITY_RATIO

T = TypeVar("T")

REGIME_TIERS: Tuple[Tuple[float, RegimeInfo], ...] = (
    (5.0, RegimeInfo(label=Regime.EUPHORIA, emoji="🚀", color="#00ff88")),
    (3.0, RegimeInfo(label=Regime.BULLISH, emoji="🟢", color="#4ade80")),
    (1.5, RegimeInfo(label=Regime.LEANING_BULL, emoji="🟡", color="#facc15")),
    (0.67, RegimeInfo(label=Regime.NEUTRAL, emoji="⚪", color="#94a3b8")),
    (0.33, RegimeInfo(label=Regime.LEANING_BEAR, emoji="🟠", color="#fb923c")),
)
REGIME_FLOOR = RegimeInfo(label=Regime.BEARISH, emoji="🔴", color="#ef4444")

FEAR_TIERS: Tuple[Tuple[float, Tuple[FearLevel, str, str]], ...] = (
    (5.0, (FearLevel.EXTREME, "🔴", "#ef4444")),
    (3.0, (FearLevel.HIGH, "🟠", "#f97316")),
    (1.5, (FearLevel.ELEVATED, "🟡", "#eab308")),
)
FEAR_FLOOR = (FearLevel.NORMAL, "🟢", "#22c55e")

FEAR_COMMODITY = "gold"


def _first_tier(value: float, tiers: Sequence[Tuple[float, T]], floor: T) -> T:
    for threshold, tier in tiers:
        if value >= threshold:
            return tier
    return floor


def parse_ratio(ratio: str) -> float:
    """Turn a formatted sentiment ratio back into a number.

    ``∞`` (no bearish readings at all) maps to positive infinity. Anything
    else that does not parse counts as 0.
    """

    if ratio == INFINITY_RATIO:
        return math.inf
    try:
        value = float(ratio)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(value) else value


def classify_regime(ratio: str) -> RegimeInfo:
    return _first_tier(parse_ratio(ratio), REGIME_TIERS, REGIME_FLOOR)


def classify_fear(commodities: Sequence[MentionCount], scan_count: int) -> FearInfo:
    """Grade macro anxiety by gold mentions per windowed scan."""

    gold = next((c.mentions for c in commodities if c.name == FEAR_COMMODITY), 0)
    per_scan = gold / scan_count if scan_count > 0 else 0.0
    level, emoji, color = _first_tier(per_scan, FEAR_TIERS, FEAR_FLOOR)
    return FearInfo(level=level, emoji=emoji, color=color, per_scan=per_scan)
