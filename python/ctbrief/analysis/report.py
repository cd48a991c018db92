from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ctbrief.models import CompactBrief, Report, ReportStatus, Snapshot
from ctbrief.analysis.classifiers import classify_fear, classify_regime
from ctbrief.analysis.engagement import rank_posts
from ctbrief.analysis.mentions import TICKER_MARKER, rank_commodities, rank_tickers
from ctbrief.analysis.momentum import detect_momentum
from ctbrief.analysis.narrative import compose_narrative
from ctbrief.analysis.sentiment import analyze_sentiment
from ctbrief.analysis.windowing import utc_now

REPORT_POST_LIMIT = 8
COMPACT_TICKER_LIMIT = 5


def build_report(
    window_hours: int,
    history: Sequence[Snapshot],
    recent: Sequence[Snapshot],
    *,
    now: Optional[datetime] = None,
) -> Report:
    """Assemble the full brief.

    ``history`` is every known snapshot and ``recent`` its windowed subset,
    both sorted oldest first. The result depends only on the arguments, so
    passing a fixed ``now`` makes it reproducible.
    """

    sentiment = analyze_sentiment(recent)
    regime = classify_regime(sentiment.ratio)
    tickers = rank_tickers(recent)
    commodities = rank_commodities(recent)
    fear = classify_fear(commodities, len(recent))
    momentum = detect_momentum(history, recent)
    narrative = compose_narrative(sentiment, regime, fear, momentum)

    return Report(
        generated=now or utc_now(),
        window_hours=window_hours,
        status=ReportStatus.OK if history else ReportStatus.NO_DATA,
        scan_count=len(recent),
        total_scans=len(history),
        sentiment=sentiment,
        regime=regime,
        fear=fear,
        tickers=tickers,
        commodities=commodities,
        momentum=momentum,
        high_engagement=rank_posts(recent, REPORT_POST_LIMIT),
        narrative=narrative,
    )


def build_compact_brief(recent: Sequence[Snapshot]) -> CompactBrief:
    sentiment = analyze_sentiment(recent)
    regime = classify_regime(sentiment.ratio)
    tickers = rank_tickers(recent, COMPACT_TICKER_LIMIT)
    fear = classify_fear(rank_commodities(recent), len(recent))

    return CompactBrief(
        regime=regime.label,
        sentiment=f"{sentiment.bull}%↑ {sentiment.bear}%↓",
        ratio=f"{sentiment.ratio}:1",
        trend=sentiment.trend,
        fear=fear.level,
        top_tickers=" ".join(
            f"{TICKER_MARKER}{t.name}({t.mentions})" for t in tickers
        ),
        scans=len(recent),
    )
