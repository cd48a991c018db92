"""Pure analysis over time-sorted snapshot sequences."""

from ctbrief.analysis.classifiers import classify_fear, classify_regime
from ctbrief.analysis.engagement import rank_posts
from ctbrief.analysis.mentions import rank_commodities, rank_tickers
from ctbrief.analysis.momentum import detect_momentum
from ctbrief.analysis.narrative import compose_narrative
from ctbrief.analysis.report import build_compact_brief, build_report
from ctbrief.analysis.sentiment import analyze_sentiment
from ctbrief.analysis.windowing import filter_window, parse_window_hours

__all__ = [
    "analyze_sentiment",
    "build_compact_brief",
    "build_report",
    "classify_fear",
    "classify_regime",
    "compose_narrative",
    "detect_momentum",
    "filter_window",
    "parse_window_hours",
    "rank_commodities",
    "rank_posts",
    "rank_tickers",
]
