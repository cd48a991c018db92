from datetime import datetime, timedelta, timezone

from ctbrief.analysis.mentions import normalize_ticker, rank_commodities, rank_tickers
from ctbrief.models import Snapshot

BASE = datetime(2024, 6, 1, tzinfo=timezone.utc)


def _make_snapshot(index: int, **fields) -> Snapshot:
    return Snapshot.model_validate(
        {"timestamp": (BASE + timedelta(hours=index)).isoformat(), **fields}
    )


def test_marker_is_stripped_and_counts_summed():
    snapshots = [
        _make_snapshot(0, topTickers=[["$BTC", 10]]),
        _make_snapshot(1, topTickers=[["BTC", 5]]),
    ]

    ranked = rank_tickers(snapshots)

    assert [(t.name, t.mentions) for t in ranked] == [("BTC", 15)]


def test_duplicates_within_snapshot_are_summed():
    ranked = rank_tickers([_make_snapshot(0, topTickers=[["ETH", 2], ["$ETH", 3]])])

    assert ranked[0].mentions == 5


def test_ranking_orders_by_count_and_respects_limit():
    snapshots = [
        _make_snapshot(0, topTickers=[["SOL", 3], ["ETH", 7], ["BTC", 9]]),
        _make_snapshot(1, topTickers=[["DOGE", 7], ["PEPE", 1]]),
    ]

    ranked = rank_tickers(snapshots, limit=3)

    # ETH and DOGE tie; first seen wins
    assert [t.name for t in ranked] == ["BTC", "ETH", "DOGE"]


def test_normalize_ticker_only_strips_leading_marker():
    assert normalize_ticker("$SOL") == "SOL"
    assert normalize_ticker("SOL") == "SOL"


def test_commodities_use_allow_list_for_macro_keywords():
    snapshots = [
        _make_snapshot(
            0,
            macroKeywords={"gold": 4, "fed": 20, "oil": 1},
            commodityKeywords={"uranium": 2, "gold": 1},
        ),
        _make_snapshot(1, macroKeywords={"gold": 3, "inflation": 9}),
    ]

    ranked = rank_commodities(snapshots)

    assert [(c.name, c.mentions) for c in ranked] == [
        ("gold", 8),
        ("uranium", 2),
        ("oil", 1),
    ]


def test_empty_snapshots_yield_empty_rankings():
    assert rank_tickers([]) == []
    assert rank_commodities([]) == []
