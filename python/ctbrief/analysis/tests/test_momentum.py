from datetime import datetime, timedelta, timezone
from typing import List, Sequence, Tuple

from ctbrief.analysis.momentum import NEW_TICKER_CHANGE, detect_momentum
from ctbrief.models import MomentumDirection, Snapshot

BASE = datetime(2024, 5, 1, tzinfo=timezone.utc)

Row = Sequence[Tuple[str, int]]


def _make_history(
    prior_rows: List[Row], recent_rows: List[Row]
) -> Tuple[List[Snapshot], List[Snapshot]]:
    snapshots = [
        Snapshot(timestamp=BASE + timedelta(hours=i), top_tickers=list(row))
        for i, row in enumerate(prior_rows + recent_rows)
    ]
    return snapshots, snapshots[len(prior_rows):]


def test_insufficient_history_returns_empty():
    history, recent = _make_history([[("BTC", 10)]] * 29, [[("BTC", 50)]] * 10)
    assert len(history) == 39

    assert detect_momentum(history, recent) == []


def test_insufficient_recent_window_returns_empty():
    history, recent = _make_history([[("BTC", 10)]] * 40, [[("BTC", 50)]] * 9)

    assert detect_momentum(history, recent) == []


def test_rate_changes_and_strict_threshold():
    prior = [[("FLAT", 10), ("UP", 10), ("DOWN", 10)]] * 30
    # FLAT moves exactly +30%, which is not enough
    recent = [[("FLAT", 13), ("UP", 14), ("$DOWN", 5)]] * 10
    history, window = _make_history(prior, recent)

    momentum = detect_momentum(history, window)

    by_ticker = {entry.ticker: entry for entry in momentum}
    assert "FLAT" not in by_ticker
    assert by_ticker["UP"].change == 40
    assert by_ticker["UP"].direction == MomentumDirection.UP
    assert by_ticker["UP"].recent_rate == "14.00"
    assert by_ticker["UP"].prior_rate == "10.00"
    assert by_ticker["DOWN"].change == -50
    assert by_ticker["DOWN"].direction == MomentumDirection.DOWN
    # Sorted by absolute change
    assert [entry.ticker for entry in momentum] == ["DOWN", "UP"]


def test_new_ticker_gets_sentinel_change():
    prior = [[("BTC", 1)]] * 30
    recent = [[("BTC", 1)]] * 5 + [[("BTC", 1), ("NEWCOIN", 1)]] * 5
    history, window = _make_history(prior, recent)

    momentum = detect_momentum(history, window)

    assert len(momentum) == 1
    entry = momentum[0]
    assert entry.ticker == "NEWCOIN"
    assert entry.direction == MomentumDirection.NEW
    assert entry.change == NEW_TICKER_CHANGE
    assert entry.recent_rate == "0.50"
    assert entry.prior_rate == "0.00"


def test_noise_floor_skips_thin_tickers():
    prior = [[("BTC", 1)]] * 30
    # Four mentions in total never reach the five-mention floor
    recent = [[("BTC", 1)]] * 6 + [[("BTC", 1), ("TINY", 1)]] * 4
    history, window = _make_history(prior, recent)

    assert detect_momentum(history, window) == []


def test_result_is_capped_at_twelve_entries():
    tickers = [f"T{i}" for i in range(15)]
    prior = [[("BTC", 1)]] * 30
    recent = [[(t, 1) for t in tickers]] * 10
    history, window = _make_history(prior, recent)

    momentum = detect_momentum(history, window)

    assert len(momentum) == 12
    assert [entry.ticker for entry in momentum] == tickers[:12]
    assert all(entry.change == NEW_TICKER_CHANGE for entry in momentum)


def test_partition_uses_first_window_timestamp():
    # Prior rate 2/scan, recent rate 1/scan: -50%
    prior = [[("ETH", 2)]] * 40
    recent = [[("ETH", 1)]] * 10
    history, window = _make_history(prior, recent)

    momentum = detect_momentum(history, window)

    assert [(m.ticker, m.change, m.direction) for m in momentum] == [
        ("ETH", -50, MomentumDirection.DOWN)
    ]


def test_tied_rates_round_up():
    prior = [[("ETH", 1)]] * 3 + [[("BTC", 1)]] * 57
    recent = [[("ETH", 1)]] * 2 + [[("BTC", 1)]] * 14
    history, window = _make_history(prior, recent)

    momentum = detect_momentum(history, window)

    eth = next(entry for entry in momentum if entry.ticker == "ETH")
    assert eth.recent_rate == "0.13"
    assert eth.prior_rate == "0.05"
    assert eth.change == 150
    assert eth.direction == MomentumDirection.UP
