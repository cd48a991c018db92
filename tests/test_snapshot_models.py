from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from ctbrief.models import Snapshot


def test_snapshot_parses_scanner_payload():
    snap = Snapshot.model_validate(
        {
            "timestamp": "2024-06-01T10:00:00Z",
            "sentiment": {"bullish": 62.5, "bearish": None},
            "topTickers": [["$BTC", 10], ["ETH", 4.0], ["bad"], [7, 1], ["SOL", "many"]],
            "macroKeywords": {"gold": 3, "fed": "lots"},
            "commodityKeywords": {"uranium": 2},
            "highEngagement": [
                {"username": "bob", "engagement": 12, "content": "hello", "url": "u1"},
                "not a post",
            ],
            "byCategory": {"metals": []},
        }
    )

    assert snap.timestamp == datetime(2024, 6, 1, 10, tzinfo=timezone.utc)
    assert snap.bullish == 62.5
    assert snap.bearish == 0.0
    assert snap.top_tickers == [("$BTC", 10), ("ETH", 4)]
    assert snap.macro_keywords == {"gold": 3}
    assert snap.commodity_keywords == {"uranium": 2}
    assert len(snap.high_engagement) == 1
    post = snap.high_engagement[0]
    assert (post.author, post.likes, post.text, post.url) == ("bob", 12, "hello", "u1")


def test_naive_timestamp_is_utc():
    snap = Snapshot.model_validate({"timestamp": "2024-06-01T10:00:00"})

    assert snap.timestamp.tzinfo == timezone.utc


def test_missing_sections_default_empty():
    snap = Snapshot.model_validate(
        {"timestamp": "2024-06-01T10:00:00Z", "topTickers": None, "sentiment": None}
    )

    assert snap.sentiment is None
    assert snap.bullish == 0.0
    assert snap.top_tickers == []
    assert snap.high_engagement == []


@pytest.mark.parametrize("payload", [{}, {"timestamp": None}, {"timestamp": "soon"}])
def test_unusable_timestamp_rejects_record(payload):
    with pytest.raises(ValidationError):
        Snapshot.model_validate(payload)


def test_snapshot_is_immutable():
    snap = Snapshot.model_validate({"timestamp": "2024-06-01T10:00:00Z"})

    with pytest.raises(ValidationError):
        snap.timestamp = datetime(2020, 1, 1, tzinfo=timezone.utc)
