from datetime import datetime, timedelta, timezone

from ctbrief.analysis.engagement import rank_posts
from ctbrief.models import Snapshot

BASE = datetime(2024, 6, 1, tzinfo=timezone.utc)


def _make_snapshot(index: int, posts) -> Snapshot:
    return Snapshot.model_validate(
        {"timestamp": (BASE + timedelta(hours=index)).isoformat(), "highEngagement": posts}
    )


def test_posts_are_deduplicated_by_url_and_ranked_by_likes():
    snapshots = [
        _make_snapshot(
            0,
            [
                {"author": "alice", "likes": 50, "text": "gm", "url": "https://x.com/1"},
                {"author": "nourl", "likes": 9000, "text": "no link"},
            ],
        ),
        _make_snapshot(
            1,
            [
                {"author": "alice", "likes": 75, "text": "gm", "url": "https://x.com/1"},
                {"username": "bob", "engagement": 120, "content": "wagmi", "url": "https://x.com/2"},
            ],
        ),
    ]

    posts = rank_posts(snapshots)

    assert [(p.author, p.likes, p.url) for p in posts] == [
        ("bob", 120, "https://x.com/2"),
        ("alice", 50, "https://x.com/1"),
    ]
    assert posts[0].text == "wagmi"


def test_missing_likes_sort_last_and_limit_applies():
    posts = [
        {"author": f"user{i}", "likes": i, "url": f"https://x.com/{i}"} for i in range(1, 8)
    ]
    posts.append({"author": "quiet", "url": "https://x.com/quiet"})

    ranked = rank_posts([_make_snapshot(0, posts)], limit=3)

    assert [p.author for p in ranked] == ["user7", "user6", "user5"]


def test_long_text_is_truncated():
    post = {"author": "a", "likes": 1, "text": "x" * 500, "url": "https://x.com/long"}

    ranked = rank_posts([_make_snapshot(0, [post])])

    assert len(ranked[0].text) == 200
