from __future__ import annotations

from typing import Iterable, List, Set

from ctbrief.models import Post, Snapshot

DEFAULT_POST_LIMIT = 5


def rank_posts(snapshots: Iterable[Snapshot], limit: int = DEFAULT_POST_LIMIT) -> List[Post]:
    """Return the most-liked posts across ``snapshots``, one per URL.

    Posts without a URL cannot be deduplicated and are left out. When the
    same URL shows up in several scans the first occurrence wins.
    """

    seen: Set[str] = set()
    posts: List[Post] = []
    for snap in snapshots:
        for post in snap.high_engagement:
            if not post.url or post.url in seen:
                continue
            seen.add(post.url)
            posts.append(post)
    posts.sort(key=lambda post: post.likes or 0, reverse=True)
    return posts[:limit]
