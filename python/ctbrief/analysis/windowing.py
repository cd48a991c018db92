from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

from ctbrief.config import DEFAULT_WINDOW_HOURS
from ctbrief.models import Snapshot

EARLIEST = datetime.min.replace(tzinfo=timezone.utc)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def sort_snapshots(snapshots: Iterable[Snapshot]) -> List[Snapshot]:
    return sorted(snapshots, key=lambda snap: snap.timestamp)


def filter_window(
    snapshots: Iterable[Snapshot],
    hours: float,
    *,
    now: Optional[datetime] = None,
) -> List[Snapshot]:
    """Return snapshots taken within the trailing ``hours``, oldest first.

    A window reaching back past the earliest representable time keeps
    everything.
    """

    if hours <= 0:
        raise ValueError(f"Window must be positive, got {hours}h")
    try:
        cutoff = (now or utc_now()) - timedelta(hours=hours)
    except OverflowError:
        cutoff = EARLIEST
    return sort_snapshots(snap for snap in snapshots if snap.timestamp >= cutoff)


def parse_window_hours(raw: Optional[str], default: int = DEFAULT_WINDOW_HOURS) -> int:
    """Parse a user supplied ``hours`` value, falling back to ``default``.

    Only the leading integer is read, so ``"1.5"`` means 1 and ``"12h"``
    means 12.
    """

    if raw is None:
        return default
    match = _LEADING_INT.match(str(raw))
    if match is None:
        return default
    hours = int(match.group(1))
    return hours if hours > 0 else default
