"""
Brief service: loads snapshots from the store and runs the analysis core.
"""

from datetime import datetime
from typing import Callable, List, Optional, Tuple

from loguru import logger

from ctbrief.analysis import (
    build_compact_brief,
    build_report,
    detect_momentum,
    filter_window,
)
from ctbrief.analysis.windowing import utc_now
from ctbrief.config import DEFAULT_WINDOW_HOURS
from ctbrief.exceptions import StoreUnavailableError
from ctbrief.models import CompactBrief, MomentumEntry, Report, Snapshot
from ctbrief.store.interfaces import BaseSnapshotStore

COMPACT_WINDOW_HOURS = 24


class BriefService:
    """Turns store contents into reports, degrading to empty data on failure."""

    def __init__(
        self,
        store: BaseSnapshotStore,
        *,
        default_window_hours: int = DEFAULT_WINDOW_HOURS,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.store = store
        self.default_window_hours = default_window_hours
        self._clock = clock

    async def _list(
        self, since_hours: Optional[float] = None, now: Optional[datetime] = None
    ) -> List[Snapshot]:
        try:
            return await self.store.list_snapshots(since_hours, now=now)
        except StoreUnavailableError as exc:
            logger.warning("Snapshot store unavailable, serving empty data: {}", exc)
            return []

    async def _history_and_window(
        self, hours: int, now: datetime
    ) -> Tuple[List[Snapshot], List[Snapshot]]:
        # The window must be cut from the same read as the history.
        history = await self._list()
        return history, filter_window(history, hours, now=now)

    async def build_report(self, window_hours: Optional[int] = None) -> Report:
        hours = window_hours or self.default_window_hours
        now = self._clock()
        history, recent = await self._history_and_window(hours, now)
        report = build_report(hours, history, recent, now=now)
        logger.debug(
            "Built {} report: {}/{} scans, regime={}",
            report.window,
            report.scan_count,
            report.total_scans,
            report.regime.label.value,
        )
        return report

    async def momentum(self, window_hours: Optional[int] = None) -> List[MomentumEntry]:
        hours = window_hours or self.default_window_hours
        history, recent = await self._history_and_window(hours, self._clock())
        return detect_momentum(history, recent)

    async def recent_snapshots(self, window_hours: Optional[int] = None) -> List[Snapshot]:
        hours = window_hours or self.default_window_hours
        return await self._list(hours, now=self._clock())

    async def build_compact_brief(self) -> CompactBrief:
        recent = await self.recent_snapshots(COMPACT_WINDOW_HOURS)
        return build_compact_brief(recent)
