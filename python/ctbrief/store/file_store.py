from __future__ import annotations

import asyncio
import json
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from loguru import logger
from pydantic import ValidationError

from ctbrief.analysis.windowing import filter_window, sort_snapshots
from ctbrief.config import BriefConfig
from ctbrief.exceptions import StoreUnavailableError
from ctbrief.models import Snapshot
from ctbrief.store.interfaces import BaseSnapshotStore

SNAPSHOT_SUFFIX = ".json"


class FileSnapshotStore(BaseSnapshotStore):
    """Reads one JSON snapshot per file from a scanner data directory."""

    def __init__(self, data_dir: Path) -> None:
        self.data_dir = Path(data_dir)

    async def list_snapshots(
        self,
        since_hours: Optional[float] = None,
        *,
        now: Optional[datetime] = None,
    ) -> List[Snapshot]:
        snapshots = await asyncio.to_thread(self._read_all)
        if since_hours is None:
            return sort_snapshots(snapshots)
        return filter_window(snapshots, since_hours, now=now)

    def count_files(self) -> int:
        try:
            return len(self._snapshot_paths())
        except StoreUnavailableError:
            return 0

    def _snapshot_paths(self) -> List[Path]:
        if not self.data_dir.is_dir():
            return []
        try:
            return sorted(
                path for path in self.data_dir.iterdir() if path.suffix == SNAPSHOT_SUFFIX
            )
        except OSError as exc:
            raise StoreUnavailableError(
                f"Cannot list snapshot directory {self.data_dir}: {exc}"
            ) from exc

    def _read_all(self) -> List[Snapshot]:
        snapshots: List[Snapshot] = []
        for path in self._snapshot_paths():
            snapshot = self._load(path)
            if snapshot is not None:
                snapshots.append(snapshot)
        return snapshots

    @staticmethod
    def _load(path: Path) -> Optional[Snapshot]:
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.debug("Skipping unreadable snapshot {}: {}", path.name, exc)
            return None
        try:
            return Snapshot.model_validate(raw)
        except ValidationError as exc:
            logger.debug(
                "Skipping malformed snapshot {}: {} error(s)", path.name, exc.error_count()
            )
            return None


def resolve_store(config: Optional[BriefConfig] = None) -> FileSnapshotStore:
    """Pick the first existing data directory, else the first candidate."""

    config = config or BriefConfig.from_env()
    candidates = list(config.data_dirs)
    if not candidates:
        raise ValueError("At least one snapshot directory must be configured")
    chosen = next((path for path in candidates if path.exists()), candidates[0])
    logger.info("Using snapshot directory {}", chosen)
    return FileSnapshotStore(chosen)
