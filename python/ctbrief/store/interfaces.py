from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from ctbrief.models import Snapshot


class BaseSnapshotStore(ABC):
    """Source of scan snapshots consumed by the brief service."""

    @abstractmethod
    async def list_snapshots(
        self,
        since_hours: Optional[float] = None,
        *,
        now: Optional[datetime] = None,
    ) -> List[Snapshot]:
        """Return snapshots sorted oldest first.

        Without ``since_hours`` the full history is returned. Malformed
        records are skipped; :class:`~ctbrief.exceptions.StoreUnavailableError`
        is raised only when the store itself cannot be read.
        """

        raise NotImplementedError
