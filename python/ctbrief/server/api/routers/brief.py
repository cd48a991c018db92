"""
Brief router exposing the market report as JSON.
"""

from typing import Optional

from fastapi import APIRouter, Query

from ctbrief.analysis import (
    classify_fear,
    parse_window_hours,
    rank_commodities,
    rank_tickers,
)
from ctbrief.server.services.brief_service import BriefService

TICKERS_ENDPOINT_LIMIT = 30


def create_brief_router(service: BriefService) -> APIRouter:
    """Create the ``/api`` router bound to ``service``."""

    router = APIRouter(prefix="/api", tags=["brief"])

    def _hours(raw: Optional[str]) -> int:
        return parse_window_hours(raw, service.default_window_hours)

    @router.get("/brief")
    async def get_brief(hours: Optional[str] = Query(default=None)):
        report = await service.build_report(_hours(hours))
        return report.to_brief_payload()

    @router.get("/brief/compact")
    async def get_compact_brief():
        brief = await service.build_compact_brief()
        return brief.model_dump(mode="json", by_alias=True)

    @router.get("/tickers")
    async def get_tickers(hours: Optional[str] = Query(default=None)):
        window = _hours(hours)
        recent = await service.recent_snapshots(window)
        return {
            "window": f"{window}h",
            "scanCount": len(recent),
            "tickers": [
                t.model_dump(mode="json")
                for t in rank_tickers(recent, TICKERS_ENDPOINT_LIMIT)
            ],
        }

    @router.get("/fear")
    async def get_fear(hours: Optional[str] = Query(default=None)):
        window = _hours(hours)
        recent = await service.recent_snapshots(window)
        commodities = rank_commodities(recent)
        fear = classify_fear(commodities, len(recent))
        return {
            "window": f"{window}h",
            "scanCount": len(recent),
            "level": fear.level.value,
            "commodities": [c.model_dump(mode="json") for c in commodities],
        }

    @router.get("/momentum")
    async def get_momentum(hours: Optional[str] = Query(default=None)):
        window = _hours(hours)
        momentum = await service.momentum(window)
        return {
            "window": f"{window}h",
            "momentum": [m.model_dump(mode="json", by_alias=True) for m in momentum],
        }

    return router
