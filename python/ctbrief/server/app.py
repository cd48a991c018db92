"""
FastAPI application factory for the brief service.
"""

from typing import Optional

from fastapi import FastAPI

from ctbrief import __version__
from ctbrief.config import BriefConfig
from ctbrief.server.api.routers import create_brief_router
from ctbrief.server.services import BriefService
from ctbrief.store import resolve_store


def create_app(
    service: Optional[BriefService] = None,
    config: Optional[BriefConfig] = None,
) -> FastAPI:
    """Build the app, resolving the snapshot store once when no service is given."""

    if service is None:
        config = config or BriefConfig.from_env()
        service = BriefService(
            resolve_store(config),
            default_window_hours=config.default_window_hours,
        )

    app = FastAPI(title="CT Brief", version=__version__)
    app.include_router(create_brief_router(service))
    return app
