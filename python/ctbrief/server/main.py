"""
Process entry point: configure logging, resolve the store, serve the API.
"""

import sys

import uvicorn
from loguru import logger

from ctbrief.config import BriefConfig
from ctbrief.server.app import create_app
from ctbrief.server.services import BriefService
from ctbrief.store import resolve_store


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def main() -> None:
    config = BriefConfig.from_env()
    configure_logging(config.log_level)

    store = resolve_store(config)
    service = BriefService(store, default_window_hours=config.default_window_hours)
    app = create_app(service=service)

    logger.info("CT Brief running on port {}", config.port)
    logger.info("Data: {} ({} scans)", store.data_dir, store.count_files())
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
