from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from loguru import logger

DEFAULT_WINDOW_HOURS = 24
PACKAGE_DIR = Path(__file__).resolve().parent


def _default_data_dirs() -> List[Path]:
    return [PACKAGE_DIR / "data", Path.home() / "ct-scanner" / "data"]


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer {}={!r}, using {}", name, raw, default)
        return default


@dataclass
class BriefConfig:
    data_dirs: List[Path] = None
    default_window_hours: int = DEFAULT_WINDOW_HOURS
    host: str = "0.0.0.0"
    port: int = 3500
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.data_dirs is None:
            self.data_dirs = _default_data_dirs()
        if self.default_window_hours <= 0:
            self.default_window_hours = DEFAULT_WINDOW_HOURS

    @classmethod
    def from_env(cls) -> "BriefConfig":
        raw_dirs = os.getenv("CT_BRIEF_DATA_DIRS")
        data_dirs: Optional[List[Path]] = None
        if raw_dirs:
            data_dirs = [
                Path(part).expanduser() for part in raw_dirs.split(os.pathsep) if part
            ]
        return cls(
            data_dirs=data_dirs or None,
            default_window_hours=_env_int("CT_BRIEF_WINDOW_HOURS", DEFAULT_WINDOW_HOURS),
            host=os.getenv("HOST", "0.0.0.0"),
            port=_env_int("PORT", 3500),
            log_level=os.getenv("CT_BRIEF_LOG_LEVEL", "INFO").upper(),
        )
