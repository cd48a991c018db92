"""Data models shared by the snapshot store, the analysis core and the API.

Snapshots are parsed leniently: a record whose timestamp cannot be parsed is
rejected as a whole, while malformed ticker pairs, keyword counts and posts
inside an otherwise valid record are dropped individually.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

POST_TEXT_LIMIT = 200


def _as_count(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)) and math.isfinite(value):
        return int(value)
    return None


class Trend(str, Enum):
    RISING = "RISING"
    DECLINING = "DECLINING"
    STABLE = "STABLE"
    UNKNOWN = "UNKNOWN"


class Regime(str, Enum):
    EUPHORIA = "EUPHORIA"
    BULLISH = "BULLISH"
    LEANING_BULL = "LEANING BULL"
    NEUTRAL = "NEUTRAL"
    LEANING_BEAR = "LEANING BEAR"
    BEARISH = "BEARISH"


class FearLevel(str, Enum):
    EXTREME = "EXTREME"
    HIGH = "HIGH"
    ELEVATED = "ELEVATED"
    NORMAL = "NORMAL"


class MomentumDirection(str, Enum):
    UP = "up"
    DOWN = "down"
    NEW = "new"


class ReportStatus(str, Enum):
    OK = "ok"
    NO_DATA = "no_data"


class SentimentReading(BaseModel):
    """Bullish/bearish percentages captured by a single scan."""

    model_config = ConfigDict(frozen=True)

    bullish: float = Field(default=0.0, description="Share of bullish posts (%)")
    bearish: float = Field(default=0.0, description="Share of bearish posts (%)")

    @field_validator("bullish", "bearish", mode="before")
    @classmethod
    def _missing_as_zero(cls, value: Any) -> Any:
        return 0.0 if value is None else value


class Post(BaseModel):
    """High-engagement post surfaced by a scan."""

    model_config = ConfigDict(frozen=True)

    author: Optional[str] = Field(default=None, description="Handle of the poster")
    likes: Optional[int] = Field(default=None, description="Likes or engagement count")
    text: str = Field(default="", description="Post body, truncated for display")
    url: Optional[str] = Field(
        default=None, description="Permalink; also the deduplication key"
    )

    @model_validator(mode="before")
    @classmethod
    def _apply_field_fallbacks(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        author = data.get("author") or data.get("username")
        text = data.get("text") or data.get("content") or ""
        return {
            "author": str(author) if author else None,
            "likes": _as_count(data.get("likes") or data.get("engagement")),
            "text": str(text)[:POST_TEXT_LIMIT],
            "url": data.get("url") or None,
        }


class Snapshot(BaseModel):
    """One timestamped scan of social sentiment and mention counts."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    timestamp: datetime = Field(..., description="Instant the scan was taken")
    sentiment: Optional[SentimentReading] = Field(default=None)
    top_tickers: List[Tuple[str, int]] = Field(
        default_factory=list,
        alias="topTickers",
        description="(symbol, count) pairs; symbols may carry a leading '$'",
    )
    macro_keywords: Dict[str, int] = Field(default_factory=dict, alias="macroKeywords")
    commodity_keywords: Dict[str, int] = Field(
        default_factory=dict, alias="commodityKeywords"
    )
    high_engagement: List[Post] = Field(default_factory=list, alias="highEngagement")

    @field_validator("timestamp")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @field_validator("sentiment", mode="before")
    @classmethod
    def _drop_non_mapping_sentiment(cls, value: Any) -> Any:
        return value if isinstance(value, (dict, SentimentReading)) else None

    @field_validator("top_tickers", mode="before")
    @classmethod
    def _keep_ticker_pairs(cls, value: Any) -> List[Tuple[str, int]]:
        if not isinstance(value, (list, tuple)):
            return []
        pairs: List[Tuple[str, int]] = []
        for entry in value:
            if not isinstance(entry, (list, tuple)) or len(entry) < 2:
                continue
            symbol, count = entry[0], _as_count(entry[1])
            if not isinstance(symbol, str) or count is None:
                continue
            pairs.append((symbol, count))
        return pairs

    @field_validator("macro_keywords", "commodity_keywords", mode="before")
    @classmethod
    def _keep_numeric_counts(cls, value: Any) -> Dict[str, int]:
        if not isinstance(value, dict):
            return {}
        counts: Dict[str, int] = {}
        for keyword, raw in value.items():
            count = _as_count(raw)
            if count is not None:
                counts[str(keyword)] = count
        return counts

    @field_validator("high_engagement", mode="before")
    @classmethod
    def _keep_post_mappings(cls, value: Any) -> List[Any]:
        if not isinstance(value, (list, tuple)):
            return []
        return [post for post in value if isinstance(post, (dict, Post))]

    @property
    def bullish(self) -> float:
        return self.sentiment.bullish if self.sentiment else 0.0

    @property
    def bearish(self) -> float:
        return self.sentiment.bearish if self.sentiment else 0.0


class SentimentSummary(BaseModel):
    """Window-level sentiment averages and trend."""

    bull: str = Field(..., description="Mean bullish %, one decimal")
    bear: str = Field(..., description="Mean bearish %, one decimal")
    ratio: str = Field(..., description="bull/bear with two decimals, '∞' or '0'")
    trend: Trend


class RegimeInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: Regime
    emoji: str
    color: str


class FearInfo(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    level: FearLevel
    emoji: str
    color: str
    per_scan: float = Field(
        default=0.0, alias="perScan", description="Gold mentions per windowed scan"
    )


class MentionCount(BaseModel):
    name: str
    mentions: int


class MomentumEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ticker: str
    recent_rate: str = Field(..., alias="recentRate")
    prior_rate: str = Field(..., alias="priorRate")
    change: int = Field(..., description="Rounded % change; 999 marks a new ticker")
    direction: MomentumDirection


class Report(BaseModel):
    """Request-scoped market brief computed from windowed and full history."""

    model_config = ConfigDict(populate_by_name=True)

    generated: datetime
    window_hours: int
    status: ReportStatus
    scan_count: int = Field(..., alias="scanCount")
    total_scans: int = Field(..., alias="totalScans")
    sentiment: SentimentSummary
    regime: RegimeInfo
    fear: FearInfo
    tickers: List[MentionCount] = Field(default_factory=list)
    commodities: List[MentionCount] = Field(default_factory=list)
    momentum: List[MomentumEntry] = Field(default_factory=list)
    high_engagement: List[Post] = Field(default_factory=list, alias="highEngagement")
    narrative: str = ""

    @property
    def window(self) -> str:
        return f"{self.window_hours}h"

    def to_brief_payload(self) -> Dict[str, Any]:
        """Return the JSON shape served by ``/api/brief``."""

        return {
            "generated": self.generated.isoformat(),
            "window": self.window,
            "scanCount": self.scan_count,
            "totalScans": self.total_scans,
            "status": self.status.value,
            "regime": {
                "label": self.regime.label.value,
                **self.sentiment.model_dump(mode="json"),
                "fear": self.fear.level.value,
            },
            "tickers": [t.model_dump(mode="json") for t in self.tickers],
            "commodities": [c.model_dump(mode="json") for c in self.commodities],
            "momentum": [
                m.model_dump(mode="json", by_alias=True) for m in self.momentum
            ],
            "highEngagement": [p.model_dump(mode="json") for p in self.high_engagement],
            "narrative": self.narrative,
        }


class CompactBrief(BaseModel):
    """One-line digest of the last day, sized for chat bots and status bars."""

    model_config = ConfigDict(populate_by_name=True)

    regime: Regime
    sentiment: str
    ratio: str
    trend: Trend
    fear: FearLevel
    top_tickers: str = Field(..., alias="topTickers")
    scans: int
