"""Data model for YouTube Creator Dashboard integration."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

AnalyticsRecord = dict[str, Any]


@dataclass
class AnalyticsReport:
    """Normalized analytics report: column names plus one record per row."""

    columns: list[str] = field(default_factory=list)
    rows: list[AnalyticsRecord] = field(default_factory=list)

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {"columns": list(self.columns), "rows": [dict(row) for row in self.rows]}


@dataclass(frozen=True)
class ChannelStats:
    """Flattened channel metadata and lifetime statistics."""

    id: str
    title: str
    thumbnail: str
    subscriber_count: int
    view_count: int
    video_count: int

    @classmethod
    def from_resource(cls, item: dict[str, Any]) -> ChannelStats:
        """Build from a Data API ``channels`` item."""
        snippet = item.get("snippet", {})
        stats = item.get("statistics", {})
        return cls(
            id=item["id"],
            title=snippet.get("title", ""),
            thumbnail=snippet.get("thumbnails", {}).get("default", {}).get("url", ""),
            subscriber_count=int(stats.get("subscriberCount", 0)),
            view_count=int(stats.get("viewCount", 0)),
            video_count=int(stats.get("videoCount", 0)),
        )

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""
        return asdict(self)


@dataclass(frozen=True)
class VideoItem:
    """Flattened video metadata and statistics."""

    id: str
    title: str
    thumbnail: str
    published_at: str
    view_count: int
    like_count: int
    comment_count: int
    duration: str

    @classmethod
    def from_resource(cls, item: dict[str, Any]) -> VideoItem:
        """Build from a Data API ``videos`` item."""
        snippet = item.get("snippet", {})
        stats = item.get("statistics", {})
        return cls(
            id=item["id"],
            title=snippet.get("title", ""),
            thumbnail=snippet.get("thumbnails", {}).get("medium", {}).get("url", ""),
            published_at=snippet.get("publishedAt", ""),
            view_count=int(stats.get("viewCount", 0)),
            like_count=int(stats.get("likeCount", 0)),
            comment_count=int(stats.get("commentCount", 0)),
            duration=item.get("contentDetails", {}).get("duration", ""),
        )

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""
        return asdict(self)


@dataclass(frozen=True)
class FormatStats:
    """Aggregate statistics for one video format (Shorts or regular)."""

    count: int = 0
    total_views: int = 0
    total_likes: int = 0
    total_comments: int = 0
    avg_views: int = 0
    avg_likes: int = 0


@dataclass(frozen=True)
class RankedVideo:
    """A top-content row joined with its video metadata."""

    id: str
    title: str
    thumbnail: str
    views: float
    watch_minutes: float
    likes: float
    revenue: float


@dataclass(frozen=True)
class ExchangeRate:
    """USD exchange rate for the display currency."""

    rate: float
    date: str
