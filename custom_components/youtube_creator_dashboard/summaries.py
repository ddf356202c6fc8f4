"""Aggregations the dashboard derives from normalized reports."""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import date, datetime, timedelta
from typing import Any

from .const import SHORTS_MAX_SECONDS, SHORTS_TAG
from .models import AnalyticsReport, FormatStats, RankedVideo, VideoItem

_DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")


def today() -> date:
    """Return the current local date."""
    return datetime.now().date()


def days_ago(days: int) -> date:
    """Return the local date ``days`` days before today."""
    return today() - timedelta(days=days)


def parse_duration_seconds(duration: str) -> int:
    """Convert an ISO 8601 duration such as ``PT1H2M3S`` to seconds."""
    match = _DURATION_RE.search(duration or "")
    if not match:
        return 0
    hours, minutes, seconds = (int(part or 0) for part in match.groups())
    return hours * 3600 + minutes * 60 + seconds


def is_short(video: VideoItem) -> bool:
    """Return True for Shorts: tagged ``#shorts`` or under a minute long."""
    if SHORTS_TAG in video.title.lower():
        return True
    return parse_duration_seconds(video.duration) < SHORTS_MAX_SECONDS


def format_stats(videos: Iterable[VideoItem]) -> FormatStats:
    """Totals and rounded averages for a group of videos."""
    videos = list(videos)
    count = len(videos)
    total_views = sum(video.view_count for video in videos)
    total_likes = sum(video.like_count for video in videos)
    total_comments = sum(video.comment_count for video in videos)
    return FormatStats(
        count=count,
        total_views=total_views,
        total_likes=total_likes,
        total_comments=total_comments,
        avg_views=round(total_views / count) if count else 0,
        avg_likes=round(total_likes / count) if count else 0,
    )


def split_formats(videos: Iterable[VideoItem]) -> tuple[FormatStats, FormatStats]:
    """Return ``(shorts, regular)`` statistics."""
    shorts: list[VideoItem] = []
    regular: list[VideoItem] = []
    for video in videos:
        (shorts if is_short(video) else regular).append(video)
    return format_stats(shorts), format_stats(regular)


def _number(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def sum_metric(report: AnalyticsReport, metric: str) -> float:
    """Sum one metric over all rows; missing or non-numeric values count as 0."""
    return sum(_number(row.get(metric)) for row in report.rows)


def growth_summary(report: AnalyticsReport) -> dict[str, float]:
    """Window totals from the growth (overview) report."""
    gained = sum_metric(report, "subscribersGained")
    lost = sum_metric(report, "subscribersLost")
    return {
        "views": sum_metric(report, "views"),
        "watch_minutes": sum_metric(report, "estimatedMinutesWatched"),
        "subscribers_gained": gained,
        "subscribers_lost": lost,
        "net_subscribers": gained - lost,
    }


def revenue_summary(report: AnalyticsReport) -> dict[str, float]:
    """Window totals from the revenue report."""
    return {
        "revenue": sum_metric(report, "estimatedRevenue"),
        "views": sum_metric(report, "views"),
    }


def rank_top_videos(
    report: AnalyticsReport, videos: Iterable[VideoItem]
) -> list[RankedVideo]:
    """Join the top content report with video metadata, keeping API order."""
    by_id = {video.id: video for video in videos}
    ranked = []
    for row in report.rows:
        video_id = str(row.get("video", ""))
        meta = by_id.get(video_id)
        ranked.append(
            RankedVideo(
                id=video_id,
                title=meta.title if meta else video_id,
                thumbnail=meta.thumbnail if meta else "",
                views=_number(row.get("views")),
                watch_minutes=_number(row.get("estimatedMinutesWatched")),
                likes=_number(row.get("likes")),
                revenue=_number(row.get("estimatedRevenue")),
            )
        )
    return ranked
