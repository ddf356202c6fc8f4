"""YouTube API queries for YouTube Creator Dashboard integration."""

from __future__ import annotations

import logging
from datetime import date

from .const import (
    ANALYTICS_CHANNEL_IDS,
    ANALYTICS_REPORTS_PATH,
    DEFAULT_MAX_VIDEOS,
    DEFAULT_TOP_VIDEOS,
    OVERVIEW_METRICS,
    REVENUE_METRICS,
    TOP_VIDEO_METRICS,
    VIDEO_ANALYTICS_METRICS,
    YOUTUBE_ANALYTICS_API_BASE,
    YOUTUBE_DATA_API_BASE,
)
from .errors import NoChannelFound, NoUploadsCollection
from .fetcher import AuthenticatedFetcher
from .models import AnalyticsReport, ChannelStats, VideoItem
from .normalizer import normalize_report

_LOGGER = logging.getLogger(__name__)


def _as_date_str(value: date | str) -> str:
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    return value


def analytics_params(
    start_date: date | str,
    end_date: date | str,
    metrics: list[str],
    *,
    dimensions: str | None = None,
    filters: str | None = None,
    sort: str | None = None,
    max_results: int | None = None,
) -> dict[str, str]:
    """Build query parameters for the Analytics ``reports`` endpoint."""
    params = {
        "ids": ANALYTICS_CHANNEL_IDS,
        "startDate": _as_date_str(start_date),
        "endDate": _as_date_str(end_date),
        "metrics": ",".join(metrics),
    }
    if dimensions:
        params["dimensions"] = dimensions
    if filters:
        params["filters"] = filters
    if sort:
        params["sort"] = sort
    if max_results is not None:
        params["maxResults"] = str(max_results)
    return params


def video_analytics_params(
    video_id: str, start_date: date | str, end_date: date | str
) -> dict[str, str]:
    """Daily metrics for one video."""
    return analytics_params(
        start_date,
        end_date,
        VIDEO_ANALYTICS_METRICS,
        dimensions="day",
        filters=f"video=={video_id}",
        sort="day",
    )


def revenue_params(start_date: date | str, end_date: date | str) -> dict[str, str]:
    """Daily revenue metrics for the channel."""
    return analytics_params(
        start_date, end_date, REVENUE_METRICS, dimensions="day", sort="day"
    )


def overview_params(start_date: date | str, end_date: date | str) -> dict[str, str]:
    """Daily growth metrics for the channel."""
    return analytics_params(
        start_date, end_date, OVERVIEW_METRICS, dimensions="day", sort="day"
    )


def top_videos_params(
    start_date: date | str, end_date: date | str, max_results: int = DEFAULT_TOP_VIDEOS
) -> dict[str, str]:
    """Per-video metrics, most viewed first."""
    return analytics_params(
        start_date,
        end_date,
        TOP_VIDEO_METRICS,
        dimensions="video",
        sort="-views",
        max_results=max_results,
    )


class YouTubeDashboardAPI:
    """Fixed set of dashboard queries over an authenticated fetcher."""

    def __init__(self, fetcher: AuthenticatedFetcher) -> None:
        """Initialize the query catalog."""
        self._fetcher = fetcher

    async def async_get_channel(self) -> ChannelStats:
        """Fetch the signed-in channel's metadata and statistics."""
        data = await self._data_api(
            "/channels", {"part": "snippet,statistics", "mine": "true"}
        )
        items = data.get("items") or []
        if not items:
            _LOGGER.warning("No YouTube channel found for this account")
            raise NoChannelFound("No YouTube channel found for this account")
        return ChannelStats.from_resource(items[0])

    async def async_get_videos(self, max_results: int = DEFAULT_MAX_VIDEOS) -> list[VideoItem]:
        """Fetch the channel's most recent uploads.

        Three dependent calls: the uploads playlist id, the playlist's video
        ids, then the videos themselves.
        """
        channel_data = await self._data_api(
            "/channels", {"part": "contentDetails", "mine": "true"}
        )
        items = channel_data.get("items") or [{}]
        uploads_playlist_id = (
            items[0].get("contentDetails", {}).get("relatedPlaylists", {}).get("uploads")
        )
        if not uploads_playlist_id:
            raise NoUploadsCollection("No uploads playlist found")

        playlist_data = await self._data_api(
            "/playlistItems",
            {
                "part": "contentDetails",
                "playlistId": uploads_playlist_id,
                "maxResults": str(max_results),
            },
        )
        video_ids = [
            item["contentDetails"]["videoId"]
            for item in playlist_data.get("items") or []
        ]
        _LOGGER.debug("Uploads playlist %s has %d videos", uploads_playlist_id, len(video_ids))
        if not video_ids:
            return []

        videos_data = await self._data_api(
            "/videos",
            {"part": "snippet,statistics,contentDetails", "id": ",".join(video_ids)},
        )
        return [VideoItem.from_resource(item) for item in videos_data.get("items") or []]

    async def async_get_video_analytics(
        self, video_id: str, start_date: date | str, end_date: date | str
    ) -> AnalyticsReport:
        """Fetch daily analytics for one video."""
        return await self._analytics_query(
            video_analytics_params(video_id, start_date, end_date)
        )

    async def async_get_revenue_report(
        self, start_date: date | str, end_date: date | str
    ) -> AnalyticsReport:
        """Fetch the daily revenue report."""
        return await self._analytics_query(revenue_params(start_date, end_date))

    async def async_get_overview_report(
        self, start_date: date | str, end_date: date | str
    ) -> AnalyticsReport:
        """Fetch the daily growth report."""
        return await self._analytics_query(overview_params(start_date, end_date))

    async def async_get_top_videos(
        self,
        start_date: date | str,
        end_date: date | str,
        max_results: int = DEFAULT_TOP_VIDEOS,
    ) -> AnalyticsReport:
        """Fetch the top content report."""
        return await self._analytics_query(
            top_videos_params(start_date, end_date, max_results)
        )

    async def _analytics_query(self, params: dict[str, str]) -> AnalyticsReport:
        payload = await self._fetcher.fetch(
            YOUTUBE_ANALYTICS_API_BASE, ANALYTICS_REPORTS_PATH, params
        )
        return normalize_report(payload)

    async def _data_api(self, path: str, params: dict[str, str]) -> dict:
        return await self._fetcher.fetch(YOUTUBE_DATA_API_BASE, path, params)
