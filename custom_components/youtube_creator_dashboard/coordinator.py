"""Data update coordinator for YouTube Creator Dashboard integration."""

from __future__ import annotations

import asyncio
import logging
from datetime import date, datetime, timedelta
from typing import Any

import aiohttp
import async_timeout

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import ConfigEntryAuthFailed
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator, UpdateFailed

from .api import YouTubeDashboardAPI
from .const import DEFAULT_TOP_VIDEOS, DOMAIN, UPDATE_TIMEOUT
from .errors import AuthenticationExhausted, AuthorizationDenied, YouTubeDashboardError
from .exchange_rate import async_get_exchange_rate
from .summaries import days_ago, growth_summary, rank_top_videos, revenue_summary, split_formats, today

_LOGGER = logging.getLogger(__name__)


async def async_fetch_dashboard_data(
    api: YouTubeDashboardAPI,
    start_date: date,
    end_date: date,
    top_results: int = DEFAULT_TOP_VIDEOS,
) -> dict[str, Any]:
    """Fetch every dashboard report and derive the sensor values.

    The channel lookup runs alone first so a single authorization covers the
    remaining reports, which then run concurrently.
    """
    channel = await api.async_get_channel()
    videos, revenue, overview, top = await asyncio.gather(
        api.async_get_videos(),
        api.async_get_revenue_report(start_date, end_date),
        api.async_get_overview_report(start_date, end_date),
        api.async_get_top_videos(start_date, end_date, top_results),
    )

    growth = growth_summary(overview)
    money = revenue_summary(revenue)
    shorts, regular = split_formats(videos)
    ranked = rank_top_videos(top, videos)

    return {
        "channel_title": channel.title,
        "subscriber_count": channel.subscriber_count,
        "view_count": channel.view_count,
        "video_count": channel.video_count,
        "views": growth["views"],
        "estimatedMinutesWatched": growth["watch_minutes"],
        "subscribersGained": growth["subscribers_gained"],
        "subscribersLost": growth["subscribers_lost"],
        "net_subscribers": growth["net_subscribers"],
        "estimatedRevenue": round(money["revenue"], 2),
        "shorts_count": shorts.count,
        "shorts_avg_views": shorts.avg_views,
        "regular_count": regular.count,
        "regular_avg_views": regular.avg_views,
        "top_video": ranked[0].title if ranked else None,
        "top_videos": [
            {"id": video.id, "title": video.title, "views": video.views}
            for video in ranked
        ],
        "start_date": start_date.isoformat(),
        "end_date": end_date.isoformat(),
    }


class YouTubeDashboardDataUpdateCoordinator(DataUpdateCoordinator[dict[str, Any]]):
    """Class to manage fetching the dashboard reports."""

    def __init__(
        self,
        hass: HomeAssistant,
        config_entry: ConfigEntry,
        api_client: YouTubeDashboardAPI,
        session: aiohttp.ClientSession,
        update_interval: int,
        report_days: int,
        currency: str | None,
    ) -> None:
        """Initialize coordinator.

        Args:
            hass: Home Assistant instance.
            config_entry: Config entry for this coordinator.
            api_client: Query catalog for the signed-in channel.
            session: Client session used for the exchange rate lookup.
            update_interval: Update interval in seconds.
            report_days: Length of the report window in days.
            currency: Display currency for revenue, or None to skip conversion.
        """
        self.api_client = api_client
        self._session = session
        self.report_days = report_days
        self.currency = currency

        super().__init__(
            hass,
            _LOGGER,
            name=DOMAIN,
            config_entry=config_entry,
            update_interval=timedelta(seconds=update_interval),
        )

    async def _async_update_data(self) -> dict[str, Any]:
        """Fetch data from the YouTube APIs.

        Raises:
            UpdateFailed: If unable to fetch data from the API.
            ConfigEntryAuthFailed: If the user has to sign in again.
        """
        start_date = days_ago(self.report_days)
        end_date = today()
        _LOGGER.debug("Fetching dashboard data for %s to %s", start_date, end_date)

        try:
            async with async_timeout.timeout(UPDATE_TIMEOUT):
                data = await async_fetch_dashboard_data(self.api_client, start_date, end_date)
        except (AuthorizationDenied, AuthenticationExhausted) as err:
            _LOGGER.error("Authentication failed: %s", err)
            raise ConfigEntryAuthFailed(err.user_message) from err
        except YouTubeDashboardError as err:
            _LOGGER.error("Error fetching YouTube data: %s", err)
            raise UpdateFailed(err.user_message) from err

        if self.currency:
            data.update(await self._async_convert_revenue(data["estimatedRevenue"]))

        data["last_updated"] = datetime.now().isoformat()
        return data

    async def _async_convert_revenue(self, revenue: float) -> dict[str, Any]:
        """Return revenue in the display currency, or nothing if no rate is available."""
        try:
            rate = await async_get_exchange_rate(self._session, self.currency)
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            _LOGGER.warning("Could not fetch exchange rate for %s: %s", self.currency, err)
            return {}

        if rate is None:
            return {}
        return {
            "estimatedRevenueConverted": round(revenue * rate.rate, 2),
            "exchange_rate": rate.rate,
            "exchange_rate_date": rate.date,
        }
