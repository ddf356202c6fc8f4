"""Sensor entities for YouTube Creator Dashboard integration."""

from __future__ import annotations

import logging
from typing import Any

from homeassistant.components.sensor import (
    SensorDeviceClass,
    SensorEntity,
    SensorStateClass,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.typing import StateType
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import CONF_CHANNEL_ID, CONF_CHANNEL_TITLE, DOMAIN, REVENUE_CURRENCY
from .coordinator import YouTubeDashboardDataUpdateCoordinator

_LOGGER = logging.getLogger(__name__)

# Metrics over the report window
WINDOW_METRICS = [
    "views",
    "estimatedMinutesWatched",
    "subscribersGained",
    "subscribersLost",
    "net_subscribers",
    "estimatedRevenue",
    "shorts_count",
    "shorts_avg_views",
    "regular_count",
    "regular_avg_views",
    "top_video",
]

# Lifetime channel totals
LIFETIME_METRICS = [
    "subscriber_count",
    "video_count",
    "view_count",
]

METRIC_FRIENDLY_NAMES = {
    "views": "Views",
    "estimatedMinutesWatched": "Watch Hours",
    "subscribersGained": "Subscribers Gained",
    "subscribersLost": "Subscribers Lost",
    "net_subscribers": "Net Subscribers",
    "estimatedRevenue": "Estimated Revenue",
    "estimatedRevenueConverted": "Estimated Revenue (Local)",
    "shorts_count": "Shorts",
    "shorts_avg_views": "Shorts Average Views",
    "regular_count": "Videos",
    "regular_avg_views": "Videos Average Views",
    "top_video": "Top Video",
    "subscriber_count": "Subscriber Count",
    "video_count": "Video Count",
    "view_count": "Total Views",
}

METRIC_UNITS = {
    "estimatedMinutesWatched": "h",  # Convert minutes to hours
    "estimatedRevenue": REVENUE_CURRENCY,
}

METRIC_DEVICE_CLASSES = {
    "estimatedMinutesWatched": SensorDeviceClass.DURATION,
    "estimatedRevenue": SensorDeviceClass.MONETARY,
    "estimatedRevenueConverted": SensorDeviceClass.MONETARY,
}

METRIC_STATE_CLASSES = {
    "views": SensorStateClass.MEASUREMENT,
    "estimatedMinutesWatched": SensorStateClass.MEASUREMENT,
    "subscribersGained": SensorStateClass.MEASUREMENT,
    "subscribersLost": SensorStateClass.MEASUREMENT,
    "net_subscribers": SensorStateClass.MEASUREMENT,
    "shorts_count": SensorStateClass.MEASUREMENT,
    "shorts_avg_views": SensorStateClass.MEASUREMENT,
    "regular_count": SensorStateClass.MEASUREMENT,
    "regular_avg_views": SensorStateClass.MEASUREMENT,
    "subscriber_count": SensorStateClass.MEASUREMENT,
    "video_count": SensorStateClass.TOTAL_INCREASING,
    "view_count": SensorStateClass.TOTAL_INCREASING,
}


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up YouTube Creator Dashboard sensor entities."""
    coordinator: YouTubeDashboardDataUpdateCoordinator = hass.data[DOMAIN][
        entry.entry_id
    ]["coordinator"]
    channel_id = entry.data[CONF_CHANNEL_ID]
    channel_title = entry.data.get(CONF_CHANNEL_TITLE, "YouTube Channel")

    entities = [
        YouTubeDashboardSensor(coordinator, channel_id, channel_title, metric, True)
        for metric in WINDOW_METRICS
    ]
    entities.extend(
        YouTubeDashboardSensor(coordinator, channel_id, channel_title, metric, False)
        for metric in LIFETIME_METRICS
    )
    if coordinator.currency:
        entities.append(
            YouTubeDashboardSensor(
                coordinator, channel_id, channel_title, "estimatedRevenueConverted", True
            )
        )

    async_add_entities(entities)


class YouTubeDashboardSensor(
    CoordinatorEntity[YouTubeDashboardDataUpdateCoordinator], SensorEntity
):
    """One dashboard figure for a YouTube channel."""

    def __init__(
        self,
        coordinator: YouTubeDashboardDataUpdateCoordinator,
        channel_id: str,
        channel_title: str,
        metric_key: str,
        in_window: bool,
    ) -> None:
        """Initialize the sensor."""
        super().__init__(coordinator)
        self._channel_id = channel_id
        self._channel_title = channel_title
        self._metric_key = metric_key
        self._in_window = in_window

        friendly_name = METRIC_FRIENDLY_NAMES.get(metric_key, metric_key)
        if in_window:
            self._attr_name = f"{channel_title} {friendly_name} ({coordinator.report_days} days)"
        else:
            self._attr_name = f"{channel_title} {friendly_name}"
        self._attr_unique_id = f"{channel_id}_{metric_key}"

        self._attr_device_class = METRIC_DEVICE_CLASSES.get(metric_key)
        self._attr_state_class = METRIC_STATE_CLASSES.get(metric_key)
        if metric_key == "estimatedRevenueConverted":
            self._attr_native_unit_of_measurement = coordinator.currency
        else:
            self._attr_native_unit_of_measurement = METRIC_UNITS.get(metric_key)

    @property
    def device_info(self) -> DeviceInfo:
        """Return device information."""
        return DeviceInfo(
            identifiers={(DOMAIN, self._channel_id)},
            name=self._channel_title,
            manufacturer="YouTube",
            model="YouTube Channel",
        )

    @property
    def native_value(self) -> StateType:
        """Return the native value of the sensor."""
        if not self.coordinator.data:
            return None

        value = self.coordinator.data.get(self._metric_key)

        if self._metric_key == "estimatedMinutesWatched" and value is not None:
            value = round(value / 60, 2)

        return value

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Return extra state attributes."""
        attrs: dict[str, Any] = {
            "channel_id": self._channel_id,
            "channel_name": self._channel_title,
        }

        data = self.coordinator.data
        if not data:
            return attrs

        if "last_updated" in data:
            attrs["last_updated"] = data["last_updated"]
        if self._in_window:
            attrs["start_date"] = data.get("start_date")
            attrs["end_date"] = data.get("end_date")
        if self._metric_key == "top_video":
            attrs["ranking"] = data.get("top_videos", [])
        if self._metric_key == "estimatedRevenueConverted":
            attrs["exchange_rate"] = data.get("exchange_rate")
            attrs["exchange_rate_date"] = data.get("exchange_rate_date")

        return attrs
