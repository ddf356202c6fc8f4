"""Services for YouTube Creator Dashboard integration."""

from __future__ import annotations

import logging

import voluptuous as vol

from homeassistant.core import HomeAssistant, ServiceCall, ServiceResponse, SupportsResponse
from homeassistant.exceptions import ServiceValidationError
from homeassistant.helpers import config_validation as cv

from .const import (
    ATTR_CONFIG_ENTRY_ID,
    ATTR_END_DATE,
    ATTR_START_DATE,
    ATTR_VIDEO_ID,
    DOMAIN,
    SERVICE_GET_VIDEO_ANALYTICS,
)
from .summaries import days_ago, today

_LOGGER = logging.getLogger(__name__)

GET_VIDEO_ANALYTICS_SCHEMA = vol.Schema(
    {
        vol.Required(ATTR_CONFIG_ENTRY_ID): cv.string,
        vol.Required(ATTR_VIDEO_ID): cv.string,
        vol.Optional(ATTR_START_DATE): cv.date,
        vol.Optional(ATTR_END_DATE): cv.date,
    }
)


async def async_get_video_analytics(hass: HomeAssistant, call: ServiceCall) -> ServiceResponse:
    """Return the daily analytics report for one video."""
    entry_id = call.data[ATTR_CONFIG_ENTRY_ID]
    entry_data = hass.data.get(DOMAIN, {}).get(entry_id)
    if entry_data is None:
        raise ServiceValidationError(f"No loaded YouTube channel for entry {entry_id}")

    coordinator = entry_data["coordinator"]
    start_date = call.data.get(ATTR_START_DATE) or days_ago(coordinator.report_days)
    end_date = call.data.get(ATTR_END_DATE) or today()

    _LOGGER.debug(
        "Fetching analytics for video %s from %s to %s",
        call.data[ATTR_VIDEO_ID],
        start_date,
        end_date,
    )
    report = await entry_data["api_client"].async_get_video_analytics(
        call.data[ATTR_VIDEO_ID], start_date, end_date
    )
    return report.as_dict()


def async_register_services(hass: HomeAssistant) -> None:
    """Register the integration's services."""

    async def _handle_get_video_analytics(call: ServiceCall) -> ServiceResponse:
        return await async_get_video_analytics(hass, call)

    hass.services.async_register(
        DOMAIN,
        SERVICE_GET_VIDEO_ANALYTICS,
        _handle_get_video_analytics,
        schema=GET_VIDEO_ANALYTICS_SCHEMA,
        supports_response=SupportsResponse.ONLY,
    )
