"""YouTube Creator Dashboard integration for Home Assistant."""

from __future__ import annotations

import logging
from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import Platform
from homeassistant.core import HomeAssistant
from homeassistant.helpers import config_entry_oauth2_flow, config_validation as cv, device_registry as dr
from homeassistant.helpers.aiohttp_client import async_get_clientsession

from .const import (
    CONF_CHANNEL_ID,
    CONF_CHANNEL_TITLE,
    CONF_CURRENCY,
    CONF_REPORT_DAYS,
    CONF_UPDATE_INTERVAL,
    DEFAULT_CURRENCY,
    DEFAULT_REPORT_DAYS,
    DEFAULT_UPDATE_INTERVAL,
    DOMAIN,
)
from .services import async_register_services

_LOGGER = logging.getLogger(__name__)

PLATFORMS: list[Platform] = [Platform.SENSOR]
CONFIG_SCHEMA = cv.config_entry_only_config_schema(DOMAIN)


async def async_setup(hass: HomeAssistant, config: dict[str, Any]) -> bool:
    """Set up YouTube Creator Dashboard integration."""
    hass.data.setdefault(DOMAIN, {})
    async_register_services(hass)
    return True


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up YouTube Creator Dashboard from a config entry."""
    # Import client modules inside function to avoid blocking import
    from .api import YouTubeDashboardAPI
    from .authorizer import CredentialsAuthorizer
    from .coordinator import YouTubeDashboardDataUpdateCoordinator
    from .executor import RequestExecutor
    from .fetcher import AuthenticatedFetcher
    from .token_store import TokenStore

    hass.data.setdefault(DOMAIN, {})

    try:
        implementation = await config_entry_oauth2_flow.async_get_config_entry_implementation(
            hass, entry
        )
    except ValueError as err:
        _LOGGER.error("No application credentials found for %s: %s", DOMAIN, err)
        return False

    channel_id = entry.data[CONF_CHANNEL_ID]
    channel_title = entry.data.get(CONF_CHANNEL_TITLE, "YouTube Channel")

    _LOGGER.debug(
        "Setting up YouTube Creator Dashboard for channel: %s (%s)",
        channel_title,
        channel_id,
    )

    session = async_get_clientsession(hass)
    # The access token lives only in memory; the first request authorizes.
    token_store = TokenStore()
    authorizer = CredentialsAuthorizer(
        hass,
        refresh_token=entry.data["token"]["refresh_token"],
        client_id=implementation.client_id,
        client_secret=implementation.client_secret,
    )
    fetcher = AuthenticatedFetcher(token_store, authorizer, RequestExecutor(session))
    api_client = YouTubeDashboardAPI(fetcher)

    coordinator = YouTubeDashboardDataUpdateCoordinator(
        hass=hass,
        config_entry=entry,
        api_client=api_client,
        session=session,
        update_interval=entry.options.get(CONF_UPDATE_INTERVAL, DEFAULT_UPDATE_INTERVAL),
        report_days=entry.options.get(CONF_REPORT_DAYS, DEFAULT_REPORT_DAYS),
        currency=entry.options.get(CONF_CURRENCY, DEFAULT_CURRENCY) or None,
    )

    await coordinator.async_config_entry_first_refresh()

    hass.data[DOMAIN][entry.entry_id] = {
        "coordinator": coordinator,
        "api_client": api_client,
        "token_store": token_store,
        "channel_id": channel_id,
        "channel_title": channel_title,
    }

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)

    _register_device(hass, entry, channel_id, channel_title)

    entry.async_on_unload(entry.add_update_listener(_async_update_listener))

    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload YouTube Creator Dashboard config entry."""
    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)

    if unload_ok:
        entry_data = hass.data[DOMAIN].pop(entry.entry_id)
        entry_data["token_store"].clear()

    return unload_ok


async def _async_update_listener(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Handle options update."""
    await hass.config_entries.async_reload(entry.entry_id)


def _register_device(
    hass: HomeAssistant, entry: ConfigEntry, channel_id: str, channel_title: str
) -> None:
    """Register device in device registry."""
    device_registry = dr.async_get(hass)

    device_registry.async_get_or_create(
        config_entry_id=entry.entry_id,
        identifiers={(DOMAIN, channel_id)},
        name=channel_title,
        manufacturer="YouTube",
        model="YouTube Channel",
    )
