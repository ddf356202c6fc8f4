"""Config flow for YouTube Creator Dashboard integration."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import voluptuous as vol

from homeassistant.config_entries import SOURCE_REAUTH, ConfigEntry, ConfigFlowResult, OptionsFlow
from homeassistant.core import callback
from homeassistant.helpers import config_entry_oauth2_flow
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
    MAX_REPORT_DAYS,
    MIN_UPDATE_INTERVAL,
    OAUTH_SCOPES,
)
from .errors import AuthorizationError, NoChannelFound, YouTubeDashboardError

_LOGGER = logging.getLogger(__name__)


class OAuth2FlowHandler(
    config_entry_oauth2_flow.AbstractOAuth2FlowHandler, domain=DOMAIN
):
    """Handle the user-present OAuth2 consent for YouTube Creator Dashboard."""

    DOMAIN = DOMAIN
    VERSION = 1

    @property
    def logger(self) -> logging.Logger:
        """Return logger."""
        return _LOGGER

    @property
    def extra_authorize_data(self) -> dict[str, Any]:
        """Request read-only scopes and an offline grant."""
        return {
            "scope": " ".join(OAUTH_SCOPES),
            "access_type": "offline",
            "prompt": "consent",
        }

    @staticmethod
    @callback
    def async_get_options_flow(config_entry: ConfigEntry) -> OptionsFlow:
        """Return the options flow."""
        return OptionsFlowHandler()

    async def async_step_reauth(self, entry_data: Mapping[str, Any]) -> ConfigFlowResult:
        """Perform reauth upon an API authentication error."""
        return await self.async_step_reauth_confirm()

    async def async_step_reauth_confirm(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Dialog that informs the user that reauth is required."""
        if user_input is None:
            return self.async_show_form(
                step_id="reauth_confirm",
                data_schema=vol.Schema({}),
            )
        return await self.async_step_user()

    async def async_oauth_create_entry(self, data: dict[str, Any]) -> ConfigFlowResult:
        """Create an entry for the signed-in channel, or update it on reauth."""
        # Import client modules inside function to avoid blocking import
        from .api import YouTubeDashboardAPI
        from .authorizer import CredentialsAuthorizer
        from .executor import RequestExecutor
        from .fetcher import AuthenticatedFetcher
        from .token_store import TokenStore

        token = data.get("token", {})
        refresh_token = token.get("refresh_token")
        if not refresh_token:
            _LOGGER.error("OAuth result has no refresh token")
            return self.async_abort(reason="oauth_failed")

        # Validate the grant with the token this consent produced
        token_store = TokenStore()
        token_store.set(token["access_token"])
        authorizer = CredentialsAuthorizer(
            self.hass,
            refresh_token=refresh_token,
            client_id=self.flow_impl.client_id,
            client_secret=self.flow_impl.client_secret,
        )
        fetcher = AuthenticatedFetcher(
            token_store, authorizer, RequestExecutor(async_get_clientsession(self.hass))
        )

        try:
            channel = await YouTubeDashboardAPI(fetcher).async_get_channel()
        except NoChannelFound:
            return self.async_abort(reason="channel_not_found")
        except AuthorizationError as err:
            _LOGGER.error("OAuth failed: %s", err)
            return self.async_abort(reason="oauth_failed")
        except YouTubeDashboardError as err:
            _LOGGER.error("Channel validation failed: %s", err)
            return self.async_abort(reason="channel_validation_failed")

        await self.async_set_unique_id(channel.id)

        if self.source == SOURCE_REAUTH:
            self._abort_if_unique_id_mismatch(reason="wrong_account")
            return self.async_update_reload_and_abort(
                self._get_reauth_entry(), data_updates={"token": token}
            )

        self._abort_if_unique_id_configured()

        data[CONF_CHANNEL_ID] = channel.id
        data[CONF_CHANNEL_TITLE] = channel.title
        return self.async_create_entry(title=channel.title, data=data)


class OptionsFlowHandler(OptionsFlow):
    """Handle YouTube Creator Dashboard options."""

    async def async_step_init(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Manage the options."""
        if user_input is not None:
            # Sensors use the currency as an ISO 4217 unit
            user_input[CONF_CURRENCY] = user_input.get(CONF_CURRENCY, "").strip().upper()
            return self.async_create_entry(data=user_input)

        options = self.config_entry.options
        data_schema = vol.Schema(
            {
                vol.Required(
                    CONF_UPDATE_INTERVAL,
                    default=options.get(CONF_UPDATE_INTERVAL, DEFAULT_UPDATE_INTERVAL),
                ): vol.All(vol.Coerce(int), vol.Range(min=MIN_UPDATE_INTERVAL)),
                vol.Required(
                    CONF_REPORT_DAYS,
                    default=options.get(CONF_REPORT_DAYS, DEFAULT_REPORT_DAYS),
                ): vol.All(vol.Coerce(int), vol.Range(min=1, max=MAX_REPORT_DAYS)),
                vol.Optional(
                    CONF_CURRENCY,
                    default=options.get(CONF_CURRENCY, DEFAULT_CURRENCY),
                ): str,
            }
        )
        return self.async_show_form(step_id="init", data_schema=data_schema)
