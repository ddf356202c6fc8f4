"""Access token acquisition for YouTube Creator Dashboard integration."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from google.auth.exceptions import RefreshError, TransportError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from homeassistant.core import HomeAssistant

from .const import OAUTH_SCOPES, OAUTH_TOKEN_URL
from .errors import AuthorizationDenied, AuthorizationFailed

_LOGGER = logging.getLogger(__name__)

# OAuth error codes meaning the user's consent is gone or was refused
DENIED_ERROR_CODES = frozenset(
    {"invalid_grant", "access_denied", "unauthorized_client", "invalid_scope"}
)


class InteractiveAuthorizer(ABC):
    """Obtain a fresh access token backed by the user's consent."""

    @abstractmethod
    async def authorize(self) -> str:
        """Return a fresh access token.

        Raises:
            AuthorizationDenied: If consent was declined or revoked.
            AuthorizationFailed: If no usable credential was returned.
        """


class CredentialsAuthorizer(InteractiveAuthorizer):
    """Exchange the offline grant from the consent flow for an access token.

    The user-present step is the OAuth2 config flow (and the reauth flow Home
    Assistant starts after :class:`AuthorizationDenied`). This class only
    redeems the refresh token that flow produced; it never stores the token.
    """

    def __init__(
        self,
        hass: HomeAssistant,
        refresh_token: str,
        client_id: str,
        client_secret: str,
    ) -> None:
        """Initialize the authorizer."""
        self.hass = hass
        self._refresh_token = refresh_token
        self._client_id = client_id
        self._client_secret = client_secret

    async def authorize(self) -> str:
        """Refresh credentials and return the new access token."""
        credentials = Credentials(
            token=None,
            refresh_token=self._refresh_token,
            token_uri=OAUTH_TOKEN_URL,
            client_id=self._client_id,
            client_secret=self._client_secret,
            scopes=OAUTH_SCOPES,
        )

        _LOGGER.debug("Requesting a fresh access token")
        try:
            await self.hass.async_add_executor_job(credentials.refresh, Request())
        except RefreshError as err:
            if _is_denied(err):
                _LOGGER.error("Access to the YouTube account was denied: %s", err)
                raise AuthorizationDenied(str(err)) from err
            _LOGGER.error("Failed to refresh access token: %s", err)
            raise AuthorizationFailed(str(err)) from err
        except TransportError as err:
            _LOGGER.error("Could not reach the token endpoint: %s", err)
            raise AuthorizationFailed(str(err)) from err

        if not credentials.token:
            _LOGGER.error("Token endpoint returned no access token")
            raise AuthorizationFailed("No access token received")

        _LOGGER.debug("Access token acquired")
        return credentials.token


def _is_denied(err: RefreshError) -> bool:
    """Return True if the refresh failure means consent is gone."""
    for arg in err.args[1:]:
        if isinstance(arg, dict) and arg.get("error") in DENIED_ERROR_CODES:
            return True
    message = str(err.args[0]) if err.args else ""
    return any(code in message for code in DENIED_ERROR_CODES)
