"""Error types for YouTube Creator Dashboard integration.

Every failure the analytics client can surface derives from
:class:`YouTubeDashboardError`. Views only need :attr:`user_message`::

    try:
        report = await api.async_get_revenue_report(start, end)
    except YouTubeDashboardError as err:
        show(err.user_message)
"""

from __future__ import annotations

from homeassistant.exceptions import HomeAssistantError


class YouTubeDashboardError(HomeAssistantError):
    """Base for all YouTube Creator Dashboard errors."""

    user_message = "Something went wrong while loading YouTube data."


class AuthorizationError(YouTubeDashboardError):
    """Obtaining an access token failed."""


class AuthorizationDenied(AuthorizationError):
    """The user or the provider declined consent (grant revoked or refused)."""

    user_message = "Sign-in required. Please authorize access to your YouTube account."


class AuthorizationFailed(AuthorizationError):
    """The provider returned no usable credential."""

    user_message = "Sign-in failed. Please try again."


class AuthenticationExhausted(YouTubeDashboardError):
    """A 401 persisted through the single allowed reauthorization."""

    user_message = "Your session has expired. Please sign in again."


class RemoteReportError(YouTubeDashboardError):
    """The API answered with a non-401 error."""

    def __init__(self, status: int, message: str) -> None:
        """Initialize with the HTTP status and the upstream message."""
        super().__init__(message)
        self.status = status
        self.message = message

    @property
    def user_message(self) -> str:  # type: ignore[override]
        """Return the upstream message."""
        return self.message


class NetworkError(YouTubeDashboardError):
    """The request could not be completed at all."""

    user_message = "Could not reach YouTube. Please check your connection."


class MalformedReport(YouTubeDashboardError):
    """An analytics payload violated the columnar shape."""

    user_message = "YouTube returned a report that could not be read."


class NoUploadsCollection(YouTubeDashboardError):
    """The channel has no resolvable uploads playlist."""

    user_message = "No uploads found for this channel."


class NoChannelFound(YouTubeDashboardError):
    """The signed-in account has no YouTube channel."""

    user_message = "No YouTube channel found for this account."
