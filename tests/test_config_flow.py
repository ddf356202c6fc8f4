"""Tests for the OAuth2 config flow and options flow."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from homeassistant.config_entries import SOURCE_REAUTH, SOURCE_USER

from custom_components.youtube_creator_dashboard.config_flow import (
    OAuth2FlowHandler,
    OptionsFlowHandler,
)
from custom_components.youtube_creator_dashboard.errors import (
    AuthorizationDenied,
    NetworkError,
    NoChannelFound,
    RemoteReportError,
)
from custom_components.youtube_creator_dashboard.models import ChannelStats

PACKAGE = "custom_components.youtube_creator_dashboard"
CHANNEL = ChannelStats(
    id="UC1234567890abcdefghijkl",
    title="Test Channel",
    thumbnail="",
    subscriber_count=1500,
    view_count=250000,
    video_count=3,
)
TOKEN = {"access_token": "access", "refresh_token": "refresh_token_value", "expires_in": 3599}


def build_flow(hass, source=SOURCE_USER):
    """Return a flow with the flow manager's helpers replaced by mocks."""
    flow = OAuth2FlowHandler()
    flow.hass = hass
    flow.context = {"source": source}
    flow.flow_impl = MagicMock(client_id="client-id", client_secret="client-secret")
    flow.async_abort = MagicMock(side_effect=lambda reason: {"type": "abort", "reason": reason})
    flow.async_create_entry = MagicMock(
        side_effect=lambda title, data: {"type": "create_entry", "title": title, "data": data}
    )
    flow.async_set_unique_id = AsyncMock()
    flow._abort_if_unique_id_configured = MagicMock()
    flow._abort_if_unique_id_mismatch = MagicMock()
    flow._get_reauth_entry = MagicMock()
    flow.async_update_reload_and_abort = MagicMock(return_value={"type": "abort"})
    return flow


@pytest.fixture
def mock_api_cls():
    """Patch the query catalog the flow validates the grant with."""
    with patch(f"{PACKAGE}.config_flow.async_get_clientsession"), patch(
        f"{PACKAGE}.api.YouTubeDashboardAPI"
    ) as api_cls:
        api_cls.return_value.async_get_channel = AsyncMock(return_value=CHANNEL)
        yield api_cls


@pytest.mark.asyncio
async def test_creates_entry_for_channel(mock_hass, mock_api_cls):
    flow = build_flow(mock_hass)

    result = await flow.async_oauth_create_entry({"token": dict(TOKEN)})

    assert result["type"] == "create_entry"
    assert result["title"] == "Test Channel"
    assert result["data"]["channel_id"] == CHANNEL.id
    assert result["data"]["channel_title"] == "Test Channel"
    assert result["data"]["token"] == TOKEN
    flow.async_set_unique_id.assert_awaited_once_with(CHANNEL.id)
    flow._abort_if_unique_id_configured.assert_called_once()


@pytest.mark.asyncio
async def test_validation_uses_consent_access_token(mock_hass, mock_api_cls):
    flow = build_flow(mock_hass)

    await flow.async_oauth_create_entry({"token": dict(TOKEN)})

    fetcher = mock_api_cls.call_args.args[0]
    assert fetcher._token_store.read() == "access"


@pytest.mark.asyncio
async def test_missing_refresh_token_aborts(mock_hass, mock_api_cls):
    flow = build_flow(mock_hass)

    result = await flow.async_oauth_create_entry({"token": {"access_token": "access"}})

    assert result == {"type": "abort", "reason": "oauth_failed"}
    mock_api_cls.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error,reason",
    [
        (NoChannelFound("none"), "channel_not_found"),
        (AuthorizationDenied("invalid_grant"), "oauth_failed"),
        (RemoteReportError(403, "Access forbidden"), "channel_validation_failed"),
        (NetworkError("offline"), "channel_validation_failed"),
    ],
)
async def test_validation_errors_abort(mock_hass, mock_api_cls, error, reason):
    mock_api_cls.return_value.async_get_channel.side_effect = error
    flow = build_flow(mock_hass)

    result = await flow.async_oauth_create_entry({"token": dict(TOKEN)})

    assert result == {"type": "abort", "reason": reason}
    flow.async_set_unique_id.assert_not_awaited()


@pytest.mark.asyncio
async def test_reauth_updates_token(mock_hass, mock_api_cls):
    flow = build_flow(mock_hass, source=SOURCE_REAUTH)

    await flow.async_oauth_create_entry({"token": dict(TOKEN)})

    flow._abort_if_unique_id_mismatch.assert_called_once_with(reason="wrong_account")
    flow.async_update_reload_and_abort.assert_called_once_with(
        flow._get_reauth_entry.return_value, data_updates={"token": TOKEN}
    )
    flow.async_create_entry.assert_not_called()


def test_extra_authorize_data_requests_offline_read_only_access():
    data = OAuth2FlowHandler().extra_authorize_data

    assert data["access_type"] == "offline"
    assert data["prompt"] == "consent"
    assert all(scope.endswith(".readonly") for scope in data["scope"].split())


@pytest.mark.asyncio
@pytest.mark.parametrize("currency,expected", [(" sek ", "SEK"), ("", "")])
async def test_options_normalize_currency(currency, expected):
    flow = OptionsFlowHandler()
    flow.async_create_entry = MagicMock()

    await flow.async_step_init(
        {"update_interval": 3600, "report_days": 28, "currency": currency}
    )

    data = flow.async_create_entry.call_args.kwargs["data"]
    assert data["currency"] == expected


def test_client_modules_are_imported_on_demand():
    from custom_components.youtube_creator_dashboard import config_flow

    for name in ("CredentialsAuthorizer", "YouTubeDashboardAPI", "AuthenticatedFetcher"):
        assert not hasattr(config_flow, name)
