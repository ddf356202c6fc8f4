"""Authenticated fetch with a single reauthorization on 401."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from .authorizer import InteractiveAuthorizer
from .errors import AuthenticationExhausted, NetworkError, RemoteReportError
from .executor import ApiError, Ok, Outcome, RequestExecutor, TransportError, Unauthorized
from .token_store import TokenStore

_LOGGER = logging.getLogger(__name__)


class Attempt(Enum):
    """Request attempt within one fetch."""

    FIRST = "first"
    RETRY = "retry"


class AuthenticatedFetcher:
    """Ensure a token, request, and retry exactly once after a 401.

    This is the only entry point the query catalog uses. A fetch issues one
    request, or two when the first one is rejected with 401. A second 401 is
    never retried.
    """

    def __init__(
        self,
        token_store: TokenStore,
        authorizer: InteractiveAuthorizer,
        executor: RequestExecutor,
    ) -> None:
        """Initialize the fetcher."""
        self._token_store = token_store
        self._authorizer = authorizer
        self._executor = executor

    async def fetch(
        self, base_url: str, path: str, params: Mapping[str, str]
    ) -> Any:
        """Return the JSON payload of ``GET base_url + path``.

        Raises:
            AuthorizationDenied: If a token could not be obtained.
            AuthorizationFailed: If a token could not be obtained.
            AuthenticationExhausted: If the retried request is rejected too.
            RemoteReportError: If the API answered with another error.
            NetworkError: If the request could not be completed.
        """
        frozen_params = MappingProxyType(dict(params))

        token = self._token_store.read()
        if token is None:
            _LOGGER.debug("No access token yet, authorizing before %s", path)
            token = await self._reauthorize()

        outcome = await self._attempt(Attempt.FIRST, base_url, path, frozen_params, token)
        if isinstance(outcome, Unauthorized):
            _LOGGER.debug("Access token rejected for %s, reauthorizing once", path)
            token = await self._reauthorize()
            outcome = await self._attempt(Attempt.RETRY, base_url, path, frozen_params, token)

        return _unwrap(outcome, path)

    async def _reauthorize(self) -> str:
        """Obtain a new token and make it the current one."""
        token = await self._authorizer.authorize()
        self._token_store.set(token)
        return token

    async def _attempt(
        self,
        attempt: Attempt,
        base_url: str,
        path: str,
        params: Mapping[str, str],
        token: str,
    ) -> Outcome:
        _LOGGER.debug("%s attempt for %s", attempt.value, path)
        return await self._executor.execute(base_url, path, params, token)


def _unwrap(outcome: Outcome, path: str) -> Any:
    """Return the payload or raise the error matching the final outcome."""
    if isinstance(outcome, Ok):
        return outcome.payload
    if isinstance(outcome, Unauthorized):
        _LOGGER.error("Request to %s still unauthorized after reauthorization", path)
        raise AuthenticationExhausted(f"{path.strip('/')} rejected the refreshed token")
    if isinstance(outcome, ApiError):
        _LOGGER.error("YouTube API error %s for %s: %s", outcome.status, path, outcome.message)
        raise RemoteReportError(outcome.status, outcome.message)
    if isinstance(outcome, TransportError):
        _LOGGER.error("Network error for %s: %s", path, outcome.reason)
        raise NetworkError(outcome.reason)
    raise TypeError(f"Unexpected outcome: {outcome!r}")
