"""Single authenticated GET request against a YouTube REST endpoint."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

import aiohttp

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ok:
    """2xx response with a JSON body."""

    payload: Any


@dataclass(frozen=True)
class Unauthorized:
    """HTTP 401: the bearer token is no longer accepted."""


@dataclass(frozen=True)
class ApiError:
    """Any other non-2xx response."""

    status: int
    message: str


@dataclass(frozen=True)
class TransportError:
    """The request could not be completed."""

    reason: str


Outcome = Ok | Unauthorized | ApiError | TransportError


class RequestExecutor:
    """Perform exactly one GET per call and classify the result."""

    def __init__(self, session: aiohttp.ClientSession) -> None:
        """Initialize with the shared client session."""
        self._session = session

    async def execute(
        self,
        base_url: str,
        path: str,
        params: Mapping[str, str],
        token: str,
    ) -> Outcome:
        """Request ``base_url + path`` with ``params`` as the query string."""
        url = f"{base_url}{path}"
        headers = {"Authorization": f"Bearer {token}"}
        endpoint = path.strip("/") or base_url

        _LOGGER.debug("GET %s", url)
        try:
            async with self._session.get(
                url, params=dict(params), headers=headers
            ) as response:
                if response.status == HTTPStatus.UNAUTHORIZED:
                    _LOGGER.debug("%s returned 401", endpoint)
                    return Unauthorized()

                if not 200 <= response.status < 300:
                    message = await _error_message(response, endpoint)
                    _LOGGER.debug("%s returned %s: %s", endpoint, response.status, message)
                    return ApiError(response.status, message)

                try:
                    payload = await response.json(content_type=None)
                except ValueError:
                    _LOGGER.debug("%s returned a body that is not JSON", endpoint)
                    return ApiError(response.status, f"{endpoint} error: {response.status}")
                # Every YouTube endpoint answers with a JSON object
                if not isinstance(payload, dict):
                    _LOGGER.debug("%s returned a body that is not a JSON object", endpoint)
                    return ApiError(response.status, f"{endpoint} error: {response.status}")
                return Ok(payload)
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            _LOGGER.debug("Request to %s failed: %s", endpoint, err)
            return TransportError(str(err) or type(err).__name__)


async def _error_message(response: aiohttp.ClientResponse, endpoint: str) -> str:
    """Extract ``error.message`` from an error body, else a generic message."""
    try:
        body = await response.json(content_type=None)
    except (ValueError, aiohttp.ClientError):
        body = None

    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            message = error.get("message")
            if isinstance(message, str) and message:
                return message

    return f"{endpoint} error: {response.status}"
