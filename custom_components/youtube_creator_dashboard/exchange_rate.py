"""USD exchange rate lookup for revenue display."""

from __future__ import annotations

import logging

import aiohttp

from .const import EXCHANGE_RATE_URL, REVENUE_CURRENCY
from .models import ExchangeRate

_LOGGER = logging.getLogger(__name__)


async def async_get_exchange_rate(
    session: aiohttp.ClientSession, currency: str
) -> ExchangeRate | None:
    """Return the latest USD rate for ``currency``, or None if unavailable.

    Raises:
        aiohttp.ClientError: If the request could not be completed.
    """
    currency = currency.upper()
    async with session.get(
        EXCHANGE_RATE_URL, params={"from": REVENUE_CURRENCY, "to": currency}
    ) as response:
        if not response.ok:
            _LOGGER.warning(
                "Exchange rate lookup for %s failed with status %s", currency, response.status
            )
            return None
        try:
            data = await response.json(content_type=None)
        except ValueError as err:
            _LOGGER.warning("Exchange rate response for %s is not JSON: %s", currency, err)
            return None

    if not isinstance(data, dict):
        _LOGGER.warning("Exchange rate response for %s is not an object", currency)
        return None

    rates = data.get("rates")
    rate = rates.get(currency) if isinstance(rates, dict) else None
    try:
        value = float(rate)
    except (TypeError, ValueError):
        _LOGGER.warning("Exchange rate response has no rate for %s", currency)
        return None
    return ExchangeRate(rate=value, date=str(data.get("date", "")))
