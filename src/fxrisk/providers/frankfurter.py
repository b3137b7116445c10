"""
Frankfurter API Client (Secondary Provider)

Free ECB reference rates, no API key.
API Documentation: https://www.frankfurter.app/docs/
"""

import logging
from datetime import date

from fxrisk.config import Settings, get_settings
from fxrisk.providers.base import BaseRateProvider

logger = logging.getLogger(__name__)


class FrankfurterClient(BaseRateProvider):
    """
    Client for Frankfurter.dev exchange rates.

    Response format: {"amount": 1.0, "base": "USD", "date": "2026-01-15", "rates": {"EUR": 0.921}}
    For a non-trading day the API answers with the previous trading day.
    """

    PROVIDER_NAME = "frankfurter"

    # Currencies published by the ECB reference rate set
    ECB_CURRENCIES = frozenset({
        "AUD", "BGN", "BRL", "CAD", "CHF", "CNY", "CZK", "DKK", "EUR", "GBP",
        "HKD", "HUF", "IDR", "ILS", "INR", "ISK", "JPY", "KRW", "MXN", "MYR",
        "NOK", "NZD", "PHP", "PLN", "RON", "SEK", "SGD", "THB", "TRY", "USD",
        "ZAR",
    })

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        super().__init__(timeout=self.settings.fetch_timeout_seconds)
        self.base_url = self.settings.frankfurter_base_url

    @property
    def is_configured(self) -> bool:
        return self.settings.frankfurter_enabled

    def supports(self, from_currency: str, to_currency: str) -> bool:
        return from_currency in self.ECB_CURRENCIES and to_currency in self.ECB_CURRENCIES

    async def _fetch(self, path: str, from_currency: str, to_currency: str) -> float:
        if not self.supports(from_currency, to_currency):
            raise self._error(
                f"Pair {from_currency}/{to_currency} not published by ECB",
                "UNSUPPORTED_PAIR",
            )

        data = await self._get_json(
            f"{self.base_url}/v1/{path}",
            params={"base": from_currency, "symbols": to_currency},
        )

        if not isinstance(data, dict) or not isinstance(data.get("rates"), dict):
            raise self._error("Invalid response: missing 'rates' field", "PARSE_ERROR")

        if to_currency not in data["rates"]:
            raise self._error(
                f"Missing currency {to_currency} in response",
                "MISSING_CURRENCY",
                available=list(data["rates"].keys()),
            )

        rate = self._to_rate(data["rates"][to_currency])
        logger.info(
            f"Frankfurter fetched {from_currency}/{to_currency}={rate} "
            f"(date: {data.get('date')})"
        )
        return rate

    async def fetch_rate(self, from_currency: str, to_currency: str) -> float:
        return await self._fetch("latest", from_currency, to_currency)

    async def fetch_historical_rate(
        self,
        from_currency: str,
        to_currency: str,
        day: date
    ) -> float:
        return await self._fetch(day.isoformat(), from_currency, to_currency)

    async def health_check(self) -> bool:
        """Check if Frankfurter API is reachable."""
        try:
            await self._get_json(f"{self.base_url}/v1/latest")
            return True
        except Exception:
            return False
