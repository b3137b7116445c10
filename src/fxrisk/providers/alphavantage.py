"""
Alpha Vantage API Client (Primary Provider)

API Documentation: https://www.alphavantage.co/documentation/#fx
"""

import logging
from datetime import date

from fxrisk.config import Settings, get_settings
from fxrisk.models import utcnow
from fxrisk.providers.base import BaseRateProvider

logger = logging.getLogger(__name__)


class AlphaVantageClient(BaseRateProvider):
    """
    Client for Alpha Vantage forex endpoints.

    Live response format:
        {"Realtime Currency Exchange Rate": {"5. Exchange Rate": "0.9210", ...}}
    Historical response format:
        {"Time Series FX (Daily)": {"2026-01-15": {"4. close": "0.9188", ...}}}

    Quota and error responses arrive with HTTP 200 and an "Error Message",
    "Note" or "Information" field instead of data.
    """

    PROVIDER_NAME = "alphavantage"
    LIVE_KEY = "Realtime Currency Exchange Rate"
    SERIES_KEY = "Time Series FX (Daily)"

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        super().__init__(timeout=self.settings.fetch_timeout_seconds)
        self.base_url = self.settings.alphavantage_base_url
        self.api_key = self.settings.alphavantage_api_key
        # (from, to) -> (UTC day downloaded, daily series)
        self._series: dict[tuple[str, str], tuple[date, dict]] = {}

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key) and self.api_key != "demo"

    def _check_api_errors(self, data: dict) -> None:
        if not isinstance(data, dict):
            raise self._error("Invalid response: expected JSON object", "PARSE_ERROR")
        if "Error Message" in data:
            raise self._error(
                f"Alpha Vantage API error: {data['Error Message']}", "API_ERROR"
            )
        for field in ("Note", "Information"):
            if field in data:
                raise self._error(
                    f"Alpha Vantage API limit: {data[field]}", "RATE_LIMIT"
                )

    async def fetch_rate(self, from_currency: str, to_currency: str) -> float:
        """
        Fetch a realtime rate via CURRENCY_EXCHANGE_RATE.

        Raises:
            RateProviderError: If API returns error, quota note or bad payload
        """
        if not self.is_configured:
            raise self._error(
                "Alpha Vantage API key not configured",
                "CONFIG_ERROR",
                hint="Set ALPHAVANTAGE_API_KEY environment variable",
            )

        data = await self._get_json(
            self.base_url,
            params={
                "function": "CURRENCY_EXCHANGE_RATE",
                "from_currency": from_currency,
                "to_currency": to_currency,
                "apikey": self.api_key,
            },
        )
        self._check_api_errors(data)

        payload = data.get(self.LIVE_KEY)
        if not isinstance(payload, dict):
            raise self._error(
                f"Invalid response: missing '{self.LIVE_KEY}' field", "PARSE_ERROR"
            )

        rate = self._to_rate(payload.get("5. Exchange Rate"))
        logger.info(f"Alpha Vantage fetched {from_currency}/{to_currency}={rate}")
        return rate

    async def fetch_historical_rate(
        self,
        from_currency: str,
        to_currency: str,
        day: date
    ) -> float:
        """
        Fetch a daily close via FX_DAILY.

        Markets close on weekends and holidays, so when the exact day is
        missing the closest earlier trading day is used.
        """
        if not self.is_configured:
            raise self._error("Alpha Vantage API key not configured", "CONFIG_ERROR")

        series = await self._daily_series(from_currency, to_currency)

        day_str = day.isoformat()
        if day_str not in series:
            earlier = sorted((d for d in series if d <= day_str), reverse=True)
            if not earlier:
                raise self._error(
                    f"No historical data available for {day_str} or earlier",
                    "NO_DATA",
                    date=day_str,
                )
            day_str = earlier[0]

        close = series[day_str]
        if not isinstance(close, dict):
            raise self._error(f"Invalid historical entry for {day_str}", "PARSE_ERROR")
        return self._to_rate(close.get("4. close"))

    async def _daily_series(self, from_currency: str, to_currency: str) -> dict:
        """
        The full FX_DAILY series for a pair, downloaded at most once per UTC day.

        Ranges resolve day by day; every day of a pair reads the same download.
        """
        today = utcnow().date()
        cached = self._series.get((from_currency, to_currency))
        if cached is not None and cached[0] == today:
            return cached[1]

        data = await self._get_json(
            self.base_url,
            params={
                "function": "FX_DAILY",
                "from_symbol": from_currency,
                "to_symbol": to_currency,
                "outputsize": "full",
                "apikey": self.api_key,
            },
        )
        self._check_api_errors(data)

        series = data.get(self.SERIES_KEY)
        if not isinstance(series, dict):
            raise self._error(
                "Invalid historical response format from Alpha Vantage API", "PARSE_ERROR"
            )

        self._series[(from_currency, to_currency)] = (today, series)
        logger.info(
            f"Alpha Vantage fetched {len(series)} daily closes for {from_currency}/{to_currency}"
        )
        return series

    async def health_check(self) -> bool:
        """Check that the API answers with a usable quote."""
        try:
            await self.fetch_rate("EUR", "USD")
            return True
        except Exception:
            return False
