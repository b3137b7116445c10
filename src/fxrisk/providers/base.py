"""
Base Rate Provider Interface

Every provider failure (HTTP status, timeout, malformed payload, API
quota note, missing configuration) is raised as RateProviderError so the
fallback chain can treat them identically.
"""

import math
from abc import ABC, abstractmethod
from datetime import date
from typing import Any

import httpx


class RateProviderError(Exception):
    """Base exception for rate provider errors."""

    def __init__(
        self,
        message: str,
        provider: str,
        error_type: str = "UNKNOWN",
        details: dict[str, Any] | None = None
    ):
        super().__init__(message)
        self.provider = provider
        self.error_type = error_type
        self.details = details or {}


class BaseRateProvider(ABC):
    """
    Abstract base class for exchange rate providers.

    Rates are returned as "units of to_currency per 1 from_currency".
    """

    PROVIDER_NAME: str = "base"

    def __init__(self, timeout: float = 10.0):
        self.timeout = timeout

    @property
    def is_configured(self) -> bool:
        """False when the provider cannot be called (e.g. missing API key)."""
        return True

    def supports(self, from_currency: str, to_currency: str) -> bool:
        return True

    @abstractmethod
    async def fetch_rate(self, from_currency: str, to_currency: str) -> float:
        """
        Fetch the latest rate for a currency pair.

        Raises:
            RateProviderError: If fetching fails
        """

    @abstractmethod
    async def fetch_historical_rate(
        self,
        from_currency: str,
        to_currency: str,
        day: date
    ) -> float:
        """
        Fetch the closing rate for a currency pair on a given day.

        Raises:
            RateProviderError: If fetching fails
        """

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if provider is reachable and responding."""

    def _error(self, message: str, error_type: str, **details: Any) -> RateProviderError:
        return RateProviderError(
            message=message,
            provider=self.PROVIDER_NAME,
            error_type=error_type,
            details=details,
        )

    def _to_rate(self, value: Any) -> float:
        """Parse a provider value into a positive, finite float."""
        try:
            rate = float(value)
        except (TypeError, ValueError) as e:
            raise self._error(
                f"Invalid exchange rate received: {value!r}", "PARSE_ERROR", value=value
            ) from e

        if not math.isfinite(rate) or rate <= 0:
            raise self._error(
                f"Invalid exchange rate received: {value!r}", "PARSE_ERROR", value=value
            )
        return rate

    async def _get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """
        GET a JSON document, translating transport errors.

        Raises:
            RateProviderError: HTTP_<status>, TIMEOUT, NETWORK or PARSE_ERROR
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
                return response.json()

        except httpx.HTTPStatusError as e:
            raise self._error(
                f"HTTP error: {e.response.status_code}",
                f"HTTP_{e.response.status_code}",
                url=str(e.request.url),
            ) from e

        except httpx.TimeoutException as e:
            raise self._error(
                "Request timeout", "TIMEOUT", timeout_seconds=self.timeout
            ) from e

        except httpx.HTTPError as e:
            raise self._error(str(e) or "Network error", "NETWORK") from e

        except ValueError as e:
            # response.json() on a non-JSON body
            raise self._error(f"Malformed JSON payload: {e}", "PARSE_ERROR") from e
