"""Pytest configuration and fixtures."""

import asyncio
from datetime import date, datetime, timedelta, timezone

import pytest

from fxrisk.cache import RateCache
from fxrisk.config import Settings
from fxrisk.providers.base import BaseRateProvider, RateProviderError


class FakeProvider(BaseRateProvider):
    """
    In-process rate provider.

    rates maps (from, to) to a rate; a missing pair raises NO_DATA.
    fail_days makes historical lookups fail for the listed dates.
    """

    def __init__(
        self,
        name: str = "fake",
        rates: dict[tuple[str, str], float] | None = None,
        fail: bool = False,
        error_type: str = "HTTP_503",
        hang: bool = False,
        fail_days: set[date] | None = None,
        configured: bool = True,
    ):
        super().__init__(timeout=1.0)
        self.PROVIDER_NAME = name
        self.rates = rates or {}
        self.fail = fail
        self.error_type = error_type
        self.hang = hang
        self.fail_days = fail_days or set()
        self.configured = configured
        self.live_calls = 0
        self.historical_calls = 0

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def _lookup(self, from_currency: str, to_currency: str) -> float:
        if self.hang:
            await asyncio.sleep(60)
        if self.fail:
            raise self._error("provider down", self.error_type)
        if (from_currency, to_currency) not in self.rates:
            raise self._error(f"no rate for {from_currency}/{to_currency}", "NO_DATA")
        return self.rates[(from_currency, to_currency)]

    async def fetch_rate(self, from_currency: str, to_currency: str) -> float:
        self.live_calls += 1
        return await self._lookup(from_currency, to_currency)

    async def fetch_historical_rate(self, from_currency: str, to_currency: str, day: date) -> float:
        self.historical_calls += 1
        if day in self.fail_days:
            raise RateProviderError("no close for day", self.PROVIDER_NAME, "NO_DATA")
        return await self._lookup(from_currency, to_currency)

    async def health_check(self) -> bool:
        return not self.fail


class MutableClock:
    """Settable clock for cache expiry tests."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def settings():
    """Fast retries, short timeout, no real network providers."""
    return Settings(
        _env_file=None,
        alphavantage_api_key="",
        frankfurter_enabled=False,
        use_mock_rates=False,
        fetch_retry_attempts=2,
        fetch_retry_delay_seconds=0,
        fetch_retry_max_delay_seconds=0,
        fetch_retry_backoff="fixed",
        fetch_timeout_seconds=0.2,
        rate_cache_ttl_seconds=900,
    )


@pytest.fixture
def clock():
    return MutableClock()


@pytest.fixture
def cache(clock):
    return RateCache(ttl_seconds=900, clock=clock)
