"""
Rate Resolution Tiers

Each tier either produces an ExchangeRate tagged with its source or
returns None to hand over to the next tier. Order is decided by the
RateFetcher; tiers know nothing about each other.
"""

import logging
from abc import ABC, abstractmethod

from fxrisk.cache import RateCache
from fxrisk.models import ExchangeRate, RateSource, utcnow
from fxrisk.providers.manager import ProviderManager
from fxrisk.providers.synthetic import synthetic_rate

logger = logging.getLogger(__name__)


class RateTier(ABC):
    """One stage of the fallback chain."""

    name: str = "tier"

    @abstractmethod
    async def resolve(self, from_currency: str, to_currency: str) -> ExchangeRate | None:
        """Return a rate, or None if this tier cannot answer."""


class SameCurrencyTier(RateTier):
    name = "same-currency"

    async def resolve(self, from_currency: str, to_currency: str) -> ExchangeRate | None:
        if from_currency != to_currency:
            return None
        return ExchangeRate(
            from_currency=from_currency,
            to_currency=to_currency,
            rate=1.0,
            source=RateSource.INTERNAL,
        )


class FreshCacheTier(RateTier):
    name = "fresh-cache"

    def __init__(self, cache: RateCache):
        self.cache = cache

    async def resolve(self, from_currency: str, to_currency: str) -> ExchangeRate | None:
        entry = self.cache.get_fresh(from_currency, to_currency)
        if entry is None:
            return None
        return entry.rate.model_copy(update={"source": RateSource.CACHE})


class NetworkTier(RateTier):
    """Live providers; successful results are written to the cache."""

    name = "network"

    def __init__(self, manager: ProviderManager, cache: RateCache):
        self.manager = manager
        self.cache = cache

    async def resolve(self, from_currency: str, to_currency: str) -> ExchangeRate | None:
        rate, provider = await self.manager.fetch_live(from_currency, to_currency)
        entry = self.cache.put(from_currency, to_currency, rate, RateSource.API)
        logger.debug(f"{from_currency}/{to_currency} served by {provider}")
        return entry.rate


class MockTier(RateTier):
    """Stands in for the network when no provider is configured."""

    name = "mock"

    async def resolve(self, from_currency: str, to_currency: str) -> ExchangeRate | None:
        logger.info(f"Using mock exchange rate for {from_currency} to {to_currency}")
        return ExchangeRate(
            from_currency=from_currency,
            to_currency=to_currency,
            rate=synthetic_rate(from_currency, to_currency),
            source=RateSource.MOCK,
        )


class StaleCacheTier(RateTier):
    """Expired entry, returned as-is; the cache is not touched."""

    name = "stale-cache"

    def __init__(self, cache: RateCache):
        self.cache = cache

    async def resolve(self, from_currency: str, to_currency: str) -> ExchangeRate | None:
        entry = self.cache.get(from_currency, to_currency)
        if entry is None:
            return None
        logger.warning(f"Using stale exchange rate for {from_currency}-{to_currency}")
        return entry.rate.model_copy(update={"source": RateSource.STALE_CACHE})


class SyntheticFallbackTier(RateTier):
    """Last resort. Always answers and never writes to the cache."""

    name = "fallback"

    async def resolve(self, from_currency: str, to_currency: str) -> ExchangeRate:
        rate = synthetic_rate(from_currency, to_currency)
        logger.error(
            f"Failed to fetch exchange rate for {from_currency}-{to_currency}, "
            f"using fallback rate {rate}"
        )
        return ExchangeRate(
            from_currency=from_currency,
            to_currency=to_currency,
            rate=rate,
            timestamp=utcnow(),
            source=RateSource.FALLBACK,
        )
