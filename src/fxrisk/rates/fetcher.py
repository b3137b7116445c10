"""
Rate Fetcher - ordered tier pipeline

Default order:
    same currency -> fresh cache -> network (or mock) -> stale cache -> synthetic

The first tier that produces a rate wins. A tier that raises is logged
and skipped, so transient provider failures never reach the caller. Only
currency validation errors propagate.
"""

import logging

from fxrisk.cache import RateCache
from fxrisk.config import Settings, get_settings
from fxrisk.models import ExchangeRate
from fxrisk.providers.manager import ProviderManager
from fxrisk.rates.tiers import (
    FreshCacheTier,
    MockTier,
    NetworkTier,
    RateTier,
    SameCurrencyTier,
    StaleCacheTier,
    SyntheticFallbackTier,
)
from fxrisk.registry import validate_currency_code

logger = logging.getLogger(__name__)


def build_default_tiers(
    cache: RateCache,
    manager: ProviderManager,
    use_mock: bool = False,
) -> list[RateTier]:
    live: RateTier = MockTier() if use_mock else NetworkTier(manager, cache)
    return [
        SameCurrencyTier(),
        FreshCacheTier(cache),
        live,
        StaleCacheTier(cache),
        SyntheticFallbackTier(),
    ]


class RateFetcher:
    """
    Resolves live rates through an explicit list of tiers.

    Args:
        cache: Live-rate cache shared by the cache tiers.
        manager: Provider manager used by the network tier.
        settings: Used to decide between network and mock mode.
        tiers: Override the default tier order (mainly for tests).
    """

    def __init__(
        self,
        cache: RateCache,
        manager: ProviderManager,
        settings: Settings | None = None,
        tiers: list[RateTier] | None = None,
    ):
        self.settings = settings or get_settings()
        self.cache = cache
        self.manager = manager
        self.mock_mode = self.settings.use_mock_rates or not manager.has_configured_providers
        if self.mock_mode:
            logger.info("No rate provider configured - serving mock exchange rates")
        self.tiers = tiers if tiers is not None else build_default_tiers(
            cache, manager, use_mock=self.mock_mode
        )
        self._last_resort = SyntheticFallbackTier()

    async def fetch_live(self, from_currency: str, to_currency: str) -> ExchangeRate:
        """
        Resolve a usable rate for the pair.

        Raises:
            UnsupportedCurrencyError: If either code is not supported
        """
        from_currency = validate_currency_code(from_currency)
        to_currency = validate_currency_code(to_currency)

        for tier in self.tiers:
            try:
                result = await tier.resolve(from_currency, to_currency)
            except Exception as e:
                logger.warning(
                    f"Tier {tier.name} failed for {from_currency}/{to_currency}: {e}"
                )
                continue
            if result is not None:
                return result

        return await self._last_resort.resolve(from_currency, to_currency)

    async def fetch_many(self, pairs: list[tuple[str, str]]) -> list[ExchangeRate]:
        """Resolve several pairs, preserving input order."""
        return [await self.fetch_live(from_c, to_c) for from_c, to_c in pairs]
