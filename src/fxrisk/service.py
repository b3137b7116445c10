"""
Currency Service - inbound facade

The single entry point collaborators (income, expense, investment and
loan features, the HTTP API) call into. Each instance owns its cache,
providers and analyzer; nothing is shared through module globals.
"""

import logging
from datetime import date, datetime
from typing import Iterable

from fxrisk import registry
from fxrisk.analysis import CurrencyRiskAnalyzer, RiskPolicy
from fxrisk.cache import HistoricalRateStore, RateCache
from fxrisk.config import Settings, get_settings
from fxrisk.formatting import LocaleFormatter
from fxrisk.models import (
    CacheStatus,
    ConversionRequest,
    Currency,
    CurrencyAmount,
    CurrencyExposure,
    CurrencyRiskAnalysis,
    ExchangeRate,
    ExposureItem,
    HistoricalExchangeRate,
)
from fxrisk.providers import BaseRateProvider, ProviderManager
from fxrisk.rates import Converter, HistoricalRateService, RateFetcher

logger = logging.getLogger(__name__)


class CurrencyService:
    """
    Conversion, historical rates, exposure analysis and formatting.

    Args:
        settings: Configuration (defaults to environment settings).
        providers: Ordered rate providers (defaults to Alpha Vantage, Frankfurter).
        cache: Live-rate cache (a fresh one per service by default).
    """

    def __init__(
        self,
        settings: Settings | None = None,
        providers: list[BaseRateProvider] | None = None,
        cache: RateCache | None = None,
    ):
        self.settings = settings or get_settings()
        self.cache = cache or RateCache(ttl_seconds=self.settings.rate_cache_ttl_seconds)
        self.manager = ProviderManager(providers, self.settings)
        self.fetcher = RateFetcher(self.cache, self.manager, self.settings)
        self.converter = Converter(self.fetcher)
        self.historical = HistoricalRateService(
            self.manager,
            HistoricalRateStore(self.settings.historical_store_max_entries),
            mock_mode=self.fetcher.mock_mode,
        )
        self.analyzer = CurrencyRiskAnalyzer(
            self.converter,
            RiskPolicy.from_settings(self.settings),
            reporting_currency=self.settings.reporting_currency,
        )
        self.formatter = LocaleFormatter()

    # === Exchange rates ===

    async def get_rate(self, from_currency: str, to_currency: str) -> ExchangeRate:
        return await self.fetcher.fetch_live(from_currency, to_currency)

    async def get_rates(self, pairs: list[tuple[str, str]]) -> list[ExchangeRate]:
        return await self.fetcher.fetch_many(pairs)

    async def get_historical_rates(
        self,
        from_currency: str,
        to_currency: str,
        start_date: date | datetime,
        end_date: date | datetime,
    ) -> list[HistoricalExchangeRate]:
        return await self.historical.get_range(from_currency, to_currency, start_date, end_date)

    # === Conversion ===

    async def convert(self, amount: float, from_currency: str, to_currency: str) -> CurrencyAmount:
        return await self.converter.convert(amount, from_currency, to_currency)

    async def convert_batch(
        self,
        requests: list[ConversionRequest | tuple[float, str, str]],
    ) -> list[CurrencyAmount]:
        return await self.converter.convert_batch(requests)

    # === Exposure & risk ===

    async def calculate_exposure(
        self,
        items: Iterable[ExposureItem],
        reporting_currency: str | None = None,
    ) -> list[CurrencyExposure]:
        return await self.analyzer.calculate_exposure(items, reporting_currency)

    async def analyze_currency_risk(
        self,
        items: Iterable[ExposureItem],
        reporting_currency: str | None = None,
    ) -> CurrencyRiskAnalysis:
        return await self.analyzer.analyze(items, reporting_currency)

    # === Formatting ===

    def format(self, amount: float, currency: str, locale: str | None = None) -> str:
        return self.formatter.format(amount, currency, locale)

    def format_with_conversion(
        self,
        amount: CurrencyAmount,
        target_currency: str,
        locale: str | None = None,
    ) -> str:
        return self.formatter.format_with_conversion(amount, target_currency, locale)

    # === Currency information ===

    def get_supported_currencies(self) -> list[Currency]:
        return registry.get_supported_currencies()

    def get_currency_info(self, code: str) -> Currency:
        return registry.get_currency_info(code)

    def is_valid_currency_code(self, code: str) -> bool:
        return registry.is_valid_currency_code(code)

    def detect_currency_from_location(self, country_code: str) -> str:
        return registry.detect_currency_from_location(country_code)

    def detect_currency_from_market(self, symbol: str) -> str:
        return registry.detect_currency_from_market(symbol)

    # === Cache management ===

    def refresh_rates(self) -> CacheStatus:
        """Drop every cached live rate so the next lookups go to providers."""
        self.cache.invalidate_all()
        return self.cache.status()

    def get_cache_status(self) -> CacheStatus:
        return self.cache.status()

    async def health_check(self) -> dict[str, bool]:
        return await self.manager.health_check_all()
