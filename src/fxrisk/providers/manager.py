"""
Provider Manager with Fallback Hierarchy

Providers are tried in order (Alpha Vantage -> Frankfurter by default).
Live fetches retry each provider with backoff, but only on transient
errors (timeouts, network, malformed payloads, HTTP 5xx); historical
fetches make a single attempt per provider per day. Every attempt is
bounded by a timeout and recorded in an in-memory stats log.
"""

import asyncio
import logging
import time
from collections import deque
from datetime import date
from typing import Awaitable, Callable, Literal

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
    wait_fixed,
)

from fxrisk.config import Settings, get_settings
from fxrisk.models import ProviderStats
from fxrisk.providers.alphavantage import AlphaVantageClient
from fxrisk.providers.base import BaseRateProvider, RateProviderError
from fxrisk.providers.frankfurter import FrankfurterClient

logger = logging.getLogger(__name__)

FetchKind = Literal["live", "historical"]

TRANSIENT_ERRORS = frozenset({"TIMEOUT", "NETWORK", "PARSE_ERROR"})


def is_transient(error: BaseException) -> bool:
    """Only timeouts, network failures, bad payloads and HTTP 5xx are worth retrying."""
    if not isinstance(error, RateProviderError):
        return False
    if error.error_type in TRANSIENT_ERRORS:
        return True
    return error.error_type.startswith("HTTP_5")


def default_providers(settings: Settings) -> list[BaseRateProvider]:
    return [AlphaVantageClient(settings), FrankfurterClient(settings)]


class ProviderManager:
    """
    Manages the multi-provider fallback hierarchy.

    Args:
        providers: Ordered provider list (first is preferred).
        settings: Retry, backoff and timeout configuration.
        stats_size: Number of attempts kept in the stats log.
    """

    def __init__(
        self,
        providers: list[BaseRateProvider] | None = None,
        settings: Settings | None = None,
        stats_size: int = 500,
    ):
        self.settings = settings or get_settings()
        self.providers = (
            providers if providers is not None else default_providers(self.settings)
        )
        self.stats: deque[ProviderStats] = deque(maxlen=stats_size)

    @property
    def has_configured_providers(self) -> bool:
        return any(p.is_configured for p in self.providers)

    def _eligible(self, from_currency: str, to_currency: str) -> list[BaseRateProvider]:
        return [
            p for p in self.providers
            if p.is_configured and p.supports(from_currency, to_currency)
        ]

    def _wait_strategy(self):
        delay = self.settings.fetch_retry_delay_seconds
        if self.settings.fetch_retry_backoff == "fixed":
            return wait_fixed(delay)
        return wait_exponential(
            multiplier=delay,
            max=self.settings.fetch_retry_max_delay_seconds,
        )

    async def _attempt(
        self,
        provider: BaseRateProvider,
        call: Callable[[], Awaitable[float]],
        kind: FetchKind,
        pair: str,
    ) -> float:
        """One bounded attempt; any failure comes back as RateProviderError."""
        start_time = time.monotonic()
        try:
            rate = await asyncio.wait_for(call(), timeout=self.settings.fetch_timeout_seconds)
            # Providers validate, but a misbehaving adapter must not poison the cache
            rate = provider._to_rate(rate)
        except asyncio.TimeoutError as e:
            error = RateProviderError(
                message="Request timeout",
                provider=provider.PROVIDER_NAME,
                error_type="TIMEOUT",
                details={"timeout_seconds": self.settings.fetch_timeout_seconds},
            )
            self._record(provider, kind, pair, start_time, error)
            raise error from e
        except RateProviderError as e:
            self._record(provider, kind, pair, start_time, e)
            raise
        except Exception as e:
            error = RateProviderError(
                message=str(e),
                provider=provider.PROVIDER_NAME,
                error_type="UNKNOWN",
            )
            self._record(provider, kind, pair, start_time, error)
            raise error from e

        self._record(provider, kind, pair, start_time, None)
        return rate

    def _record(
        self,
        provider: BaseRateProvider,
        kind: FetchKind,
        pair: str,
        start_time: float,
        error: RateProviderError | None,
    ) -> None:
        latency_ms = int((time.monotonic() - start_time) * 1000)
        self.stats.append(ProviderStats(
            provider_name=provider.PROVIDER_NAME,
            kind=kind,
            pair=pair,
            success=error is None,
            latency_ms=latency_ms,
            error_type=error.error_type if error else None,
            error_message=str(error)[:500] if error else None,
        ))

    @staticmethod
    def _log_retry(retry_state: RetryCallState) -> None:
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        logger.warning(
            f"Exchange rate fetch attempt {retry_state.attempt_number} failed: {exc}"
        )

    async def _with_retry(
        self,
        provider: BaseRateProvider,
        from_currency: str,
        to_currency: str,
    ) -> float:
        pair = f"{from_currency}/{to_currency}"
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.settings.fetch_retry_attempts),
            wait=self._wait_strategy(),
            retry=retry_if_exception(is_transient),
            before_sleep=self._log_retry,
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                return await self._attempt(
                    provider,
                    lambda: provider.fetch_rate(from_currency, to_currency),
                    "live",
                    pair,
                )
        raise RuntimeError("unreachable: retry loop exited without result")

    async def fetch_live(self, from_currency: str, to_currency: str) -> tuple[float, str]:
        """
        Fetch a live rate, trying providers in order.

        Returns:
            Tuple of (rate, provider_name_used)

        Raises:
            RateProviderError: If all providers fail (error_type ALL_FAILED)
        """
        providers = self._eligible(from_currency, to_currency)
        errors: list[RateProviderError] = []

        for idx, provider in enumerate(providers, start=1):
            name = provider.PROVIDER_NAME
            logger.debug(f"Attempting {name} (provider {idx}/{len(providers)})")
            try:
                rate = await self._with_retry(provider, from_currency, to_currency)
                logger.info(f"✅ {name} {from_currency}/{to_currency}={rate}")
                return rate, name
            except RateProviderError as e:
                errors.append(e)
                logger.warning(f"❌ {name} failed for {from_currency}/{to_currency}: {e}")

        raise RateProviderError(
            message=(
                f"All providers failed for {from_currency}/{to_currency}. Errors: "
                f"{[(e.provider, e.error_type) for e in errors]}"
            ),
            provider="all",
            error_type="ALL_FAILED" if errors else "NO_PROVIDER",
            details={"errors": [(e.provider, e.error_type) for e in errors]},
        )

    async def fetch_historical(
        self,
        from_currency: str,
        to_currency: str,
        day: date,
    ) -> tuple[float, str]:
        """
        Fetch one day's close, one attempt per provider.

        Raises:
            RateProviderError: If all providers fail
        """
        pair = f"{from_currency}/{to_currency}@{day.isoformat()}"
        errors: list[RateProviderError] = []

        for provider in self._eligible(from_currency, to_currency):
            try:
                rate = await self._attempt(
                    provider,
                    lambda: provider.fetch_historical_rate(from_currency, to_currency, day),
                    "historical",
                    pair,
                )
                return rate, provider.PROVIDER_NAME
            except RateProviderError as e:
                errors.append(e)
                logger.warning(f"❌ {provider.PROVIDER_NAME} historical {pair} failed: {e}")

        raise RateProviderError(
            message=f"All providers failed for {pair}",
            provider="all",
            error_type="ALL_FAILED" if errors else "NO_PROVIDER",
            details={"errors": [(e.provider, e.error_type) for e in errors]},
        )

    async def health_check_all(self) -> dict[str, bool]:
        """Check health status of all configured providers."""
        results: dict[str, bool] = {}

        for provider in self.providers:
            if provider.is_configured:
                results[provider.PROVIDER_NAME] = await provider.health_check()
            else:
                results[provider.PROVIDER_NAME] = False

        return results
