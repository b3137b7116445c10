"""
Historical Rate Service

One entry per calendar day, both endpoints inclusive, ascending. Each
day is resolved on its own:

    date-keyed store -> provider historical endpoint -> synthetic day rate

so a failing day degrades to a synthetic rate instead of aborting the
range. Synthetic days are tagged "mock" in mock mode and "fallback"
after a provider failure; they are never stored.
"""

import logging
from datetime import date, datetime, timedelta

from fxrisk.cache import HistoricalRateStore
from fxrisk.models import HistoricalExchangeRate, RateSource, utcnow
from fxrisk.providers.base import RateProviderError
from fxrisk.providers.manager import ProviderManager
from fxrisk.providers.synthetic import synthetic_historical_rate
from fxrisk.registry import validate_currency_code

logger = logging.getLogger(__name__)


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def iter_days(start: date, end: date):
    """Yield every day from start to end inclusive (nothing if end < start)."""
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)


class HistoricalRateService:

    def __init__(
        self,
        manager: ProviderManager,
        store: HistoricalRateStore | None = None,
        mock_mode: bool = False,
    ):
        self.manager = manager
        self.store = store if store is not None else HistoricalRateStore()
        self.mock_mode = mock_mode

    async def get_range(
        self,
        from_currency: str,
        to_currency: str,
        start_date: date | datetime,
        end_date: date | datetime,
    ) -> list[HistoricalExchangeRate]:
        """
        Daily rates for the pair over [start_date, end_date].

        Returns:
            (end - start).days + 1 entries in ascending date order, or [] if
            end_date < start_date.

        Raises:
            UnsupportedCurrencyError: If either code is not supported
        """
        from_currency = validate_currency_code(from_currency)
        to_currency = validate_currency_code(to_currency)
        start, end = _as_date(start_date), _as_date(end_date)

        if end < start:
            return []

        rates = [
            await self._resolve_day(from_currency, to_currency, day)
            for day in iter_days(start, end)
        ]

        degraded = sum(1 for r in rates if r.source == RateSource.FALLBACK)
        if degraded:
            logger.warning(
                f"Historical {from_currency}/{to_currency} {start}..{end}: "
                f"{degraded}/{len(rates)} days served by fallback rates"
            )
        return rates

    async def _resolve_day(
        self,
        from_currency: str,
        to_currency: str,
        day: date,
    ) -> HistoricalExchangeRate:
        if from_currency == to_currency:
            return self._make(from_currency, to_currency, day, 1.0, RateSource.INTERNAL)

        stored = self.store.get(from_currency, to_currency, day)
        if stored is not None:
            return stored

        if self.mock_mode:
            rate = synthetic_historical_rate(from_currency, to_currency, day)
            return self._make(from_currency, to_currency, day, rate, RateSource.MOCK)

        try:
            rate, _provider = await self.manager.fetch_historical(from_currency, to_currency, day)
        except RateProviderError as e:
            logger.debug(f"Historical rate {from_currency}/{to_currency}@{day} unavailable: {e}")
            rate = synthetic_historical_rate(from_currency, to_currency, day)
            return self._make(from_currency, to_currency, day, rate, RateSource.FALLBACK)

        result = self._make(from_currency, to_currency, day, rate, RateSource.HISTORICAL_API)
        self.store.put(result)
        return result

    @staticmethod
    def _make(
        from_currency: str,
        to_currency: str,
        day: date,
        rate: float,
        source: RateSource,
    ) -> HistoricalExchangeRate:
        return HistoricalExchangeRate(
            from_currency=from_currency,
            to_currency=to_currency,
            rate=rate,
            timestamp=utcnow(),
            source=source,
            date=day,
        )
