"""
Rate Cache

In-memory, time-bounded store of (from, to) -> rate entries.

Expired entries are never removed on read: they stay available as a
stale fallback until invalidate_all() is called. (A, B) and (B, A) are
independent keys; no reciprocal is derived.
"""

import logging
from collections import OrderedDict
from datetime import date, datetime, timedelta
from typing import Callable

from fxrisk.models import (
    CacheEntry,
    CacheStatus,
    ExchangeRate,
    HistoricalExchangeRate,
    RateSource,
    utcnow,
)
from fxrisk.registry import normalize_currency_code

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class RateCache:
    """
    Live-rate cache owned by one service instance.

    Args:
        ttl_seconds: Freshness window measured from the entry timestamp.
        clock: Returns the current aware datetime (injectable for tests).
    """

    def __init__(self, ttl_seconds: int = 15 * 60, clock: Clock = utcnow):
        self.ttl = timedelta(seconds=ttl_seconds)
        self.clock = clock
        self._entries: dict[tuple[str, str], CacheEntry] = {}
        self._last_updated: datetime = clock()

    @staticmethod
    def _key(from_currency: str, to_currency: str) -> tuple[str, str]:
        return normalize_currency_code(from_currency), normalize_currency_code(to_currency)

    def get(self, from_currency: str, to_currency: str) -> CacheEntry | None:
        """Return the entry for the pair whether fresh or stale."""
        return self._entries.get(self._key(from_currency, to_currency))

    def get_fresh(self, from_currency: str, to_currency: str) -> CacheEntry | None:
        entry = self.get(from_currency, to_currency)
        if entry is not None and entry.is_fresh(self.clock()):
            return entry
        return None

    def put(
        self,
        from_currency: str,
        to_currency: str,
        rate: float,
        source: RateSource = RateSource.API,
    ) -> CacheEntry:
        """Store a new entry for the pair, superseding any previous one."""
        now = self.clock()
        key = self._key(from_currency, to_currency)
        entry = CacheEntry(
            rate=ExchangeRate(
                from_currency=key[0],
                to_currency=key[1],
                rate=rate,
                timestamp=now,
                source=source,
            ),
            expires_at=now + self.ttl,
        )
        self._entries[key] = entry
        self._last_updated = now
        logger.debug(f"Cached {key[0]}/{key[1]}={rate} ({source.value})")
        return entry

    def invalidate_all(self) -> None:
        count = len(self._entries)
        self._entries.clear()
        self._last_updated = self.clock()
        logger.info(f"Rate cache cleared ({count} entries) - fresh rates will be fetched")

    def status(self) -> CacheStatus:
        return CacheStatus(
            last_updated=self._last_updated,
            next_update=self._last_updated + self.ttl,
            entries=len(self._entries),
        )

    def __len__(self) -> int:
        return len(self._entries)


class HistoricalRateStore:
    """
    Date-keyed store for historical closes.

    No expiry: a past day's rate does not change once published. Holds at
    most max_entries rates, evicting the least recently used.
    """

    def __init__(self, max_entries: int = 20_000):
        self.max_entries = max_entries
        self._rates: OrderedDict[tuple[str, str, date], HistoricalExchangeRate] = OrderedDict()

    def get(self, from_currency: str, to_currency: str, day: date) -> HistoricalExchangeRate | None:
        key = (from_currency, to_currency, day)
        rate = self._rates.get(key)
        if rate is not None:
            self._rates.move_to_end(key)
        return rate

    def put(self, rate: HistoricalExchangeRate) -> None:
        key = (rate.from_currency, rate.to_currency, rate.date)
        self._rates[key] = rate
        self._rates.move_to_end(key)
        while len(self._rates) > self.max_entries:
            self._rates.popitem(last=False)

    def clear(self) -> None:
        self._rates.clear()

    def __len__(self) -> int:
        return len(self._rates)
