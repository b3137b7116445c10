"""
Rate Cache Tests
"""

from datetime import date

from fxrisk.cache import HistoricalRateStore
from fxrisk.models import HistoricalExchangeRate, RateSource


class TestRateCache:
    """Freshness, staleness and invalidation."""

    def test_put_then_get_fresh(self, cache):
        cache.put("EUR", "USD", 1.08)
        entry = cache.get_fresh("EUR", "USD")
        assert entry is not None
        assert entry.rate.rate == 1.08
        assert entry.rate.source == RateSource.API

    def test_keys_are_normalized(self, cache):
        cache.put("eur", "usd", 1.08)
        assert cache.get("EUR", "USD") is not None

    def test_entry_expires_after_ttl(self, cache, clock):
        cache.put("EUR", "USD", 1.08)
        clock.advance(899)
        assert cache.get_fresh("EUR", "USD") is not None
        clock.advance(1)
        assert cache.get_fresh("EUR", "USD") is None

    def test_expired_entry_is_kept_as_stale(self, cache, clock):
        cache.put("EUR", "USD", 1.08)
        clock.advance(3600)
        stale = cache.get("EUR", "USD")
        assert stale is not None
        assert stale.rate.rate == 1.08
        assert len(cache) == 1

    def test_reverse_pair_is_not_derived(self, cache):
        cache.put("EUR", "USD", 1.08)
        assert cache.get("USD", "EUR") is None

    def test_put_supersedes_previous_entry(self, cache, clock):
        cache.put("EUR", "USD", 1.08)
        clock.advance(10)
        cache.put("EUR", "USD", 1.09)
        entry = cache.get("EUR", "USD")
        assert entry.rate.rate == 1.09
        assert entry.rate.timestamp == clock.now
        assert len(cache) == 1

    def test_invalidate_all(self, cache):
        cache.put("EUR", "USD", 1.08)
        cache.put("GBP", "USD", 1.27)
        cache.invalidate_all()
        assert len(cache) == 0
        assert cache.get("EUR", "USD") is None

    def test_status(self, cache, clock):
        cache.put("EUR", "USD", 1.08)
        status = cache.status()
        assert status.entries == 1
        assert status.last_updated == clock.now
        assert (status.next_update - status.last_updated).total_seconds() == 900


class TestHistoricalRateStore:
    """Date-keyed store."""

    def test_put_and_get(self):
        store = HistoricalRateStore()
        rate = HistoricalExchangeRate(
            from_currency="EUR",
            to_currency="USD",
            rate=1.1,
            source=RateSource.HISTORICAL_API,
            date=date(2026, 1, 2),
        )
        store.put(rate)
        assert store.get("EUR", "USD", date(2026, 1, 2)) == rate
        assert store.get("EUR", "USD", date(2026, 1, 3)) is None
        assert len(store) == 1

        store.clear()
        assert len(store) == 0

    def test_evicts_least_recently_used(self):
        store = HistoricalRateStore(max_entries=2)
        days = [date(2026, 1, d) for d in (2, 3, 4)]
        for day in days:
            store.put(HistoricalExchangeRate(
                from_currency="EUR", to_currency="USD", rate=1.1,
                source=RateSource.HISTORICAL_API, date=day,
            ))

        assert len(store) == 2
        assert store.get("EUR", "USD", days[0]) is None
        assert store.get("EUR", "USD", days[2]) is not None

    def test_get_refreshes_recency(self):
        store = HistoricalRateStore(max_entries=2)

        def put(day):
            store.put(HistoricalExchangeRate(
                from_currency="EUR", to_currency="USD", rate=1.1,
                source=RateSource.HISTORICAL_API, date=day,
            ))

        put(date(2026, 1, 2))
        put(date(2026, 1, 3))
        assert store.get("EUR", "USD", date(2026, 1, 2)) is not None
        put(date(2026, 1, 4))

        assert store.get("EUR", "USD", date(2026, 1, 3)) is None
        assert store.get("EUR", "USD", date(2026, 1, 2)) is not None
        assert len(store) == 2
