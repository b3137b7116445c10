"""
Currency Service Tests - facade wiring
"""

from datetime import date

import pytest

from fxrisk.models import ExposureItem, RateSource
from fxrisk.service import CurrencyService

from conftest import FakeProvider


@pytest.fixture
def provider():
    return FakeProvider(rates={("EUR", "USD"): 1.08, ("GBP", "USD"): 1.25})


@pytest.fixture
def service(settings, provider, cache):
    return CurrencyService(settings, providers=[provider], cache=cache)


class TestCurrencyService:
    """Each instance owns its own cache and providers."""

    @pytest.mark.asyncio
    async def test_get_rate_and_cache(self, service, provider):
        first = await service.get_rate("EUR", "USD")
        second = await service.get_rate("EUR", "USD")

        assert first.source == RateSource.API
        assert second.source == RateSource.CACHE
        assert provider.live_calls == 1
        assert service.get_cache_status().entries == 1

    @pytest.mark.asyncio
    async def test_refresh_rates(self, service, provider):
        await service.get_rate("EUR", "USD")

        status = service.refresh_rates()
        again = await service.get_rate("EUR", "USD")

        assert status.entries == 0
        assert again.source == RateSource.API
        assert provider.live_calls == 2

    @pytest.mark.asyncio
    async def test_instances_do_not_share_cache(self, settings, provider):
        one = CurrencyService(settings, providers=[provider])
        two = CurrencyService(settings, providers=[provider])

        await one.get_rate("EUR", "USD")

        assert one.get_cache_status().entries == 1
        assert two.get_cache_status().entries == 0

    @pytest.mark.asyncio
    async def test_get_rates(self, service):
        rates = await service.get_rates([("GBP", "USD"), ("EUR", "USD")])
        assert [r.rate for r in rates] == [1.25, 1.08]

    @pytest.mark.asyncio
    async def test_convert(self, service):
        result = await service.convert(100, "GBP", "USD")
        assert result.converted_amount == pytest.approx(125.0)

    @pytest.mark.asyncio
    async def test_convert_batch(self, service):
        results = await service.convert_batch([(1, "EUR", "USD"), (2, "USD", "USD")])
        assert [r.converted_amount for r in results] == [pytest.approx(1.08), 2]

    @pytest.mark.asyncio
    async def test_historical_rates(self, service):
        rates = await service.get_historical_rates(
            "EUR", "USD", date(2026, 1, 1), date(2026, 1, 7)
        )
        assert len(rates) == 7
        assert all(r.source == RateSource.HISTORICAL_API for r in rates)

    @pytest.mark.asyncio
    async def test_analysis_uses_settings_reporting_currency(self, service):
        analysis = await service.analyze_currency_risk([
            ExposureItem(currency="EUR", value=100.0),
            ExposureItem(currency="USD", value=100.0),
        ])
        assert analysis.reporting_currency == "USD"
        assert len(analysis.total_exposure) == 2

    @pytest.mark.asyncio
    async def test_calculate_exposure(self, service):
        exposures = await service.calculate_exposure(
            [ExposureItem(currency="GBP", value=10.0)], "USD"
        )
        assert exposures[0].percentage == pytest.approx(100.0)

    @pytest.mark.asyncio
    async def test_health_check(self, service):
        assert await service.health_check() == {"fake": True}

    def test_mock_mode_without_providers(self, settings):
        service = CurrencyService(settings, providers=[])
        assert service.fetcher.mock_mode
        assert service.historical.mock_mode

    def test_currency_information(self, service):
        assert service.is_valid_currency_code("eur")
        assert service.get_currency_info("GBP").symbol == "£"
        assert len(service.get_supported_currencies()) >= 90
        assert service.detect_currency_from_location("FR") == "EUR"
        assert service.detect_currency_from_market("7203.T") == "JPY"

    def test_format(self, service):
        assert service.format(1234.56, "USD", "en-US") == "$1,234.56"
