"""
FXRISK API Tests
"""

import pytest
from fastapi.testclient import TestClient

from fxrisk.main import create_app
from fxrisk.service import CurrencyService

from conftest import FakeProvider


@pytest.fixture
def client(settings, cache):
    provider = FakeProvider(rates={("EUR", "USD"): 1.08, ("GBP", "USD"): 1.25})
    service = CurrencyService(settings, providers=[provider], cache=cache)
    return TestClient(create_app(service))


def error_code(response) -> str:
    return response.json()["detail"]["error"]["code"]


class TestCurrencyEndpoints:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["name"] == "FXRISK"

    def test_list_currencies(self, client):
        response = client.get("/api/v1/currencies")
        assert response.status_code == 200
        assert len(response.json()) >= 90

    def test_currency_info(self, client):
        response = client.get("/api/v1/currencies/jpy")
        assert response.status_code == 200
        assert response.json()["decimal_places"] == 0

    def test_currency_info_unknown(self, client):
        response = client.get("/api/v1/currencies/XYZ")
        assert response.status_code == 404
        assert error_code(response) == "FX_UNSUPPORTED_CURRENCY"

    def test_detect_by_symbol(self, client):
        response = client.get("/api/v1/currencies/detect", params={"symbol": "VOD.L"})
        assert response.status_code == 200
        assert response.json()["currency"] == "GBP"

    def test_detect_by_country(self, client):
        response = client.get("/api/v1/currencies/detect", params={"country": "DE"})
        assert response.json()["currency"] == "EUR"

    def test_detect_without_parameters(self, client):
        response = client.get("/api/v1/currencies/detect")
        assert response.status_code == 400
        assert error_code(response) == "FX_MISSING_PARAMETER"


class TestConversionEndpoints:

    def test_convert(self, client):
        response = client.get("/api/v1/convert", params={"amount": 100, "from": "EUR", "to": "USD"})

        assert response.status_code == 200
        data = response.json()
        assert data["converted_amount"] == pytest.approx(108.0)
        assert data["source"] == "api"
        assert data["target_currency"] == "USD"

    def test_convert_unsupported(self, client):
        response = client.get("/api/v1/convert", params={"amount": 1, "from": "EUR", "to": "XYZ"})

        assert response.status_code == 400
        assert error_code(response) == "FX_UNSUPPORTED_CURRENCY"
        assert response.json()["detail"]["error"]["details"] == {"currency": "XYZ"}

    @pytest.mark.parametrize("amount", ["nan", "inf", "-inf"])
    def test_convert_non_finite_amount(self, client, amount):
        response = client.get("/api/v1/convert", params={"amount": amount, "from": "EUR", "to": "USD"})
        assert response.status_code == 422

    def test_convert_batch_non_finite_amount(self, client):
        response = client.post("/api/v1/convert/batch", json={"conversions": [
            {"amount": "NaN", "from": "EUR", "to": "USD"},
        ]})
        assert response.status_code == 422

    def test_convert_batch(self, client):
        response = client.post("/api/v1/convert/batch", json={"conversions": [
            {"amount": 10, "from": "GBP", "to": "USD"},
            {"amount": 10, "from": "USD", "to": "USD"},
        ]})

        assert response.status_code == 200
        assert [r["converted_amount"] for r in response.json()] == [pytest.approx(12.5), 10]

    def test_convert_batch_empty(self, client):
        response = client.post("/api/v1/convert/batch", json={"conversions": []})
        assert response.status_code == 422


class TestRateEndpoints:

    def test_get_rate(self, client):
        response = client.get("/api/v1/rates", params={"from": "EUR", "to": "USD"})

        assert response.status_code == 200
        data = response.json()
        assert data["from"] == "EUR"
        assert data["to"] == "USD"
        assert data["rate"] == 1.08

    def test_historical(self, client):
        response = client.get("/api/v1/rates/historical", params={
            "from": "EUR", "to": "USD", "start": "2026-01-01", "end": "2026-01-03",
        })

        assert response.status_code == 200
        assert [r["date"] for r in response.json()] == ["2026-01-01", "2026-01-02", "2026-01-03"]

    def test_historical_reversed_range(self, client):
        response = client.get("/api/v1/rates/historical", params={
            "from": "EUR", "to": "USD", "start": "2026-01-03", "end": "2026-01-01",
        })
        assert response.json() == []

    def test_historical_range_too_large(self, client):
        response = client.get("/api/v1/rates/historical", params={
            "from": "EUR", "to": "USD", "start": "2020-01-01", "end": "2026-01-01",
        })
        assert response.status_code == 400
        assert error_code(response) == "FX_RANGE_TOO_LARGE"

    def test_historical_invalid_date(self, client):
        response = client.get("/api/v1/rates/historical", params={
            "from": "EUR", "to": "USD", "start": "yesterday", "end": "2026-01-01",
        })
        assert response.status_code == 422

    def test_refresh_and_cache_status(self, client):
        client.get("/api/v1/rates", params={"from": "EUR", "to": "USD"})
        assert client.get("/api/v1/rates/cache-status").json()["entries"] == 1

        response = client.post("/api/v1/rates/refresh")

        assert response.status_code == 200
        assert response.json()["entries"] == 0


class TestAnalysisEndpoints:

    def test_exposure(self, client):
        response = client.post("/api/v1/exposure", json={
            "items": [
                {"currency": "USD", "value": 180.0, "quantity": 10},
                {"currency": "EUR", "value": 3250.0},
            ]
        })

        assert response.status_code == 200
        assert [e["currency"] for e in response.json()] == ["EUR", "USD"]

    def test_risk_analysis(self, client):
        response = client.post("/api/v1/risk-analysis", json={
            "items": [{"currency": "GBP", "value": 1000.0}],
            "reporting_currency": "USD",
        })

        assert response.status_code == 200
        data = response.json()
        assert data["reporting_currency"] == "USD"
        assert data["risk_score"] >= 70
        assert data["total_exposure"][0]["risk_level"] == "high"

    def test_risk_analysis_unsupported(self, client):
        response = client.post("/api/v1/risk-analysis", json={
            "items": [{"currency": "ABC", "value": 1.0}],
        })
        assert response.status_code == 400


class TestMiscEndpoints:

    def test_format(self, client):
        response = client.get("/api/v1/format", params={
            "amount": 1234.56, "currency": "USD", "locale": "en-US",
        })
        assert response.json()["formatted"] == "$1,234.56"

    def test_format_non_finite_amount(self, client):
        response = client.get("/api/v1/format", params={"amount": "nan", "currency": "USD"})
        assert response.status_code == 422

    def test_health(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["providers"] == {"fake": True}
        assert data["mock_mode"] is False
