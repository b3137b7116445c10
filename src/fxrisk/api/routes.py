"""
FXRISK API Routes

All endpoints under /api/v1/. Only unsupported currency codes and
invalid ranges are reported as errors; degraded rates are signalled by
their "source" field.
"""

import logging
from datetime import date, datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from fxrisk import __version__
from fxrisk.api.schemas import (
    BatchConversionRequest,
    DetectResponse,
    ErrorResponse,
    ExposureRequest,
    FormatResponse,
    HealthResponse,
)
from fxrisk.models import (
    CacheStatus,
    Currency,
    CurrencyAmount,
    CurrencyExposure,
    CurrencyRiskAnalysis,
    ExchangeRate,
    HistoricalExchangeRate,
)
from fxrisk.registry import UnsupportedCurrencyError
from fxrisk.service import CurrencyService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["FX"])

UNSUPPORTED = {400: {"model": ErrorResponse, "description": "Unsupported currency code"}}


def get_currency_service(request: Request) -> CurrencyService:
    return request.app.state.currency_service


def _error(
    status_code: int,
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={
            "error": {
                "code": code,
                "message": message,
                "details": details,
                "timestamp": datetime.now(timezone.utc).isoformat()
            }
        }
    )


def _unsupported(e: UnsupportedCurrencyError, status_code: int = status.HTTP_400_BAD_REQUEST) -> HTTPException:
    return _error(status_code, "FX_UNSUPPORTED_CURRENCY", str(e), {"currency": e.code})


# === Currency information ===

@router.get(
    "/currencies",
    response_model=list[Currency],
    summary="List supported currencies",
)
async def list_currencies(
    service: CurrencyService = Depends(get_currency_service),
) -> list[Currency]:
    return service.get_supported_currencies()


@router.get(
    "/currencies/detect",
    response_model=DetectResponse,
    summary="Detect currency from a country code or ticker symbol",
    responses={400: {"model": ErrorResponse, "description": "Missing parameter"}},
)
async def detect_currency(
    country: str | None = Query(default=None, min_length=2, max_length=2),
    symbol: str | None = Query(default=None, min_length=1),
    service: CurrencyService = Depends(get_currency_service),
) -> DetectResponse:
    if country:
        currency = service.detect_currency_from_location(country)
    elif symbol:
        currency = service.detect_currency_from_market(symbol)
    else:
        raise _error(
            status.HTTP_400_BAD_REQUEST,
            "FX_MISSING_PARAMETER",
            "Provide either 'country' or 'symbol'",
        )
    return DetectResponse(currency=currency, country=country, symbol=symbol)


@router.get(
    "/currencies/{code}",
    response_model=Currency,
    summary="Currency metadata",
    responses={404: {"model": ErrorResponse, "description": "Unsupported currency code"}},
)
async def currency_info(
    code: str,
    service: CurrencyService = Depends(get_currency_service),
) -> Currency:
    try:
        return service.get_currency_info(code)
    except UnsupportedCurrencyError as e:
        raise _unsupported(e, status.HTTP_404_NOT_FOUND)


# === Conversion ===

@router.get(
    "/convert",
    response_model=CurrencyAmount,
    summary="Convert an amount between currencies",
    responses=UNSUPPORTED,
)
async def convert(
    amount: float = Query(allow_inf_nan=False),
    from_currency: str = Query(alias="from"),
    to_currency: str = Query(alias="to"),
    service: CurrencyService = Depends(get_currency_service),
) -> CurrencyAmount:
    try:
        return await service.convert(amount, from_currency, to_currency)
    except UnsupportedCurrencyError as e:
        raise _unsupported(e)


@router.post(
    "/convert/batch",
    response_model=list[CurrencyAmount],
    summary="Convert several amounts, preserving order",
    responses=UNSUPPORTED,
)
async def convert_batch(
    body: BatchConversionRequest,
    service: CurrencyService = Depends(get_currency_service),
) -> list[CurrencyAmount]:
    try:
        return await service.convert_batch(body.conversions)
    except UnsupportedCurrencyError as e:
        raise _unsupported(e)


# === Exchange rates ===

@router.get(
    "/rates",
    response_model=ExchangeRate,
    summary="Current exchange rate for a pair",
    responses=UNSUPPORTED,
)
async def get_rate(
    from_currency: str = Query(alias="from"),
    to_currency: str = Query(alias="to"),
    service: CurrencyService = Depends(get_currency_service),
) -> ExchangeRate:
    try:
        return await service.get_rate(from_currency, to_currency)
    except UnsupportedCurrencyError as e:
        raise _unsupported(e)


@router.get(
    "/rates/historical",
    response_model=list[HistoricalExchangeRate],
    summary="Daily rates over a date range (inclusive)",
    responses=UNSUPPORTED,
)
async def get_historical_rates(
    start: date,
    end: date,
    from_currency: str = Query(alias="from"),
    to_currency: str = Query(alias="to"),
    service: CurrencyService = Depends(get_currency_service),
) -> list[HistoricalExchangeRate]:
    days = (end - start).days + 1
    max_days = service.settings.historical_max_days
    if days > max_days:
        raise _error(
            status.HTTP_400_BAD_REQUEST,
            "FX_RANGE_TOO_LARGE",
            f"Requested {days} days, maximum is {max_days}",
            {"start": start.isoformat(), "end": end.isoformat(), "max_days": max_days},
        )
    try:
        return await service.get_historical_rates(from_currency, to_currency, start, end)
    except UnsupportedCurrencyError as e:
        raise _unsupported(e)


@router.post(
    "/rates/refresh",
    response_model=CacheStatus,
    summary="Clear cached rates",
)
async def refresh_rates(
    service: CurrencyService = Depends(get_currency_service),
) -> CacheStatus:
    return service.refresh_rates()


@router.get(
    "/rates/cache-status",
    response_model=CacheStatus,
    summary="Cache freshness information",
)
async def cache_status(
    service: CurrencyService = Depends(get_currency_service),
) -> CacheStatus:
    return service.get_cache_status()


# === Exposure & risk ===

@router.post(
    "/exposure",
    response_model=list[CurrencyExposure],
    summary="Per-currency exposure in the reporting currency",
    responses=UNSUPPORTED,
)
async def calculate_exposure(
    body: ExposureRequest,
    service: CurrencyService = Depends(get_currency_service),
) -> list[CurrencyExposure]:
    try:
        return await service.calculate_exposure(body.items, body.reporting_currency)
    except UnsupportedCurrencyError as e:
        raise _unsupported(e)


@router.post(
    "/risk-analysis",
    response_model=CurrencyRiskAnalysis,
    summary="Currency risk score, recommendations, hedging and volatility",
    responses=UNSUPPORTED,
)
async def analyze_currency_risk(
    body: ExposureRequest,
    service: CurrencyService = Depends(get_currency_service),
) -> CurrencyRiskAnalysis:
    try:
        return await service.analyze_currency_risk(body.items, body.reporting_currency)
    except UnsupportedCurrencyError as e:
        raise _unsupported(e)


# === Formatting ===

@router.get(
    "/format",
    response_model=FormatResponse,
    summary="Locale-aware currency formatting",
)
async def format_amount(
    amount: float = Query(allow_inf_nan=False),
    currency: str = Query(),
    locale: str | None = None,
    service: CurrencyService = Depends(get_currency_service),
) -> FormatResponse:
    return FormatResponse(
        formatted=service.format(amount, currency, locale),
        amount=amount,
        currency=currency,
        locale=locale,
    )


# === Health ===

@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Provider reachability and cache size. Always 200: rates degrade, they do not fail.",
)
async def health_check(
    service: CurrencyService = Depends(get_currency_service),
) -> HealthResponse:
    providers = await service.health_check()
    mock_mode = service.fetcher.mock_mode
    degraded = not mock_mode and not any(providers.values())

    if degraded:
        logger.warning("No rate provider reachable - serving cached or fallback rates")

    return HealthResponse(
        status="degraded" if degraded else "healthy",
        version=__version__,
        mock_mode=mock_mode,
        providers=providers,
        cached_rates=service.get_cache_status().entries,
    )
