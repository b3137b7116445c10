"""
FXRISK API Request/Response Schemas
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from fxrisk.models import ConversionRequest, ExposureItem


class BatchConversionRequest(BaseModel):
    conversions: list[ConversionRequest] = Field(
        min_length=1,
        description="Conversions to perform, answered in the same order"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "conversions": [
                    {"amount": 100, "from": "USD", "to": "EUR"},
                    {"amount": 50, "from": "GBP", "to": "USD"},
                ]
            }
        }
    }


class ExposureRequest(BaseModel):
    items: list[ExposureItem] = Field(
        default_factory=list,
        description="Currency-tagged values (investments, income, expenses, loans)"
    )
    reporting_currency: str | None = Field(
        default=None,
        description="Currency all values are normalized into (defaults to settings)"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "items": [
                    {"currency": "USD", "value": 180.0, "quantity": 10, "category": "investment"},
                    {"currency": "EUR", "value": 3250.0, "category": "investment"},
                ],
                "reporting_currency": "USD",
            }
        }
    }


class DetectResponse(BaseModel):
    currency: str
    country: str | None = None
    symbol: str | None = None


class FormatResponse(BaseModel):
    formatted: str
    amount: float
    currency: str
    locale: str | None = None


class HealthResponse(BaseModel):
    """Health check response for /api/v1/health"""
    status: str = Field(description="Service health status")
    version: str = Field(description="API version")
    mock_mode: bool = Field(description="True when serving synthetic rates only")
    providers: dict[str, bool] = Field(
        default_factory=dict,
        description="Reachability per configured provider"
    )
    cached_rates: int = Field(default=0, description="Entries in the live-rate cache")


class ErrorDetail(BaseModel):
    """Error detail information."""
    code: str = Field(description="Error code")
    message: str = Field(description="Human-readable error message")
    details: dict[str, Any] | None = Field(
        default=None,
        description="Additional error details"
    )
    timestamp: datetime = Field(description="Error timestamp")


class ErrorResponse(BaseModel):
    error: ErrorDetail

    model_config = {
        "json_schema_extra": {
            "example": {
                "error": {
                    "code": "FX_UNSUPPORTED_CURRENCY",
                    "message": "Currency 'XYZ' not supported",
                    "details": {"currency": "XYZ"},
                    "timestamp": "2026-01-15T15:30:00Z"
                }
            }
        }
    }
