"""
FXRISK API Module
"""

from fxrisk.api.routes import get_currency_service, router
from fxrisk.api.schemas import (
    ErrorResponse,
    ExposureRequest,
    HealthResponse,
)

__all__ = [
    "router",
    "get_currency_service",
    "ErrorResponse",
    "ExposureRequest",
    "HealthResponse",
]
