"""
FXRISK Data Models

All entities are value objects produced and consumed within one call;
the only long-lived state is the rate cache, which stores CacheEntry values.
"""

from datetime import date, datetime, timezone
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# === Enums ===

class RateSource(str, Enum):
    """Tier of the fallback chain that produced a rate."""
    INTERNAL = "internal"
    CACHE = "cache"
    API = "api"
    STALE_CACHE = "stale-cache"
    FALLBACK = "fallback"
    MOCK = "mock"
    HISTORICAL_API = "historical-api"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class VolatilityTrend(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


ExposureCategory = Literal["investment", "income", "expense", "loan", "other"]


# === Currency Metadata ===

class Currency(BaseModel):
    """Static metadata for one supported currency."""
    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=3, max_length=3)
    name: str
    symbol: str
    decimal_places: int = Field(ge=0, le=4)
    countries: tuple[str, ...] = Field(
        default=(),
        description="ISO 3166 alpha-2 codes of countries using this currency"
    )
    locale: str = Field(
        default="en_US",
        description="Default display locale"
    )


# === Exchange Rates ===

class ExchangeRate(BaseModel):
    """
    One conversion rate with provenance.

    Serialized as {"from": ..., "to": ...} to match the public API.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    from_currency: str = Field(alias="from")
    to_currency: str = Field(alias="to")
    rate: float = Field(gt=0, allow_inf_nan=False)
    timestamp: datetime = Field(default_factory=utcnow)
    source: RateSource


class HistoricalExchangeRate(ExchangeRate):
    """Exchange rate for a single calendar day."""
    date: date


class CacheEntry(BaseModel):
    """Cached rate plus the instant it stops being fresh."""
    model_config = ConfigDict(frozen=True)

    rate: ExchangeRate
    expires_at: datetime

    def is_fresh(self, now: datetime) -> bool:
        return now < self.expires_at


class CacheStatus(BaseModel):
    last_updated: datetime
    next_update: datetime
    entries: int = 0


# === Amounts ===

class CurrencyAmount(BaseModel):
    """
    An amount in a currency, optionally with the result of converting it.

    If converted_amount is set, exchange_rate must be the rate that produced it.
    """
    amount: float
    currency: str
    converted_amount: float | None = None
    exchange_rate: float | None = None
    last_updated: datetime | None = None
    target_currency: str | None = None
    source: RateSource | None = None

    @model_validator(mode="after")
    def check_conversion_has_rate(self) -> "CurrencyAmount":
        if self.converted_amount is not None and self.exchange_rate is None:
            raise ValueError("converted_amount requires the exchange_rate that produced it")
        return self


class ConversionRequest(BaseModel):
    """One entry of a batch conversion."""
    model_config = ConfigDict(populate_by_name=True)

    amount: float = Field(allow_inf_nan=False)
    from_currency: str = Field(alias="from")
    to_currency: str = Field(alias="to")


# === Exposure & Risk ===

class ExposureItem(BaseModel):
    """
    A valued, currency-tagged entity supplied by a collaborator
    (investment position, income stream, expense, loan balance).
    """
    currency: str
    value: float = Field(allow_inf_nan=False)
    quantity: float = Field(default=1.0, allow_inf_nan=False)
    category: ExposureCategory = "other"
    label: str | None = None

    @property
    def current_value(self) -> float:
        return self.quantity * self.value

    @classmethod
    def from_investment(
        cls,
        quantity: float,
        purchase_price: float,
        currency: str,
        current_price: float | None = None,
        label: str | None = None,
    ) -> "ExposureItem":
        """Value a position at its current price, else at purchase price."""
        price = current_price if current_price else purchase_price
        return cls(
            currency=currency,
            value=price,
            quantity=quantity,
            category="investment",
            label=label,
        )


class CurrencyExposure(BaseModel):
    currency: str
    total_value: CurrencyAmount
    percentage: float = Field(ge=0, le=100)
    risk_level: RiskLevel


class HedgingOption(BaseModel):
    currency: str
    current_exposure: float
    recommended_hedge: float
    hedging_instruments: list[str] = Field(default_factory=list)


class CurrencyVolatility(BaseModel):
    currency: str
    volatility_30d: float
    volatility_90d: float
    volatility_1y: float
    trend: VolatilityTrend = VolatilityTrend.STABLE
    level: RiskLevel

    @field_validator("volatility_30d", "volatility_90d", "volatility_1y")
    @classmethod
    def round_pct(cls, v: float) -> float:
        return round(v, 2)


class CurrencyRiskAnalysis(BaseModel):
    reporting_currency: str
    total_exposure: list[CurrencyExposure] = Field(default_factory=list)
    risk_score: float = Field(ge=0, le=100)
    recommendations: list[str] = Field(default_factory=list)
    hedging_opportunities: list[HedgingOption] = Field(default_factory=list)
    volatility_metrics: list[CurrencyVolatility] = Field(default_factory=list)


# === Provider Stats (Operational Telemetry) ===

class ProviderStats(BaseModel):
    """One provider attempt, kept in memory for diagnostics."""
    provider_name: str
    kind: Literal["live", "historical"]
    pair: str
    success: bool
    latency_ms: int = Field(ge=0)
    error_type: str | None = None
    error_message: str | None = None
    recorded_at: datetime = Field(default_factory=utcnow)
