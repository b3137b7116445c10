"""
FXRISK Configuration Management

Provider credentials and tuning knobs are read from the environment
(or a local .env file). Risk thresholds are policy, not contract.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # === External Provider Configuration ===
    alphavantage_api_key: str = Field(
        default="",
        description="Alpha Vantage API key (primary provider)"
    )
    alphavantage_base_url: str = Field(
        default="https://www.alphavantage.co/query",
        description="Alpha Vantage query endpoint"
    )
    frankfurter_enabled: bool = Field(
        default=True,
        description="Use Frankfurter (ECB) as secondary provider"
    )
    frankfurter_base_url: str = Field(
        default="https://api.frankfurter.dev",
        description="Frankfurter API base URL"
    )
    use_mock_rates: bool = Field(
        default=False,
        description="Skip providers and serve synthetic rates tagged 'mock'"
    )

    # === Rate Cache ===
    rate_cache_ttl_seconds: int = Field(
        default=15 * 60,
        gt=0,
        description="Freshness window for cached live rates"
    )

    # === Fetch / Retry ===
    fetch_retry_attempts: int = Field(default=3, ge=1)
    fetch_retry_delay_seconds: float = Field(default=1.0, ge=0)
    fetch_retry_max_delay_seconds: float = Field(default=10.0, ge=0)
    fetch_retry_backoff: Literal["fixed", "exponential"] = Field(default="exponential")
    fetch_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Upper bound for a single provider attempt"
    )
    historical_max_days: int = Field(
        default=366,
        ge=1,
        description="Largest date range accepted by the HTTP API"
    )
    historical_store_max_entries: int = Field(
        default=20_000,
        ge=1,
        description="Historical closes kept in memory (least recently used evicted first)"
    )

    # === Exposure & Risk Policy ===
    reporting_currency: str = Field(default="USD")
    risk_high_concentration_pct: float = Field(
        default=70.0,
        description="A single currency at or above this share is always high risk"
    )
    risk_concentration_major_pct: float = Field(default=50.0)
    risk_concentration_minor_pct: float = Field(default=30.0)
    risk_low_cutoff: float = Field(default=20.0)
    risk_medium_cutoff: float = Field(default=40.0)
    risk_min_currencies: int = Field(default=3, ge=1)
    risk_flag_pct: float = Field(
        default=20.0,
        description="High-risk currencies above this share get a hedging recommendation"
    )
    risk_score_concentration_weight: float = Field(default=0.7, ge=0)
    risk_score_foreign_weight: float = Field(default=0.3, ge=0)
    risk_score_foreign_penalty: float = Field(default=10.0, ge=0)
    hedge_threshold_pct: float = Field(default=25.0)
    hedge_ratio: float = Field(default=0.5, ge=0, le=1)

    # === API Configuration ===
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)

    # === Logging ===
    log_level: str = Field(default="INFO")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
