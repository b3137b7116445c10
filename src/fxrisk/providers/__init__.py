"""
FXRISK Rate Providers

Multi-provider fallback hierarchy: Alpha Vantage -> Frankfurter,
with deterministic synthetic rates as the last resort.
"""

from fxrisk.providers.base import BaseRateProvider, RateProviderError
from fxrisk.providers.alphavantage import AlphaVantageClient
from fxrisk.providers.frankfurter import FrankfurterClient
from fxrisk.providers.manager import ProviderManager
from fxrisk.providers.synthetic import synthetic_historical_rate, synthetic_rate

__all__ = [
    "BaseRateProvider",
    "RateProviderError",
    "AlphaVantageClient",
    "FrankfurterClient",
    "ProviderManager",
    "synthetic_rate",
    "synthetic_historical_rate",
]
