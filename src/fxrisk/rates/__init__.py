"""
FXRISK Rate Resolution

Live rates through an ordered tier pipeline, conversion on top of it,
and per-day historical series.
"""

from fxrisk.rates.converter import Converter
from fxrisk.rates.fetcher import RateFetcher, build_default_tiers
from fxrisk.rates.historical import HistoricalRateService
from fxrisk.rates.tiers import RateTier

__all__ = [
    "Converter",
    "RateFetcher",
    "build_default_tiers",
    "HistoricalRateService",
    "RateTier",
]
